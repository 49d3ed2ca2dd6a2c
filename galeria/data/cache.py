import json
from typing import Any, Optional, TypeVar

from ..utils.exceptions import CacheReadCorrupt, CacheWriteRejected
from ..utils.logger import get_logger
from .session_store import SessionStore, StreamlitSessionStore

logger = get_logger(__name__)

T = TypeVar("T")


class SessionCache:
    """
    Cache write-through com serialização JSON sobre um SessionStore.

    Sem store (fora de uma sessão do Streamlit) o cache fica desabilitado:
    toda leitura devolve o fallback e toda escrita é ignorada.
    """

    def __init__(self, store: Optional[SessionStore] = None):
        self._store = store

    @classmethod
    def for_current_session(cls, namespace: str = "session_cache",
                            quota_bytes: Optional[int] = None) -> "SessionCache":
        if not StreamlitSessionStore.is_available():
            logger.info("Sem sessão do Streamlit: cache de sessão desabilitado")
            return cls(None)
        return cls(StreamlitSessionStore(namespace=namespace, quota_bytes=quota_bytes))

    @property
    def available(self) -> bool:
        return self._store is not None

    def get(self, key: str, fallback: T) -> Any:
        if self._store is None:
            return fallback

        stored = self._store.get(key)
        if not stored:
            logger.debug(f"Cache miss: {key}")
            return fallback

        try:
            value = json.loads(stored)
        except ValueError as e:
            raise CacheReadCorrupt(f"Valor corrompido no cache para '{key}': {e}", key=key) from e

        logger.debug(f"Cache hit: {key}")
        return value

    def set(self, key: str, value: Any) -> None:
        if self._store is None:
            return

        try:
            serialized = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise CacheWriteRejected(f"Valor não serializável para '{key}': {e}", key=key) from e

        self._store.set(key, serialized)

    def remove(self, key: str) -> None:
        if self._store is not None:
            self._store.delete(key)

    def clear(self) -> None:
        if self._store is not None:
            self._store.clear()
