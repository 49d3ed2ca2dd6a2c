"""
Armazenamento bruto (chave -> string) com escopo de sessão.

StreamlitSessionStore guarda as entradas dentro de st.session_state, que
vive enquanto a aba do navegador mantiver a sessão aberta e não é
compartilhado entre abas. InMemorySessionStore tem o mesmo contrato e é
usado em testes e scripts.
"""

from typing import Dict, MutableMapping, Optional, Protocol

import streamlit as st
from streamlit import runtime

from ..utils.exceptions import StorageQuotaExceeded


class SessionStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...

    def clear(self) -> None: ...


def _entry_size(key: str, value: str) -> int:
    return len(key.encode("utf-8")) + len(value.encode("utf-8"))


class _MappingSessionStore:
    def __init__(self, quota_bytes: Optional[int] = None):
        if quota_bytes is not None and quota_bytes < 0:
            raise ValueError("quota_bytes não pode ser negativo")
        self.quota_bytes = quota_bytes

    def _entries(self) -> MutableMapping[str, str]:
        raise NotImplementedError

    def get(self, key: str) -> Optional[str]:
        return self._entries().get(key)

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"SessionStore só aceita strings, recebeu {type(value).__name__}")

        entries = self._entries()
        if self.quota_bytes is not None:
            previous = entries.get(key)
            freed = _entry_size(key, previous) if previous is not None else 0
            needed = self.used_bytes() - freed + _entry_size(key, value)
            if needed > self.quota_bytes:
                raise StorageQuotaExceeded(
                    f"Cota de {self.quota_bytes} bytes excedida ao gravar '{key}'",
                    key=key,
                    quota_bytes=self.quota_bytes
                )
        entries[key] = value

    def delete(self, key: str) -> None:
        self._entries().pop(key, None)

    def clear(self) -> None:
        self._entries().clear()

    def used_bytes(self) -> int:
        return sum(_entry_size(k, v) for k, v in self._entries().items())

    def __contains__(self, key: object) -> bool:
        return key in self._entries()

    def __len__(self) -> int:
        return len(self._entries())


class InMemorySessionStore(_MappingSessionStore):
    def __init__(self, quota_bytes: Optional[int] = None, initial: Optional[Dict[str, str]] = None):
        super().__init__(quota_bytes)
        self._data: Dict[str, str] = dict(initial or {})

    def _entries(self) -> MutableMapping[str, str]:
        return self._data


class StreamlitSessionStore(_MappingSessionStore):
    def __init__(self, namespace: str = "session_cache", quota_bytes: Optional[int] = None):
        super().__init__(quota_bytes)
        self.namespace = namespace

    @staticmethod
    def is_available() -> bool:
        """True somente quando rodando dentro do runtime do Streamlit."""
        return runtime.exists()

    def _entries(self) -> MutableMapping[str, str]:
        if self.namespace not in st.session_state:
            st.session_state[self.namespace] = {}
        return st.session_state[self.namespace]
