"""
Exceções da aplicação.

Todas herdam de GalleryError para que a camada de UI possa tratá-las de
forma uniforme.
"""

from typing import Any, Dict, Optional


class GalleryError(Exception):
    """Exceção base da galeria."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "UNKNOWN_ERROR"
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }


class ConfigError(GalleryError):
    """Configuração ausente ou inválida."""
    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs) -> None:
        super().__init__(message, "CONFIG_ERROR", {"config_key": config_key, **kwargs})


class NetworkFailure(GalleryError):
    """Falha de transporte, status HTTP de erro ou resposta ilegível."""
    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None, **kwargs) -> None:
        super().__init__(message, "NETWORK_FAILURE", {"url": url, "status_code": status_code, **kwargs})
        self.url = url
        self.status_code = status_code


class CacheReadCorrupt(GalleryError):
    """O valor guardado no cache não pôde ser desserializado."""
    def __init__(self, message: str, key: Optional[str] = None, **kwargs) -> None:
        super().__init__(message, "CACHE_READ_CORRUPT", {"key": key, **kwargs})
        self.key = key


class CacheWriteRejected(GalleryError):
    """O cache recusou a escrita (valor não serializável ou armazenamento cheio)."""
    def __init__(self, message: str, key: Optional[str] = None, error_code: str = "CACHE_WRITE_REJECTED", **kwargs) -> None:
        super().__init__(message, error_code, {"key": key, **kwargs})
        self.key = key


class StorageQuotaExceeded(CacheWriteRejected):
    """A escrita ultrapassaria a cota do armazenamento da sessão."""
    def __init__(self, message: str, key: Optional[str] = None, quota_bytes: Optional[int] = None, **kwargs) -> None:
        super().__init__(message, key, "STORAGE_QUOTA_EXCEEDED", quota_bytes=quota_bytes, **kwargs)
        self.quota_bytes = quota_bytes
