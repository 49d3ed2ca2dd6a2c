from .exceptions import (
    GalleryError,
    ConfigError,
    NetworkFailure,
    CacheReadCorrupt,
    CacheWriteRejected,
    StorageQuotaExceeded,
)
from .logger import get_logger, set_log_level

__all__ = [
    'GalleryError',
    'ConfigError',
    'NetworkFailure',
    'CacheReadCorrupt',
    'CacheWriteRejected',
    'StorageQuotaExceeded',
    'get_logger',
    'set_log_level',
]
