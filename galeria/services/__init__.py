from .gallery import (
    GalleryController,
    STUDENTS_CACHE_KEY,
    DEFAULT_PAGE_SIZE,
    PAGE_SIZE_OPTIONS,
    evaluation_cache_key,
)

__all__ = [
    'GalleryController',
    'STUDENTS_CACHE_KEY',
    'DEFAULT_PAGE_SIZE',
    'PAGE_SIZE_OPTIONS',
    'evaluation_cache_key',
]
