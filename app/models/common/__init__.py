"""Common models - shared tables."""

from app.models.common.cache import CACHE_DDL, CacheEntry

__all__ = [
    "CACHE_DDL",
    "CacheEntry",
]
