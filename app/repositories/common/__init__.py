"""Common repositories - caches shared across domains."""

from app.repositories.common.cache import BaseCache, DuckDBCache, TTLCache, create_cache

__all__ = [
    "BaseCache",
    "TTLCache",
    "DuckDBCache",
    "create_cache",
]
