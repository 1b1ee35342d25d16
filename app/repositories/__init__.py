"""Repositories package - data access layer for cached market data."""

from app.repositories.base import BaseRepository
from app.repositories.common import BaseCache, DuckDBCache, TTLCache, create_cache
from app.repositories.db import connect, init_tables

__all__ = [
    # DB
    "connect",
    "init_tables",
    # Base
    "BaseRepository",
    # Common
    "BaseCache",
    "TTLCache",
    "DuckDBCache",
    "create_cache",
]
