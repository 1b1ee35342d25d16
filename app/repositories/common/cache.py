"""TTL cache - in-memory and DuckDB-backed market data storage.

A `get` is a hit only while `now - fetched_at < ttl`. Stale entries stay in
place and read as misses until a later `put` overwrites them. Failures are
never cached. Both operations are synchronous, so a freshness check and the
value it returns cannot be split by another task on the event loop.
"""

import json
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

import duckdb
from loguru import logger

from app.errors import CacheUnavailable
from app.models import CacheEntry
from app.repositories.base import BaseRepository
from settings import CACHE_BACKEND, CACHE_TTL

Clock = Callable[[], float]


class BaseCache(ABC):
    """Freshness logic shared by all cache backends."""

    def __init__(self, ttl: float = CACHE_TTL, clock: Clock = time.monotonic):
        if ttl <= 0:
            raise ValueError(f"TTL must be positive, got {ttl}")
        self._ttl = ttl
        self._clock = clock

    @property
    def ttl(self) -> float:
        return self._ttl

    def get(self, key: str) -> Any | None:
        """Cached value if fresh, else None (miss)."""
        entry = self._load(key)
        if entry is None:
            return None
        if not entry.is_fresh(self._clock(), self._ttl):
            logger.debug("Cache stale: {}", key)
            return None
        logger.debug("Cache hit: {}", key)
        return entry.value

    def put(self, key: str, value: Any) -> None:
        """Store value, overwriting any previous entry, stamped with the current time."""
        if value is None:
            raise ValueError("Cannot cache None")
        self._store(CacheEntry(key=key, value=value, fetched_at=self._clock()))
        logger.debug("Cache saved: {}", key)

    def entry(self, key: str) -> CacheEntry | None:
        """Raw entry including stale ones."""
        return self._load(key)

    def close(self) -> None:
        """Release backend resources; a no-op for in-process storage."""

    @abstractmethod
    def clear(self) -> None: ...

    @abstractmethod
    def _load(self, key: str) -> CacheEntry | None: ...

    @abstractmethod
    def _store(self, entry: CacheEntry) -> None: ...


class TTLCache(BaseCache):
    """Process-local cache; entries live until expiry or process end."""

    def __init__(self, ttl: float = CACHE_TTL, clock: Clock = time.monotonic):
        super().__init__(ttl, clock)
        self._entries: dict[str, CacheEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._entries.clear()
        logger.info("Cache cleared")

    def _load(self, key: str) -> CacheEntry | None:
        return self._entries.get(key)

    def _store(self, entry: CacheEntry) -> None:
        self._entries[entry.key] = entry


class DuckDBCache(BaseRepository, BaseCache):
    """Cache persisted in the `market_cache` table; survives restarts.

    Uses wall-clock time so stamps stay comparable across processes.
    """

    def __init__(
        self,
        conn: duckdb.DuckDBPyConnection | None = None,
        ttl: float = CACHE_TTL,
        clock: Clock = time.time,
    ):
        BaseRepository.__init__(self, conn)
        BaseCache.__init__(self, ttl, clock)

    def clear(self) -> None:
        try:
            self.execute("DELETE FROM market_cache")
        except duckdb.Error as e:
            raise CacheUnavailable(f"Cache clear failed: {e}") from e
        logger.info("All cache cleared")

    def _load(self, key: str) -> CacheEntry | None:
        try:
            row = self.fetchone("SELECT data, fetched_at FROM market_cache WHERE key = ?", [key])
            if row is None:
                return None
            return CacheEntry(key=key, value=json.loads(row[0]), fetched_at=float(row[1]))
        except (duckdb.Error, ValueError) as e:
            raise CacheUnavailable(f"Cache read failed for {key}: {e}") from e

    def _store(self, entry: CacheEntry) -> None:
        try:
            self.execute(
                "INSERT OR REPLACE INTO market_cache (key, data, fetched_at) VALUES (?, ?, ?)",
                [entry.key, json.dumps(entry.value), entry.fetched_at],
            )
        except (duckdb.Error, TypeError) as e:
            raise CacheUnavailable(f"Cache write failed for {entry.key}: {e}") from e


def create_cache(backend: str = CACHE_BACKEND, ttl: float = CACHE_TTL) -> BaseCache:
    """Build the configured cache backend."""
    if backend == "memory":
        return TTLCache(ttl=ttl)
    if backend == "duckdb":
        return DuckDBCache(ttl=ttl)
    raise ValueError(f"Unknown cache backend: {backend}")
