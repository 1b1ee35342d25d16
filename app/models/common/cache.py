"""Market data cache table and entry."""

from dataclasses import dataclass
from typing import Any

CACHE_DDL = """
CREATE TABLE IF NOT EXISTS market_cache (
    key VARCHAR PRIMARY KEY,
    data JSON NOT NULL,
    fetched_at DOUBLE NOT NULL
)
"""


@dataclass(frozen=True)
class CacheEntry:
    """Cached value stamped with the clock reading at `put` time."""

    key: str
    value: Any
    fetched_at: float

    def is_fresh(self, now: float, ttl: float) -> bool:
        return now - self.fetched_at < ttl
