"""Market data services."""

from app.services.market.reader import MarketDataReader, cache_key, to_view

__all__ = [
    "MarketDataReader",
    "cache_key",
    "to_view",
]
