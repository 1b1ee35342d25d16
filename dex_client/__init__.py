"""DexScreener market data client package."""

from dex_client.base import BaseClient
from dex_client.market import MarketClient

__all__ = [
    "BaseClient",
    "MarketClient",
]
