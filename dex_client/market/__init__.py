"""Token market data client."""

from dex_client.market.client import MarketClient
from dex_client.market.schemas import PairSchema, TokenPairsSchema

__all__ = [
    "MarketClient",
    "PairSchema",
    "TokenPairsSchema",
]
