"""Market domain models."""

from app.models.market.view import NO_DATA, MarketDataResult, MarketDataStatus, TokenMarketView

__all__ = [
    "TokenMarketView",
    "NO_DATA",
    "MarketDataStatus",
    "MarketDataResult",
]
