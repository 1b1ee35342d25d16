"""Models package - tables and entities for all domains."""

from app.models.common import CACHE_DDL, CacheEntry
from app.models.market import NO_DATA, MarketDataResult, MarketDataStatus, TokenMarketView
from app.models.voting import (
    IDLE_STATUS,
    SessionSnapshot,
    VoteAddresses,
    VoteStatus,
    VoteTransactionRequest,
)

ALL_DDL = [
    CACHE_DDL,
]

__all__ = [
    # Common
    "CacheEntry",
    "CACHE_DDL",
    # Market
    "TokenMarketView",
    "NO_DATA",
    "MarketDataStatus",
    "MarketDataResult",
    # Voting
    "VoteAddresses",
    "VoteTransactionRequest",
    "VoteStatus",
    "IDLE_STATUS",
    "SessionSnapshot",
    # All DDL
    "ALL_DDL",
]
