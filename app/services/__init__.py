"""Services package - service class exports."""

from app.services.market import MarketDataReader
from app.services.session import VoteSession, WalletWatcher
from app.services.voting import VoteStateReader, VoteSubmitter

__all__ = [
    "MarketDataReader",
    "VoteStateReader",
    "VoteSubmitter",
    "VoteSession",
    "WalletWatcher",
]
