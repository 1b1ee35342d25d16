"""Session services - user intents and wallet change detection."""

from app.services.session.session import VoteSession
from app.services.session.watcher import WalletWatcher

__all__ = [
    "VoteSession",
    "WalletWatcher",
]
