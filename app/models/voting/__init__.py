"""Voting domain models."""

from app.models.voting.entities import (
    IDLE_STATUS,
    SessionSnapshot,
    VoteAddresses,
    VoteStatus,
    VoteTransactionRequest,
)

__all__ = [
    "VoteAddresses",
    "VoteTransactionRequest",
    "VoteStatus",
    "IDLE_STATUS",
    "SessionSnapshot",
]
