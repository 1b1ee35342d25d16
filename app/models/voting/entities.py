"""Voting domain entities - derived addresses, requests and status."""

from dataclasses import dataclass

from solders.pubkey import Pubkey

from app.models.market import MarketDataResult


@dataclass(frozen=True)
class VoteAddresses:
    """Both derived addresses for one (voter, contract) pair."""

    vote_count: Pubkey
    voted_flag: Pubkey


@dataclass(frozen=True)
class VoteTransactionRequest:
    """Sole input for building a vote transaction. Built fresh per attempt."""

    voter: Pubkey
    contract: Pubkey


@dataclass(frozen=True)
class VoteStatus:
    """On-chain vote state as seen by one voter."""

    contract: str | None
    voter: str | None
    has_voted: bool = False
    tally: int = 0

    @property
    def can_vote(self) -> bool:
        return self.voter is not None and self.contract is not None and not self.has_voted


IDLE_STATUS = VoteStatus(contract=None, voter=None)


@dataclass(frozen=True)
class SessionSnapshot:
    """Everything the presentation layer renders after a search or refresh."""

    status: VoteStatus
    market: MarketDataResult | None = None
    error: str | None = None
