"""Vote session - selected contract and last known vote status for one wallet."""

from dataclasses import replace

from loguru import logger
from solders.pubkey import Pubkey
from solders.signature import Signature

from app.errors import AlreadyVoted, LedgerUnavailable, NoContractSelected
from app.models import IDLE_STATUS, SessionSnapshot, VoteStatus
from app.protocols import Wallet
from app.services.market import MarketDataReader
from app.services.voting import VoteStateReader, VoteSubmitter, parse_address


class VoteSession:
    """Presentation-facing state holder handling `search` and `vote` intents.

    Status reads are ticketed in the order they start. A read that finishes
    after a later one has been applied is dropped, so an overlapping watcher
    refresh cannot overwrite the status written after a vote.
    """

    def __init__(
        self,
        wallet: Wallet,
        state_reader: VoteStateReader,
        submitter: VoteSubmitter,
        market_reader: MarketDataReader,
    ):
        self._wallet = wallet
        self._state = state_reader
        self._submitter = submitter
        self._market = market_reader
        self._contract: Pubkey | None = None
        self._issued = 0
        self._applied = 0
        self.status: VoteStatus = IDLE_STATUS

    @property
    def selected_contract(self) -> Pubkey | None:
        return self._contract

    @property
    def voter(self) -> Pubkey | None:
        return self._wallet.public_key if self._wallet.is_connected else None

    async def search(self, contract: str) -> SessionSnapshot:
        """Select a contract, look up its market data and refresh the vote status.

        A ledger failure is reported in the snapshot and leaves the previous
        selection in place.
        """
        address = contract.strip() if contract else ""
        if not address:
            raise NoContractSelected("Enter a token address")

        selected = parse_address(address)
        logger.info("Searching token: {}", address)

        market = await self._market.lookup(address)
        try:
            await self._read(selected)
        except LedgerUnavailable as e:
            logger.warning("Vote status for {} unavailable: {}", address, e.message)
            return SessionSnapshot(status=IDLE_STATUS, market=market, error=e.message)
        return SessionSnapshot(status=self.status, market=market)

    async def refresh(self) -> VoteStatus:
        """Re-read the voted flag and tally for the current selection."""
        await self._read(self._contract)
        return self.status

    async def _read(self, contract: Pubkey | None) -> None:
        self._issued += 1
        ticket = self._issued
        status = await self._state.get_status(self.voter, contract)
        if ticket < self._applied:
            logger.debug("Dropping stale status read for {}", contract)
            return
        self._applied = ticket
        self._contract = contract
        self.status = status

    async def vote(self) -> Signature:
        """Submit one vote for the selected contract, then refresh."""
        try:
            signature = await self._submitter.submit_vote(self._wallet, self._contract)
        except AlreadyVoted:
            self._issued += 1
            self._applied = self._issued
            self.status = replace(self.status, has_voted=True)
            raise

        try:
            await self.refresh()
        except LedgerUnavailable as e:
            # Vote is confirmed; the stale status is fixed by the next refresh
            logger.warning("Status refresh after vote failed: {}", e.message)
        return signature
