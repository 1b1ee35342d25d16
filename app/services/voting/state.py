"""Vote state reader - voted flag and tally from ledger accounts."""

import struct

import httpx
from loguru import logger
from solders.pubkey import Pubkey

from app.errors import CorruptTallyState, LedgerUnavailable
from app.models import IDLE_STATUS, VoteStatus
from app.protocols import Ledger
from app.services.voting.addresses import (
    DEFAULT_PROGRAM_ID,
    derive_vote_count_address,
    derive_voted_flag_address,
    parse_address,
)
from ledger_client.schemas import AccountInfo
from settings import VERIFY_FLAG_OWNER

TALLY_SIZE = 8
_TALLY = struct.Struct("<Q")

# Raised by ledger implementations that do not map their own transport errors
_TRANSPORT_ERRORS = (httpx.HTTPError, OSError, TimeoutError)


def decode_tally(data: bytes, address: Pubkey | None = None) -> int:
    """Decode an unsigned little-endian u64 tally. Any other length is corrupt."""
    if len(data) != TALLY_SIZE:
        raise CorruptTallyState(address, len(data))
    return _TALLY.unpack(data)[0]


class VoteStateReader:
    """Read-only queries against the derived vote accounts. One ledger query per call."""

    def __init__(
        self,
        ledger: Ledger,
        program_id: Pubkey = DEFAULT_PROGRAM_ID,
        verify_owner: bool = VERIFY_FLAG_OWNER,
    ):
        self._ledger = ledger
        self._program_id = program_id
        self._verify_owner = verify_owner

    async def _account(self, address: Pubkey) -> AccountInfo | None:
        try:
            return await self._ledger.get_account_info(address)
        except _TRANSPORT_ERRORS as e:
            raise LedgerUnavailable(f"getAccountInfo({address}) failed: {e}") from e

    async def has_voted(self, voter: str | Pubkey, contract: str | Pubkey) -> bool:
        """True iff an account exists at the voted flag address."""
        address = derive_voted_flag_address(voter, contract, self._program_id)
        account = await self._account(address)
        if account is None:
            return False
        if self._verify_owner and account.owner != self._program_id:
            logger.warning("Voted flag {} owned by {}, not {}; ignoring", address, account.owner, self._program_id)
            return False
        return True

    async def get_vote_tally(self, contract: str | Pubkey) -> int:
        """Tally at the vote count address; 0 when no account exists."""
        address = derive_vote_count_address(contract, self._program_id)
        account = await self._account(address)
        if account is None:
            return 0
        return decode_tally(account.data, address)

    async def get_status(self, voter: str | Pubkey | None, contract: str | Pubkey | None) -> VoteStatus:
        """Voted flag and tally for the current voter/contract selection."""
        if voter is None or contract is None:
            return IDLE_STATUS

        voter_key = parse_address(voter)
        contract_key = parse_address(contract)
        voted = await self.has_voted(voter_key, contract_key)
        tally = await self.get_vote_tally(contract_key)
        logger.debug("Status {} on {}: voted={}, tally={}", voter_key, contract_key, voted, tally)
        return VoteStatus(contract=str(contract_key), voter=str(voter_key), has_voted=voted, tally=tally)
