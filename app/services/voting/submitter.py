"""Vote submitter - builds, signs, sends and confirms a vote exactly once."""

from loguru import logger
from solders.hash import Hash
from solders.instruction import AccountMeta, Instruction
from solders.message import Message
from solders.pubkey import Pubkey
from solders.signature import Signature
from solders.system_program import ID as SYSTEM_PROGRAM_ID
from solders.transaction import Transaction

from app.errors import AlreadyVoted, NoContractSelected, VoteSubmissionFailed, WalletNotConnected
from app.models import VoteTransactionRequest
from app.protocols import Ledger, Wallet
from app.services.voting.addresses import DEFAULT_PROGRAM_ID, derive_vote_addresses, parse_address
from app.services.voting.state import VoteStateReader

CONFIRMATION_LEVEL = "confirmed"


def build_vote_instruction(request: VoteTransactionRequest, program_id: Pubkey = DEFAULT_PROGRAM_ID) -> Instruction:
    """Vote instruction; payload is the contract's 32 bytes."""
    addresses = derive_vote_addresses(request.voter, request.contract, program_id)
    accounts = [
        AccountMeta(request.voter, True, True),
        AccountMeta(addresses.vote_count, False, True),
        AccountMeta(addresses.voted_flag, False, True),
        AccountMeta(SYSTEM_PROGRAM_ID, False, False),
    ]
    return Instruction(program_id, bytes(request.contract), accounts)


def build_vote_transaction(
    request: VoteTransactionRequest,
    blockhash: Hash,
    program_id: Pubkey = DEFAULT_PROGRAM_ID,
) -> Transaction:
    """Unsigned single-instruction transaction paid by the voter."""
    instruction = build_vote_instruction(request, program_id)
    message = Message.new_with_blockhash([instruction], request.voter, blockhash)
    return Transaction.new_unsigned(message)


def _contract_selected(contract: str | Pubkey | None) -> bool:
    if contract is None:
        return False
    return not isinstance(contract, str) or bool(contract.strip())


class VoteSubmitter:
    """Submits one vote per user action. No retry; failures are terminal for the attempt."""

    def __init__(
        self,
        ledger: Ledger,
        state_reader: VoteStateReader,
        program_id: Pubkey = DEFAULT_PROGRAM_ID,
    ):
        self._ledger = ledger
        self._state = state_reader
        self._program_id = program_id

    async def submit_vote(self, wallet: Wallet, contract: str | Pubkey | None) -> Signature:
        """Vote for `contract` with the wallet's key and return the confirmed signature."""
        voter = wallet.public_key if wallet.is_connected else None
        if voter is None:
            raise WalletNotConnected()
        if not _contract_selected(contract):
            raise NoContractSelected()
        contract_key = parse_address(contract)

        # Authoritative check: any cached UI flag may be stale
        if await self._state.has_voted(voter, contract_key):
            logger.info("{} already voted on {}", voter, contract_key)
            raise AlreadyVoted(voter, contract_key)

        request = VoteTransactionRequest(voter=voter, contract=contract_key)

        try:
            blockhash = await self._ledger.get_latest_blockhash()
        except Exception as e:
            raise VoteSubmissionFailed(e, stage="blockhash") from e

        tx = build_vote_transaction(request, blockhash, self._program_id)

        try:
            signature = await wallet.sign_and_send(tx)
        except Exception as e:
            logger.error("Transaction failed: {}", e)
            raise VoteSubmissionFailed(e, stage="sign") from e

        try:
            await self._ledger.confirm_transaction(signature, CONFIRMATION_LEVEL)
        except Exception as e:
            logger.error("Confirmation failed for {}: {}", signature, e)
            raise VoteSubmissionFailed(e, stage="confirm") from e

        logger.info("Vote recorded on {}: {}", contract_key, signature)
        return signature
