"""Solana ledger client - account reads, blockhash, send and confirm."""

import base64

from loguru import logger
from solders.hash import Hash
from solders.pubkey import Pubkey
from solders.signature import Signature
from solders.transaction import Transaction
from tenacity import AsyncRetrying, RetryError, retry_if_result, stop_after_delay, wait_fixed

from app.errors import LedgerUnavailable, TransactionNotConfirmed
from ledger_client.base import RpcClient
from ledger_client.schemas import AccountInfo, AccountSchema, BlockhashSchema, SignatureStatusSchema
from settings import COMMITMENT, CONFIRM_POLL_INTERVAL, CONFIRM_TIMEOUT

COMMITMENT_LEVELS = ("processed", "confirmed", "finalized")


def commitment_reached(status: str | None, commitment: str) -> bool:
    """Check if a reported confirmation status satisfies the requested commitment."""
    if status not in COMMITMENT_LEVELS:
        return False
    return COMMITMENT_LEVELS.index(status) >= COMMITMENT_LEVELS.index(commitment)


class LedgerClient(RpcClient):
    """Client for the Solana JSON-RPC methods the vote engine needs."""

    def __init__(
        self,
        *args,
        commitment: str = COMMITMENT,
        confirm_timeout: float = CONFIRM_TIMEOUT,
        poll_interval: float = CONFIRM_POLL_INTERVAL,
        **kwargs,
    ):
        if commitment not in COMMITMENT_LEVELS:
            raise ValueError(f"Unknown commitment: {commitment}")
        super().__init__(*args, **kwargs)
        self._commitment = commitment
        self._confirm_timeout = confirm_timeout
        self._poll_interval = poll_interval

    async def get_account_info(self, address: Pubkey) -> AccountInfo | None:
        """getAccountInfo - None when no account exists at the address."""
        result = await self._call(
            "getAccountInfo",
            [str(address), {"encoding": "base64", "commitment": self._commitment}],
        )
        value = (result or {}).get("value")
        if value is None:
            return None
        try:
            return AccountSchema.model_validate(value).to_account_info()
        except ValueError as e:
            raise LedgerUnavailable(f"Malformed account payload for {address}: {e}") from e

    async def get_latest_blockhash(self) -> Hash:
        """getLatestBlockhash - fetched fresh for every transaction."""
        result = await self._call("getLatestBlockhash", [{"commitment": self._commitment}])
        try:
            value = BlockhashSchema.model_validate((result or {}).get("value"))
            return Hash.from_string(value.blockhash)
        except ValueError as e:
            raise LedgerUnavailable(f"Malformed blockhash payload: {e}") from e

    async def send_transaction(self, tx: Transaction) -> Signature:
        """sendTransaction with base64 wire encoding."""
        encoded = base64.b64encode(bytes(tx)).decode("ascii")
        result = await self._call(
            "sendTransaction",
            [encoded, {"encoding": "base64", "preflightCommitment": self._commitment}],
        )
        try:
            signature = Signature.from_string(result)
        except (TypeError, ValueError) as e:
            raise LedgerUnavailable(f"Malformed signature in sendTransaction result: {result!r}") from e
        logger.info("Transaction sent: {}", signature)
        return signature

    async def get_signature_status(self, signature: Signature) -> SignatureStatusSchema | None:
        """getSignatureStatuses for a single signature."""
        result = await self._call("getSignatureStatuses", [[str(signature)]])
        values = (result or {}).get("value") or [None]
        if values[0] is None:
            return None
        return SignatureStatusSchema.model_validate(values[0])

    async def _poll_status(self, signature: Signature) -> str | None:
        status = await self.get_signature_status(signature)
        if status is None:
            return None
        if status.err is not None:
            raise TransactionNotConfirmed(f"Transaction {signature} failed: {status.err}")
        return status.confirmation_status

    async def confirm_transaction(self, signature: Signature, commitment: str = COMMITMENT) -> None:
        """Poll until the signature reaches `commitment`, bounded by the confirm timeout."""
        retrying = AsyncRetrying(
            stop=stop_after_delay(self._confirm_timeout),
            wait=wait_fixed(self._poll_interval),
            retry=retry_if_result(lambda status: not commitment_reached(status, commitment)),
        )
        try:
            status = await retrying(self._poll_status, signature)
        except RetryError as e:
            raise TransactionNotConfirmed(
                f"Transaction {signature} not {commitment} within {self._confirm_timeout}s"
            ) from e
        logger.info("Transaction {} reached {}", signature, status)
