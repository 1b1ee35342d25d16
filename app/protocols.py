"""Capabilities injected into readers, submitter and session."""

from typing import Protocol

from solders.hash import Hash
from solders.pubkey import Pubkey
from solders.signature import Signature
from solders.transaction import Transaction

from ledger_client.schemas import AccountInfo


class Ledger(Protocol):
    """Read/write access to ledger state."""

    async def get_account_info(self, address: Pubkey) -> AccountInfo | None: ...

    async def get_latest_blockhash(self) -> Hash: ...

    async def send_transaction(self, tx: Transaction) -> Signature: ...

    async def confirm_transaction(self, signature: Signature, commitment: str) -> None: ...


class Wallet(Protocol):
    """Externally owned wallet that signs and sends on the voter's behalf."""

    @property
    def is_connected(self) -> bool: ...

    @property
    def public_key(self) -> Pubkey | None: ...

    async def sign_and_send(self, tx: Transaction) -> Signature: ...
