"""Keypair-file wallet - signs locally and sends through the ledger client."""

import json
from pathlib import Path

from loguru import logger
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.signature import Signature
from solders.transaction import Transaction


class KeypairWallet:
    """Wallet backed by a local keypair. Always connected."""

    def __init__(self, keypair: Keypair, ledger):
        self._keypair = keypair
        self._ledger = ledger

    @classmethod
    def from_file(cls, path: str | Path, ledger) -> "KeypairWallet":
        """Load a Solana CLI keypair file (JSON array of 64 bytes)."""
        secret = json.loads(Path(path).read_text())
        keypair = Keypair.from_bytes(bytes(secret))
        logger.info("Loaded keypair {} from {}", keypair.pubkey(), path)
        return cls(keypair, ledger)

    @property
    def is_connected(self) -> bool:
        return True

    @property
    def public_key(self) -> Pubkey:
        return self._keypair.pubkey()

    async def sign_and_send(self, tx: Transaction) -> Signature:
        tx.sign([self._keypair], tx.message.recent_blockhash)
        return await self._ledger.send_transaction(tx)


class WatchOnlyWallet:
    """Public key without signing capability, for status queries."""

    def __init__(self, public_key: Pubkey):
        self._public_key = public_key

    @property
    def is_connected(self) -> bool:
        return True

    @property
    def public_key(self) -> Pubkey:
        return self._public_key

    async def sign_and_send(self, tx: Transaction) -> Signature:
        raise PermissionError(f"Watch-only wallet {self._public_key} cannot sign")
