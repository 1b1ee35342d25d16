"""Wallet watcher - refreshes the session when the connected key changes."""

import asyncio

from loguru import logger
from solders.pubkey import Pubkey

from app.errors import VoteBoardError
from app.protocols import Wallet
from app.services.session.session import VoteSession
from settings import WALLET_POLL_INTERVAL


class WalletWatcher:
    """Polls the wallet and triggers a refresh only on change (edge-triggered)."""

    def __init__(self, wallet: Wallet, session: VoteSession, interval: float = WALLET_POLL_INTERVAL):
        self._wallet = wallet
        self._session = session
        self._interval = interval
        self._last_key: Pubkey | None = None

    @property
    def last_key(self) -> Pubkey | None:
        return self._last_key

    def _current_key(self) -> Pubkey | None:
        return self._wallet.public_key if self._wallet.is_connected else None

    async def tick(self) -> bool:
        """Compare with the last seen key; refresh and return True if it changed."""
        key = self._current_key()
        if key == self._last_key:
            return False

        logger.info("Wallet changed: {} -> {}", self._last_key, key)
        self._last_key = key
        await self._session.refresh()
        return True

    async def run(self, stop: asyncio.Event) -> None:
        """Tick every `interval` seconds until `stop` is set."""
        logger.debug("Wallet watcher started (interval={}s)", self._interval)
        while not stop.is_set():
            try:
                await self.tick()
            except VoteBoardError as e:
                logger.warning("Refresh after wallet change failed: {}", e.message)
            try:
                await asyncio.wait_for(stop.wait(), timeout=self._interval)
            except asyncio.TimeoutError:
                continue
        logger.debug("Wallet watcher stopped")
