"""Dependency Injection container - initialized at app startup."""

from app.protocols import Ledger, Wallet
from app.repositories.common import BaseCache, create_cache
from app.services.market import MarketDataReader
from app.services.session import VoteSession, WalletWatcher
from app.services.voting import DEFAULT_PROGRAM_ID, VoteStateReader, VoteSubmitter
from settings import CACHE_BACKEND, CACHE_TTL, VERIFY_FLAG_OWNER, WALLET_POLL_INTERVAL


class Container:
    """Application DI container - holds the cache and ledger-bound services."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, ledger: Ledger, cache: BaseCache | None = None) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        self._ledger = ledger
        self.program_id = DEFAULT_PROGRAM_ID

        # Shared cache (singleton)
        self.cache = cache if cache is not None else create_cache(CACHE_BACKEND, CACHE_TTL)

        # Services (with injected capabilities)
        self.market_reader = MarketDataReader(cache=self.cache)
        self.state_reader = VoteStateReader(
            ledger=ledger,
            program_id=self.program_id,
            verify_owner=VERIFY_FLAG_OWNER,
        )
        self.submitter = VoteSubmitter(
            ledger=ledger,
            state_reader=self.state_reader,
            program_id=self.program_id,
        )

        self._initialized = True

    def session(self, wallet: Wallet) -> VoteSession:
        """New session for a wallet."""
        return VoteSession(
            wallet=wallet,
            state_reader=self.state_reader,
            submitter=self.submitter,
            market_reader=self.market_reader,
        )

    def watcher(self, wallet: Wallet, session: VoteSession) -> WalletWatcher:
        return WalletWatcher(wallet=wallet, session=session, interval=WALLET_POLL_INTERVAL)

    def reset(self) -> None:
        """Drop wiring so `init` can run again (tests, ledger switch)."""
        self._initialized = False


# Global container instance
container = Container()
