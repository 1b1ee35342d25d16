"""Shared fakes for ledger and wallet capabilities."""

import pytest
from solders.hash import Hash
from solders.pubkey import Pubkey
from solders.signature import Signature

from app.models import NO_DATA, MarketDataResult, MarketDataStatus
from app.repositories.common import TTLCache
from app.services.voting import DEFAULT_PROGRAM_ID, derive_vote_addresses
from ledger_client.schemas import AccountInfo


class FakeLedger:
    """In-memory ledger. Confirming a vote transaction applies it like the program would."""

    def __init__(self):
        self.accounts: dict[Pubkey, AccountInfo] = {}
        self.reads: list[Pubkey] = []
        self.blockhashes: list[Hash] = []
        self.sent: list = []
        self.confirmed: list[tuple[Signature, str]] = []
        self.read_error: Exception | None = None
        self.blockhash_error: Exception | None = None
        self.confirm_error: Exception | None = None
        self._pending: dict[Signature, object] = {}

    def set_account(self, address: Pubkey, data: bytes, owner: Pubkey = DEFAULT_PROGRAM_ID) -> None:
        self.accounts[address] = AccountInfo(data=data, owner=owner, lamports=1)

    async def get_account_info(self, address):
        self.reads.append(address)
        if self.read_error:
            raise self.read_error
        return self.accounts.get(address)

    async def get_latest_blockhash(self):
        if self.blockhash_error:
            raise self.blockhash_error
        blockhash = Hash.new_unique()
        self.blockhashes.append(blockhash)
        return blockhash

    async def send_transaction(self, tx):
        self.sent.append(tx)
        signature = Signature.new_unique()
        self._pending[signature] = tx
        return signature

    async def confirm_transaction(self, signature, commitment):
        if self.confirm_error:
            raise self.confirm_error
        self.confirmed.append((signature, commitment))
        tx = self._pending.pop(signature)
        voter = tx.message.account_keys[0]
        contract = Pubkey(bytes(tx.message.instructions[0].data))
        addresses = derive_vote_addresses(voter, contract)
        current = self.accounts.get(addresses.vote_count)
        tally = int.from_bytes(current.data, "little") if current else 0
        self.set_account(addresses.vote_count, (tally + 1).to_bytes(8, "little"))
        self.set_account(addresses.voted_flag, b"\x01")


class FakeWallet:
    """Browser-wallet stand-in: connect state, key, sign-and-send through the ledger."""

    def __init__(self, ledger: FakeLedger, key: Pubkey | None = None, connected: bool = True):
        self._ledger = ledger
        self.key = key or Pubkey.new_unique()
        self.connected = connected
        self.signed: list = []
        self.error: Exception | None = None

    @property
    def is_connected(self) -> bool:
        return self.connected

    @property
    def public_key(self) -> Pubkey | None:
        return self.key if self.connected else None

    async def sign_and_send(self, tx):
        self.signed.append(tx)
        if self.error:
            raise self.error
        return await self._ledger.send_transaction(tx)


class StubMarketReader:
    """Market reader answering EMPTY for every token without touching the network."""

    def __init__(self):
        self.lookups: list[str] = []

    async def lookup(self, contract: str) -> MarketDataResult:
        self.lookups.append(contract)
        return MarketDataResult(contract=contract, status=MarketDataStatus.EMPTY, view=NO_DATA)


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def ledger() -> FakeLedger:
    return FakeLedger()


@pytest.fixture
def wallet(ledger) -> FakeWallet:
    return FakeWallet(ledger)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock) -> TTLCache:
    return TTLCache(ttl=60.0, clock=clock)


@pytest.fixture
def contract() -> Pubkey:
    return Pubkey.new_unique()


@pytest.fixture
def make_wallet(ledger):
    def factory(**kwargs) -> FakeWallet:
        return FakeWallet(ledger, **kwargs)

    return factory


@pytest.fixture
def stub_market() -> StubMarketReader:
    return StubMarketReader()
