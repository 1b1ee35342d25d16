"""Error taxonomy for vote state, submission and market data."""


class VoteBoardError(Exception):
    """Base error."""

    default_message = "Vote board error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidAddressFormat(VoteBoardError):
    """Identifier is not a valid 32-byte base58 ledger address."""

    default_message = "Invalid address format"

    def __init__(self, value: object = None, message: str | None = None):
        self.value = value
        super().__init__(message or f"Invalid address format: {value!r}")


class LedgerUnavailable(VoteBoardError):
    """Ledger query failed in transport or returned an RPC error."""

    default_message = "Ledger unavailable"


class CorruptTallyState(VoteBoardError):
    """Vote count account holds data that is not exactly 8 bytes."""

    default_message = "Corrupt tally state"

    def __init__(self, address: object = None, length: int | None = None):
        self.address = address
        self.length = length
        super().__init__(f"Vote count account {address} holds {length} bytes, expected 8")


class WalletNotConnected(VoteBoardError):
    default_message = "Wallet not connected"


class NoContractSelected(VoteBoardError):
    default_message = "No contract selected"


class AlreadyVoted(VoteBoardError):
    """Voter already has a voted flag for this contract."""

    default_message = "Already voted"

    def __init__(self, voter: object = None, contract: object = None):
        self.voter = voter
        self.contract = contract
        super().__init__(f"{voter} has already voted on {contract}")


class TransactionNotConfirmed(VoteBoardError):
    """Transaction failed on-chain or did not reach the requested commitment in time."""

    default_message = "Transaction not confirmed"


class VoteSubmissionFailed(VoteBoardError):
    """Build, sign, send or confirm stage failed. Nothing is retried."""

    default_message = "Vote submission failed"

    def __init__(self, cause: BaseException | None = None, stage: str = "submit"):
        self.cause = cause
        self.stage = stage
        super().__init__(f"Vote submission failed at {stage}: {cause}")


class MarketDataUnavailable(VoteBoardError):
    """Market data fetch failed. Absorbed by the market reader, never shown as a hard error."""

    default_message = "Market data unavailable"


class CacheUnavailable(VoteBoardError):
    """Cache backend could not read or write an entry."""

    default_message = "Cache unavailable"
