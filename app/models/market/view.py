"""Token market view - what the presentation layer renders."""

from dataclasses import dataclass
from enum import StrEnum


@dataclass(frozen=True)
class TokenMarketView:
    """Normalized figures for the first market pair of a token."""

    base_symbol: str = ""
    quote_symbol: str = ""
    price_usd: float = 0.0
    liquidity_usd: float = 0.0
    fdv_usd: float = 0.0
    volume_24h_usd: float = 0.0
    price_change_24h_pct: float = 0.0
    has_data: bool = True

    @property
    def pair_label(self) -> str:
        return f"{self.base_symbol} / {self.quote_symbol}"


# Fetched successfully but the provider knows no pairs for the token
NO_DATA = TokenMarketView(has_data=False)


class MarketDataStatus(StrEnum):
    """Outcome of a market data lookup."""

    FRESH = "fresh"
    CACHED = "cached"
    EMPTY = "empty"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class MarketDataResult:
    """Typed lookup result: distinguishes 'fetched but empty' from 'fetch failed'."""

    contract: str
    status: MarketDataStatus
    view: TokenMarketView | None = None
