"""Market data API schemas."""

import math
from typing import Any

from pydantic import BaseModel, Field, field_validator


def to_number(value: Any) -> float:
    """Lenient numeric coercion: missing or non-numeric values become 0."""
    if isinstance(value, bool):
        return float(value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def _as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


class TokenSchema(BaseModel):
    """Token side of a pair."""

    symbol: str = ""
    name: str = ""
    address: str = ""

    @field_validator("symbol", "name", "address", mode="before")
    @classmethod
    def _text(cls, v: Any) -> str:
        return "" if v is None else str(v)


class UsdSchema(BaseModel):
    usd: float = 0.0

    @field_validator("usd", mode="before")
    @classmethod
    def _number(cls, v: Any) -> float:
        return to_number(v)


class WindowSchema(BaseModel):
    """Rolling window figures; only the 24h window is used."""

    h24: float = 0.0

    @field_validator("h24", mode="before")
    @classmethod
    def _number(cls, v: Any) -> float:
        return to_number(v)


class PairSchema(BaseModel):
    """Trading pair (one market for the token)."""

    base_token: TokenSchema = Field(alias="baseToken", default_factory=TokenSchema)
    quote_token: TokenSchema = Field(alias="quoteToken", default_factory=TokenSchema)
    price_usd: float = Field(alias="priceUsd", default=0.0)
    liquidity: UsdSchema = Field(default_factory=UsdSchema)
    fdv: float = 0.0
    volume: WindowSchema = Field(default_factory=WindowSchema)
    price_change: WindowSchema = Field(alias="priceChange", default_factory=WindowSchema)

    class Config:
        populate_by_name = True

    @field_validator("base_token", "quote_token", "liquidity", "volume", "price_change", mode="before")
    @classmethod
    def _nested(cls, v: Any) -> dict:
        return _as_dict(v)

    @field_validator("price_usd", "fdv", mode="before")
    @classmethod
    def _number(cls, v: Any) -> float:
        return to_number(v)


class TokenPairsSchema(BaseModel):
    """GET /tokens/{address} response."""

    pairs: list[PairSchema] = []

    @field_validator("pairs", mode="before")
    @classmethod
    def _pairs(cls, v: Any) -> list:
        if not isinstance(v, list):
            return []
        return [_as_dict(p) for p in v]
