"""Ledger JSON-RPC schemas."""

import base64
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field
from solders.pubkey import Pubkey


@dataclass(frozen=True)
class AccountInfo:
    """Account state at an address."""

    data: bytes
    owner: Pubkey
    lamports: int = 0


class AccountSchema(BaseModel):
    """getAccountInfo `value` with base64 encoding."""

    data: list[str]
    owner: str
    lamports: int = 0
    executable: bool = False

    def to_account_info(self) -> AccountInfo:
        raw = base64.b64decode(self.data[0]) if self.data else b""
        return AccountInfo(data=raw, owner=Pubkey.from_string(self.owner), lamports=self.lamports)


class BlockhashSchema(BaseModel):
    """getLatestBlockhash `value`."""

    blockhash: str
    last_valid_block_height: int = Field(alias="lastValidBlockHeight", default=0)

    class Config:
        populate_by_name = True


class SignatureStatusSchema(BaseModel):
    """One entry of getSignatureStatuses `value`."""

    slot: int = 0
    confirmations: int | None = None
    err: Any = None
    confirmation_status: str | None = Field(alias="confirmationStatus", default=None)

    class Config:
        populate_by_name = True
