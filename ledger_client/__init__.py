"""Solana ledger client package."""

from ledger_client.base import RpcClient
from ledger_client.client import COMMITMENT_LEVELS, LedgerClient, commitment_reached
from ledger_client.schemas import AccountInfo
from ledger_client.wallet import KeypairWallet, WatchOnlyWallet

__all__ = [
    # Base
    "RpcClient",
    # Clients
    "LedgerClient",
    "KeypairWallet",
    "WatchOnlyWallet",
    # Schemas
    "AccountInfo",
    # Helpers
    "COMMITMENT_LEVELS",
    "commitment_reached",
]
