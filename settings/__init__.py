"""Application settings."""

import os
from pathlib import Path

# Logging
LOG_DIR = Path(os.getenv("VOTE_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("VOTE_LOG_LEVEL", "INFO").upper()
LOG_TO_FILE = os.getenv("VOTE_LOG_TO_FILE", "0").lower() in ("1", "true", "yes")

# Ledger (Solana JSON-RPC)
RPC_URL = os.getenv("VOTE_RPC_URL", "https://api.devnet.solana.com")
RPC_TIMEOUT = 30
COMMITMENT = os.getenv("VOTE_COMMITMENT", "confirmed")

# Program owning the vote count and voted flag accounts
PROGRAM_ID = os.getenv("VOTE_PROGRAM_ID", "11111111111111111111111111111111")
VERIFY_FLAG_OWNER = os.getenv("VOTE_VERIFY_FLAG_OWNER", "0").lower() in ("1", "true", "yes")

# Confirmation polling
CONFIRM_TIMEOUT = 30.0
CONFIRM_POLL_INTERVAL = 0.5

# Market data (DexScreener)
DEX_API_BASE = os.getenv("VOTE_DEX_API_BASE", "https://api.dexscreener.com/latest/dex/tokens")
DEX_TIMEOUT = 15

# Cache
CACHE_TTL = 60.0
CACHE_BACKEND = os.getenv("VOTE_CACHE_BACKEND", "memory")
CACHE_DB_PATH = os.getenv("VOTE_CACHE_DB_PATH", "vote_cache.duckdb")

# Wallet watcher
WALLET_POLL_INTERVAL = 1.0
