#!/usr/bin/env python3
"""
Token vote board CLI.

Usage:
    python run.py token <contract>                 # Market data (cached for CACHE_TTL)
    python run.py status <contract> [voter]        # Vote tally and voted flag
    python run.py vote <contract> <keypair.json>   # Cast one vote
    python run.py watch <contract> <voter>         # Follow vote status until Ctrl-C
    python run.py cache-clear                      # Drop cached market data

Set VOTE_CACHE_BACKEND=duckdb to keep market data between runs.
"""

import asyncio
import sys

from loguru import logger

from app.container import container
from app.errors import LedgerUnavailable, VoteBoardError
from app.models import MarketDataResult, VoteStatus
from app.services.session import VoteSession
from app.services.voting import parse_address
from ledger_client import KeypairWallet, LedgerClient, WatchOnlyWallet
from settings.logging import setup_logging

EXAMPLE_TOKEN = "73UdJevxaNKXARgkvPHQGKuv8HCZARszuKW2LTL3pump"
WATCH_INTERVAL = 10


def render_market(result: MarketDataResult) -> str:
    """Text rendering of a market lookup."""
    view = result.view
    if view is None:
        return "Market data unavailable. Try again later."
    if not view.has_data:
        return f"No data available. Try a known memecoin like:\n  {EXAMPLE_TOKEN}"

    sign = "+" if view.price_change_24h_pct >= 0 else ""
    return "\n".join(
        [
            view.pair_label,
            f"Price USD: ${view.price_usd:.8f}",
            f"Liquidity: ${view.liquidity_usd:,.0f}",
            f"FDV: ${view.fdv_usd:,.0f}",
            f"24h Volume: ${view.volume_24h_usd:,.0f}",
            f"24h Change: {sign}{view.price_change_24h_pct:.2f}%",
        ]
    )


def render_status(status: VoteStatus) -> str:
    action = "Already Voted" if status.has_voted else ("Vote" if status.can_vote else "Vote (unavailable)")
    return f"Total Votes: {status.tally}\n[{action}]"


async def refresh_status(session: VoteSession) -> VoteStatus:
    """Re-read the on-chain status; on failure keep showing the last one."""
    try:
        return await session.refresh()
    except VoteBoardError as e:
        logger.warning("Status refresh failed: {}", e.message)
        return session.status


async def cmd_token(contract: str) -> None:
    result = await container.market_reader.lookup(contract)
    print(render_market(result))


async def cmd_status(ledger: LedgerClient, contract: str, voter: str | None) -> None:
    async with ledger:
        if voter is None:
            # Tally is public even without a wallet
            tally = await container.state_reader.get_vote_tally(contract)
            status = VoteStatus(contract=contract, voter=None, tally=tally)
        else:
            status = await container.state_reader.get_status(voter, contract)
        print(render_status(status))


async def cmd_vote(ledger: LedgerClient, contract: str, keypair_path: str) -> None:
    async with ledger:
        wallet = KeypairWallet.from_file(keypair_path, ledger)
        session = container.session(wallet)
        snapshot = await session.search(contract)
        print(render_market(snapshot.market))
        if snapshot.error:
            raise LedgerUnavailable(snapshot.error)
        signature = await session.vote()
        print(f"Vote recorded! Tx: {str(signature)[:8]}...")
        print(render_status(session.status))


async def cmd_watch(ledger: LedgerClient, contract: str, voter: str) -> None:
    async with ledger:
        wallet = WatchOnlyWallet(parse_address(voter))
        session = container.session(wallet)
        snapshot = await session.search(contract)
        if snapshot.error:
            raise LedgerUnavailable(snapshot.error)
        print(render_status(session.status))

        while True:
            await asyncio.sleep(WATCH_INTERVAL)
            print(render_status(await refresh_status(session)))


async def dispatch(args: list[str]) -> None:
    ledger = LedgerClient()
    container.init(ledger)
    cmd, rest = args[0], args[1:]

    try:
        if cmd == "token" and len(rest) == 1:
            await cmd_token(rest[0])
        elif cmd == "status" and len(rest) in (1, 2):
            await cmd_status(ledger, rest[0], rest[1] if len(rest) == 2 else None)
        elif cmd == "vote" and len(rest) == 2:
            await cmd_vote(ledger, rest[0], rest[1])
        elif cmd == "watch" and len(rest) == 2:
            await cmd_watch(ledger, rest[0], rest[1])
        elif cmd == "cache-clear" and not rest:
            container.cache.clear()
        else:
            print(__doc__)
            sys.exit(1)
    finally:
        container.cache.close()


def main():
    args = sys.argv[1:]
    if not args:
        print(__doc__)
        sys.exit(1)

    setup_logging(cmd=args[0])

    try:
        asyncio.run(dispatch(args))
    except VoteBoardError as e:
        logger.error("{}", e.message)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Interrupted")


if __name__ == "__main__":
    main()
