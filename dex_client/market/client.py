"""Token market data API client."""

from dex_client.base import BaseClient


class MarketClient(BaseClient):
    """Client for DexScreener token endpoints."""

    async def token(self, contract: str) -> dict:
        """GET /latest/dex/tokens/{contract} - pairs trading the token."""
        data = await self._get(contract)
        return data if isinstance(data, dict) else {"pairs": data}
