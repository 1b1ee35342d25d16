"""Base async HTTP client for the market data provider."""

import httpx
from loguru import logger

from app.errors import MarketDataUnavailable
from settings import DEX_API_BASE, DEX_TIMEOUT


class BaseClient:
    """Base async HTTP client. One request per call, failures raised as MarketDataUnavailable."""

    def __init__(
        self,
        base_url: str = DEX_API_BASE,
        timeout: float = DEX_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._request_count = 0
        logger.debug("{}: base_url={}", self.__class__.__name__, self._base_url)

    async def __aenter__(self):
        self._client = httpx.AsyncClient(timeout=self._timeout, transport=self._transport)
        return self

    async def __aexit__(self, *_):
        logger.debug("Total market API requests: {}", self._request_count)
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _get(self, path: str) -> dict | list:
        """GET request, no retry."""
        if self._client is None:
            raise RuntimeError(f"{self.__class__.__name__} used outside 'async with'")

        url = f"{self._base_url}/{path}"
        self._request_count += 1
        try:
            resp = await self._client.get(url)
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPStatusError as e:
            raise MarketDataUnavailable(f"API failed: {e.response.status_code}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise MarketDataUnavailable(f"API request failed: {e}") from e
        except ValueError as e:
            raise MarketDataUnavailable(f"API returned invalid JSON: {e}") from e
