"""Base async JSON-RPC client."""

from typing import Any

import httpx
from loguru import logger

from app.errors import LedgerUnavailable
from settings import RPC_TIMEOUT, RPC_URL


class RpcClient:
    """Async JSON-RPC 2.0 client over HTTP. One request per call, no retry."""

    def __init__(
        self,
        url: str = RPC_URL,
        timeout: float = RPC_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._url = url
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._request_count = 0
        logger.info("{}: url={}", self.__class__.__name__, url)

    async def __aenter__(self):
        self._client = httpx.AsyncClient(timeout=self._timeout, transport=self._transport)
        return self

    async def __aexit__(self, *_):
        logger.debug("Total RPC requests: {}", self._request_count)
        if self._client:
            await self._client.aclose()
            self._client = None

    async def _call(self, method: str, params: list | None = None) -> Any:
        """POST a JSON-RPC request and return its `result`."""
        if self._client is None:
            raise RuntimeError(f"{self.__class__.__name__} used outside 'async with'")

        self._request_count += 1
        payload = {"jsonrpc": "2.0", "id": self._request_count, "method": method, "params": params or []}
        try:
            resp = await self._client.post(self._url, json=payload)
            resp.raise_for_status()
            body = resp.json()
        except httpx.HTTPStatusError as e:
            raise LedgerUnavailable(f"RPC {method} failed: HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise LedgerUnavailable(f"RPC {method} failed: {e}") from e
        except ValueError as e:
            raise LedgerUnavailable(f"RPC {method} returned invalid JSON") from e

        if not isinstance(body, dict):
            raise LedgerUnavailable(f"RPC {method} returned unexpected body")
        if body.get("error") is not None:
            error = body["error"]
            message = error.get("message", error) if isinstance(error, dict) else error
            raise LedgerUnavailable(f"RPC {method} error: {message}")
        return body.get("result")
