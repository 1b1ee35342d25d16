"""Market data reader - token market view gated by the TTL cache."""

from collections.abc import Callable

from loguru import logger
from pydantic import ValidationError

from app.errors import CacheUnavailable, MarketDataUnavailable
from app.models import NO_DATA, MarketDataResult, MarketDataStatus, TokenMarketView
from app.repositories.common import BaseCache
from dex_client.market import MarketClient, TokenPairsSchema


def cache_key(contract: str) -> str:
    return f"dex_{contract}"


def to_view(payload: dict) -> TokenMarketView:
    """View of the first market pair; NO_DATA when the token has no pairs."""
    parsed = TokenPairsSchema.model_validate(payload if isinstance(payload, dict) else {})
    if not parsed.pairs:
        return NO_DATA

    pair = parsed.pairs[0]
    return TokenMarketView(
        base_symbol=pair.base_token.symbol,
        quote_symbol=pair.quote_token.symbol,
        price_usd=pair.price_usd,
        liquidity_usd=pair.liquidity.usd,
        fdv_usd=pair.fdv,
        volume_24h_usd=pair.volume.h24,
        price_change_24h_pct=pair.price_change.h24,
    )


class MarketDataReader:
    """Fetches token market data at most once per TTL window per token.

    Fetch failures never leave this class: callers see UNAVAILABLE (or None).
    The raw payload is cached, not the view.
    """

    def __init__(self, cache: BaseCache, client_factory: Callable[[], MarketClient] = MarketClient):
        self._cache = cache
        self._client_factory = client_factory

    async def lookup(self, contract: str) -> MarketDataResult:
        key = cache_key(contract)
        try:
            cached = self._cache.get(key)
        except CacheUnavailable as e:
            logger.warning("Market cache unreadable for {}: {}", contract, e.message)
            return MarketDataResult(contract=contract, status=MarketDataStatus.UNAVAILABLE)

        if cached is not None:
            logger.debug("Using cached data for {}", contract)
            view = to_view(cached)
            status = MarketDataStatus.CACHED if view.has_data else MarketDataStatus.EMPTY
            return MarketDataResult(contract=contract, status=status, view=view)

        try:
            async with self._client_factory() as client:
                payload = await client.token(contract)
            view = to_view(payload)
        except MarketDataUnavailable as e:
            logger.warning("Market data unavailable for {}: {}", contract, e.message)
            return MarketDataResult(contract=contract, status=MarketDataStatus.UNAVAILABLE)
        except ValidationError as e:
            logger.warning("Market data for {} unparseable: {}", contract, e)
            return MarketDataResult(contract=contract, status=MarketDataStatus.UNAVAILABLE)

        try:
            self._cache.put(key, payload)
        except CacheUnavailable as e:
            logger.warning("Market data for {} not cached: {}", contract, e.message)

        status = MarketDataStatus.FRESH if view.has_data else MarketDataStatus.EMPTY
        logger.info("Fetched market data for {}: {}", contract, status)
        return MarketDataResult(contract=contract, status=status, view=view)

    async def fetch_token_data(self, contract: str) -> TokenMarketView | None:
        """View, NO_DATA for a token without pairs, or None when the fetch failed."""
        return (await self.lookup(contract)).view
