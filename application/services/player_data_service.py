"""Acquisition facade: cache, rate limit, then the strategy chain."""
from __future__ import annotations

from typing import List, Optional

from config import settings
from core.logging.context import context as log_context
from core.logging.logger import StructuredLogger, get_logger
from domain.entities import PlayerRecord, RelayEndpoint
from domain.interfaces import FetchStrategy
from infrastructure.api import PageClient, FixedWindowRateLimiter, RateWindowState
from infrastructure.cache import PlayerCache, CacheStats
from infrastructure.parsing import PlayerHTMLExtractor
from infrastructure.strategies import (
    RelayFetchStrategy,
    DirectFetchStrategy,
    FirstPartyProxyStrategy,
    UrlStructuralStrategy,
)
from .strategy_chain import FetchStrategyChain, MetricsHook


def build_default_strategies(
    client: PageClient,
    logger: StructuredLogger,
    *,
    extractor: Optional[PlayerHTMLExtractor] = None,
    relays: Optional[List[RelayEndpoint]] = None,
    first_party_proxy_url: Optional[str] = None,
    direct_origin: Optional[str] = None,
) -> List[FetchStrategy]:
    """Relay → direct → first-party proxy → URL structure."""
    extractor = extractor or PlayerHTMLExtractor(logger=logger)
    return [
        RelayFetchStrategy(
            client, extractor,
            relays if relays is not None else settings.relay_endpoints(),
            logger,
        ),
        DirectFetchStrategy(
            client, extractor,
            direct_origin if direct_origin is not None else settings.DIRECT_FETCH_ORIGIN,
            logger,
        ),
        FirstPartyProxyStrategy(
            client, extractor,
            first_party_proxy_url if first_party_proxy_url is not None else settings.FIRST_PARTY_PROXY_URL,
            logger,
        ),
        UrlStructuralStrategy(logger),
    ]


class PlayerDataService:
    """Single entry point for player profile acquisition.

    Create one per process and use it as an async context manager so the
    underlying HTTP session is opened and closed with it. Cache, limiter and
    strategies can be injected; defaults come from ``config.settings``.
    """

    def __init__(
        self,
        *,
        cache: Optional[PlayerCache] = None,
        rate_limiter: Optional[FixedWindowRateLimiter] = None,
        strategies: Optional[List[FetchStrategy]] = None,
        client: Optional[PageClient] = None,
        logger: Optional[StructuredLogger] = None,
        metrics_hook: Optional[MetricsHook] = None,
        timeout_s: Optional[float] = None,
    ) -> None:
        self.logger = logger or get_logger(__name__, service="player-data")
        self.cache = cache or PlayerCache(ttl_s=settings.CACHE_TTL_SECONDS)
        self.rate_limiter = rate_limiter or FixedWindowRateLimiter(
            max_requests=settings.RATE_LIMIT_MAX_REQUESTS,
            window_s=settings.RATE_LIMIT_WINDOW_SECONDS,
        )
        self.client = client or PageClient()
        if strategies is None:
            strategies = build_default_strategies(self.client, self.logger)
        self.chain = FetchStrategyChain(
            strategies,
            self.logger,
            timeout_s=timeout_s if timeout_s is not None else settings.STRATEGY_TIMEOUT_SECONDS,
            metrics_hook=metrics_hook,
        )

    async def __aenter__(self) -> "PlayerDataService":
        await self.client.__aenter__()
        return self

    async def __aexit__(self, *exc) -> None:
        await self.client.aclose()

    async def fetch_player_data(self, source_url: str, external_id: int) -> Optional[PlayerRecord]:
        """Best-effort fetch; returns None instead of raising."""
        with log_context(external_id=external_id):
            try:
                cached = self.cache.get(external_id)
                if cached is not None:
                    self.logger.debug(lambda: f"cache-hit {external_id}")
                    return cached

                if not self.rate_limiter.try_acquire():
                    self.logger.warning(lambda: "rate-limit-exceeded", extra=self.rate_limiter.status().to_dict())
                    return None

                self.logger.info(lambda: f"fetch-start {source_url}")
                record = await self.chain.resolve(source_url, external_id)
                if record is None:
                    return None

                self.cache.put(external_id, record)
                return record
            except Exception as e:
                self.logger.error(lambda: "fetch-player-data-error", extra={"error": str(e)}, exc_info=True)
                return None

    def clear_cache(self) -> None:
        self.cache.clear()
        self.logger.info(lambda: "cache-cleared")

    def cache_stats(self) -> CacheStats:
        return self.cache.stats()

    def rate_limiter_status(self) -> RateWindowState:
        return self.rate_limiter.status()
