"""Infrastructure layer - HTTP, cache, parsing and fetch strategies."""
from .api import PageClient, FixedWindowRateLimiter, RateWindowState
from .cache import PlayerCache, CacheStats
from .parsing import PlayerHTMLExtractor
from .strategies import (
    RelayFetchStrategy,
    DirectFetchStrategy,
    FirstPartyProxyStrategy,
    UrlStructuralStrategy,
)

__all__ = [
    'PageClient',
    'FixedWindowRateLimiter',
    'RateWindowState',
    'PlayerCache',
    'CacheStats',
    'PlayerHTMLExtractor',
    'RelayFetchStrategy',
    'DirectFetchStrategy',
    'FirstPartyProxyStrategy',
    'UrlStructuralStrategy',
]
