"""Infrastructure API module."""
from .page_client import PageClient, failure_for
from .rate_limiter import FixedWindowRateLimiter, RateWindowState

__all__ = [
    'PageClient',
    'failure_for',
    'FixedWindowRateLimiter',
    'RateWindowState',
]
