"""Domain interfaces."""
from .fetch_strategy import FetchStrategy

__all__ = [
    'FetchStrategy',
]
