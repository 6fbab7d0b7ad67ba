"""Record cache."""
from .player_cache import PlayerCache, CacheEntry, CacheStats

__all__ = [
    'PlayerCache',
    'CacheEntry',
    'CacheStats',
]
