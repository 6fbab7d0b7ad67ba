"""Application layer - Acquisition facade and strategy chain."""
from .services import PlayerDataService, FetchStrategyChain, build_default_strategies

__all__ = [
    'PlayerDataService',
    'FetchStrategyChain',
    'build_default_strategies',
]
