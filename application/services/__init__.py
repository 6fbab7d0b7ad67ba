"""Application services root exports."""
from .strategy_chain import FetchStrategyChain
from .player_data_service import PlayerDataService, build_default_strategies

__all__ = [
    "FetchStrategyChain",
    "PlayerDataService",
    "build_default_strategies",
]
