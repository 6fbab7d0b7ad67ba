"""Domain entities."""
from .player_record import PlayerRecord
from .strategy_outcome import StrategyOutcome
from .relay_endpoint import RelayEndpoint
from .deadline import Deadline

__all__ = [
    'PlayerRecord',
    'StrategyOutcome',
    'RelayEndpoint',
    'Deadline',
]
