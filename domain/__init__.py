"""Domain layer - Entities, enums, and interfaces."""
from .entities import PlayerRecord, StrategyOutcome, RelayEndpoint, Deadline
from .enums import RecordOrigin, FailureReason, CardTier
from .interfaces import FetchStrategy

__all__ = [
    # Entities
    'PlayerRecord',
    'StrategyOutcome',
    'RelayEndpoint',
    'Deadline',
    # Enums
    'RecordOrigin',
    'FailureReason',
    'CardTier',
    # Interfaces
    'FetchStrategy',
]
