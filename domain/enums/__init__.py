"""Domain enumerations."""
from .record_origin import RecordOrigin
from .failure_reason import FailureReason
from .card_tier import CardTier

__all__ = [
    'RecordOrigin',
    'FailureReason',
    'CardTier',
]
