"""Transient result of one fetch strategy attempt."""
from dataclasses import dataclass
from typing import Optional

from ..enums import FailureReason
from .player_record import PlayerRecord


@dataclass(frozen=True)
class StrategyOutcome:
    """Either a record or the reason there is none."""

    record: Optional[PlayerRecord] = None
    reason: Optional[FailureReason] = None
    detail: str = ""

    @property
    def succeeded(self) -> bool:
        return self.record is not None

    @classmethod
    def success(cls, record: PlayerRecord) -> 'StrategyOutcome':
        return cls(record=record)

    @classmethod
    def failure(cls, reason: FailureReason, detail: str = "") -> 'StrategyOutcome':
        return cls(reason=reason, detail=detail)
