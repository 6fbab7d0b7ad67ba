"""Explicit per-attempt deadline."""
import time
from dataclasses import dataclass


@dataclass(frozen=True)
class Deadline:
    """Monotonic point in time after which an attempt is abandoned."""

    expires_at: float

    @classmethod
    def after(cls, seconds: float) -> 'Deadline':
        return cls(expires_at=time.monotonic() + seconds)

    def remaining(self) -> float:
        return max(0.0, self.expires_at - time.monotonic())

    @property
    def expired(self) -> bool:
        return self.remaining() <= 0.0
