"""Player record entity produced by the acquisition client."""
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from ..enums import CardTier, RecordOrigin


@dataclass(frozen=True)
class PlayerRecord:
    """A (possibly partial) third-party player profile.

    Only ``source_id``, ``origin`` and ``observed_at`` are guaranteed; every
    other field is whatever the source happened to expose.
    """

    # Identity
    source_id: int
    origin: RecordOrigin

    # Profile
    name: Optional[str] = None
    overall_rating: Optional[int] = None
    potential_rating: Optional[int] = None
    positions: Optional[Tuple[str, ...]] = None
    age: Optional[int] = None
    club: Optional[str] = None
    nationality: Optional[str] = None

    # Page version, only known from the profile URL
    version_id: Optional[int] = None

    observed_at: float = field(default_factory=time.time)

    @property
    def card_tier(self) -> Optional[CardTier]:
        """Card tier for the overall rating, if one was recovered."""
        if self.overall_rating is None:
            return None
        return CardTier.from_rating(self.overall_rating)

    def to_dict(self) -> Dict[str, Any]:
        """Convert record to a JSON-friendly dictionary."""
        return {
            'source_id': self.source_id,
            'name': self.name,
            'overall_rating': self.overall_rating,
            'potential_rating': self.potential_rating,
            'positions': list(self.positions) if self.positions is not None else None,
            'age': self.age,
            'club': self.club,
            'nationality': self.nationality,
            'version_id': self.version_id,
            'origin': self.origin.value,
            'observed_at': self.observed_at,
            'card_tier': self.card_tier.value if self.card_tier else None,
        }
