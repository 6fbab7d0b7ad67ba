"""Card tier enumeration derived from the overall rating."""
from enum import Enum
from typing import Optional


class CardTier(Enum):
    """FIFA-style card tiers, ordered from best to worst."""

    ICON = "icon"
    GOLD = "gold"
    SILVER = "silver"
    BRONZE = "bronze"
    COMMON = "common"

    @property
    def min_rating(self) -> int:
        """Lowest overall rating that still earns this tier."""
        return {
            "icon": 90,
            "gold": 85,
            "silver": 80,
            "bronze": 75,
            "common": 0,
        }[self.value]

    @property
    def css_class(self) -> str:
        return f"fifa-card-{self.value}"

    @property
    def indicator(self) -> str:
        return {
            "icon": "🌟",
            "gold": "🥇",
            "silver": "🥈",
            "bronze": "🥉",
            "common": "",
        }[self.value]

    @classmethod
    def from_rating(cls, overall: int) -> 'CardTier':
        """Pick the highest tier whose threshold the rating reaches."""
        for tier in cls:
            if overall >= tier.min_rating:
                return tier
        return cls.COMMON

    @classmethod
    def format_rating(cls, overall: Optional[int]) -> str:
        """Render a rating with its tier indicator, e.g. ``"91 🌟"``."""
        if overall is None:
            return "N/A"
        indicator = cls.from_rating(overall).indicator
        return f"{overall} {indicator}".rstrip()
