"""Where a player record came from."""
from enum import Enum


class RecordOrigin(Enum):
    """Provenance of a PlayerRecord."""

    LIVE_PARSE = "live_parse"          # extracted from fetched profile markup
    URL_STRUCTURAL = "url_structural"  # derived from the profile URL only

    @property
    def is_live(self) -> bool:
        return self is RecordOrigin.LIVE_PARSE
