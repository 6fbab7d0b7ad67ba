"""URL-structural strategy: derive a minimal record from the URL alone."""
from __future__ import annotations

import re
import time
from typing import Optional

from core.logging.logger import StructuredLogger
from domain.entities import Deadline, PlayerRecord, StrategyOutcome
from domain.enums import FailureReason, RecordOrigin

# .../player/{numericId}/{slug}/{versionId}/...
PROFILE_PATH = re.compile(r"player/(\d+)/([^/?#]+)/(\d+)")


def name_from_slug(slug: str) -> str:
    """``erling-haaland`` -> ``Erling Haaland``, ``n'golo-kante`` -> ``N'Golo Kante``."""
    words = " ".join(w for w in re.split(r"[-_+]+", slug) if w)
    return re.sub(r"\b\w", lambda m: m.group().upper(), words)


def parse_profile_url(source_url: str) -> Optional[PlayerRecord]:
    if not isinstance(source_url, str):
        return None
    match = PROFILE_PATH.search(source_url)
    if not match:
        return None
    player_id, slug, version = match.groups()
    return PlayerRecord(
        source_id=int(player_id),
        origin=RecordOrigin.URL_STRUCTURAL,
        name=name_from_slug(slug) or None,
        version_id=int(version),
        observed_at=time.time(),
    )


class UrlStructuralStrategy:
    """Network-free last resort; deterministic for a well-formed URL."""

    name = "url_structural"

    def __init__(self, logger: StructuredLogger) -> None:
        self.logger = logger

    async def attempt(self, source_url: str, external_id: int, deadline: Deadline) -> StrategyOutcome:
        record = parse_profile_url(source_url)
        if record is None:
            return StrategyOutcome.failure(FailureReason.MALFORMED_SOURCE_URL, str(source_url))
        self.logger.info(lambda: f"url-parsed id={record.source_id} name={record.name}")
        return StrategyOutcome.success(record)
