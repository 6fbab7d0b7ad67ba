"""Direct-fetch strategy: request the profile page itself."""
from __future__ import annotations

import httpx

from core.logging.logger import StructuredLogger
from domain.entities import Deadline, StrategyOutcome
from domain.enums import FailureReason
from infrastructure.api.page_client import PageClient, failure_for
from infrastructure.parsing import PlayerHTMLExtractor


class DirectFetchStrategy:
    """Opportunistic: the source usually refuses us, but one GET is cheap."""

    name = "direct"

    def __init__(
        self,
        client: PageClient,
        extractor: PlayerHTMLExtractor,
        origin: str,
        logger: StructuredLogger,
    ) -> None:
        self.client = client
        self.extractor = extractor
        self.origin = origin
        self.logger = logger

    async def attempt(self, source_url: str, external_id: int, deadline: Deadline) -> StrategyOutcome:
        headers = self.client.browser_headers(Origin=self.origin, Referer=self.origin)
        try:
            response = await self.client.get(source_url, deadline, headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self.logger.warning(lambda: "direct-fetch-failed", extra={"error": str(e)})
            return StrategyOutcome.failure(failure_for(e), str(e))

        if not response.is_success:
            return StrategyOutcome.failure(FailureReason.HTTP_STATUS, f"status={response.status_code}")

        record = self.extractor.extract(response.text, external_id)
        if record is None:
            return StrategyOutcome.failure(FailureReason.WEAK_SIGNAL_EXTRACTION, "direct")
        self.logger.success(lambda: "direct-fetch-ok", extra={"external_id": external_id})
        return StrategyOutcome.success(record)
