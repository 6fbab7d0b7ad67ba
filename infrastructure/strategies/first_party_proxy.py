"""First-party proxy strategy: let our own backend fetch the page."""
from __future__ import annotations

import httpx

from core.logging.logger import StructuredLogger
from domain.entities import Deadline, StrategyOutcome
from domain.enums import FailureReason
from infrastructure.api.page_client import PageClient, failure_for
from infrastructure.parsing import PlayerHTMLExtractor


class FirstPartyProxyStrategy:
    """POSTs ``{"url": ...}`` and expects ``{"success": bool, "html": str}``.

    A missing or broken endpoint is a skip, not an error.
    """

    name = "first_party_proxy"

    def __init__(
        self,
        client: PageClient,
        extractor: PlayerHTMLExtractor,
        endpoint: str,
        logger: StructuredLogger,
    ) -> None:
        self.client = client
        self.extractor = extractor
        self.endpoint = endpoint
        self.logger = logger

    async def attempt(self, source_url: str, external_id: int, deadline: Deadline) -> StrategyOutcome:
        if not self.endpoint:
            return StrategyOutcome.failure(FailureReason.NOT_CONFIGURED, "no first-party proxy")

        try:
            response = await self.client.post_json(self.endpoint, {"url": source_url}, deadline)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self.logger.warning(lambda: "server-proxy-unavailable", extra={"error": str(e)})
            return StrategyOutcome.failure(failure_for(e), str(e))

        if not response.is_success:
            return StrategyOutcome.failure(FailureReason.HTTP_STATUS, f"status={response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            return StrategyOutcome.failure(FailureReason.ENVELOPE_PARSE_FAILURE, str(e))
        if not isinstance(payload, dict) or not payload.get("success") or not isinstance(payload.get("html"), str):
            return StrategyOutcome.failure(FailureReason.ENVELOPE_PARSE_FAILURE, "proxy reported no html")

        record = self.extractor.extract(payload["html"], external_id)
        if record is None:
            return StrategyOutcome.failure(FailureReason.WEAK_SIGNAL_EXTRACTION, "first_party_proxy")
        self.logger.success(lambda: "server-proxy-ok", extra={"external_id": external_id})
        return StrategyOutcome.success(record)
