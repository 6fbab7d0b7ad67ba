"""Relay-fetch strategy: fetch the profile through public relays."""
from __future__ import annotations

import json
from typing import Optional, Sequence

import httpx

from core.logging.logger import StructuredLogger
from domain.entities import Deadline, RelayEndpoint, StrategyOutcome
from domain.enums import FailureReason
from infrastructure.api.page_client import PageClient, failure_for
from infrastructure.parsing import PlayerHTMLExtractor


class EnvelopeParseError(ValueError):
    """A relay's JSON envelope did not contain the expected markup."""


def unwrap_envelope(body: str, field: str) -> str:
    try:
        payload = json.loads(body)
    except ValueError as e:
        raise EnvelopeParseError(f"envelope is not JSON: {e}") from e
    markup = payload.get(field) if isinstance(payload, dict) else None
    if not isinstance(markup, str):
        raise EnvelopeParseError(f"envelope has no string '{field}' field")
    return markup


class RelayFetchStrategy:
    """Tries each relay in order; a failing relay is skipped, never retried."""

    name = "relay"

    def __init__(
        self,
        client: PageClient,
        extractor: PlayerHTMLExtractor,
        relays: Sequence[RelayEndpoint],
        logger: StructuredLogger,
    ) -> None:
        self.client = client
        self.extractor = extractor
        self.relays = list(relays)
        self.logger = logger

    async def attempt(self, source_url: str, external_id: int, deadline: Deadline) -> StrategyOutcome:
        if not self.relays:
            return StrategyOutcome.failure(FailureReason.NOT_CONFIGURED, "no relays configured")

        last: Optional[StrategyOutcome] = None
        for relay in self.relays:
            last = await self._try_relay(relay, source_url, external_id, deadline)
            if last.succeeded:
                self.logger.success(lambda: f"relay-ok {relay.host}", extra={"external_id": external_id})
                return last
            self.logger.warning(
                lambda: f"relay-failed {relay.host}",
                extra={"reason": last.reason.value if last.reason else None, "detail": last.detail},
            )
        return last

    async def _try_relay(
        self, relay: RelayEndpoint, source_url: str, external_id: int, deadline: Deadline
    ) -> StrategyOutcome:
        self.logger.info(lambda: f"relay-try {relay.host}")
        try:
            response = await self.client.get(relay.build_url(source_url), deadline)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            return StrategyOutcome.failure(failure_for(e), str(e))

        if not response.is_success:
            return StrategyOutcome.failure(FailureReason.HTTP_STATUS, f"status={response.status_code}")

        markup = response.text
        if relay.envelope:
            try:
                markup = unwrap_envelope(markup, relay.envelope)
            except EnvelopeParseError as e:
                return StrategyOutcome.failure(FailureReason.ENVELOPE_PARSE_FAILURE, str(e))

        record = self.extractor.extract(markup, external_id)
        if record is None:
            return StrategyOutcome.failure(FailureReason.WEAK_SIGNAL_EXTRACTION, relay.host)
        return StrategyOutcome.success(record)
