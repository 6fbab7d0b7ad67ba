from __future__ import annotations

import asyncio
import time
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from core.logging.logger import StructuredLogger
from domain.entities import Deadline, PlayerRecord, StrategyOutcome
from domain.enums import FailureReason
from domain.interfaces import FetchStrategy


MetricsHook = Callable[[str, Dict[str, Any]], None]
Attempt = Tuple[str, StrategyOutcome]


class FetchStrategyChain:
    """Runs strategies one after another until one yields a record."""

    def __init__(
        self,
        strategies: Sequence[FetchStrategy],
        logger: StructuredLogger,
        *,
        timeout_s: float = 10.0,
        metrics_hook: Optional[MetricsHook] = None,
    ) -> None:
        """Initialize chain with an ordered strategy list and per-strategy timeout."""
        self.strategies = list(strategies)
        self.logger = logger
        self.timeout_s = timeout_s
        self.metrics_hook = metrics_hook

    async def resolve(self, source_url: str, external_id: int) -> Optional[PlayerRecord]:
        """Return the first record any strategy produces, else None."""
        record, _ = await self.resolve_with_outcomes(source_url, external_id)
        return record

    async def resolve_with_outcomes(
        self, source_url: str, external_id: int
    ) -> Tuple[Optional[PlayerRecord], List[Attempt]]:
        """Like resolve, but also report what each attempted strategy returned."""
        attempts: List[Attempt] = []
        for strategy in self.strategies:
            outcome = await self._run(strategy, source_url, external_id)
            attempts.append((strategy.name, outcome))
            if outcome.succeeded:
                return outcome.record, attempts
        self.logger.warning(
            lambda: f"all-strategies-failed {source_url}",
            extra={"attempts": [(n, o.reason.value if o.reason else None) for n, o in attempts]},
        )
        return None, attempts

    async def _run(self, strategy: FetchStrategy, source_url: str, external_id: int) -> StrategyOutcome:
        name = getattr(strategy, "name", type(strategy).__name__)
        deadline = Deadline.after(self.timeout_s)
        start = time.perf_counter()
        self.logger.info(lambda: f"strategy-start {name}", extra={"external_id": external_id})
        try:
            outcome = await asyncio.wait_for(
                strategy.attempt(source_url, external_id, deadline),
                timeout=self.timeout_s,
            )
        except asyncio.TimeoutError:
            outcome = StrategyOutcome.failure(FailureReason.TIMEOUT, f"exceeded {self.timeout_s}s")
        except Exception as e:
            outcome = StrategyOutcome.failure(FailureReason.UNEXPECTED_ERROR, str(e))
        if not isinstance(outcome, StrategyOutcome):
            outcome = StrategyOutcome.failure(FailureReason.UNEXPECTED_ERROR, f"{name} returned {outcome!r}")

        dur_ms = int((time.perf_counter() - start) * 1000.0)
        if outcome.succeeded:
            self.logger.success(lambda: f"strategy-ok {name}", extra={"execution_time_ms": dur_ms})
            self._metric("strategy_succeeded", {"strategy": name, "latency_ms": dur_ms})
        else:
            reason = outcome.reason.value if outcome.reason else None
            self.logger.warning(
                lambda: f"strategy-failed {name}",
                extra={"reason": reason, "detail": outcome.detail, "execution_time_ms": dur_ms},
            )
            self._metric("strategy_failed", {"strategy": name, "reason": reason, "latency_ms": dur_ms})
        return outcome

    def _metric(self, name: str, payload: Dict[str, Any]) -> None:
        if self.metrics_hook:
            try:
                self.metrics_hook(name, payload)
            except Exception as e:
                self.logger.debug(lambda: f"metrics-hook-failed {name}", extra={"error": str(e)})
