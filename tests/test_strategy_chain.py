"""Tests for FetchStrategyChain ordering, short-circuit and isolation."""
import asyncio

import pytest

from application.services import FetchStrategyChain
from domain.entities import Deadline, PlayerRecord, StrategyOutcome
from domain.enums import FailureReason, RecordOrigin
from domain.interfaces import FetchStrategy


class ScriptedStrategy:
    """Strategy double that returns, raises or hangs as told."""

    def __init__(self, name, *, record=None, raises=None, delay=0.0):
        self.name = name
        self.record = record
        self.raises = raises
        self.delay = delay
        self.calls = []

    async def attempt(self, source_url, external_id, deadline):
        self.calls.append((source_url, external_id, deadline))
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.raises:
            raise self.raises
        if self.record is None:
            return StrategyOutcome.failure(FailureReason.NETWORK_FAILURE, "scripted")
        return StrategyOutcome.success(self.record)


def _record(name="Scripted"):
    return PlayerRecord(source_id=1, origin=RecordOrigin.LIVE_PARSE, name=name)


class TestFetchStrategyChain:

    def test_doubles_satisfy_protocol(self):
        assert isinstance(ScriptedStrategy("x"), FetchStrategy)

    @pytest.mark.asyncio
    async def test_short_circuits_on_first_record(self, logger):
        first = ScriptedStrategy("relay", record=_record("First"))
        rest = [ScriptedStrategy(n, record=_record(n)) for n in ("direct", "first_party_proxy", "url_structural")]
        chain = FetchStrategyChain([first, *rest], logger)

        record = await chain.resolve("u", 1)

        assert record.name == "First"
        assert len(first.calls) == 1
        assert all(not s.calls for s in rest)

    @pytest.mark.asyncio
    async def test_runs_in_order_until_success(self, logger):
        a = ScriptedStrategy("a")
        b = ScriptedStrategy("b")
        c = ScriptedStrategy("c", record=_record("C"))
        d = ScriptedStrategy("d", record=_record("D"))
        chain = FetchStrategyChain([a, b, c, d], logger)

        record, attempts = await chain.resolve_with_outcomes("u", 1)

        assert record.name == "C"
        assert [name for name, _ in attempts] == ["a", "b", "c"]
        assert not d.calls

    @pytest.mark.asyncio
    async def test_each_attempt_gets_its_own_deadline(self, logger):
        a = ScriptedStrategy("a")
        b = ScriptedStrategy("b")
        chain = FetchStrategyChain([a, b], logger, timeout_s=10.0)
        await chain.resolve("u", 1)
        deadline_a = a.calls[0][2]
        deadline_b = b.calls[0][2]
        assert isinstance(deadline_a, Deadline)
        assert deadline_a is not deadline_b
        assert 0 < deadline_b.remaining() <= 10.0

    @pytest.mark.asyncio
    async def test_exception_does_not_abort_chain(self, logger):
        boom = ScriptedStrategy("boom", raises=RuntimeError("parse exploded"))
        ok = ScriptedStrategy("ok", record=_record("OK"))
        chain = FetchStrategyChain([boom, ok], logger)

        record, attempts = await chain.resolve_with_outcomes("u", 1)

        assert record.name == "OK"
        assert attempts[0][1].reason is FailureReason.UNEXPECTED_ERROR

    @pytest.mark.asyncio
    async def test_timeout_cancels_attempt_and_continues(self, logger):
        slow = ScriptedStrategy("slow", record=_record("Slow"), delay=5.0)
        fast = ScriptedStrategy("fast", record=_record("Fast"))
        chain = FetchStrategyChain([slow, fast], logger, timeout_s=0.05)

        record, attempts = await chain.resolve_with_outcomes("u", 1)

        assert record.name == "Fast"
        assert attempts[0][1].reason is FailureReason.TIMEOUT

    @pytest.mark.asyncio
    async def test_all_fail_returns_none(self, logger):
        chain = FetchStrategyChain([ScriptedStrategy("a"), ScriptedStrategy("b")], logger)
        assert await chain.resolve("u", 1) is None

    @pytest.mark.asyncio
    async def test_metrics_hook_receives_events(self, logger):
        events = []
        chain = FetchStrategyChain(
            [ScriptedStrategy("a"), ScriptedStrategy("b", record=_record())],
            logger,
            metrics_hook=lambda name, payload: events.append((name, payload["strategy"])),
        )
        await chain.resolve("u", 1)
        assert events == [("strategy_failed", "a"), ("strategy_succeeded", "b")]

    @pytest.mark.asyncio
    async def test_broken_metrics_hook_is_ignored(self, logger):
        def hook(name, payload):
            raise ValueError("sink down")

        chain = FetchStrategyChain([ScriptedStrategy("a", record=_record())], logger, metrics_hook=hook)
        assert await chain.resolve("u", 1) is not None
