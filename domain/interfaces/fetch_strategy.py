"""Capability shared by every fetch strategy."""
from typing import Protocol, runtime_checkable

from ..entities import Deadline, StrategyOutcome


@runtime_checkable
class FetchStrategy(Protocol):
    """One way of turning a profile URL into a PlayerRecord.

    Implementations report failure through the returned outcome; the chain
    still guards against anything they raise.
    """

    name: str

    async def attempt(self, source_url: str, external_id: int, deadline: Deadline) -> StrategyOutcome:
        ...
