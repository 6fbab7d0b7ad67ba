"""In-memory, process-lifetime cache of player records."""
from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from domain.entities import PlayerRecord


@dataclass(slots=True)
class CacheEntry:
    key: int
    data: PlayerRecord
    stored_at: float


@dataclass(frozen=True)
class CacheStats:
    size: int
    keys: List[int]

    def to_dict(self) -> dict:
        return {"size": self.size, "keys": list(self.keys)}


class PlayerCache:
    """Player records keyed by external id, expired lazily on read."""

    def __init__(self, ttl_s: float = 3600.0, *, clock: Callable[[], float] = time.time) -> None:
        self.ttl_s = ttl_s
        self._clock = clock
        self._entries: Dict[int, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: int) -> Optional[PlayerRecord]:
        """Return the cached record, or None when missing or older than the TTL."""
        with self._lock:
            entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.stored_at >= self.ttl_s:
            # left in place; the next put for this key overwrites it
            return None
        return entry.data

    def put(self, key: int, record: PlayerRecord) -> None:
        """Store a record, replacing any previous entry for the key."""
        with self._lock:
            self._entries[key] = CacheEntry(key=key, data=record, stored_at=self._clock())

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def stats(self) -> CacheStats:
        with self._lock:
            keys = list(self._entries.keys())
        return CacheStats(size=len(keys), keys=keys)
