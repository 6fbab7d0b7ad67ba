"""Fixed-window limiter for outbound profile fetches."""
import threading
import time
from dataclasses import dataclass
from typing import Callable
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RateWindowState:
    """Snapshot of the current window, for observability only."""
    request_count: int
    window_reset_at: float
    max_requests: int

    def to_dict(self) -> dict:
        return {
            "request_count": self.request_count,
            "window_reset_at": self.window_reset_at,
            "max_requests": self.max_requests,
        }


class FixedWindowRateLimiter:
    """
    Hard cap of ``max_requests`` permits per ``window_s`` seconds.

      - The window resets lazily on the first check after it has elapsed.
      - A denied call is dropped: it is not counted, queued or retried.
    """

    def __init__(
        self,
        max_requests: int = 10,
        window_s: float = 60.0,
        *,
        clock: Callable[[], float] = time.time,
    ):
        self.max_requests = max_requests
        self.window_s = window_s
        self._clock = clock

        self._request_count = 0
        self._window_reset_at = 0.0
        self._lock = threading.Lock()

    def try_acquire(self) -> bool:
        with self._lock:
            now = self._clock()
            if now > self._window_reset_at:
                self._request_count = 0
                self._window_reset_at = now + self.window_s

            if self._request_count >= self.max_requests:
                logger.debug(
                    f"Rate limit: {self._request_count}/{self.max_requests} used, "
                    f"window resets in {self._window_reset_at - now:.1f}s"
                )
                return False

            self._request_count += 1
            return True

    def status(self) -> RateWindowState:
        with self._lock:
            return RateWindowState(
                request_count=self._request_count,
                window_reset_at=self._window_reset_at,
                max_requests=self.max_requests,
            )
