"""Tests for FixedWindowRateLimiter."""
from infrastructure.api import FixedWindowRateLimiter


class TestFixedWindowRateLimiter:

    def test_allows_up_to_max_then_denies(self, clock):
        limiter = FixedWindowRateLimiter(max_requests=10, window_s=60, clock=clock)
        results = [limiter.try_acquire() for _ in range(10)]
        assert all(results)
        assert limiter.try_acquire() is False

    def test_denied_attempt_is_not_counted(self, clock):
        limiter = FixedWindowRateLimiter(max_requests=2, window_s=60, clock=clock)
        limiter.try_acquire()
        limiter.try_acquire()
        limiter.try_acquire()
        limiter.try_acquire()
        assert limiter.status().request_count == 2

    def test_window_resets_after_it_elapses(self, clock):
        limiter = FixedWindowRateLimiter(max_requests=1, window_s=60, clock=clock)
        assert limiter.try_acquire() is True
        clock.advance(30)
        assert limiter.try_acquire() is False
        clock.advance(31)
        assert limiter.try_acquire() is True
        assert limiter.status().request_count == 1

    def test_reset_only_strictly_after_window_end(self, clock):
        limiter = FixedWindowRateLimiter(max_requests=1, window_s=60, clock=clock)
        limiter.try_acquire()
        clock.advance(60)
        assert limiter.try_acquire() is False

    def test_status_snapshot(self, clock):
        limiter = FixedWindowRateLimiter(max_requests=10, window_s=60, clock=clock)
        limiter.try_acquire()
        status = limiter.status()
        assert status.request_count == 1
        assert status.max_requests == 10
        assert status.window_reset_at == clock.now + 60
        assert status.to_dict()["request_count"] == 1
