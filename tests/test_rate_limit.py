"""Unit tests for storerate.core.rate_limit: fixed-window counter and middleware."""

import unittest

from fastapi import FastAPI
from fastapi.testclient import TestClient

from storerate.core.rate_limit import RateLimiter, RateLimitMiddleware


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class TestRateLimiter(unittest.TestCase):
    """Requests beyond max_requests within a window are refused until it rolls over."""

    def test_allows_up_to_limit_then_refuses(self) -> None:
        clock = FakeClock()
        limiter = RateLimiter(max_requests=3, window_sec=60, clock=clock)
        for _ in range(3):
            self.assertEqual(limiter.hit("1.2.3.4"), (True, 0))
        allowed, retry_after = limiter.hit("1.2.3.4")
        self.assertFalse(allowed)
        self.assertEqual(retry_after, 60)

    def test_keys_are_independent(self) -> None:
        limiter = RateLimiter(max_requests=1, window_sec=60, clock=FakeClock())
        self.assertTrue(limiter.hit("a")[0])
        self.assertFalse(limiter.hit("a")[0])
        self.assertTrue(limiter.hit("b")[0])

    def test_window_rolls_over(self) -> None:
        clock = FakeClock()
        limiter = RateLimiter(max_requests=1, window_sec=10, clock=clock)
        self.assertTrue(limiter.hit("a")[0])
        clock.now += 4
        allowed, retry_after = limiter.hit("a")
        self.assertFalse(allowed)
        self.assertEqual(retry_after, 6)
        clock.now += 6
        self.assertTrue(limiter.hit("a")[0])

    def test_reset_clears_counters(self) -> None:
        limiter = RateLimiter(max_requests=1, window_sec=60, clock=FakeClock())
        limiter.hit("a")
        self.assertFalse(limiter.hit("a")[0])
        limiter.reset()
        self.assertTrue(limiter.hit("a")[0])

    def test_expired_windows_are_dropped(self) -> None:
        clock = FakeClock()
        limiter = RateLimiter(max_requests=5, window_sec=10, clock=clock)
        for i in range(10_000):
            limiter.hit(f"10.0.{i // 256}.{i % 256}")
        self.assertEqual(limiter.tracked_keys(), 10_000)
        clock.now += 1000
        limiter.hit("fresh")
        self.assertEqual(limiter.tracked_keys(), 1)

    def test_sweep_keeps_live_windows(self) -> None:
        clock = FakeClock()
        limiter = RateLimiter(max_requests=1, window_sec=10, clock=clock)
        limiter.hit("old")
        clock.now += 5
        limiter.hit("live")
        clock.now += 6
        limiter.hit("other")
        self.assertEqual(limiter.tracked_keys(), 2)
        self.assertFalse(limiter.hit("live")[0])


class TestRateLimitMiddleware(unittest.TestCase):
    def test_returns_429_with_retry_after(self) -> None:
        app = FastAPI()
        app.add_middleware(
            RateLimitMiddleware,
            limiter=RateLimiter(max_requests=2, window_sec=30, clock=FakeClock()),
        )

        @app.get("/ping")
        def ping() -> dict[str, str]:
            return {"pong": "ok"}

        client = TestClient(app)
        self.assertEqual(client.get("/ping").status_code, 200)
        self.assertEqual(client.get("/ping").status_code, 200)
        resp = client.get("/ping")
        self.assertEqual(resp.status_code, 429)
        self.assertEqual(resp.headers["Retry-After"], "30")
        self.assertIn("Too many requests", resp.json()["detail"])


if __name__ == "__main__":
    unittest.main()
