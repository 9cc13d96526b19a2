"""Blunt global per-IP request cap (fixed window, in-process counters)."""

import logging
import math
import threading
import time
from collections.abc import Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

logger = logging.getLogger(__name__)


class RateLimiter:
    """Counts hits per key in fixed windows of window_sec seconds."""

    def __init__(
        self,
        max_requests: int,
        window_sec: int,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.max_requests = max_requests
        self.window_sec = window_sec
        self._clock = clock
        self._windows: dict[str, tuple[float, int]] = {}
        self._last_sweep = clock()
        self._lock = threading.Lock()

    def _sweep(self, now: float) -> None:
        # Caller holds the lock. Runs at most once per window.
        if now - self._last_sweep < self.window_sec:
            return
        self._windows = {
            k: v for k, v in self._windows.items() if now - v[0] < self.window_sec
        }
        self._last_sweep = now

    def hit(self, key: str) -> tuple[bool, int]:
        """
        Record one request for key.

        Returns (allowed, retry_after_seconds); retry_after is 0 when allowed.
        Expired windows of other keys are dropped along the way.
        """
        now = self._clock()
        with self._lock:
            self._sweep(now)
            started, count = self._windows.get(key, (now, 0))
            if now - started >= self.window_sec:
                started, count = now, 0
            count += 1
            self._windows[key] = (started, count)
            if count > self.max_requests:
                return False, max(1, math.ceil(started + self.window_sec - now))
            return True, 0

    def reset(self) -> None:
        with self._lock:
            self._windows.clear()
            self._last_sweep = self._clock()

    def tracked_keys(self) -> int:
        with self._lock:
            return len(self._windows)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Reject requests with 429 once a client IP exceeds its window budget."""

    def __init__(self, app, limiter: RateLimiter) -> None:
        super().__init__(app)
        self.limiter = limiter

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        client_ip = request.client.host if request.client else "unknown"
        allowed, retry_after = self.limiter.hit(client_ip)
        if not allowed:
            logger.warning("Rate limit exceeded for %s", client_ip)
            return JSONResponse(
                status_code=429,
                content={"detail": "Too many requests, please try again later."},
                headers={"Retry-After": str(retry_after)},
            )
        return await call_next(request)
