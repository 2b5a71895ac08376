"""
rate_limit.py — Best-effort per-client cooldown limiter.

Each client may have one request accepted per cooldown window. A request
arriving inside the window is rejected and does NOT push the window out.

State lives in process memory only. Serverless platforms recycle warm
instances and scale horizontally, so the effective global limit is weaker
than the nominal per-client window; instances never coordinate.

Wire into app (in main.py):
    from cooking_compass.core.rate_limit import limiter

    app.state.limiter = limiter

Routes read it back via request.app.state.limiter, so tests can swap in
a fresh CooldownLimiter per test.
"""

import threading
import time
from typing import Callable

from fastapi import Request

from cooking_compass.core.config import settings

UNKNOWN_CLIENT = "unknown"


class CooldownLimiter:
    """
    Tracks the last accepted request time (ms) per client identifier.

    Entries are never evicted; the map grows for the life of the process.
    The look-up-then-update in allow() runs under a lock because FastAPI
    may serve requests from several threads at once.
    """

    def __init__(
        self,
        window_ms: int = 2500,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.window_ms = window_ms
        self._clock = clock
        self._last_seen: dict[str, float] = {}
        self._lock = threading.Lock()

    def _now_ms(self) -> float:
        return self._clock() * 1000.0

    def allow(self, client_id: str) -> bool:
        """Return True and record the hit if *client_id* is outside its cooldown."""
        with self._lock:
            now = self._now_ms()
            last = self._last_seen.get(client_id)
            if last is not None and now - last < self.window_ms:
                return False
            self._last_seen[client_id] = now
            return True

    def reset(self) -> None:
        with self._lock:
            self._last_seen.clear()

    def __len__(self) -> int:
        return len(self._last_seen)


def client_identifier(request: Request, headers: list[str] | None = None) -> str:
    """
    Derive the rate-limit key for *request*.

    Checks the configured address headers in order and returns the first
    non-empty value verbatim. Falls back to "unknown", so every caller
    without those headers shares a single bucket.
    """
    for name in headers if headers is not None else settings.client_ip_headers:
        value = request.headers.get(name, "").strip()
        if value:
            return value
    return UNKNOWN_CLIENT


# Process-wide instance, attached to app.state in main.py
limiter = CooldownLimiter(window_ms=settings.rate_limit_window_ms)
