"""
rate_limit.py — Per-client sliding-window rate limiting
========================================================
Each client identifier gets one admitted request per window, measured
from its last admitted request; a full window later it is admitted again.
Expired entries are purged on every admit.
"""
from __future__ import annotations

import logging
import time
from threading import Lock
from typing import Callable, Dict, Optional

from fastapi import Request

logger = logging.getLogger(__name__)

UNKNOWN_CLIENT = "unknown"
DEFAULT_WINDOW_MS = 5000


def _now_ms() -> int:
    return int(time.time() * 1000)


def client_id_from_request(request: Request, header_name: str) -> str:
    """Client identity is the connecting-IP header set by the edge proxy.

    Clients without it all share the ``"unknown"`` bucket.
    """
    return request.headers.get(header_name) or UNKNOWN_CLIENT


class SlidingWindowRateLimiter:
    def __init__(
        self,
        window_ms: int = DEFAULT_WINDOW_MS,
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        self.window_ms = window_ms
        self._clock = clock or _now_ms
        self._lock = Lock()
        self._last_seen: Dict[str, int] = {}

    def __len__(self) -> int:
        with self._lock:
            return len(self._last_seen)

    def check(self, client_id: str) -> bool:
        """Return True (and record the request) if ``client_id`` is admitted."""
        now = self._clock()
        with self._lock:
            last = self._last_seen.get(client_id)
            if last is not None and now - last < self.window_ms:
                logger.debug("Rate limited client=%s elapsed_ms=%d", client_id, now - last)
                return False

            self._last_seen[client_id] = now
            expired = [k for k, ts in self._last_seen.items() if now - ts >= self.window_ms]
            for k in expired:
                del self._last_seen[k]
            return True

    def last_seen(self, client_id: str) -> Optional[int]:
        with self._lock:
            return self._last_seen.get(client_id)

    def reset(self) -> None:
        """Forget every tracked client."""
        with self._lock:
            self._last_seen.clear()
