# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import math
import threading
import time
from collections import deque
from collections.abc import Callable
from functools import wraps
from http import HTTPStatus

from flask import jsonify, request

from cookbook.shared.logging import logger

from .request_logger import client_ip


class InMemoryRateLimiter:
    """Sliding-window counter per key, kept in process memory."""

    def __init__(self, limit: int, window_seconds: float) -> None:
        self.limit = max(1, int(limit))
        self.window = max(0.1, float(window_seconds))
        self._hits: dict[str, deque[float]] = {}
        self._last_sweep = float("-inf")
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._hits)

    def _expire(self, hits: deque[float], now: float) -> None:
        while hits and now - hits[0] > self.window:
            hits.popleft()

    def _sweep(self, now: float) -> None:
        # drop keys whose hits all left the window, at most once per window
        if now - self._last_sweep < self.window:
            return
        self._last_sweep = now
        for key in list(self._hits):
            hits = self._hits[key]
            self._expire(hits, now)
            if not hits:
                del self._hits[key]

    def allow(self, key: str, *, now: float | None = None) -> bool:
        now = time.monotonic() if now is None else now
        with self._lock:
            self._sweep(now)
            hits = self._hits.setdefault(key, deque())
            self._expire(hits, now)
            if len(hits) >= self.limit:
                return False
            hits.append(now)
            return True

    def retry_after(self, key: str, *, now: float | None = None) -> int:
        """Whole seconds until ``key`` may hit again; 0 when it already may."""
        now = time.monotonic() if now is None else now
        with self._lock:
            hits = self._hits.get(key)
            if not hits:
                return 0
            self._expire(hits, now)
            if not hits:
                del self._hits[key]
                return 0
            if len(hits) < self.limit:
                return 0
            return max(1, math.ceil(hits[0] + self.window - now))


def rate_limit(limit: int, window_seconds: float):
    limiter = InMemoryRateLimiter(limit, window_seconds)

    def decorator(view: Callable):
        @wraps(view)
        def wrapper(*args, **kwargs):
            key = f"{request.path}|{client_ip()}"
            if limiter.allow(key):
                return view(*args, **kwargs)

            logger.warning(f"rate_limit: blocked {request.method} {request.path}")
            response = jsonify({"error": "rate_limited"})
            response.status_code = HTTPStatus.TOO_MANY_REQUESTS
            response.headers["Retry-After"] = str(limiter.retry_after(key))
            return response

        return wrapper

    return decorator


__all__ = ["InMemoryRateLimiter", "rate_limit"]
