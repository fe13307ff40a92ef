# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from functools import wraps
from threading import Lock

from flask import Request, jsonify, request

from launchpad.shared.config import load_config
from launchpad.shared.logging import logger


@dataclass
class Window:
    count: int
    reset_at: float


class FixedWindowRateLimiter:
    """Counts hits per key inside fixed windows.

    Process-local: every worker keeps its own counters, so the effective limit
    scales with the number of instances. A shared store with atomic increment
    and TTL is needed for multi-instance deployments.
    """

    def __init__(
        self,
        limit: int,
        window_seconds: float,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._limit = max(1, int(limit))
        self._window = max(0.1, float(window_seconds))
        self._clock = clock
        self._windows: dict[str, Window] = {}
        self._lock = Lock()

    def allow(self, key: str) -> bool:
        now = self._clock()
        with self._lock:
            current = self._windows.get(key)
            if current is None or now >= current.reset_at:
                self._windows[key] = Window(count=1, reset_at=now + self._window)
                return True
            if current.count >= self._limit:
                return False
            current.count += 1
            return True

    def clear(self) -> None:
        with self._lock:
            self._windows.clear()


_LIMITERS: list[FixedWindowRateLimiter] = []


def reset_rate_limits() -> None:
    for limiter in _LIMITERS:
        limiter.clear()


def build_rate_limit_key(parts: Iterable[str | None]) -> str:
    return ":".join(part for part in parts if isinstance(part, str) and part)


def _client_key(req: Request) -> str:
    forwarded = req.headers.get("X-Forwarded-For", "").split(",")[0].strip()
    return forwarded or (req.remote_addr or "unknown")


def rate_limit(limit: int, window_seconds: float):
    limiter = FixedWindowRateLimiter(limit, window_seconds)
    _LIMITERS.append(limiter)

    def decorator(f: Callable):
        @wraps(f)
        def wrapper(*args, **kwargs):
            if not load_config().security.enable_rate_limit:
                return f(*args, **kwargs)
            key = build_rate_limit_key([_client_key(request), request.path])
            if not limiter.allow(key):
                logger.warning(f"rate_limit: rejected {request.method} {request.path}")
                return jsonify({"error": "rate_limited"}), 429
            return f(*args, **kwargs)

        return wrapper

    return decorator


__all__ = [
    "FixedWindowRateLimiter",
    "build_rate_limit_key",
    "rate_limit",
    "reset_rate_limits",
]
