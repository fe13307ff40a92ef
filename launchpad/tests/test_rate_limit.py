from __future__ import annotations

from launchpad.shared.middleware.rate_limit import FixedWindowRateLimiter, build_rate_limit_key


class _Ticker:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


def test_allows_up_to_limit_inside_window() -> None:
    ticker = _Ticker()
    limiter = FixedWindowRateLimiter(3, 60, clock=ticker)

    results = [limiter.allow("ip:/path") for _ in range(5)]

    assert results == [True, True, True, False, False]


def test_window_resets() -> None:
    ticker = _Ticker()
    limiter = FixedWindowRateLimiter(1, 60, clock=ticker)

    assert limiter.allow("k") is True
    assert limiter.allow("k") is False
    ticker.now += 60
    assert limiter.allow("k") is True


def test_keys_are_independent() -> None:
    limiter = FixedWindowRateLimiter(1, 60, clock=_Ticker())

    assert limiter.allow("a") is True
    assert limiter.allow("b") is True
    assert limiter.allow("a") is False


def test_clear_forgets_counters() -> None:
    limiter = FixedWindowRateLimiter(1, 60, clock=_Ticker())
    limiter.allow("a")

    limiter.clear()

    assert limiter.allow("a") is True


def test_build_key_skips_empty_parts() -> None:
    assert build_rate_limit_key(["1.2.3.4", None, "", "/api/auth/sign-in"]) == (
        "1.2.3.4:/api/auth/sign-in"
    )
