from __future__ import annotations

import time
from typing import Protocol

__all__ = ["Clock", "FixedClock", "SystemClock"]


class Clock(Protocol):
    def now_millis(self) -> int:
        """Returns the current unix time in milliseconds."""
        ...


class SystemClock(Clock):
    def now_millis(self) -> int:
        return time.time_ns() // 1_000_000


class FixedClock(Clock):
    """Clock frozen at a given instant, mainly useful for tests and examples."""

    def __init__(self, now_millis: int) -> None:
        if now_millis < 0:
            raise ValueError("time must be >= 0")
        self._now_millis = now_millis

    @classmethod
    def from_seconds(cls, seconds: float) -> FixedClock:
        return cls(int(seconds * 1000))

    def now_millis(self) -> int:
        return self._now_millis

    def advance(self, millis: int) -> None:
        self._now_millis += millis
