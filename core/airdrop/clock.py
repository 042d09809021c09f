"""
Campaign clocks.

A clock is any zero-argument callable returning the current time as integer
unix milliseconds, the unit of block timestamps.
"""

from __future__ import annotations

import time
from typing import Callable


Clock = Callable[[], int]


class SystemClock:
    """Wall-clock time."""

    def __call__(self) -> int:
        return time.time_ns() // 1_000_000


class FixedClock:
    """A manually advanced clock for tests and simulations."""

    def __init__(self, now: int = 0) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> int:
        self.now += ms
        return self.now

    def set(self, now: int) -> None:
        self.now = now
