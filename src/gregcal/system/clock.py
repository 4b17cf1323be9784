from __future__ import annotations

import time
from typing import Protocol, Tuple


class ClockSource(Protocol):
    def now(self) -> Tuple[int, int]:
        """Current instant as (seconds since 1970-01-01 UTC, millisecond of the second)."""
        ...


class SystemClock:
    """ClockSource backed by the OS realtime clock."""

    def now(self) -> Tuple[int, int]:
        ns = time.time_ns()
        seconds, rem = divmod(ns, 1_000_000_000)
        return seconds, rem // 1_000_000


class FixedClock:
    """ClockSource that always returns the same instant."""

    def __init__(self, seconds: int, millis: int = 0):
        self.seconds = seconds
        self.millis = millis

    def now(self) -> Tuple[int, int]:
        return self.seconds, self.millis
