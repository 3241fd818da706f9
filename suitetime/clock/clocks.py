from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    def now(self) -> float: ...


class MonotonicClock:
    def now(self) -> float:
        return time.monotonic()


class WallClock:
    def now(self) -> float:
        return time.time()


class ManualClock:
    """Clock that only moves when told to."""

    def __init__(self, start: float = 0.0):
        self._now = start

    def now(self) -> float:
        return self._now

    def set(self, now: float) -> None:
        if now < self._now:
            raise ValueError(f"Cannot move a clock backwards: {self._now} -> {now}")
        self._now = now

    def advance(self, delta: float) -> float:
        if delta < 0:
            raise ValueError(f"Cannot move a clock backwards: {delta}")
        self._now += delta
        return self._now
