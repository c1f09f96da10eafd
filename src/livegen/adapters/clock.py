from __future__ import annotations

import time

from livegen.interfaces.clock import Clock


class MonotonicClock(Clock):
    # Milliseconds since the clock was created, from time.monotonic().
    def __init__(self) -> None:
        self._origin = time.monotonic()

    def now(self) -> float:
        return (time.monotonic() - self._origin) * 1000.0


class FrameClock(Clock):
    # Deterministic clock for headless runs: time only moves when advance() is called.
    def __init__(self, start_ms: float = 0.0) -> None:
        self._now = start_ms

    def now(self) -> float:
        return self._now

    def advance(self, delta_ms: float) -> None:
        if delta_ms < 0:
            raise ValueError("FrameClock cannot move backwards")
        self._now += delta_ms
