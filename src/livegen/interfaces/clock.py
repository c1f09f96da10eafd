from __future__ import annotations

from typing import Protocol, runtime_checkable


# Clock supplies monotonic wall-clock time in milliseconds, queried fresh every step.
@runtime_checkable
class Clock(Protocol):
    def now(self) -> float:
        """Return monotonic time in milliseconds."""
        raise NotImplementedError("Clock is a port; use a concrete adapter.")
