from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field

from livegen.kernel.scheduler import TickReport
from livegen.kernel.session import LiveSession


@dataclass(slots=True)
class FrameDriver:
    # Calls session.tick() exactly once per frame at a fixed cadence.
    # There is no catch-up: a slow frame simply delays the next one.
    session: LiveSession
    frame_rate: float = 200.0
    pace: bool = True
    sleep: Callable[[float], None] = time.sleep
    monotonic: Callable[[], float] = time.monotonic
    on_frame: Callable[[TickReport], None] | None = None
    reports: list[TickReport] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.frame_rate <= 0:
            raise ValueError("FrameDriver.frame_rate must be > 0")

    def run(self, frames: int) -> list[TickReport]:
        if frames < 0:
            raise ValueError("frames must be >= 0")
        period = 1.0 / self.frame_rate
        reports: list[TickReport] = []
        for _ in range(frames):
            started = self.monotonic()
            report = self.session.tick()
            reports.append(report)
            if self.on_frame is not None:
                self.on_frame(report)
            if self.pace:
                remaining = period - (self.monotonic() - started)
                if remaining > 0:
                    self.sleep(remaining)
        self.reports.extend(reports)
        return reports
