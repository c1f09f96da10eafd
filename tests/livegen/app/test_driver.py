from __future__ import annotations

import pytest

from livegen.app.driver import FrameDriver


class _FakeTime:
    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps: list[float] = []

    def monotonic(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


def test_driver_ticks_once_per_frame(session) -> None:
    fake = _FakeTime()
    driver = FrameDriver(session, frame_rate=50.0, sleep=fake.sleep, monotonic=fake.monotonic)
    reports = driver.run(3)
    assert [r.frame for r in reports] == [1, 2, 3]
    assert fake.sleeps == [pytest.approx(0.02)] * 3
    assert driver.reports == reports


def test_driver_without_pacing_never_sleeps(session) -> None:
    fake = _FakeTime()
    driver = FrameDriver(session, pace=False, sleep=fake.sleep, monotonic=fake.monotonic)
    driver.run(5)
    assert fake.sleeps == []


def test_driver_calls_frame_hook(session) -> None:
    seen: list[int] = []
    driver = FrameDriver(session, pace=False, on_frame=lambda report: seen.append(report.frame))
    driver.run(2)
    assert seen == [1, 2]


def test_driver_rejects_bad_arguments(session) -> None:
    with pytest.raises(ValueError):
        FrameDriver(session, frame_rate=0)
    with pytest.raises(ValueError):
        FrameDriver(session).run(-1)
