from __future__ import annotations

import pytest

from livegen.adapters.clock import FrameClock, MonotonicClock
from livegen.adapters.keyboard import KeyStateKeyboard


def test_monotonic_clock_starts_near_zero_and_never_decreases() -> None:
    clock = MonotonicClock()
    first = clock.now()
    second = clock.now()
    assert 0.0 <= first <= second


def test_frame_clock_moves_only_on_advance() -> None:
    clock = FrameClock(100.0)
    assert clock.now() == 100.0
    clock.advance(16.5)
    assert clock.now() == 116.5
    with pytest.raises(ValueError):
        clock.advance(-1)


def test_keyboard_tracks_held_keys_by_code() -> None:
    keyboard = KeyStateKeyboard(["a"])
    assert keyboard.is_key_down(ord("A"))
    keyboard.press("space")
    keyboard.release("a")
    assert keyboard.held == frozenset({32})
