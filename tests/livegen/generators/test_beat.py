from __future__ import annotations

import pytest

from livegen.generators.beat import BeatGenerator
from livegen.kernel.errors import AnomalyKind, ValueAnomalyError


def _beat(env, pattern: object) -> BeatGenerator:
    beat = BeatGenerator("b", env)
    beat.port("pattern").update(pattern)
    beat.port("in").update(0.8)
    beat.port("bpm").update(120)  # one symbol every 500 ms
    return beat


def test_beat_waits_for_one_period(env, clock) -> None:
    beat = _beat(env, "x-")
    clock.advance(499)
    beat.step()
    assert beat.port("out").value == 0.0
    assert beat.sequence == ["x", "-"]


def test_beat_cycles_pattern_and_alternates_fire_rest(env, clock) -> None:
    beat = _beat(env, "x-")
    outs = []
    sequences = []
    for _ in range(4):
        clock.advance(500)
        beat.step()
        outs.append(beat.port("out").value)
        sequences.append("".join(beat.sequence))
    assert outs == [0.8, 0.0, 0.8, 0.0]
    # After two firing ticks the pattern is back in its original order.
    assert sequences == ["-x", "x-", "-x", "x-"]


def test_beat_pattern_port_keeps_written_value(env, clock) -> None:
    beat = _beat(env, "x-")
    clock.advance(500)
    beat.step()
    assert beat.port("pattern").value == "x-"


def test_beat_new_pattern_restarts_sequence(env, clock) -> None:
    beat = _beat(env, "x--")
    clock.advance(500)
    beat.step()
    beat.port("pattern").update("*-")
    assert beat.sequence == ["*", "-"]


def test_beat_accepts_symbol_sequences(env, clock) -> None:
    beat = _beat(env, ["^", "-"])
    clock.advance(500)
    beat.step()
    assert beat.port("out").value == 0.8


def test_beat_non_positive_bpm_never_fires(env, clock) -> None:
    beat = _beat(env, "x")
    beat.port("bpm").update(0)
    clock.advance(10_000)
    beat.step()
    assert beat.port("out").value == 0.0


def test_beat_unsupported_pattern_raises_value_anomaly(env, clock) -> None:
    beat = _beat(env, 12)
    clock.advance(500)
    with pytest.raises(ValueAnomalyError) as exc_info:
        beat.step()
    assert exc_info.value.anomaly.kind is AnomalyKind.UNSUPPORTED_TYPE
    assert exc_info.value.anomaly.port == "pattern"


def test_beat_pattern_items_must_be_strings(env, clock) -> None:
    # Unhashable symbols are rejected up front instead of failing the membership test.
    beat = _beat(env, [["x"], "-"])
    clock.advance(500)
    with pytest.raises(ValueAnomalyError) as exc_info:
        beat.step()
    assert exc_info.value.anomaly.kind is AnomalyKind.UNSUPPORTED_TYPE
