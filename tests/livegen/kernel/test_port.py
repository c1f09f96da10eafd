from __future__ import annotations

import math

import pytest

from livegen.kernel.errors import PropagationOverflowError
from livegen.kernel.port import Port, wire
from livegen.kernel.sanitizers import to_float


def test_port_default_is_sanitized() -> None:
    # The stored default is the sanitizer output, not the raw default.
    port = Port("p", "2.5")
    assert port.value == 2.5


def test_port_without_sanitizer_stores_verbatim() -> None:
    marker = object()
    port = Port("p", None, None)
    port.update(marker)
    assert port.value is marker


@pytest.mark.parametrize("raw", [3, "4.25", "7abc", True, "nope", None, [1]])
def test_update_stores_sanitizer_output_regardless_of_prior_state(raw) -> None:
    port = Port("p", 10.0)
    port.update(99.0)
    port.update(raw)
    expected = to_float(raw)
    if math.isnan(expected):
        assert math.isnan(port.value)
    else:
        assert port.value == expected


def test_add_listener_marks_both_ports_wired() -> None:
    a = Port("a")
    b = Port("b")
    c = Port("c")
    assert not a.wired and not b.wired
    a.add_listener(b)
    assert a.wired and b.wired
    assert not c.wired


def test_wired_never_reverts() -> None:
    # No operation turns wired back off, including further updates.
    a = Port("a")
    b = Port("b")
    wire(a, b)
    a.update(1)
    b.update(2)
    a.subscribers.clear()
    assert a.wired and b.wired


def test_propagation_is_synchronous_and_sanitized_by_destination() -> None:
    a = Port("a", None, None)
    b = Port("b")
    wire(a, b)
    a.update("5")
    # a stores verbatim, b applies its own sanitizer before update() returned.
    assert a.value == "5"
    assert b.value == 5.0


def test_propagation_is_transitive_for_chains() -> None:
    ports = [Port(f"p{i}") for i in range(6)]
    for src, dst in zip(ports, ports[1:]):
        wire(src, dst)
    ports[0].update(3)
    assert [p.value for p in ports] == [3.0] * 6


def test_fanout_is_depth_first_in_subscription_order() -> None:
    order: list[str] = []
    a = Port("a")
    b = Port("b", callback=lambda: order.append("b"))
    c = Port("c", callback=lambda: order.append("c"))
    d = Port("d", callback=lambda: order.append("d"))
    wire(a, b)
    wire(b, d)
    wire(a, c)
    a.update(1)
    # b's subtree (d) completes before the next sibling (c); callbacks run after fan-out.
    assert order == ["d", "b", "c"]


def test_callback_runs_after_value_committed_and_fanout() -> None:
    seen: list[tuple[float, float]] = []
    a = Port("a")
    b = Port("b")
    a.callback = lambda: seen.append((a.value, b.value))
    wire(a, b)
    a.update(4)
    assert seen == [(4.0, 4.0)]


def test_duplicate_wiring_propagates_twice() -> None:
    hits: list[float] = []
    a = Port("a")
    b = Port("b")
    b.callback = lambda: hits.append(b.value)
    wire(a, b)
    wire(a, b)
    a.update(1)
    assert hits == [1.0, 1.0]


def test_cycle_raises_propagation_overflow() -> None:
    a = Port("a", max_depth=50)
    b = Port("b", max_depth=50)
    wire(a, b)
    wire(b, a)
    with pytest.raises(PropagationOverflowError) as exc_info:
        a.update(1)
    assert exc_info.value.depth == 50


def test_self_loop_raises_propagation_overflow() -> None:
    a = Port("a", max_depth=10)
    wire(a, a)
    with pytest.raises(PropagationOverflowError):
        a.update(1)


def test_depth_resets_after_overflow() -> None:
    # A failed propagation must not leave depth accounting behind for later updates.
    a = Port("a", max_depth=5)
    wire(a, a)
    with pytest.raises(PropagationOverflowError):
        a.update(1)
    chain = [Port(f"c{i}", max_depth=5) for i in range(5)]
    for src, dst in zip(chain, chain[1:]):
        wire(src, dst)
    chain[0].update(2)
    assert chain[-1].value == 2.0


def test_chain_at_depth_limit_succeeds() -> None:
    chain = [Port(f"c{i}", max_depth=4) for i in range(4)]
    for src, dst in zip(chain, chain[1:]):
        wire(src, dst)
    chain[0].update(1)
    assert chain[-1].value == 1.0


def test_max_depth_must_be_positive() -> None:
    with pytest.raises(ValueError):
        Port("p", max_depth=0)
