from __future__ import annotations

import math

from livegen.kernel.generator import Generator, PortSpec


def divide(a: float, b: float) -> float:
    # IEEE-style division: x/0 is a signed infinity, 0/0 and nan/0 are nan.
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def modulo(a: float, b: float) -> float:
    # Truncated remainder (sign of the dividend); x % 0 is nan.
    if b == 0.0 or math.isinf(a) or math.isnan(a) or math.isnan(b):
        return math.nan
    if math.isinf(b):
        return a
    return math.fmod(a, b)


class MathGenerator(Generator):
    PORTS = (
        PortSpec("a", 0.0),
        PortSpec("b", 0.0),
        PortSpec("aPlusB", 0.0),
        PortSpec("aTimesB", 0.0),
        PortSpec("aMinusB", 0.0),
        PortSpec("aOverB", 0.0),
        PortSpec("aModB", 0.0),
    )

    def step(self) -> None:
        p = self.ports
        a = p["a"].value
        b = p["b"].value
        results = {
            "aPlusB": a + b,
            "aTimesB": a * b,
            "aMinusB": a - b,
            "aOverB": divide(a, b),
            "aModB": modulo(a, b),
        }
        self.report_non_finite(**results)
        for name, value in results.items():
            p[name].update(value)


class ValueGenerator(Generator):
    # Re-emits its own value every step so a constant keeps flowing down its wires.
    PORTS = (PortSpec("value", 0.0),)

    def step(self) -> None:
        port = self.ports["value"]
        port.update(port.value)
