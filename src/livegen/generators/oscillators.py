from __future__ import annotations

import math

from livegen.kernel.errors import AnomalyKind
from livegen.kernel.generator import Generator, PortSpec


class TickGenerator(Generator):
    # Ramp oscillator: advances by incr each step, jumping to the opposite bound on overflow.
    PORTS = (
        PortSpec("tick", -1.0),
        PortSpec("min", -1.0),
        PortSpec("max", 1.0),
        PortSpec("incr", 0.01),
    )

    def step(self) -> None:
        p = self.ports
        low = p["min"].value
        high = p["max"].value
        t = p["tick"].value + p["incr"].value
        if t >= high:
            t = low
        elif t <= low:
            t = high
        # NaN fails both bound checks and keeps propagating.
        self.report_non_finite(tick=t)
        p["tick"].update(t)


class TrigGenerator(Generator):
    # Phase is derived from wall-clock time so every Trig with the same frequency is in sync.
    PORTS = (
        PortSpec("frequency", 10.0),
        PortSpec("sin", 0.0),
        PortSpec("cos", 0.0),
        PortSpec("tan", 0.0),
    )

    def step(self) -> None:
        p = self.ports
        frequency = p["frequency"].value
        phase = self.env.clock.now() * 2 * math.pi / 1000 * frequency
        finite = self.report_non_finite(frequency=frequency)
        if finite and not math.isfinite(phase):
            # A finite but huge frequency can still overflow the phase.
            self.report(AnomalyKind.NON_FINITE, "frequency", frequency, phase=phase)
            finite = False
        if not finite:
            # sin/cos of a non-finite phase are undefined; keep propagating NaN.
            p["sin"].update(math.nan)
            p["cos"].update(math.nan)
            p["tan"].update(math.nan)
            return
        p["sin"].update(math.sin(phase))
        p["cos"].update(math.cos(phase))
        p["tan"].update(math.tan(phase))
