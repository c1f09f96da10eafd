from __future__ import annotations

import math

from livegen.kernel.errors import AnomalyKind
from livegen.kernel.generator import Generator, PortSpec
from livegen.kernel.sanitizers import key_code, to_bool


class GateGenerator(Generator):
    # Passes `in` to `out` while the key is held; on release drops to 0 unless latching.
    PORTS = (
        PortSpec("key", "q", key_code),
        PortSpec("in", 1.0),
        PortSpec("out", 0.0),
        PortSpec("latches", False, to_bool),
    )

    def step(self) -> None:
        p = self.ports
        if self.env.keyboard.is_key_down(p["key"].value):
            value = p["in"].value
            if not math.isfinite(value):
                self.report(AnomalyKind.NON_FINITE, "in", value)
            p["out"].update(value)
        elif not p["latches"].value:
            p["out"].update(0.0)
