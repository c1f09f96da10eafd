from __future__ import annotations

import math

from livegen.interfaces.renderer import BLACK
from livegen.kernel.environment import Environment
from livegen.kernel.generator import Generator, PortSpec


def wrap_coordinate(v: float) -> float:
    """Fold a logical coordinate into the drawable range.

    Values below -1 snap to 1 and values above 1 snap to -1; the result is
    then reduced with a sign-preserving remainder modulo 1. Both bounds
    therefore land on the origin (``wrap_coordinate(1) == wrap_coordinate(-1) == 0``),
    as do ``1.5`` and ``-1.5``. Values strictly inside (-1, 1) are unchanged.
    """
    if v < -1.0:
        v = 1.0
    elif v > 1.0:
        v = -1.0
    # + 0.0 turns -0.0 into 0.0.
    return math.fmod(v, 1.0) + 0.0


class PixelGenerator(Generator):
    PORTS = (
        PortSpec("x", 0.0),
        PortSpec("y", 0.0),
        PortSpec("r", 1.0),
        PortSpec("g", 1.0),
        PortSpec("b", 1.0),
    )

    def step(self) -> None:
        p = self.ports
        x, y = p["x"].value, p["y"].value
        if not self.report_non_finite(x=x, y=y):
            return
        color = (abs(p["r"].value), abs(p["g"].value), abs(p["b"].value))
        self.env.renderer.plot_pixel(wrap_coordinate(x), wrap_coordinate(y), color)


class LineGenerator(Generator):
    # Draws from last step's position to this step's; the first step only records a position.
    PORTS = (
        PortSpec("x", 0.0),
        PortSpec("y", 0.0),
        PortSpec("r", 1.0),
        PortSpec("g", 1.0),
        PortSpec("b", 1.0),
    )

    def __init__(self, name: str, env: Environment) -> None:
        super().__init__(name, env)
        self.last_x = 0.0
        self.last_y = 0.0
        self.first = True

    def step(self) -> None:
        p = self.ports
        x, y = p["x"].value, p["y"].value
        if not self.report_non_finite(x=x, y=y):
            return
        if not self.first:
            renderer = self.env.renderer
            renderer.push()
            try:
                renderer.draw_line(
                    wrap_coordinate(self.last_x),
                    wrap_coordinate(self.last_y),
                    wrap_coordinate(x),
                    wrap_coordinate(y),
                    (p["r"].value, p["g"].value, p["b"].value),
                )
            finally:
                renderer.pop()
        self.last_x = x
        self.last_y = y
        self.first = False


class ClearGenerator(Generator):
    PORTS = (
        PortSpec("x", -3.0),
        PortSpec("y", -3.0),
        PortSpec("w", 4.0),
        PortSpec("h", 4.0),
        PortSpec("trig", 0.0),
    )

    def step(self) -> None:
        p = self.ports
        trig = p["trig"].value
        if not self.report_non_finite(trig=trig) or not trig > 0:
            return
        x, y, w, h = (p[name].value for name in ("x", "y", "w", "h"))
        # A rectangle with a non-finite edge is skipped, like an off-range pixel.
        if not self.report_non_finite(x=x, y=y, w=w, h=h):
            return
        renderer = self.env.renderer
        renderer.push()
        try:
            renderer.fill_rect(x, y, w, h, BLACK)
        finally:
            renderer.pop()


class RotateGenerator(Generator):
    # Rotation accumulates on the renderer transform until the frame ends.
    PORTS = (PortSpec("r", 0.0),)

    def step(self) -> None:
        r = self.ports["r"].value
        if not self.report_non_finite(r=r):
            return
        self.env.renderer.apply_rotation(r)
