from __future__ import annotations

from typing import Protocol, runtime_checkable

Color = tuple[float, float, float]

BLACK: Color = (0.0, 0.0, 0.0)


# Renderer is the drawing surface used by drawing generators.
# Coordinates are in the normalized [-1, 1] space; colors are RGB triples in [0, 1].
@runtime_checkable
class Renderer(Protocol):
    def begin_frame(self) -> None:
        """Reset the transform stack at the start of a frame."""
        raise NotImplementedError("Renderer is a port; use a concrete adapter.")

    def plot_pixel(self, x: float, y: float, color: Color) -> None:
        """Set one pixel."""
        raise NotImplementedError("Renderer is a port; use a concrete adapter.")

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, color: Color) -> None:
        """Draw a line segment."""
        raise NotImplementedError("Renderer is a port; use a concrete adapter.")

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color = BLACK) -> None:
        """Fill an axis-aligned rectangle (in the current transform)."""
        raise NotImplementedError("Renderer is a port; use a concrete adapter.")

    def apply_rotation(self, angle: float) -> None:
        """Rotate the current transform by angle radians."""
        raise NotImplementedError("Renderer is a port; use a concrete adapter.")

    def push(self) -> None:
        """Save the current transform."""
        raise NotImplementedError("Renderer is a port; use a concrete adapter.")

    def pop(self) -> None:
        """Restore the last saved transform."""
        raise NotImplementedError("Renderer is a port; use a concrete adapter.")

    def clear_surface(self, color: Color = BLACK) -> None:
        """Fill the whole surface with color."""
        raise NotImplementedError("Renderer is a port; use a concrete adapter.")
