from __future__ import annotations

import math

import numpy as np

from livegen.interfaces.renderer import BLACK, Color, Renderer

_IDENTITY = np.eye(3, dtype=np.float64)


class RasterSurface(Renderer):
    """Headless numpy framebuffer implementing the renderer interface.

    Logical coordinates span [-1, 1] on both axes with the origin at the
    centre; ``(x, y)`` maps to pixel column ``(x + 1) * width / 2`` and row
    ``(y + 1) * height / 2``. Rotations compose onto a 3x3 affine transform
    that ``push``/``pop`` save and restore and ``begin_frame`` resets.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError("RasterSurface width/height must be >= 1")
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.float32)
        self._transform = _IDENTITY.copy()
        self._stack: list[np.ndarray] = []

    @property
    def transform(self) -> np.ndarray:
        return self._transform.copy()

    def begin_frame(self) -> None:
        self._transform = _IDENTITY.copy()
        self._stack.clear()

    def push(self) -> None:
        self._stack.append(self._transform.copy())

    def pop(self) -> None:
        if not self._stack:
            raise IndexError("pop() without matching push()")
        self._transform = self._stack.pop()

    def apply_rotation(self, angle: float) -> None:
        c, s = math.cos(angle), math.sin(angle)
        rotation = np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])
        self._transform = self._transform @ rotation

    def clear_surface(self, color: Color = BLACK) -> None:
        self.pixels[:, :] = _clip(color)

    def plot_pixel(self, x: float, y: float, color: Color) -> None:
        col, row = self._to_pixel(np.array([[x, y]]))[0]
        self._set(np.array([row]), np.array([col]), color)

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, color: Color) -> None:
        ends = self._to_pixel(np.array([[x1, y1], [x2, y2]]))
        (c1, r1), (c2, r2) = ends
        count = int(max(abs(c2 - c1), abs(r2 - r1))) + 1
        cols = np.rint(np.linspace(c1, c2, count)).astype(np.int64)
        rows = np.rint(np.linspace(r1, r2, count)).astype(np.int64)
        self._set(rows, cols, color)

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color = BLACK) -> None:
        # Test every pixel centre against the rectangle in logical (pre-transform) space.
        rows, cols = np.mgrid[0 : self.height, 0 : self.width]
        lx = (cols + 0.5) * 2.0 / self.width - 1.0
        ly = (rows + 0.5) * 2.0 / self.height - 1.0
        points = np.stack([lx.ravel(), ly.ravel(), np.ones(lx.size)])
        local = np.linalg.inv(self._transform) @ points
        x0, x1 = sorted((x, x + w))
        y0, y1 = sorted((y, y + h))
        inside = (local[0] >= x0) & (local[0] <= x1) & (local[1] >= y0) & (local[1] <= y1)
        mask = inside.reshape(self.height, self.width)
        self.pixels[mask] = _clip(color)

    def _to_pixel(self, points: np.ndarray) -> np.ndarray:
        homogeneous = np.hstack([points, np.ones((len(points), 1))])
        logical = (self._transform @ homogeneous.T).T[:, :2]
        cols = (logical[:, 0] + 1.0) * self.width / 2.0
        rows = (logical[:, 1] + 1.0) * self.height / 2.0
        return np.stack([np.floor(cols), np.floor(rows)], axis=1)

    def _set(self, rows: np.ndarray, cols: np.ndarray, color: Color) -> None:
        rows = rows.astype(np.int64)
        cols = cols.astype(np.int64)
        # Off-surface points are dropped, not clamped.
        keep = (rows >= 0) & (rows < self.height) & (cols >= 0) & (cols < self.width)
        self.pixels[rows[keep], cols[keep]] = _clip(color)


def _clip(color: Color) -> np.ndarray:
    rgb = np.asarray(color, dtype=np.float32)
    return np.clip(np.nan_to_num(rgb, nan=0.0), 0.0, 1.0)
