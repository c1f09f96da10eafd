from __future__ import annotations

import pytest

from livegen.adapters.clock import FrameClock
from livegen.adapters.keyboard import KeyStateKeyboard
from livegen.adapters.log_sinks import MemoryLogSink
from livegen.generators.kinds import create_generator
from livegen.interfaces.renderer import BLACK
from livegen.kernel.environment import Environment
from livegen.kernel.graph_builder import GraphBuilder
from livegen.kernel.session import LiveSession


class RecordingRenderer:
    # Renderer double that records every call in order.
    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def begin_frame(self) -> None:
        self.calls.append(("begin_frame",))

    def plot_pixel(self, x, y, color) -> None:
        self.calls.append(("plot_pixel", x, y, tuple(color)))

    def draw_line(self, x1, y1, x2, y2, color) -> None:
        self.calls.append(("draw_line", x1, y1, x2, y2, tuple(color)))

    def fill_rect(self, x, y, w, h, color=BLACK) -> None:
        self.calls.append(("fill_rect", x, y, w, h, tuple(color)))

    def apply_rotation(self, angle) -> None:
        self.calls.append(("apply_rotation", angle))

    def push(self) -> None:
        self.calls.append(("push",))

    def pop(self) -> None:
        self.calls.append(("pop",))

    def clear_surface(self, color=BLACK) -> None:
        self.calls.append(("clear_surface", tuple(color)))

    def named(self, name: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == name]


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def clock() -> FrameClock:
    return FrameClock()


@pytest.fixture
def keyboard() -> KeyStateKeyboard:
    return KeyStateKeyboard()


@pytest.fixture
def log_sink() -> MemoryLogSink:
    return MemoryLogSink()


@pytest.fixture
def env(renderer, clock, keyboard, log_sink) -> Environment:
    return Environment(renderer=renderer, clock=clock, keyboard=keyboard, log_sink=log_sink)


@pytest.fixture
def builder(env) -> GraphBuilder:
    return GraphBuilder(factory=create_generator, env=env)


@pytest.fixture
def session(builder) -> LiveSession:
    return LiveSession(builder)
