from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from livegen.adapters.clock import MonotonicClock
from livegen.adapters.keyboard import KeyStateKeyboard
from livegen.adapters.log_sinks import JsonlLogSink, StdoutLogSink
from livegen.adapters.raster_surface import RasterSurface
from livegen.config.models import EngineConfig, LoggingSection
from livegen.generators.kinds import create_generator
from livegen.interfaces.clock import Clock
from livegen.interfaces.keyboard import Keyboard
from livegen.interfaces.log_sink import LogSink
from livegen.interfaces.renderer import Renderer
from livegen.kernel.environment import Environment
from livegen.kernel.graph_builder import GraphBuilder
from livegen.kernel.session import LiveSession


@dataclass(frozen=True, slots=True)
class AppRuntime:
    # Bundle of the live session and the collaborators it was wired with.
    session: LiveSession
    env: Environment
    config: EngineConfig


def build_log_sink(section: LoggingSection) -> LogSink:
    if section.sink == "jsonl":
        assert section.path is not None
        return JsonlLogSink(Path(section.path))
    return StdoutLogSink()


def build_runtime(
    config: EngineConfig,
    *,
    renderer: Renderer | None = None,
    clock: Clock | None = None,
    keyboard: Keyboard | None = None,
    log_sink: LogSink | None = None,
) -> AppRuntime:
    # Composition root: collaborators default to the headless adapters; hosts pass their own.
    env = Environment(
        renderer=renderer if renderer is not None else RasterSurface(config.surface.width, config.surface.height),
        clock=clock if clock is not None else MonotonicClock(),
        keyboard=keyboard if keyboard is not None else KeyStateKeyboard(),
        log_sink=log_sink if log_sink is not None else build_log_sink(config.logging),
        max_propagation_depth=config.engine.max_propagation_depth,
    )
    builder = GraphBuilder(factory=create_generator, env=env, allow_cycles=config.engine.allow_cycles)
    return AppRuntime(session=LiveSession(builder), env=env, config=config)
