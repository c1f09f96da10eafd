from __future__ import annotations

from collections.abc import Sequence

from livegen.interfaces.renderer import BLACK
from livegen.kernel.errors import BuildError
from livegen.kernel.graph_builder import GraphBuilder
from livegen.kernel.registry import Registry
from livegen.kernel.scheduler import Scheduler, TickReport
from livegen.observability.logging import LogMessage


class LiveSession:
    """Process-wide engine state: the active registry and the last build error.

    The session starts with an empty registry. ``rebuild`` constructs a
    complete replacement off to the side and publishes it with a single
    assignment, so a tick always sees either the old graph or the new one.
    A failed rebuild leaves the previous registry (and its wiring) in place.
    """

    def __init__(self, builder: GraphBuilder, scheduler: Scheduler | None = None) -> None:
        self._builder = builder
        self._env = builder.env
        self._scheduler = scheduler if scheduler is not None else Scheduler(builder.env)
        self._registry = Registry.empty()
        self.error: str | None = None

    @property
    def registry(self) -> Registry:
        return self._registry

    def rebuild(self, statements: Sequence[object]) -> bool:
        try:
            registry = self._builder.build(statements)
        except BuildError as exc:
            self.error = str(exc)
            self._env.log_sink.emit(
                LogMessage(
                    level="error",
                    message="rebuild failed",
                    fields={"error": self.error, "statement_index": exc.statement_index},
                )
            )
            return False

        self._registry = registry
        self.error = None
        # A new graph starts from a blank surface.
        self._env.renderer.clear_surface(BLACK)
        self._env.log_sink.emit(
            LogMessage(
                level="info",
                message="rebuild succeeded",
                fields={"generators": registry.names(), "edges": len(registry.edges())},
            )
        )
        return True

    def tick(self) -> TickReport:
        self._env.renderer.begin_frame()
        return self._scheduler.tick(self._registry)
