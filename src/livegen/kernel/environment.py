from __future__ import annotations

from dataclasses import dataclass, field

from livegen.interfaces.clock import Clock
from livegen.interfaces.keyboard import Keyboard
from livegen.interfaces.log_sink import LogSink
from livegen.interfaces.renderer import Renderer
from livegen.kernel.errors import ValueAnomaly
from livegen.kernel.port import DEFAULT_MAX_DEPTH


@dataclass(slots=True)
class AnomalyRecorder:
    # Collects non-fatal value anomalies until the scheduler drains them into a tick report.
    _pending: list[ValueAnomaly] = field(default_factory=list)

    def record(self, anomaly: ValueAnomaly) -> None:
        self._pending.append(anomaly)

    def drain(self) -> list[ValueAnomaly]:
        drained = self._pending
        self._pending = []
        return drained

    def __len__(self) -> int:
        return len(self._pending)


@dataclass(slots=True)
class Environment:
    # Collaborators shared by every generator of every build; never replaced by a rebuild.
    renderer: Renderer
    clock: Clock
    keyboard: Keyboard
    log_sink: LogSink
    max_propagation_depth: int = DEFAULT_MAX_DEPTH
    anomalies: AnomalyRecorder = field(default_factory=AnomalyRecorder)

    def __post_init__(self) -> None:
        if self.max_propagation_depth < 1:
            raise ValueError("Environment.max_propagation_depth must be >= 1")
