from __future__ import annotations

from dataclasses import dataclass, field

from livegen.kernel.environment import Environment
from livegen.kernel.errors import PropagationOverflowError, ValueAnomaly, ValueAnomalyError
from livegen.kernel.registry import Registry
from livegen.observability.logging import LogMessage


@dataclass(frozen=True, slots=True)
class TickReport:
    # Outcome of one frame: how many steps ran, which anomalies surfaced, and a fatal failure if any.
    frame: int
    stepped: int
    anomalies: tuple[ValueAnomaly, ...] = ()
    failure: PropagationOverflowError | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


@dataclass(slots=True)
class Scheduler:
    # Scheduler steps every generator once per frame, in registration order.
    # Cross-generator effects happen inside a step through port propagation, never through ordering here.
    env: Environment
    frame: int = field(default=0)

    def tick(self, registry: Registry) -> TickReport:
        self.frame += 1
        stepped = 0
        failure: PropagationOverflowError | None = None
        for generator in registry:
            stepped += 1
            try:
                generator.step()
            except ValueAnomalyError as exc:
                # Value anomalies never stop the frame; the next generator still runs.
                self.env.anomalies.record(exc.anomaly)
            except PropagationOverflowError as exc:
                # Runaway propagation is fatal for this frame only.
                failure = exc
                break

        report = TickReport(
            frame=self.frame,
            stepped=stepped,
            anomalies=tuple(self.env.anomalies.drain()),
            failure=failure,
        )
        if failure is not None:
            self.env.log_sink.emit(
                LogMessage(
                    level="error",
                    message="tick aborted",
                    fields={"frame": self.frame, "port": failure.port, "error": str(failure)},
                )
            )
        return report
