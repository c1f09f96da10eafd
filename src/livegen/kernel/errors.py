from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class BuildError(ValueError):
    # Base error for graph rebuild failures; the previous registry stays active.
    def __init__(self, message: str, *, statement_index: int | None = None) -> None:
        if statement_index is not None:
            message = f"statements[{statement_index}]: {message}"
        super().__init__(message)
        self.statement_index = statement_index


class MalformedStatementError(BuildError):
    # Raised when a statement does not match the declare/connect shapes.
    pass


class UnknownVariantError(BuildError):
    # Raised when a declaration names a variant code outside GeneratorKind.
    def __init__(self, code: str, *, statement_index: int | None = None) -> None:
        super().__init__(f"unknown generator variant '{code}'", statement_index=statement_index)
        self.code = code


class DuplicateGeneratorError(BuildError):
    # Instance names are unique within one build.
    def __init__(self, name: str, *, statement_index: int | None = None) -> None:
        super().__init__(f"generator '{name}' is already declared", statement_index=statement_index)
        self.name = name


class UnknownGeneratorError(BuildError):
    def __init__(self, name: str, *, statement_index: int | None = None) -> None:
        super().__init__(f"unknown generator '{name}'", statement_index=statement_index)
        self.name = name


class UnknownPortError(BuildError):
    def __init__(self, generator: str, port: str, *, statement_index: int | None = None) -> None:
        super().__init__(f"generator '{generator}' has no port '{port}'", statement_index=statement_index)
        self.generator = generator
        self.port = port


class CycleError(BuildError):
    # Raised only when the builder is configured to reject cyclic wiring.
    pass


class PropagationOverflowError(RuntimeError):
    # Raised when a subscriber chain exceeds the configured propagation depth.
    def __init__(self, port: str, depth: int) -> None:
        super().__init__(f"propagation depth {depth} exceeded at port '{port}' (cyclic wiring?)")
        self.port = port
        self.depth = depth


class AnomalyKind(str, Enum):
    # Runtime value anomalies are non-fatal: values keep flowing through the graph.
    NON_FINITE = "NON_FINITE"
    UNSUPPORTED_TYPE = "UNSUPPORTED_TYPE"


@dataclass(frozen=True, slots=True)
class ValueAnomaly:
    kind: AnomalyKind
    generator: str
    port: str
    value: object = None
    details: dict[str, object] = field(default_factory=dict)


class ValueAnomalyError(ArithmeticError):
    # Raised by a step that cannot use a port value; the scheduler records it and moves on.
    def __init__(self, anomaly: ValueAnomaly) -> None:
        super().__init__(
            f"{anomaly.kind.value} value {anomaly.value!r} at {anomaly.generator}.{anomaly.port}"
        )
        self.anomaly = anomaly
