from .errors import (
    AnomalyKind,
    BuildError,
    CycleError,
    DuplicateGeneratorError,
    MalformedStatementError,
    PropagationOverflowError,
    UnknownGeneratorError,
    UnknownPortError,
    UnknownVariantError,
    ValueAnomaly,
    ValueAnomalyError,
)
from .port import DEFAULT_MAX_DEPTH, Port, wire
from .environment import AnomalyRecorder, Environment
from .generator import Generator, PortSpec
from .registry import Registry
from .graph_builder import GeneratorFactory, GraphBuilder
from .scheduler import Scheduler, TickReport
from .session import LiveSession

# Kernel exports: ports, generator contract, graph construction and per-frame execution.
__all__ = [
    "AnomalyKind",
    "AnomalyRecorder",
    "BuildError",
    "CycleError",
    "DEFAULT_MAX_DEPTH",
    "DuplicateGeneratorError",
    "Environment",
    "Generator",
    "GeneratorFactory",
    "GraphBuilder",
    "LiveSession",
    "MalformedStatementError",
    "Port",
    "PortSpec",
    "PropagationOverflowError",
    "Registry",
    "Scheduler",
    "TickReport",
    "UnknownGeneratorError",
    "UnknownPortError",
    "UnknownVariantError",
    "ValueAnomaly",
    "ValueAnomalyError",
    "wire",
]
