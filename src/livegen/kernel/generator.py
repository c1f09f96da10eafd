from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import ClassVar

from livegen.kernel.environment import Environment
from livegen.kernel.errors import AnomalyKind, UnknownPortError, ValueAnomaly
from livegen.kernel.port import Port, Sanitizer
from livegen.kernel.sanitizers import to_float


@dataclass(frozen=True, slots=True)
class PortSpec:
    # Static port declaration: variants list these in the order ports are created.
    name: str
    default: object = 0.0
    sanitizer: Sanitizer | None = to_float


class Generator:
    """Stepped unit owning a fixed, ordered set of named ports.

    Subclasses declare ``PORTS`` and implement ``step``. Whether a port acts
    as an input or an output is a convention of the variant; any port can be
    the source or destination of a wire.
    """

    PORTS: ClassVar[tuple[PortSpec, ...]] = ()

    def __init__(self, name: str, env: Environment) -> None:
        self.name = name
        self.env = env
        self._ports: dict[str, Port] = {
            spec.name: Port(
                spec.name,
                spec.default,
                spec.sanitizer,
                max_depth=env.max_propagation_depth,
            )
            for spec in self.PORTS
        }

    @property
    def ports(self) -> Mapping[str, Port]:
        return self._ports

    def port(self, name: str) -> Port:
        try:
            return self._ports[name]
        except KeyError:
            raise UnknownPortError(self.name, name) from None

    def step(self) -> None:
        # Default step does nothing; must be safe before any wiring exists.
        return None

    def report(self, kind: AnomalyKind, port: str, value: object, **details: object) -> None:
        self.env.anomalies.record(
            ValueAnomaly(kind=kind, generator=self.name, port=port, value=value, details=dict(details))
        )

    def report_non_finite(self, **values: float) -> bool:
        # Records one anomaly per non-finite value; returns True when all values are finite.
        finite = True
        for port, value in values.items():
            if not math.isfinite(value):
                self.report(AnomalyKind.NON_FINITE, port, value)
                finite = False
        return finite

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"
