from __future__ import annotations

from livegen.kernel.generator import Generator, PortSpec
from livegen.kernel.port import Port
from livegen.observability.logging import LogMessage

LOG_PORT_COUNT = 10


class LogGenerator(Generator):
    # Bank of untyped ports; only wired entries are reported so idle slots stay quiet.
    PORTS = tuple(PortSpec(f"value{i}", None, None) for i in range(LOG_PORT_COUNT))

    @property
    def values(self) -> tuple[Port, ...]:
        return tuple(self.ports[f"value{i}"] for i in range(LOG_PORT_COUNT))

    def value(self, index: int) -> Port:
        if not 0 <= index < LOG_PORT_COUNT:
            raise IndexError(f"log port index must be in [0, {LOG_PORT_COUNT})")
        return self.ports[f"value{index}"]

    def step(self) -> None:
        for port in self.values:
            if not port.wired:
                continue
            self.env.log_sink.emit(
                LogMessage(
                    level="info",
                    message=f"{port.name} : {port.value!r}",
                    fields={"generator": self.name, "port": port.name, "value": port.value},
                )
            )
