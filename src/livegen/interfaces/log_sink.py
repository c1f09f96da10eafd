from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from livegen.observability.logging import LogMessage


# LogSink receives structured diagnostics from generators and engine lifecycle events.
@runtime_checkable
class LogSink(Protocol):
    def emit(self, message: "LogMessage") -> None:
        """Consume one LogMessage."""
        raise NotImplementedError("LogSink is a port; use a concrete adapter.")
