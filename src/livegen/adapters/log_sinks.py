from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import TextIO

from livegen.interfaces.log_sink import LogSink
from livegen.observability.logging import LogMessage, log_to_dict


class StdoutLogSink(LogSink):
    # One compact JSON object per line on stdout (or any text stream).
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def emit(self, message: LogMessage) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(_encode(message) + "\n")


class JsonlLogSink(LogSink):
    # File-backed sink; appends so successive sessions share one log.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self._path.open("a", encoding="utf-8")

    def emit(self, message: LogMessage) -> None:
        self._file.write(_encode(message) + "\n")
        self._file.flush()

    def close(self) -> None:
        self._file.close()


class MemoryLogSink(LogSink):
    # Keeps messages in order; used by embedding hosts that render their own console.
    def __init__(self) -> None:
        self.messages: list[LogMessage] = []

    def emit(self, message: LogMessage) -> None:
        self.messages.append(message)


def _encode(message: LogMessage) -> str:
    # Port values can be arbitrary objects; fall back to repr for anything non-JSON.
    return json.dumps(log_to_dict(message), separators=(",", ":"), ensure_ascii=False, default=repr)
