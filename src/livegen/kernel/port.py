from __future__ import annotations

import threading
from collections.abc import Callable

from livegen.kernel.errors import PropagationOverflowError
from livegen.kernel.sanitizers import to_float

Sanitizer = Callable[[object], object]

DEFAULT_MAX_DEPTH = 200

# Nesting of update() calls on this thread; callbacks re-entering update() count too.
_propagation = threading.local()


class Port:
    """Named reactive cell holding a sanitized value.

    ``update`` stores the sanitized value, pushes it synchronously to every
    subscriber (depth-first, in subscription order) and finally runs the
    optional callback. Cyclic wiring is bounded by ``max_depth`` and surfaces
    as ``PropagationOverflowError``.
    """

    __slots__ = ("name", "value", "sanitizer", "callback", "subscribers", "wired", "max_depth")

    def __init__(
        self,
        name: str,
        default: object = 0.0,
        sanitizer: Sanitizer | None = to_float,
        callback: Callable[[], None] | None = None,
        *,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        if max_depth < 1:
            raise ValueError("Port.max_depth must be >= 1")
        self.name = name
        self.sanitizer = sanitizer
        self.value = sanitizer(default) if sanitizer is not None else default
        self.callback = callback
        self.subscribers: list[Port] = []
        self.wired = False
        self.max_depth = max_depth

    def update(self, raw: object) -> None:
        depth = getattr(_propagation, "depth", 0)
        if depth >= self.max_depth:
            raise PropagationOverflowError(self.name, self.max_depth)
        _propagation.depth = depth + 1
        try:
            value = self.sanitizer(raw) if self.sanitizer is not None else raw
            self.value = value
            # Snapshot so a subscriber wired during propagation waits for the next update.
            for subscriber in tuple(self.subscribers):
                subscriber.update(value)
            if self.callback is not None:
                self.callback()
        finally:
            _propagation.depth = depth

    def add_listener(self, other: Port) -> None:
        # Not idempotent: the same pair wired twice propagates twice.
        self.subscribers.append(other)
        self.wired = True
        other.wired = True

    def __repr__(self) -> str:
        return f"Port({self.name!r}, value={self.value!r}, wired={self.wired})"


def wire(source: Port, destination: Port) -> None:
    source.add_listener(destination)
