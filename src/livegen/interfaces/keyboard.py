from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Keyboard(Protocol):
    def is_key_down(self, code: int) -> bool:
        """Return True while the key with the given code is held."""
        raise NotImplementedError("Keyboard is a port; use a concrete adapter.")
