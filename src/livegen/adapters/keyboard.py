from __future__ import annotations

from collections.abc import Iterable

from livegen.interfaces.keyboard import Keyboard
from livegen.kernel.sanitizers import key_code


class KeyStateKeyboard(Keyboard):
    # Key state fed by a host event loop (key down/up events), queried by Gate generators.
    def __init__(self, held: Iterable[object] = ()) -> None:
        self._held: set[int] = {key_code(key) for key in held}

    def press(self, key: object) -> None:
        self._held.add(key_code(key))

    def release(self, key: object) -> None:
        self._held.discard(key_code(key))

    def is_key_down(self, code: int) -> bool:
        return code in self._held

    @property
    def held(self) -> frozenset[int]:
        return frozenset(self._held)
