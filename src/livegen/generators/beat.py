from __future__ import annotations

from collections import deque
from collections.abc import Sequence

from livegen.kernel.environment import Environment
from livegen.kernel.errors import AnomalyKind, ValueAnomaly, ValueAnomalyError
from livegen.kernel.generator import Generator, PortSpec

FIRE_SYMBOLS = frozenset({"x", "^", "*"})


class BeatGenerator(Generator):
    """Step sequencer driven by a cyclic pattern such as ``"x--x--x--"``.

    Every ``60000 / bpm`` milliseconds the front symbol is consumed: ``x``,
    ``^`` and ``*`` fire (``out := in``), anything else rests (``out := 0``).
    The consumed symbol is rotated to the back, so the pattern loops.
    """

    PORTS = (
        PortSpec("pattern", "x--x--x--", None),
        PortSpec("in", 1.0),
        PortSpec("bpm", 120.0),
        PortSpec("out", 0.0),
    )

    def __init__(self, name: str, env: Environment) -> None:
        super().__init__(name, env)
        self.last = env.clock.now()
        self._sequence: deque[object] | None = None
        self.ports["pattern"].callback = self._reset_sequence

    @property
    def sequence(self) -> list[object]:
        return list(self._symbols())

    def step(self) -> None:
        p = self.ports
        bpm = p["bpm"].value
        if not self.report_non_finite(bpm=bpm) or bpm <= 0:
            return
        period = 60000.0 / bpm
        symbols = self._symbols()
        now = self.env.clock.now()
        if now < self.last + period:
            return
        self.last = now
        if not symbols:
            return
        symbol = symbols.popleft()
        symbols.append(symbol)
        if symbol in FIRE_SYMBOLS:
            p["out"].update(p["in"].value)
        else:
            p["out"].update(0.0)

    def _reset_sequence(self) -> None:
        self._sequence = None

    def _symbols(self) -> deque[object]:
        # Built lazily from the pattern value; any update of the pattern port discards it.
        if self._sequence is None:
            pattern = self.ports["pattern"].value
            # Strings split into single-character symbols.
            if isinstance(pattern, Sequence) and all(isinstance(symbol, str) for symbol in pattern):
                self._sequence = deque(pattern)
            else:
                raise ValueAnomalyError(
                    ValueAnomaly(
                        kind=AnomalyKind.UNSUPPORTED_TYPE,
                        generator=self.name,
                        port="pattern",
                        value=pattern,
                        details={"expected": "string or sequence of string symbols"},
                    )
                )
        return self._sequence
