from __future__ import annotations

from enum import Enum
from types import MappingProxyType

from livegen.generators.arithmetic import MathGenerator, ValueGenerator
from livegen.generators.beat import BeatGenerator
from livegen.generators.diagnostics import LogGenerator
from livegen.generators.drawing import ClearGenerator, LineGenerator, PixelGenerator, RotateGenerator
from livegen.generators.gate import GateGenerator
from livegen.generators.oscillators import TickGenerator, TrigGenerator
from livegen.kernel.environment import Environment
from livegen.kernel.errors import UnknownVariantError
from livegen.kernel.generator import Generator


class GeneratorKind(str, Enum):
    # Variant codes as written in scripts. Adding a variant means adding a case here.
    TICK = "Tick"
    TRIG = "Trig"
    MATH = "Math"
    PIXEL = "Pixel"
    VALUE = "Value"
    LOG = "Log"
    LINE = "Line"
    GATE = "Gate"
    CLEAR = "Clear"
    ROTATE = "Rotate"
    BEATS = "Beats"

    @classmethod
    def parse(cls, code: str) -> GeneratorKind:
        try:
            return cls(code)
        except ValueError:
            raise UnknownVariantError(code) from None


VARIANTS: MappingProxyType[GeneratorKind, type[Generator]] = MappingProxyType(
    {
        GeneratorKind.TICK: TickGenerator,
        GeneratorKind.TRIG: TrigGenerator,
        GeneratorKind.MATH: MathGenerator,
        GeneratorKind.PIXEL: PixelGenerator,
        GeneratorKind.VALUE: ValueGenerator,
        GeneratorKind.LOG: LogGenerator,
        GeneratorKind.LINE: LineGenerator,
        GeneratorKind.GATE: GateGenerator,
        GeneratorKind.CLEAR: ClearGenerator,
        GeneratorKind.ROTATE: RotateGenerator,
        GeneratorKind.BEATS: BeatGenerator,
    }
)


def create_generator(code: str | GeneratorKind, name: str, env: Environment) -> Generator:
    kind = code if isinstance(code, GeneratorKind) else GeneratorKind.parse(code)
    return VARIANTS[kind](name, env)
