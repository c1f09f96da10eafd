from .arithmetic import MathGenerator, ValueGenerator, divide, modulo
from .beat import FIRE_SYMBOLS, BeatGenerator
from .diagnostics import LOG_PORT_COUNT, LogGenerator
from .drawing import ClearGenerator, LineGenerator, PixelGenerator, RotateGenerator, wrap_coordinate
from .gate import GateGenerator
from .kinds import VARIANTS, GeneratorKind, create_generator
from .oscillators import TickGenerator, TrigGenerator

__all__ = [
    "BeatGenerator",
    "ClearGenerator",
    "FIRE_SYMBOLS",
    "GateGenerator",
    "GeneratorKind",
    "LOG_PORT_COUNT",
    "LineGenerator",
    "LogGenerator",
    "MathGenerator",
    "PixelGenerator",
    "RotateGenerator",
    "TickGenerator",
    "TrigGenerator",
    "VARIANTS",
    "ValueGenerator",
    "create_generator",
    "divide",
    "modulo",
    "wrap_coordinate",
]
