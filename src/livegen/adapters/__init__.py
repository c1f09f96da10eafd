from .clock import FrameClock, MonotonicClock
from .keyboard import KeyStateKeyboard
from .log_sinks import JsonlLogSink, MemoryLogSink, StdoutLogSink
from .raster_surface import RasterSurface

# Concrete collaborators for headless runs and embedding hosts.
__all__ = [
    "FrameClock",
    "JsonlLogSink",
    "KeyStateKeyboard",
    "MemoryLogSink",
    "MonotonicClock",
    "RasterSurface",
    "StdoutLogSink",
]
