from .clock import Clock
from .keyboard import Keyboard
from .log_sink import LogSink
from .renderer import BLACK, Color, Renderer

# Interfaces for the collaborators the engine drives but does not own.
__all__ = ["BLACK", "Clock", "Color", "Keyboard", "LogSink", "Renderer"]
