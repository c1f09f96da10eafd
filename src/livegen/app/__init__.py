from .cli import build_parser, parse_args, run
from .composition_root import AppRuntime, build_log_sink, build_runtime
from .driver import FrameDriver

# app package exports CLI helpers and composition for reuse in tests and entrypoints.
__all__ = ["AppRuntime", "FrameDriver", "build_log_sink", "build_parser", "build_runtime", "parse_args", "run"]
