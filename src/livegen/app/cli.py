from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

import numpy as np

from livegen.adapters.raster_surface import RasterSurface
from livegen.app.composition_root import build_runtime
from livegen.app.driver import FrameDriver
from livegen.config.loader import ConfigError, load_engine_config, load_script


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="livegen", description="Run a generator script headlessly")
    parser.add_argument("--script", required=True, help="Path to YAML statement list")
    parser.add_argument("--config", help="Path to YAML engine config")
    parser.add_argument("--frames", type=int, default=1, help="Number of frames to run")
    parser.add_argument("--output", help="Save the final framebuffer to this .npy file")
    parser.add_argument("--no-pace", action="store_true", help="Run frames back to back")
    return parser


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    # Parse CLI arguments; caller passes argv for testability.
    return build_parser().parse_args(argv)


def run(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        config = load_engine_config(Path(args.config) if args.config else None)
        statements = load_script(Path(args.script))
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    runtime = build_runtime(config)
    try:
        if not runtime.session.rebuild(statements):
            print(f"error: {runtime.session.error}", file=sys.stderr)
            return 1

        driver = FrameDriver(
            runtime.session,
            frame_rate=config.engine.frame_rate,
            pace=not args.no_pace,
        )
        driver.run(args.frames)

        if args.output:
            renderer = runtime.env.renderer
            if not isinstance(renderer, RasterSurface):
                raise TypeError("--output requires the raster surface renderer")
            np.save(Path(args.output), renderer.pixels)
        return 0
    finally:
        # File-backed log sinks hold an open handle.
        close = getattr(runtime.env.log_sink, "close", None)
        if callable(close):
            close()
