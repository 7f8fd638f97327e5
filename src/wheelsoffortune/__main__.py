"""Command-line interface."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn, Optional, Sequence

from wheelsoffortune.config import DEFAULT_FPS, DEFAULT_HEIGHT, DEFAULT_WIDTH, apply_overrides, load_config
from wheelsoffortune.logging_config import parse_level, setup_logging

logger = logging.getLogger("wheelsoffortune")


def _handle_qt_import_error(exc: ImportError) -> NoReturn:
    """Exit with a helpful message when the Qt bindings cannot be imported."""
    message_lines = [
        "Cannot start Wheels of Fortune: importing PySide6 failed.",
        "Check that PySide6 is installed and the system OpenGL libraries are available.",
        f"Original error: {exc}",
    ]
    raise SystemExit("\n".join(message_lines)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wheelsoffortune",
        description="Generative wheels that blow away into particles and come back.",
    )
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="initial window width in pixels")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="initial window height in pixels")
    parser.add_argument("--wheels", type=int, default=None, help="number of wheels to place")
    parser.add_argument("--fps", type=int, default=DEFAULT_FPS, help="frames per second")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random generator")
    parser.add_argument("--config", default=None, help="JSON file with configuration overrides")
    parser.add_argument("--log-level", default="info", help="debug, info, warning or error")
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        setup_logging(level=parse_level(args.log_level), log_file=args.log_file)
        config = load_config(args.config)
        if args.wheels is not None:
            config = apply_overrides(config, {"wheel_count": args.wheels})
    except ValueError as e:
        raise SystemExit(f"Configuration error: {e}") from e

    if args.fps <= 0 or args.width <= 0 or args.height <= 0:
        raise SystemExit("Configuration error: --width, --height and --fps must be positive.")

    try:
        from wheelsoffortune.main import run
    except ImportError as exc:  # pragma: no cover - environment dependent
        _handle_qt_import_error(exc)

    return run(config=config, width=args.width, height=args.height, fps=args.fps, seed=args.seed)


if __name__ == "__main__":
    sys.exit(main())
