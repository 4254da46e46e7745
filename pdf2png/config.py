from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Sequence

from .constants import DEFAULT_DESTINATION, DEFAULT_WIDTH, LOG_LEVEL_ENV
from .errors import ConfigError
from .fs import prepare_destination
from .models import RunConfig


logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"width must be positive, got {number}")
    return number


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):  # type: ignore[override]
        self.print_usage()
        raise ConfigError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="pdf2png",
        description="Convert each page of a PDF document into a PNG image.",
    )
    parser.add_argument("--source", default="", help="Path to the source PDF document")
    parser.add_argument(
        "--destination",
        default=DEFAULT_DESTINATION,
        help="Folder where images will be stored",
    )
    parser.add_argument(
        "--width",
        type=_positive_int,
        default=DEFAULT_WIDTH,
        help="Width of the image in pixels",
    )
    parser.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Output details in JSON format",
    )
    return parser


def resolve_config(argv: Sequence[str] | None = None) -> RunConfig:
    """
    Parse and validate command-line arguments.

    Raises ConfigError when a required argument is empty, the source does not
    exist or the destination directory cannot be created.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.source or not args.destination:
        parser.print_usage()
        raise ConfigError("Both '--source' and '--destination' arguments are required.")

    source = Path(args.source)
    if not source.exists():
        raise ConfigError(f"File {source} does not exist")

    destination = Path(args.destination)
    try:
        prepare_destination(destination)
    except OSError as exc:
        raise ConfigError(f"Cannot create destination {destination}: {exc}") from exc

    return RunConfig(
        source=source,
        destination=destination,
        width=args.width,
        json_output=args.json_output,
    )


def log_level_from_env(default: int = logging.INFO) -> int:
    """Return the log level named by PDF2PNG_LOG_LEVEL, or `default`."""
    override = os.environ.get(LOG_LEVEL_ENV)
    if not override:
        return default
    level = logging.getLevelName(override.strip().upper())
    if isinstance(level, int):
        return level
    logger.warning("Ignoring unknown %s value: %s", LOG_LEVEL_ENV, override)
    return default


__all__ = [
    "build_parser",
    "log_level_from_env",
    "resolve_config",
]
