"""Command-line wrapper around JsonScanner.

Usage:
    jsonscan data.json other.json
    cat data.json | jsonscan
    jsonscan --whitespace space-only --max-depth 32 data.json

Each input is reported on its own line as ``<name>: <STATUS>`` where STATUS
is OK, INVALID, DEPTH_EXCEEDED or TOO_LARGE.

Exit Codes:
    0: Every input is a valid document
    1: At least one input is not valid
    2: Usage error or unreadable input

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from jsonscan.config import ScanConfig
from jsonscan.constants import MAX_DEPTH, MAX_SOURCE_SIZE
from jsonscan.enums import ScanOutcome, WhitespaceMode
from jsonscan.syntax.scanner import JsonScanner

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2

_STDIN_NAME = "-"

_STATUS_LABELS: dict[ScanOutcome, str] = {
    ScanOutcome.VALID: "OK",
    ScanOutcome.INVALID: "INVALID",
    ScanOutcome.DEPTH_EXCEEDED: "DEPTH_EXCEEDED",
    ScanOutcome.TOO_LARGE: "TOO_LARGE",
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the jsonscan command."""
    parser = argparse.ArgumentParser(
        prog="jsonscan",
        description="Check that files are well-formed JSON documents (object or array at top level).",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        default=[_STDIN_NAME],
        help="Files to check ('-' or nothing reads standard input)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=MAX_DEPTH,
        help=f"Maximum object/array nesting depth (default: {MAX_DEPTH})",
    )
    parser.add_argument(
        "--max-source-size",
        type=int,
        default=MAX_SOURCE_SIZE,
        help="Maximum input size in bytes, 0 disables the limit (default: 64 MiB)",
    )
    parser.add_argument(
        "--whitespace",
        choices=[mode.value for mode in WhitespaceMode],
        default=WhitespaceMode.STANDARD.value,
        help="Whitespace set between tokens (default: standard)",
    )
    parser.add_argument(
        "--allow-trailing-data",
        action="store_true",
        help="Accept bytes after the top-level value",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Print nothing; report through the exit code only",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug)",
    )
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _read_source(name: str) -> bytes:
    if name == _STDIN_NAME:
        return sys.stdin.buffer.read()
    return Path(name).read_bytes()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the jsonscan command.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = ScanConfig(
            max_depth=args.max_depth,
            max_source_size=args.max_source_size,
            whitespace=WhitespaceMode(args.whitespace),
            allow_trailing_data=args.allow_trailing_data,
        )
    except ValueError as e:
        parser.error(str(e))

    scanner = JsonScanner(config)
    exit_code = EXIT_OK

    for name in args.paths:
        try:
            data = _read_source(name)
        except OSError as e:
            logger.error("Cannot read %s: %s", name, e)
            return EXIT_USAGE

        result = scanner.scan(data)
        logger.info("%s: %d bytes, %s", name, len(data), result.outcome)
        if not args.quiet:
            label = "<stdin>" if name == _STDIN_NAME else name
            print(f"{label}: {_STATUS_LABELS[result.outcome]}")
        if not result:
            exit_code = EXIT_INVALID

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
