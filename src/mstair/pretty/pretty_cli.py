# File: src/mstair/pretty/pretty_cli.py
"""
Pretty-print JSON and JSON5 documents as nested tables.

Each input (a file path, or `-` for stdin) is parsed with `json5` and
rendered on its own line or block. Options come from PRETTY_* environment
variables (and a .env file), then from the command line.

Usage:
    python -m mstair.pretty [--width N] [--indent N] [--max-gaps N] [-v | -q] [PATH ...]

Exit status: 0 on success, 2 for invalid options, 3 for unreadable input,
4 when a document is nested too deeply for the line width.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, TextIO

import json5

from mstair.pretty.xlogging.core_logger import initialize_root
from mstair.pretty.xlogging.logger_constants import TRACE
from mstair.pretty.xlogging.logger_factory import create_logger
from mstair.pretty.xlogging.logger_util import LogLevelConfig
from mstair.pretty.xpretty.errors import ConfigurationError, StructuralOverflowError
from mstair.pretty.xpretty.options import PrettyOptions, options_from_environment
from mstair.pretty.xpretty.pretty_api import render


__all__ = [
    "load_document",
    "main",
    "parse_args",
]

_LOG = create_logger(__name__)

EXIT_USAGE = 2
EXIT_INPUT = 3
EXIT_RENDER = 4


def load_document(source: str, stdin: TextIO | None = None) -> Any:
    """
    Parse one JSON or JSON5 document.

    Args:
        source: A file path, or `-` for standard input.
        stdin: Stream used for `-` (defaults to sys.stdin).

    Returns:
        The parsed value; JSON null becomes None and renders as the absent literal.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the text is not valid JSON5.
    """
    if source == "-":
        return json5.load(stdin if stdin is not None else sys.stdin)
    with Path(source).open(encoding="utf-8") as f:
        return json5.load(f)


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse and return command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="xpretty",
        description="Pretty-print JSON/JSON5 documents as nested tables.",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        default=["-"],
        help="Files to read; '-' or nothing reads standard input.",
    )
    parser.add_argument("--width", type=int, help="Line width limit (default: 64).")
    parser.add_argument("--indent", type=int, help="Spaces per nesting level (default: 2).")
    parser.add_argument(
        "--max-gaps",
        type=int,
        help="Missing positions tolerated inside an array prefix (default: 0).",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log option resolution; repeat for per-node tracing.",
    )
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Log errors only.")
    return parser.parse_args(argv)


def _configure_logging(verbose: int, quiet: bool) -> None:
    if quiet:
        level = logging.ERROR
    elif verbose >= 2:
        level = TRACE
    elif verbose == 1:
        level = logging.DEBUG
    else:
        return
    LogLevelConfig.get_instance().override("mstair.pretty", level)
    initialize_root(level=level, force=True)


def _resolve_options(args: argparse.Namespace) -> PrettyOptions:
    overrides = {
        option: value
        for option, value in (
            ("line_width", args.width),
            ("indent_width", args.indent),
            ("max_gaps", args.max_gaps),
        )
        if value is not None
    }
    return options_from_environment().merged(**overrides)


def main(argv: list[str] | None = None, *, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """
    Command-line interface entry point.
    """
    args = parse_args(sys.argv[1:] if argv is None else argv)
    _configure_logging(args.verbose, args.quiet)
    out = stdout if stdout is not None else sys.stdout

    try:
        options = _resolve_options(args)
    except ConfigurationError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_USAGE
    _LOG.debug("options: %r", options)

    documents: list[Any] = []
    for source in args.paths:
        try:
            documents.append(load_document(source, stdin))
        except (OSError, ValueError) as exc:
            print(f"ERROR: Failed to load {source}: {exc}", file=sys.stderr)
            return EXIT_INPUT

    try:
        texts = [render(document, options) for document in documents]
    except StructuralOverflowError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_RENDER

    for text in texts:
        print(text, file=out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

# End of file: src/mstair/pretty/pretty_cli.py
