"""Command-line interface: parse a file and print the located expressions.

Usage:
    python -m bracemark notes.bm
    python -m bracemark --indent 2 < notes.bm
    bracemark --no-flush notes.bm

Exit codes follow the usual pattern for build integration:
0 on success, 1 on a parse error, 2 on usage or I/O errors.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from bracemark import __version__, parse
from bracemark.config import ParseConfig
from bracemark.errors import ParseError
from bracemark.serialization import to_json
from bracemark.utils.logger import get_logger

logger = get_logger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="bracemark",
        description="Parse bracket directive markup and print the expression tree as JSON",
    )
    ap.add_argument(
        "file",
        nargs="?",
        default="-",
        help="input file (default: read stdin)",
    )
    ap.add_argument("--indent", type=int, default=None, help="JSON indentation level")
    ap.add_argument(
        "--no-flush",
        action="store_true",
        help="do not emit a text node for content after the last directive",
    )
    ap.add_argument(
        "--skip-empty-text",
        action="store_true",
        help="drop zero-length text nodes",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def _read_source(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line. Returns the process exit code."""
    args = build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        source = _read_source(args.file)
    except OSError as exc:
        print(f"bracemark: cannot read {args.file}: {exc.strerror}", file=sys.stderr)
        return 2

    config = ParseConfig(
        flush_trailing_text=not args.no_flush,
        skip_empty_text=args.skip_empty_text,
    )
    source_file = None if args.file == "-" else args.file
    try:
        doc = parse(source, source_file=source_file, config=config)
    except ParseError as exc:
        print(exc.format_diagnostic(source), file=sys.stderr)
        return 1

    logger.debug("Writing %d expressions", len(doc))
    print(to_json(doc, indent=args.indent))
    return 0
