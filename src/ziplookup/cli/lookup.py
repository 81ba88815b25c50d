from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from ..scanner.context import ScanContext
from ..scanner.models import ScanOptions
from ..scanner.reporter import MatchReporter
from ..scanner.trace import TRACE_DISABLED, TRACE_EVERY, TRACE_SOME
from ..scanner.walker import walk_tree
from .display import render_summary

USAGE_EXIT_CODE = 1
PACKAGE_LOGGER = "ziplookup"
_LEADING_FLAGS = frozenset({"--trace", "--trace-some", "--stats", "-h", "--help"})


class _UsageParser(argparse.ArgumentParser):
    """Argument parser that reports usage problems with exit status 1."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(USAGE_EXIT_CODE, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _UsageParser(
        prog="ziplookup",
        allow_abbrev=False,
        description=(
            "Find files by case-insensitive name in a directory tree, "
            "including inside nested ZIP, JAR, EAR and WAR archives."
        ),
    )
    trace = parser.add_mutually_exclusive_group()
    trace.add_argument(
        "--trace",
        action="store_true",
        help="Log every directory and archive entry visited.",
    )
    trace.add_argument(
        "--trace-some",
        action="store_true",
        help=f"Log every {TRACE_SOME}th directory or archive entry visited.",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print a summary table to stderr once the lookup finishes.",
    )
    parser.add_argument("start_dir", metavar="STARTDIR", help="Directory to search.")
    parser.add_argument(
        "search_name",
        metavar="SEARCHFILENAME",
        help="File name to look for, compared case-insensitively.",
    )
    return parser


def configure_logging(stream: TextIO | None = None, level: int = logging.INFO) -> logging.Handler:
    """Send ziplookup diagnostics to ``stream`` (stderr by default) as bare lines."""
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return handler


def _trace_stride(args: argparse.Namespace) -> int:
    if args.trace:
        return TRACE_EVERY
    if args.trace_some:
        return TRACE_SOME
    return TRACE_DISABLED


def _positional_only(argv: list[str]) -> list[str]:
    """Fence everything after the leading flags so names like ``-x.txt`` stay positional."""
    index = 0
    while index < len(argv) and argv[index] in _LEADING_FLAGS:
        index += 1
    if index < len(argv) and argv[index] == "--":
        return list(argv)
    return [*argv[:index], "--", *argv[index:]]


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(_positional_only(argv))

    try:
        args.search_name.encode("utf-8")
    except UnicodeEncodeError:
        parser.error("failed to decode search name as UTF-8")
    search_key = args.search_name.lower()

    handler = configure_logging()
    context = ScanContext(
        options=ScanOptions(trace_stride=_trace_stride(args)),
        reporter=MatchReporter(),
    )
    try:
        walk_tree(args.start_dir, search_key, context)
    finally:
        logging.getLogger(PACKAGE_LOGGER).removeHandler(handler)

    if args.stats:
        render_summary(context.summary, context.issues)
    return 0


if __name__ == "__main__":
    sys.exit(main())
