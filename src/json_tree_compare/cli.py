"""Command-line entry point: compare two JSON files.

Usage::

    json-tree-compare expected.json actual.json --ignore "path='/meta/.*'"
    python -m json_tree_compare expected.json actual.json --stop-on-first

Prints one discrepancy per line.  Exit status: 0 when the documents are
equal, 1 when discrepancies were found, 2 when a file could not be read or
an option is invalid.
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from collections.abc import Sequence
from pathlib import Path

from json_tree_compare.algorithm.config import CompareConfig
from json_tree_compare.algorithm.myers import DEFAULT_MAX_DIFFS
from json_tree_compare.comparator import JsonComparator

__all__ = ["main"]

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="json-tree-compare",
        description="Report structural discrepancies between two JSON files",
    )
    parser.add_argument("first", type=Path, help="Path to the first (expected) JSON file")
    parser.add_argument("second", type=Path, help="Path to the second (actual) JSON file")
    parser.add_argument(
        "--stop-on-first",
        action="store_true",
        help="Stop at the first type, name or value mismatch",
    )
    parser.add_argument(
        "--ignore",
        "-i",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Regular expression of an acceptable discrepancy (repeatable)",
    )
    parser.add_argument(
        "--max-diffs",
        type=int,
        default=DEFAULT_MAX_DIFFS,
        help=f"Alignment budget per sibling list (default: {DEFAULT_MAX_DIFFS})",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    samples = []
    for path in (args.first, args.second):
        try:
            samples.append(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            print(f"Cannot read {path}: {e}", file=sys.stderr)
            return 2

    try:
        config = CompareConfig(
            stop_on_first=args.stop_on_first,
            known_discrepancies=tuple(args.ignore),
            max_diffs=args.max_diffs,
        )
    except ValueError as e:
        print(f"Invalid arguments: {e}", file=sys.stderr)
        return 2

    try:
        result = JsonComparator(config).compare(*samples)
    except re.error as e:
        print(f"Invalid --ignore pattern: {e}", file=sys.stderr)
        return 2
    for message in result.messages:
        print(message)
    logger.info(
        "%d discrepancies in %.1f ms", len(result.messages), result.computation_time_ms
    )
    return 1 if result.has_differences else 0
