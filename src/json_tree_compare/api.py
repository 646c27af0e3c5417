"""Public API functions for json-tree-compare.

This module provides the user-facing functions: compare, compare_json_strings
and is_equivalent.  Each call creates a fresh JsonComparator (and with it a
fresh recorder and differ) to guarantee zero state shared between calls.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from json_tree_compare.algorithm.config import CompareConfig
from json_tree_compare.comparator import JsonComparator

__all__ = ["compare", "compare_json_strings", "is_equivalent"]


def _resolve_config(
    stop_on_first: bool,
    known_discrepancies: Iterable[str],
    config: CompareConfig | None,
) -> CompareConfig:
    if config is not None:
        return config
    return CompareConfig(
        stop_on_first=stop_on_first,
        known_discrepancies=tuple(known_discrepancies),
    )


def compare(
    sample1: Any,
    sample2: Any,
    stop_on_first: bool = False,
    known_discrepancies: Iterable[str] = (),
    config: CompareConfig | None = None,
) -> list[str]:
    """Compare two JSON documents and return the ordered discrepancy messages.

    Args:
        sample1:             First document: JSON text or an already-parsed value.
        sample2:             Second document.
        stop_on_first:       Stop at the first type, name or value mismatch
                             (best effort, see ``CompareConfig``).
        known_discrepancies: Regular expressions of messages to drop.
        config:              Full configuration.  When given, it takes
                             precedence over ``stop_on_first`` and
                             ``known_discrepancies``.

    Returns:
        The discrepancy messages; an empty list means the documents are equal.
    """
    comparator = JsonComparator(
        config=_resolve_config(stop_on_first, known_discrepancies, config)
    )
    return comparator.compare(sample1, sample2).messages


def compare_json_strings(
    sample1: str,
    sample2: str,
    stop_on_first: bool,
    known_discrepancies: Iterable[str] = (),
) -> list[str]:
    """Compare two JSON strings.

    Same as ``compare`` with the switches spelled out; kept for callers that
    always pass JSON text.
    """
    return compare(sample1, sample2, stop_on_first, known_discrepancies)


def is_equivalent(
    sample1: Any,
    sample2: Any,
    known_discrepancies: Iterable[str] = (),
    config: CompareConfig | None = None,
) -> bool:
    """Return True if the documents compare equal once known discrepancies are dropped.

    The walk does not stop early by default: a suppressed mismatch still stops
    a ``stop_on_first`` walk and could hide a later, unsuppressed one.
    """
    resolved = _resolve_config(False, known_discrepancies, config)
    return not JsonComparator(config=resolved).compare(sample1, sample2).has_differences
