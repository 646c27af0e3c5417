"""JSON tree compare - structural discrepancy reports for JSON documents."""

from __future__ import annotations

from json_tree_compare.algorithm.config import CompareConfig
from json_tree_compare.api import compare, compare_json_strings, is_equivalent
from json_tree_compare.comparator import JsonComparator
from json_tree_compare.recorder import DiscrepancyRecorder
from json_tree_compare.result import ComparisonResult

__version__: str = "0.1.0"
__all__: list[str] = [
    "CompareConfig",
    "ComparisonResult",
    "DiscrepancyRecorder",
    "JsonComparator",
    "compare",
    "compare_json_strings",
    "is_equivalent",
]
