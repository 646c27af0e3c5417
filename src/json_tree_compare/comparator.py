"""JsonComparator: orchestrator that wires parsing + TreeBuilder + TreeDiffer.

This is the central wiring layer between the raw algorithm and the public
API.  It turns two samples into a ComparisonResult.

Architecture:
- compare() starts a wall-clock timer and creates a fresh DiscrepancyRecorder,
  so no state survives between calls.
- Each sample is parsed (JSON text) or taken as is (an already-parsed Python
  value).  Empty input and parse failures are recorded as discrepancy
  messages, never raised.
- When the first sample fails and ``stop_on_first`` is set, the second sample
  is not looked at.  Otherwise it is still parsed so that both failures are
  reported together.
- Trees are built and walked only when both samples parsed.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any

from json_tree_compare.algorithm.config import CompareConfig
from json_tree_compare.algorithm.differ import TreeDiffer
from json_tree_compare.recorder import DiscrepancyRecorder
from json_tree_compare.result import ComparisonResult
from json_tree_compare.tree.builder import TreeBuilder

__all__ = ["JsonComparator"]

logger = logging.getLogger(__name__)

_TEXT_TYPES = (str, bytes, bytearray)


def _reject_constant(name: str) -> Any:
    msg = f"Non-standard JSON constant: {name}"
    raise ValueError(msg)


class JsonComparator:
    """Orchestrator for structural JSON comparison.

    Example::

        from json_tree_compare.comparator import JsonComparator

        cmp = JsonComparator()
        result = cmp.compare('{"a": 1}', '{"a": 2}')
        result.messages   # ["Nodes values differ: '1.0' vs '2.0', path='/a'"]
    """

    def __init__(self, config: CompareConfig | None = None) -> None:
        """Initialise the comparator.

        Args:
            config: Comparison switches.  Defaults to ``CompareConfig()``.
        """
        self._config: CompareConfig = config if config is not None else CompareConfig()
        self._builder = TreeBuilder()

    @property
    def config(self) -> CompareConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(self, sample1: Any, sample2: Any) -> ComparisonResult:
        """Compare two samples and return a ComparisonResult.

        Args:
            sample1: First document: JSON text (``str``/``bytes``) or an
                already-parsed JSON value.  ``None`` and blank text count as
                empty input.
            sample2: Second document, same forms.

        Returns:
            A ``ComparisonResult`` with the ordered discrepancy messages.

        Raises:
            TypeError: If an already-parsed value contains non-JSON types.
        """
        t0 = time.perf_counter()
        config = self._config
        recorder = DiscrepancyRecorder(config.known_discrepancies)

        doc1 = self._parse_sample(sample1, "first", recorder)
        if doc1 is not None or not config.stop_on_first:
            doc2 = self._parse_sample(sample2, "second", recorder)
            if doc1 is not None and doc2 is not None:
                differ = TreeDiffer(
                    recorder,
                    stop_on_first=config.stop_on_first,
                    max_diffs=config.max_diffs,
                )
                differ.compare(self._builder.build(doc1), self._builder.build(doc2))

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        logger.debug(
            "Comparison finished in %.3f ms with %d discrepancy message(s)",
            elapsed_ms,
            len(recorder.messages),
        )
        return ComparisonResult(
            messages=list(recorder.messages),
            computation_time_ms=elapsed_ms,
        )

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def _parse_sample(
        self, sample: Any, qualifier: str, recorder: DiscrepancyRecorder
    ) -> Any:
        """Return the parsed JSON value, or None after recording why there is none.

        Args:
            sample:    JSON text or an already-parsed value.
            qualifier: ``"first"`` or ``"second"``, used in messages.
            recorder:  Sink for the empty-input / parse-failure message.
        """
        if isinstance(sample, _TEXT_TYPES):
            if not sample.strip():
                return self._empty(qualifier, recorder)
            try:
                sample = json.loads(sample, parse_constant=_reject_constant)
            # The stdlib decoder recurses once per nesting level of the text
            except (ValueError, RecursionError) as e:
                logger.error("Failed to parse the %s sample: %s", qualifier, e)
                recorder.add_message(f"Failed to parse the {qualifier} sample: {e}")
                return None

        if sample is None:
            return self._empty(qualifier, recorder)
        return sample

    @staticmethod
    def _empty(qualifier: str, recorder: DiscrepancyRecorder) -> None:
        logger.error("Empty input for the %s sample", qualifier)
        recorder.add_message(f"Empty input for the {qualifier} sample")
