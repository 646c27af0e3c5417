"""DiscrepancyRecorder: ordered sink for discrepancy messages.

Messages are kept in emission order unless one of the known-discrepancy
patterns is found anywhere in them (``re.search``), in which case they are
dropped.

Compiled pattern tuples are memoized in a module-level LRU cache keyed by the
pattern strings.  Regression suites tend to pass the same suppression list to
every comparison; compiled patterns are immutable, so sharing them across
recorders shares no mutable state.

Example::

    recorder = DiscrepancyRecorder([r"path='/meta/.*'"])
    recorder.add_message("Nodes values differ: '1.0' vs '2.0', path='/meta/rev'")
    recorder.add_message("Nodes values differ: 'a' vs 'b', path='/name'")
    recorder.messages   # ["Nodes values differ: 'a' vs 'b', path='/name'"]
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from cachetools import LRUCache, cached

__all__ = ["DiscrepancyRecorder"]

logger = logging.getLogger(__name__)


@cached(cache=LRUCache(maxsize=128))
def _compile_patterns(patterns: tuple[str, ...]) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(p) for p in patterns)


class DiscrepancyRecorder:
    """Collects discrepancy messages while two trees are walked.

    Args:
        known_discrepancies: Regular expressions of acceptable discrepancies.

    Raises:
        re.error: If a pattern does not compile.
    """

    def __init__(self, known_discrepancies: Iterable[str] = ()) -> None:
        self._patterns = _compile_patterns(tuple(known_discrepancies))
        self._messages: list[str] = []

    def add_message(self, message: str) -> None:
        """Record ``message`` unless a known-discrepancy pattern matches it."""
        for pattern in self._patterns:
            if pattern.search(message):
                logger.debug("Suppressed by %r: %s", pattern.pattern, message)
                return
        self._messages.append(message)

    def has_errors(self) -> bool:
        """True if at least one message survived suppression."""
        return bool(self._messages)

    @property
    def messages(self) -> list[str]:
        """Recorded messages in emission order."""
        return self._messages
