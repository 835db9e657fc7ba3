"""
Sequence adapters — implementations of SequenceBackend.

DatabaseSequenceBackend: SkuSequence rows, one row lock per key (default).
LocalSequenceBackend: in-process counters, one threading.Lock per key.
Use it for single-process tools and tests; counters vanish with the process.

Configuration:
    SKUMAN = {
        "SEQUENCE_BACKEND": "skuman.adapters.sequence.LocalSequenceBackend",
    }
"""

from __future__ import annotations

import logging
import threading

from skuman.codec import CombinationKey
from skuman.exceptions import SkuError

logger = logging.getLogger(__name__)


class DatabaseSequenceBackend:
    """SequenceBackend over the SkuSequence model (SELECT FOR UPDATE per key)."""

    def allocate_next(self, key: CombinationKey, max_value: int) -> int:
        from skuman.models import SkuSequence

        return SkuSequence.next_value(str(key), max_value=max_value)

    def current(self, key: CombinationKey) -> int:
        from skuman.models import SkuSequence

        return SkuSequence.current_value(str(key))

    def seed(self, key: CombinationKey, value: int) -> int:
        from skuman.models import SkuSequence

        return SkuSequence.seed(str(key), value)


class LocalSequenceBackend:
    """
    In-process SequenceBackend.

    Each key gets its own lock, so allocations for one combination never
    wait on another combination.
    """

    def __init__(self):
        self._locks: dict[str, threading.Lock] = {}
        self._values: dict[str, int] = {}

    def _lock_for(self, key: str) -> threading.Lock:
        lock = self._locks.get(key)
        if lock is None:
            # setdefault is atomic: racing first callers share one lock
            lock = self._locks.setdefault(key, threading.Lock())
        return lock

    def allocate_next(self, key: CombinationKey, max_value: int) -> int:
        k = str(key)
        with self._lock_for(k):
            value = self._values.get(k, 0)
            if value >= max_value:
                raise SkuError("SEQUENCE_EXHAUSTED", key=k, max=max_value)
            self._values[k] = value + 1
            return value + 1

    def current(self, key: CombinationKey) -> int:
        return self._values.get(str(key), 0)

    def seed(self, key: CombinationKey, value: int) -> int:
        k = str(key)
        with self._lock_for(k):
            previous = self._values.get(k, 0)
            if value > previous:
                logger.info(f"Seeding sequence {k}: {previous} → {value}")
                self._values[k] = value
            return self._values.get(k, 0)
