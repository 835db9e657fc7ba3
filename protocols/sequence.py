"""
Sequence Backend Protocol.

Defines the interface skuman uses to reserve per-combination sequence
numbers.

Guarantees every implementation must give:
    - calls for the same key are serialized: values are unique and
      strictly increasing per key
    - calls for different keys never wait on each other
    - values are never decremented or handed out twice, even if the
      caller never uses the reserved value
"""

from typing import Protocol, runtime_checkable

from skuman.codec import CombinationKey


@runtime_checkable
class SequenceBackend(Protocol):
    """
    Atomic per-key counter.

    Implementations:
        - DatabaseSequenceBackend: SkuSequence rows, SELECT FOR UPDATE
        - LocalSequenceBackend: in-process, one lock per key
    """

    def allocate_next(self, key: CombinationKey, max_value: int) -> int:
        """
        Reserve and return the next sequence for `key`.

        Starts at 1 for a key never seen before.

        Raises:
            SkuError(SEQUENCE_EXHAUSTED): the key already reached max_value
        """
        ...

    def current(self, key: CombinationKey) -> int:
        """Highest value issued for `key` (0 if none)."""
        ...

    def seed(self, key: CombinationKey, value: int) -> int:
        """
        Raise the counter for `key` to at least `value`. Never lowers it.

        Returns:
            The counter value after seeding
        """
        ...
