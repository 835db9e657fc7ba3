"""
Tests for sequence allocation (skuman.models.sequence, skuman.adapters.sequence).

Verifies atomic, per-combination, never-reused sequence numbers.
"""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest
from django.db import connection, connections

from skuman import SkuError
from skuman.adapters.sequence import DatabaseSequenceBackend, LocalSequenceBackend
from skuman.codec import CombinationKey
from skuman.models import SkuSequence
from skuman.protocols import SequenceBackend


KEY = CombinationKey("1", "10", "1", "02", "05", "1")
OTHER_KEY = CombinationKey("1", "10", "1", "02", "06", "1")


# ═══════════════════════════════════════════════════════════════════
# SkuSequence
# ═══════════════════════════════════════════════════════════════════


class TestSkuSequence:
    """Tests for SkuSequence model."""

    def test_next_value_starts_at_1(self, db):
        """First call returns 1."""
        val = SkuSequence.next_value("110102051", max_value=999)
        assert val == 1

    def test_next_value_increments(self, db):
        """Subsequent calls increment."""
        v1 = SkuSequence.next_value("110102051", max_value=999)
        v2 = SkuSequence.next_value("110102051", max_value=999)
        v3 = SkuSequence.next_value("110102051", max_value=999)

        assert (v1, v2, v3) == (1, 2, 3)

    def test_different_keys_independent(self, db):
        """Different keys have independent counters."""
        SkuSequence.next_value("110102051", max_value=999)
        SkuSequence.next_value("110102051", max_value=999)

        val_b = SkuSequence.next_value("110102061", max_value=999)

        assert val_b == 1  # Independent counter

    def test_exhausted_at_max(self, db):
        """At max_value the counter refuses and stays put."""
        SkuSequence.objects.create(key="110102051", last_value=999)

        with pytest.raises(SkuError) as exc:
            SkuSequence.next_value("110102051", max_value=999)

        assert exc.value.code == "SEQUENCE_EXHAUSTED"
        assert exc.value.details["key"] == "110102051"
        assert SkuSequence.current_value("110102051") == 999

    def test_current_value_defaults_to_zero(self, db):
        assert SkuSequence.current_value("110102051") == 0

    def test_seed_raises_counter(self, db):
        assert SkuSequence.seed("110102051", 40) == 40
        assert SkuSequence.next_value("110102051", max_value=999) == 41

    def test_seed_never_lowers(self, db):
        SkuSequence.seed("110102051", 40)

        assert SkuSequence.seed("110102051", 10) == 40
        assert SkuSequence.current_value("110102051") == 40

    def test_str_representation(self, db):
        """String representation shows key and value."""
        SkuSequence.next_value("110102051", max_value=999)
        seq = SkuSequence.objects.get(key="110102051")

        assert "110102051" in str(seq)
        assert "1" in str(seq)


# ═══════════════════════════════════════════════════════════════════
# Backends
# ═══════════════════════════════════════════════════════════════════


@pytest.fixture(params=["database", "local"])
def backend(request):
    if request.param == "database":
        request.getfixturevalue("db")
        return DatabaseSequenceBackend()
    return LocalSequenceBackend()


class TestSequenceBackends:
    """Contract shared by every SequenceBackend."""

    def test_implements_protocol(self, backend):
        assert isinstance(backend, SequenceBackend)

    def test_allocate_starts_at_1_and_increments(self, backend):
        values = [backend.allocate_next(KEY, max_value=999) for _ in range(5)]

        assert values == [1, 2, 3, 4, 5]
        assert backend.current(KEY) == 5

    def test_keys_are_independent(self, backend):
        backend.allocate_next(KEY, max_value=999)
        backend.allocate_next(KEY, max_value=999)

        assert backend.allocate_next(OTHER_KEY, max_value=999) == 1
        assert backend.current(KEY) == 2

    def test_exhaustion(self, backend):
        for expected in range(1, 4):
            assert backend.allocate_next(KEY, max_value=3) == expected

        with pytest.raises(SkuError) as exc:
            backend.allocate_next(KEY, max_value=3)

        assert exc.value.code == "SEQUENCE_EXHAUSTED"
        assert backend.current(KEY) == 3

    def test_seed_then_allocate(self, backend):
        assert backend.seed(KEY, 120) == 120
        assert backend.seed(KEY, 7) == 120
        assert backend.allocate_next(KEY, max_value=999) == 121


class TestLocalSequenceConcurrency:
    """In-process per-key locking under thread contention."""

    def test_concurrent_same_key_unique_and_gapless(self):
        backend = LocalSequenceBackend()
        n = 200

        with ThreadPoolExecutor(max_workers=16) as pool:
            values = list(pool.map(lambda _: backend.allocate_next(KEY, 999), range(n)))

        assert sorted(values) == list(range(1, n + 1))

    def test_concurrent_exhaustion_issues_exactly_max(self):
        backend = LocalSequenceBackend()
        issued, refused = [], []

        def worker():
            try:
                issued.append(backend.allocate_next(KEY, 50))
            except SkuError:
                refused.append(1)

        threads = [threading.Thread(target=worker) for _ in range(80)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sorted(issued) == list(range(1, 51))
        assert len(refused) == 30

    def test_other_key_not_blocked_by_held_lock(self):
        backend = LocalSequenceBackend()
        backend.allocate_next(KEY, 999)

        # Hold KEY's lock; OTHER_KEY must still allocate.
        with backend._lock_for(str(KEY)):
            result = []
            t = threading.Thread(
                target=lambda: result.append(backend.allocate_next(OTHER_KEY, 999))
            )
            t.start()
            t.join(timeout=2)

            assert not t.is_alive()
            assert result == [1]


@pytest.mark.django_db(transaction=True)
@pytest.mark.skipif(
    connection.vendor != "postgresql",
    reason="needs PostgreSQL row locks",
)
class TestDatabaseSequenceConcurrency:
    """SELECT FOR UPDATE per key under real concurrent connections."""

    def test_concurrent_same_key_unique_and_gapless(self):
        backend = DatabaseSequenceBackend()
        n = 50

        def allocate(_):
            try:
                return backend.allocate_next(KEY, 999)
            finally:
                connections.close_all()

        with ThreadPoolExecutor(max_workers=8) as pool:
            values = list(pool.map(allocate, range(n)))

        assert sorted(values) == list(range(1, n + 1))
        assert backend.current(KEY) == n
