"""
Tests for SortedHashRegistry — ordering and uniqueness of registered digests.
"""
import os
import pytest
from hashfilter.core.registry import SortedHashRegistry
from hashfilter.core.models import Lookup

from conftest import sha256


def register(registry: SortedHashRegistry, digest: bytes) -> bool:
    """Insert digest if new; returns True when it was inserted."""
    lookup = registry.locate(digest)
    if lookup.found:
        return False
    registry.insert_at(lookup.position, digest)
    return True


class TestLocate:
    def test_empty_registry_reports_insertion_at_zero(self):
        registry = SortedHashRegistry()
        assert registry.locate(sha256(b"x")) == Lookup(found=False, position=0)

    def test_found_reports_position_of_match(self):
        registry = SortedHashRegistry()
        low, mid, high = b"\x00" * 32, b"\x80" * 32, b"\xff" * 32
        for digest in (high, low, mid):
            register(registry, digest)

        assert registry.locate(low) == Lookup(found=True, position=0)
        assert registry.locate(mid) == Lookup(found=True, position=1)
        assert registry.locate(high) == Lookup(found=True, position=2)

    def test_not_found_reports_insertion_point(self):
        registry = SortedHashRegistry()
        register(registry, b"\x10" * 32)
        register(registry, b"\x30" * 32)

        assert registry.locate(b"\x00" * 32) == Lookup(found=False, position=0)
        assert registry.locate(b"\x20" * 32) == Lookup(found=False, position=1)
        assert registry.locate(b"\x40" * 32) == Lookup(found=False, position=2)

    def test_byte_lexicographic_order(self):
        """Comparison is bytewise: 0x01ff... sorts before 0x0200..."""
        registry = SortedHashRegistry()
        a = b"\x02" + b"\x00" * 31
        b = b"\x01" + b"\xff" * 31
        register(registry, a)
        register(registry, b)
        assert list(registry) == [b, a]


class TestInsert:
    def test_registry_stays_sorted_and_unique(self):
        """After any sequence of inserts the registry is ascending with no repeats."""
        registry = SortedHashRegistry()
        digests = [sha256(os.urandom(16)) for _ in range(200)]
        # Re-offer every digest to make sure repeats are never inserted
        for digest in digests + digests[::3]:
            register(registry, digest)

        entries = list(registry)
        assert entries == sorted(set(digests))
        assert len(registry) == len(set(digests))

    def test_duplicate_insert_rejected(self):
        registry = SortedHashRegistry()
        digest = sha256(b"hi")
        register(registry, digest)

        with pytest.raises(ValueError):
            registry.insert_at(0, digest)
        with pytest.raises(ValueError):
            registry.insert_at(1, digest)
        assert len(registry) == 1

    def test_insert_at_wrong_position_rejected(self):
        registry = SortedHashRegistry()
        register(registry, b"\x10" * 32)

        with pytest.raises(ValueError):
            registry.insert_at(0, b"\x20" * 32)
        with pytest.raises(ValueError):
            registry.insert_at(5, b"\x20" * 32)

    def test_contains(self):
        registry = SortedHashRegistry()
        register(registry, sha256(b"hi"))
        assert sha256(b"hi") in registry
        assert sha256(b"bye") not in registry
