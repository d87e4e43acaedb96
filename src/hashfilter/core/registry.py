"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/registry.py
In-memory registry of digests seen during the current run.
Kept as an ascending sorted list so each lookup is a binary search.
"""

from bisect import bisect_left
from typing import Iterator, List

from hashfilter.core.models import Lookup


class SortedHashRegistry:
    """
    Sorted, duplicate-free sequence of digests.
    Insert-only: entries are never removed during a run.
    """

    def __init__(self):
        self._digests: List[bytes] = []

    def locate(self, digest: bytes) -> Lookup:
        """Finds digest, or the position where it would have to be inserted."""
        position = bisect_left(self._digests, digest)
        found = position < len(self._digests) and self._digests[position] == digest
        return Lookup(found=found, position=position)

    def insert_at(self, position: int, digest: bytes) -> None:
        """
        Inserts digest at position as reported by locate().
        Raises ValueError if that would break ordering or repeat an entry.
        """
        if not 0 <= position <= len(self._digests):
            raise ValueError(f"Insertion position {position} out of range")
        if position > 0 and self._digests[position - 1] >= digest:
            raise ValueError("Digest does not belong at this position")
        if position < len(self._digests) and self._digests[position] <= digest:
            raise ValueError("Digest does not belong at this position")
        self._digests.insert(position, digest)

    def __len__(self) -> int:
        return len(self._digests)

    def __iter__(self) -> Iterator[bytes]:
        return iter(self._digests)

    def __contains__(self, digest: bytes) -> bool:
        return self.locate(digest).found

    def __repr__(self):
        return f"<SortedHashRegistry entries={len(self._digests)}>"
