"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the filtering engine.
Structural typing keeps the classifier independent from concrete hashing,
scanning and conflict handling, so each piece can be swapped in tests.

Key Components:
---------------
- HashAlgorithm: Standardized interface for hash functions (e.g., SHA-256).
- Hasher: Interface for computing the full-content digest of a file.
- FolderScanner: Interface for listing candidate files of a folder.
- ConflictResolver: Interface for acting on a duplicate file.
"""

from typing import Protocol, List, Optional


class HashAlgorithm(Protocol):
    """
    Interface for generic hash algorithms.
    The digest size must be fixed so registry entries stay comparable.
    """

    @staticmethod
    def hash(data: bytes) -> bytes:
        """Computes the hash of the provided byte data."""
        ...


class Hasher(Protocol):
    """Interface for hashing whole files."""
    def compute_full_hash(self, path: str) -> Optional[bytes]:
        """Returns the digest, or None if the file could not be opened or read."""
        ...


class FolderScanner(Protocol):
    """Interface for enumerating the files of one folder (non-recursive)."""
    def scan(self) -> List[str]:
        """
        Returns full paths of regular files in listing order.

        Raises:
            FolderUnreadable: if the folder itself cannot be listed.
        """
        ...


class ConflictResolver(Protocol):
    """Interface for handling a file whose digest is already registered."""
    def resolve(self, path: str, digest: bytes) -> None:
        """
        Applies the active policy to the duplicate.

        Raises:
            HashFilterError: on any failure; the run must stop.
        """
        ...
