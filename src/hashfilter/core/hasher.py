"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements whole-file hashing with a pluggable hash algorithm.
Unreadable files produce no digest instead of an error: callers skip them.
"""

import hashlib
import logging
from typing import Optional

from hashfilter.core.interfaces import Hasher, HashAlgorithm

logger = logging.getLogger(__name__)


# Use the same way to implement and use any other hashing algorithm
class Sha256AlgorithmImpl(HashAlgorithm):
    digest_size = 32

    @staticmethod
    def hash(data: bytes) -> bytes:
        return hashlib.sha256(data).digest()


class HasherImpl(Hasher):
    """
    A hasher implementation that supports any algorithm via the HashAlgorithm interface.
    """

    def __init__(self, algorithm: Optional[HashAlgorithm] = None):
        self.algorithm = algorithm or Sha256AlgorithmImpl()

    def compute_full_hash(self, path: str) -> Optional[bytes]:
        try:
            f = open(path, 'rb')
        except OSError as e:
            logger.debug(f"Skipping {path}: cannot open ({e})")
            return None

        with f:
            try:
                data = f.read()
            except OSError as e:
                logger.debug(f"Skipping {path}: read failed ({e})")
                return None

        return self.algorithm.hash(data)
