"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/classifier.py
Classifies each candidate file as first-seen or duplicate.

First-seen digests go into the registry; duplicates are handed to the conflict
resolver. The registry is owned by the classifier alone, and every resolution
completes before the next file is hashed. The first resolver error stops the run.
"""

import time
import logging
from typing import Optional

from hashfilter.core.interfaces import ConflictResolver, FolderScanner, Hasher
from hashfilter.core.hasher import HasherImpl
from hashfilter.core.models import RunStats
from hashfilter.core.registry import SortedHashRegistry

logger = logging.getLogger(__name__)


class FileClassifier:
    def __init__(
        self,
        scanner: FolderScanner,
        resolver: ConflictResolver,
        hasher: Optional[Hasher] = None,
        registry: Optional[SortedHashRegistry] = None
    ):
        self.scanner = scanner
        self.resolver = resolver
        self.hasher = hasher or HasherImpl()
        self.registry = registry if registry is not None else SortedHashRegistry()

    def run(self) -> RunStats:
        """
        Processes every candidate file once, in listing order.

        Returns:
            RunStats for the completed run

        Raises:
            FolderUnreadable: if the folder cannot be listed
            HashFilterError: the first error reported by the resolver
        """
        start_time = time.time()
        stats = RunStats()

        files = self.scanner.scan()

        for path in files:
            stats.files_seen += 1
            digest = self.hasher.compute_full_hash(path)
            if digest is None:
                stats.skipped += 1
                continue

            lookup = self.registry.locate(digest)
            if lookup.found:
                logger.debug(f"Duplicate: {path} ({digest.hex()})")
                self.resolver.resolve(path, digest)
                stats.duplicates += 1
            else:
                self.registry.insert_at(lookup.position, digest)
                stats.unique += 1

        stats.total_time = time.time() - start_time
        logger.debug(
            f"Run finished: {stats.unique} unique, {stats.duplicates} duplicates, "
            f"{stats.skipped} skipped"
        )
        return stats
