"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Lists the candidate files of a single folder.
Features:
- Top-level entries only, no recursion
- Keeps regular files; symlinks, subdirectories and special files are skipped silently
- Preserves the order reported by the filesystem (no sorting)
"""

import os
from typing import List
import logging

from hashfilter.core.errors import FolderUnreadable
from hashfilter.core.interfaces import FolderScanner

logger = logging.getLogger(__name__)


class FolderScannerImpl(FolderScanner):
    """
    Enumerates regular files directly inside `folder`.

    Attributes:
        folder: Absolute path of the folder to scan
    """

    def __init__(self, folder: str):
        self.folder = folder

    def scan(self) -> List[str]:
        logger.debug(f"Scanning folder: {self.folder}")
        found_files = []

        try:
            with os.scandir(self.folder) as entries:
                for entry in entries:
                    if self._is_candidate(entry):
                        found_files.append(os.path.join(self.folder, entry.name))
        except OSError as e:
            logger.error(f"Cannot list folder {self.folder}: {e}")
            raise FolderUnreadable(path=self.folder) from e

        logger.debug(f"Scan completed. Found {len(found_files)} files.")
        return found_files

    @staticmethod
    def _is_candidate(entry: os.DirEntry) -> bool:
        try:
            if entry.is_file(follow_symlinks=False):
                return True
        except OSError as e:
            logger.debug(f"Could not stat {entry.path}: {e}")
            return False
        logger.debug(f"Skipping non-regular entry: {entry.path}")
        return False
