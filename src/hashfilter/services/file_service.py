"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/file_service.py
Destructive file operations used when resolving duplicates: delete, trash and move.
Every failure is reported as a fatal run error; nothing is retried.
"""
import os
import logging
from pathlib import Path
from send2trash import send2trash

from hashfilter.core.errors import DeleteFailed, MoveFailed

logger = logging.getLogger(__name__)


class FileService:
    """
    Filesystem actions on a single file.
    """

    @staticmethod
    def delete_file(file_path: str) -> None:
        """Removes a file permanently."""
        try:
            os.remove(file_path)
        except OSError as e:
            logger.debug(f"Delete failed for {file_path}: {e}")
            raise DeleteFailed(f"Unable to delete file {file_path}: {e.strerror or e}", path=file_path) from e

    @staticmethod
    def move_to_trash(file_path: str) -> None:
        """Moves a file to the system trash."""
        path = Path(file_path)

        if not path.exists():
            raise DeleteFailed(f"Unable to delete file {file_path}: file not found", path=file_path)

        try:
            send2trash(str(path))
        except Exception as e:
            logger.debug(f"Trash failed for {file_path}: {e}")
            raise DeleteFailed(f"Unable to move file {file_path} to trash: {e}", path=file_path) from e

    @staticmethod
    def move_file(file_path: str, folder: str) -> str:
        """
        Renames file into folder, keeping its base name.
        An existing file with the same name in folder is never overwritten.
        Moving a file into its own folder is a no-op.

        Returns:
            The destination path.
        """
        destination = os.path.join(folder, os.path.basename(file_path))

        if os.path.lexists(destination):
            if FileService._same_file(file_path, destination):
                logger.debug(f"{file_path} is already in {folder}")
                return destination
            raise MoveFailed(
                f"Unable to move file {file_path}: {destination} already exists", path=file_path
            )

        try:
            os.rename(file_path, destination)
        except (OSError, ValueError) as e:
            logger.debug(f"Move failed for {file_path} -> {destination}: {e}")
            reason = getattr(e, "strerror", None) or e
            raise MoveFailed(f"Unable to move file {file_path}: {reason}", path=file_path) from e

        return destination

    @staticmethod
    def _same_file(first: str, second: str) -> bool:
        try:
            return os.path.samestat(os.lstat(first), os.lstat(second))
        except OSError:
            return False
