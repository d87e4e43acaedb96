"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/errors.py
Fatal errors of a filtering run. Any of these aborts the remaining batch;
only the CLI entry point turns them into a message and an exit code.
"""

from typing import Optional


class HashFilterError(Exception):
    """Base class for all fatal run errors."""

    default_message = "Filtering failed"

    def __init__(self, message: Optional[str] = None, path: Optional[str] = None):
        self.path = path
        super().__init__(message or self.default_message)


class FolderUnreadable(HashFilterError):
    default_message = "Unable to read folder"


class DeleteFailed(HashFilterError):
    default_message = "Unable to delete file"


class MoveFailed(HashFilterError):
    default_message = "Unable to move file"


class InputReadFailed(HashFilterError):
    default_message = "Unable to read input"


class InvalidInput(HashFilterError):
    default_message = "Wrong input"


class PathResolutionFailed(HashFilterError):
    default_message = "Unable to resolve path"
