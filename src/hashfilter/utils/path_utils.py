"""
Path helpers shared by the CLI and the interactive prompt.
"""
import os
from pathlib import Path

from hashfilter.core.errors import PathResolutionFailed


def resolve_absolute_path(path: str) -> str:
    """
    Returns an absolute path for user-supplied input.

    Absolute paths are returned unchanged, without checking that they exist.
    Relative paths are canonicalized and therefore must exist.

    Raises:
        PathResolutionFailed: if a relative path cannot be canonicalized.
    """
    if not path:
        raise PathResolutionFailed("Unable to resolve path: empty path")

    if os.path.isabs(path):
        return path

    try:
        return str(Path(path).resolve(strict=True))
    except (OSError, RuntimeError, ValueError) as e:
        raise PathResolutionFailed(f"Unable to resolve path: {path}", path=path) from e
