"""
HashFilter — remove duplicate files from a folder by content hash.

Core features:
- SHA-256 digest of every top-level file, checked against a sorted in-memory registry
- Four conflict policies: delete, move to a holding folder, inform, or ask interactively
- Optional deletion to system trash (via send2trash)
- CLI interface; the engine is importable for scripted use
"""

# Get version
from importlib.metadata import version as _version, PackageNotFoundError

try:
    __version__ = _version("hashfilter")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Public API — only what users should import directly
from hashfilter.commands import FilterCommand
from hashfilter.core import (
    ConflictAction, Policy, FilterParams, RunStats,
    HashFilterError, FolderUnreadable, DeleteFailed, MoveFailed,
    InputReadFailed, InvalidInput, PathResolutionFailed)

__all__ = [
    "FilterCommand",
    "ConflictAction",
    "Policy",
    "FilterParams",
    "RunStats",
    "HashFilterError",
    "FolderUnreadable",
    "DeleteFailed",
    "MoveFailed",
    "InputReadFailed",
    "InvalidInput",
    "PathResolutionFailed",
    "__version__",
]
