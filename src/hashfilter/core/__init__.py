"""
Core filtering engine — scanner, hasher, registry and classifier.

This package contains the duplicate-detection foundation of hashfilter:
- FolderScannerImpl: top-level listing of regular files in one folder
- HasherImpl + Sha256AlgorithmImpl: SHA-256 digests of whole files
- SortedHashRegistry: binary-searched, sorted registry of digests seen so far
- FileClassifier: first-seen vs. duplicate decision, delegating duplicates to a resolver
- Models and errors: Policy, FilterParams, RunStats and the fatal error classes

No console or terminal dependencies, suitable for library use.
"""

from .scanner import FolderScannerImpl
from .hasher import HasherImpl, Sha256AlgorithmImpl
from .registry import SortedHashRegistry
from .classifier import FileClassifier
from .models import ConflictAction, Policy, FilterParams, Lookup, RunStats
from .errors import (
    HashFilterError, FolderUnreadable, DeleteFailed, MoveFailed,
    InputReadFailed, InvalidInput, PathResolutionFailed)

__all__ = [
    "FolderScannerImpl",
    "HasherImpl",
    "Sha256AlgorithmImpl",
    "SortedHashRegistry",
    "FileClassifier",
    "ConflictAction",
    "Policy",
    "FilterParams",
    "Lookup",
    "RunStats",
    "HashFilterError",
    "FolderUnreadable",
    "DeleteFailed",
    "MoveFailed",
    "InputReadFailed",
    "InvalidInput",
    "PathResolutionFailed",
]
