"""
Shared fixtures for filtering tests.
Creates isolated folders with controlled file contents and scripted operator input.
"""
import hashlib
import pytest
from pathlib import Path
from typing import Dict, List

from hashfilter.core.scanner import FolderScannerImpl


def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def listing_order(folder: Path) -> List[str]:
    """Names of candidate files in the order the scanner reports them."""
    return [Path(p).name for p in FolderScannerImpl(str(folder)).scan()]


@pytest.fixture
def sample_folder(tmp_path) -> Path:
    """
    a.txt and b.txt share content "hi", c.txt holds "bye".
    Exactly one of a/b (the one listed second) is a duplicate.
    """
    folder = tmp_path / "scan"
    folder.mkdir()
    (folder / "a.txt").write_text("hi")
    (folder / "b.txt").write_text("hi")
    (folder / "c.txt").write_text("bye")
    return folder


@pytest.fixture
def holding_dir(tmp_path) -> Path:
    folder = tmp_path / "holding"
    folder.mkdir()
    return folder


@pytest.fixture
def distinct_files(tmp_path) -> Dict[str, Path]:
    """Five files with pairwise different content."""
    folder = tmp_path / "distinct"
    folder.mkdir()
    files = {}
    for i in range(5):
        files[f"file{i}"] = folder / f"file{i}.bin"
        files[f"file{i}"].write_bytes(bytes([i]) * (100 + i))
    return files


@pytest.fixture
def scripted_input():
    """
    Factory for an input function replaying the given lines.
    Raises EOFError once the script is exhausted, like input() on a closed stdin.
    """
    def factory(*lines: str):
        remaining = list(lines)

        def read() -> str:
            if not remaining:
                raise EOFError("no more input")
            return remaining.pop(0)

        read.remaining = remaining
        return read

    return factory
