"""
Tests for FolderScannerImpl — top-level regular files only.
"""
import os
import sys
import pytest
from pathlib import Path
from hashfilter.core.scanner import FolderScannerImpl
from hashfilter.core.errors import FolderUnreadable


class TestFolderScanner:

    def test_lists_regular_files_with_full_paths(self, sample_folder):
        found = FolderScannerImpl(str(sample_folder)).scan()
        assert sorted(found) == sorted(str(sample_folder / n) for n in ("a.txt", "b.txt", "c.txt"))

    def test_subdirectories_not_listed_or_entered(self, sample_folder):
        subdir = sample_folder / "nested"
        subdir.mkdir()
        (subdir / "inner.txt").write_text("hi")

        found = FolderScannerImpl(str(sample_folder)).scan()
        assert str(subdir) not in found
        assert str(subdir / "inner.txt") not in found
        assert len(found) == 3

    @pytest.mark.skipif(sys.platform == "win32", reason="Symlinks need privileges on Windows")
    def test_symlinks_skipped(self, sample_folder, tmp_path):
        target = tmp_path / "outside.txt"
        target.write_text("hi")
        os.symlink(target, sample_folder / "link.txt")
        os.symlink(sample_folder / "a.txt", sample_folder / "link_inside.txt")

        names = [Path(p).name for p in FolderScannerImpl(str(sample_folder)).scan()]
        assert "link.txt" not in names
        assert "link_inside.txt" not in names

    @pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="FIFOs not supported")
    def test_special_files_skipped(self, sample_folder):
        os.mkfifo(sample_folder / "pipe")
        names = [Path(p).name for p in FolderScannerImpl(str(sample_folder)).scan()]
        assert "pipe" not in names

    def test_empty_folder(self, tmp_path):
        assert FolderScannerImpl(str(tmp_path)).scan() == []

    def test_missing_folder_raises(self, tmp_path):
        with pytest.raises(FolderUnreadable) as exc_info:
            FolderScannerImpl(str(tmp_path / "missing")).scan()
        assert exc_info.value.path == str(tmp_path / "missing")

    def test_file_instead_of_folder_raises(self, sample_folder):
        with pytest.raises(FolderUnreadable):
            FolderScannerImpl(str(sample_folder / "a.txt")).scan()
