"""Tests for page file discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from mangarn.discovery import list_page_files
from mangarn.exceptions import DiscoveryError, StorageError
from tests.conftest import make_pages


class TestListPageFiles:
    """Tests for list_page_files()."""

    def test_lists_files_sorted(self, tmp_path: Path) -> None:
        """Files are returned by name, in sorted order."""
        make_pages(tmp_path, ["b.jpg", "a.jpg", "c.png"])
        assert list_page_files(tmp_path) == ["a.jpg", "b.jpg", "c.png"]

    def test_skips_directories(self, tmp_path: Path) -> None:
        """Sub-directories (including output/) are skipped."""
        make_pages(tmp_path, ["a.jpg"])
        (tmp_path / "output").mkdir()
        assert list_page_files(tmp_path) == ["a.jpg"]

    def test_skips_os_metadata(self, tmp_path: Path) -> None:
        """Default ignore list covers OS metadata files."""
        make_pages(tmp_path, ["a.jpg", ".DS_Store", "Thumbs.db", "desktop.ini"])
        assert list_page_files(tmp_path) == ["a.jpg"]

    def test_custom_ignore(self, tmp_path: Path) -> None:
        """A custom ignore list replaces the default."""
        make_pages(tmp_path, ["a.jpg", "notes.txt", ".DS_Store"])
        assert list_page_files(tmp_path, ignore=["notes.txt"]) == [".DS_Store", "a.jpg"]

    def test_empty_directory(self, tmp_path: Path) -> None:
        """An empty directory gives an empty list."""
        assert list_page_files(tmp_path) == []

    def test_missing_directory(self, tmp_path: Path) -> None:
        """An unreadable directory raises DiscoveryError."""
        missing = tmp_path / "missing"
        with pytest.raises(DiscoveryError) as exc_info:
            list_page_files(missing)
        assert exc_info.value.path == missing
        assert isinstance(exc_info.value, StorageError)
