"""Tests for filesystem path helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from mangarn.utils.paths import ensure_dir, safe_filename


class TestSafeFilename:
    """Tests for safe_filename()."""

    @pytest.mark.parametrize(
        "name",
        [
            "A Random Name Vol.14 Ch.118.cbz",
            "A Random Name Vol.15.cbz",
            "Kino's Journey Vol.1 Ch.2.cbz",
        ],
    )
    def test_archive_names_unchanged(self, name: str) -> None:
        """Well-formed archive names pass through."""
        assert safe_filename(name) == name

    def test_invalid_characters_removed(self) -> None:
        """Characters invalid on any platform are dropped."""
        result = safe_filename('What?: "A" Story Vol.1.cbz')
        for char in '?:"':
            assert char not in result
        assert result.endswith("Vol.1.cbz")

    def test_path_separators_removed(self) -> None:
        assert "/" not in safe_filename("AC/DC Vol.1.cbz")


class TestEnsureDir:
    """Tests for ensure_dir()."""

    def test_creates_nested(self, tmp_path: Path) -> None:
        target = tmp_path / "a" / "b"
        assert ensure_dir(target) == target
        assert target.is_dir()

    def test_existing_ok(self, tmp_path: Path) -> None:
        assert ensure_dir(tmp_path) == tmp_path
