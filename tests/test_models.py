"""Tests for data models."""

from __future__ import annotations

import dataclasses

import pytest

from mangarn.models import Bucket, ParsedEntry


class TestParsedEntry:
    """Tests for ParsedEntry."""

    def test_defaults(self) -> None:
        """Unset fields use their "no information" values."""
        entry = ParsedEntry(file_name="x.jpg")
        assert entry.title == ""
        assert entry.volume == 0
        assert entry.chapter == 0
        assert entry.page_number is None
        assert entry.absolute_page_number is None
        assert not entry.has_title

    def test_is_immutable(self) -> None:
        """Entries cannot be modified after creation."""
        entry = ParsedEntry(file_name="x.jpg", title="T")
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.title = "Other"  # type: ignore[misc]

    def test_extension(self) -> None:
        """Extension includes the dot, or is empty."""
        assert ParsedEntry(file_name="Title_p1.jpeg").extension == ".jpeg"
        assert ParsedEntry(file_name="Title_p1.tar.png").extension == ".png"
        assert ParsedEntry(file_name="Title_p1").extension == ""

    def test_str(self) -> None:
        """String form summarises the entry for logs."""
        entry = ParsedEntry(
            file_name="x.jpg",
            title="T",
            volume=1,
            chapter=2,
            page_number=3,
            absolute_page_number=None,
        )
        assert str(entry) == "T: abs=?, vol=1, chap=2, page=3 (source: x.jpg)"


class TestBucket:
    """Tests for Bucket naming."""

    def test_archive_name_with_chapter(self) -> None:
        """Chapter is included when non-zero."""
        bucket = Bucket(title="T", volume=2, chapter=5)
        assert bucket.archive_stem == "T Vol.2 Ch.5"
        assert bucket.archive_name == "T Vol.2 Ch.5.cbz"

    def test_archive_name_without_chapter(self) -> None:
        """Chapter 0 is left out of the name."""
        assert Bucket(title="T", volume=2, chapter=0).archive_name == "T Vol.2.cbz"

    def test_volume_zero_kept(self) -> None:
        """Volume is always part of the name."""
        assert Bucket(title="T", volume=0, chapter=3).archive_name == "T Vol.0 Ch.3.cbz"

    def test_len(self) -> None:
        """Length is the number of pages."""
        entries = (ParsedEntry(file_name="a"), ParsedEntry(file_name="b"))
        assert len(Bucket(title="T", volume=1, chapter=1, entries=entries)) == 2
