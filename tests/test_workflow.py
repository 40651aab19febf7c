"""Tests for packing and renumbering workflows."""

from __future__ import annotations

import zipfile
from pathlib import Path

import pytest

from mangarn.exceptions import (
    FieldUndeterminedError,
    NoPagesError,
    TitleMismatchError,
    TitleNotFoundError,
)
from mangarn.settings import Settings
from mangarn.workflow import collect_entries, inspect_names, run_pack, run_renumber
from tests.conftest import make_pages


@pytest.fixture
def settings() -> Settings:
    """Default settings."""
    return Settings()


class TestCollectEntries:
    """Tests for collect_entries()."""

    def test_parses_every_file(self, page_dir: Path, settings: Settings) -> None:
        """One entry per page file, in name order."""
        entries = collect_entries(page_dir, settings)
        assert [e.absolute_page_number for e in entries] == [1, 2, 3]
        assert {e.title for e in entries} == {"A Series name"}

    def test_skips_ignored_files(self, page_dir: Path, settings: Settings) -> None:
        """OS metadata files are not pages."""
        (page_dir / "Thumbs.db").write_bytes(b"")
        assert len(collect_entries(page_dir, settings)) == 3

    def test_untitled_file_rejected(self, page_dir: Path, settings: Settings) -> None:
        """A file without a title stops collection."""
        (page_dir / "notes.txt").write_text("not a page")
        with pytest.raises(TitleNotFoundError) as exc_info:
            collect_entries(page_dir, settings)
        assert exc_info.value.file_name == "notes.txt"


def test_inspect_names_does_not_validate() -> None:
    """Inspection parses names that packing would reject."""
    (entry,) = inspect_names(["notes.txt"])
    assert entry.title == ""
    assert entry.page_number is None


class TestRunPack:
    """Tests for run_pack()."""

    def test_writes_one_archive_per_chapter(self, page_dir: Path, settings: Settings) -> None:
        """Pages are split by chapter and named by page number."""
        result = run_pack(page_dir, settings)

        output = page_dir / "output"
        assert result.title == "A Series name"
        assert result.page_count == 3
        assert result.written == [
            output / "A Series name Vol.1 Ch.1.cbz",
            output / "A Series name Vol.1 Ch.2.cbz",
        ]
        with zipfile.ZipFile(result.written[0]) as zf:
            assert zf.namelist() == ["Image 0.jpg", "Image 1.jpg"]
            assert zf.read("Image 1.jpg") == (
                b"0002_A_Series_name_c001_v01_p001_Source_Quality_Release.jpg"
            )
        with zipfile.ZipFile(result.written[1]) as zf:
            assert zf.namelist() == ["Image 0.jpg"]

    def test_rerun_ignores_output_dir(self, page_dir: Path, settings: Settings) -> None:
        """The output directory inside the working directory is not a page."""
        run_pack(page_dir, settings)
        result = run_pack(page_dir, settings)
        assert len(result.written) == 2

    def test_dry_run_writes_nothing(self, page_dir: Path, settings: Settings) -> None:
        """Dry runs plan archives without touching the filesystem."""
        result = run_pack(page_dir, settings, dry_run=True)
        assert result.dry_run
        assert len(result.buckets) == 2
        assert result.written == []
        assert not (page_dir / "output").exists()

    def test_absolute_output_dir(self, page_dir: Path, tmp_path: Path) -> None:
        """An absolute output directory is used as-is."""
        output = tmp_path / "library"
        result = run_pack(page_dir, Settings(output_dir=output))
        assert all(path.parent == output for path in result.written)
        assert not (page_dir / "output").exists()

    def test_title_mismatch_writes_nothing(self, page_dir: Path, settings: Settings) -> None:
        """A second series aborts the run before any archive is written."""
        make_pages(page_dir, ["0004_Other_Series_c001_v01_p002_Release.jpg"])
        with pytest.raises(TitleMismatchError) as exc_info:
            run_pack(page_dir, settings)
        assert exc_info.value.expected == "A Series name"
        assert exc_info.value.got == "Other Series"
        assert not (page_dir / "output").exists()

    def test_missing_page_number(self, tmp_path: Path, settings: Settings) -> None:
        """A page without a page number aborts the run."""
        directory = make_pages(tmp_path / "pages", ["0001 T v1 c1 cover.jpg"])
        with pytest.raises(FieldUndeterminedError):
            run_pack(directory, settings)

    def test_empty_directory(self, tmp_path: Path, settings: Settings) -> None:
        """Nothing to pack is an error."""
        directory = make_pages(tmp_path / "empty", [])
        with pytest.raises(NoPagesError):
            run_pack(directory, settings)

    def test_volume_zero_warned(
        self, tmp_path: Path, settings: Settings, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Pages without a volume marker are packed as Vol.0 with a warning."""
        directory = make_pages(tmp_path / "pages", ["0001 T c1 p000.jpg"])
        result = run_pack(directory, settings)
        assert result.written[0].name == "T Vol.0 Ch.1.cbz"
        assert "no volume marker" in capsys.readouterr().out


class TestRunRenumber:
    """Tests for run_renumber()."""

    FLAT = ["0001_000.jpg", "0002_001.jpg", "0003_000.jpg"]

    def test_title_from_directory(self, tmp_path: Path, settings: Settings) -> None:
        """Without a title, the directory name is used."""
        directory = make_pages(tmp_path / "A Random Name", self.FLAT)
        renames = run_renumber(directory, settings)
        assert renames[-1].target == "0003 A Random Name v1 c2 p000.jpg"
        assert (directory / "0003 A Random Name v1 c2 p000.jpg").exists()

    def test_dry_run_keeps_names(self, tmp_path: Path, settings: Settings) -> None:
        """Dry runs only plan renames."""
        directory = make_pages(tmp_path / "pages", self.FLAT)
        renames = run_renumber(directory, settings, title="T", volume=2, dry_run=True)
        assert renames[0].target == "0001 T v2 c1 p000.jpg"
        assert sorted(p.name for p in directory.iterdir()) == self.FLAT

    def test_env_file_left_alone(self, tmp_path: Path, settings: Settings) -> None:
        """A .env among the pages is neither renamed nor rejected."""
        directory = make_pages(tmp_path / "pages", [*self.FLAT, ".env"])
        renames = run_renumber(directory, settings, title="T")
        assert [r.source for r in renames] == self.FLAT
        assert (directory / ".env").exists()

    def test_renumbered_pages_can_be_packed(self, tmp_path: Path, settings: Settings) -> None:
        """Renumbering produces names that pack into per-chapter archives."""
        directory = make_pages(tmp_path / "A Random Name", self.FLAT)
        run_renumber(directory, settings)
        result = run_pack(directory, settings)
        assert [p.name for p in result.written] == [
            "A Random Name Vol.1 Ch.1.cbz",
            "A Random Name Vol.1 Ch.2.cbz",
        ]
