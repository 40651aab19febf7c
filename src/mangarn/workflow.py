"""
Workflow orchestration for mangarn.

Packing coordinates all processing steps:
1. Discovery (list page files in the working directory)
2. Parsing (every file must yield a title)
3. Grouping (+ validation: one series, every page numbered)
4. Archive writing (one .cbz per volume/chapter)

Any failure aborts the run. Archives written before the failure are kept.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from mangarn.archive import archive_path, write_bucket
from mangarn.discovery import list_page_files
from mangarn.grouping import group_entries
from mangarn.models import Bucket, ParsedEntry
from mangarn.naming import parse, validate
from mangarn.renumber import Rename, apply_renames, plan_renames
from mangarn.settings import Settings
from mangarn.ui import (
    print_dry_run,
    print_info,
    print_step,
    print_success,
    print_warning,
)

logger = logging.getLogger(__name__)


@dataclass
class PackResult:
    """Result of packing one directory."""

    title: str
    buckets: list[Bucket]
    written: list[Path] = field(default_factory=list)
    dry_run: bool = False

    @property
    def page_count(self) -> int:
        return sum(len(bucket) for bucket in self.buckets)


def collect_entries(directory: Path, settings: Settings) -> list[ParsedEntry]:
    """
    Discover and parse every page file in a directory.

    Raises:
        DiscoveryError: If the directory cannot be read
        TitleNotFoundError: If any file name yields no title
    """
    names = list_page_files(directory, ignore=settings.page_ignores(directory))
    entries = [validate(name) for name in names]
    for entry in entries:
        logger.debug("Parsed %s", entry)
    return entries


def inspect_names(names: list[str]) -> list[ParsedEntry]:
    """Parse names without requiring a title (for display)."""
    return [parse(name) for name in names]


def run_pack(directory: Path, settings: Settings, dry_run: bool = False) -> PackResult:
    """
    Pack the page files of a directory into CBZ archives.

    Args:
        directory: Working directory containing the page files
        settings: Loaded settings (output directory, ignore list)
        dry_run: If True, plan archives without writing anything

    Returns:
        PackResult with buckets and written archive paths

    Raises:
        MangarnError: On any extraction, validation or storage failure
    """
    output_dir = settings.resolve_output_dir(directory)

    print_step(1, 3, "Reading page files")
    entries = collect_entries(directory, settings)
    print_info(f"Found {len(entries)} page file(s)")

    print_step(2, 3, "Grouping pages")
    buckets = group_entries(entries)
    title = buckets[0].title
    print_info(f"{title}: {len(buckets)} archive(s)")
    if any(bucket.volume == 0 for bucket in buckets):
        print_warning("Some pages have no volume marker and are packed as Vol.0")

    result = PackResult(title=title, buckets=buckets, dry_run=dry_run)

    print_step(3, 3, "Writing archives")
    for bucket in buckets:
        if dry_run:
            target = archive_path(bucket, output_dir)
            print_dry_run(f"Would write {target} ({len(bucket)} pages)")
            continue

        path = write_bucket(bucket, directory, output_dir)
        result.written.append(path)
        print_success(f"Wrote {path.name} ({len(bucket)} pages)")

    logger.info(
        "Packed %d page(s) of %s into %d archive(s)",
        result.page_count,
        title,
        len(result.written),
    )
    return result


def run_renumber(
    directory: Path,
    settings: Settings,
    title: str | None = None,
    volume: int = 1,
    dry_run: bool = False,
) -> list[Rename]:
    """
    Give a flat "<absolute>_<relative>.<ext>" page dump chapter numbers.

    Args:
        directory: Working directory containing the page files
        settings: Loaded settings (ignore list)
        title: Series title (defaults to the directory's name)
        volume: Volume number written into every new name
        dry_run: If True, only plan the renames

    Returns:
        The planned (or applied) renames

    Raises:
        RenumberError: If a name does not fit or a rename fails
    """
    title = title or directory.resolve().name
    names = list_page_files(directory, ignore=settings.page_ignores(directory))
    renames = plan_renames(names, title=title, volume=volume)

    if dry_run:
        for rename in renames:
            print_dry_run(f"{rename.source} -> {rename.target}")
        return renames

    count = apply_renames(directory, renames)
    chapters = renames[-1].chapter if renames else 0
    print_success(f"Renamed {count} file(s) into {chapters} chapter(s)")
    return renames
