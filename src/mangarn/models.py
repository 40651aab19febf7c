"""Data models for mangarn."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _format_optional(value: int | None) -> str:
    return "?" if value is None else str(value)


@dataclass(frozen=True)
class ParsedEntry:
    """
    Metadata inferred from a single page file name.

    Volume and chapter use 0 for "no information". Page numbers use None
    instead, since 0 is a legitimate page index.

    Example:
        "1009_A_Random_Name_c118_v14_Releaser_HQ_60.jpg"

        ParsedEntry(
            file_name="1009_A_Random_Name_c118_v14_Releaser_HQ_60.jpg",
            title="A Random Name",
            volume=14,
            chapter=118,
            page_number=60,
            absolute_page_number=1009,
        )
    """

    file_name: str  # Verbatim input, used to locate the file on disk
    title: str = ""  # Empty when no title could be inferred
    volume: int = 0
    chapter: int = 0
    page_number: int | None = None  # Position within the chapter
    absolute_page_number: int | None = None  # Position within the whole series

    @property
    def extension(self) -> str:
        """File extension including the leading dot ("" if none)."""
        return os.path.splitext(self.file_name)[1]

    @property
    def has_title(self) -> bool:
        return bool(self.title)

    def __str__(self) -> str:
        return (
            f"{self.title}: abs={_format_optional(self.absolute_page_number)}, "
            f"vol={self.volume}, chap={self.chapter}, "
            f"page={_format_optional(self.page_number)} (source: {self.file_name})"
        )


@dataclass(frozen=True)
class Bucket:
    """
    Entries sharing (title, volume, chapter), destined for one archive.

    Entries are kept in page order; see grouping.group_entries.
    """

    title: str
    volume: int
    chapter: int
    entries: tuple[ParsedEntry, ...] = ()

    @property
    def archive_stem(self) -> str:
        """Archive name without extension, e.g. "Title Vol.2 Ch.5"."""
        stem = f"{self.title} Vol.{self.volume}"
        if self.chapter != 0:
            stem += f" Ch.{self.chapter}"
        return stem

    @property
    def archive_name(self) -> str:
        return f"{self.archive_stem}.cbz"

    def __len__(self) -> int:
        return len(self.entries)
