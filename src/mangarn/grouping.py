"""
Grouping of parsed entries into archive buckets.

A run packs exactly one series. The whole set of entries is rejected when
any entry disagrees with the first one on the title, or lacks a page
number. Accepted entries are bucketed by volume, then by chapter.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Sequence

from mangarn.exceptions import FieldUndeterminedError, NoPagesError, TitleMismatchError
from mangarn.models import Bucket, ParsedEntry

logger = logging.getLogger(__name__)


def _page_order(entry: ParsedEntry) -> tuple[int, str]:
    # check_entries guarantees page_number is set
    return (entry.page_number or 0, entry.file_name)


def check_entries(entries: Sequence[ParsedEntry]) -> None:
    """
    Check that a set of entries can be packed.

    Volume and chapter 0 are accepted (no volume/chapter information).

    Raises:
        NoPagesError: If there are no entries
        TitleMismatchError: If an entry's title differs from the first entry's
        FieldUndeterminedError: If an entry has no page number
    """
    if not entries:
        raise NoPagesError("No pages found")

    title = entries[0].title
    for entry in entries:
        if entry.title != title:
            raise TitleMismatchError(
                f"Title mismatch: expected {title!r}, got {entry.title!r}",
                expected=title,
                got=entry.title,
                file_name=entry.file_name,
            )

        if entry.page_number is None:
            raise FieldUndeterminedError(
                f"Unable to determine page number: {entry}",
                field="page_number",
                file_name=entry.file_name,
            )


def group_entries(entries: Sequence[ParsedEntry]) -> list[Bucket]:
    """
    Bucket entries by volume, then chapter.

    Args:
        entries: Parsed entries of one series

    Returns:
        Buckets ordered by (volume, chapter), each with entries in page order

    Raises:
        ValidationError: If check_entries rejects the set
    """
    check_entries(entries)
    title = entries[0].title

    by_volume: dict[int, dict[int, list[ParsedEntry]]] = defaultdict(lambda: defaultdict(list))
    for entry in entries:
        by_volume[entry.volume][entry.chapter].append(entry)

    buckets: list[Bucket] = []
    for volume in sorted(by_volume):
        chapters = by_volume[volume]
        for chapter in sorted(chapters):
            pages = sorted(chapters[chapter], key=_page_order)
            buckets.append(Bucket(title=title, volume=volume, chapter=chapter, entries=tuple(pages)))

    logger.debug("Grouped %d page(s) into %d bucket(s)", len(entries), len(buckets))
    return buckets
