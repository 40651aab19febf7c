"""
Page file name parsing.

Infers series title, volume, chapter and page numbers from scanned page
file names. Release groups do not agree on a naming grammar, so every field
is extracted on its own and falls back to its own default:

- "[Releaser] A Random Name Vol. 1 Chapter. 01.jpg"
- "0001_A_Series_name_c001_v01_p000_Source_Quality_Release.jpg"
- "1009_A_Random_Name_c118_v14_Releaser_HQ_60.jpg"

A missing volume or chapter is reported as 0. A missing page number is
reported as None. A missing title is reported as "" by parse() and
raised as TitleNotFoundError by validate().
"""

from __future__ import annotations

import logging
import re

from mangarn.exceptions import TitleNotFoundError
from mangarn.models import ParsedEntry
from mangarn.naming.constants import (
    ABSOLUTE_PAGE_PATTERN,
    CHAPTER_PATTERN,
    PAGE_MARKER_PATTERN,
    PAGE_SUFFIX_PATTERN,
    TITLE_PATTERN,
    TITLE_SEPARATOR,
    VOLUME_PATTERN,
)

logger = logging.getLogger(__name__)


def _to_int(digits: str, pattern: re.Pattern[str]) -> int:
    """Convert a digit-only capture to int.

    Every numeric group is built from ASCII digits, so a failure here means
    the pattern itself is wrong, not the input.
    """
    try:
        return int(digits)
    except ValueError as e:
        raise AssertionError(
            f"pattern {pattern.pattern!r} captured non-numeric text {digits!r}"
        ) from e


def _search_number(name: str, pattern: re.Pattern[str]) -> int | None:
    """Return the "number" group of the first match of pattern, or None."""
    match = pattern.search(name)
    if not match:
        return None
    return _to_int(match.group("number"), pattern)


def extract_volume(name: str) -> int:
    """Extract the volume number ("Vol. 1", "Volume. 2", "v01").

    Returns:
        Volume number, or 0 if no volume marker was found
    """
    volume = _search_number(name, VOLUME_PATTERN)
    if volume is None:
        logger.debug("No volume marker in %r", name)
        return 0
    return volume


def extract_chapter(name: str) -> int:
    """Extract the chapter number ("Chapter. 01", "Ch. 3", "c118").

    Returns:
        Chapter number, or 0 if no chapter marker was found
    """
    chapter = _search_number(name, CHAPTER_PATTERN)
    if chapter is None:
        logger.debug("No chapter marker in %r", name)
        return 0
    return chapter


def extract_absolute_page(name: str) -> int | None:
    """Extract the series-wide page number from a leading digit run."""
    return _search_number(name, ABSOLUTE_PAGE_PATTERN)


def extract_page_number(name: str) -> int | None:
    """
    Extract the page number within a chapter.

    Priority:
    1. Explicit page marker anywhere in the name ("p000")
    2. Digits right before the extension, preceded by two characters that
       are neither a dot nor a digit ("..._HQ_60.jpg")

    Args:
        name: Page file name

    Returns:
        Page number, or None if neither form matched
    """
    page = _search_number(name, PAGE_MARKER_PATTERN)
    if page is not None:
        return page

    page = _search_number(name, PAGE_SUFFIX_PATTERN)
    if page is None:
        logger.debug("No page number in %r", name)
    return page


def extract_title(name: str) -> str:
    """
    Extract the series title.

    The title is the shortest run of letters, apostrophes, underscores and
    spaces that sits directly in front of a volume, chapter or page marker.
    Underscores are turned into spaces:

        "0001_A_Series_name_c001_v01_p000.jpg" → "A Series name"

    Returns:
        Title, or an empty string if none was found
    """
    match = TITLE_PATTERN.search(name)
    if not match:
        logger.debug("No title in %r", name)
        return ""
    return match.group("title").replace(TITLE_SEPARATOR, " ")


def parse(file_name: str) -> ParsedEntry:
    """
    Parse a page file name into a ParsedEntry.

    Never fails on bad input: fields that cannot be inferred keep their
    defaults (0 for volume/chapter, None for page numbers, "" for title).

    Args:
        file_name: Bare file name (not a path)

    Returns:
        ParsedEntry with file_name set to the input verbatim
    """
    return ParsedEntry(
        file_name=file_name,
        title=extract_title(file_name),
        volume=extract_volume(file_name),
        chapter=extract_chapter(file_name),
        page_number=extract_page_number(file_name),
        absolute_page_number=extract_absolute_page(file_name),
    )


def validate(file_name: str) -> ParsedEntry:
    """
    Parse a page file name, requiring a title.

    Raises:
        TitleNotFoundError: If no title could be inferred
    """
    entry = parse(file_name)
    if not entry.has_title:
        raise TitleNotFoundError(
            f"Unable to parse title from filename: {file_name}",
            file_name=file_name,
        )
    return entry
