"""
Page file name parsing for mangarn.

Usage:
    from mangarn.naming import parse, validate

    entry = parse("1009_A_Random_Name_c118_v14_Releaser_HQ_60.jpg")
    entry.title        # "A Random Name"
    entry.page_number  # 60
"""

from __future__ import annotations

from mangarn.naming.constants import (
    ABSOLUTE_PAGE_PATTERN,
    CHAPTER_PATTERN,
    PAGE_MARKER_PATTERN,
    PAGE_SUFFIX_PATTERN,
    TITLE_PATTERN,
    VOLUME_PATTERN,
)
from mangarn.naming.filename_parsing import (
    extract_absolute_page,
    extract_chapter,
    extract_page_number,
    extract_title,
    extract_volume,
    parse,
    validate,
)

__all__ = [
    # Patterns
    "ABSOLUTE_PAGE_PATTERN",
    "CHAPTER_PATTERN",
    "PAGE_MARKER_PATTERN",
    "PAGE_SUFFIX_PATTERN",
    "TITLE_PATTERN",
    "VOLUME_PATTERN",
    # Extractors
    "extract_absolute_page",
    "extract_chapter",
    "extract_page_number",
    "extract_title",
    "extract_volume",
    # Entry points
    "parse",
    "validate",
]
