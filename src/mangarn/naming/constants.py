"""
Constants used across naming modules.

Contains the pre-compiled patterns used to pull metadata out of page file
names. Patterns are compiled once at import time and only ever read, so
they are safe to share between threads.

Markers are case-sensitive: "v12" and "Vol. 12" are volumes, "V12" is not.
"""

from __future__ import annotations

import re

# =============================================================================
# Volume / Chapter
# =============================================================================

# "Vol. 1", "Volume. 3", "v01", "Vol12"
# "Volume 3" (space without a period) does not match.
VOLUME_PATTERN = re.compile(r"(?:Vol|Volume|v)(?:\.\s)?(?P<number>\d+)", re.ASCII)

# "Chapter. 01", "Ch. 5", "c118"
CHAPTER_PATTERN = re.compile(r"(?:Ch|Chapter|c)(?:\.\s)?(?P<number>\d+)", re.ASCII)

# =============================================================================
# Page Numbers
# =============================================================================

# Leading digit run: "1009_A_Random_Name..." → 1009
ABSOLUTE_PAGE_PATTERN = re.compile(r"^(?P<number>\d+)", re.ASCII)

# Explicit page marker anywhere: "..._p000_..." → 0
PAGE_MARKER_PATTERN = re.compile(r"p(?P<number>\d+)", re.ASCII)

# Last number before the extension, preceded by two non-dot, non-digit
# characters: "..._HQ_60.jpg" → 60. \Z, not $, so a trailing newline
# does not count as the end of the name.
PAGE_SUFFIX_PATTERN = re.compile(r"[^.0-9]{2}(?P<number>\d+)\.[a-zA-Z]+\Z", re.ASCII)

# =============================================================================
# Title
# =============================================================================

# Shortest run of letters/apostrophes/separators that is directly followed
# by a volume, chapter or page marker and its number.
TITLE_PATTERN = re.compile(
    r"[_ ]?"
    r"(?P<title>[a-zA-Z'_ ]+?)"
    r"[_ ]?"
    r"(?:[cvp]|(?:Vol|Volume|Chapter|Ch)\. )"
    r"\d+",
    re.ASCII,
)

# Separator replaced with a space in extracted titles
TITLE_SEPARATOR = "_"
