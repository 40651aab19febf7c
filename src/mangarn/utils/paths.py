"""Filesystem path helpers."""

from __future__ import annotations

from pathlib import Path

from pathvalidate import sanitize_filename as pv_sanitize_filename


def ensure_dir(path: Path) -> Path:
    """Create directory if it doesn't exist, return the path."""
    path.mkdir(parents=True, exist_ok=True)
    return path


def safe_filename(raw: str) -> str:
    """
    Make a file name safe on every platform.

    Well-formed archive names such as "A Random Name Vol.1 Ch.2.cbz" come
    back unchanged. Catches edge cases like:
    - Reserved Windows names (CON, PRN, NUL, COM1, etc.)
    - Invalid characters on specific platforms
    - Trailing dots/spaces (Windows issue)

    Args:
        raw: Proposed file name

    Returns:
        Cross-platform safe filename
    """
    return str(pv_sanitize_filename(raw, platform="universal"))
