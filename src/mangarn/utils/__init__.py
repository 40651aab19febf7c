"""Utility modules for mangarn."""

from mangarn.utils.paths import ensure_dir, safe_filename

__all__ = [
    "ensure_dir",
    "safe_filename",
]
