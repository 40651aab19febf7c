"""Shared pytest fixtures and helpers for mangarn tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from pathlib import Path

import pytest

from mangarn.settings import clear_settings_cache

SERIES_PAGES = (
    "0001_A_Series_name_c001_v01_p000_Source_Quality_Release.jpg",
    "0002_A_Series_name_c001_v01_p001_Source_Quality_Release.jpg",
    "0003_A_Series_name_c002_v01_p000_Source_Quality_Release.jpg",
)


def make_pages(directory: Path, names: Iterable[str]) -> Path:
    """Create page files whose content is their own name.

    Args:
        directory: Directory to create files in (created if missing).
        names: File names to create.

    Returns:
        The directory.
    """
    directory.mkdir(parents=True, exist_ok=True)
    for name in names:
        (directory / name).write_bytes(name.encode("utf-8"))
    return directory


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Isolate tests from MANGARN_* variables and cached settings."""
    for key in list(os.environ):
        if key.startswith("MANGARN_"):
            monkeypatch.delenv(key)
    clear_settings_cache()


@pytest.fixture(autouse=True)
def reset_logger() -> Iterator[None]:
    """Close handlers so log files are released between tests."""
    yield
    logger = logging.getLogger("mangarn")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def page_dir(tmp_path: Path) -> Path:
    """Directory holding three pages of one series over two chapters."""
    return make_pages(tmp_path / "pages", SERIES_PAGES)
