"""Shared helpers for CLI commands."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import typer

from mangarn.exceptions import (
    ConfigurationError,
    ExtractionError,
    MangarnError,
    RenumberError,
    TitleMismatchError,
    ValidationError,
)
from mangarn.ui import fatal_error

logger = logging.getLogger(__name__)

# Checked in order; the first matching class supplies the hint
ERROR_HINTS: tuple[tuple[type[MangarnError], str], ...] = (
    (TitleMismatchError, "Pack one series per directory"),
    (ExtractionError, "Run 'mangarn inspect' to see how file names are parsed"),
    (ValidationError, "Run 'mangarn inspect' to see how file names are parsed"),
    (RenumberError, "Expected file names like <absolute>_<relative>.<ext>"),
    (ConfigurationError, "Check MANGARN_* environment variables and .env"),
)


def hint_for(error: MangarnError) -> str | None:
    """Return a resolution hint for an error, if there is one."""
    for error_type, hint in ERROR_HINTS:
        if isinstance(error, error_type):
            return hint
    return None


@contextmanager
def handle_errors() -> Iterator[None]:
    """Turn mangarn errors into a readable message and exit status 1.

    Example:
        with handle_errors():
            run_pack(...)
    """
    try:
        yield
    except MangarnError as e:
        if e.details:
            logger.debug("Error details: %s", e.details)
        fatal_error(str(e), hint=hint_for(e))
        raise typer.Exit(1) from e
