"""Version display for mangarn CLI."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rich.console import Console


def get_version() -> str:
    """Get the current mangarn version.

    Tries importlib.metadata first (for installed package),
    falls back to __version__ in __init__.py.
    """
    try:
        return version("mangarn")
    except PackageNotFoundError:
        # Fallback for development/editable installs
        from mangarn import __version__

        return __version__


def print_version(console: Console) -> None:
    """Print the version line."""
    console.print(f"[bold]mangarn[/] [info]v{get_version()}[/]")
