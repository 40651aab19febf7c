"""Simple message printing helpers for mangarn UI.

These are the most commonly used output functions for quick status messages.
"""

from __future__ import annotations

from rich.markup import escape

from mangarn.ui.core import console, err_console


def print_step(step_num: int, total_steps: int, title: str) -> None:
    """Print a step header.

    Example:
        >>> print_step(1, 3, "Scanning directory")
        Step 1/3: Scanning directory
    """
    console.print(f"[step]Step {step_num}/{total_steps}:[/] {escape(title)}")


def print_success(message: str) -> None:
    """Print a success message with checkmark.

    Example:
        >>> print_success("Wrote A Random Name Vol.1.cbz")
          ✓ Wrote A Random Name Vol.1.cbz
    """
    console.print(f"  [success]✓[/] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"  [warning]![/] {escape(message)}")


def print_info(message: str) -> None:
    """Print an info message.

    Example:
        >>> print_info("Found 42 page files")
          → Found 42 page files
    """
    console.print(f"  [info]→[/] {escape(message)}")


def print_dry_run(message: str) -> None:
    """Print a dry-run message.

    Example:
        >>> print_dry_run("Would write A Random Name Vol.1.cbz")
          [DRY RUN] Would write A Random Name Vol.1.cbz
    """
    console.print(f"  [warning]\\[DRY RUN][/] {escape(message)}")


def fatal_error(message: str, hint: str | None = None) -> None:
    """Print a fatal error to stderr.

    Args:
        message: The error message
        hint: Optional hint for resolution

    Example:
        >>> fatal_error("Title mismatch", "Pack one series per directory")
    """
    err_console.print(f"\n[error]Error:[/] {escape(message)}")
    if hint:
        err_console.print(f"[dim]Hint: {escape(hint)}[/]")
