"""Table formatting components for mangarn UI."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from rich.markup import escape
from rich.table import Table

from mangarn.models import Bucket, ParsedEntry
from mangarn.ui.core import console
from mangarn.utils.paths import safe_filename


def _number_cell(value: int | None) -> str:
    if value is None:
        return "[missing]?[/]"
    return str(value)


def print_entry_table(entries: Sequence[ParsedEntry], title: str = "Parsed Pages") -> None:
    """Print parsed metadata, one row per file.

    Undetermined page numbers are shown as a red "?" and a missing title as
    a red "(none)".
    """
    if not entries:
        console.print(f"[dim]No {title.lower()} found[/]")
        return

    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("File", style="path", overflow="fold")
    table.add_column("Title", style="series")
    table.add_column("Vol", justify="right")
    table.add_column("Ch", justify="right")
    table.add_column("Page", justify="right")
    table.add_column("Abs", justify="right")

    for entry in entries:
        table.add_row(
            escape(entry.file_name),
            escape(entry.title) or "[missing](none)[/]",
            str(entry.volume),
            str(entry.chapter),
            _number_cell(entry.page_number),
            _number_cell(entry.absolute_page_number),
        )

    console.print(table)


def print_bucket_table(
    buckets: Sequence[Bucket],
    written: Sequence[Path] | None = None,
    title: str = "Archives",
) -> None:
    """Print one row per archive with its page count.

    Args:
        buckets: Buckets in write order
        written: Paths actually written (omit for dry runs)
        title: Table title
    """
    if not buckets:
        console.print(f"[dim]No {title.lower()}[/]")
        return

    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("Archive", style="path")
    table.add_column("Vol", justify="right")
    table.add_column("Ch", justify="right")
    table.add_column("Pages", justify="right", style="number")
    table.add_column("Status", justify="center")

    done = {path.name for path in written or ()}
    for bucket in buckets:
        name = safe_filename(bucket.archive_name)
        status = "[success]written[/]" if name in done else "[dim]planned[/]"
        table.add_row(
            escape(name),
            str(bucket.volume),
            str(bucket.chapter),
            str(len(bucket)),
            status,
        )

    console.print(table)
