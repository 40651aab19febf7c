"""Packing and inspection commands.

Commands: pack, inspect, renumber
"""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Annotated

import typer

from mangarn.cli._app import PACK_COMMANDS, TOOLS_COMMANDS
from mangarn.cli._context import RuntimeContext, get_runtime_context
from mangarn.cli._helpers import handle_errors


def pack_directory(runtime: RuntimeContext) -> None:
    """Pack the runtime's working directory, exiting 1 on failure."""
    from mangarn.ui.tables import print_bucket_table
    from mangarn.workflow import run_pack

    with handle_errors():
        result = run_pack(runtime.directory, runtime.settings, dry_run=runtime.dry_run)

    print_bucket_table(result.buckets, written=result.written)


def register_core_commands(app: typer.Typer) -> None:
    """Register packing commands on the app."""

    @app.command(rich_help_panel=PACK_COMMANDS)
    def pack(ctx: typer.Context) -> None:
        """Pack page files of the current directory into CBZ archives.

        Every file must belong to the same series and carry a page number.
        One archive is written per volume/chapter:

          [cyan]output/<title> Vol.<volume> Ch.<chapter>.cbz[/]

        [bold]Examples:[/]
          mangarn pack               [dim]# Write archives[/]
          mangarn --dry-run pack     [dim]# Preview without writing[/]
        """
        pack_directory(get_runtime_context(ctx.obj))

    @app.command(rich_help_panel=PACK_COMMANDS)
    def inspect(
        ctx: typer.Context,
        names: Annotated[
            list[str] | None,
            typer.Argument(help="File names to parse (default: files in the current directory)."),
        ] = None,
        json_output: Annotated[
            bool,
            typer.Option("--json", help="Print JSON instead of a table."),
        ] = False,
    ) -> None:
        """Show what would be parsed from each file name.

        Nothing is validated or written, so this also works on names that
        [green]pack[/] would reject.

        [bold]Examples:[/]
          mangarn inspect
          mangarn inspect "1009_A_Random_Name_c118_v14_Releaser_HQ_60.jpg"
          mangarn inspect --json > pages.json
        """
        from mangarn.discovery import list_page_files
        from mangarn.ui.tables import print_entry_table
        from mangarn.workflow import inspect_names

        runtime = get_runtime_context(ctx.obj)
        with handle_errors():
            if not names:
                names = list_page_files(
                    runtime.directory, ignore=runtime.settings.page_ignores(runtime.directory)
                )
            entries = inspect_names(names)

        if json_output:
            typer.echo(json.dumps([asdict(entry) for entry in entries], indent=2))
            return
        print_entry_table(entries)

    @app.command(rich_help_panel=TOOLS_COMMANDS)
    def renumber(
        ctx: typer.Context,
        title: Annotated[
            str | None,
            typer.Option("--title", "-t", help="Series title (default: directory name)."),
        ] = None,
        volume: Annotated[
            int,
            typer.Option("--volume", min=0, help="Volume number for every page."),
        ] = 1,
    ) -> None:
        """Add chapter numbers to a flat <absolute>_<relative>.<ext> page dump.

        A new chapter starts whenever the relative page number drops:

          [dim]0031_000.jpg[/] -> [cyan]0031 <title> v1 c2 p000.jpg[/]

        [bold]Examples:[/]
          mangarn --dry-run renumber       [dim]# Preview new names[/]
          mangarn renumber --title "A Random Name"
        """
        from mangarn.workflow import run_renumber

        runtime = get_runtime_context(ctx.obj)
        with handle_errors():
            run_renumber(
                runtime.directory,
                runtime.settings,
                title=title,
                volume=volume,
                dry_run=runtime.dry_run,
            )
