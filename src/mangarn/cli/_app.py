"""App configuration and main callback for the CLI.

This module contains the Typer application factory and the main callback
that sets up logging and the runtime context for every command.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer

from mangarn.cli._context import RuntimeContext
from mangarn.cli._helpers import handle_errors
from mangarn.settings import Settings
from mangarn.ui import console as mangarn_console

logger = logging.getLogger(__name__)

# =============================================================================
# Help Panel Names
# =============================================================================

PACK_COMMANDS = "Packing"
TOOLS_COMMANDS = "Tools"


# =============================================================================
# Version Callback
# =============================================================================


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from mangarn.ui import print_version

        print_version(mangarn_console)
        raise typer.Exit()


# =============================================================================
# App Factory
# =============================================================================


MAIN_EPILOG = """
[bold cyan]Quick Start:[/]
  [dim]1.[/] cd "A Random Name"         [dim]# Directory with page images[/]
  [dim]2.[/] mangarn inspect            [dim]# Check how names are parsed[/]
  [dim]3.[/] mangarn --dry-run pack     [dim]# Preview archives[/]
  [dim]4.[/] mangarn                    [dim]# Write output/*.cbz[/]

[bold cyan]Tips:[/]
  - Global flags like [green]--dry-run[/] go [bold]BEFORE[/] the command
  - Flat dumps (0001_000.jpg, ...) can be fixed with [green]mangarn renumber[/]
  - Settings come from MANGARN_* variables, .env, or [green]--env-file[/]
"""


def make_app() -> typer.Typer:
    """Create and configure the main Typer application."""
    return typer.Typer(
        name="mangarn",
        help="Pack loosely-named manga page images into per-chapter CBZ archives",
        epilog=MAIN_EPILOG,
        rich_markup_mode="rich",
        pretty_exceptions_enable=True,
        pretty_exceptions_show_locals=False,
        no_args_is_help=False,  # Bare `mangarn` packs the current directory
        add_completion=False,
        context_settings={"help_option_names": ["-h", "--help"]},
    )


# =============================================================================
# Logging Setup Helper
# =============================================================================


def setup_logging(verbose: bool, settings: Settings) -> None:
    """Configure logging based on options."""
    from mangarn.logging_setup import setup_logging as _setup_logging

    log_level = "DEBUG" if verbose else settings.log_level

    _setup_logging(
        log_level=log_level,
        log_file=settings.log_file,
        quiet_console=not verbose,
    )


# =============================================================================
# Main Callback Factory
# =============================================================================


def create_main_callback(app: typer.Typer) -> None:
    """Register the main callback on the app."""

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        version: Annotated[
            bool,
            typer.Option(
                "--version",
                "-V",
                callback=version_callback,
                is_eager=True,
                help="Show version and exit.",
            ),
        ] = False,
        verbose: Annotated[
            bool,
            typer.Option(
                "--verbose",
                "-v",
                help="Enable verbose (DEBUG) logging.",
            ),
        ] = False,
        dry_run: Annotated[
            bool,
            typer.Option(
                "--dry-run",
                help="Show what would happen without writing or renaming files.",
            ),
        ] = False,
        env_file: Annotated[
            Path | None,
            typer.Option(
                "--env-file",
                help="Load MANGARN_* settings from this file (overrides the environment).",
                exists=True,
                dir_okay=False,
                readable=True,
            ),
        ] = None,
    ) -> None:
        """Pack manga page images into CBZ archives.

        Reads every page file in the [cyan]current directory[/], infers title,
        volume, chapter and page number from each file name, and writes one
        archive per volume/chapter to [cyan]output/[/].

        Running [green]mangarn[/] without a command is the same as [green]mangarn pack[/].
        """
        runtime = RuntimeContext(
            directory=Path.cwd(),
            dry_run=dry_run,
            verbose=verbose,
            env_file=env_file,
        )
        ctx.obj = runtime

        with handle_errors():
            setup_logging(verbose, runtime.settings)

        if ctx.invoked_subcommand is None:
            from mangarn.cli.core import pack_directory

            pack_directory(runtime)
