"""mangarn CLI - command-line interface built with Typer and Rich.

Commands:
- pack (also run by a bare `mangarn`)
- inspect
- renumber
"""

from __future__ import annotations

import sys

from mangarn.cli._app import (
    PACK_COMMANDS,
    TOOLS_COMMANDS,
    create_main_callback,
    make_app,
)
from mangarn.cli._context import RuntimeContext, get_runtime_context

app = make_app()

# Register main callback (handles --version, --verbose, --dry-run, --env-file)
create_main_callback(app)

from mangarn.cli.core import register_core_commands  # noqa: E402

register_core_commands(app)


# =============================================================================
# Entry Point
# =============================================================================


def main() -> int:
    """Main entry point for the CLI."""
    try:
        app()
        return 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0


__all__ = [
    "app",
    "main",
    "RuntimeContext",
    "get_runtime_context",
    "PACK_COMMANDS",
    "TOOLS_COMMANDS",
]

if __name__ == "__main__":
    sys.exit(main())
