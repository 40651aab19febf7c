"""mangarn UI - Rich console output components.

Modules:
    core: Console instance, theme, and base configuration
    messages: Simple print helpers (step, success, warning, info)
    tables: Tables for parsed pages and archives
    banner: Version display

Usage:
    from mangarn.ui import console, print_success
    from mangarn.ui.tables import print_entry_table
"""

from __future__ import annotations

from mangarn.ui.banner import get_version, print_version
from mangarn.ui.core import MANGARN_THEME, console, err_console
from mangarn.ui.messages import (
    fatal_error,
    print_dry_run,
    print_info,
    print_step,
    print_success,
    print_warning,
)
from mangarn.ui.tables import print_bucket_table, print_entry_table

__all__ = [
    # Core
    "MANGARN_THEME",
    "console",
    "err_console",
    # Version
    "get_version",
    "print_version",
    # Messages
    "fatal_error",
    "print_dry_run",
    "print_info",
    "print_step",
    "print_success",
    "print_warning",
    # Tables
    "print_bucket_table",
    "print_entry_table",
]
