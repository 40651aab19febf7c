"""Core console configuration and theme for mangarn UI.

This module provides the Rich console instances and theme that all other
UI modules build upon.
"""

from __future__ import annotations

from rich.console import Console
from rich.theme import Theme

# =============================================================================
# Theme Configuration
# =============================================================================

MANGARN_THEME = Theme(
    {
        # Status colors
        "info": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "red bold",
        # Text styles
        "step": "bold cyan",
        "title": "bold white",
        "dim": "dim",
        # Semantic styles
        "path": "cyan",
        "series": "magenta",
        "number": "yellow",
        "missing": "red",
        "hint": "dim italic",
    }
)

# =============================================================================
# Console Instances
# =============================================================================

# Primary console for normal output
console = Console(theme=MANGARN_THEME, stderr=False)

# Error console for stderr output
err_console = Console(theme=MANGARN_THEME, stderr=True)
