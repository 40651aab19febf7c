"""Logging configuration for mangarn.

Progress and results go through the Rich UI (mangarn.ui), so the console
handler stays at WARNING unless --verbose asks for DEBUG. A log file, when
configured, always records everything.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

FILE_FORMAT = "%(asctime)s | %(levelname)-5s | [%(name)s] %(message)s"


def setup_logging(
    log_level: str = "INFO",
    log_file: Path | str | None = None,
    quiet_console: bool = False,
) -> logging.Logger:
    """
    Configure the "mangarn" package logger.

    Args:
        log_level: Console level name; unknown names fall back to INFO
        log_file: Optional file that receives DEBUG and above
        quiet_console: Show only WARNING and above on the console

    Returns:
        The "mangarn" logger
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger("mangarn")
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    console_handler.setLevel(logging.WARNING if quiet_console else level)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(file_handler)
        logger.setLevel(logging.DEBUG)

    return logger
