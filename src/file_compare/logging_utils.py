"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def configure_logging(verbosity: int = 0, *, console: Console | None = None) -> logging.Logger:
    """Install a Rich stderr handler on the package logger.

    Args:
        verbosity: 0 for warnings, 1 for info, 2 or more for debug.
        console: Console to log to. Defaults to a stderr console.

    Returns:
        The configured ``file_compare`` logger.
    """
    level = _LEVELS[min(max(verbosity, 0), len(_LEVELS) - 1)]
    logger = logging.getLogger("file_compare")
    logger.setLevel(level)
    logger.handlers.clear()

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=verbosity >= 2,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    return logger
