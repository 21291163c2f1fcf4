"""
Logging setup for Skillport.

Routes the package's log records to stderr through rich.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "skillport"


def configure_logging(level: str | int = "WARNING", show_path: bool = False) -> logging.Logger:
    """Attach a RichHandler to the package logger.

    Calling this again only updates the level.

    Args:
        level: Log level name or number.
        show_path: Show the source location of each record.

    Returns:
        The package logger.
    """
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=show_path,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    return logger
