"""Logging setup for text-icons.

Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers are attached here, by the CLI or by an application that wants the
package's output rendered through rich.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "text_icons"


def setup_logging(level: str | int = "WARNING", console: Console | None = None) -> logging.Logger:
    """Attach a RichHandler to the package logger.

    Calling it again only updates the level.

    Args:
        level: Logging level name or number.
        console: Console to write to (defaults to stderr).

    Returns:
        The configured ``text_icons`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
