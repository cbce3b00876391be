"""Logging setup.

Library modules log through ``logging.getLogger(__name__)`` and never
configure handlers themselves. Entry points call :func:`configure_logging`
to route records through a Rich console handler.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from .config import LogLevel

ROOT_LOGGER = "specchat"


def configure_logging(level: str | int = "warning", console: Console | None = None) -> logging.Logger:
    """Attach a RichHandler to the package logger.

    Calling it again replaces the previous handler, so the level can be
    changed at runtime.

    Args:
        level: Level name ("debug", "info", ...) or numeric level
        console: Optional Rich console to write to (defaults to stderr)

    Returns:
        The configured package logger
    """
    numeric = LogLevel.from_string(level) if isinstance(level, str) else level

    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
            handler.close()

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.setLevel(numeric)
    logger.propagate = False
    return logger


def get_configured_level() -> str:
    """Return the effective level name of the package logger."""
    return LogLevel.name(logging.getLogger(ROOT_LOGGER).getEffectiveLevel())
