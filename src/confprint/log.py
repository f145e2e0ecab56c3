"""Rich console logging for configuration reports."""

import logging
import os
from typing import Optional

from rich.highlighter import NullHighlighter
from rich.logging import RichHandler

from confprint.constants import CONFPRINT_LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL


def build_report_handler() -> RichHandler:
    """Create a Rich handler that prints report lines exactly as rendered.

    Markup and highlighting are off so that values such as ``[red]`` or
    runs of mask characters reach the console untouched. The source path
    column is dropped so aligned report lines keep their width.

    Returns:
        RichHandler: Handler for one configuration logger.
    """
    return RichHandler(
        markup=False,
        highlighter=NullHighlighter(),
        show_path=False,
    )


def resolve_log_level(level_name: str, logger: logging.Logger) -> int:
    """Translate a level name from the environment into a logging level.

    Parameters:
        level_name: Level name, case-insensitive, e.g. ``debug``.
        logger: Logger receiving a warning when the name is unknown.

    Returns:
        int: The logging level, or the default level for unknown names.
    """
    level = logging.getLevelName(level_name.upper())
    if isinstance(level, int):
        return level
    logger.warning(
        "Invalid log level '%s', falling back to %s", level_name, DEFAULT_LOG_LEVEL
    )
    return logging.getLevelName(DEFAULT_LOG_LEVEL)


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Get a logger writing configuration reports to the Rich console.

    On first use the logger gets a single report handler, stops propagating
    to ancestors and takes its threshold from ``CONFPRINT_LOG_LEVEL``
    (default INFO). Passing ``level`` lowers the threshold when needed so
    records emitted at that level are not filtered out; it never raises it.

    Parameters:
        name: Name of the logger to retrieve or create.
        level: Level that records about to be emitted will use.

    Returns:
        logging.Logger: The configured logger instance.
    """
    logger = logging.getLogger(name)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.handlers = [build_report_handler()]
        logger.propagate = False
        env_level = os.environ.get(CONFPRINT_LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL)
        logger.setLevel(resolve_log_level(env_level, logger))

    if level is not None and logger.getEffectiveLevel() > level:
        logger.setLevel(level)
    return logger
