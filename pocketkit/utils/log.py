"""
Logging setup for applications embedding pocketkit.

Library modules only create ``logging.getLogger(__name__)`` loggers and never
install handlers. Applications call configure_logging once at startup to
see those records.
"""

import logging
from typing import Optional

from pocketkit.config.settings import LoggingSettings

PACKAGE_LOGGER_NAME = "pocketkit"

_HANDLER_MARKER = "_pocketkit_handler"


def configure_logging(settings: Optional[LoggingSettings] = None) -> logging.Logger:
    """
    Attach a single stream handler to the ``pocketkit`` logger.

    Calling it again replaces the previous pocketkit handler instead of
    stacking another one, and updates the level.

    Args:
        settings: Level and format to use. Defaults to LoggingSettings().

    Returns:
        The configured package logger.
    """
    settings = settings or LoggingSettings()
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)

    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(settings.format))
    setattr(handler, _HANDLER_MARKER, True)
    logger.addHandler(handler)
    logger.setLevel(settings.level_number)
    return logger
