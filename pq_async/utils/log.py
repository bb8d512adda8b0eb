"""
Logging setup for the pq_async utilities.

Library modules only ever call `logging.getLogger(__name__)`; this helper is
for entry points (scripts, `main.py`) that want the package's log output
configured from `LoggingSettings`.
"""

import logging
from typing import Optional

from pq_async.config.settings import LoggingSettings

PACKAGE_LOGGER_NAME = "pq_async"


def configure_logging(settings: Optional[LoggingSettings] = None) -> logging.Logger:
    """
    Configure root logging from settings and return the package logger.

    Args:
        settings: Logging settings; loaded from the environment when omitted.

    Returns:
        The "pq_async" logger, set to the configured level.
    """
    if settings is None:
        settings = LoggingSettings.from_env()

    logging.basicConfig(level=settings.level_number, format=settings.format)
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(settings.level_number)
    return package_logger
