"""
Logging setup.

Modules log through ``logging.getLogger(__name__)``; the application
factory calls :func:`configure_logging` once at startup.
"""

import logging

from fittrack.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger with the project format.

    Args:
        level: Level name override.  Defaults to ``settings.LOG_LEVEL``
            (``DEBUG`` when ``settings.DEBUG`` is on).
    """
    if level is None:
        level = "DEBUG" if settings.DEBUG else settings.LOG_LEVEL
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
