"""
Logging setup.

Every module logs through ``logging.getLogger(__name__)``; this only
configures the root handler once at process start.
"""

import logging

from app.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger.

    Args:
        level: Level name overriding ``settings.LOG_LEVEL``.
    """
    logging.basicConfig(level=(level or settings.LOG_LEVEL).upper(), format=LOG_FORMAT)
