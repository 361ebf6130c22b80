"""
Logging setup.

Configures the loguru logger used across the package.
"""

import sys

from loguru import logger

from message_db.config.settings import get_settings


def setup_logging(level: str | None = None, log_file: str | None = None) -> int:
    """
    Replace loguru's default sink with a stderr sink at the given level.

    Args:
        level: Minimum log level name, settings.log_level when omitted
        log_file: Optional path of a rotated file sink

    Returns:
        Handler id of the stderr sink
    """
    level = (level or get_settings().log_level).upper()
    logger.remove()
    handler_id = logger.add(sys.stderr, level=level)

    if log_file:
        logger.add(
            log_file,
            rotation="1 day",
            retention="7 days",
            level=level,
            encoding="utf-8",
        )

    return handler_id
