"""Package logger for compofun."""

import logging
import sys

from compofun import config

__all__ = ['logger', 'setup_logger']

LOGGER_NAME = 'compofun'

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def setup_logger(
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Args:
        level: Log level name, defaults to ``COMPOFUN_LOG_LEVEL``
        format_string: Custom format string

    Returns:
        The configured package logger
    """
    level = config.check_log_level(level) if level else config.log_level()
    format_string = format_string or (
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Only configure once
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(fmt=format_string, datefmt='%Y-%m-%d %H:%M:%S')
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(getattr(logging, level))

    return logger
