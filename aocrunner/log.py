from __future__ import annotations

import sys

from loguru import logger

LOG_FORMAT = "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | {message}"


def verbosity_to_level(verbosity: int) -> str:
    if verbosity <= 0:
        return "WARNING"
    if verbosity == 1:
        return "INFO"
    return "DEBUG"


def configure_logging(verbosity: int = 0) -> None:
    """Send log messages to stderr, more of them the higher `verbosity` is."""
    logger.remove()
    logger.add(sys.stderr, level=verbosity_to_level(verbosity), format=LOG_FORMAT)
