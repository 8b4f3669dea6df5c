"""Daemon logging under the service tag."""

import logging

from .config import LOG_TAG, MAX_OUTPUT_LENGTH, LogLevel

_logger = logging.getLogger(LOG_TAG)

_LEVELS = {
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


def log_zenith(level: LogLevel, message: str, *args) -> None:
    """Format a message printf-style and send it to the service log.

    Messages are cut to the same length as the fixed output buffer allows.
    DEBUG and FATAL both go out at debug level.
    """
    text = message % args if args else message
    text = text[: MAX_OUTPUT_LENGTH - 1]
    _logger.log(_LEVELS.get(level, logging.DEBUG), "%s", text)