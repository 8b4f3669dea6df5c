"""Small helpers: newline trimming, timestamps and signal handling."""

import os
import signal
from datetime import datetime
from types import FrameType

from .config import LogLevel
from .logger import log_zenith


def trim_newline(string: str | None) -> str | None:
    """Cut a string at its first newline, if it has one."""
    if string is None:
        return None
    return string.split("\n", 1)[0]


def timern(now: datetime | float | None = None) -> str:
    """Return a local timestamp as ``YYYY-MM-DD HH:MM:SS.mmm``.

    ``now`` may be a datetime or a POSIX timestamp; it defaults to the
    current time.
    """
    if now is None:
        moment = datetime.now()
    elif isinstance(now, datetime):
        moment = now
    else:
        try:
            moment = datetime.fromtimestamp(now)
        except (OverflowError, OSError, ValueError):
            return "[TimeError]"
    try:
        stamp = moment.strftime("%Y-%m-%d %H:%M:%S")
    except ValueError:
        return "[TimeFormatError]"
    return f"{stamp}.{moment.microsecond // 1000:03d}"


def sighandler(signum: int, frame: FrameType | None = None) -> None:
    """Log the received exit signal and leave the process at once."""
    if signum == signal.SIGTERM:
        log_zenith(LogLevel.INFO, "Received SIGTERM, exiting.")
    elif signum == signal.SIGINT:
        log_zenith(LogLevel.INFO, "Received SIGINT, exiting.")
    os._exit(os.EX_OK if hasattr(os, "EX_OK") else 0)