"""Process lookup by command line, UID lookup and priority boosting."""

import os
import re

import psutil

from .config import LogLevel
from .logger import log_zenith

PROC_ROOT = "/proc"

_CMDLINE_LIMIT = 4095
_INT_PREFIX = re.compile(rb"\s*([+-]?\d+)")


def pidof(name: str, proc_root: str | os.PathLike = PROC_ROOT) -> int:
    """Return the lowest PID whose command line contains ``name``, or 0.

    Arguments in the command line are joined by spaces before matching, so
    an inexact or partial name matches too.
    """
    target = name.encode()
    try:
        entries = os.scandir(proc_root)
    except OSError as exc:
        log_zenith(LogLevel.ERROR, "Unable to open %s: %s", os.fspath(proc_root), exc)
        return 0

    tracked = 0
    with entries:
        for entry in entries:
            if not (entry.name.isascii() and entry.name.isdigit()):
                continue
            try:
                if not entry.is_dir(follow_symlinks=False):
                    continue
                with open(os.path.join(entry.path, "cmdline"), "rb") as fp:
                    cmdline = fp.read(_CMDLINE_LIMIT)
            except OSError:
                continue
            if not cmdline or target not in cmdline.replace(b"\0", b" "):
                continue
            pid = int(entry.name)
            if pid > 0 and (tracked == 0 or pid < tracked):
                tracked = pid
    return tracked


def uidof(pid: int, proc_root: str | os.PathLike = PROC_ROOT) -> int:
    """Return the real UID of a process, or -1 if it cannot be read."""
    path = os.path.join(proc_root, str(pid), "status")
    try:
        with open(path, "rb") as fp:
            for line in fp:
                if line.startswith(b"Uid:"):
                    match = _INT_PREFIX.match(line, 4)
                    return int(match.group(1)) if match else -1
    except OSError as exc:
        log_zenith(LogLevel.ERROR, "Unable to read %s: %s", path, exc)
    return -1


def is_alive(pid: int) -> bool:
    """Return True if a signal could be delivered to the process."""
    try:
        os.kill(pid, 0)
    except OSError:
        return False
    return True


def set_priority(pid: int) -> None:
    """Give a process the highest nice priority and real-time I/O priority."""
    log_zenith(LogLevel.DEBUG, "Applying priority settings for PID %d", pid)

    try:
        os.setpriority(os.PRIO_PROCESS, pid, -20)
    except OSError:
        log_zenith(LogLevel.ERROR, "Unable to set nice priority for %d", pid)

    io_class = getattr(psutil, "IOPRIO_CLASS_RT", None)
    try:
        if io_class is None:
            raise OSError("real-time I/O class is not available")
        psutil.Process(pid).ionice(io_class, 0)
    except (psutil.Error, OSError, ValueError):
        log_zenith(LogLevel.ERROR, "Unable to set IO priority for %d", pid)