"""Writing small formatted payloads to files."""

import os

from .config import MAX_DATA_LENGTH


def write2file(
    filename: str | os.PathLike,
    data: str,
    *args,
    append: bool = False,
    use_flock: bool = False,
) -> None:
    """Write printf-style formatted content to a file.

    The file is truncated unless ``append`` is set, and created with mode
    0644 when missing. ``use_flock`` takes an exclusive lock while writing;
    do not use it on FUSE file systems such as /sdcard.

    Raises ValueError for missing, empty or oversized content and OSError
    when the file cannot be opened, locked or fully written.
    """
    if data is None:
        raise ValueError("no content format given")

    content = (data % args if args else data).encode()
    if not content:
        raise ValueError("content is empty")
    if len(content) >= MAX_DATA_LENGTH:
        raise ValueError(f"content exceeds {MAX_DATA_LENGTH - 1} bytes")

    flags = os.O_WRONLY | os.O_CREAT | (os.O_APPEND if append else os.O_TRUNC)
    fd = os.open(filename, flags, 0o644)
    try:
        if use_flock:
            import fcntl

            fcntl.flock(fd, fcntl.LOCK_EX)
            try:
                written = os.write(fd, content)
            finally:
                fcntl.flock(fd, fcntl.LOCK_UN)
        else:
            written = os.write(fd, content)
    finally:
        os.close(fd)

    if written != len(content):
        raise OSError(f"short write to {filename}: {written} of {len(content)} bytes")