"""Running shell commands and binaries and capturing their output."""

import subprocess

from .config import COMMAND_ENV, MAX_COMMAND_LENGTH, MAX_OUTPUT_LENGTH, SHELL
from .misc import trim_newline

_MAX_ARGS = 15


class CommandError(Exception):
    """A command could not be started or exited with a failure status."""


def _capture(argv: list[str], *, executable: str, env: dict[str, str] | None) -> str:
    try:
        result = subprocess.run(
            argv,
            executable=executable,
            env=env,
            stdout=subprocess.PIPE,
            stdin=subprocess.DEVNULL,
            check=False,
        )
    except OSError as exc:
        raise CommandError(f"unable to run {executable}: {exc}") from exc
    if result.returncode != 0:
        raise CommandError(f"{executable} exited with status {result.returncode}")
    output = result.stdout[: MAX_OUTPUT_LENGTH - 1].decode(errors="replace")
    return trim_newline(output)


def execute_command(command: str, shell: str = SHELL) -> str:
    """Run a command through the shell and return its first output line.

    The command runs with a minimal PATH, and at most 255 bytes of output are
    kept. Raises CommandError if it cannot start or exits non-zero.
    """
    command = command[: MAX_COMMAND_LENGTH - 1]
    return _capture(["sh", "-c", command], executable=shell, env=dict(COMMAND_ENV))


def execute_direct(path: str, *args: str) -> str:
    """Run a binary directly and return its first output line.

    ``args`` is the argument vector starting with the program name; at most
    15 entries are passed. Raises CommandError if it cannot start or exits
    non-zero.
    """
    argv = list(args[:_MAX_ARGS]) or [path]
    return _capture(argv, executable=path, env=None)


def systemv(command: str, shell: str = SHELL) -> int:
    """Run a command through the shell and return its exit status.

    Returns 127 when the shell cannot be executed and -1 when the command
    was killed by a signal. Raises CommandError if no process could be
    created at all.
    """
    command = command[: MAX_COMMAND_LENGTH - 1]
    try:
        result = subprocess.run(
            ["sh", "-c", command],
            executable=shell,
            env=dict(COMMAND_ENV),
            check=False,
        )
    except (FileNotFoundError, PermissionError):
        return 127
    except OSError as exc:
        raise CommandError(f"unable to start {shell}: {exc}") from exc
    return result.returncode if result.returncode >= 0 else -1