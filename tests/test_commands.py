import sys

import pytest

from azenith.commands import CommandError, execute_command, execute_direct, systemv
from azenith.config import MAX_OUTPUT_LENGTH

SH = "/bin/sh"


def test_execute_command_returns_output():
    assert execute_command("echo hello", shell=SH) == "hello"


def test_execute_command_keeps_first_line():
    assert execute_command("printf 'first\\nsecond\\n'", shell=SH) == "first"


def test_execute_command_uses_restricted_path():
    assert execute_command('echo "$PATH"', shell=SH) == "/vendor/bin/hw"


def test_execute_command_truncates_output():
    output = execute_command("printf '%0300d' 0", shell=SH)
    assert len(output) == MAX_OUTPUT_LENGTH - 1
    assert set(output) == {"0"}


def test_execute_command_failure_raises():
    with pytest.raises(CommandError):
        execute_command("exit 3", shell=SH)


def test_execute_command_missing_shell_raises(tmp_path):
    with pytest.raises(CommandError):
        execute_command("echo hi", shell=str(tmp_path / "no-shell"))


def test_execute_direct_returns_output():
    assert execute_direct(sys.executable, "python", "-c", "print('hi')") == "hi"


def test_execute_direct_passes_arguments():
    out = execute_direct(sys.executable, "python", "-c", "import sys; print(sys.argv[1])", "global")
    assert out == "global"


def test_execute_direct_caps_argument_count():
    extra = [f"x{i}" for i in range(20)]
    out = execute_direct(sys.executable, "python", "-c", "import sys; print(len(sys.argv))", *extra)
    assert int(out) == 13


def test_execute_direct_failure_raises():
    with pytest.raises(CommandError):
        execute_direct(sys.executable, "python", "-c", "import sys; sys.exit(2)")


def test_execute_direct_missing_binary_raises(tmp_path):
    with pytest.raises(CommandError):
        execute_direct(str(tmp_path / "missing"), "missing")


def test_systemv_success():
    assert systemv("true", shell=SH) == 0


def test_systemv_returns_exit_status():
    assert systemv("exit 5", shell=SH) == 5


def test_systemv_missing_shell(tmp_path):
    assert systemv("true", shell=str(tmp_path / "no-shell")) == 127


def test_systemv_killed_by_signal():
    assert systemv("kill -9 $$", shell=SH) == -1