"""Profile switching and reading of device state."""

import os
from collections.abc import Callable

from .commands import CommandError, execute_command, execute_direct, systemv
from .config import GAME_INFO, GAMELIST, PROFILE_MODE, LogLevel, ProfileMode, is_awake, is_low_power
from .files import write2file
from .logger import log_zenith
from .process import uidof

SYSTEM_PATH = (
    "/product/bin:/apex/com.android.runtime/bin:/apex/com.android.art/bin:"
    "/system_ext/bin:/system/bin:/system/xbin:/odm/bin:/vendor/bin:/vendor/xbin"
)
PROFILER = "/vendor/bin/AZenith_Profiler"
MAX_FETCH_FAILURES = 6


class FallbackProbe:
    """A state reading that settles on a fixed answer after repeated failures.

    ``fetch`` raises CommandError when the state cannot be read. Each failure
    answers ``default``; after ``max_failures`` failures in a row the probe
    stops fetching and answers ``default`` for good.
    """

    def __init__(
        self,
        fetch: Callable[[], bool],
        default: bool,
        subject: str,
        name: str,
        max_failures: int = MAX_FETCH_FAILURES,
    ) -> None:
        self.fetch = fetch
        self.default = default
        self.subject = subject
        self.name = name
        self.max_failures = max_failures
        self.failures = 0
        self.out_of_order = False

    def __call__(self) -> bool:
        if self.out_of_order:
            return self.default
        try:
            value = self.fetch()
        except CommandError:
            self.failures += 1
            log_zenith(LogLevel.ERROR, "Unable to fetch %s", self.subject)
            if self.failures == self.max_failures:
                log_zenith(LogLevel.FATAL, "%s is out of order!", self.name)
                self.out_of_order = True
            return self.default
        self.failures = 0
        return value


def setup_path() -> None:
    """Point PATH at the system binary directories."""
    try:
        os.environ["PATH"] = SYSTEM_PATH
    except (OSError, ValueError) as exc:
        log_zenith(LogLevel.ERROR, "Failed to set PATH environment variable: %s", exc)
        return
    log_zenith(LogLevel.INFO, "PATH environment variable set successfully.")


def _write_quietly(filename: str, data: str, *args) -> None:
    try:
        write2file(filename, data, *args)
    except (OSError, ValueError) as exc:
        log_zenith(LogLevel.WARN, "Unable to write %s: %s", filename, exc)


def run_profiler(
    profile: int,
    gamestart: str | None = None,
    game_pid: int = 0,
    game_info: str = GAME_INFO,
    profile_mode: str = PROFILE_MODE,
    profiler_cmd: str = PROFILER,
) -> int:
    """Record the game and profile, then run the profiler script.

    Returns the script's exit status, or -1 if it could not be started.
    """
    code = int(profile)
    if code == ProfileMode.PERFORMANCE_PROFILE:
        _write_quietly(game_info, "%s %d %d\n", gamestart, game_pid, uidof(game_pid))
    else:
        _write_quietly(game_info, "NULL 0 0\n")

    _write_quietly(profile_mode, "%d\n", code)
    try:
        return systemv(f"{profiler_cmd} {code}")
    except CommandError as exc:
        log_zenith(LogLevel.ERROR, "Unable to run profiler: %s", exc)
        return -1


def get_gamestart(gamelist: str = GAMELIST) -> str | None:
    """Return the visible app's package if it is listed in the game list."""
    try:
        package = execute_command(
            "/system/bin/dumpsys window visible-apps | /vendor/bin/grep 'package=.* ' "
            f"| /vendor/bin/grep -Eo -f {gamelist}"
        )
    except CommandError:
        return None
    return package or None


def fetch_screenstate() -> bool:
    """Read whether the screen is awake; raises CommandError on failure."""
    state = execute_command(
        "/system/bin/dumpsys power | /vendor/bin/grep -Eo 'mWakefulness=Awake|mWakefulness=Asleep' "
        "| /system/bin/awk -F'=' '{print $2}'"
    )
    return is_awake(state)


def fetch_low_power_state() -> bool:
    """Read whether battery saver is on; raises CommandError on failure."""
    try:
        state = execute_direct("/system/bin/settings", "settings", "get", "global", "low_power")
    except CommandError:
        state = execute_command(
            "/system/bin/dumpsys power | /vendor/bin/grep -Eo "
            "'mSettingBatterySaverEnabled=true|mSettingBatterySaverEnabled=false' | "
            "/system/bin/awk -F'=' '{print $2}'"
        )
    return is_low_power(state)


get_screenstate = FallbackProbe(fetch_screenstate, True, "current screenstate", "get_screenstate")
get_low_power_state = FallbackProbe(
    fetch_low_power_state, False, "battery saver status", "get_low_power_state"
)