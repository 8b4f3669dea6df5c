"""The profile-switching daemon and its command-line entry point."""

import os
import re
import signal
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from . import process, profiler
from .config import LOOP_INTERVAL, LogLevel, MLBBState, ProfileMode
from .logger import log_zenith
from .misc import sighandler
from .mlbb import MLBBHandler

_LEADING_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)


def _default_run_profiler(profile: ProfileMode, gamestart: str | None, game_pid: int) -> None:
    profiler.run_profiler(profile, gamestart, game_pid)


@dataclass
class Daemon:
    """Watches the foreground game, screen and battery saver and picks a profile."""

    interval: float = LOOP_INTERVAL
    get_gamestart: Callable[[], str | None] = profiler.get_gamestart
    get_screenstate: Callable[[], bool] = field(default_factory=lambda: profiler.get_screenstate)
    get_low_power_state: Callable[[], bool] = field(
        default_factory=lambda: profiler.get_low_power_state
    )
    run_profiler: Callable[[ProfileMode, str | None, int], object] = _default_run_profiler
    set_priority: Callable[[int], None] = process.set_priority
    pidof: Callable[[str], int] = process.pidof
    is_alive: Callable[[int], bool] = process.is_alive
    sleep: Callable[[float], None] = time.sleep
    mlbb: MLBBHandler | None = None
    gamestart: str | None = None
    game_pid: int = 0
    cur_mode: ProfileMode = ProfileMode.PERFCOMMON
    need_profile_checkup: bool = False
    mlbb_state: MLBBState = MLBBState.NOT_RUNNING

    def __post_init__(self) -> None:
        if self.mlbb is None:
            self.mlbb = MLBBHandler(self.pidof, self.is_alive)

    def _apply(self, mode: ProfileMode) -> None:
        self.cur_mode = mode
        self.need_profile_checkup = False
        self.run_profiler(mode, self.gamestart, self.game_pid)

    def step(self) -> ProfileMode:
        """Run one check and switch profile if needed; return the current mode."""
        if not self.gamestart:
            self.gamestart = self.get_gamestart()
        elif self.game_pid != 0 and not self.is_alive(self.game_pid):
            log_zenith(LogLevel.INFO, "Game %s exited, resetting profile...", self.gamestart)
            self.game_pid = 0
            self.gamestart = self.get_gamestart()
            self.need_profile_checkup = True

        if self.gamestart:
            self.mlbb_state = self.mlbb.handle(self.gamestart)

        if self.gamestart and self.get_screenstate() and self.mlbb_state != MLBBState.RUN_BG:
            if not self.need_profile_checkup and self.cur_mode == ProfileMode.PERFORMANCE_PROFILE:
                return self.cur_mode

            if self.mlbb_state == MLBBState.RUNNING:
                self.game_pid = self.mlbb.pid
            else:
                self.game_pid = self.pidof(self.gamestart)
            if self.game_pid == 0:
                log_zenith(LogLevel.ERROR, "Unable to fetch PID of %s", self.gamestart)
                self.gamestart = None
                return self.cur_mode

            log_zenith(LogLevel.INFO, "Applying performance profile for %s", self.gamestart)
            self._apply(ProfileMode.PERFORMANCE_PROFILE)
            self.set_priority(self.game_pid)
        elif self.get_low_power_state():
            if self.cur_mode == ProfileMode.ECO_MODE:
                return self.cur_mode
            log_zenith(LogLevel.INFO, "Applying ECO Mode")
            self._apply(ProfileMode.ECO_MODE)
        else:
            if self.cur_mode == ProfileMode.BALANCED_PROFILE:
                return self.cur_mode
            log_zenith(LogLevel.INFO, "Applying Balanced profile")
            self._apply(ProfileMode.BALANCED_PROFILE)
        return self.cur_mode

    def run(self) -> None:
        """Install signal handlers, apply the common profile and loop forever."""
        signal.signal(signal.SIGINT, sighandler)
        signal.signal(signal.SIGTERM, sighandler)

        log_zenith(LogLevel.INFO, "Daemon started as PID %d", os.getpid())
        self.run_profiler(ProfileMode.PERFCOMMON, self.gamestart, self.game_pid)

        while True:
            self.sleep(self.interval)
            self.step()


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _log_command(argv: list[str]) -> int:
    if len(argv) < 3:
        print("Usage: AZenith_log <TAG> <LEVEL> <MESSAGE>", file=sys.stderr)
        print("Levels: 0=DEBUG, 1=INFO, 2=WARN, 3=ERROR, 4=FATAL", file=sys.stderr)
        return 1

    level = _atoi(argv[2])
    if not LogLevel.DEBUG <= level <= LogLevel.FATAL:
        print("Invalid log level. Use 0-4.", file=sys.stderr)
        return 1

    log_zenith(LogLevel(level), "%s", " ".join(argv[3:]))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Start the daemon, or act as the logging tool when named AZenith_log.

    ``argv`` is the full argument vector including the program name.
    """
    args = list(sys.argv if argv is None else argv)
    if args and os.path.basename(args[0]) == "AZenith_log":
        return _log_command(args)
    Daemon().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())