"""Telling whether Mobile Legends really runs in the foreground."""

from collections.abc import Callable
from dataclasses import dataclass

from .config import LogLevel, MLBBState, is_mlbb
from .logger import log_zenith
from .process import is_alive, pidof

_PROC_SUFFIX = ":UnityKillsMe"
_PROC_NAME_LIMIT = 39


@dataclass
class MLBBHandler:
    """Tracks the PID of the Mobile Legends game process between checks."""

    pidof: Callable[[str], int] = pidof
    is_alive: Callable[[int], bool] = is_alive
    pid: int = 0

    def handle(self, gamestart: str) -> MLBBState:
        """Classify the foreground package with respect to Mobile Legends."""
        if not is_mlbb(gamestart):
            self.pid = 0
            return MLBBState.NOT_RUNNING

        if self.pid != 0:
            if self.is_alive(self.pid):
                return MLBBState.RUNNING
            self.pid = 0

        proc_name = f"{gamestart}{_PROC_SUFFIX}"[:_PROC_NAME_LIMIT]
        self.pid = self.pidof(proc_name)
        if self.pid != 0:
            log_zenith(LogLevel.INFO, "Boosting MLBB process %s", proc_name)
            return MLBBState.RUNNING

        return MLBBState.RUN_BG