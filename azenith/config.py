"""Shared constants, enumerations and state predicates."""

from enum import IntEnum

LOOP_INTERVAL = 15

MAX_DATA_LENGTH = 1024
MAX_COMMAND_LENGTH = 600
MAX_OUTPUT_LENGTH = 256
MAX_PATH_LENGTH = 256

NOTIFY_TITLE = "AZenith"
LOG_TAG = "AZenith"

PROFILE_MODE = "/sdcard/config/current_profile"
GAME_INFO = "/sdcard/config/gameinfo"
GAMELIST = "/sdcard/gamelist.txt"

SHELL = "/system/bin/sh"
COMMAND_ENV = {"PATH": "/vendor/bin/hw"}

MLBB_PACKAGES = frozenset(
    {
        "com.mobile.legends",
        "com.mobilelegends.hwag",
        "com.mobiin.gp",
        "com.mobilechess.gp",
    }
)


class LogLevel(IntEnum):
    """Severity of a log message."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4


class ProfileMode(IntEnum):
    """Performance profile understood by the profiler script."""

    PERFCOMMON = 0
    PERFORMANCE_PROFILE = 1
    BALANCED_PROFILE = 2
    ECO_MODE = 3


class MLBBState(IntEnum):
    """Whether Mobile Legends is running, and where."""

    NOT_RUNNING = 0
    RUN_BG = 1
    RUNNING = 2


def is_mlbb(package: str) -> bool:
    """Return True if the package name belongs to Mobile Legends."""
    return package in MLBB_PACKAGES


def is_awake(state: str) -> bool:
    """Return True if a wakefulness reading means the screen is on."""
    return state in ("Awake", "true")


def is_low_power(state: str) -> bool:
    """Return True if a battery saver reading means it is enabled."""
    return state in ("true", "1")