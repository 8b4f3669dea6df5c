import logging

import pytest

from azenith.config import LOG_TAG, MAX_OUTPUT_LENGTH, LogLevel
from azenith.logger import log_zenith


@pytest.fixture
def records(caplog):
    caplog.set_level(logging.DEBUG, logger=LOG_TAG)
    return caplog


def _emit(caplog, level, message, *args):
    """Log through the package and hand back the record it produced."""
    count = len(caplog.records)
    log_zenith(level, message, *args)
    new_records = caplog.records[count:]
    assert len(new_records) == 1
    return new_records[0]


def test_formats_arguments(records):
    record = _emit(records, LogLevel.INFO, "Daemon started as PID %d", 42)
    assert record.getMessage() == "Daemon started as PID 42"
    assert record.name == LOG_TAG


@pytest.mark.parametrize(
    "level,expected",
    [
        (LogLevel.DEBUG, logging.DEBUG),
        (LogLevel.INFO, logging.INFO),
        (LogLevel.WARN, logging.WARNING),
        (LogLevel.ERROR, logging.ERROR),
        (LogLevel.FATAL, logging.DEBUG),
    ],
)
def test_level_mapping(records, level, expected):
    record = _emit(records, level, "message")
    assert record.levelno == expected
    assert record.getMessage() == "message"


def test_message_without_args_is_literal(records):
    record = _emit(records, LogLevel.INFO, "100% done")
    assert record.getMessage() == "100% done"


def test_long_message_is_truncated(records):
    record = _emit(records, LogLevel.INFO, "%s", "x" * 1000)
    message = record.getMessage()
    assert len(message) == MAX_OUTPUT_LENGTH - 1
    assert set(message) == {"x"}


def test_bad_format_raises():
    with pytest.raises(TypeError):
        log_zenith(LogLevel.INFO, "%d", "not a number")