from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Mapping


class LogLevel(Enum):
    """Severity of a log event. WARNING and FATAL are aliases."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    WARNING = 2
    ERROR = 3
    CRITICAL = 4
    FATAL = 4


_LEVEL_NAMES: Mapping[LogLevel, str] = {
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARN: "WARN",
    LogLevel.ERROR: "ERROR",
    LogLevel.CRITICAL: "CRITICAL",
}
UNKNOWN_LEVEL_NAME = "UNKNOWN"


def level_name(level: object) -> str:
    """Return the display name of ``level``; anything unrecognised is UNKNOWN."""
    if not isinstance(level, LogLevel):
        return UNKNOWN_LEVEL_NAME
    return _LEVEL_NAMES.get(level, UNKNOWN_LEVEL_NAME)


@dataclass(frozen=True, slots=True)
class LogText:
    text: str
    # Stored as given; not recomputed from ``text``.
    length: int

    def __add__(self, other: "LogText") -> "LogText":
        if not isinstance(other, LogText):
            return NotImplemented
        return LogText(self.text + other.text, self.length + other.length)

    def __str__(self) -> str:
        return self.text


def to_log_text(value: str | bytes) -> LogText:
    """Build a LogText from a string, a single character, or UTF-8 bytes."""
    if isinstance(value, (bytes, bytearray)):
        value = bytes(value).decode("utf-8", errors="replace")
    if not isinstance(value, str):
        raise TypeError(f"Cannot build log text from {type(value).__name__}")
    return LogText(value, len(value))


@dataclass(frozen=True, slots=True)
class LogTimestamp:
    time_info: time.struct_time
    time: int

    @classmethod
    def from_epoch(cls, epoch: float) -> "LogTimestamp":
        return cls(time_info=time.localtime(epoch), time=int(epoch))

    @classmethod
    def from_datetime(cls, moment: datetime) -> "LogTimestamp":
        """Naive datetimes are taken as local time; aware ones are converted to it."""
        if moment.tzinfo is not None:
            moment = moment.astimezone()
        return cls(time_info=moment.timetuple(), time=int(moment.timestamp()))


@dataclass(frozen=True, slots=True)
class LogMessage:
    level: LogLevel
    text: LogText
    timestamp: LogTimestamp


__all__ = [
    "LogLevel",
    "LogText",
    "LogTimestamp",
    "LogMessage",
    "level_name",
    "to_log_text",
    "UNKNOWN_LEVEL_NAME",
]
