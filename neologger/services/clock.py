from __future__ import annotations

import time
from typing import Callable

from neologger.core.models import LogLevel, LogMessage, LogText, LogTimestamp, to_log_text

Clock = Callable[[], LogTimestamp]


def now() -> LogTimestamp:
    """Sample the current time once and break it down in local time."""
    return LogTimestamp.from_epoch(time.time())


def format_timestamp(timestamp: LogTimestamp) -> str:
    """Render as ``YYYY-MM-DD HH:MM:SS`` in the captured local time."""
    t = timestamp.time_info
    return (
        f"{t.tm_year:04d}-{t.tm_mon:02d}-{t.tm_mday:02d} "
        f"{t.tm_hour:02d}:{t.tm_min:02d}:{t.tm_sec:02d}"
    )


def to_log_message(
    level: LogLevel,
    text: LogText | str | bytes,
    *,
    clock: Clock = now,
) -> LogMessage:
    if not isinstance(text, LogText):
        text = to_log_text(text)
    return LogMessage(level=level, text=text, timestamp=clock())


__all__ = ["Clock", "now", "format_timestamp", "to_log_message"]
