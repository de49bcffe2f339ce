from __future__ import annotations

import logging
from typing import Optional

from neologger.core.metadata import NAME
from neologger.core.models import LogLevel, LogMessage, LogTimestamp, to_log_text
from neologger.services.logger import Logger

SEVERITY_MAP: tuple[tuple[int, LogLevel], ...] = (
    (logging.CRITICAL, LogLevel.CRITICAL),
    (logging.ERROR, LogLevel.ERROR),
    (logging.WARNING, LogLevel.WARN),
    (logging.INFO, LogLevel.INFO),
)


def level_from_stdlib(levelno: int) -> LogLevel:
    for threshold, level in SEVERITY_MAP:
        if levelno >= threshold:
            return level
    return LogLevel.DEBUG


class NeoLoggerHandler(logging.Handler):
    """Forward standard library log records to a neologger Logger."""

    def __init__(
        self,
        logger: Logger,
        *,
        to_console: Optional[bool] = None,
        to_file: Optional[bool] = None,
    ) -> None:
        super().__init__()
        self._logger = logger
        self._to_console = to_console
        self._to_file = to_file

    def emit(self, record: logging.LogRecord) -> None:  # type: ignore[override]
        # Our own diagnostics would loop back in here
        if record.name == NAME or record.name.startswith(NAME + "."):
            return
        try:
            message = LogMessage(
                level=level_from_stdlib(record.levelno),
                text=to_log_text(record.getMessage()),
                timestamp=LogTimestamp.from_epoch(record.created),
            )
            console_default, file_default = self._logger.default_sinks
            to_console = self._to_console if self._to_console is not None else console_default
            to_file = self._to_file if self._to_file is not None else file_default
            self._logger.log_message(message, to_console, to_file)
        except Exception:
            self.handleError(record)


__all__ = ["NeoLoggerHandler", "level_from_stdlib", "SEVERITY_MAP"]
