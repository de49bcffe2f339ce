from __future__ import annotations

import logging
import threading
from enum import Enum
from pathlib import Path
from typing import Optional, TextIO

from neologger.core.errors import LogStatus, SinkOpenError
from neologger.core.metadata import DEFAULT_TEMPLATE, TOKEN_MESSAGE
from neologger.core.models import LogLevel, LogMessage, LogText
from neologger.lib.identity import IdentityResolver
from neologger.lib.tokens import exist
from neologger.services.clock import Clock, now, to_log_message
from neologger.services.formatter import IdentityProvider, format_message
from neologger.services.settings import LoggerSettings
from neologger.services.sinks import ConsoleSink, FileSink

_log = logging.getLogger(__name__)


class LoggerState(Enum):
    OPEN = "open"
    CLOSED = "closed"  # the file could not be opened
    RELEASED = "released"


class Logger:
    """Format log events from a template and write them to a file and/or console.

    The file is opened for append on construction. If that fails the logger
    stays usable in the CLOSED state: file writes report ``LogStatus.OPEN_ERROR``
    and console output still happens unless ``couple_console_to_file`` is set.
    Sink writes are serialised with a re-entrant lock.
    """

    def __init__(
        self,
        path: Path | str,
        *,
        template: str = DEFAULT_TEMPLATE,
        console: bool = True,
        file: bool = True,
        encoding: str = "utf-8",
        couple_console_to_file: bool = False,
        clock: Clock = now,
        identity: Optional[IdentityProvider] = None,
        console_stream: Optional[TextIO] = None,
    ) -> None:
        self._template = DEFAULT_TEMPLATE
        self.set_formatter(template)
        self._console_default = console
        self._file_default = file
        self._couple = couple_console_to_file
        self._clock = clock
        self._identity: IdentityProvider = identity if identity is not None else IdentityResolver()
        self._lock = threading.RLock()
        self._file = FileSink(path, encoding=encoding)
        self._console = ConsoleSink(console_stream)
        try:
            self._file.open()
        except SinkOpenError as exc:
            _log.error("%s", exc)
            self._state = LoggerState.CLOSED
        else:
            self._state = LoggerState.OPEN

    @classmethod
    def from_settings(cls, settings: LoggerSettings, **overrides) -> "Logger":
        options = dict(
            template=settings.template,
            console=settings.console,
            file=settings.file,
            encoding=settings.encoding,
            couple_console_to_file=settings.couple_console_to_file,
            identity=IdentityResolver(placeholder=settings.placeholder),
        )
        options.update(overrides)
        return cls(settings.path, **options)

    # Properties -------------------------------------------------------
    @property
    def path(self) -> Path:
        return self._file.path

    @property
    def state(self) -> LoggerState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state is LoggerState.OPEN

    @property
    def default_sinks(self) -> tuple[bool, bool]:
        """(console, file) used by the level shortcuts."""
        return self._console_default, self._file_default

    @property
    def formatter(self) -> str:
        return self._template

    def set_formatter(self, template: str) -> bool:
        """Use ``template`` for later lines. Templates without %message% are ignored."""
        if not exist(template, TOKEN_MESSAGE):
            _log.debug("Formatter rejected, keeping %r", self._template)
            return False
        self._template = template
        return True

    # Logging ----------------------------------------------------------
    def log(
        self,
        level: LogLevel,
        text: LogText | str | bytes,
        to_console: bool = False,
        to_file: bool = True,
    ) -> LogStatus:
        message = to_log_message(level, text, clock=self._clock)
        return self.log_message(message, to_console, to_file)

    def log_message(
        self,
        message: LogMessage,
        to_console: bool = False,
        to_file: bool = True,
    ) -> LogStatus:
        # Only the sink writes run under the lock; formatting and diagnostics
        # may emit records that come back through a bridged handler.
        file_ready = not to_file or self._state is LoggerState.OPEN
        if not file_ready:
            _log.error("Open file error: %s", self.path)
        write_file = to_file and file_ready
        write_console = to_console and (file_ready or not self._couple)
        status = LogStatus.OK if file_ready else LogStatus.OPEN_ERROR
        if not (write_file or write_console):
            return status

        line = format_message(self._template, message, self._identity)
        file_error: Exception | None = None
        console_error: Exception | None = None
        with self._lock:
            if write_file:
                try:
                    self._file.write_line(line)
                except (SinkOpenError, OSError, ValueError) as exc:
                    file_error = exc
            if write_console:
                try:
                    self._console.write_line(line)
                except (OSError, ValueError) as exc:
                    console_error = exc

        if file_error is not None:
            _log.warning("Failed to write log line to %s: %s", self.path, file_error)
            status = LogStatus.OPEN_ERROR
        if console_error is not None:
            _log.warning("Failed to write log line to console: %s", console_error)
        return status

    def debug(self, text: LogText | str | bytes) -> LogStatus:
        return self._log_default(LogLevel.DEBUG, text)

    def info(self, text: LogText | str | bytes) -> LogStatus:
        return self._log_default(LogLevel.INFO, text)

    def warn(self, text: LogText | str | bytes) -> LogStatus:
        return self._log_default(LogLevel.WARN, text)

    warning = warn

    def error(self, text: LogText | str | bytes) -> LogStatus:
        return self._log_default(LogLevel.ERROR, text)

    def critical(self, text: LogText | str | bytes) -> LogStatus:
        return self._log_default(LogLevel.CRITICAL, text)

    fatal = critical

    def _log_default(self, level: LogLevel, text: LogText | str | bytes) -> LogStatus:
        return self.log(level, text, self._console_default, self._file_default)

    # Lifecycle --------------------------------------------------------
    def close(self) -> None:
        close_error: OSError | None = None
        with self._lock:
            try:
                self._file.close()
            except OSError as exc:
                close_error = exc
            finally:
                self._state = LoggerState.RELEASED
        if close_error is not None:
            _log.warning("Failed to close %s: %s", self.path, close_error)

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ["Logger", "LoggerState"]
