from __future__ import annotations

from enum import IntEnum


class LogStatus(IntEnum):
    """Result of a logging call."""

    OK = 0x0
    OPEN_ERROR = -0xF4


class NeoLoggerError(Exception):
    """Base exception carrying a readable message and optional remediation."""

    def __init__(self, message: str, *, remediation: str | None = None) -> None:
        super().__init__(message)
        self.remediation = remediation or ""


class SinkOpenError(NeoLoggerError):
    def __init__(self, path: str, reason: str = "") -> None:
        message = f"Open file error: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(
            message,
            remediation="Check that the directory exists and the file is writable.",
        )
        self.path = path
        self.reason = reason


class IdentityLookupError(NeoLoggerError):
    pass


class FormatterRejectedError(NeoLoggerError):
    def __init__(self, template: str) -> None:
        super().__init__(
            f"Formatter template rejected: {template!r}",
            remediation="Templates must contain %message%.",
        )
        self.template = template


__all__ = [
    "LogStatus",
    "NeoLoggerError",
    "SinkOpenError",
    "IdentityLookupError",
    "FormatterRejectedError",
]
