from __future__ import annotations

import json
import re
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, Pattern

from neologger.core.errors import FormatterRejectedError, NeoLoggerError
from neologger.core.metadata import DEFAULT_TEMPLATE, TOKEN_MESSAGE
from neologger.lib.tokens import exist

# camelCase boundary, e.g. coupleConsoleToFile -> couple_console_to_file
_CAMEL_BOUNDARY: Pattern[str] = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_BOOL_FIELDS = {"console", "file", "couple_console_to_file"}
_STR_FIELDS = {"path", "template", "encoding", "placeholder"}


def _snake_case(key: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", key).lower()


@dataclass
class LoggerSettings:
    path: Path | str
    template: str = DEFAULT_TEMPLATE
    console: bool = True  # default sinks for the level shortcuts
    file: bool = True
    encoding: str = "utf-8"
    placeholder: str = ""  # used when login/device lookups fail
    couple_console_to_file: bool = False

    def validate(self) -> None:
        if not exist(self.template, TOKEN_MESSAGE):
            raise FormatterRejectedError(self.template)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, base_dir: Path | None = None) -> "LoggerSettings":
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in data.items():
            name = _snake_case(key)
            if name not in known:
                continue
            if name in _BOOL_FIELDS and not isinstance(value, bool):
                raise NeoLoggerError(f"Logger setting '{key}' must be true or false, got {value!r}")
            if name in _STR_FIELDS and not isinstance(value, str):
                raise NeoLoggerError(f"Logger setting '{key}' must be a string, got {value!r}")
            values[name] = value
        if "path" not in values:
            raise NeoLoggerError("Logger settings require a 'path'")
        path = Path(values["path"]).expanduser()
        if base_dir is not None and not path.is_absolute():
            path = base_dir / path
        values["path"] = path
        settings = cls(**values)
        settings.validate()
        return settings


def load_settings(settings_path: Path | str) -> LoggerSettings:
    """Read LoggerSettings from a JSON object; relative paths resolve next to it."""
    p = Path(settings_path)
    try:
        payload = json.loads(p.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as exc:
        raise NeoLoggerError(
            f"Cannot read logger settings from {p}: {exc}",
            remediation="Provide a readable JSON object with at least a 'path' key.",
        ) from exc
    if not isinstance(payload, dict):
        raise NeoLoggerError(f"Logger settings in {p} must be a JSON object")
    return LoggerSettings.from_mapping(payload, base_dir=p.parent)


__all__ = ["LoggerSettings", "load_settings"]
