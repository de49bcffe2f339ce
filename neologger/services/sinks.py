from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, TextIO

from neologger.core.errors import SinkOpenError


class FileSink:
    """Append-only text file. Opening never creates missing directories."""

    def __init__(self, path: Path | str, *, encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.encoding = encoding
        self._handle: Optional[TextIO] = None

    @property
    def is_open(self) -> bool:
        return self._handle is not None and not self._handle.closed

    def open(self) -> None:
        try:
            self._handle = open(self.path, "a", encoding=self.encoding)
        except (OSError, LookupError) as exc:
            self._handle = None
            raise SinkOpenError(str(self.path), str(exc)) from exc

    def write_line(self, line: str) -> None:
        if self._handle is None:
            raise SinkOpenError(str(self.path), "sink is not open")
        self._handle.write(line + "\n")
        self._handle.flush()

    def close(self) -> None:
        handle, self._handle = self._handle, None
        if handle is not None:
            handle.close()


class ConsoleSink:
    """Print lines to a text stream; ``None`` means the current ``sys.stdout``."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write_line(self, line: str) -> None:
        print(line, file=self.stream)


__all__ = ["FileSink", "ConsoleSink"]
