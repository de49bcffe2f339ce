from __future__ import annotations

import logging
from typing import Optional, TextIO

from neologger.core.metadata import NAME

DIAGNOSTIC_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_diagnostics(
    *,
    level: int = logging.WARNING,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Route neologger's own reports (sink failures, fallbacks) to a stream.

    Calling it again only updates the level.
    """
    diagnostics = logging.getLogger(NAME)
    diagnostics.setLevel(level)

    if not _has_stream_handler(diagnostics.handlers):
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(DIAGNOSTIC_FORMAT))
        diagnostics.addHandler(handler)

    return diagnostics


def _has_stream_handler(handlers: list[logging.Handler]) -> bool:
    return any(isinstance(handler, logging.StreamHandler) for handler in handlers)


__all__ = ["configure_diagnostics", "DIAGNOSTIC_FORMAT"]
