"""Process-wide read-only constants for neologger."""
from __future__ import annotations

NAME = "neologger"
VERSION = "1.0.0"

TOKEN_ASCTIME = "%asctime%"
TOKEN_LEVEL = "%level%"
TOKEN_MESSAGE = "%message%"
TOKEN_LOGIN = "%login%"
TOKEN_DEVICE = "%device%"

DEFAULT_TEMPLATE = f"[{TOKEN_ASCTIME}] [{TOKEN_LEVEL}]: {TOKEN_MESSAGE}"


__all__ = [
    "NAME",
    "VERSION",
    "TOKEN_ASCTIME",
    "TOKEN_LEVEL",
    "TOKEN_MESSAGE",
    "TOKEN_LOGIN",
    "TOKEN_DEVICE",
    "DEFAULT_TEMPLATE",
]
