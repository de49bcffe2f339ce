"""Identity lookups for the %login% and %device% tokens.

The raw lookups raise IdentityLookupError; IdentityResolver turns any failure
into a placeholder so a log line is always produced.
"""
from __future__ import annotations

import getpass
import logging
import socket
from typing import Callable

from neologger.core.errors import IdentityLookupError

_log = logging.getLogger(__name__)


def current_login() -> str:
    """Return the login name of the current process owner."""
    try:
        name = getpass.getuser()
    except (OSError, KeyError, ImportError) as exc:
        raise IdentityLookupError(f"Login name unavailable: {exc}") from exc
    if not name:
        raise IdentityLookupError("Login name unavailable")
    return name


def current_device() -> str:
    """Return the host name of this machine."""
    try:
        name = socket.gethostname()
    except OSError as exc:
        raise IdentityLookupError(f"Device name unavailable: {exc}") from exc
    if not name:
        raise IdentityLookupError("Device name unavailable")
    return name


class IdentityResolver:
    def __init__(
        self,
        *,
        placeholder: str = "",
        login_lookup: Callable[[], str] = current_login,
        device_lookup: Callable[[], str] = current_device,
    ) -> None:
        self.placeholder = placeholder
        self._login_lookup = login_lookup
        self._device_lookup = device_lookup

    def login(self) -> str:
        return self._resolve(self._login_lookup, "login")

    def device(self) -> str:
        return self._resolve(self._device_lookup, "device")

    def _resolve(self, lookup: Callable[[], str], what: str) -> str:
        try:
            return lookup()
        except IdentityLookupError as exc:
            _log.debug("Using placeholder for %s: %s", what, exc)
            return self.placeholder


__all__ = ["current_login", "current_device", "IdentityResolver"]
