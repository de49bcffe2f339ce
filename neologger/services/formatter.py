"""Turn a template and a log event into the final output line."""
from __future__ import annotations

from typing import Optional, Protocol

from neologger.core.metadata import (
    TOKEN_ASCTIME,
    TOKEN_DEVICE,
    TOKEN_LEVEL,
    TOKEN_LOGIN,
    TOKEN_MESSAGE,
)
from neologger.core.models import LogMessage, level_name
from neologger.lib.identity import IdentityResolver
from neologger.lib.tokens import Resolver, substitute
from neologger.services.clock import format_timestamp


class IdentityProvider(Protocol):
    def login(self) -> str: ...

    def device(self) -> str: ...


_default_identity = IdentityResolver()


def format(
    template: str,
    timestamp_text: str,
    level_text: str,
    message_text: str,
    identity: Optional[IdentityProvider] = None,
) -> str:
    """Substitute all recognised tokens of ``template`` in one pass.

    Identity lookups run only when the template itself contains %login% or
    %device%; token-like text inside the substituted values is kept literally.
    """
    provider = identity if identity is not None else _default_identity
    resolvers: dict[str, Resolver] = {
        TOKEN_ASCTIME: lambda: timestamp_text,
        TOKEN_LEVEL: lambda: level_text,
        TOKEN_MESSAGE: lambda: message_text,
        TOKEN_LOGIN: provider.login,
        TOKEN_DEVICE: provider.device,
    }
    return substitute(template, resolvers)


def format_message(
    template: str,
    message: LogMessage,
    identity: Optional[IdentityProvider] = None,
) -> str:
    return format(
        template,
        format_timestamp(message.timestamp),
        level_name(message.level),
        message.text.text,
        identity,
    )


__all__ = ["IdentityProvider", "format", "format_message"]
