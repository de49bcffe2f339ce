"""Token utilities for format templates.

- ``replace``/``exist`` work on one literal token at a time
- ``substitute`` resolves many tokens in a single left-to-right pass
"""
from __future__ import annotations

import re
from functools import lru_cache
from typing import Callable, Mapping, Pattern

Resolver = Callable[[], str]


def replace(text: str, token: str, replacement: str) -> str:
    """Replace every non-overlapping occurrence of ``token`` in ``text``.

    Scanning resumes after each inserted replacement, so a replacement that
    contains ``token`` is not expanded again. An empty token changes nothing.
    """
    if not token:
        return text
    parts: list[str] = []
    cursor = 0
    pos = text.find(token)
    while pos != -1:
        parts.append(text[cursor:pos])
        parts.append(replacement)
        cursor = pos + len(token)
        pos = text.find(token, cursor)
    parts.append(text[cursor:])
    return "".join(parts)


def exist(text: str, token: str) -> bool:
    """Return True if ``token`` occurs at least once in ``text``."""
    return bool(token) and token in text


@lru_cache(maxsize=32)
def _token_pattern(tokens: tuple[str, ...]) -> Pattern[str]:
    # Longest first so a token that prefixes another never shadows it
    ordered = sorted(tokens, key=len, reverse=True)
    return re.compile("|".join(re.escape(token) for token in ordered))


def substitute(template: str, resolvers: Mapping[str, Resolver]) -> str:
    """Replace each token in ``template`` with the value of its resolver.

    Resolved values are inserted verbatim and never re-scanned. A resolver is
    called at most once, and only if its token appears in ``template``.
    """
    tokens = tuple(sorted(token for token in resolvers if token))
    if not tokens:
        return template

    resolved: dict[str, str] = {}

    def _lookup(match: re.Match[str]) -> str:
        token = match.group(0)
        if token not in resolved:
            resolved[token] = resolvers[token]()
        return resolved[token]

    return _token_pattern(tokens).sub(_lookup, template)


__all__ = ["Resolver", "replace", "exist", "substitute"]
