"""Token helpers shared by the option filters.

Candidate lists are handled as plain lists of whitespace-free words.
Inputs may be given either as a whitespace separated string or as any
iterable of strings, each element being split again.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

__all__ = [
    "contains",
    "is_long_option",
    "is_short_option",
    "normalize_newlines",
    "split_tokens",
]


# Anchored single-class patterns: linear time whatever the input
_SHORT_OPTION = re.compile(r"-[A-Za-z0-9]+")
_LONG_OPTION = re.compile(r"--\S+")


def split_tokens(text: str | Iterable[str] | None) -> list[str]:
    """Split `text` on whitespace runs, dropping empty tokens.

    Args:
        text: A string, an iterable of strings or None

    Returns:
        The list of tokens, in input order
    """
    if text is None:
        return []
    if isinstance(text, str):
        return text.split()
    tokens: list[str] = []
    for item in text:
        tokens.extend(item.split())
    return tokens


def normalize_newlines(text: str) -> list[str]:
    """Turn newline separated input into a token list."""
    return split_tokens(text.replace("\r\n", " ").replace("\n", " "))


def contains(haystack: str | Iterable[str] | None, needles: str | Iterable[str] | None) -> bool:
    """Tell if any of `needles` is a whole word of `haystack`.

    Eg:
        contains("test test2", "no nope test") is True
        contains("testing", "test") is False
    """
    words = set(split_tokens(haystack))
    return any(needle in words for needle in split_tokens(needles))


def is_short_option(token: str) -> bool:
    """Return True for `-x` style tokens (`-v`, `-vx`, `-1`)."""
    return _SHORT_OPTION.fullmatch(token) is not None


def is_long_option(token: str) -> bool:
    """Return True for `--xxx` style tokens."""
    return _LONG_OPTION.fullmatch(token) is not None
