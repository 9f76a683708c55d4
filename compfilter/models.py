"""Completion request/reply objects and shared enums."""

from __future__ import annotations

import shlex
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import PurePath

from .constants import REPLY_NOSPACE

__all__ = [
    "CompfilterError",
    "CompletionReply",
    "CompletionRequest",
    "ExitCode",
]


class CompfilterError(Exception):
    """Used for errors which already triggered logging."""


class ExitCode(IntEnum):
    """Exit codes for the compfilter command."""

    SUCCESS = 0
    NO_MATCH = 1  # No handler answered, use default completion
    USAGE_ERROR = 2  # Unknown command, invalid arguments
    CONFIG_ERROR = 3  # Configuration or definition failed to load


@dataclass
class CompletionRequest:
    """The command line being completed and the cursor position in it."""

    words: list[str]
    cword: int  # index of the word under the cursor

    @classmethod
    def from_line(cls, line: str, point: int | None = None) -> CompletionRequest:
        """Build a request from a raw line (bash `COMP_LINE` / `COMP_POINT`).

        Only the text before `point` is considered. Words are split the way
        the shell does (quotes and backslashes), an unterminated quote leaves
        its text as the word under the cursor. When the text ends with
        unquoted whitespace the cursor is on a new, empty word.
        """
        head = line if point is None else line[:point]
        lexer = shlex.shlex(head, posix=True)
        lexer.whitespace_split = True
        words: list[str] = []
        try:
            for word in lexer:
                words.append(word)
        except ValueError:
            words.append(lexer.token)
            return cls(words=words, cword=len(words) - 1)
        if not words or (head[-1].isspace() and not head[:-1].endswith("\\")):
            words.append("")
        return cls(words=words, cword=len(words) - 1)

    @property
    def command(self) -> str:
        """Command name, without its directory."""
        if not self.words:
            return ""
        return PurePath(self.words[0]).name

    @property
    def cur(self) -> str:
        """Word under the cursor, possibly empty."""
        if 0 <= self.cword < len(self.words):
            return self.words[self.cword]
        return ""

    @property
    def prev(self) -> str:
        """Word before the cursor."""
        if 0 < self.cword <= len(self.words):
            return self.words[self.cword - 1]
        return ""


@dataclass
class CompletionReply:
    """Suggestions to offer, plus whether to skip the trailing space."""

    suggestions: list[str] = field(default_factory=list)
    no_space: bool = False

    def render(self) -> str:
        """Return the text printed back to the shell glue.

        First line holds the `compopt` options, one suggestion per line follows.
        """
        lines = [REPLY_NOSPACE if self.no_space else ""]
        lines.extend(self.suggestions)
        return "\n".join(lines) + "\n"
