"""compfilter - option list filtering helpers for bash completion.

Bash completion functions spend most of their time shaping candidate
lists: dropping options already typed, pairing short and long options,
completing comma separated values. This package provides those helpers as
plain functions returning new lists, plus a small registry and CLI so
completion definitions written in Python can be called from bash.
"""

from .listcomp import complete_list
from .models import CompfilterError, CompletionReply, CompletionRequest
from .options import complete_words, filter_options, nth_positional, resolve_long, strip_shorts, subtract
from .tokens import contains, is_long_option, is_short_option, normalize_newlines, split_tokens

__all__ = [
    "CompfilterError",
    "CompletionReply",
    "CompletionRequest",
    "complete_list",
    "complete_words",
    "contains",
    "filter_options",
    "is_long_option",
    "is_short_option",
    "normalize_newlines",
    "nth_positional",
    "resolve_long",
    "split_tokens",
    "strip_shorts",
    "subtract",
]
