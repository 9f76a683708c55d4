"""Completion of comma separated values (eg: `--fields name,size,date`)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .models import CompletionReply
from .options import complete_words, subtract

if TYPE_CHECKING:
    from collections.abc import Iterable

__all__ = ["complete_list"]


def complete_list(vocabulary: str | Iterable[str], cur: str, max_items: int | None = None) -> CompletionReply:
    """Complete one item of a comma separated list.

    Items already chosen are not suggested again. Suggestions carry the whole
    value typed so far (`red,gr` -> `red,green`).
    The trailing space is suppressed until `max_items` items are selected,
    or always when `max_items` is None.

    Args:
        vocabulary: Allowed items
        cur: The word under the cursor
        max_items: Maximum number of items the argument accepts

    Returns:
        The completion reply
    """
    prefix, sep, partial = cur.rpartition(",")
    chosen = [item for item in prefix.split(",") if item]
    remaining = subtract(vocabulary, chosen)

    # the typed comma is kept, even with nothing before it
    lead = prefix + sep
    suggestions = [lead + item for item in complete_words(remaining, partial)]

    selected = len(chosen) + 1
    finished = max_items is not None and 0 < max_items <= selected
    return CompletionReply(suggestions=suggestions, no_space=not finished)
