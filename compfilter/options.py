"""Option list filtering.

Helpers used by completion definitions to shape a candidate list before
it is offered to the user:

- drop options already present on the command line (`filter_options`)
- find the long form paired with a short option (`resolve_long`)
- pick positional arguments out of the command line (`nth_positional`)
- plain list arithmetic (`strip_shorts`, `subtract`, `complete_words`)

Every function returns a new list and leaves its inputs untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .tokens import is_long_option, is_short_option, split_tokens

if TYPE_CHECKING:
    from collections.abc import Iterable

__all__ = [
    "complete_words",
    "filter_options",
    "nth_positional",
    "resolve_long",
    "strip_shorts",
    "subtract",
]


def nth_positional(words: Iterable[str], program: str, n: int) -> str | None:
    """Return the `n`-th (1-based) positional argument of a command line.

    The first word equal to `program` and every word starting with `-`
    are skipped.

    Args:
        words: The full command line
        program: The program name, as found in `words`
        n: Position of the wanted argument

    Returns:
        The argument, or None if the command line has fewer positionals
    """
    if n < 1:
        return None
    seen_program = False
    count = 0
    for word in words:
        if not seen_program and word == program:
            seen_program = True
            continue
        if word.startswith("-"):
            continue
        count += 1
        if count == n:
            return word
    return None


def resolve_long(short_opt: str, option_list: str | Iterable[str]) -> str | None:
    """Return the long option following `short_opt` in `option_list`.

    This is a positional heuristic: option lists are expected to be written
    with each long option right after its short form ("-v --verbose -o ...").
    Nothing is validated, a short option followed by anything but a long
    option resolves to None.

    Eg:
        resolve_long("-v", "-v --verbose -o --output") == "--verbose"
    """
    options = split_tokens(option_list)
    try:
        idx = options.index(short_opt)
    except ValueError:
        return None
    if idx + 1 < len(options) and is_long_option(options[idx + 1]):
        return options[idx + 1]
    return None


def _long_forms(options: list[str]) -> dict[str, str]:
    """Map each short option to its long form, same rules as `resolve_long`."""
    pairs: dict[str, str] = {}
    for idx, opt in enumerate(options):
        if opt in pairs or not is_short_option(opt):
            continue
        follower = options[idx + 1] if idx + 1 < len(options) else ""
        # first occurrence only, even when it has no long form
        pairs[opt] = follower if is_long_option(follower) else ""
    return {short: long for short, long in pairs.items() if long}


def filter_options(
    candidates: str | Iterable[str],
    words: Iterable[str],
    cur: str = "",
    exclude: str | Iterable[str] | None = None,
    resolve_longs: bool = False,
) -> list[str]:
    """Remove the options already used on the command line.

    Args:
        candidates: Options which can be suggested
        words: The full command line
        cur: The word being completed, never filtered out
        exclude: Options allowed to be repeated
        resolve_longs: Also drop the long form of every used short option

    Returns:
        The remaining candidates, in their original order
    """
    original = split_tokens(candidates)
    allowed = set(split_tokens(exclude))
    long_forms = _long_forms(original) if resolve_longs else {}
    removed: set[str] = set()
    for word in words:
        if word == cur or word in allowed:
            continue
        removed.add(word)
        if word in long_forms:
            removed.add(long_forms[word])
    return [opt for opt in original if opt not in removed]


def strip_shorts(candidates: str | Iterable[str]) -> list[str]:
    """Remove short options, only their arguments are worth completing."""
    return [opt for opt in split_tokens(candidates) if not is_short_option(opt)]


def subtract(candidates: str | Iterable[str], remove: str | Iterable[str] | None) -> list[str]:
    """Remove every word of `remove` from `candidates` (exact matches only)."""
    unwanted = set(split_tokens(remove))
    return [word for word in split_tokens(candidates) if word not in unwanted]


def complete_words(candidates: str | Iterable[str], cur: str = "") -> list[str]:
    """Return the candidates starting with `cur` (like `compgen -W`).

    Duplicates are collapsed, the first occurrence wins.
    """
    return [word for word in dict.fromkeys(split_tokens(candidates)) if word.startswith(cur)]
