"""Shell glue script generators.

Provides a generator function for each supported shell.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .bash import generate_bash

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

__all__ = ["GENERATORS", "generate_bash"]

GENERATORS: dict[str, Callable[[Iterable[str]], str]] = {
    "bash": generate_bash,
}
