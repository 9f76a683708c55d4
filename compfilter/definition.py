"""Common completion definition interface.

A definition module exposes an `Extension` class deriving from `Definition`::

    class Extension(Definition):
        commands = ["mytool"]

        def complete(self, request):
            return CompletionReply(complete_words("-v --verbose", request.cur))
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .config import Configuration
from .logging_setup import get_logger

if TYPE_CHECKING:
    from .models import CompletionReply, CompletionRequest

__all__ = ["Definition"]


class Definition:
    """Base class for any completion definition."""

    commands: list[str] = []
    " Command names this definition completes "

    config: Configuration
    " This definition configuration section "

    def __init__(self, name: str):
        "create a new definition `name` and the matching logger"
        self.name = name
        """ the definition name """
        self.log = get_logger(name)
        """ the logger to use for this definition """
        self.config = Configuration(logger=self.log)

    # Functions to override

    async def on_reload(self) -> None:
        """
        Add the code which requires the `config` attribute here.
        This is called once the configuration is loaded.
        """

    def complete(self, request: CompletionRequest) -> CompletionReply | None:
        """Return the suggestions for `request`, None to use default completion."""
        return None

    # Generic implementations

    async def load_config(self, config: dict[str, Any]) -> None:
        "Loads the configuration section from the passed `config`"
        self.config.clear()
        self.config.update(config.get(self.name.rsplit(".", 1)[-1], {}))
