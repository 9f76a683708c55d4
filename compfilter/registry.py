"""Definition registry - maps command names to completion handlers.

Definitions are loaded from:
- module names listed in the `definitions` config key
- every `*.py` file of the definition directories (`definitions_dirs`,
  defaults to the well-known `DEFINITIONS_DIR`)
"""

from __future__ import annotations

import importlib
import importlib.util
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import aiofiles.os

from .config import Configuration
from .constants import CONFIG_SECTION, DEFINITIONS_DIR
from .logging_setup import get_logger
from .models import CompfilterError

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import ModuleType

    from .definition import Definition
    from .models import CompletionReply, CompletionRequest

    Handler = Callable[[CompletionRequest], CompletionReply | None]

__all__ = ["DefinitionRegistry"]

# Namespace used for modules imported from a definitions directory
_FILE_MODULE_PREFIX = "compfilter_definitions"


class DefinitionRegistry:
    """Registered completion handlers, indexed by command name."""

    def __init__(self) -> None:
        self.log = get_logger("registry")
        self.handlers: dict[str, Handler] = {}
        self.definitions: dict[str, Definition] = {}

    @property
    def commands(self) -> list[str]:
        """Sorted names of the commands having a handler."""
        return sorted(self.handlers)

    def register(self, command: str, handler: Handler) -> None:
        """Attach `handler` to `command`, replacing any previous one."""
        if command in self.handlers:
            self.log.debug("Replacing completion handler for %s", command)
        self.handlers[command] = handler

    def add_definition(self, definition: Definition) -> None:
        """Register `definition` for each of its commands."""
        self.definitions[definition.name] = definition
        for command in definition.commands:
            self.register(command, definition.complete)

    def complete(self, request: CompletionRequest) -> CompletionReply | None:
        """Run the handler matching the request's command.

        Returns:
            The reply, or None when the shell should use its default completion
        """
        handler = self.handlers.get(request.command)
        if handler is None:
            self.log.debug("No handler for %s", request.command)
            return None
        try:
            return handler(request)
        except Exception:  # pylint: disable=W0718
            self.log.exception("Completion handler for %s failed on %s", request.command, request.words)
            return None

    # Loading

    async def load_module(self, name: str) -> bool:
        """Load the definition module `name` (a dotted module path).

        Returns:
            False if the module can't be found
        """
        try:
            module = importlib.import_module(name)
        except ModuleNotFoundError:
            self.log.exception("Unable to locate definition called '%s'", name)
            return False
        except Exception as e:
            self.log.exception("Error loading definition %s:", name)
            raise CompfilterError(f"Error loading definition {name}: {e}") from e
        self._add_module(name, module)
        return True

    async def load_directory(self, directory: str | Path) -> int:
        """Load every definition file of `directory`.

        Files starting with "_" are ignored, a missing directory is not an error.

        Returns:
            The number of definitions loaded
        """
        path = Path(directory).expanduser()
        if not await aiofiles.os.path.isdir(path):
            self.log.debug("No definitions directory at %s", path)
            return 0
        count = 0
        for fname in sorted(await aiofiles.os.listdir(path)):
            if not fname.endswith(".py") or fname.startswith("_"):
                continue
            name = fname[:-3]
            try:
                module = self._import_file(name, path / fname)
            except Exception as e:
                self.log.exception("Error loading definition file %s:", path / fname)
                raise CompfilterError(f"Error loading definition file {path / fname}: {e}") from e
            self._add_module(name, module)
            count += 1
        return count

    async def load_config(self, config: dict[str, Any]) -> None:
        """Load the definitions mentioned in `config` and configure them."""
        section = Configuration(config.get(CONFIG_SECTION, {}), logger=self.log)
        for extra_path in section.get_list("definitions_paths"):
            expanded = str(Path(extra_path).expanduser())
            if expanded not in sys.path:
                sys.path.append(expanded)

        for name in section.get_list("definitions"):
            if name not in self.definitions:
                await self.load_module(name)

        directories = section.get_list("definitions_dirs") if "definitions_dirs" in section else [str(DEFINITIONS_DIR)]
        for directory in directories:
            await self.load_directory(directory)

        for definition in self.definitions.values():
            await definition.load_config(config)
            await definition.on_reload()
            definition.log.debug("configured")

    def _add_module(self, name: str, module: ModuleType) -> None:
        """Instantiate the module's `Extension` and register it."""
        try:
            extension_class = module.Extension
        except AttributeError as e:
            self.log.critical("Definition %s has no Extension class", name)
            raise CompfilterError(f"Definition {name} has no Extension class") from e
        self.add_definition(extension_class(name))

    @staticmethod
    def _import_file(name: str, path: Path) -> ModuleType:
        """Import a python file outside of sys.path."""
        modname = f"{_FILE_MODULE_PREFIX}.{name}"
        spec = importlib.util.spec_from_file_location(modname, path)
        if spec is None or spec.loader is None:
            raise ImportError(f"Can't import {path}")
        module = importlib.util.module_from_spec(spec)
        sys.modules[modname] = module
        try:
            spec.loader.exec_module(module)
        except Exception:
            del sys.modules[modname]
            raise
        return module
