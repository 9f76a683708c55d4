"""Configuration file loading.

Loads, parses and merges the TOML configuration files.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

import aiofiles
import aiofiles.os

from .constants import CONFIG_ENV, CONFIG_FILE, CONFIG_SECTION
from .models import CompfilterError

if TYPE_CHECKING:
    import logging

__all__ = ["ConfigLoader", "merge"]


def merge(merged: dict[str, Any], obj2: dict[str, Any]) -> dict[str, Any]:
    """Merge the content of `obj2` into `merged`.

    Nested dictionaries are merged recursively, lists are concatenated,
    anything else is replaced.

    Eg:
        merge({"a": {"b": 1}}, {"a": {"c": 2}}) == {"a": {"b": 1, "c": 2}}
    """
    for key, value in obj2.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merge(merged[key], value)
        elif key in merged and isinstance(merged[key], list) and isinstance(value, list):
            merged[key] = merged[key] + value
        else:
            merged[key] = value
    return merged


class ConfigLoader:
    """Handles loading and merging configuration files.

    Supports:
    - a single TOML file
    - a directory of TOML files, merged in name order
    - `include` directives in the `[compfilter]` section
    """

    def __init__(self, log: logging.Logger) -> None:
        """Initialize the config loader.

        Args:
            log: Logger instance for status and error messages
        """
        self.log = log
        self._config: dict[str, Any] = {}

    @property
    def config(self) -> dict[str, Any]:
        """Return the loaded configuration."""
        return self._config

    async def load(self, config_filename: str = "") -> dict[str, Any]:
        """Load configuration from file or directory.

        Args:
            config_filename: Optional path to config file or directory.
                If empty, `$COMPFILTER_CONFIG` then the default location are used.

        Returns:
            The loaded and merged configuration dictionary.

        Raises:
            CompfilterError: If an explicit config file is missing or has syntax errors.
        """
        explicit = config_filename or os.environ.get(CONFIG_ENV, "")
        if explicit:
            config = await self._open_config(explicit, required=True)
        elif await aiofiles.os.path.exists(CONFIG_FILE):
            config = await self._open_config(str(CONFIG_FILE), required=True)
        else:
            self.log.debug("No configuration file at %s", CONFIG_FILE)
            config = {}
        merge(self._config, config)
        self._config.setdefault(CONFIG_SECTION, {})
        return self._config

    async def _open_config(self, config_filename: str, required: bool) -> dict[str, Any]:
        """Load config file(s) into a dictionary, following includes."""
        fname = Path(os.path.expandvars(config_filename)).expanduser()
        if await aiofiles.os.path.isdir(fname):
            config = await self._load_config_directory(fname)
        elif await aiofiles.os.path.exists(fname):
            config = await self._load_config_file(fname)
        elif required:
            self.log.critical("Config file not found: %s", fname)
            raise CompfilterError(f"Config file not found: {fname}")
        else:
            self.log.warning("Skipping missing config file %s", fname)
            return {}

        for extra_config in list(config.get(CONFIG_SECTION, {}).get("include", [])):
            merge(config, await self._open_config(extra_config, required=False))
        return config

    async def _load_config_directory(self, directory: Path) -> dict[str, Any]:
        """Load and merge all .toml files from a directory."""
        config: dict[str, Any] = {}
        for toml_file in sorted(await aiofiles.os.listdir(directory)):
            if not toml_file.endswith(".toml"):
                continue
            merge(config, await self._load_config_file(directory / toml_file))
        return config

    async def _load_config_file(self, fname: Path) -> dict[str, Any]:
        """Load a single TOML file.

        Raises:
            CompfilterError: If the file has syntax errors
        """
        self.log.info("Loading %s", fname)
        async with aiofiles.open(fname, "rb") as f:
            content = await f.read()
        try:
            return tomllib.loads(content.decode("utf-8"))
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
            self.log.critical("Problem reading %s: %s", fname, e)
            raise CompfilterError(f"Problem reading {fname}: {e}") from e
