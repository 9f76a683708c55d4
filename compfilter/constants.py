"""Shared constants for compfilter."""

import os
from pathlib import Path

__all__ = [
    "CONFIG_ENV",
    "CONFIG_FILE",
    "CONFIG_SECTION",
    "DEFAULT_SCRIPT_PATHS",
    "DEFINITIONS_DIR",
    "REPLY_NOSPACE",
    "SUPPORTED_SHELLS",
]

# Config file paths - use XDG_CONFIG_HOME with fallback to ~/.config
_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
_xdg_data_home = Path(os.environ.get("XDG_DATA_HOME") or Path.home() / ".local" / "share")

CONFIG_FILE = _xdg_config_home / "compfilter" / "config.toml"
CONFIG_ENV = "COMPFILTER_CONFIG"  # overrides CONFIG_FILE
CONFIG_SECTION = "compfilter"

# Well-known directory scanned for definition modules
DEFINITIONS_DIR = _xdg_data_home / "compfilter" / "completions.d"

# Shells a glue script can be generated for
SUPPORTED_SHELLS = ("bash",)

# Default user-level glue script paths
DEFAULT_SCRIPT_PATHS = {
    "bash": "~/.local/share/bash-completion/completions/compfilter",
}

# Option line sent back when the trailing space must be suppressed
REPLY_NOSPACE = "nospace"
