"""`compfilter compgen`: print or install the shell glue script."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from .constants import DEFAULT_SCRIPT_PATHS, SUPPORTED_SHELLS
from .generators import GENERATORS

if TYPE_CHECKING:
    from .registry import DefinitionRegistry

__all__ = ["glue_script_path", "handle_compgen"]


def glue_script_path(shell: str, target: str = "default") -> Path:
    """Return where the glue script of `shell` is installed.

    `target` is either "default" (the bash-completion user directory) or an
    absolute or `~` path.
    """
    return Path(DEFAULT_SCRIPT_PATHS[shell] if target == "default" else target).expanduser()


def handle_compgen(registry: DefinitionRegistry, args: list[str]) -> tuple[bool, str]:
    """Generate the glue script for the commands of `registry`.

    Args:
        registry: The loaded definitions
        args: Arguments after "compgen": a shell, optionally followed by a target

    Returns:
        Tuple of (success, result): the script itself when no target is given,
        otherwise a message for the user
    """
    if len(args) not in (1, 2):
        return (False, f"Usage: compgen <{'|'.join(SUPPORTED_SHELLS)}> [default|PATH]")
    shell, target = args[0], args[1] if len(args) == 2 else None
    if shell not in SUPPORTED_SHELLS:
        return (False, f"Unsupported shell: {shell}. Supported: {', '.join(SUPPORTED_SHELLS)}")
    if target not in (None, "default") and not target.startswith(("/", "~")):
        return (False, "Relative paths not supported. Use absolute path, ~/path, or 'default'.")

    content = GENERATORS[shell](registry.commands)
    if target is None:
        return (True, content)

    path = glue_script_path(shell, target)
    registry.log.debug("Writing glue script to %s", path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        return (False, f"Failed to write completion file: {e}")

    shown = str(path).replace(str(Path.home()), "~", 1)
    if target == "default":
        return (True, f"Completions installed to {shown}\nReload your shell or run: source ~/.bashrc")
    return (True, f"Completions written to {shown}\nSource it from your ~/.bashrc to enable it.")
