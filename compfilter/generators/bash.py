"""Bash glue script generator.

The generated function asks `compfilter complete` for a reply and loads it
into COMPREPLY. The reply's first line holds `compopt` options.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

__all__ = ["generate_bash"]


def generate_bash(commands: Iterable[str], program: str = "compfilter") -> str:
    """Generate bash completion glue script content.

    Args:
        commands: Names of the commands completed through compfilter
        program: How the compfilter executable is invoked

    Returns:
        The bash completion script content
    """
    cmd_list = " ".join(sorted(set(commands)))
    if cmd_list:
        complete_line = f"complete -o default -F _compfilter_complete {cmd_list}"
    else:
        complete_line = "# no command registered yet, add definitions and regenerate"

    return f"""# Bash completion for commands handled by compfilter
# Generated by: {program} compgen bash

_compfilter_complete() {{
    local reply opts
    local -a lines
    reply=$({program} complete "$COMP_CWORD" "${{COMP_WORDS[@]}}" 2>/dev/null) || return 1
    mapfile -t lines <<< "$reply"
    opts="${{lines[0]}}"
    COMPREPLY=("${{lines[@]:1}}")
    if [[ -n $opts ]]; then
        compopt -o $opts
    fi
    return 0
}}

{complete_line}
"""
