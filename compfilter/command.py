"""compfilter - completion filtering helper called from bash."""

import asyncio
import os
import sys

from .config_loader import ConfigLoader
from .handlers import handle_compgen
from .logging_setup import get_logger, init_logger
from .models import CompfilterError, CompletionRequest, ExitCode
from .registry import DefinitionRegistry
from .version import VERSION

__all__ = ["main", "run_command", "split_global_flags", "use_param"]

GLOBAL_FLAGS = ("--debug", "--config")

USAGE = """Syntax: compfilter [--debug LOGFILE] [--config FILE] <command> [args]

Available commands:
 complete [CWORD WORD...]   Print the completion reply (uses COMP_LINE/COMP_POINT without words)
 compgen bash [default|PATH] Print or install the bash glue script
 list                       List the commands having a completion definition
 version                    Show the version
 help                       Show this help
"""


def use_param(txt: str, argv: list[str]) -> str:
    """Check if parameter `txt` is in `argv`.

    if found, removes it from `argv` & returns the argument value
    """
    v = ""
    if txt in argv:
        i = argv.index(txt)
        v = argv[i + 1] if i + 1 < len(argv) else ""
        del argv[i : i + 2]
    return v


def _request_from_args(args: list[str]) -> CompletionRequest | None:
    """Build the completion request from the `complete` arguments or bash variables."""
    if not args:
        line = os.environ.get("COMP_LINE")
        if line is None:
            return None
        point = os.environ.get("COMP_POINT", "")
        return CompletionRequest.from_line(line, int(point) if point.isdigit() else None)
    try:
        cword = int(args[0])
    except ValueError:
        return None
    words = args[1:]
    if not words or cword < 0 or cword > len(words):
        return None
    return CompletionRequest(words=words, cword=cword)


async def run_command(args: list[str], config_filename: str = "") -> int:
    """Run a compfilter command.

    Args:
        args: Command line, without the program name and global flags
        config_filename: Optional configuration file or directory

    Returns:
        The exit code
    """
    log = get_logger("startup")

    if not args or args[0] in {"help", "--help", "-h"}:
        print(USAGE, end="")
        return ExitCode.SUCCESS if args else ExitCode.USAGE_ERROR

    cmd, params = args[0], args[1:]
    if cmd == "version":
        print(VERSION)
        return ExitCode.SUCCESS
    if cmd not in {"complete", "compgen", "list"}:
        print(f"Unknown command: {cmd}\n\n{USAGE}", end="", file=sys.stderr)
        return ExitCode.USAGE_ERROR

    registry = DefinitionRegistry()
    try:
        config = await ConfigLoader(log).load(config_filename)
        await registry.load_config(config)
    except CompfilterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return ExitCode.CONFIG_ERROR

    if cmd == "list":
        for name in registry.commands:
            print(name)
        return ExitCode.SUCCESS

    if cmd == "compgen":
        success, result = handle_compgen(registry, params)
        print(result, end="" if result.endswith("\n") else "\n", file=sys.stdout if success else sys.stderr)
        return ExitCode.SUCCESS if success else ExitCode.USAGE_ERROR

    request = _request_from_args(params)
    if request is None:
        print("Usage: complete [CWORD WORD...]", file=sys.stderr)
        return ExitCode.USAGE_ERROR
    log.debug("Completing %s (cword=%d)", request.words, request.cword)
    reply = registry.complete(request)
    if reply is None:
        return ExitCode.NO_MATCH
    sys.stdout.write(reply.render())
    return ExitCode.SUCCESS


def split_global_flags(argv: list[str]) -> tuple[list[str], list[str]]:
    """Split `argv` into the leading global flags and the command.

    Scanning stops at the first word which isn't a global flag, so the
    words of a completed command line are never taken as flags.
    """
    end = 0
    while end < len(argv) and argv[end] in GLOBAL_FLAGS:
        end += 2
    return argv[:end], argv[end:]


def main() -> None:
    """Run the command."""
    flags, argv = split_global_flags(sys.argv[1:])
    debug_flag = use_param("--debug", flags)
    config_flag = use_param("--config", flags)
    if debug_flag:
        init_logger(filename=debug_flag, force_debug=True)
    else:
        init_logger()
    sys.exit(asyncio.run(run_command(argv, config_flag)))


if __name__ == "__main__":
    main()
