"""Sample definition demonstrating compfilter definition development.

Completes a fictional `mytool` command:
- options already typed are not suggested again (`-I` may be repeated)
- `--fields` takes a comma separated list of up to `max_fields` items
- the first positional is a sub command, `test` accepts a target name
"""

from compfilter.definition import Definition
from compfilter.listcomp import complete_list
from compfilter.models import CompletionReply, CompletionRequest
from compfilter.options import complete_words, filter_options, nth_positional, strip_shorts
from compfilter.tokens import normalize_newlines

OPTIONS = "-v --verbose -o --output -f --fields -I --include --color"
SUBCOMMANDS = "build test clean"
FIELDS = "name size date owner"
ARG_OPTIONS = {"-o", "--output", "-f", "--fields"}


class Extension(Definition):
    """Completion for mytool."""

    commands = ["mytool"]

    targets: list[str] = []

    async def on_reload(self) -> None:
        """Read the test targets, one per line."""
        self.targets = normalize_newlines(self.config.get_str("targets", "unit\nintegration"))
        self.log.debug("targets: %s", self.targets)

    def complete(self, request: CompletionRequest) -> CompletionReply | None:
        """Complete mytool options, fields and sub commands."""
        cur, prev = request.cur, request.prev

        if prev in {"-o", "--output"}:
            return None  # files
        if prev in {"-f", "--fields"}:
            return complete_list(FIELDS, cur, max_items=self.config.get_int("max_fields", 3))

        if cur.startswith("-"):
            remaining = filter_options(OPTIONS, request.words, cur, exclude="-I --include", resolve_longs=True)
            return CompletionReply(complete_words(strip_shorts(remaining), cur))

        # values following an option taking an argument are not positionals
        before = request.words[: request.cword]
        words = [w for i, w in enumerate(before) if i == 0 or before[i - 1] not in ARG_OPTIONS]
        subcommand = nth_positional(words, words[0], 1) if words else None
        if subcommand is None:
            return CompletionReply(complete_words(SUBCOMMANDS, cur))
        if subcommand == "test":
            return CompletionReply(complete_words(self.targets, cur))
        return CompletionReply()
