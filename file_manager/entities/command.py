"""
Command domain entity and the tokenizer that produces it from a raw input line.
"""

import re
from dataclasses import dataclass, field

EXIT_COMMAND = ".exit"
OS_PREFIX = "os --"

# Double-quoted span, single-quoted span, or a run of non-whitespace, in that order.
_TOKEN_RE = re.compile(r'"([^"]*)"|\'([^\']*)\'|(\S+)')


@dataclass(frozen=True)
class ParsedCommand:
    """Command name and ordered arguments parsed from one input line."""

    name: str
    args: tuple[str, ...] = field(default_factory=tuple)

    def is_empty(self) -> bool:
        return not self.name

    def is_exit(self) -> bool:
        return self.name == EXIT_COMMAND


def tokenize(line: str) -> ParsedCommand:
    """
    Split a raw input line into a command name and its arguments.

    Quoted spans become single arguments with the quotes stripped. A line
    starting with ``os --`` keeps everything after the first ``--`` as one
    argument.

    Args:
        line: Raw line as typed by the user

    Returns:
        ParsedCommand; an empty name means there is nothing to run
    """
    trimmed = line.strip()
    if not trimmed:
        return ParsedCommand("")

    if trimmed == EXIT_COMMAND:
        return ParsedCommand(EXIT_COMMAND)

    if trimmed.startswith(OS_PREFIX):
        remainder = trimmed.split("--", 1)[1]
        return ParsedCommand("os", (f"--{remainder}",))

    tokens = [
        next(group for group in match.groups() if group is not None)
        for match in _TOKEN_RE.finditer(trimmed)
    ]
    if not tokens or not tokens[0]:
        return ParsedCommand("")
    return ParsedCommand(tokens[0], tuple(tokens[1:]))
