"""contextbook command-line parser entry points.

``parse_input`` splits a full command line into its command word and
arguments; ``parse_command`` dispatches the arguments to the parser
registered for that word.  Both are pure: the model is never consulted,
so duplicate detection and index bounds are left to command execution.

Usage
-----
::

    from contextbook.parser import parse_input

    command = parse_input("add n/Alice p/98765432 e/alice@example.com t/friend")
    result = command.execute(model)
"""
from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Final

from contextbook.commands.commands import HelpCommand
from contextbook.parser.commands import DEFAULT_REGISTRY
from contextbook.parser.errors import ParseError, command_invalid_format
from contextbook.parser.registry import ParserRegistry

if TYPE_CHECKING:
    from contextbook.commands.base import Command

logger = logging.getLogger(__name__)

_BASIC_COMMAND_FORMAT: Final[re.Pattern[str]] = re.compile(
    r"(?P<command_word>\S+)(?P<arguments>.*)", re.DOTALL
)


def parse_command(
    command_word: str,
    args: str,
    registry: ParserRegistry | None = None,
) -> "Command":
    """Parse ``args`` with the parser registered for ``command_word``.

    Parameters
    ----------
    command_word:
        The command word, e.g. ``"add"``.
    args:
        Everything after the command word, including leading whitespace.
    registry:
        Registry to dispatch through; defaults to ``DEFAULT_REGISTRY``.

    Raises
    ------
    UnknownCommandError
        If no parser is registered for ``command_word``.
    ParseError
        If ``args`` do not form a valid command.
    """
    parser = (registry or DEFAULT_REGISTRY).get(command_word)
    logger.debug("Parsing %r with %s", command_word, getattr(parser, "__name__", parser))
    return parser(args)


def parse_input(user_input: str, registry: ParserRegistry | None = None) -> "Command":
    """Parse a full command line such as ``"delete 3"``.

    Raises
    ------
    ParseError
        If the line is blank, or as raised by ``parse_command``.
    """
    match = _BASIC_COMMAND_FORMAT.fullmatch(user_input.strip())
    if match is None:
        raise ParseError(command_invalid_format(HelpCommand.MESSAGE_USAGE), HelpCommand.MESSAGE_USAGE)
    return parse_command(match.group("command_word"), match.group("arguments"), registry)
