"""contextbook — contact management core: command parser, validators and model.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import contextbook

    # Parse a command line into an immutable command object
    command = contextbook.parse_input(
        "add n/Alice p/98765432 e/alice@example.com t/friend t/colleague"
    )

    # Execute it against a model
    model = contextbook.ModelManager()
    result = command.execute(model)

    # Or dispatch by command word directly
    command = contextbook.parse_command("find", " t/friend")

    # Render a command back to canonical text
    contextbook.format_command(command)

    # Parse and execute in one step
    book = contextbook.ContactBook()
    book.execute("list")

    contextbook.__version__
    '0.1.0'
"""
from __future__ import annotations

from typing import TYPE_CHECKING

__version__: str = "0.1.0"

from contextbook.convenience import ContactBook
from contextbook.model.model import ModelManager

if TYPE_CHECKING:
    from contextbook.commands.base import Command
    from contextbook.syntax.prefixes import Prefix
    from contextbook.tokenizer.tokenizer import ArgumentMultimap


def parse_command(command_word: str, args: str) -> "Command":
    """Parse ``args`` with the parser registered for ``command_word``.

    Raises
    ------
    contextbook.parser.UnknownCommandError
        If ``command_word`` is not a known command.
    contextbook.parser.ParseError
        If ``args`` do not form a valid command.
    """
    from contextbook.parser.parser import parse_command as _parse_command

    return _parse_command(command_word, args)


def parse_input(user_input: str) -> "Command":
    """Parse a full command line, e.g. ``"delete 2"``."""
    from contextbook.parser.parser import parse_input as _parse_input

    return _parse_input(user_input)


def tokenize(args: str, *prefixes: "Prefix") -> "ArgumentMultimap":
    """Split ``args`` into a preamble and per-prefix values."""
    from contextbook.tokenizer.tokenizer import tokenize as _tokenize

    return _tokenize(args, *prefixes)


def format_command(command: "Command") -> str:
    """Render ``command`` as canonical command-line text."""
    from contextbook.formatter.formatter import format_command as _format_command

    return _format_command(command)


__all__ = [
    "__version__",
    "parse_command",
    "parse_input",
    "tokenize",
    "format_command",
    "ModelManager",
    "ContactBook",
]
