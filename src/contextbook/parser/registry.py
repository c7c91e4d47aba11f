"""Command-word registry for contextbook parsers.

Maps each command word to the stateless function that parses that
command's arguments.  The mapping is filled once, at import time, by the
``@register`` decorator in ``contextbook.parser.commands``; lookups are
plain dict access.

Example
-------
Register a parser on a private registry::

    from contextbook.parser.registry import ParserRegistry

    registry = ParserRegistry("custom")

    @registry.register("list")
    def parse_list(args: str) -> ListCommand:
        return ListCommand()

    registry.get("list")(" ")  # ListCommand()
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from contextbook.parser.errors import UnknownCommandError

if TYPE_CHECKING:
    from contextbook.commands.base import Command

logger = logging.getLogger(__name__)

CommandParser = Callable[[str], "Command"]


class ParserAlreadyRegisteredError(ValueError):
    """Raised when attempting to register a command word that already exists."""

    def __init__(self, command_word: str, registry_name: str) -> None:
        self.command_word = command_word
        self.registry_name = registry_name
        super().__init__(
            f"Command word {command_word!r} is already registered in the "
            f"{registry_name!r} registry. "
            "Use a unique word or explicitly deregister the existing parser first."
        )


class ParserRegistry:
    """Command word → parser function table.

    Parameters
    ----------
    name:
        A human-readable name for this registry (used in error messages).
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._parsers: dict[str, CommandParser] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, command_word: str) -> Callable[[CommandParser], CommandParser]:
        """Return a decorator that registers the decorated parser function.

        The function is returned unchanged so it stays directly callable.

        Raises
        ------
        ParserAlreadyRegisteredError
            If ``command_word`` is already in use in this registry.
        """

        def decorator(func: CommandParser) -> CommandParser:
            self.register_parser(command_word, func)
            return func

        return decorator

    def register_parser(self, command_word: str, func: CommandParser) -> None:
        """Register ``func`` under ``command_word`` without decorator syntax.

        Raises
        ------
        ParserAlreadyRegisteredError
            If ``command_word`` is already registered.
        TypeError
            If ``func`` is not callable.
        """
        if command_word in self._parsers:
            raise ParserAlreadyRegisteredError(command_word, self._name)
        if not callable(func):
            raise TypeError(
                f"Cannot register {func!r} under {command_word!r}: it must be callable."
            )
        self._parsers[command_word] = func
        logger.debug(
            "Registered parser %r -> %s in registry %r",
            command_word,
            getattr(func, "__qualname__", repr(func)),
            self._name,
        )

    def deregister(self, command_word: str) -> None:
        """Remove the parser for ``command_word``.

        Raises
        ------
        UnknownCommandError
            If ``command_word`` is not currently registered.
        """
        if command_word not in self._parsers:
            raise UnknownCommandError(command_word)
        del self._parsers[command_word]
        logger.debug("Deregistered parser %r from registry %r", command_word, self._name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, command_word: str) -> CommandParser:
        """Return the parser registered under ``command_word``.

        Raises
        ------
        UnknownCommandError
            If no parser is registered under ``command_word``.
        """
        try:
            return self._parsers[command_word]
        except KeyError:
            raise UnknownCommandError(command_word) from None

    def command_words(self) -> list[str]:
        """Return all registered command words in alphabetical order."""
        return sorted(self._parsers)

    def __contains__(self, command_word: object) -> bool:
        return command_word in self._parsers

    def __len__(self) -> int:
        return len(self._parsers)

    def __repr__(self) -> str:
        return f"ParserRegistry(name={self._name!r}, commands={self.command_words()})"
