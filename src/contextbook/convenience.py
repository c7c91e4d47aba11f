"""Convenience API for contextbook.

``ContactBook`` pairs one ``ModelManager`` with the default parser so
that a command line can be parsed and executed in a single call.

Example
-------
::

    from contextbook import ContactBook

    book = ContactBook()
    book.execute("add n/Alice p/98765432 e/alice@example.com t/friend")
    book.execute("find t/friend").feedback_to_user  # '1 contact(s) listed!'
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from contextbook.model.model import ModelManager
from contextbook.parser.parser import parse_input

if TYPE_CHECKING:
    from contextbook.commands.base import CommandResult
    from contextbook.contact.nodes import Contact
    from contextbook.parser.registry import ParserRegistry


class ContactBook:
    """Parse-then-execute wrapper around a ``ModelManager``.

    Parameters
    ----------
    model:
        The model to execute against.  A fresh empty model is used if omitted.
    registry:
        Parser registry to dispatch through; defaults to the built-in one.
    """

    def __init__(
        self,
        model: ModelManager | None = None,
        registry: "ParserRegistry | None" = None,
    ) -> None:
        self._model = model if model is not None else ModelManager()
        self._registry = registry

    @property
    def model(self) -> ModelManager:
        """The underlying model."""
        return self._model

    def execute(self, line: str) -> "CommandResult":
        """Parse ``line`` and execute it against the model.

        Raises
        ------
        ParseError
            If ``line`` is not a valid command; the model is not touched.
        CommandError
            If the command cannot be applied; the model is not touched.
        """
        command = parse_input(line, self._registry)
        return command.execute(self._model)

    @property
    def shown(self) -> tuple["Contact", ...]:
        """The contacts currently in the filtered view."""
        return self._model.get_filtered_contact_list()

    def __repr__(self) -> str:
        return f"ContactBook(contacts={len(self._model.contacts)}, shown={len(self.shown)})"
