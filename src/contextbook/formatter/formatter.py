"""Canonical formatter: command object → command-line text.

The ``CommandFormatter`` renders any command back into the text a user
would type to produce it, with arguments in the canonical prefix order
(``n/ p/ e/ note/ t/``) and tags sorted alphabetically.  Parsing the
output yields a command equal to the input, so contacts round-trip
through their textual form.

An empty note is omitted from ``add`` output, since the parser defaults
an absent note to the empty string.

Usage
-----
::

    from contextbook.formatter import format_command
    from contextbook.parser import parse_input

    command = parse_input("add  t/b n/Alice p/123 e/a@b.com t/a")
    format_command(command)
    # 'add n/Alice p/123 e/a@b.com t/a t/b'
"""
from __future__ import annotations

from contextbook.commands.base import Command
from contextbook.commands.commands import (
    AddCommand,
    DeleteCommand,
    EditCommand,
    EditContactDescriptor,
    FindCommand,
)
from contextbook.contact.nodes import Contact, Tag
from contextbook.syntax.prefixes import (
    PREFIX_EMAIL,
    PREFIX_NAME,
    PREFIX_NOTE,
    PREFIX_PHONE,
    PREFIX_TAG,
)


class CommandFormatter:
    """Produces canonical command text from command objects."""

    def format(self, command: Command) -> str:
        """Render ``command`` as a single command line.

        Raises
        ------
        TypeError
            If ``command`` is not a known command type.
        """
        word = getattr(command, "COMMAND_WORD", None)
        if word is None:
            raise TypeError(f"Cannot format {command!r}: not a command")
        args = self._format_args(command)
        return f"{word} {args}" if args else word

    def format_contact_args(self, contact: Contact) -> str:
        """Render ``contact`` as the arguments of an ``add`` command."""
        parts = [
            f"{PREFIX_NAME}{contact.name}",
            f"{PREFIX_PHONE}{contact.phone}",
            f"{PREFIX_EMAIL}{contact.email}",
        ]
        if contact.note.value:
            parts.append(f"{PREFIX_NOTE}{contact.note}")
        parts.extend(self._format_tags(contact.tags))
        return " ".join(parts)

    # ------------------------------------------------------------------
    # Per-command arguments
    # ------------------------------------------------------------------

    def _format_args(self, command: Command) -> str:
        if isinstance(command, AddCommand):
            return self.format_contact_args(command.contact)
        if isinstance(command, DeleteCommand):
            return str(command.index)
        if isinstance(command, EditCommand):
            return self._format_edit(command)
        if isinstance(command, FindCommand):
            return self._format_find(command)
        return ""

    def _format_edit(self, command: EditCommand) -> str:
        d: EditContactDescriptor = command.descriptor
        parts = [str(command.index)]
        if d.name is not None:
            parts.append(f"{PREFIX_NAME}{d.name}")
        if d.phone is not None:
            parts.append(f"{PREFIX_PHONE}{d.phone}")
        if d.email is not None:
            parts.append(f"{PREFIX_EMAIL}{d.email}")
        if d.note is not None:
            parts.append(f"{PREFIX_NOTE}{d.note}")
        if d.tags is not None:
            # An empty tag set is expressed as a single bare prefix.
            parts.extend(self._format_tags(d.tags) or [PREFIX_TAG.marker])
        return " ".join(parts)

    def _format_find(self, command: FindCommand) -> str:
        predicate = command.predicate
        parts: list[str] = []
        if predicate.name_keywords:
            parts.append(f"{PREFIX_NAME}{' '.join(predicate.name_keywords)}")
        parts.extend(f"{PREFIX_TAG}{t}" for t in predicate.tags)
        return " ".join(parts)

    @staticmethod
    def _format_tags(tags: frozenset[Tag]) -> list[str]:
        return [f"{PREFIX_TAG}{t}" for t in sorted(tags, key=lambda t: t.name)]


def format_command(command: Command) -> str:
    """Convenience function: format a command to canonical text."""
    return CommandFormatter().format(command)


def format_contact_args(contact: Contact) -> str:
    """Convenience function: format a contact as ``add`` arguments."""
    return CommandFormatter().format_contact_args(contact)
