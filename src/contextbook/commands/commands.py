"""Concrete contextbook commands.

Each command is a frozen dataclass holding only validated data.  Index
arguments refer to the model's *filtered* view, as displayed to the user
when the command was typed.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from contextbook.commands.base import Command, CommandError, CommandResult, Index
from contextbook.contact.nodes import Contact, Email, Name, Note, Phone, Tag
from contextbook.contact.predicates import PREDICATE_SHOW_ALL_CONTACTS, ContactMatchesPredicate

if TYPE_CHECKING:
    from contextbook.model.model import ModelManager

MESSAGE_INVALID_CONTACT_DISPLAYED_INDEX = "The contact index provided is invalid."
MESSAGE_DUPLICATE_CONTACT = "This contact already exists in the contact list."


def _contact_at(model: "ModelManager", index: Index) -> Contact:
    shown = model.get_filtered_contact_list()
    if index.zero_based >= len(shown):
        raise CommandError(MESSAGE_INVALID_CONTACT_DISPLAYED_INDEX)
    return shown[index.zero_based]


# ---------------------------------------------------------------------------
# add
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AddCommand(Command):
    """Adds a fully validated contact to the model."""

    COMMAND_WORD: ClassVar[str] = "add"
    MESSAGE_USAGE: ClassVar[str] = (
        "add: Adds a contact. "
        "Parameters: n/NAME p/PHONE e/EMAIL [note/NOTE] [t/TAG]...\n"
        "Example: add n/John Doe p/98765432 e/johnd@example.com "
        "note/Met at the conference t/friends t/owesMoney"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "New contact added: {}"

    contact: Contact

    def execute(self, model: "ModelManager") -> CommandResult:
        if model.has_contact(self.contact):
            raise CommandError(MESSAGE_DUPLICATE_CONTACT)
        model.add_contact(self.contact)
        return CommandResult(self.MESSAGE_SUCCESS.format(self.contact))


# ---------------------------------------------------------------------------
# delete
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DeleteCommand(Command):
    """Deletes the contact at an index of the filtered view."""

    COMMAND_WORD: ClassVar[str] = "delete"
    MESSAGE_USAGE: ClassVar[str] = (
        "delete: Deletes the contact identified by the index number used in "
        "the displayed contact list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: delete 1"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Deleted contact: {}"

    index: Index

    def execute(self, model: "ModelManager") -> CommandResult:
        target = _contact_at(model, self.index)
        model.delete_contact(target)
        return CommandResult(self.MESSAGE_SUCCESS.format(target))


# ---------------------------------------------------------------------------
# edit
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EditContactDescriptor:
    """The fields an ``edit`` replaces; ``None`` means unchanged.

    ``tags`` replaces the whole tag set, so an empty frozenset clears it.
    """

    name: Name | None = None
    phone: Phone | None = None
    email: Email | None = None
    note: Note | None = None
    tags: frozenset[Tag] | None = field(default=None)

    def is_any_field_edited(self) -> bool:
        return any(
            value is not None
            for value in (self.name, self.phone, self.email, self.note, self.tags)
        )

    def apply(self, contact: Contact) -> Contact:
        """Return a new contact with the edited fields replaced."""
        return Contact(
            name=self.name if self.name is not None else contact.name,
            phone=self.phone if self.phone is not None else contact.phone,
            email=self.email if self.email is not None else contact.email,
            note=self.note if self.note is not None else contact.note,
            tags=self.tags if self.tags is not None else contact.tags,
        )


@dataclass(frozen=True)
class EditCommand(Command):
    """Replaces the contact at an index with an edited copy."""

    COMMAND_WORD: ClassVar[str] = "edit"
    MESSAGE_USAGE: ClassVar[str] = (
        "edit: Edits the contact identified by the index number used in the "
        "displayed contact list. Existing values will be overwritten by the "
        "input values.\n"
        "Parameters: INDEX (must be a positive integer) "
        "[n/NAME] [p/PHONE] [e/EMAIL] [note/NOTE] [t/TAG]...\n"
        "Example: edit 1 p/91234567 e/johndoe@example.com"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Edited contact: {}"
    MESSAGE_NOT_EDITED: ClassVar[str] = "At least one field to edit must be provided."

    index: Index
    descriptor: EditContactDescriptor

    def execute(self, model: "ModelManager") -> CommandResult:
        target = _contact_at(model, self.index)
        edited = self.descriptor.apply(target)
        if edited != target and model.has_contact(edited):
            raise CommandError(MESSAGE_DUPLICATE_CONTACT)
        model.set_contact(target, edited)
        model.update_filtered_contact_list(PREDICATE_SHOW_ALL_CONTACTS)
        return CommandResult(self.MESSAGE_SUCCESS.format(edited))


# ---------------------------------------------------------------------------
# find
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FindCommand(Command):
    """Restricts the filtered view to contacts matching a predicate."""

    COMMAND_WORD: ClassVar[str] = "find"
    MESSAGE_USAGE: ClassVar[str] = (
        "find: Finds all contacts whose names contain any of the given keywords "
        "and/or that carry any of the given tags (case-insensitive).\n"
        "Parameters: [n/KEYWORD [MORE_KEYWORDS]...] [t/TAG]... "
        "(at least one of n/ or t/)\n"
        "Example: find n/alice bob t/friends"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "{} contact(s) listed!"

    predicate: ContactMatchesPredicate

    def execute(self, model: "ModelManager") -> CommandResult:
        model.update_filtered_contact_list(self.predicate)
        return CommandResult(
            self.MESSAGE_SUCCESS.format(len(model.get_filtered_contact_list()))
        )


# ---------------------------------------------------------------------------
# argument-less commands
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ListCommand(Command):
    """Resets the filtered view to show every contact."""

    COMMAND_WORD: ClassVar[str] = "list"
    MESSAGE_USAGE: ClassVar[str] = "list: Lists all contacts.\nExample: list"
    MESSAGE_SUCCESS: ClassVar[str] = "Listed all contacts"

    def execute(self, model: "ModelManager") -> CommandResult:
        model.update_filtered_contact_list(PREDICATE_SHOW_ALL_CONTACTS)
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass(frozen=True)
class ClearCommand(Command):
    """Removes every contact."""

    COMMAND_WORD: ClassVar[str] = "clear"
    MESSAGE_USAGE: ClassVar[str] = "clear: Deletes all contacts.\nExample: clear"
    MESSAGE_SUCCESS: ClassVar[str] = "All contacts have been cleared!"

    def execute(self, model: "ModelManager") -> CommandResult:
        model.clear_contacts()
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass(frozen=True)
class HelpCommand(Command):
    """Asks the caller to show usage for every command."""

    COMMAND_WORD: ClassVar[str] = "help"
    MESSAGE_USAGE: ClassVar[str] = "help: Shows program usage instructions.\nExample: help"
    MESSAGE_SUCCESS: ClassVar[str] = "Showing help."

    def execute(self, model: "ModelManager") -> CommandResult:
        usages = "\n\n".join(cls.MESSAGE_USAGE for cls in ALL_COMMANDS)
        return CommandResult(f"{self.MESSAGE_SUCCESS}\n\n{usages}", show_help=True)


@dataclass(frozen=True)
class ExitCommand(Command):
    """Asks the caller to end the session."""

    COMMAND_WORD: ClassVar[str] = "exit"
    MESSAGE_USAGE: ClassVar[str] = "exit: Exits the program.\nExample: exit"
    MESSAGE_SUCCESS: ClassVar[str] = "Exiting as requested ..."

    def execute(self, model: "ModelManager") -> CommandResult:
        return CommandResult(self.MESSAGE_SUCCESS, exit=True)


ALL_COMMANDS: tuple[type[Command], ...] = (
    AddCommand,
    DeleteCommand,
    EditCommand,
    FindCommand,
    ListCommand,
    ClearCommand,
    HelpCommand,
    ExitCommand,
)
