"""In-memory contact model.

``ContactList`` holds the canonical ordered sequence of contacts and
enforces the identity rule: no two stored contacts are equal under
name + phone + email.  ``ModelManager`` wraps it with a predicate and a
filtered view that is recomputed synchronously after every change, so
observers never see a stale or partial view.

Usage
-----
::

    from contextbook.model import ModelManager

    model = ModelManager()
    model.add_contact(contact)
    model.update_filtered_contact_list(ContactMatchesPredicate(tags=("friend",)))
    visible = model.get_filtered_contact_list()
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator

from contextbook.contact.nodes import Contact
from contextbook.contact.predicates import PREDICATE_SHOW_ALL_CONTACTS

logger = logging.getLogger(__name__)

ContactPredicate = Callable[[Contact], bool]
ViewListener = Callable[[tuple[Contact, ...]], None]


class DuplicateContactError(ValueError):
    """Raised when an operation would store two equal contacts."""

    def __init__(self, contact: Contact) -> None:
        self.contact = contact
        super().__init__(f"Operation would result in duplicate contacts: {contact.name}")


class ContactNotFoundError(KeyError):
    """Raised when a contact to remove or replace is not stored."""

    def __init__(self, contact: Contact) -> None:
        self.contact = contact
        super().__init__(f"Contact {contact.name.value!r} is not in the contact list")


class ContactList:
    """Ordered sequence of contacts with no duplicates.

    Parameters
    ----------
    contacts:
        Initial contacts, in order.  Duplicates raise ``DuplicateContactError``.
    """

    __slots__ = ("_contacts",)

    def __init__(self, contacts: Iterable[Contact] = ()) -> None:
        self._contacts: list[Contact] = []
        for contact in contacts:
            self.add(contact)

    def contains(self, contact: Contact) -> bool:
        """Return True if an equal contact is stored."""
        return any(stored.is_same_contact(contact) for stored in self._contacts)

    def add(self, contact: Contact) -> None:
        if self.contains(contact):
            raise DuplicateContactError(contact)
        self._contacts.append(contact)

    def remove(self, contact: Contact) -> None:
        try:
            self._contacts.remove(contact)
        except ValueError:
            raise ContactNotFoundError(contact) from None

    def set_contact(self, target: Contact, replacement: Contact) -> None:
        """Replace ``target`` with ``replacement`` at the same position.

        Raises
        ------
        ContactNotFoundError
            If ``target`` is not stored.
        DuplicateContactError
            If ``replacement`` equals a stored contact other than ``target``.
        """
        try:
            position = self._contacts.index(target)
        except ValueError:
            raise ContactNotFoundError(target) from None
        if replacement != target and self.contains(replacement):
            raise DuplicateContactError(replacement)
        self._contacts[position] = replacement

    def clear(self) -> None:
        self._contacts.clear()

    def as_tuple(self) -> tuple[Contact, ...]:
        """Return a read-only snapshot of the stored contacts."""
        return tuple(self._contacts)

    def __iter__(self) -> Iterator[Contact]:
        return iter(tuple(self._contacts))

    def __len__(self) -> int:
        return len(self._contacts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContactList):
            return NotImplemented
        return self._contacts == other._contacts

    def __repr__(self) -> str:
        return f"ContactList({len(self._contacts)} contact(s))"


class ModelManager:
    """The single source of truth for contact state.

    Parameters
    ----------
    contacts:
        Initial contacts, in order.
    """

    def __init__(self, contacts: Iterable[Contact] = ()) -> None:
        self._contacts = ContactList(contacts)
        self._predicate: ContactPredicate = PREDICATE_SHOW_ALL_CONTACTS
        self._filtered: tuple[Contact, ...] = ()
        self._listeners: list[ViewListener] = []
        logger.debug("Initializing model with %d contact(s)", len(self._contacts))
        self._refresh()

    # ------------------------------------------------------------------
    # Contacts
    # ------------------------------------------------------------------

    @property
    def contacts(self) -> tuple[Contact, ...]:
        """Return the canonical contact sequence."""
        return self._contacts.as_tuple()

    def has_contact(self, contact: Contact) -> bool:
        """Return True if a contact equal under the identity rule is stored."""
        return self._contacts.contains(contact)

    def add_contact(self, contact: Contact) -> None:
        """Append ``contact`` and reset the view to show all contacts.

        Raises
        ------
        DuplicateContactError
            If an equal contact is already stored.
        """
        self._contacts.add(contact)
        logger.debug("Added contact %s", contact.name)
        self.update_filtered_contact_list(PREDICATE_SHOW_ALL_CONTACTS)

    def delete_contact(self, target: Contact) -> None:
        """Remove ``target``.

        Raises
        ------
        ContactNotFoundError
            If ``target`` is not stored.
        """
        self._contacts.remove(target)
        logger.debug("Deleted contact %s", target.name)
        self._refresh()

    def set_contact(self, target: Contact, replacement: Contact) -> None:
        """Replace ``target`` with ``replacement``, keeping its position."""
        self._contacts.set_contact(target, replacement)
        logger.debug("Replaced contact %s with %s", target.name, replacement.name)
        self._refresh()

    def clear_contacts(self) -> None:
        """Remove every contact."""
        self._contacts.clear()
        logger.debug("Cleared all contacts")
        self._refresh()

    # ------------------------------------------------------------------
    # Filtered view
    # ------------------------------------------------------------------

    def get_filtered_contact_list(self) -> tuple[Contact, ...]:
        """Return the contacts accepted by the current predicate, in order."""
        return self._filtered

    def update_filtered_contact_list(self, predicate: ContactPredicate) -> None:
        """Replace the predicate and recompute the view before returning."""
        self._predicate = predicate
        logger.debug("Updated filter predicate to %r", predicate)
        self._refresh()

    def add_listener(self, listener: ViewListener) -> None:
        """Register ``listener`` to receive the view after every recompute."""
        self._listeners.append(listener)

    def remove_listener(self, listener: ViewListener) -> None:
        self._listeners.remove(listener)

    def _refresh(self) -> None:
        self._filtered = tuple(c for c in self._contacts if self._predicate(c))
        for listener in self._listeners:
            listener(self._filtered)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModelManager):
            return NotImplemented
        return self._contacts == other._contacts and self._filtered == other._filtered

    def __repr__(self) -> str:
        return (
            f"ModelManager(contacts={len(self._contacts)}, "
            f"shown={len(self._filtered)})"
        )
