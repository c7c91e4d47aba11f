"""Predicates used to restrict the model's filtered contact view.

Predicates are frozen dataclasses so that commands holding them stay
immutable and compare structurally.
"""
from __future__ import annotations

from dataclasses import dataclass

from contextbook.contact.nodes import Contact


@dataclass(frozen=True, slots=True)
class ShowAllContacts:
    """Predicate that accepts every contact."""

    def __call__(self, contact: Contact) -> bool:
        return True


PREDICATE_SHOW_ALL_CONTACTS = ShowAllContacts()


@dataclass(frozen=True, slots=True)
class ContactMatchesPredicate:
    """Matches contacts by name keywords and/or tags.

    A contact matches when every supplied criterion holds:

    - ``name_keywords``: at least one keyword equals a word of the name,
      ignoring case.
    - ``tags``: the contact carries at least one of the tags, ignoring case.

    An empty criterion is not applied.

    Parameters
    ----------
    name_keywords:
        Whole-word keywords to look for in the contact's name.
    tags:
        Tag names to look for among the contact's tags.
    """

    name_keywords: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()

    def __call__(self, contact: Contact) -> bool:
        if self.name_keywords:
            words = {w.casefold() for w in contact.name.value.split()}
            if not any(k.casefold() in words for k in self.name_keywords):
                return False
        if self.tags:
            owned = {t.name.casefold() for t in contact.tags}
            if not any(t.casefold() in owned for t in self.tags):
                return False
        return True
