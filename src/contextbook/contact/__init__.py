"""contextbook contact module.

Exports the contact value objects, view predicates, and the serializer
for converting contacts to and from JSON/YAML.
"""
from __future__ import annotations

from contextbook.contact.nodes import Contact, Email, Name, Note, Phone, Tag
from contextbook.contact.predicates import (
    PREDICATE_SHOW_ALL_CONTACTS,
    ContactMatchesPredicate,
    ShowAllContacts,
)
from contextbook.contact.serializer import ContactSerializer

__all__ = [
    # Value objects
    "Contact",
    "Name",
    "Phone",
    "Email",
    "Note",
    "Tag",
    # Predicates
    "ShowAllContacts",
    "ContactMatchesPredicate",
    "PREDICATE_SHOW_ALL_CONTACTS",
    # Serializer
    "ContactSerializer",
]
