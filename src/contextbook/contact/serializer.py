"""Contact serialization to and from plain dicts, JSON and YAML.

The serialized form of a contact is a flat mapping of strings with tags
as a sorted list, which maps naturally onto both formats.

Usage
-----
::

    from contextbook.contact.serializer import ContactSerializer

    serializer = ContactSerializer()
    text = serializer.to_yaml(model.get_filtered_contact_list())
    contacts = serializer.from_yaml(text)
"""
from __future__ import annotations

import json
from collections.abc import Iterable

import yaml

from contextbook.contact.nodes import Contact, Email, Name, Note, Phone, Tag


class ContactSerializer:
    """Converts between ``Contact`` objects and plain Python dicts.

    Deserialization goes through the field constructors, so invalid data
    raises ``ValueError`` with the offending field's constraint message.
    """

    # ------------------------------------------------------------------
    # Serialization (Contact → dict)
    # ------------------------------------------------------------------

    def contact_to_dict(self, contact: Contact) -> dict[str, object]:
        """Serialize a single ``Contact`` to a JSON-compatible dict."""
        return {
            "name": contact.name.value,
            "phone": contact.phone.value,
            "email": contact.email.value,
            "note": contact.note.value,
            "tags": [t.name for t in contact.sorted_tags],
        }

    def to_list(self, contacts: Iterable[Contact]) -> list[dict[str, object]]:
        """Serialize contacts, preserving their order."""
        return [self.contact_to_dict(c) for c in contacts]

    # ------------------------------------------------------------------
    # Deserialization (dict → Contact)
    # ------------------------------------------------------------------

    def contact_from_dict(self, d: dict[str, object]) -> Contact:
        """Deserialize a ``Contact`` from a dict produced by ``contact_to_dict``."""
        if not isinstance(d, dict):
            raise ValueError(f"Contact entry must be a mapping, got {type(d).__name__}")
        missing = [key for key in ("name", "phone", "email") if key not in d]
        if missing:
            raise ValueError(f"Contact is missing field(s): {', '.join(missing)}")
        tags = d.get("tags") or []
        if not isinstance(tags, list):
            raise ValueError(f"Contact tags must be a list, got {type(tags).__name__}")
        return Contact(
            name=Name(str(d["name"])),
            phone=Phone(str(d["phone"])),
            email=Email(str(d["email"])),
            note=Note(str(d.get("note") or "")),
            tags=frozenset(Tag(str(t)) for t in tags),
        )

    def from_list(self, data: list[dict[str, object]]) -> list[Contact]:
        """Deserialize a list of contact dicts."""
        if not isinstance(data, list):
            raise ValueError(f"Contacts must be a list, got {type(data).__name__}")
        return [self.contact_from_dict(d) for d in data]

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, contacts: Iterable[Contact], indent: int = 2) -> str:
        """Serialize contacts to a JSON array."""
        return json.dumps(self.to_list(contacts), indent=indent, ensure_ascii=False)

    def from_json(self, text: str) -> list[Contact]:
        """Deserialize contacts from a JSON array."""
        data: list[dict[str, object]] = json.loads(text)
        return self.from_list(data)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, contacts: Iterable[Contact]) -> str:
        """Serialize contacts to a YAML sequence."""
        return yaml.dump(
            self.to_list(contacts),
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )

    def from_yaml(self, text: str) -> list[Contact]:
        """Deserialize contacts from a YAML sequence."""
        data: list[dict[str, object]] = yaml.safe_load(text) or []
        return self.from_list(data)
