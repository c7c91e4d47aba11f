"""Shared test fixtures for contextbook.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import pytest

from contextbook.contact.nodes import Contact, Email, Name, Note, Phone, Tag
from contextbook.model.model import ModelManager


def make_contact(
    name: str = "Alice Pauline",
    phone: str = "94351253",
    email: str = "alice@example.com",
    note: str = "",
    tags: tuple[str, ...] = (),
) -> Contact:
    """Build a contact from plain strings."""
    return Contact(
        name=Name(name),
        phone=Phone(phone),
        email=Email(email),
        note=Note(note),
        tags=frozenset(Tag(t) for t in tags),
    )


@pytest.fixture()
def alice() -> Contact:
    return make_contact(note="Met at the conference", tags=("friends",))


@pytest.fixture()
def benson() -> Contact:
    return make_contact(
        name="Benson Meier",
        phone="98765432",
        email="johnd@example.com",
        tags=("owesMoney", "friends"),
    )


@pytest.fixture()
def carl() -> Contact:
    return make_contact(name="Carl Kurz", phone="95352563", email="heinz@example.com")


@pytest.fixture()
def typical_model(alice: Contact, benson: Contact, carl: Contact) -> ModelManager:
    """A model holding three contacts in insertion order."""
    return ModelManager([alice, benson, carl])


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def contact_factory():
    """Return ``make_contact`` so tests can build contacts from strings."""
    return make_contact
