"""Field validators: raw argument text → typed contact values.

Each function is pure.  It either returns the typed value or raises
``InvalidFieldFormatError`` naming the field and the raw text; nothing
is logged or recorded.  Leading and trailing whitespace is stripped
before validation, except for notes, which are taken as given.
"""
from __future__ import annotations

from collections.abc import Iterable

from contextbook.commands.base import Index
from contextbook.contact.nodes import Email, Name, Note, Phone, Tag
from contextbook.parser.errors import InvalidFieldFormatError, InvalidIndexError


def parse_index(raw: str, usage: str | None = None) -> Index:
    """Parse a one-based index.

    Raises
    ------
    InvalidIndexError
        If ``raw`` is not a non-zero unsigned integer.
    """
    trimmed = raw.strip()
    if not (trimmed.isascii() and trimmed.isdigit()) or int(trimmed) == 0:
        raise InvalidIndexError(raw, usage)
    return Index(int(trimmed))


def parse_name(raw: str) -> Name:
    trimmed = raw.strip()
    if not Name.is_valid(trimmed):
        raise InvalidFieldFormatError("name", raw, Name.MESSAGE_CONSTRAINTS)
    return Name(trimmed)


def parse_phone(raw: str) -> Phone:
    trimmed = raw.strip()
    if not Phone.is_valid(trimmed):
        raise InvalidFieldFormatError("phone", raw, Phone.MESSAGE_CONSTRAINTS)
    return Phone(trimmed)


def parse_email(raw: str) -> Email:
    trimmed = raw.strip()
    if not Email.is_valid(trimmed):
        raise InvalidFieldFormatError("email", raw, Email.MESSAGE_CONSTRAINTS)
    return Email(trimmed)


def parse_note(raw: str) -> Note:
    """Accept any text, including the empty string."""
    return Note(raw)


def parse_tag(raw: str) -> Tag:
    trimmed = raw.strip()
    if not Tag.is_valid(trimmed):
        raise InvalidFieldFormatError("tag", raw, Tag.MESSAGE_CONSTRAINTS)
    return Tag(trimmed)


def parse_tags(raws: Iterable[str]) -> frozenset[Tag]:
    """Parse every tag, failing on the first invalid one.

    Duplicate tag names collapse into a single ``Tag``.
    """
    return frozenset(parse_tag(raw) for raw in raws)
