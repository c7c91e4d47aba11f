"""Contact value objects.

Every field value and the ``Contact`` itself is a frozen dataclass, so a
stored contact is never mutated; edits build a replacement.  Field types
validate on construction and raise ``ValueError`` with the field's
``MESSAGE_CONSTRAINTS`` when given invalid text.  The parser checks
``is_valid`` first so that user input fails with a parse error instead.

Identity rule
-------------
Two contacts are the same entity iff name, phone and email are equal.
``note`` and ``tags`` are declared with ``compare=False`` so that
``==`` and ``hash`` follow that rule directly.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import ClassVar, Final

# ---------------------------------------------------------------------------
# Validation patterns
# ---------------------------------------------------------------------------

_NAME_RE: Final[re.Pattern[str]] = re.compile(r"[^\W_]+(?: +[^\W_]+)*", re.ASCII)
_PHONE_RE: Final[re.Pattern[str]] = re.compile(r"\d{3,}", re.ASCII)
_SPECIAL_CHARACTERS: Final[str] = "+_.-"
_LOCAL_PART_RE: Final[str] = r"[^\W_]+(?:[+_.\-][^\W_]+)*"
_DOMAIN_LABEL_RE: Final[str] = r"[^\W_]+(?:-[^\W_]+)*"
_DOMAIN_LAST_LABEL_RE: Final[str] = r"[^\W_]{2,}(?:-[^\W_]+)*"
_EMAIL_RE: Final[re.Pattern[str]] = re.compile(
    rf"{_LOCAL_PART_RE}@(?:{_DOMAIN_LABEL_RE}\.)*{_DOMAIN_LAST_LABEL_RE}",
    re.ASCII,
)
_TAG_RE: Final[re.Pattern[str]] = re.compile(r"\S+")


def _check(valid: bool, message: str) -> None:
    if not valid:
        raise ValueError(message)


# ---------------------------------------------------------------------------
# Field values
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Name:
    """A contact's name: letters, digits and single spaces, never blank."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )

    value: str

    def __post_init__(self) -> None:
        _check(Name.is_valid(self.value), Name.MESSAGE_CONSTRAINTS)

    @staticmethod
    def is_valid(text: str) -> bool:
        """Return True if ``text`` is a valid name."""
        return _NAME_RE.fullmatch(text) is not None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Phone:
    """A phone number made of at least three digits."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Phone numbers should only contain numbers, and it should be at least 3 digits long"
    )

    value: str

    def __post_init__(self) -> None:
        _check(Phone.is_valid(self.value), Phone.MESSAGE_CONSTRAINTS)

    @staticmethod
    def is_valid(text: str) -> bool:
        """Return True if ``text`` is a valid phone number."""
        return _PHONE_RE.fullmatch(text) is not None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Email:
    """An email address of the form ``local-part@domain``."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Emails should be of the format local-part@domain "
        "and adhere to the following constraints:\n"
        "1. The local-part should only contain alphanumeric characters and these "
        f"special characters, excluding the parentheses, ({_SPECIAL_CHARACTERS}). "
        "The local-part may not start or end with any special characters.\n"
        "2. This is followed by a '@' and then a domain name. The domain name is "
        "made up of domain labels separated by periods.\n"
        "The domain name must:\n"
        "    - end with a domain label at least 2 characters long\n"
        "    - have each domain label start and end with alphanumeric characters\n"
        "    - have each domain label consist of alphanumeric characters, "
        "separated only by hyphens, if any."
    )

    value: str

    def __post_init__(self) -> None:
        _check(Email.is_valid(self.value), Email.MESSAGE_CONSTRAINTS)

    @staticmethod
    def is_valid(text: str) -> bool:
        """Return True if ``text`` is a valid email address."""
        return _EMAIL_RE.fullmatch(text) is not None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Note:
    """Free-form text attached to a contact; any string is accepted."""

    value: str = ""

    @staticmethod
    def is_valid(text: str) -> bool:
        return isinstance(text, str)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Tag:
    """A short label; non-empty and free of whitespace."""

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Tag names should not be blank or contain whitespace"

    name: str

    def __post_init__(self) -> None:
        _check(Tag.is_valid(self.name), Tag.MESSAGE_CONSTRAINTS)

    @staticmethod
    def is_valid(text: str) -> bool:
        """Return True if ``text`` is a valid tag name."""
        return _TAG_RE.fullmatch(text) is not None

    def __str__(self) -> str:
        return self.name


# ---------------------------------------------------------------------------
# Contact
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Contact:
    """An immutable contact.

    Parameters
    ----------
    name, phone, email:
        Identity fields.  Two contacts with equal values here are equal.
    note:
        Free-form note; not part of identity.
    tags:
        Zero or more tags; not part of identity.
    """

    name: Name
    phone: Phone
    email: Email
    note: Note = field(default=Note(), compare=False)
    tags: frozenset[Tag] = field(default=frozenset(), compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.tags, frozenset):
            object.__setattr__(self, "tags", frozenset(self.tags))

    def is_same_contact(self, other: "Contact") -> bool:
        """Return True if ``other`` is the same entity under the identity rule."""
        return self == other

    def has_same_fields(self, other: "Contact") -> bool:
        """Return True if every field, including note and tags, is equal."""
        return self == other and self.note == other.note and self.tags == other.tags

    @property
    def sorted_tags(self) -> tuple[Tag, ...]:
        """Return the tags in alphabetical order for stable display."""
        return tuple(sorted(self.tags, key=lambda t: t.name))

    def __str__(self) -> str:
        tags = "".join(f"[{t}]" for t in self.sorted_tags)
        return (
            f"{self.name}; Phone: {self.phone}; Email: {self.email}; "
            f"Note: {self.note}; Tags: {tags}"
        )
