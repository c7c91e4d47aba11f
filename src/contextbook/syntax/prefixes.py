"""Prefix vocabulary for contextbook command arguments.

A ``Prefix`` is the literal marker that labels an argument segment in a
raw command line, e.g. ``n/Alice``.  The vocabulary is fixed; command
parsers declare which subset of it they accept.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Prefix:
    """A literal argument marker such as ``n/`` or ``note/``.

    Parameters
    ----------
    marker:
        The exact text that introduces an argument segment.
    field:
        The contact field this prefix supplies, used in error messages.
    """

    marker: str
    field: str

    def __str__(self) -> str:
        return self.marker

    def __repr__(self) -> str:
        return f"Prefix({self.marker!r})"


PREFIX_NAME = Prefix("n/", "name")
PREFIX_PHONE = Prefix("p/", "phone")
PREFIX_EMAIL = Prefix("e/", "email")
PREFIX_NOTE = Prefix("note/", "note")
PREFIX_TAG = Prefix("t/", "tag")

# Canonical order, also used by the formatter when rendering arguments.
ALL_PREFIXES: tuple[Prefix, ...] = (
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_EMAIL,
    PREFIX_NOTE,
    PREFIX_TAG,
)

# Prefixes that may legitimately appear more than once in one command.
REPEATABLE_PREFIXES: frozenset[Prefix] = frozenset({PREFIX_TAG})
