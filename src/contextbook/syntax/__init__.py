"""contextbook syntax module.

Exports the ``Prefix`` type and the fixed prefix vocabulary.
"""
from __future__ import annotations

from contextbook.syntax.prefixes import (
    ALL_PREFIXES,
    PREFIX_EMAIL,
    PREFIX_NAME,
    PREFIX_NOTE,
    PREFIX_PHONE,
    PREFIX_TAG,
    REPEATABLE_PREFIXES,
    Prefix,
)

__all__ = [
    "Prefix",
    "PREFIX_NAME",
    "PREFIX_PHONE",
    "PREFIX_EMAIL",
    "PREFIX_NOTE",
    "PREFIX_TAG",
    "ALL_PREFIXES",
    "REPEATABLE_PREFIXES",
]
