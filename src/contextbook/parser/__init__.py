"""contextbook parser module.

Exports the ``parse_command`` / ``parse_input`` entry points, the parser
registry, the field validators and the parse error types.
"""
from __future__ import annotations

from contextbook.parser.commands import DEFAULT_REGISTRY
from contextbook.parser.errors import (
    DuplicatePrefixError,
    InvalidFieldFormatError,
    InvalidIndexError,
    MissingRequiredFieldError,
    ParseError,
    PreambleNotEmptyError,
    UnknownCommandError,
)
from contextbook.parser.parser import parse_command, parse_input
from contextbook.parser.registry import ParserAlreadyRegisteredError, ParserRegistry

__all__ = [
    "parse_command",
    "parse_input",
    "ParserRegistry",
    "ParserAlreadyRegisteredError",
    "DEFAULT_REGISTRY",
    "ParseError",
    "MissingRequiredFieldError",
    "PreambleNotEmptyError",
    "InvalidIndexError",
    "DuplicatePrefixError",
    "InvalidFieldFormatError",
    "UnknownCommandError",
]
