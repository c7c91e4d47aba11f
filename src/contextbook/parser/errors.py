"""Parse error types for the contextbook command parser.

Every error aborts the whole command before the model is touched.  Errors
raised because the overall shape of a command is wrong carry the
command's usage text so the user sees how to fix it; field errors carry
the field name and the offending raw value instead.

Taxonomy
--------
ParseError
    Base class; also raised directly for blank input and for an ``edit``
    that changes nothing.
MissingRequiredFieldError
    A required prefix is absent.
PreambleNotEmptyError
    Unlabelled text preceded the first prefix of a command that takes none.
InvalidIndexError
    The preamble of an index-based command is not a positive integer.
DuplicatePrefixError
    A single-valued prefix was given more than once.
InvalidFieldFormatError
    A field value failed its validator.
UnknownCommandError
    The command word is not registered.
"""
from __future__ import annotations

from collections.abc import Iterable

from contextbook.syntax.prefixes import Prefix

MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format!"
MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_DUPLICATE_FIELDS = "Multiple values specified for the following single-valued field(s): "
MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."


def command_invalid_format(usage: str) -> str:
    """Return the standard invalid-format message followed by ``usage``."""
    return f"{MESSAGE_INVALID_COMMAND_FORMAT}\n{usage}"


class ParseError(Exception):
    """Raised when a command line cannot be turned into a command.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    usage:
        The usage text of the command being parsed, when relevant.
    """

    def __init__(self, message: str, usage: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.usage = usage


class MissingRequiredFieldError(ParseError):
    """Raised when a command is missing one or more required prefixes."""

    def __init__(self, usage: str, missing: Iterable[Prefix] = ()) -> None:
        super().__init__(command_invalid_format(usage), usage)
        self.missing: tuple[Prefix, ...] = tuple(missing)


class PreambleNotEmptyError(ParseError):
    """Raised when a command that takes no preamble was given one."""

    def __init__(self, usage: str, preamble: str) -> None:
        super().__init__(command_invalid_format(usage), usage)
        self.preamble = preamble


class InvalidIndexError(ParseError):
    """Raised when an index argument is not a positive integer.

    When ``usage`` is given the message is the command's invalid-format
    message, otherwise the bare index message.
    """

    def __init__(self, value: str, usage: str | None = None) -> None:
        message = command_invalid_format(usage) if usage else MESSAGE_INVALID_INDEX
        super().__init__(message, usage)
        self.value = value


class DuplicatePrefixError(ParseError):
    """Raised when single-valued prefixes are repeated."""

    def __init__(self, prefixes: Iterable[Prefix]) -> None:
        self.prefixes: tuple[Prefix, ...] = tuple(prefixes)
        super().__init__(MESSAGE_DUPLICATE_FIELDS + " ".join(p.marker for p in self.prefixes))


class InvalidFieldFormatError(ParseError):
    """Raised when a field value fails validation.

    Parameters
    ----------
    field:
        Name of the field, e.g. ``"email"``.
    value:
        The raw value as supplied by the user.
    message:
        The field's constraint message.
    """

    def __init__(self, field: str, value: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.value = value

    def __str__(self) -> str:
        return f"Invalid {self.field} {self.value!r}: {self.message}"


class UnknownCommandError(ParseError):
    """Raised when no parser is registered for a command word."""

    def __init__(self, command_word: str) -> None:
        super().__init__(MESSAGE_UNKNOWN_COMMAND)
        self.command_word = command_word

    def __str__(self) -> str:
        return f"{MESSAGE_UNKNOWN_COMMAND}: {self.command_word!r}"
