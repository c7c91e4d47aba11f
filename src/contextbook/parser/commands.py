"""Per-command argument parsers.

One stateless function per command word, each registered in
``DEFAULT_REGISTRY``.  Every parser follows the same protocol:

1. Tokenize the arguments against the prefixes the command accepts.
2. Check that required prefixes are present and that the preamble is
   empty, or for index-based commands, a positive integer.
3. Reject repeated single-valued prefixes (tags may repeat).
4. Validate each present field; the first failure propagates unchanged.
5. Substitute defaults for absent optional fields.
6. Build the command.

A prefix given with an empty value counts as present; whether the value
is acceptable is decided by its field validator.
"""
from __future__ import annotations

from contextbook.commands.commands import (
    AddCommand,
    ClearCommand,
    DeleteCommand,
    EditCommand,
    EditContactDescriptor,
    ExitCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
)
from contextbook.contact.nodes import Contact, Note, Tag
from contextbook.contact.predicates import ContactMatchesPredicate
from contextbook.parser.errors import (
    DuplicatePrefixError,
    InvalidFieldFormatError,
    MissingRequiredFieldError,
    ParseError,
    PreambleNotEmptyError,
)
from contextbook.parser.fields import (
    parse_email,
    parse_index,
    parse_name,
    parse_note,
    parse_phone,
    parse_tags,
)
from contextbook.parser.registry import ParserRegistry
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
from contextbook.tokenizer.tokenizer import ArgumentMultimap, tokenize

DEFAULT_REGISTRY = ParserRegistry("default")

_SINGLE_VALUED: tuple[Prefix, ...] = tuple(
    p for p in ALL_PREFIXES if p not in REPEATABLE_PREFIXES
)

# ---------------------------------------------------------------------------
# Shared checks
# ---------------------------------------------------------------------------


def _require(multimap: ArgumentMultimap, usage: str, *prefixes: Prefix) -> None:
    missing = [p for p in prefixes if not multimap.is_present(p)]
    if missing:
        raise MissingRequiredFieldError(usage, missing)


def _require_empty_preamble(multimap: ArgumentMultimap, usage: str) -> None:
    if multimap.preamble:
        raise PreambleNotEmptyError(usage, multimap.preamble)


def _reject_duplicates(multimap: ArgumentMultimap, *prefixes: Prefix) -> None:
    duplicated = multimap.duplicated(*prefixes)
    if duplicated:
        raise DuplicatePrefixError(duplicated)


def _parse_tags_for_edit(values: list[str]) -> frozenset[Tag] | None:
    # A lone empty ``t/`` clears all tags.
    if not values:
        return None
    if values == [""]:
        return frozenset()
    return parse_tags(values)


# ---------------------------------------------------------------------------
# Parsers
# ---------------------------------------------------------------------------


@DEFAULT_REGISTRY.register(AddCommand.COMMAND_WORD)
def parse_add(args: str) -> AddCommand:
    """Parse ``n/NAME p/PHONE e/EMAIL [note/NOTE] [t/TAG]...``."""
    multimap = tokenize(args, *ALL_PREFIXES)
    usage = AddCommand.MESSAGE_USAGE

    _require(multimap, usage, PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL)
    _require_empty_preamble(multimap, usage)
    _reject_duplicates(multimap, *_SINGLE_VALUED)

    note_value = multimap.get_value(PREFIX_NOTE)
    contact = Contact(
        name=parse_name(multimap.get_value(PREFIX_NAME) or ""),
        phone=parse_phone(multimap.get_value(PREFIX_PHONE) or ""),
        email=parse_email(multimap.get_value(PREFIX_EMAIL) or ""),
        note=parse_note(note_value) if note_value is not None else Note(),
        tags=parse_tags(multimap.get_all_values(PREFIX_TAG)),
    )
    return AddCommand(contact)


@DEFAULT_REGISTRY.register(DeleteCommand.COMMAND_WORD)
def parse_delete(args: str) -> DeleteCommand:
    """Parse ``INDEX``."""
    return DeleteCommand(parse_index(args, DeleteCommand.MESSAGE_USAGE))


@DEFAULT_REGISTRY.register(EditCommand.COMMAND_WORD)
def parse_edit(args: str) -> EditCommand:
    """Parse ``INDEX [n/NAME] [p/PHONE] [e/EMAIL] [note/NOTE] [t/TAG]...``."""
    multimap = tokenize(args, *ALL_PREFIXES)
    usage = EditCommand.MESSAGE_USAGE

    index = parse_index(multimap.preamble, usage)
    _reject_duplicates(multimap, *_SINGLE_VALUED)

    name = multimap.get_value(PREFIX_NAME)
    phone = multimap.get_value(PREFIX_PHONE)
    email = multimap.get_value(PREFIX_EMAIL)
    note = multimap.get_value(PREFIX_NOTE)
    descriptor = EditContactDescriptor(
        name=parse_name(name) if name is not None else None,
        phone=parse_phone(phone) if phone is not None else None,
        email=parse_email(email) if email is not None else None,
        note=parse_note(note) if note is not None else None,
        tags=_parse_tags_for_edit(multimap.get_all_values(PREFIX_TAG)),
    )
    if not descriptor.is_any_field_edited():
        raise ParseError(EditCommand.MESSAGE_NOT_EDITED, usage)
    return EditCommand(index, descriptor)


@DEFAULT_REGISTRY.register(FindCommand.COMMAND_WORD)
def parse_find(args: str) -> FindCommand:
    """Parse ``[n/KEYWORD [MORE_KEYWORDS]...] [t/TAG]...``."""
    multimap = tokenize(args, PREFIX_NAME, PREFIX_TAG)
    usage = FindCommand.MESSAGE_USAGE

    _require_empty_preamble(multimap, usage)
    if not (multimap.is_present(PREFIX_NAME) or multimap.is_present(PREFIX_TAG)):
        raise MissingRequiredFieldError(usage, (PREFIX_NAME, PREFIX_TAG))
    _reject_duplicates(multimap, PREFIX_NAME)

    keywords: tuple[str, ...] = ()
    raw_keywords = multimap.get_value(PREFIX_NAME)
    if raw_keywords is not None:
        keywords = tuple(raw_keywords.split())
        if not keywords:
            raise InvalidFieldFormatError(
                "name", raw_keywords, "At least one name keyword must be given after n/"
            )
    tags = tuple(sorted(t.name for t in parse_tags(multimap.get_all_values(PREFIX_TAG))))
    return FindCommand(ContactMatchesPredicate(name_keywords=keywords, tags=tags))


@DEFAULT_REGISTRY.register(ListCommand.COMMAND_WORD)
def parse_list(args: str) -> ListCommand:
    return ListCommand()


@DEFAULT_REGISTRY.register(ClearCommand.COMMAND_WORD)
def parse_clear(args: str) -> ClearCommand:
    return ClearCommand()


@DEFAULT_REGISTRY.register(HelpCommand.COMMAND_WORD)
def parse_help(args: str) -> HelpCommand:
    return HelpCommand()


@DEFAULT_REGISTRY.register(ExitCommand.COMMAND_WORD)
def parse_exit(args: str) -> ExitCommand:
    return ExitCommand()
