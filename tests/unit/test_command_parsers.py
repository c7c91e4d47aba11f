"""Unit tests for contextbook.parser.commands — one parser per command word."""
from __future__ import annotations

import pytest

from contextbook.commands.base import Index
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
from contextbook.contact.nodes import Contact, Email, Name, Note, Phone, Tag
from contextbook.contact.predicates import ContactMatchesPredicate
from contextbook.parser.commands import (
    parse_add,
    parse_clear,
    parse_delete,
    parse_edit,
    parse_exit,
    parse_find,
    parse_help,
    parse_list,
)
from contextbook.parser.errors import (
    DuplicatePrefixError,
    InvalidFieldFormatError,
    InvalidIndexError,
    MissingRequiredFieldError,
    ParseError,
    PreambleNotEmptyError,
)
from contextbook.syntax.prefixes import PREFIX_EMAIL, PREFIX_NAME, PREFIX_NOTE, PREFIX_PHONE

VALID_ADD = " n/Alice p/98765432 e/alice@example.com"


# ---------------------------------------------------------------------------
# add
# ---------------------------------------------------------------------------


class TestParseAdd:
    def test_full_example_parses_to_expected_contact(self) -> None:
        command = parse_add(" n/Alice p/98765432 e/alice@example.com t/friend t/colleague")
        contact = command.contact
        assert contact.name == Name("Alice")
        assert contact.phone == Phone("98765432")
        assert contact.email == Email("alice@example.com")
        assert contact.note == Note("")
        assert contact.tags == frozenset({Tag("friend"), Tag("colleague")})

    def test_note_is_parsed(self) -> None:
        command = parse_add(VALID_ADD + " note/Met at the conference")
        assert command.contact.note == Note("Met at the conference")

    def test_empty_note_value_is_allowed(self) -> None:
        command = parse_add(VALID_ADD + " note/")
        assert command.contact.note == Note("")

    def test_fields_in_any_order(self) -> None:
        command = parse_add(" t/x e/alice@example.com p/98765432 n/Alice")
        assert command == parse_add(VALID_ADD)
        assert command.contact.tags == frozenset({Tag("x")})

    def test_leading_whitespace_only_preamble_is_empty(self) -> None:
        assert isinstance(parse_add("   \t" + VALID_ADD), AddCommand)

    def test_repeated_tags_allowed(self) -> None:
        command = parse_add(VALID_ADD + " t/a t/b t/a")
        assert command.contact.tags == frozenset({Tag("a"), Tag("b")})

    def test_parsing_is_idempotent(self) -> None:
        args = VALID_ADD + " note/hi t/friend"
        first, second = parse_add(args), parse_add(args)
        assert first == second
        assert first.contact.has_same_fields(second.contact)

    @pytest.mark.parametrize("missing, args", [
        (PREFIX_NAME, " p/98765432 e/alice@example.com"),
        (PREFIX_PHONE, " n/Alice e/alice@example.com"),
        (PREFIX_EMAIL, " n/Alice p/98765432"),
    ])
    def test_missing_required_field(self, missing, args: str) -> None:
        with pytest.raises(MissingRequiredFieldError) as info:
            parse_add(args)
        assert info.value.missing == (missing,)
        assert AddCommand.MESSAGE_USAGE in str(info.value)

    def test_missing_all_fields(self) -> None:
        with pytest.raises(MissingRequiredFieldError) as info:
            parse_add("")
        assert len(info.value.missing) == 3

    def test_non_empty_preamble(self) -> None:
        with pytest.raises(PreambleNotEmptyError) as info:
            parse_add(" some preamble" + VALID_ADD)
        assert info.value.preamble == "some preamble"
        assert info.value.usage == AddCommand.MESSAGE_USAGE

    @pytest.mark.parametrize("extra, prefix", [
        (" n/Bob", PREFIX_NAME),
        (" p/12345", PREFIX_PHONE),
        (" e/bob@example.com", PREFIX_EMAIL),
        (" note/a note/b", PREFIX_NOTE),
    ])
    def test_duplicate_single_valued_prefix(self, extra: str, prefix) -> None:
        with pytest.raises(DuplicatePrefixError) as info:
            parse_add(VALID_ADD + extra)
        assert info.value.prefixes == (prefix,)

    def test_duplicate_detected_even_when_values_invalid(self) -> None:
        with pytest.raises(DuplicatePrefixError):
            parse_add(" n/$$ n/%% p/x e/y")

    def test_all_duplicates_reported_together(self) -> None:
        with pytest.raises(DuplicatePrefixError) as info:
            parse_add(VALID_ADD + " n/Bob p/12345")
        assert info.value.prefixes == (PREFIX_NAME, PREFIX_PHONE)
        assert str(info.value).endswith("n/ p/")

    def test_empty_name_is_format_error_not_missing(self) -> None:
        with pytest.raises(InvalidFieldFormatError) as info:
            parse_add(" n/ p/123 e/a@b.com")
        assert info.value.field == "name"
        assert info.value.value == ""

    @pytest.mark.parametrize("args, field", [
        (" n/Al!ce p/98765432 e/alice@example.com", "name"),
        (" n/Alice p/98a e/alice@example.com", "phone"),
        (" n/Alice p/98765432 e/alice", "email"),
        (VALID_ADD + " t/ok t/", "tag"),
        (" n/Al² p/98765432 e/alice@example.com", "name"),
        (" n/Alice p/١٢٣ e/alice@example.com", "phone"),
    ])
    def test_invalid_field_propagates_unwrapped(self, args: str, field: str) -> None:
        with pytest.raises(InvalidFieldFormatError) as info:
            parse_add(args)
        assert info.value.field == field

    def test_first_invalid_field_wins(self) -> None:
        with pytest.raises(InvalidFieldFormatError) as info:
            parse_add(" n/Al!ce p/98a e/alice")
        assert info.value.field == "name"


# ---------------------------------------------------------------------------
# delete
# ---------------------------------------------------------------------------


class TestParseDelete:
    def test_valid_index(self) -> None:
        assert parse_delete(" 1") == DeleteCommand(Index(1))

    @pytest.mark.parametrize("args", ["", " 0", " a", " 1 2", " -3", " 1 n/Alice"])
    def test_invalid_index(self, args: str) -> None:
        with pytest.raises(InvalidIndexError) as info:
            parse_delete(args)
        assert DeleteCommand.MESSAGE_USAGE in str(info.value)


# ---------------------------------------------------------------------------
# edit
# ---------------------------------------------------------------------------


class TestParseEdit:
    def test_single_field(self) -> None:
        command = parse_edit(" 1 p/91234567")
        assert command == EditCommand(Index(1), EditContactDescriptor(phone=Phone("91234567")))

    def test_all_fields(self) -> None:
        command = parse_edit(" 2 n/Bob p/123 e/bob@example.com note/hi t/a t/b")
        d = command.descriptor
        assert command.index == Index(2)
        assert d.name == Name("Bob")
        assert d.phone == Phone("123")
        assert d.email == Email("bob@example.com")
        assert d.note == Note("hi")
        assert d.tags == frozenset({Tag("a"), Tag("b")})

    def test_empty_tag_prefix_clears_tags(self) -> None:
        command = parse_edit(" 1 t/")
        assert command.descriptor.tags == frozenset()

    def test_empty_note_sets_empty_note(self) -> None:
        command = parse_edit(" 1 note/")
        assert command.descriptor.note == Note("")

    def test_no_fields(self) -> None:
        with pytest.raises(ParseError) as info:
            parse_edit(" 1")
        assert info.value.message == EditCommand.MESSAGE_NOT_EDITED

    @pytest.mark.parametrize("args", [" n/Bob", " 0 n/Bob", " -1 n/Bob", " 1 some text n/Bob"])
    def test_invalid_preamble(self, args: str) -> None:
        with pytest.raises(InvalidIndexError):
            parse_edit(args)

    def test_duplicate_prefix(self) -> None:
        with pytest.raises(DuplicatePrefixError):
            parse_edit(" 1 p/123 p/456")

    def test_invalid_value(self) -> None:
        with pytest.raises(InvalidFieldFormatError) as info:
            parse_edit(" 1 e/not-an-email")
        assert info.value.field == "email"

    def test_empty_tag_among_others_is_invalid(self) -> None:
        with pytest.raises(InvalidFieldFormatError):
            parse_edit(" 1 t/a t/")


# ---------------------------------------------------------------------------
# find
# ---------------------------------------------------------------------------


class TestParseFind:
    def test_name_keywords(self) -> None:
        command = parse_find(" n/alice  bob ")
        assert command == FindCommand(ContactMatchesPredicate(name_keywords=("alice", "bob")))

    def test_tags_are_sorted(self) -> None:
        command = parse_find(" t/zeta t/alpha")
        assert command.predicate.tags == ("alpha", "zeta")

    def test_keywords_and_tags(self) -> None:
        command = parse_find(" n/alice t/friends")
        assert command.predicate == ContactMatchesPredicate(("alice",), ("friends",))

    def test_non_empty_preamble_without_prefixes(self) -> None:
        with pytest.raises(PreambleNotEmptyError) as info:
            parse_find(" alice bob")
        assert FindCommand.MESSAGE_USAGE in str(info.value)

    def test_no_arguments(self) -> None:
        with pytest.raises(MissingRequiredFieldError):
            parse_find("   ")

    def test_empty_keywords(self) -> None:
        with pytest.raises(InvalidFieldFormatError):
            parse_find(" n/  ")

    def test_duplicate_name_prefix(self) -> None:
        with pytest.raises(DuplicatePrefixError):
            parse_find(" n/alice n/bob")


# ---------------------------------------------------------------------------
# argument-less commands
# ---------------------------------------------------------------------------


class TestArgumentlessParsers:
    @pytest.mark.parametrize("parser, expected", [
        (parse_list, ListCommand()),
        (parse_clear, ClearCommand()),
        (parse_help, HelpCommand()),
        (parse_exit, ExitCommand()),
    ])
    def test_trailing_text_ignored(self, parser, expected) -> None:
        assert parser("") == expected
        assert parser(" anything n/at all") == expected


# ---------------------------------------------------------------------------
# Round-trip through field text
# ---------------------------------------------------------------------------


class TestFieldRoundTrip:
    def test_reparsing_contact_fields_gives_equal_contact(self, benson: Contact) -> None:
        tags = " ".join(f"t/{t}" for t in benson.tags)
        args = (
            f" n/{benson.name} p/{benson.phone} e/{benson.email} "
            f"note/{benson.note} {tags}"
        )
        reparsed = parse_add(args).contact
        assert reparsed.has_same_fields(benson)
