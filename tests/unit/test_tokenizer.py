"""Unit tests for contextbook.tokenizer — splitting argument strings by prefix."""
from __future__ import annotations

import pytest

from contextbook.syntax.prefixes import (
    ALL_PREFIXES,
    PREFIX_EMAIL,
    PREFIX_NAME,
    PREFIX_NOTE,
    PREFIX_PHONE,
    PREFIX_TAG,
    Prefix,
)
from contextbook.tokenizer.tokenizer import ArgumentMultimap, ArgumentTokenizer, tokenize

_UNKNOWN = Prefix("x/", "unknown")


# ---------------------------------------------------------------------------
# Empty and preamble-only inputs
# ---------------------------------------------------------------------------


class TestEmptyInputs:
    def test_empty_string_has_empty_preamble(self) -> None:
        multimap = tokenize("", *ALL_PREFIXES)
        assert multimap.preamble == ""
        assert multimap.values == {}

    def test_whitespace_only_has_empty_preamble(self) -> None:
        multimap = tokenize("   \t ", *ALL_PREFIXES)
        assert multimap.preamble == ""

    def test_no_prefixes_declared_puts_everything_in_preamble(self) -> None:
        multimap = tokenize("  n/Alice p/123 ")
        assert multimap.preamble == "n/Alice p/123"
        assert multimap.get_value(PREFIX_NAME) is None

    def test_preamble_only_is_trimmed(self) -> None:
        multimap = tokenize("  some preamble  ", PREFIX_NAME)
        assert multimap.preamble == "some preamble"


# ---------------------------------------------------------------------------
# Prefix splitting
# ---------------------------------------------------------------------------


class TestPrefixSplitting:
    def test_single_prefix_value(self) -> None:
        multimap = tokenize(" n/Alice", PREFIX_NAME)
        assert multimap.get_value(PREFIX_NAME) == "Alice"

    def test_prefix_at_start_of_string_matches(self) -> None:
        multimap = tokenize("n/Alice", PREFIX_NAME)
        assert multimap.preamble == ""
        assert multimap.get_value(PREFIX_NAME) == "Alice"

    def test_values_are_trimmed(self) -> None:
        multimap = tokenize(" n/  Alice Tan   p/ 123 ", PREFIX_NAME, PREFIX_PHONE)
        assert multimap.get_value(PREFIX_NAME) == "Alice Tan"
        assert multimap.get_value(PREFIX_PHONE) == "123"

    def test_preamble_before_first_prefix(self) -> None:
        multimap = tokenize(" 3 n/Alice", PREFIX_NAME)
        assert multimap.preamble == "3"
        assert multimap.get_value(PREFIX_NAME) == "Alice"

    def test_all_prefixes_in_any_order(self) -> None:
        multimap = tokenize(
            " t/friend e/a@b.com note/hi there p/123 n/Al", *ALL_PREFIXES
        )
        assert multimap.get_value(PREFIX_NAME) == "Al"
        assert multimap.get_value(PREFIX_PHONE) == "123"
        assert multimap.get_value(PREFIX_EMAIL) == "a@b.com"
        assert multimap.get_value(PREFIX_NOTE) == "hi there"
        assert multimap.get_all_values(PREFIX_TAG) == ["friend"]

    def test_prefix_not_matched_mid_word(self) -> None:
        multimap = tokenize(" n/Alice at/home", PREFIX_NAME, PREFIX_TAG)
        assert multimap.get_value(PREFIX_NAME) == "Alice at/home"
        assert not multimap.is_present(PREFIX_TAG)

    def test_short_prefix_not_split_out_of_note_prefix(self) -> None:
        multimap = tokenize(" note/hello", PREFIX_NOTE, PREFIX_EMAIL)
        assert multimap.get_value(PREFIX_NOTE) == "hello"
        assert not multimap.is_present(PREFIX_EMAIL)

    def test_unrecognised_prefix_stays_in_value(self) -> None:
        multimap = tokenize(" n/Alice x/extra p/123", PREFIX_NAME, PREFIX_PHONE)
        assert multimap.get_value(PREFIX_NAME) == "Alice x/extra"
        assert multimap.get_value(PREFIX_PHONE) == "123"

    def test_unrecognised_prefix_stays_in_preamble(self) -> None:
        multimap = tokenize(" x/extra n/Alice", PREFIX_NAME)
        assert multimap.preamble == "x/extra"

    def test_tab_counts_as_whitespace_boundary(self) -> None:
        multimap = tokenize("n/Alice\tp/123", PREFIX_NAME, PREFIX_PHONE)
        assert multimap.get_value(PREFIX_NAME) == "Alice"
        assert multimap.get_value(PREFIX_PHONE) == "123"


# ---------------------------------------------------------------------------
# Repeated and empty values
# ---------------------------------------------------------------------------


class TestRepeatedAndEmptyValues:
    def test_repeated_prefix_preserves_order(self) -> None:
        multimap = tokenize(" t/b t/a t/c", PREFIX_TAG)
        assert multimap.get_all_values(PREFIX_TAG) == ["b", "a", "c"]

    def test_get_value_returns_last_of_repeated(self) -> None:
        multimap = tokenize(" n/First n/Second", PREFIX_NAME)
        assert multimap.get_value(PREFIX_NAME) == "Second"

    def test_empty_value_is_retained(self) -> None:
        multimap = tokenize(" n/ p/123", PREFIX_NAME, PREFIX_PHONE)
        assert multimap.is_present(PREFIX_NAME)
        assert multimap.get_value(PREFIX_NAME) == ""

    def test_trailing_empty_value_is_retained(self) -> None:
        multimap = tokenize(" t/", PREFIX_TAG)
        assert multimap.get_all_values(PREFIX_TAG) == [""]

    def test_absent_prefix_has_no_values(self) -> None:
        multimap = tokenize(" n/Alice", PREFIX_NAME, PREFIX_TAG)
        assert multimap.get_all_values(PREFIX_TAG) == []
        assert multimap.get_value(PREFIX_TAG) is None

    def test_get_all_values_returns_copy(self) -> None:
        multimap = tokenize(" t/a", PREFIX_TAG)
        multimap.get_all_values(PREFIX_TAG).append("b")
        assert multimap.get_all_values(PREFIX_TAG) == ["a"]

    def test_duplicated_reports_only_repeated_prefixes(self) -> None:
        multimap = tokenize(" n/A n/B p/1 t/x t/y", PREFIX_NAME, PREFIX_PHONE, PREFIX_TAG)
        assert multimap.duplicated(PREFIX_NAME, PREFIX_PHONE) == [PREFIX_NAME]
        assert multimap.duplicated(PREFIX_PHONE) == []


# ---------------------------------------------------------------------------
# Purity
# ---------------------------------------------------------------------------


class TestPurity:
    def test_tokenizer_never_raises_on_garbage(self) -> None:
        result = tokenize("//// n/ n/ / t/ x/ ///", *ALL_PREFIXES, _UNKNOWN)
        assert isinstance(result, ArgumentMultimap)

    def test_same_input_gives_equal_multimaps(self) -> None:
        tokenizer = ArgumentTokenizer(*ALL_PREFIXES)
        args = " n/Alice p/123 t/a t/b"
        assert tokenizer.tokenize(args) == tokenizer.tokenize(args)

    @pytest.mark.parametrize("args", ["", " n/A", " 1 p/2 t/3 t/4"])
    def test_each_call_returns_fresh_multimap(self, args: str) -> None:
        first = tokenize(args, *ALL_PREFIXES)
        second = tokenize(args, *ALL_PREFIXES)
        assert first is not second
        assert first.values is not second.values
