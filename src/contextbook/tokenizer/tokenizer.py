"""Argument tokenizer: splits a raw argument string by prefix.

The tokenizer is a pure function over a list of ``(prefix, start)``
matches.  Every occurrence of every recognised prefix is located, the
matches are sorted by position, and the string is sliced between
consecutive matches:

    " n/Alice p/123 t/a t/b"
       ^       ^     ^   ^
       n/      p/    t/  t/

A prefix only matches at the start of the string or directly after
whitespace, so ``e/`` is never split out of ``note/`` and ``t/`` is never
split out of a word such as ``at/``.

Text before the first match is the preamble.  Values and the preamble are
trimmed; empty values are kept so that validators, not the tokenizer,
decide whether emptiness is acceptable.  The tokenizer never raises.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Final

from contextbook.syntax.prefixes import Prefix

_PREFIX_BOUNDARY: Final[str] = r"(?:(?<=\s)|^)"


@dataclass(frozen=True, slots=True)
class PrefixPosition:
    """Where a prefix occurs in the argument string."""

    prefix: Prefix
    start: int

    @property
    def value_start(self) -> int:
        """Return the offset of the first character after the prefix marker."""
        return self.start + len(self.prefix.marker)


@dataclass
class ArgumentMultimap:
    """Prefix → values mapping produced for a single parse call.

    Parameters
    ----------
    preamble:
        Trimmed text preceding the first recognised prefix.
    values:
        Ordered raw values for each prefix that appeared at least once.
    """

    preamble: str = ""
    values: dict[Prefix, list[str]] = field(default_factory=dict)

    def put(self, prefix: Prefix, value: str) -> None:
        """Append ``value`` to the sequence recorded for ``prefix``."""
        self.values.setdefault(prefix, []).append(value)

    def get_value(self, prefix: Prefix) -> str | None:
        """Return the last value given for ``prefix``, or ``None`` if absent."""
        found = self.values.get(prefix)
        return found[-1] if found else None

    def get_all_values(self, prefix: Prefix) -> list[str]:
        """Return a copy of every value given for ``prefix`` in input order."""
        return list(self.values.get(prefix, ()))

    def is_present(self, prefix: Prefix) -> bool:
        """Return True if ``prefix`` appeared, even with an empty value."""
        return prefix in self.values

    def duplicated(self, *prefixes: Prefix) -> list[Prefix]:
        """Return those of ``prefixes`` that were supplied more than once."""
        return [p for p in prefixes if len(self.values.get(p, ())) > 1]


class ArgumentTokenizer:
    """Tokenizes argument strings against a fixed set of prefixes.

    Parameters
    ----------
    prefixes:
        The prefixes to recognise.  Any other ``x/`` text is left inside
        the value or preamble it falls in.
    """

    __slots__ = ("_prefixes", "_patterns")

    def __init__(self, *prefixes: Prefix) -> None:
        self._prefixes: tuple[Prefix, ...] = prefixes
        self._patterns: tuple[tuple[Prefix, re.Pattern[str]], ...] = tuple(
            (p, re.compile(_PREFIX_BOUNDARY + re.escape(p.marker))) for p in prefixes
        )

    def tokenize(self, args: str) -> ArgumentMultimap:
        """Split ``args`` into a preamble and per-prefix values."""
        positions = self._find_positions(args)
        multimap = ArgumentMultimap()

        first = positions[0].start if positions else len(args)
        multimap.preamble = args[:first].strip()

        for i, current in enumerate(positions):
            end = positions[i + 1].start if i + 1 < len(positions) else len(args)
            multimap.put(current.prefix, args[current.value_start:end].strip())
        return multimap

    def _find_positions(self, args: str) -> list[PrefixPosition]:
        positions = [
            PrefixPosition(prefix=prefix, start=match.start())
            for prefix, pattern in self._patterns
            for match in pattern.finditer(args)
        ]
        positions.sort(key=lambda pos: pos.start)
        return positions


def tokenize(args: str, *prefixes: Prefix) -> ArgumentMultimap:
    """Tokenize ``args`` against ``prefixes`` and return the multimap.

    Example
    -------
    ::

        from contextbook.syntax import PREFIX_NAME, PREFIX_TAG
        from contextbook.tokenizer import tokenize

        multimap = tokenize(" n/Alice t/friend t/colleague", PREFIX_NAME, PREFIX_TAG)
        multimap.get_all_values(PREFIX_TAG)  # ['friend', 'colleague']
    """
    return ArgumentTokenizer(*prefixes).tokenize(args)
