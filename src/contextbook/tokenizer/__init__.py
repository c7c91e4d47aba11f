"""contextbook tokenizer module.

Exports the ``ArgumentTokenizer`` class, the ``ArgumentMultimap`` it
produces, and the ``tokenize`` convenience function.
"""
from __future__ import annotations

from contextbook.tokenizer.tokenizer import (
    ArgumentMultimap,
    ArgumentTokenizer,
    PrefixPosition,
    tokenize,
)

__all__ = ["ArgumentTokenizer", "ArgumentMultimap", "PrefixPosition", "tokenize"]
