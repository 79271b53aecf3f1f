"""Tokenizer registry and script-based routing.

WHY: The segmenter and keyword extractor need one call that picks the
right tokenizer for a block of text. Routing by script keeps plain
English on the cheap whitespace split and only sends blocks that
actually contain Chinese to the dictionary tokenizer.

HOW: TOKENIZERS maps string keys to tokenizer *classes*.
select_tokenizer() applies the routing rule and returns a shared instance;
tokenize() is the convenience wrapper used by the rest of the package.

RULES:
- A block goes to the dictionary tokenizer only when use_dictionary is
  True AND it contains at least one CJK Unified Ideograph (U+4E00..U+9FFF)
- Everything else uses the Latin whitespace tokenizer
- Tokenizers are stateless, so module-level instances are shared
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from rsvp_reader.tokenizers.cjk import DictionaryTokenizer
from rsvp_reader.tokenizers.latin import LatinTokenizer

if TYPE_CHECKING:
    from rsvp_reader.tokenizers.base import BaseTokenizer

TOKENIZERS: dict[str, type[BaseTokenizer]] = {
    "latin": LatinTokenizer,
    "dictionary": DictionaryTokenizer,
}

CJK_RE = re.compile(r"[\u4e00-\u9fff]")

_LATIN = LatinTokenizer()
_DICTIONARY = DictionaryTokenizer()


def contains_cjk(text: str) -> bool:
    return CJK_RE.search(text) is not None


def select_tokenizer(text: str, use_dictionary: bool = True) -> BaseTokenizer:
    """Pick the tokenizer for one block of text."""
    if use_dictionary and contains_cjk(text):
        return _DICTIONARY
    return _LATIN


def tokenize(text: str, use_dictionary: bool = True) -> list[str]:
    return select_tokenizer(text, use_dictionary).tokenize(text)


__all__ = [
    "TOKENIZERS",
    "DictionaryTokenizer",
    "LatinTokenizer",
    "contains_cjk",
    "select_tokenizer",
    "tokenize",
]
