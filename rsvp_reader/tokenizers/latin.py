"""Whitespace tokenizer for space-delimited scripts."""

from __future__ import annotations

from rsvp_reader.tokenizers.base import BaseTokenizer


class LatinTokenizer(BaseTokenizer):
    """Split on runs of whitespace; punctuation stays attached to its word."""

    @property
    def name(self) -> str:
        return "Latin whitespace"

    def tokenize(self, text: str) -> list[str]:
        return text.split()
