"""Abstract base tokenizer.

WHY: Latin text splits on whitespace, CJK text has no spaces at all and
needs a segmenter. Everything downstream (keywords, segmenter, engine)
only needs "text in, ordered tokens out", so tokenizers share one
interface and can be swapped without touching the rest of the pipeline.

HOW: BaseTokenizer is an ABC with a ``name`` property and a
``tokenize()`` method.

RULES:
- tokenize() returns tokens in reading order
- Every returned token is non-empty
- Concatenating the tokens reproduces every non-whitespace input
  character exactly once, in order

To add a new tokenizer:
1. Create a new file in tokenizers/
2. Subclass BaseTokenizer
3. Implement tokenize() and name
4. Register in TOKENIZERS dict in tokenizers/__init__.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseTokenizer(ABC):
    """Abstract base for all tokenizers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable tokenizer name, e.g. 'Latin whitespace'."""

    @abstractmethod
    def tokenize(self, text: str) -> list[str]:
        """Split text into an ordered list of non-empty tokens."""
