"""Intermediate representation dataclasses for segmented documents.

WHY: Markdown arrives as one flat string. The playback engine needs
individual words with display metadata, the segmenter needs a per-paragraph
intermediate form, and the outline export needs the heading structure.
The IR gives each stage a single, well-typed contract so normalization,
tokenization, and playback stay decoupled.

HOW: Five dataclasses:
  WordRecord      — one displayable word with focus point and timing flags
  ParagraphResult — raw tokens of one paragraph plus attributed links/keywords
  HeadingEntry    — one markdown heading (level, title, source offset)
  NormalizedText  — plain text plus cross-references and headings
  CursorOffset    — a line/column hint used to pick the starting word

RULES:
- WordRecord is immutable value data; the engine never mutates one
- focus_point is a valid index into text, or 0 when len(text) <= 1
- ParagraphResult is consumed to build WordRecords and then discarded
- HeadingEntry offsets refer to the original markdown, before stripping
- CursorOffset line and column are 0-based
"""

from __future__ import annotations

from dataclasses import dataclass, field

from rsvp_reader.config import MAX_FOCUS_INDEX, TERMINAL_PUNCTUATION


@dataclass(frozen=True)
class WordRecord:
    """A single displayable unit of the reading stream.

    RULES:
    - text: non-empty token as produced by the tokenizer
    - focus_point: optimal recognition point, see focus_point_for()
    - is_cross_reference: text equals a [[link]] target of its paragraph
    - is_keyword: text equals a document keyword attributed to its paragraph
    - is_punctuation_terminated: last character is in TERMINAL_PUNCTUATION
    - ends_paragraph: True for the last word of each paragraph
    """

    text: str
    focus_point: int
    is_cross_reference: bool = False
    is_keyword: bool = False
    is_punctuation_terminated: bool = False
    ends_paragraph: bool = False


@dataclass
class ParagraphResult:
    """Tokens of one paragraph and the links/keywords found in it."""

    words: list[str] = field(default_factory=list)
    cross_references: list[str] = field(default_factory=list)
    keywords: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class HeadingEntry:
    level: int
    title: str
    source_offset: int


@dataclass
class NormalizedText:
    """Output of the markup normalizer.

    RULES:
    - cross_references: [[link]] targets in first-seen order, no duplicates
    - headings: ordered by source offset
    """

    plain_text: str
    cross_references: list[str] = field(default_factory=list)
    headings: list[HeadingEntry] = field(default_factory=list)


@dataclass(frozen=True)
class CursorOffset:
    line: int
    column: int


def focus_point_for(text: str) -> int:
    """Return the optimal recognition point for a word.

    Roughly the first third of the word, capped at MAX_FOCUS_INDEX so
    long words do not push the fixation too far right.
    """
    if len(text) <= 1:
        return 0
    return min(len(text) // 3, MAX_FOCUS_INDEX)


def is_punctuation_terminated(text: str) -> bool:
    return bool(text) and text[-1] in TERMINAL_PUNCTUATION
