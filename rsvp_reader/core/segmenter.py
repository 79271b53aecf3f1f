"""Document segmenter: markdown → paragraphs → word records.

WHY: Playback needs a flat word stream, but paragraph structure drives
both navigation (jump to next paragraph) and timing (longer hold on a
paragraph's last word). Keywords and cross-references must also be
attributed so the display can highlight them.

HOW: segment() runs the normalizer once, extracts document-global
keywords once from the whole plain text, splits the plain text on blank
lines, tokenizes each paragraph on its own (so routing to the CJK
tokenizer is decided per paragraph), and attributes cross-references and
keywords to every paragraph whose text contains them. build_words() then
flattens the paragraphs into WordRecords with focus points and
paragraph-end flags.

RULES:
- Paragraphs are separated by one or more blank lines; paragraphs that
  are empty after trimming are dropped
- Attribution is literal substring containment in the paragraph's plain
  text, so a keyword can be attributed to a paragraph where it only occurs
  inside a longer word; this is accepted
- A word is flagged as keyword / cross-reference only when its text
  equals one of its paragraph's attributed entries
- Word-position approximation re-segments the text before the offset and
  counts words; it drifts when markup shifts offsets and is only used
  once at load time
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Tuple

from rsvp_reader.core.ir import (
    CursorOffset,
    HeadingEntry,
    ParagraphResult,
    WordRecord,
    focus_point_for,
    is_punctuation_terminated,
)
from rsvp_reader.core.keywords import extract_keywords
from rsvp_reader.core.markup import normalize, parse_headings
from rsvp_reader.tokenizers import tokenize

logger = logging.getLogger(__name__)

PARAGRAPH_SPLIT_RE = re.compile(r"\n\s*\n")


def _text_before_offset(markdown: str, offset: CursorOffset) -> str:
    """Return the document text that precedes a line/column position.

    Line and column are clamped into the document, so any offset yields
    a prefix of the text.
    """
    lines = markdown.split("\n")
    line = max(0, min(offset.line, len(lines) - 1))
    column = max(0, offset.column)
    prefix = "\n".join(lines[:line])
    if line > 0:
        prefix += "\n"
    return prefix + lines[line][:column]


class DocumentSegmenter:
    """Turns markdown into paragraph results and flattened word records."""

    def __init__(self, use_dictionary_tokenizer: bool = True) -> None:
        self.use_dictionary_tokenizer = use_dictionary_tokenizer
        self.last_headings: List[HeadingEntry] = []

    def segment(self, markdown: str) -> List[ParagraphResult]:
        """Split a markdown document into tokenized paragraphs.

        Args:
            markdown: Raw document text.

        Returns:
            One ParagraphResult per non-empty paragraph, in document order.
        """
        normalized = normalize(markdown)
        self.last_headings = normalized.headings

        keywords = extract_keywords(normalized.plain_text, self.use_dictionary_tokenizer)

        paragraphs: List[ParagraphResult] = []
        for paragraph_text in PARAGRAPH_SPLIT_RE.split(normalized.plain_text):
            if not paragraph_text.strip():
                continue
            paragraphs.append(ParagraphResult(
                words=tokenize(paragraph_text, self.use_dictionary_tokenizer),
                cross_references=[
                    ref for ref in normalized.cross_references if ref in paragraph_text
                ],
                keywords=[kw for kw in keywords if kw in paragraph_text],
            ))

        logger.debug(
            "Segmented document into %d paragraphs (%d keywords, %d cross-references)",
            len(paragraphs), len(keywords), len(normalized.cross_references),
        )
        return paragraphs

    def headings(self, markdown: str) -> List[HeadingEntry]:
        return parse_headings(markdown)

    @staticmethod
    def build_words(
        paragraphs: List[ParagraphResult],
    ) -> Tuple[List[WordRecord], List[int]]:
        """Flatten paragraphs into word records and paragraph boundaries.

        Returns:
            (words, boundaries) where boundaries holds the index of the
            last word of every paragraph that produced at least one word,
            strictly increasing.
        """
        words: List[WordRecord] = []
        boundaries: List[int] = []

        for paragraph in paragraphs:
            if not paragraph.words:
                continue
            last = len(paragraph.words) - 1
            for i, token in enumerate(paragraph.words):
                words.append(WordRecord(
                    text=token,
                    focus_point=focus_point_for(token),
                    is_cross_reference=token in paragraph.cross_references,
                    is_keyword=token in paragraph.keywords,
                    is_punctuation_terminated=is_punctuation_terminated(token),
                    ends_paragraph=i == last,
                ))
            boundaries.append(len(words) - 1)

        return words, boundaries

    def word_count(self, markdown: str) -> int:
        return sum(len(p.words) for p in self.segment(markdown))

    def approximate_word_position(
        self,
        markdown: str,
        offset: Optional[CursorOffset],
        total_words: int,
    ) -> int:
        """Estimate the index of the word at a line/column offset.

        Args:
            markdown: The full document text.
            offset: Cursor position in the source, or None.
            total_words: Number of words in the full document.

        Returns:
            A word index in [0, total_words - 1], or 0 for an empty document.
        """
        if offset is None or total_words <= 0:
            return 0
        before = _text_before_offset(markdown, offset)
        # Re-segmenting the prefix overwrites last_headings; keep the full document's.
        headings = self.last_headings
        count = self.word_count(before)
        self.last_headings = headings
        return max(0, min(count, total_words - 1))
