"""Reading cursor and timing engine.

WHY: A speed-reading display needs three things from a document: the
word to show now, how long to show it, and a way to move around (advance,
seek, jump by paragraph). Keeping these in one synchronous object lets
any host — terminal, GUI, web — drive playback on its own timer.

HOW: load() runs the segmenter and replaces the whole document index
(words, paragraph boundaries, cursor). Navigation methods only move the
cursor, clamping into range. duration_ms() applies the timing rules to
the current word via the pure word_duration_ms() function, with the
settings snapshot passed in explicitly or taken from the engine.

RULES:
- Every load() builds a fresh index; indices from an earlier load are
  never reused
- The cursor is always within [0, total-1], or 0 for an empty document
- Out-of-range seeks clamp silently
- next_word() returns None at the end of the document (not an error)
- Duration = 60000 / wpm, × pause_multiplier if intelligent pause and
  punctuation-terminated, × 1.5 at paragraph end, × 1.2 for words longer
  than 8 characters — in that order, no upper bound
- Non-positive speed raises InvalidSpeedError immediately
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional

from rsvp_reader.config import (
    LONG_WORD_MULTIPLIER,
    LONG_WORD_THRESHOLD,
    MS_PER_MINUTE,
    PARAGRAPH_END_MULTIPLIER,
)
from rsvp_reader.core.ir import CursorOffset, HeadingEntry, WordRecord
from rsvp_reader.core.segmenter import DocumentSegmenter
from rsvp_reader.settings import ReaderSettings

logger = logging.getLogger(__name__)


class InvalidSpeedError(ValueError):
    """Raised when a duration is requested for a speed <= 0 wpm."""


def base_duration_ms(speed_wpm: float) -> float:
    if speed_wpm <= 0:
        raise InvalidSpeedError(
            "Reading speed must be positive, got {} wpm".format(speed_wpm)
        )
    return MS_PER_MINUTE / speed_wpm


def word_duration_ms(
    word: Optional[WordRecord],
    speed_wpm: float,
    settings: ReaderSettings,
) -> float:
    """Display duration for one word.

    Args:
        word: The word to time, or None for an empty document.
        speed_wpm: Base speed in words per minute (must be > 0).
        settings: Snapshot providing intelligent_pause / pause_multiplier.

    Returns:
        Duration in milliseconds; the unmodified base duration when word
        is None.

    Raises:
        InvalidSpeedError: If speed_wpm <= 0.
    """
    duration = base_duration_ms(speed_wpm)
    if word is None:
        return duration

    if settings.intelligent_pause and word.is_punctuation_terminated:
        duration *= settings.pause_multiplier
    if word.ends_paragraph:
        duration *= PARAGRAPH_END_MULTIPLIER
    if len(word.text) > LONG_WORD_THRESHOLD:
        duration *= LONG_WORD_MULTIPLIER
    return duration


class ReadingEngine:
    """Owns the document index and the reading cursor."""

    def __init__(self, settings: Optional[ReaderSettings] = None) -> None:
        self.settings = settings if settings is not None else ReaderSettings()
        self._segmenter = DocumentSegmenter(self.settings.use_dictionary_tokenizer)
        self._words: List[WordRecord] = []
        self._boundaries: List[int] = []
        self._cursor = 0

    def update_settings(self, settings: ReaderSettings) -> None:
        """Replace the settings snapshot; tokenizer changes apply on next load."""
        self.settings = settings
        self._segmenter.use_dictionary_tokenizer = settings.use_dictionary_tokenizer

    # -- Build ---------------------------------------------------------------

    def load(self, markdown: str, start_offset: Optional[CursorOffset] = None) -> None:
        """Segment a document and reset the cursor.

        Args:
            markdown: Raw document text.
            start_offset: Optional source line/column; the cursor starts at
                the approximate word at that position.
        """
        paragraphs = self._segmenter.segment(markdown)
        words, boundaries = self._segmenter.build_words(paragraphs)
        self._words = words
        self._boundaries = boundaries
        self._cursor = 0

        start = self._segmenter.approximate_word_position(markdown, start_offset, len(words))
        self.set_position(start)
        logger.info(
            "Loaded document: %d words, %d paragraphs, starting at word %d",
            len(words), len(boundaries), self._cursor,
        )

    # -- Queries -------------------------------------------------------------

    @property
    def words(self) -> tuple[WordRecord, ...]:
        return tuple(self._words)

    @property
    def paragraph_boundaries(self) -> tuple[int, ...]:
        return tuple(self._boundaries)

    @property
    def headings(self) -> List[HeadingEntry]:
        return list(self._segmenter.last_headings)

    @property
    def position(self) -> int:
        return self._cursor

    def total_words(self) -> int:
        return len(self._words)

    def current(self) -> Optional[WordRecord]:
        if 0 <= self._cursor < len(self._words):
            return self._words[self._cursor]
        return None

    def progress(self) -> float:
        total = len(self._words)
        if total <= 1:
            return 0.0
        return self._cursor / (total - 1)

    def duration_ms(
        self,
        speed_wpm: float,
        settings: Optional[ReaderSettings] = None,
    ) -> float:
        """Display duration of the current word at ``speed_wpm``."""
        return word_duration_ms(
            self.current(),
            speed_wpm,
            settings if settings is not None else self.settings,
        )

    # -- Navigation ----------------------------------------------------------

    def next_word(self) -> Optional[WordRecord]:
        """Advance one word; None when already at the last word."""
        if self._cursor >= len(self._words) - 1:
            return None
        self._cursor += 1
        return self._words[self._cursor]

    def set_position(self, index: int) -> None:
        self._cursor = max(0, min(int(index), len(self._words) - 1))

    def set_progress(self, fraction: float) -> None:
        fraction = max(0.0, min(float(fraction), 1.0))
        self.set_position(math.floor(fraction * len(self._words)))

    def jump_to_next_paragraph(self) -> None:
        for boundary in self._boundaries:
            if boundary > self._cursor:
                self.set_position(boundary + 1)
                return
        self.set_position(len(self._words) - 1)

    def jump_to_previous_paragraph(self) -> None:
        target = 0
        for boundary in self._boundaries:
            if boundary >= self._cursor:
                break
            target = boundary
        self.set_position(target)

    def jump_paragraph(self, forward: bool) -> None:
        if forward:
            self.jump_to_next_paragraph()
        else:
            self.jump_to_previous_paragraph()
