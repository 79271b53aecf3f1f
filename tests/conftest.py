"""Shared test fixtures for the rsvp_reader test suite.

WHY: Engine, playback, formatter, and CLI tests all need the same small
document with known word indices and paragraph boundaries. Centralizing
it here keeps the expected values in one place.

HOW: SAMPLE_MARKDOWN is a four-paragraph note (two headings, two body
paragraphs, one wiki link). The fixtures provide the raw text, a loaded
engine, and the expected layout.

RULES:
- SAMPLE_MARKDOWN segments into 18 words
- Paragraph boundaries are (1, 6, 7, 17):
    0-1   Speed Reading
    2-6   Hello world. This is fine.
    7     Method
    8-17  Read the note and practice daily. Practice makes reading faster.
"""

import pytest

from rsvp_reader.core.engine import ReadingEngine
from rsvp_reader.settings import ReaderSettings

SAMPLE_MARKDOWN = (
    "# Speed Reading\n"
    "\n"
    "Hello world. This is fine.\n"
    "\n"
    "## Method\n"
    "\n"
    "Read [[Note A|the note]] and practice daily. Practice makes reading faster.\n"
)

SAMPLE_WORDS = [
    "Speed", "Reading",
    "Hello", "world.", "This", "is", "fine.",
    "Method",
    "Read", "the", "note", "and", "practice", "daily.",
    "Practice", "makes", "reading", "faster.",
]

SAMPLE_BOUNDARIES = (1, 6, 7, 17)


@pytest.fixture
def sample_markdown():
    return SAMPLE_MARKDOWN


@pytest.fixture
def sample_words():
    return list(SAMPLE_WORDS)


@pytest.fixture
def sample_boundaries():
    return SAMPLE_BOUNDARIES


@pytest.fixture
def default_settings():
    return ReaderSettings()


@pytest.fixture
def loaded_engine(default_settings):
    """ReadingEngine with SAMPLE_MARKDOWN loaded, cursor at word 0."""
    engine = ReadingEngine(default_settings)
    engine.load(SAMPLE_MARKDOWN)
    return engine


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "notes.md"
    path.write_text(SAMPLE_MARKDOWN, encoding="utf-8")
    return path
