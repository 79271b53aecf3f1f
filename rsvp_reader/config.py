"""Configuration constants, timing rules, and .env loading.

WHY: Centralizes all configurable values so they are easy to find,
update, and override. Speed bounds, timing multipliers, and punctuation
sets are plain data structures — not buried in logic — so both humans
and coding agents can modify them confidently.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level values and frozensets. Reader defaults can be overridden
through RSVP_* environment variables and are turned into a validated
settings object by rsvp_reader.settings.load_settings().

RULES:
- Speeds are words per minute; durations are float milliseconds
- Speed bounds (200..1200, step 50) apply to the host controller only;
  the engine accepts any positive speed
- Boolean env values are "true"/"false" (case-insensitive)
- All defaults can be overridden via environment variables
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() == "true"


# ---------------------------------------------------------------------------
# Reader defaults (overridable via environment)
# ---------------------------------------------------------------------------

DEFAULT_SPEED_WPM = int(os.getenv("RSVP_DEFAULT_SPEED", "400"))
DEFAULT_INTELLIGENT_PAUSE = _env_bool("RSVP_INTELLIGENT_PAUSE", "true")
DEFAULT_PAUSE_MULTIPLIER = float(os.getenv("RSVP_PAUSE_MULTIPLIER", "1.5"))
DEFAULT_USE_DICTIONARY_TOKENIZER = _env_bool("RSVP_USE_DICTIONARY_TOKENIZER", "true")

# ---------------------------------------------------------------------------
# Speed control (host side)
# ---------------------------------------------------------------------------

MIN_SPEED_WPM = 200
MAX_SPEED_WPM = 1200
SPEED_STEP_WPM = 50

# ---------------------------------------------------------------------------
# Timing rules
# ---------------------------------------------------------------------------

MS_PER_MINUTE = 60_000.0

PARAGRAPH_END_MULTIPLIER = 1.5
"""Applied to the last word of every paragraph."""

LONG_WORD_MULTIPLIER = 1.2
LONG_WORD_THRESHOLD = 8
"""Words strictly longer than this many characters get LONG_WORD_MULTIPLIER."""

MAX_FOCUS_INDEX = 2
"""Focus point is a third into the word, never further right than this index."""

# ---------------------------------------------------------------------------
# Punctuation sets
# ---------------------------------------------------------------------------

TERMINAL_PUNCTUATION: frozenset[str] = frozenset({
    ".", ",", "!", "?", ";", ":",
    "。", "，", "！", "？", "；", "：", "、",
})
"""A word ending in one of these is punctuation-terminated (intelligent pause)."""

DEFAULT_KEYWORD_LIMIT = 10
