"""Pydantic model for the reader settings snapshot.

WHY: The engine's timing and tokenizer choice depend on a handful of user
settings. Hosts hand these in as one explicit snapshot instead of the
engine reading global state, and the snapshot must reject nonsense such as
a zero pause multiplier before it ever reaches the timing rules.

HOW: ReaderSettings is a frozen pydantic model with Field constraints.
load_settings() builds one from the environment defaults in config.py,
with keyword overrides taking precedence (used by the CLI flags).

RULES:
- pause_multiplier must be > 0
- default_speed is bounded by MIN_SPEED_WPM..MAX_SPEED_WPM
- Instances are immutable; use model_copy(update=...) to derive variants
- Invalid values raise pydantic.ValidationError (a ValueError subclass)
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from rsvp_reader.config import (
    DEFAULT_INTELLIGENT_PAUSE,
    DEFAULT_PAUSE_MULTIPLIER,
    DEFAULT_SPEED_WPM,
    DEFAULT_USE_DICTIONARY_TOKENIZER,
    MAX_SPEED_WPM,
    MIN_SPEED_WPM,
)


class ReaderSettings(BaseModel):
    """Settings snapshot consumed by the engine and playback controller.

    RULES:
    - intelligent_pause gates the punctuation multiplier only; paragraph
      and long-word multipliers always apply
    - use_dictionary_tokenizer takes effect at the next document load
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    default_speed: int = Field(
        default=400,
        ge=MIN_SPEED_WPM,
        le=MAX_SPEED_WPM,
        description="Initial playback speed in words per minute.",
    )
    intelligent_pause: bool = Field(
        default=True,
        description="Hold punctuation-terminated words longer.",
    )
    pause_multiplier: float = Field(
        default=1.5,
        gt=0,
        description="Duration multiplier for punctuation-terminated words.",
    )
    use_dictionary_tokenizer: bool = Field(
        default=True,
        description="Route text containing CJK ideographs to the dictionary tokenizer.",
    )


def load_settings(**overrides: Any) -> ReaderSettings:
    """Build a ReaderSettings from environment defaults plus overrides.

    Overrides whose value is None are ignored, so argparse namespaces
    with unset optional flags can be passed straight through.
    """
    values: dict[str, Any] = {
        "default_speed": DEFAULT_SPEED_WPM,
        "intelligent_pause": DEFAULT_INTELLIGENT_PAUSE,
        "pause_multiplier": DEFAULT_PAUSE_MULTIPLIER,
        "use_dictionary_tokenizer": DEFAULT_USE_DICTIONARY_TOKENIZER,
    }
    for key, value in overrides.items():
        if value is not None:
            values[key] = value
    return ReaderSettings(**values)
