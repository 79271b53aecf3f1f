"""Word track formatter — the full playback timeline as JSON.

WHY: Other players (a web page, a video renderer, a test harness) want
the complete word-by-word timeline without reimplementing the timing
rules. The track lists every word with its focus point, flags, start
offset, and duration at a chosen speed.

HOW: Walk engine.words in order, computing each duration with the same
pure word_duration_ms() the engine uses during playback and accumulating
start_ms. The resulting dict is validated against
schemas/word_track.schema.json before serialization.

RULES:
- Durations use the formatter's speed and settings, not the engine cursor
- start_ms of word 0 is 0; each next start is the previous start + duration
- total_duration_ms is the sum of all durations
- Output suffix: "-word-track.json"; media type "application/json"
- Non-ASCII text is kept as-is (ensure_ascii=False)
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional

import jsonschema

from rsvp_reader.config import DEFAULT_SPEED_WPM
from rsvp_reader.core.engine import ReadingEngine, base_duration_ms, word_duration_ms
from rsvp_reader.formatters.base import BaseFormatter, FormatterOutput
from rsvp_reader.settings import ReaderSettings

_SCHEMA_PATH = Path(__file__).resolve().parent.parent / "schemas" / "word_track.schema.json"

_CACHED_SCHEMA: Optional[dict] = None


def _get_schema() -> dict:
    """Load and cache the word track JSON schema."""
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(_SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


class WordTrackFormatter(BaseFormatter):
    """Formatter producing a schema-validated JSON word timeline."""

    def __init__(
        self,
        speed_wpm: float = DEFAULT_SPEED_WPM,
        settings: Optional[ReaderSettings] = None,
    ) -> None:
        base_duration_ms(speed_wpm)  # fail fast on a non-positive speed
        self.speed_wpm = speed_wpm
        self.settings = settings

    @property
    def name(self) -> str:
        return "Word Track JSON"

    def format(self, engine: ReadingEngine) -> List[FormatterOutput]:
        """Build the track for the engine's loaded document.

        Raises:
            jsonschema.ValidationError: If the generated JSON does not
                conform to the word track schema.
        """
        settings = self.settings if self.settings is not None else engine.settings

        entries: List[dict[str, Any]] = []
        start_ms = 0.0
        for index, word in enumerate(engine.words):
            duration = word_duration_ms(word, self.speed_wpm, settings)
            entries.append({
                "index": index,
                "text": word.text,
                "focus_point": word.focus_point,
                "start_ms": start_ms,
                "duration_ms": duration,
                "is_cross_reference": word.is_cross_reference,
                "is_keyword": word.is_keyword,
                "is_punctuation_terminated": word.is_punctuation_terminated,
                "ends_paragraph": word.ends_paragraph,
            })
            start_ms += duration

        output_dict: dict[str, Any] = {
            "speed_wpm": self.speed_wpm,
            "total_words": len(entries),
            "total_duration_ms": start_ms,
            "paragraph_boundaries": list(engine.paragraph_boundaries),
            "words": entries,
        }

        jsonschema.validate(instance=output_dict, schema=_get_schema())

        return [
            FormatterOutput(
                suffix="-word-track.json",
                content=json.dumps(output_dict, indent=2, ensure_ascii=False),
                media_type="application/json",
            )
        ]
