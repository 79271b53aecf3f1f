"""Output formatter registry — pluggable export hub.

WHY: The CLI needs a single lookup to find the right formatter by name.
A central dict makes it trivial to add new exports: create the formatter
class, import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["outline"]()``.

RULES:
- Keys are snake_case identifiers (used in CLI flags)
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be constructible with no arguments
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rsvp_reader.formatters.outline import OutlineFormatter
from rsvp_reader.formatters.word_track import WordTrackFormatter

if TYPE_CHECKING:
    from rsvp_reader.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "outline": OutlineFormatter,
    "word_track": WordTrackFormatter,
}
