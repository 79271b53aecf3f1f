"""Mind-map outline formatter — key concepts plus heading structure.

WHY: After a speed-reading pass, a compact outline of what the note was
about (its keywords) and how it was organized (its headings) helps the
reader consolidate. The outline is markdown so it can be dropped next to
the source note.

HOW: Collect the text of every keyword-flagged word in reading order,
de-duplicated. List the document headings with two spaces of indent per
level below 1.

RULES:
- Title line "# Document Mind Map"
- "## Key Concepts" section: one "- keyword" bullet per unique keyword
- "## Document Structure" section: one "- title" bullet per heading
- Output suffix: "-mindmap.md"; media type "text/markdown"
"""

from __future__ import annotations

from typing import List

from rsvp_reader.core.engine import ReadingEngine
from rsvp_reader.formatters.base import BaseFormatter, FormatterOutput


class OutlineFormatter(BaseFormatter):
    """Formatter that produces the mind-map outline markdown."""

    @property
    def name(self) -> str:
        return "Mind Map Outline"

    def format(self, engine: ReadingEngine) -> List[FormatterOutput]:
        keywords = list(dict.fromkeys(w.text for w in engine.words if w.is_keyword))

        lines = ["# Document Mind Map", "", "## Key Concepts", ""]
        lines.extend("- {}".format(keyword) for keyword in keywords)
        lines.extend(["", "## Document Structure", ""])
        for heading in engine.headings:
            indent = "  " * (heading.level - 1)
            lines.append("{}- {}".format(indent, heading.title))

        return [
            FormatterOutput(
                suffix="-mindmap.md",
                content="\n".join(lines) + "\n",
                media_type="text/markdown",
            )
        ]
