"""Abstract base formatter and output container.

WHY: Every export consumes the same loaded ReadingEngine but produces
different file content. This base class enforces a consistent interface
so the CLI (or any other host) can work with any formatter generically.

HOW: BaseFormatter is an ABC with two requirements — a ``name`` property
and a ``format()`` method. FormatterOutput is a plain dataclass that
bundles a file suffix with its content and MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` returns a list — every current formatter returns one item
- ``format()`` must not move the engine's cursor
- ``suffix`` starts with a hyphen, e.g. ``"-mindmap.md"``
- The caller is responsible for prepending the source filename stem
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from rsvp_reader.core.engine import ReadingEngine


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the source stem,
                e.g. ``"-mindmap.md"`` → ``"notes-mindmap.md"``.
        content: The file content as a string.
        media_type: MIME type for the content, e.g. ``"text/markdown"``.
    """

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all output formatters.

    To add a new output format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Mind Map Outline'."""

    @abstractmethod
    def format(self, engine: ReadingEngine) -> list[FormatterOutput]:
        """Convert the loaded document into one or more output files.

        Args:
            engine: A ReadingEngine with a document already loaded.

        Returns:
            List of FormatterOutput objects.
        """
