"""Reading-position persistence interface.

WHY: Readers expect to resume where they stopped. The engine itself never
touches storage, so the host supplies a store keyed by document identity;
the playback controller reads it before loading and writes it when
playback stops or finishes.

HOW: ReadingProgress is the stored record, PositionStore is the protocol
hosts implement, and InMemoryPositionStore is the reference
implementation used by the CLI and tests.

RULES:
- position is an absolute word index from a previous load of the document
- timestamp is Unix epoch milliseconds
- Stores return None for unknown documents
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Protocol


@dataclass(frozen=True)
class ReadingProgress:
    position: int
    timestamp: int


class PositionStore(Protocol):
    def load(self, document_id: str) -> Optional[ReadingProgress]:
        ...

    def save(self, document_id: str, progress: ReadingProgress) -> None:
        ...


class InMemoryPositionStore:
    """Dict-backed PositionStore."""

    def __init__(self) -> None:
        self._progress: Dict[str, ReadingProgress] = {}

    def load(self, document_id: str) -> Optional[ReadingProgress]:
        return self._progress.get(document_id)

    def save(self, document_id: str, progress: ReadingProgress) -> None:
        self._progress[document_id] = progress
