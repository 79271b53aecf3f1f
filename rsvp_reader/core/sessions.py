"""Reading sessions and per-document statistics.

WHY: Speed readers want to see whether they are actually getting faster.
Each playback run becomes a session; sessions roll up into per-document
statistics and a short markdown report.

HOW: ReadingLog keeps the session list and a dict of ReadingStat keyed by
document id. add_session() appends and updates the document's stat in
place. The report is rendered from those aggregates.

RULES:
- Timestamps and durations are integer/float milliseconds
- Average speed = words read / minutes spent; 0 when no time was spent
- recent_sessions() orders by end timestamp, newest first
- The log is in-memory only; persisting it is the host's concern
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)

REPORT_RECENT_COUNT = 5


def words_per_minute(words: int, duration_ms: float) -> float:
    if duration_ms <= 0:
        return 0.0
    return words / (duration_ms / 60_000.0)


@dataclass
class ReadingSession:
    """One uninterrupted playback run over a document.

    RULES:
    - duration_ms: end_timestamp - start_timestamp of the run
    - words_read: words shown, end_position - start_position + 1 for a
      forward run, never less than 1
    - average_speed: words_read per minute over duration_ms
    """

    file_id: str
    file_name: str
    start_timestamp: int
    end_timestamp: int
    duration_ms: float
    start_position: int
    end_position: int
    words_read: int
    average_speed: float


@dataclass
class ReadingStat:
    total_sessions: int = 0
    total_time_ms: float = 0.0
    total_words_read: int = 0
    average_speed: float = 0.0
    last_read_date: int = 0


class ReadingLog:
    """In-memory collection of sessions with per-document aggregates."""

    def __init__(self) -> None:
        self._sessions: List[ReadingSession] = []
        self._stats: Dict[str, ReadingStat] = {}

    def add_session(self, session: ReadingSession) -> None:
        self._sessions.append(session)

        stat = self._stats.setdefault(session.file_id, ReadingStat())
        stat.total_sessions += 1
        stat.total_time_ms += session.duration_ms
        stat.total_words_read += session.words_read
        stat.average_speed = words_per_minute(stat.total_words_read, stat.total_time_ms)
        stat.last_read_date = max(stat.last_read_date, session.end_timestamp)

        logger.info(
            "Recorded session for %s: %d words in %.1fs",
            session.file_id, session.words_read, session.duration_ms / 1000.0,
        )

    def file_stat(self, file_id: str) -> Optional[ReadingStat]:
        return self._stats.get(file_id)

    def all_stats(self) -> Dict[str, ReadingStat]:
        return dict(self._stats)

    def recent_sessions(self, count: int = 10) -> List[ReadingSession]:
        ordered = sorted(self._sessions, key=lambda s: s.end_timestamp, reverse=True)
        return ordered[:count]

    def generate_report(self, now: Optional[datetime] = None) -> str:
        """Render overall totals and recent sessions as markdown.

        Args:
            now: Report timestamp; defaults to the current local time.

        Returns:
            Markdown report text ending with a newline.
        """
        now = now or datetime.now()
        total_words = sum(s.total_words_read for s in self._stats.values())
        total_time_ms = sum(s.total_time_ms for s in self._stats.values())
        overall_speed = words_per_minute(total_words, total_time_ms)

        lines = [
            "# Reading Report",
            "",
            "Generated: {}".format(now.strftime("%Y-%m-%d %H:%M")),
            "",
            "## Overall",
            "",
            "- Words read: {}".format(total_words),
            "- Time spent: {:.1f} min".format(total_time_ms / 60_000.0),
            "- Average speed: {} wpm".format(round(overall_speed)),
            "",
            "## Recent Sessions",
            "",
        ]
        for session in self.recent_sessions(REPORT_RECENT_COUNT):
            date = datetime.fromtimestamp(session.end_timestamp / 1000.0).strftime("%Y-%m-%d")
            lines.append("- {} ({}): {} words, {} wpm".format(
                session.file_name, date, session.words_read, round(session.average_speed),
            ))

        return "\n".join(lines) + "\n"
