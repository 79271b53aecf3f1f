"""Host-side playback controller: Stopped / Playing / Paused.

WHY: The engine is deliberately passive — it answers "which word" and
"for how long" but never schedules anything. Every host still needs the
same small state machine on top: play, pause, stop, a speed within sane
bounds, resume from the stored position, and a session record when
reading ends. Keeping it here means the CLI (and any other host) only
supplies a timer and a way to show a word.

HOW: PlaybackController wraps a ReadingEngine. open() loads a document
and restores the stored position. tick() advances one word and returns
its duration; run() is the cooperative loop that shows a word, sleeps
for its duration, and checks the state again before advancing, so pause
and stop take effect between words, never mid-word. Stopping (or
reaching the end) saves progress to the PositionStore and records a
ReadingSession in the ReadingLog, when those are supplied.

RULES:
- Transitions: stopped → playing (play), playing ⇄ paused (pause/play),
  playing|paused → stopped (stop or end of document)
- play() on an empty document is a no-op; the state stays stopped
- Speed is clamped to MIN_SPEED_WPM..MAX_SPEED_WPM, steps of SPEED_STEP_WPM
- A session spans play() from stopped until the next stop
"""

from __future__ import annotations

import enum
import logging
import time
from typing import Callable, Optional

from rsvp_reader.config import MAX_SPEED_WPM, MIN_SPEED_WPM, SPEED_STEP_WPM
from rsvp_reader.core.engine import ReadingEngine
from rsvp_reader.core.ir import CursorOffset, WordRecord
from rsvp_reader.core.sessions import ReadingLog, ReadingSession, words_per_minute
from rsvp_reader.progress import PositionStore, ReadingProgress
from rsvp_reader.settings import ReaderSettings

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


class PlaybackState(str, enum.Enum):
    """Playback states.

    RULES:
    - stopped: no session in progress (initial and terminal state)
    - playing: the host should keep scheduling tick()
    - paused: session in progress, no ticks until play()
    """

    STOPPED = "stopped"
    PLAYING = "playing"
    PAUSED = "paused"


class PlaybackController:
    """Drives a ReadingEngine on behalf of a host."""

    def __init__(
        self,
        engine: Optional[ReadingEngine] = None,
        settings: Optional[ReaderSettings] = None,
        store: Optional[PositionStore] = None,
        log: Optional[ReadingLog] = None,
        clock: Callable[[], int] = _now_ms,
    ) -> None:
        if settings is None:
            settings = engine.settings if engine is not None else ReaderSettings()
        self.settings = settings
        self.engine = engine if engine is not None else ReadingEngine(settings)
        self.store = store
        self.log = log
        self._clock = clock

        self.state = PlaybackState.STOPPED
        self.speed = settings.default_speed
        self.document_id: Optional[str] = None
        self.file_name = ""
        self._session_start_ms = 0
        self._session_start_position = 0

    # -- Document ------------------------------------------------------------

    def open(
        self,
        markdown: str,
        document_id: str,
        file_name: Optional[str] = None,
        start_offset: Optional[CursorOffset] = None,
    ) -> None:
        """Load a document, restoring the stored position when there is one."""
        if self.state != PlaybackState.STOPPED:
            self.stop()

        self.engine.load(markdown, start_offset)
        self.document_id = document_id
        self.file_name = file_name or document_id

        if self.store is not None:
            stored = self.store.load(document_id)
            if stored is not None:
                self.engine.set_position(stored.position)
                logger.info("Resuming %s at word %d", document_id, self.engine.position)

    # -- State machine -------------------------------------------------------

    def play(self) -> None:
        if self.state == PlaybackState.PLAYING:
            return
        if self.engine.total_words() == 0:
            logger.info("Nothing to play: document has no words")
            return
        if self.state == PlaybackState.STOPPED:
            self._session_start_ms = self._clock()
            self._session_start_position = self.engine.position
        self.state = PlaybackState.PLAYING
        logger.debug("Playback playing at %d wpm", self.speed)

    def pause(self) -> None:
        if self.state == PlaybackState.PLAYING:
            self.state = PlaybackState.PAUSED
            logger.debug("Playback paused at word %d", self.engine.position)

    def toggle(self) -> None:
        if self.state == PlaybackState.PLAYING:
            self.pause()
        else:
            self.play()

    def stop(self) -> None:
        if self.state == PlaybackState.STOPPED:
            return
        self._finish()

    def tick(self) -> Optional[float]:
        """Advance one word.

        Returns:
            Display duration (ms) of the newly current word, or None when
            not playing or the document has ended (playback then stops).
        """
        if self.state != PlaybackState.PLAYING:
            return None
        if self.engine.next_word() is None:
            logger.info("Reached end of document")
            self._finish()
            return None
        return self.engine.duration_ms(self.speed, self.settings)

    def run(
        self,
        on_word: Optional[Callable[[WordRecord, float], None]] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Play from the current word until the document ends or play stops.

        Args:
            on_word: Called with each shown word and its duration (ms).
            sleep: Waits the given number of seconds between words.
        """
        self.play()
        word = self.engine.current()
        if self.state != PlaybackState.PLAYING or word is None:
            return

        delay = self.engine.duration_ms(self.speed, self.settings)
        if on_word is not None:
            on_word(word, delay)

        while True:
            sleep(delay / 1000.0)
            if self.state != PlaybackState.PLAYING:
                break
            next_delay = self.tick()
            if next_delay is None:
                break
            delay = next_delay
            word = self.engine.current()
            if on_word is not None and word is not None:
                on_word(word, delay)

    # -- Speed and navigation ------------------------------------------------

    def set_speed(self, speed: int) -> None:
        self.speed = max(MIN_SPEED_WPM, min(int(speed), MAX_SPEED_WPM))

    def speed_up(self, step: int = SPEED_STEP_WPM) -> None:
        self.set_speed(self.speed + step)

    def slow_down(self, step: int = SPEED_STEP_WPM) -> None:
        self.set_speed(self.speed - step)

    def set_progress(self, fraction: float) -> None:
        self.engine.set_progress(fraction)

    def jump_paragraph(self, forward: bool) -> None:
        self.engine.jump_paragraph(forward)

    # -- Internals -----------------------------------------------------------

    def _finish(self) -> None:
        self.state = PlaybackState.STOPPED
        now = self._clock()
        position = self.engine.position

        if self.store is not None and self.document_id is not None:
            self.store.save(self.document_id, ReadingProgress(position=position, timestamp=now))

        if self.log is not None and self.document_id is not None:
            duration = max(0, now - self._session_start_ms)
            # play() shows the word under the cursor, so both ends count
            words_read = max(0, position - self._session_start_position) + 1
            self.log.add_session(ReadingSession(
                file_id=self.document_id,
                file_name=self.file_name,
                start_timestamp=self._session_start_ms,
                end_timestamp=now,
                duration_ms=float(duration),
                start_position=self._session_start_position,
                end_position=position,
                words_read=words_read,
                average_speed=words_per_minute(words_read, duration),
            ))
        logger.info("Playback stopped at word %d", position)
