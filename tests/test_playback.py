"""Unit tests for the playback controller state machine.

WHY: The controller decides when words advance, when sessions start and
end, and where reading resumes. A missed transition means lost progress
or a session that never gets recorded.

HOW: Controllers are built around SAMPLE_MARKDOWN with an injected clock
and a no-op sleep, so run() completes instantly and session timing is
deterministic.

RULES:
- Time-dependent tests inject the clock instead of patching time.time()
- Sleep is injected and recorded, never real
"""

import pytest

from rsvp_reader.core.engine import ReadingEngine
from rsvp_reader.core.sessions import ReadingLog
from rsvp_reader.playback import PlaybackController, PlaybackState
from rsvp_reader.progress import InMemoryPositionStore, ReadingProgress
from rsvp_reader.settings import ReaderSettings


def _fake_clock(*values):
    return iter(values).__next__


@pytest.fixture
def store():
    return InMemoryPositionStore()


@pytest.fixture
def log():
    return ReadingLog()


@pytest.fixture
def controller(sample_markdown, store, log):
    ctrl = PlaybackController(store=store, log=log, clock=_fake_clock(1000, 61000))
    ctrl.open(sample_markdown, document_id="notes.md")
    return ctrl


class TestTransitions:
    def test_initial_state(self, controller):
        assert controller.state == PlaybackState.STOPPED
        assert controller.speed == 400

    def test_play_pause_stop(self, controller):
        controller.play()
        assert controller.state == PlaybackState.PLAYING
        controller.pause()
        assert controller.state == PlaybackState.PAUSED
        controller.play()
        assert controller.state == PlaybackState.PLAYING
        controller.stop()
        assert controller.state == PlaybackState.STOPPED

    def test_toggle(self, controller):
        controller.toggle()
        assert controller.state == PlaybackState.PLAYING
        controller.toggle()
        assert controller.state == PlaybackState.PAUSED

    def test_pause_when_stopped_is_noop(self, controller):
        controller.pause()
        assert controller.state == PlaybackState.STOPPED

    def test_play_empty_document(self, store, log):
        ctrl = PlaybackController(store=store, log=log)
        ctrl.open("", document_id="empty.md")
        ctrl.play()
        assert ctrl.state == PlaybackState.STOPPED

    def test_state_values(self):
        assert PlaybackState.PLAYING.value == "playing"
        assert PlaybackState.PAUSED == "paused"


class TestTick:
    def test_tick_when_not_playing(self, controller):
        assert controller.tick() is None
        assert controller.engine.position == 0

    def test_tick_advances_and_times(self, controller):
        controller.play()
        assert controller.tick() == pytest.approx(225.0)
        assert controller.engine.position == 1

    def test_tick_at_end_stops(self, controller):
        controller.engine.set_position(17)
        controller.play()
        assert controller.tick() is None
        assert controller.state == PlaybackState.STOPPED


class TestRun:
    def test_reads_whole_document(self, controller, log, store, sample_words):
        shown = []
        controller.run(on_word=lambda w, d: shown.append(w.text), sleep=lambda s: None)

        assert shown == sample_words
        assert controller.state == PlaybackState.STOPPED
        assert store.load("notes.md") == ReadingProgress(position=17, timestamp=61000)

        session = log.recent_sessions()[0]
        assert session.duration_ms == pytest.approx(60000.0)
        assert session.words_read == 18
        assert session.average_speed == pytest.approx(18.0)

    def test_sleeps_for_word_duration(self, controller):
        sleeps = []
        controller.run(sleep=sleeps.append)
        assert sleeps[0] == pytest.approx(0.15)
        assert sleeps[1] == pytest.approx(0.225)
        assert len(sleeps) == 18

    def test_pause_between_words(self, controller):
        shown = []

        def on_word(word, delay):
            shown.append(word.text)
            if len(shown) == 3:
                controller.pause()

        controller.run(on_word=on_word, sleep=lambda s: None)
        assert controller.state == PlaybackState.PAUSED
        assert controller.engine.position == 2
        assert shown == ["Speed", "Reading", "Hello"]

    def test_run_uses_controller_speed(self, controller):
        delays = []
        controller.set_speed(600)
        controller.run(on_word=lambda w, d: delays.append(d), sleep=lambda s: None)
        assert delays[0] == pytest.approx(100.0)


class TestResume:
    def test_stored_position_restored(self, sample_markdown, store):
        store.save("notes.md", ReadingProgress(position=9, timestamp=0))
        ctrl = PlaybackController(store=store)
        ctrl.open(sample_markdown, document_id="notes.md")
        assert ctrl.engine.position == 9

    def test_stored_position_clamped(self, store):
        store.save("short.md", ReadingProgress(position=500, timestamp=0))
        ctrl = PlaybackController(store=store)
        ctrl.open("only three words", document_id="short.md")
        assert ctrl.engine.position == 2

    def test_stop_saves_position(self, controller, store):
        controller.play()
        controller.tick()
        controller.tick()
        controller.stop()
        assert store.load("notes.md").position == 2

    def test_stop_records_session(self, controller, log):
        controller.play()
        controller.tick()
        controller.stop()
        stat = log.file_stat("notes.md")
        assert stat.total_sessions == 1
        assert stat.total_words_read == 2

    def test_stop_without_advancing_counts_shown_word(self, controller, log):
        controller.play()
        controller.stop()
        assert log.recent_sessions()[0].words_read == 1

    def test_file_name_defaults_to_document_id(self, controller):
        assert controller.file_name == "notes.md"


class TestSpeedAndNavigation:
    def test_speed_clamped(self, controller):
        controller.set_speed(50)
        assert controller.speed == 200
        controller.set_speed(5000)
        assert controller.speed == 1200

    def test_speed_steps(self, controller):
        controller.speed_up()
        assert controller.speed == 450
        controller.slow_down()
        controller.slow_down()
        assert controller.speed == 350

    def test_initial_speed_from_settings(self):
        ctrl = PlaybackController(settings=ReaderSettings(default_speed=700))
        assert ctrl.speed == 700

    def test_settings_taken_from_engine(self):
        engine = ReadingEngine(ReaderSettings(default_speed=250))
        ctrl = PlaybackController(engine=engine)
        assert ctrl.speed == 250
        assert ctrl.engine is engine

    def test_navigation_delegates(self, controller):
        controller.jump_paragraph(forward=True)
        assert controller.engine.position == 2
        controller.set_progress(1.0)
        assert controller.engine.position == 17
