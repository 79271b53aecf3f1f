"""Command-line interface for the RSVP reader.

WHY: The quickest way to try a speed-reading pass over a note is the
terminal. The CLI wires together file reading, settings, the reading
engine, the playback controller, and the pluggable formatters behind a
single command.

HOW: Uses argparse to accept an input markdown file, speed and timing
options, an optional start line/column, and an optional list of export
formats. Without --formats the document is played in the terminal, one
word per line with the focus letter bracketed. With --formats the
selected formatters run and their files are saved next to the source
(or to --output-dir). Status messages go to stderr.

RULES:
- Positional argument: input markdown file path (UTF-8)
- --line / --column are 1-based, like an editor status bar; --column
  requires --line
- --formats: comma-separated formatter keys; files are named
  {stem}{suffix} with a numeric suffix on conflict (-mindmap-2.md)
- Status output goes to stderr (not stdout); words go to stdout
- Ctrl-C stops playback cleanly and exits with status 130
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

from rsvp_reader.config import DEFAULT_SPEED_WPM, MAX_SPEED_WPM, MIN_SPEED_WPM
from rsvp_reader.core.engine import ReadingEngine
from rsvp_reader.core.ir import CursorOffset, WordRecord
from rsvp_reader.core.sessions import ReadingLog
from rsvp_reader.formatters import FORMATTERS
from rsvp_reader.formatters.base import BaseFormatter, FormatterOutput
from rsvp_reader.formatters.word_track import WordTrackFormatter
from rsvp_reader.playback import PlaybackController
from rsvp_reader.progress import InMemoryPositionStore
from rsvp_reader.settings import ReaderSettings, load_settings

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr so stdout carries only words."""
    print(msg, file=sys.stderr, flush=True)


def render_word(word: WordRecord) -> str:
    """Render a word with its focus letter bracketed, e.g. ``wo[r]ld.``."""
    text = word.text
    fp = word.focus_point
    return "{}[{}]{}".format(text[:fp], text[fp:fp + 1], text[fp + 1:])


def _resolve_output_path(
    stem: str,
    suffix: str,
    output_dir: Path,
) -> Path:
    """Resolve the output file path, adding numeric suffix on conflict.

    RULES:
    - First attempt: {stem}{suffix} (e.g. notes-mindmap.md)
    - Conflict: insert counter before the extension (notes-mindmap-2.md)
    - Counter starts at 2 and increments
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    dot_idx = suffix.rfind(".")
    if dot_idx > 0:
        suffix_name = suffix[:dot_idx]
        suffix_ext = suffix[dot_idx:]
    else:
        suffix_name = suffix
        suffix_ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(
    output: FormatterOutput,
    stem: str,
    output_dir: Path,
) -> Path:
    path = _resolve_output_path(stem, output.suffix, output_dir)
    path.write_text(output.content, encoding="utf-8")
    return path


def _build_formatter(key: str, speed: int, settings: ReaderSettings) -> BaseFormatter:
    if key == "word_track":
        return WordTrackFormatter(speed_wpm=speed, settings=settings)
    return FORMATTERS[key]()


def _parse_formats(raw: str) -> List[str]:
    keys = [f.strip() for f in raw.split(",") if f.strip()]
    for key in keys:
        if key not in FORMATTERS:
            available = ", ".join(sorted(FORMATTERS.keys()))
            raise ValueError("Unknown format '{}'. Available formats: {}".format(key, available))
    return keys


def _start_offset(args: argparse.Namespace) -> Optional[CursorOffset]:
    if args.line is None:
        return None
    column = args.column if args.column is not None else 1
    return CursorOffset(line=max(0, args.line - 1), column=max(0, column - 1))


def _export(
    engine: ReadingEngine,
    format_keys: List[str],
    input_path: Path,
    output_dir: Path,
    speed: int,
    settings: ReaderSettings,
) -> List[Path]:
    saved: List[Path] = []
    for key in format_keys:
        formatter = _build_formatter(key, speed, settings)
        _status("  Running {} formatter...".format(formatter.name))
        for output in formatter.format(engine):
            path = _save_output(output, input_path.stem, output_dir)
            saved.append(path)
            _status("  Saved: {}".format(path.name))
    return saved


def _play(
    controller: PlaybackController,
    no_delay: bool,
) -> None:
    def show(word: WordRecord, delay_ms: float) -> None:
        print(render_word(word), flush=True)

    sleep = (lambda _seconds: None) if no_delay else time.sleep
    try:
        controller.run(on_word=show, sleep=sleep)
    except KeyboardInterrupt:
        controller.stop()
        _status("\nStopped at word {} of {}.".format(
            controller.engine.position + 1, controller.engine.total_words(),
        ))
        raise


def _run(args: argparse.Namespace) -> None:
    input_path = Path(args.input_file).resolve()
    if not input_path.is_file():
        raise ValueError("File not found: {}".format(input_path))

    settings = load_settings(
        default_speed=args.speed,
        intelligent_pause=args.intelligent_pause,
        pause_multiplier=args.pause_multiplier,
        use_dictionary_tokenizer=args.dictionary_tokenizer,
    )
    if args.column is not None and args.line is None:
        raise ValueError("--column requires --line")
    format_keys = _parse_formats(args.formats) if args.formats else []

    output_dir = Path(args.output_dir).resolve() if args.output_dir else input_path.parent
    if format_keys and not output_dir.is_dir():
        raise ValueError("Output directory does not exist: {}".format(output_dir))

    markdown = input_path.read_text(encoding="utf-8")
    log = ReadingLog()
    controller = PlaybackController(
        settings=settings,
        store=InMemoryPositionStore(),
        log=log,
    )
    controller.open(
        markdown,
        document_id=str(input_path),
        file_name=input_path.name,
        start_offset=_start_offset(args),
    )
    engine = controller.engine
    _status("Loaded {}: {} words, {} paragraphs".format(
        input_path.name, engine.total_words(), len(engine.paragraph_boundaries),
    ))

    if format_keys:
        saved = _export(engine, format_keys, input_path, output_dir, controller.speed, settings)
        _status("Done! Saved {} file(s) to {}".format(len(saved), output_dir))
        return

    if engine.total_words() == 0:
        _status("Nothing to read.")
        return

    _status("Reading at {} wpm (Ctrl-C to stop)...".format(controller.speed))
    _play(controller, args.no_delay)
    _status("")
    _status(log.generate_report())


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="rsvp-reader",
        description="Speed-read a markdown file one word at a time, or export "
                    "its outline and word timeline.",
    )

    parser.add_argument(
        "input_file",
        help="Path to the markdown file to read.",
    )

    parser.add_argument(
        "--speed",
        type=int,
        default=None,
        help="Reading speed in words per minute, {}-{} (default: {}).".format(
            MIN_SPEED_WPM, MAX_SPEED_WPM, DEFAULT_SPEED_WPM,
        ),
    )

    parser.add_argument(
        "--intelligent-pause",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Hold words ending in punctuation longer.",
    )

    parser.add_argument(
        "--pause-multiplier",
        type=float,
        default=None,
        help="Duration multiplier for punctuation-terminated words.",
    )

    parser.add_argument(
        "--dictionary-tokenizer",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Segment Chinese text with the dictionary tokenizer.",
    )

    parser.add_argument(
        "--line",
        type=int,
        default=None,
        help="Start reading near this line (1-based).",
    )

    parser.add_argument(
        "--column",
        type=int,
        default=None,
        help="Column within --line (1-based, default: 1).",
    )

    parser.add_argument(
        "--formats",
        default=None,
        help="Comma-separated list of exports instead of playback. "
             "Available: {}.".format(", ".join(sorted(FORMATTERS.keys()))),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save exports (default: same as input file).",
    )

    parser.add_argument(
        "--no-delay",
        action="store_true",
        help="Print words without waiting (useful for piping).",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output to stderr.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        _run(args)
    except KeyboardInterrupt:
        sys.exit(130)
    except ValueError as e:
        # Bad options, invalid settings, unknown formats, missing files
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
