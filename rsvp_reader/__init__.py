"""RSVP Reader — segmentation and reading-cursor engine for speed reading.

WHY: Rapid serial visual presentation shows one word at a time at a
controlled rate. Markdown notes cannot be fed to such a display directly:
markup has to be stripped, text has to be split into words (including CJK
text with no spaces), and every word needs a display duration and a focus
letter. This package turns a document into that word stream and owns the
reading cursor that walks it.

HOW: Four-stage pipeline — normalize markup (core.markup), tokenize
(tokenizers), segment into paragraphs of words (core.segmenter), then
play through the words with the cursor/timing engine (core.engine).
Formatters export the result; the playback controller and CLI are thin
host glue around the engine.

RULES:
- The engine is synchronous and side-effect free; hosts schedule playback
- WordRecord is the stable contract between segmentation and playback
- Adding a new export = one new formatter module, no core changes
"""

__version__ = "0.1.0"
