"""Core segmentation, cursor, and session modules.

WHY: The core package contains the algorithmic heart of the reader —
markup normalization, keyword extraction, paragraph segmentation, and the
cursor/timing engine. Hosts (CLI, playback controller, formatters) only
call into it.

HOW: ir.py defines the data structures, markup.py strips markdown,
keywords.py ranks keywords, segmenter.py builds paragraphs and word
records, engine.py owns the cursor and timing, sessions.py aggregates
reading statistics.

RULES:
- IR dataclasses are the contract — change with care
- Nothing in core touches the file system or any store
- Every operation is synchronous and returns before the caller continues
"""
