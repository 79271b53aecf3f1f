"""Markdown normalizer: plain text, cross-references, and heading structure.

WHY: Readers want to see the words of a note, not its markup. Wiki links
must survive as readable text (and be remembered as cross-references),
code must disappear entirely, and headings are needed separately for the
outline export. Notes are often half-written, so this must never fail on
malformed input.

HOW: A fixed sequence of regex substitutions, applied in order so that
extraction happens before stripping:
  1. [[target|display]] → display (target recorded)
  2. fenced code blocks, then inline code → removed
  3. ![alt](url) → removed
  4. [text](url) → text
  5. <tags> → removed
  6. **bold** / __bold__, then *italic* / _italic_ → inner text
  7. horizontal rules → blank line
  8. # Heading → Heading + line break
Headings are scanned separately from the original markdown so their
offsets point into the caller's text.

RULES:
- Never raises on malformed markup; unmatched syntax is kept as literal text
- Code content is excluded from plain text (and so from tokens and keywords)
- Cross-references are de-duplicated, first occurrence wins; an empty
  target ([[|display]]) is not recorded
- Line endings are normalized to \\n before stripping
"""

from __future__ import annotations

import logging
import re

from rsvp_reader.core.ir import HeadingEntry, NormalizedText

logger = logging.getLogger(__name__)

WIKI_LINK_RE = re.compile(r"\[\[([^\]]+)\]\]")
FENCED_CODE_RE = re.compile(r"```[\s\S]*?```")
INLINE_CODE_RE = re.compile(r"`[^`]*`")
IMAGE_RE = re.compile(r"!\[([^\]]*)\]\([^)]+\)")
LINK_RE = re.compile(r"\[([^\]]+)\]\([^)]+\)")
TAG_RE = re.compile(r"<[^>]*>")
BOLD_RE = re.compile(r"(\*\*|__)(.*?)\1")
ITALIC_RE = re.compile(r"(\*|_)(.*?)\1")
HORIZONTAL_RULE_RE = re.compile(r"^[ \t]*[-*_]{3,}[ \t]*$", re.MULTILINE)
HEADING_LINE_RE = re.compile(r"^#{1,6}[ \t]+(.*?)$", re.MULTILINE)
HEADING_SCAN_RE = re.compile(r"^(#{1,6})[ \t]+(.*?)$", re.MULTILINE)


def _replace_wiki_links(text: str, targets: list[str]) -> str:
    def _sub(match: re.Match) -> str:
        inner = match.group(1)
        target, sep, display = inner.partition("|")
        if target:
            targets.append(target)
        return display if sep else target

    return WIKI_LINK_RE.sub(_sub, text)


def strip_markup(text: str) -> str:
    """Apply rules 2–8 to text whose wiki links are already resolved."""
    if text.count("```") % 2:
        logger.warning("Unterminated code fence; trailing fence kept as text")
    text = FENCED_CODE_RE.sub("", text)
    text = INLINE_CODE_RE.sub("", text)
    text = IMAGE_RE.sub("", text)
    text = LINK_RE.sub(r"\1", text)
    text = TAG_RE.sub("", text)
    text = BOLD_RE.sub(r"\2", text)
    text = ITALIC_RE.sub(r"\2", text)
    text = HORIZONTAL_RULE_RE.sub("\n", text)
    text = HEADING_LINE_RE.sub(r"\1\n", text)
    return text


def parse_headings(markdown: str) -> list[HeadingEntry]:
    """Scan the original markdown for ATX headings.

    Args:
        markdown: Raw document text, untouched.

    Returns:
        HeadingEntry list in source order; level is the number of '#'
        characters, title is trimmed, source_offset is the match start.
    """
    return [
        HeadingEntry(
            level=len(match.group(1)),
            title=match.group(2).strip(),
            source_offset=match.start(),
        )
        for match in HEADING_SCAN_RE.finditer(markdown)
    ]


def normalize(markdown: str) -> NormalizedText:
    """Convert markdown into plain text plus extracted structure.

    Args:
        markdown: Raw document text; may be malformed.

    Returns:
        NormalizedText with plain text, de-duplicated cross-reference
        targets, and headings scanned from the original input.
    """
    headings = parse_headings(markdown)

    text = markdown.replace("\r\n", "\n").replace("\r", "\n")
    targets: list[str] = []
    text = _replace_wiki_links(text, targets)
    text = strip_markup(text)

    cross_references = list(dict.fromkeys(targets))
    logger.debug(
        "Normalized %d chars → %d chars, %d cross-references, %d headings",
        len(markdown), len(text), len(cross_references), len(headings),
    )
    return NormalizedText(
        plain_text=text,
        cross_references=cross_references,
        headings=headings,
    )
