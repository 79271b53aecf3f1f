"""Frequency-based keyword extraction.

WHY: Keywords are highlighted during playback and listed in the outline
export. A plain frequency ranking is enough to surface the terms a note
keeps returning to, and it is deterministic, which keeps tests and
exports stable.

HOW: Tokenize the text with the same routing the segmenter uses, drop
stopwords (compared in lower case) and single-character tokens, count
the rest with a Counter keyed by the original token, and take the top
``limit`` by descending count. Python's sort is stable and the Counter
preserves first-insertion order, so ties keep first-occurrence order.

RULES:
- Returned tokens keep their original case ("Python" stays "Python")
- Counting is case-sensitive: "Python" and "python" are separate tokens
- At most ``limit`` keywords (default 10)
- Identical input always yields identical output
"""

from __future__ import annotations

from collections import Counter

from rsvp_reader.config import DEFAULT_KEYWORD_LIMIT
from rsvp_reader.tokenizers import tokenize

# Chinese and English function words that never count as keywords.
STOPWORDS: frozenset[str] = frozenset({
    "的", "是", "在", "了", "和", "与", "或", "对", "且",
    "the", "a", "an", "is", "are", "in", "on", "at", "to",
    "for", "with", "by", "of", "and", "or",
})


def extract_keywords(
    text: str,
    use_dictionary: bool = True,
    limit: int = DEFAULT_KEYWORD_LIMIT,
) -> list[str]:
    """Return up to ``limit`` keywords ranked by raw frequency.

    Args:
        text: Plain text (markup already stripped).
        use_dictionary: Allow routing to the CJK dictionary tokenizer.
        limit: Maximum number of keywords.

    Returns:
        Keywords, most frequent first, ties in first-occurrence order.
    """
    counts: Counter = Counter()
    for token in tokenize(text, use_dictionary):
        if len(token) > 1 and token.lower() not in STOPWORDS:
            counts[token] += 1

    ranked = sorted(counts.items(), key=lambda item: -item[1])
    return [token for token, _ in ranked[:limit]]
