"""Dictionary tokenizer for CJK text — greedy maximum forward matching.

WHY: Chinese has no spaces between words, so a whitespace split would
turn a whole sentence into one "word". Showing common multi-character
terms (阅读, 效率) as single units reads far better than one character
at a time.

HOW: Scan left to right. At each position try the substrings of length
``window``, window-1, ... 1 against the dictionary and take the first
(longest) hit. Without a hit:
  - an ASCII letter/digit starts a maximal alphanumeric run → one token
  - attach-punctuation (，。！？ ...) is appended to the previous token,
    or emitted alone when there is no previous token
  - whitespace is skipped
  - any other character becomes its own token

RULES:
- The dictionary is illustrative; pass a larger one (or a different
  BaseTokenizer) for production segmentation
- Matching is greedy and therefore ambiguous by nature (阅读速读 may split
  differently from a statistical segmenter); this is accepted
- Default look-ahead window is 4 characters
"""

from __future__ import annotations

from typing import Iterable, Optional

from rsvp_reader.tokenizers.base import BaseTokenizer

DEFAULT_WINDOW = 4

DEFAULT_DICTIONARY: frozenset[str] = frozenset({
    "研究", "学习", "方法", "知识", "管理", "系统", "思维", "工作",
    "效率", "提高", "增强", "记忆", "理解", "分析", "文章", "阅读",
    "速度", "认知", "笔记", "复习", "总结", "实践", "应用", "技巧",
})

# Punctuation that attaches to the preceding token instead of standing alone.
ATTACH_PUNCTUATION: frozenset[str] = frozenset("，。！？；：“”‘’（）、")


def _is_ascii_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


class DictionaryTokenizer(BaseTokenizer):
    """Greedy longest-match tokenizer over a static term dictionary."""

    def __init__(
        self,
        dictionary: Optional[Iterable[str]] = None,
        window: int = DEFAULT_WINDOW,
    ) -> None:
        if window < 1:
            raise ValueError("window must be at least 1, got {}".format(window))
        self.dictionary = frozenset(dictionary) if dictionary is not None else DEFAULT_DICTIONARY
        self.window = window

    @property
    def name(self) -> str:
        return "CJK dictionary"

    def _longest_match(self, text: str, start: int) -> Optional[str]:
        end = min(start + self.window, len(text))
        while end > start:
            candidate = text[start:end]
            if candidate in self.dictionary:
                return candidate
            end -= 1
        return None

    def tokenize(self, text: str) -> list[str]:
        tokens: list[str] = []
        pos = 0
        length = len(text)

        while pos < length:
            match = self._longest_match(text, pos)
            if match is not None:
                tokens.append(match)
                pos += len(match)
                continue

            char = text[pos]
            if _is_ascii_alnum(char):
                end = pos + 1
                while end < length and _is_ascii_alnum(text[end]):
                    end += 1
                tokens.append(text[pos:end])
                pos = end
            elif char in ATTACH_PUNCTUATION:
                if tokens:
                    tokens[-1] += char
                else:
                    tokens.append(char)
                pos += 1
            elif char.isspace():
                pos += 1
            else:
                tokens.append(char)
                pos += 1

        return tokens
