"""Length-oriented transforms: truncation, padding, repetition, reversal.

Lengths are measured in Python characters (code points).  Padding never
truncates and truncation never pads.
"""

from __future__ import annotations

import re

from stringkit.validation import (
    assert_valid_count,
    assert_valid_length,
    assert_valid_pad_char,
    assert_valid_string,
)

ELLIPSIS = "..."

_WHITESPACE_RUN = re.compile(r"\s+")


def truncate(text: str, length: int, *, ellipsis: str = ELLIPSIS) -> str:
    """Cut *text* to *length* characters and append *ellipsis*.

    The suffix is added on top of *length*, so the result of truncating is
    ``length + len(ellipsis)`` long.  Text that already fits is returned
    unchanged.

    >>> truncate("hello world", 5)
    'hello...'
    """
    assert_valid_string(text, "text")
    assert_valid_string(ellipsis, "ellipsis")
    limit = assert_valid_length(length, "length")
    if len(text) <= limit:
        return text
    return text[:limit] + ellipsis


def truncate_words(text: str, word_count: int, *, ellipsis: str = ELLIPSIS) -> str:
    """Keep the first *word_count* whitespace-separated words.

    When nothing is cut the original *text* is returned as-is, surrounding
    whitespace included.  Otherwise the kept words are joined by single
    spaces and *ellipsis* is appended.
    """
    assert_valid_string(text, "text")
    assert_valid_string(ellipsis, "ellipsis")
    limit = assert_valid_count(word_count, "word_count")
    stripped = text.strip()
    words = _WHITESPACE_RUN.split(stripped) if stripped else []
    if len(words) <= limit:
        return text
    return " ".join(words[:limit]) + ellipsis


def _padding(text: str, length: object, char: object) -> int:
    """Validate a pad call and return how many pad characters are needed."""
    assert_valid_string(text, "text")
    assert_valid_string(char, "char")
    target = assert_valid_length(length, "length")
    assert_valid_pad_char(char, "char")
    return max(0, target - len(text))


def center(text: str, length: int, char: str = " ") -> str:
    """Pad both sides; an odd remainder goes on the right.

    >>> center("hi", 7, "*")
    '**hi***'
    """
    padding = _padding(text, length, char)
    left = padding // 2
    return char * left + text + char * (padding - left)


def lpad(text: str, length: int, char: str = " ") -> str:
    """Pad on the left to *length*: ``lpad("7", 3, "0")`` is ``"007"``."""
    padding = _padding(text, length, char)
    return char * padding + text


def rpad(text: str, length: int, char: str = " ") -> str:
    """Pad on the right to *length*; longer text is returned unchanged."""
    padding = _padding(text, length, char)
    return text + char * padding


def repeat_string(text: str, times: int) -> str:
    """Concatenate *text* with itself *times* times; zero gives ``""``."""
    assert_valid_string(text, "text")
    count = assert_valid_count(times, "times")
    return text * count


def reverse(text: str) -> str:
    """Reverse character order.

    Works per code point: combining marks end up before the letter they
    modified, so ``reverse("e\\u0301")`` puts the accent first.
    """
    assert_valid_string(text, "text")
    return text[::-1]


__all__ = [
    "ELLIPSIS",
    "center",
    "lpad",
    "repeat_string",
    "reverse",
    "rpad",
    "truncate",
    "truncate_words",
]
