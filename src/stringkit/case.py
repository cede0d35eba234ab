"""Case conversion: capitalize, title case, and the identifier styles.

The identifier converters (camel, kebab, snake, pascal) are defined by
their regular expressions rather than by a word-segmentation algorithm.
Word boundaries are ASCII-oriented: only ``[a-z][A-Z]`` counts as a
lower/upper boundary and only ``[a-zA-Z0-9]`` counts as alphanumeric.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from stringkit.validation import assert_string_sequence, assert_valid_string

STOP_WORDS: tuple[str, ...] = (
    "a", "an", "the", "and", "but", "for", "nor", "or", "so", "to",
    "up", "yet", "with", "as", "by", "in", "of", "on", "at", "from",
)  # fmt: skip
"""Short words that smart title case leaves lowercase mid-title."""

_LOWER_UPPER = re.compile(r"([a-z])([A-Z])")
_CAMEL_SEPARATOR = re.compile(r"[^a-zA-Z0-9]+(.)")
_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]+")
_KEBAB_SEPARATOR = re.compile(r"[\s_]+")
_SNAKE_SEPARATOR = re.compile(r"[\s-]+")


def capitalize(text: str) -> str:
    """Uppercase the first character and leave the rest untouched.

    >>> capitalize("hello World")
    'Hello World'
    """
    assert_valid_string(text, "text")
    if not text:
        return text
    return text[0].upper() + text[1:]


def title(
    text: str,
    smart: bool = False,
    *,
    stop_words: Sequence[str] = STOP_WORDS,
) -> str:
    """Capitalize every space-separated word.

    Only the literal space character separates words; tabs and newlines
    stay inside their word.  With *smart*, words found in *stop_words*
    (compared lowercase) are lowercased instead, unless they are the first
    or last word.

    >>> title("a tale of two cities", smart=True)
    'A Tale of Two Cities'
    """
    assert_valid_string(text, "text")
    assert_string_sequence(stop_words, "stop_words")
    stop = {word.lower() for word in stop_words}

    words = text.split(" ")
    if not smart:
        return " ".join(capitalize(word) for word in words)

    last = len(words) - 1
    result: list[str] = []
    for index, word in enumerate(words):
        if 0 < index < last and word.lower() in stop:
            result.append(word.lower())
        else:
            result.append(capitalize(word))
    return " ".join(result)


def camel_case(text: str) -> str:
    """``"hello-world"`` → ``"helloWorld"``.

    The whole string is lowercased, then each run of non-alphanumerics is
    dropped and the character after it uppercased.  A leading separator
    run therefore uppercases the first letter (``"-foo"`` → ``"Foo"``).
    """
    assert_valid_string(text, "text")
    return _CAMEL_SEPARATOR.sub(lambda match: match.group(1).upper(), text.lower())


def kebab_case(text: str) -> str:
    """``"HelloWorld"`` → ``"hello-world"``; whitespace/underscore runs become one hyphen."""
    assert_valid_string(text, "text")
    result = _LOWER_UPPER.sub(r"\1-\2", text)
    result = _KEBAB_SEPARATOR.sub("-", result)
    return result.lower()


def snake_case(text: str) -> str:
    """``"HelloWorld"`` → ``"hello_world"``; whitespace/hyphen runs become one underscore."""
    assert_valid_string(text, "text")
    result = _LOWER_UPPER.sub(r"\1_\2", text)
    result = _SNAKE_SEPARATOR.sub("_", result)
    return result.lower()


def pascal_case(text: str) -> str:
    """``"hello_world"`` → ``"HelloWorld"``.

    Existing capitals inside a word are kept (``"XMLHttp"`` stays
    ``"XMLHttp"``) since each word is only capitalized, not lowercased.
    """
    assert_valid_string(text, "text")
    spaced = _LOWER_UPPER.sub(r"\1 \2", text)
    spaced = _NON_ALNUM.sub(" ", spaced).strip()
    return "".join(capitalize(word) for word in spaced.split())


__all__ = [
    "STOP_WORDS",
    "camel_case",
    "capitalize",
    "kebab_case",
    "pascal_case",
    "snake_case",
    "title",
]
