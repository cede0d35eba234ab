"""Boolean checks on strings.

Case-insensitive variants lowercase both operands with :meth:`str.lower`
and compare exactly — no locale rules, no casefolding.
"""

from __future__ import annotations

from stringkit.validation import assert_valid_string


def is_blank(text: str) -> bool:
    """True for ``""`` and for strings made only of whitespace."""
    assert_valid_string(text, "text")
    return not text.strip()


def starts_with_ignore_case(text: str, search: str) -> bool:
    """True if *text* begins with *search*, ignoring case."""
    assert_valid_string(text, "text")
    assert_valid_string(search, "search")
    return text.lower().startswith(search.lower())


def ends_with_ignore_case(text: str, search: str) -> bool:
    """True if *text* ends with *search*, ignoring case."""
    assert_valid_string(text, "text")
    assert_valid_string(search, "search")
    return text.lower().endswith(search.lower())


def includes_ignore_case(text: str, search: str) -> bool:
    """True if *search* occurs anywhere in *text*, ignoring case."""
    assert_valid_string(text, "text")
    assert_valid_string(search, "search")
    return search.lower() in text.lower()


__all__ = [
    "ends_with_ignore_case",
    "includes_ignore_case",
    "is_blank",
    "starts_with_ignore_case",
]
