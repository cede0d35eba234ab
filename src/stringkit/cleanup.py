"""Cleanup transforms — markup, escape codes, whitespace, slugs.

Pure functions with no state; every pattern is compiled once at import.
"""

from __future__ import annotations

import re
import unicodedata

from stringkit.validation import assert_valid_string

# Non-greedy, no nesting; a tag may span lines.
_TAG = re.compile(r"<.*?>", re.DOTALL)

# ESC, optional [ or ], parameter/intermediate bytes, one final byte.
_ANSI = re.compile(r"\x1b[\[\]]?[\x20-\x3f]*[\x40-\x7e]")

_WHITESPACE_RUN = re.compile(r"\s+")
_COMBINING_MARKS = re.compile(r"[\u0300-\u036f]")
_SLUG_UNSAFE = re.compile(r"[^a-z0-9\s-]")
_HYPHEN_RUN = re.compile(r"-+")


def strip_tags(text: str) -> str:
    """Remove anything that looks like ``<...>``.

    This is bracket matching, not HTML parsing: ``"a < b > c"`` loses
    ``"< b >"`` too.
    """
    assert_valid_string(text, "text")
    return _TAG.sub("", text)


def strip_ansi(text: str) -> str:
    """Remove ANSI/VT escape sequences such as colour codes.

    >>> strip_ansi("\\x1b[31mred\\x1b[0m")
    'red'
    """
    assert_valid_string(text, "text")
    return _ANSI.sub("", text)


def trim_lines(text: str) -> str:
    """Strip each ``\\n``-separated line on its own; line count is preserved."""
    assert_valid_string(text, "text")
    return "\n".join(line.strip() for line in text.split("\n"))


def remove_extra_spaces(text: str) -> str:
    """Trim, then collapse every whitespace run (newlines included) to one space."""
    assert_valid_string(text, "text")
    return _WHITESPACE_RUN.sub(" ", text.strip())


def slugify(text: str) -> str:
    """Convert *text* to a lowercase, hyphen-separated, URL-safe slug.

    Lowercases, folds accented letters to their base letter, drops every
    character other than ``a-z``, digits, whitespace and hyphens, trims,
    then collapses whitespace runs and hyphen runs to a single hyphen.

    Only whitespace is trimmed, so hyphens at the edges survive:
    ``slugify("-draft-")`` is ``"-draft-"``.

    >>> slugify("Café déjà vu!")
    'cafe-deja-vu'
    """
    assert_valid_string(text, "text")
    slug = unicodedata.normalize("NFD", text.lower())
    slug = _COMBINING_MARKS.sub("", slug)
    slug = _SLUG_UNSAFE.sub("", slug)
    slug = _WHITESPACE_RUN.sub("-", slug.strip())
    return _HYPHEN_RUN.sub("-", slug)


__all__ = [
    "remove_extra_spaces",
    "slugify",
    "strip_ansi",
    "strip_tags",
    "trim_lines",
]
