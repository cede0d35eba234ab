"""Odds and ends: regex escaping and common prefixes."""

from __future__ import annotations

import re
from collections.abc import Sequence

from stringkit.validation import assert_string_sequence, assert_valid_string

# Exactly these characters; narrower than re.escape on purpose.
_REGEX_SPECIAL = re.compile(r"[.*+?^${}()|\[\]\\]")


def escape_regexp(text: str) -> str:
    r"""Backslash-escape ``. * + ? ^ $ { } ( ) | [ ] \`` in *text*.

    Everything else, including ``-``, ``/`` and whitespace, is left alone.

    >>> escape_regexp("1+1=2?")
    '1\\+1=2\\?'
    """
    assert_valid_string(text, "text")
    return _REGEX_SPECIAL.sub(r"\\\g<0>", text)


def common_prefix(strings: Sequence[str]) -> str:
    """Return the longest prefix shared by every string in *strings*.

    An empty sequence has an empty prefix.  All elements are validated
    before any comparison is made.

    >>> common_prefix(["interspecies", "interstellar", "interstate"])
    'inters'
    """
    assert_string_sequence(strings, "strings")
    if not strings:
        return ""

    prefix = strings[0]
    for candidate in strings[1:]:
        while prefix and not candidate.startswith(prefix):
            prefix = prefix[:-1]
        if not prefix:
            break
    return prefix


__all__ = ["common_prefix", "escape_regexp"]
