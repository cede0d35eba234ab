"""stringkit — small, pure string utilities.

Every public function is importable from the package root::

    from stringkit import slugify, title, truncate
"""

from stringkit.case import (
    STOP_WORDS,
    camel_case,
    capitalize,
    kebab_case,
    pascal_case,
    snake_case,
    title,
)
from stringkit.cleanup import (
    remove_extra_spaces,
    slugify,
    strip_ansi,
    strip_tags,
    trim_lines,
)
from stringkit.errors import (
    ActionableError,
    ErrorType,
    InvalidArgumentError,
    InvalidTypeError,
)
from stringkit.predicates import (
    ends_with_ignore_case,
    includes_ignore_case,
    is_blank,
    starts_with_ignore_case,
)
from stringkit.shape import (
    center,
    lpad,
    repeat_string,
    reverse,
    rpad,
    truncate,
    truncate_words,
)
from stringkit.utils import common_prefix, escape_regexp
from stringkit.validation import assert_valid_string

__version__ = "1.0.0"

__all__ = [
    "STOP_WORDS",
    "ActionableError",
    "ErrorType",
    "InvalidArgumentError",
    "InvalidTypeError",
    "assert_valid_string",
    "camel_case",
    "capitalize",
    "center",
    "common_prefix",
    "ends_with_ignore_case",
    "escape_regexp",
    "includes_ignore_case",
    "is_blank",
    "kebab_case",
    "lpad",
    "pascal_case",
    "remove_extra_spaces",
    "repeat_string",
    "reverse",
    "rpad",
    "slugify",
    "snake_case",
    "starts_with_ignore_case",
    "strip_ansi",
    "strip_tags",
    "title",
    "trim_lines",
    "truncate",
    "truncate_words",
]
