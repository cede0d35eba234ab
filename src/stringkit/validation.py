"""Argument validation shared by every public function.

Each helper raises an :class:`~stringkit.errors.ActionableError` subclass
at the offending argument and logs the rejection at DEBUG.  Public
functions call these first, string arguments in argument order, then
numeric ones, so the first bad argument decides the error and no work is
done before it is raised.
"""

from __future__ import annotations

import math
from typing import NoReturn

from stringkit.errors import ActionableError, InvalidArgumentError, InvalidTypeError
from stringkit.logging import logger


def _reject(err: InvalidTypeError | InvalidArgumentError) -> NoReturn:
    logger.debug("Rejected %s (%s): %s", err.parameter, err.error_type, err.error)
    raise err


def _is_number(value: object) -> bool:
    # bool is an int subclass but never a length
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def assert_valid_string(value: object, parameter_name: str) -> None:
    """Raise :class:`InvalidTypeError` unless *value* is a ``str``.

    The message names *parameter_name* and the type actually received.

    >>> assert_valid_string(42, "text")
    Traceback (most recent call last):
    ...
    stringkit.errors.InvalidTypeError: Invalid type for 'text': expected string, got int
    """
    if not isinstance(value, str):
        _reject(ActionableError.invalid_type(parameter_name, "string", value))


def assert_valid_length(value: object, parameter_name: str) -> int:
    """Validate a target length and return it as an ``int``.

    Any finite, non-negative ``int`` or ``float`` is accepted; floats are
    truncated toward zero.
    """
    if not _is_number(value):
        _reject(ActionableError.invalid_type(parameter_name, "number", value))
    number: float = value  # type: ignore[assignment]
    if isinstance(number, float) and not math.isfinite(number):
        _reject(
            ActionableError.invalid_argument(
                parameter_name, f"must be a finite number, got {number}", value=number
            )
        )
    if number < 0:
        _reject(
            ActionableError.invalid_argument(
                parameter_name, f"must not be negative, got {number}", value=number
            )
        )
    return int(number)


def assert_valid_count(value: object, parameter_name: str) -> int:
    """Validate a repeat/word count: a non-negative whole number.

    Integral floats (``3.0``) are accepted; ``2.5`` is not.
    """
    if not _is_number(value):
        _reject(ActionableError.invalid_type(parameter_name, "integer", value))
    number: float = value  # type: ignore[assignment]
    if isinstance(number, float) and not number.is_integer():
        _reject(
            ActionableError.invalid_argument(
                parameter_name, f"must be a whole number, got {number}", value=number
            )
        )
    if number < 0:
        _reject(
            ActionableError.invalid_argument(
                parameter_name, f"must not be negative, got {number}", value=number
            )
        )
    return int(number)


def assert_valid_pad_char(value: object, parameter_name: str) -> None:
    """A padding character is a string of exactly one character."""
    assert_valid_string(value, parameter_name)
    if len(value) != 1:  # type: ignore[arg-type]
        _reject(
            ActionableError.invalid_argument(
                parameter_name,
                f"must be exactly one character, got {len(value)}",  # type: ignore[arg-type]
                value=value,
            )
        )


def assert_string_sequence(value: object, parameter_name: str) -> None:
    """Require a list or tuple whose every element is a ``str``.

    A bare string is rejected even though it is technically a sequence.
    Bad elements are reported as ``parameter_name[index]``.
    """
    if not isinstance(value, (list, tuple)):
        _reject(ActionableError.invalid_type(parameter_name, "sequence of strings", value))
    for index, item in enumerate(value):  # type: ignore[arg-type]
        assert_valid_string(item, f"{parameter_name}[{index}]")


__all__ = [
    "assert_string_sequence",
    "assert_valid_count",
    "assert_valid_length",
    "assert_valid_pad_char",
    "assert_valid_string",
]
