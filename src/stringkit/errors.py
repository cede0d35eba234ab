"""Actionable error hierarchy for stringkit.

Errors are classified by **recovery path**, not by origin.
Each error carries structured guidance for two audiences:
  - The calling code (typed ``error_type`` for routing, ``parameter`` to
    pinpoint the offending argument)
  - The human reading a traceback (``suggestion`` + ``troubleshooting`` steps)

The string functions only ever raise the two concrete kinds,
:class:`InvalidTypeError` and :class:`InvalidArgumentError`.  Both also
subclass the matching built-in (``TypeError`` / ``ValueError``) so callers
that know nothing about this module still catch them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any

SERVICE = "stringkit"

_MISSING = object()


# ---------------------------------------------------------------------------
# Error classification
# ---------------------------------------------------------------------------


class ErrorType(StrEnum):
    """Recovery-path categories — what to *do*, not where it came from."""

    INVALID_TYPE = "invalid_type"
    INVALID_ARGUMENT = "invalid_argument"
    CONFIG = "config"
    PARSE = "parse"


# ---------------------------------------------------------------------------
# Guidance dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Troubleshooting:
    """Sequential, human-readable recovery steps."""

    steps: list[str]

    def to_dict(self) -> dict[str, Any]:
        return {"steps": self.steps}


# ---------------------------------------------------------------------------
# Base actionable error
# ---------------------------------------------------------------------------


@dataclass
class ActionableError(Exception):
    """Structured error with embedded recovery guidance.

    Use the factory classmethods rather than constructing directly —
    they pick the right subclass and word the message consistently.
    """

    error: str
    error_type: ErrorType
    service: str

    success: bool = field(default=False, init=False)
    parameter: str | None = None
    suggestion: str | None = None
    troubleshooting: Troubleshooting | None = None
    context: dict[str, Any] | None = None
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    # Make it work as a real exception
    def __post_init__(self) -> None:
        super().__init__(self.error)

    # -- serialisation -------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Compact JSON-ready dict — ``None`` values are excluded."""
        result: dict[str, Any] = {
            "success": self.success,
            "error": self.error,
            "error_type": self.error_type.value,
            "service": self.service,
            "timestamp": self.timestamp,
        }
        if self.parameter is not None:
            result["parameter"] = self.parameter
        if self.suggestion is not None:
            result["suggestion"] = self.suggestion
        if self.troubleshooting is not None:
            result["troubleshooting"] = self.troubleshooting.to_dict()
        if self.context is not None:
            result["context"] = self.context
        return result

    # -- factory methods -----------------------------------------------------

    @classmethod
    def invalid_type(
        cls,
        parameter: str,
        expected: str,
        value: object,
        *,
        suggestion: str | None = None,
    ) -> InvalidTypeError:
        """An argument is not of the required type."""
        actual = type(value).__name__
        return InvalidTypeError(
            error=f"Invalid type for '{parameter}': expected {expected}, got {actual}",
            error_type=ErrorType.INVALID_TYPE,
            service=SERVICE,
            parameter=parameter,
            suggestion=suggestion or f"Pass a {expected} as '{parameter}'",
            troubleshooting=Troubleshooting(
                steps=[
                    f"1. Check what the caller passes as '{parameter}'",
                    f"2. Convert the value to a {expected} before the call",
                ]
            ),
            context={"expected": expected, "actual": actual},
        )

    @classmethod
    def invalid_argument(
        cls,
        parameter: str,
        reason: str,
        *,
        value: object = _MISSING,
        suggestion: str | None = None,
    ) -> InvalidArgumentError:
        """An argument has the right type but violates a value constraint."""
        context: dict[str, Any] | None = None
        if value is not _MISSING:
            context = {"value": repr(value)}
        return InvalidArgumentError(
            error=f"Invalid value for '{parameter}': {reason}",
            error_type=ErrorType.INVALID_ARGUMENT,
            service=SERVICE,
            parameter=parameter,
            suggestion=suggestion or f"Fix '{parameter}': {reason}",
            troubleshooting=Troubleshooting(
                steps=[
                    f"1. Check the value of '{parameter}'",
                    f"2. Issue: {reason}",
                    "3. Correct and retry",
                ]
            ),
            context=context,
        )

    @classmethod
    def config(
        cls,
        field_name: str,
        reason: str,
        *,
        source: str = "settings",
        suggestion: str | None = None,
    ) -> ActionableError:
        """Missing or unusable settings file; *source* is its path."""
        return cls(
            error=f"Configuration error — {field_name}: {reason}",
            error_type=ErrorType.CONFIG,
            service=source,
            parameter=field_name,
            suggestion=suggestion or f"Fix '{field_name}' in the stringkit settings file",
            troubleshooting=Troubleshooting(
                steps=[
                    f"1. Open {source}",
                    f"2. Locate the '{field_name}' setting",
                    f"3. Fix the issue: {reason}",
                    "4. Save and reload",
                ]
            ),
        )

    @classmethod
    def parse(
        cls,
        source: str,
        raw_error: str,
        *,
        suggestion: str | None = None,
    ) -> ActionableError:
        """Settings file exists but is not valid TOML."""
        return cls(
            error=f"Parse failure in {source}: {raw_error}",
            error_type=ErrorType.PARSE,
            service=source,
            suggestion=suggestion or f"Fix the TOML syntax in {source}",
            troubleshooting=Troubleshooting(
                steps=[
                    f"1. Open {source}",
                    "2. Go to the line and column named in the error",
                    "3. Fix the syntax and reload",
                ]
            ),
        )


class InvalidTypeError(ActionableError, TypeError):
    """A string, number, or sequence of strings was required but not given."""


class InvalidArgumentError(ActionableError, ValueError):
    """Right type, wrong value: negative length, fractional count, bad pad char."""
