"""Settings loading and validation.

Applications that want house defaults for the string functions (their
own ellipsis, pad character, or stop-word list) keep them in a
``[stringkit]`` table of a TOML file.  Every field is validated at load
time so a typo surfaces when the app starts, not on the first call that
happens to use it.

The functions themselves never read settings; callers pass the values
through explicitly::

    settings = load_settings()
    truncate(text, 40, ellipsis=settings.ellipsis)
    title(text, settings.smart_titles, stop_words=settings.stop_words)
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

from stringkit.case import STOP_WORDS
from stringkit.errors import ActionableError
from stringkit.logging import logger
from stringkit.shape import ELLIPSIS
from stringkit.validation import (
    assert_string_sequence,
    assert_valid_pad_char,
    assert_valid_string,
)

# ---------------------------------------------------------------------------
# Config dataclass
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Settings:
    """Validated defaults from ``[stringkit]``."""

    ellipsis: str = ELLIPSIS
    pad_char: str = " "
    smart_titles: bool = False
    stop_words: tuple[str, ...] = STOP_WORDS


# ---------------------------------------------------------------------------
# Default settings path
# ---------------------------------------------------------------------------

DEFAULT_SETTINGS_PATH = Path("config/stringkit.toml")

SECTION = "stringkit"


# ---------------------------------------------------------------------------
# Loading and validation
# ---------------------------------------------------------------------------


def load_settings(path: str | Path = DEFAULT_SETTINGS_PATH) -> Settings:
    """Load and validate settings from a TOML file.

    Raises :class:`~stringkit.errors.ActionableError`:
      - CONFIG if the file is missing or ``[stringkit]`` is not a table
      - PARSE if the TOML is malformed
      - INVALID_TYPE / INVALID_ARGUMENT if a field value is unusable

    A file without a ``[stringkit]`` table yields the defaults.
    """
    filepath = Path(path)
    if not filepath.exists():
        raise ActionableError.config(
            field_name="settings_path",
            reason=f"Settings file not found: {filepath}",
            source=str(filepath),
            suggestion=f"Create {filepath} or call load_settings() with another path",
        )

    raw_text = filepath.read_text(encoding="utf-8")
    try:
        data = tomllib.loads(raw_text)
    except tomllib.TOMLDecodeError as exc:
        raise ActionableError.parse(
            source=str(filepath),
            raw_error=str(exc),
        ) from None

    settings = _validate(data, filepath)
    logger.info("Loaded stringkit settings from %s", filepath)
    return settings


def _validate(data: dict[str, object], filepath: Path) -> Settings:
    """Validate raw TOML data and return a Settings instance."""
    section = data.get(SECTION, {})
    if not isinstance(section, dict):
        raise ActionableError.config(
            field_name=SECTION,
            reason=f"[{SECTION}] must be a table, not {type(section).__name__}",
            source=str(filepath),
            suggestion=f"Define [{SECTION}] as a TOML table in {filepath}",
        )

    defaults = Settings()

    ellipsis = section.get("ellipsis", defaults.ellipsis)
    assert_valid_string(ellipsis, f"{SECTION}.ellipsis")

    pad_char = section.get("pad_char", defaults.pad_char)
    assert_valid_pad_char(pad_char, f"{SECTION}.pad_char")

    smart_titles = section.get("smart_titles", defaults.smart_titles)
    if not isinstance(smart_titles, bool):
        raise ActionableError.invalid_type(f"{SECTION}.smart_titles", "boolean", smart_titles)

    stop_words = section.get("stop_words", list(defaults.stop_words))
    assert_string_sequence(stop_words, f"{SECTION}.stop_words")

    return Settings(
        ellipsis=ellipsis,
        pad_char=pad_char,
        smart_titles=smart_titles,
        stop_words=tuple(word.lower() for word in stop_words),
    )


__all__ = ["DEFAULT_SETTINGS_PATH", "Settings", "load_settings"]
