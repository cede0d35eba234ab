"""Shared test fixtures.

``write_settings`` writes a TOML settings file under ``tmp_path`` so config
tests never touch a real ``config/`` directory.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


@pytest.fixture
def write_settings(tmp_path: Path) -> Callable[[str], Path]:
    """Return a writer that stores *content* as ``stringkit.toml`` and returns its path."""

    def _write(content: str) -> Path:
        path = tmp_path / "stringkit.toml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write
