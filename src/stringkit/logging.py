"""Logging for stringkit.

The package only emits DEBUG records, one per rejected argument, on the
``"stringkit"`` logger.  As a library it installs nothing but a
:class:`logging.NullHandler` at import; records propagate to whatever the
application configured on the root logger.

Applications without their own logging setup can opt in:

* :func:`enable_stderr_logging` prints stringkit records to stderr and
  stops propagation, so a configured root logger does not print them twice.
* :func:`configure_file_logging` adds a timestamped file under ``logs/``.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path

logger = logging.getLogger("stringkit")
logger.addHandler(logging.NullHandler())

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

DEFAULT_LOG_DIR = "logs"


def _attach(new_handler: logging.Handler, level: int) -> None:
    new_handler.setLevel(level)
    new_handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_LOG_DATEFMT))
    # NOTSET defers to the root level, which would hide DEBUG rejections
    if logger.level == logging.NOTSET or level < logger.level:
        logger.setLevel(level)
    logger.addHandler(new_handler)


def enable_stderr_logging(level: int = logging.DEBUG) -> logging.StreamHandler:
    """Print stringkit records at *level* and above to stderr.

    Propagation to the root logger is turned off while the handler is
    attached.  Pass the returned handler to :func:`disable_logging_handler`
    to undo both.
    """
    stream_handler = logging.StreamHandler(sys.stderr)
    _attach(stream_handler, level)
    logger.propagate = False
    return stream_handler


def configure_file_logging(
    log_dir: str = DEFAULT_LOG_DIR,
    *,
    level: int = logging.DEBUG,
) -> logging.FileHandler:
    """Write stringkit records to ``<log_dir>/stringkit_<timestamp>.log``.

    Creates ``log_dir`` if needed.  Propagation is left alone, so this is
    additive to any stderr or root output.
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y-%m-%dT%H-%M-%S")
    file_handler = logging.FileHandler(
        str(log_path / f"stringkit_{timestamp}.log"), encoding="utf-8"
    )
    _attach(file_handler, level)
    return file_handler


def disable_logging_handler(added: logging.Handler) -> None:
    """Detach and close a handler added by one of the ``enable``/``configure`` calls.

    Once no opt-in handler remains, the logger goes back to its import-time
    state: no level of its own and propagating to root.
    """
    logger.removeHandler(added)
    added.close()
    if all(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.setLevel(logging.NOTSET)
        logger.propagate = True


__all__ = [
    "configure_file_logging",
    "disable_logging_handler",
    "enable_stderr_logging",
    "logger",
]
