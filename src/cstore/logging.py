# topmark:header:start
#
#   project      : CStore
#   file         : logging.py
#   file_relpath : src/cstore/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CStore logging: a TRACE level below DEBUG and colored stderr output.

The library never configures logging on import. Library modules obtain their
logger through `get_logger`; the ``cstore`` CLI and the test suite call
`setup_logging` once. The level comes from the caller or from the
``CSTORE_LOG_LEVEL`` environment variable (a level name or a number).
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from cstore.constants import ENV_LOG_LEVEL

if TYPE_CHECKING:
    from collections.abc import Callable

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

_NAME_TO_LEVEL: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class CstoreLogger(logging.Logger):
    """Logger with a `trace` method for record-level detail."""

    def trace(self, msg: object, *args: object) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(CstoreLogger)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each line by severity."""

    # Highest threshold first; anything below DEBUG is TRACE.
    _STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
        (logging.ERROR, chalk.red),
        (logging.WARNING, chalk.yellow),
        (logging.INFO, chalk.green),
        (logging.DEBUG, chalk.gray),
    )

    def format(self, record: logging.LogRecord) -> str:
        message: str = super().format(record)
        for threshold, style in self._STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.blue(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``CSTORE_LOG_LEVEL``, or None if unset or unknown.

    Accepts a level name (case-insensitive, e.g. ``trace``) or a number.
    """
    raw: str = os.environ.get(ENV_LOG_LEVEL, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    return _NAME_TO_LEVEL.get(raw)


def setup_logging(level: int | None = None) -> None:
    """Route all logging to a single colored stderr handler.

    Args:
        level (int | None): Root log level. When None, ``CSTORE_LOG_LEVEL`` is
            consulted; without it only CRITICAL messages are shown.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)


def get_logger(name: str) -> CstoreLogger:
    """Return the `CstoreLogger` called ``name``."""
    return cast("CstoreLogger", logging.getLogger(name))
