"""Opt-in log output for applications using trello_manager.

The package itself only attaches a ``NullHandler`` to the ``trello_manager``
logger (see ``__init__.py``), so nothing is printed unless the application
configures logging. ``setup_logging`` is a shortcut for doing that.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

LOGGER_NAME = "trello_manager"

# Marks handlers installed by setup_logging so reconfiguring replaces only those
_OWNED = "_trello_manager_owned"


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logging(
    level: int | str = "WARNING",
    log_file: str | None = None,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Send trello_manager log records to stderr (and optionally a file).

    At WARNING only failed calls are shown; DEBUG adds one line per request
    and response. Handlers added by an earlier call are replaced, handlers the
    application attached itself are left alone.

    Args:
        level: Level name ("DEBUG", "warning", ...) or ``logging`` constant
        log_file: Optional path of a file that also receives the records
        stream: Console stream, defaults to ``sys.stderr``

    Returns:
        The configured ``trello_manager`` logger

    Raises:
        ValueError: If ``level`` is not a known level name
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_resolve_level(level))

    for handler in [h for h in logger.handlers if getattr(h, _OWNED, False)]:
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(stream or sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    formatter = logging.Formatter("%(asctime)s %(name)s %(levelname)s: %(message)s")
    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _OWNED, True)
        logger.addHandler(handler)

    # Records are handled here; don't print them twice through the root logger
    logger.propagate = False
    return logger
