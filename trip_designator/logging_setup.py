"""Package logging for ``trip_designator``.

Modules log through ``get_logger("trip_designator.<module>")`` and stay silent
until the host application calls :func:`configure_logging` once at startup.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

_ROOT = "trip_designator"
_LEVEL_ENV = "TRIP_DESIGNATOR_LOG_LEVEL"
_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
_CONFIGURED = False


def _resolve_level(level: int | str | None) -> int:
    if isinstance(level, int):
        return level
    # Explicit name first, then the environment; unknown names are skipped.
    names = logging.getLevelNamesMapping()
    for candidate in (level, os.getenv(_LEVEL_ENV)):
        if not candidate:
            continue
        candidate = candidate.strip().upper()
        if candidate.isdigit():
            return int(candidate)
        if candidate in names:
            return names[candidate]
    return logging.INFO


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] = sys.stderr,
) -> None:
    """Send package log records to ``stream``. Later calls are no-ops.

    ``level`` defaults to ``$TRIP_DESIGNATOR_LOG_LEVEL``, then ``INFO``.
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    root = logging.getLogger(_ROOT)
    for placeholder in [h for h in root.handlers if isinstance(h, logging.NullHandler)]:
        root.removeHandler(placeholder)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt or _FORMAT))
    root.addHandler(handler)
    root.setLevel(_resolve_level(level))
    root.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    root = logging.getLogger(_ROOT)
    if not _CONFIGURED and not root.handlers:
        root.addHandler(logging.NullHandler())
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger"]
