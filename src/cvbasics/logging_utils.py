"""Console logging for the cvbasics CLI: status lines on stdout."""

from __future__ import annotations

import logging
import sys
from typing import Optional

LEVEL_NAMES = ("debug", "info", "warning", "error", "critical")

PLAIN_FORMAT = "%(message)s"
DEBUG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def add_logging_args(group) -> None:
    group.add_argument("--log_level", choices=LEVEL_NAMES, default=None)
    group.add_argument("-v", "--verbose", action="count", default=0,
                       help="Show debug details")
    group.add_argument("-q", "--quiet", action="count", default=0,
                       help="Hide status lines (-qq hides warnings too)")


def resolve_log_level(log_level: Optional[str] = None, verbose: int = 0, quiet: int = 0) -> int:
    """Explicit --log_level wins; otherwise INFO shifted by -v / -q."""
    if log_level:
        return getattr(logging, log_level.upper())
    offset = verbose - quiet
    if offset > 0:
        return logging.DEBUG
    return {0: logging.INFO, -1: logging.WARNING}.get(offset, logging.ERROR)


def configure_logging(log_level: Optional[str] = None, verbose: int = 0, quiet: int = 0) -> int:
    level = resolve_log_level(log_level, verbose, quiet)
    root = logging.getLogger()
    if root.handlers:
        # already configured (embedding app, test runner): only adjust the level
        root.setLevel(level)
        return level

    fmt = DEBUG_FORMAT if level <= logging.DEBUG else PLAIN_FORMAT
    logging.basicConfig(level=level, format=fmt, stream=sys.stdout)
    return level
