"""
Logging configuration for generator processes.

Called once by the driver's flag stage, i.e. only when the generator
owns the process (default flag parsing enabled). Embedding programs
that disable flag parsing configure logging themselves.

Levels come from the environment:
    GOGEN_LOG_LEVEL       console level (default WARNING)
    GOGEN_LOG_FILE        optional log file path
    GOGEN_LOG_FILE_LEVEL  optional separate level for the file
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

# ── Format strings ──────────────────────────────────────────────

# WARNING and above: generator output stays clean
_FMT_MINIMAL = "%(message)s"

# INFO: which stage is running
_FMT_VERBOSE = "%(asctime)s [%(name)s] %(message)s"
_DATEFMT_VERBOSE = "%H:%M:%S"

# DEBUG and file output: file:line for every record
_FMT_DEBUG = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_DATEFMT_DEBUG = "%H:%M:%S"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"

LEVEL_ENV = "GOGEN_LOG_LEVEL"
FILE_ENV = "GOGEN_LOG_FILE"
FILE_LEVEL_ENV = "GOGEN_LOG_FILE_LEVEL"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Configure the root logger for a generator run.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to a log file.
        log_file_level: Level for the file handler; defaults to ``level``.
    """
    numeric_level = _parse_level(level)

    if numeric_level <= logging.DEBUG:
        fmt, datefmt = _FMT_DEBUG, _DATEFMT_DEBUG
    elif numeric_level <= logging.INFO:
        fmt, datefmt = _FMT_VERBOSE, _DATEFMT_VERBOSE
    else:
        fmt, datefmt = _FMT_MINIMAL, None

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(numeric_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)

    effective_level = numeric_level

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else numeric_level
        effective_level = min(effective_level, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_DEBUG, datefmt=_DATEFMT_FILE))
        root.addHandler(fh)

    root.setLevel(effective_level)
    logging.raiseExceptions = False


def setup_logging_from_env(environ: Mapping[str, str] | None = None) -> None:
    """Configure logging from the GOGEN_LOG_* variables."""
    env = os.environ if environ is None else environ
    setup_logging(
        level=env.get(LEVEL_ENV, "WARNING"),
        log_file=env.get(FILE_ENV) or None,
        log_file_level=env.get(FILE_LEVEL_ENV) or None,
    )


def _parse_level(level: str | None) -> int:
    """Convert a level name to its numeric value, WARNING if unknown."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
