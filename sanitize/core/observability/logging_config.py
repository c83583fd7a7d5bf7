"""
Logging configuration for the sanitize CLI.

Most of what the user sees on stderr (skipped profiles, unknown shells)
is a WARNING record, so the default console format is the bare message.
``--verbose``/``--debug`` switch to formats that say where a record
came from.

Level precedence:
    --debug  >  --verbose  >  --quiet  >  $SANITIZE_LOG_LEVEL  >  WARNING

$SANITIZE_LOG_FILE adds a file handler, at $SANITIZE_LOG_FILE_LEVEL or
the console level.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

LEVEL_ENV_VAR = "SANITIZE_LOG_LEVEL"
FILE_ENV_VAR = "SANITIZE_LOG_FILE"
FILE_LEVEL_ENV_VAR = "SANITIZE_LOG_FILE_LEVEL"

# (highest level the format applies to, format, datefmt); first match wins
_CONSOLE_FORMATS: tuple[tuple[int, str, str | None], ...] = (
    (logging.DEBUG, "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d: %(message)s", "%H:%M:%S"),
    (logging.INFO, "%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
    (logging.CRITICAL, "%(message)s", None),
)

_FILE_FORMAT = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d %(message)s"
_FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"


def resolve_level(
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Pick the console level name from the CLI flags and environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    environ = os.environ if environ is None else environ
    return environ.get(LEVEL_ENV_VAR) or "WARNING"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Replace the root logger's handlers with ours.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path of a log file to append to.
        log_file_level: Level for the file; defaults to ``level``.
    """
    console_level = _parse_level(level)
    handlers: list[logging.Handler] = [_console_handler(console_level)]

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        handlers.append(_file_handler(log_file, file_level))

    root = logging.getLogger()
    root.handlers.clear()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(min(h.level for h in handlers))

    logging.raiseExceptions = False


def setup_logging_from_env(
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    environ: Mapping[str, str] | None = None,
) -> None:
    """``setup_logging`` with every setting taken from flags and environment."""
    environ = os.environ if environ is None else environ
    setup_logging(
        level=resolve_level(debug, verbose, quiet, environ),
        log_file=environ.get(FILE_ENV_VAR),
        log_file_level=environ.get(FILE_LEVEL_ENV_VAR),
    )


def flush_logging() -> None:
    """Flush every root handler; exec replaces the process without cleanup."""
    for handler in logging.getLogger().handlers:
        handler.flush()


def _console_handler(level: int) -> logging.Handler:
    fmt, datefmt = next(
        (fmt, datefmt) for ceiling, fmt, datefmt in _CONSOLE_FORMATS if level <= ceiling
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    return handler


def _file_handler(path: str, level: int) -> logging.Handler:
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_FILE_DATEFMT))
    return handler


def _parse_level(level: str | None) -> int:
    """Convert a level name to its numeric value, WARNING if unknown."""
    numeric = logging.getLevelName(level.upper()) if level else None
    return numeric if isinstance(numeric, int) else logging.WARNING
