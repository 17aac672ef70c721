"""Logging configuration for the ``fxql`` package.

Runtime modules obtain loggers through ``get_logger`` and stay silent until the
CLI entrypoint calls ``configure_logging`` with the configured level.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

_PACKAGE_LOGGER_NAME = "fxql"
_LOG_LEVEL_ENV_VAR = "FXQL_LOG_LEVEL"
_DEFAULT_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
_CONFIGURED = False


def logging_resolve_level(level: int | str | None) -> int:
    """Resolve a numeric log level.

    The explicit value wins, then the ``FXQL_LOG_LEVEL`` environment variable,
    then ``INFO``. Unknown names at either step are skipped.

    Args:
        level: Numeric level, level name, or None.

    Returns:
        int: Numeric logging level.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    for candidate in (level, os.getenv(_LOG_LEVEL_ENV_VAR)):
        resolved_level = _logging_coerce_level(candidate)
        if resolved_level is not None:
            return resolved_level
    return logging.INFO


def _logging_coerce_level(candidate: int | str | None) -> int | None:
    if isinstance(candidate, bool):
        return None
    if isinstance(candidate, int):
        return candidate
    if not isinstance(candidate, str):
        return None

    level_name = candidate.strip().upper()
    if level_name.isdigit():
        return int(level_name)
    resolved_level = logging.getLevelName(level_name) if level_name else None
    return resolved_level if isinstance(resolved_level, int) else None


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Attach one stream handler to the package logger.

    Repeated calls are ignored so the entrypoint and embedded callers cannot
    stack handlers.

    Args:
        level: Level for the package logger, resolved by ``logging_resolve_level``.
        fmt: Optional record format string.
        stream: Output stream, standard error when omitted.

    Returns:
        None: Logging is configured as a side effect.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    resolved_level = logging_resolve_level(level)
    package_logger = logging.getLogger(_PACKAGE_LOGGER_NAME)
    for existing_handler in list(package_logger.handlers):
        if isinstance(existing_handler, logging.NullHandler):
            package_logger.removeHandler(existing_handler)

    stream_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    stream_handler.setLevel(resolved_level)
    stream_handler.setFormatter(logging.Formatter(fmt or _DEFAULT_LOG_FORMAT))

    package_logger.setLevel(resolved_level)
    package_logger.addHandler(stream_handler)
    package_logger.propagate = False
    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a named logger that stays silent until logging is configured."""

    package_logger = logging.getLogger(_PACKAGE_LOGGER_NAME)
    if not _CONFIGURED and not package_logger.handlers:
        package_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
