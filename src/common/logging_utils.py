"""Centralized logging setup and structured DEBUG helpers.

Every module obtains its own ``logging.getLogger(__name__)``; only the CLI
entry point calls :func:`configure_logging`. Structured fields are passed
through ``extra=extra_context(...)`` so handlers can render or ship them.
"""
from __future__ import annotations

import logging
import os
import time
from typing import Any, Dict, Optional

from constants import Constants


def _resolve_level(level: Optional[str]) -> int:
    name = (level or os.environ.get(Constants.ENV_LOG_LEVEL) or Constants.DEFAULT_LOG_LEVEL).upper()
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: Optional[str] = None, logfile: Optional[str] = None, quiet: bool = False) -> None:
    """Configure the root logger once for CLI use.

    Args:
        level: Level name; falls back to $PROJGRAMMAR_LOG_LEVEL, then INFO.
        logfile: Optional path that receives log records instead of stderr.
        quiet: Suppress console output entirely.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    if logfile:
        handler: logging.Handler = logging.FileHandler(logfile, encoding="utf-8")
    elif quiet:
        handler = logging.NullHandler()
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(_resolve_level(level))


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when DEBUG records would be emitted by ``logger``."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build the ``extra`` mapping for a structured log record.

    None values are dropped so records stay compact.
    """
    return {k: v for k, v in fields.items() if v is not None}


class Timer:
    """Context manager measuring wall-clock duration in milliseconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self._end = time.perf_counter()

    def duration_ms(self) -> int:
        """Elapsed milliseconds so far (or total once the block exited)."""
        end = self._end if self._end is not None else time.perf_counter()
        return int((end - self._start) * 1000)
