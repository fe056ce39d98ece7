"""Logging for the proxy process: one stdout stream, one line format."""
from __future__ import annotations
import logging
import sys

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"

def resolve_level(level: int | str) -> int:
    """Map a level name such as "debug" to its number; unknown names give INFO."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO

def setup_logging(level: int | str = logging.INFO) -> None:
    """
    Route every logger in the process to stdout.

    Existing root handlers are replaced, so calling this twice does not
    duplicate output.

    Args:
        level: Logging level, as a number or a name such as "DEBUG".
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(resolve_level(level))
