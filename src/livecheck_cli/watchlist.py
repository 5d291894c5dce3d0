"""Watchlist file reader.

The watchlist is plain text with one formula or cask identifier per line.
Lines starting with ``#`` and blank lines are ignored; surrounding whitespace
is trimmed and the remaining order is preserved.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from .logging_utils import log_event
from .ui import warn


def parse_watchlist(lines: Iterable[str]) -> List[str]:
    """Return the identifiers listed in ``lines``, in order."""
    return [
        line.strip()
        for line in lines
        if not line.startswith("#") and line.strip()
    ]


def read_watchlist(path: Path) -> List[str]:
    """Read and parse the watchlist at ``path``.

    Any read failure (including the file disappearing between the existence
    check and this call) is reported and yields an empty list; it never
    aborts the run.
    """
    try:
        with open(path, encoding="utf-8") as fh:
            return parse_watchlist(fh)
    except (OSError, UnicodeDecodeError) as e:
        warn(f"{e}")
        log_event(
            "watchlist_read_failed",
            level=logging.DEBUG,
            message=f"Could not read watchlist {path}: {e}",
            path=str(path),
            error_type=type(e).__name__,
        )
        return []


__all__ = ["parse_watchlist", "read_watchlist"]
