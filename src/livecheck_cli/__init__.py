"""Select, filter and order formulae and casks for upstream version checks."""

from __future__ import annotations

from .errors import InvalidTapError, LivecheckError, UsageError
from .main_flow import get_version, main, run

__all__ = [
    "InvalidTapError",
    "LivecheckError",
    "UsageError",
    "get_version",
    "main",
    "run",
]
