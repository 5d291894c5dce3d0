"""Console UI helpers (color and message printers).

Tiny, dependency-free helpers for terminal output:
 - ANSI color codes gated by a conservative capability check
 - Convenience printers for warn/error with consistent prefixes

Colors are only emitted when the target stream is a TTY and ``NO_COLOR`` is unset.
"""

from __future__ import annotations
import os
import sys

RESET = "\033[0m"
RED = "\033[31m"
YELLOW = "\033[33m"


def supports_color(stream=None) -> bool:
    """Return True when ANSI colors are likely supported on ``stream``.

    Honors ``NO_COLOR`` to disable color globally and requires ``stream``
    (default ``sys.stdout``) to be a TTY. Detection errors mean ``False``.
    """
    try:
        if os.environ.get("NO_COLOR"):
            return False
        stream = stream if stream is not None else sys.stdout
        return bool(getattr(stream, "isatty", lambda: False)())
    except Exception:
        return False


def c(s: str, color: str, stream=None) -> str:
    """Wrap ``s`` in ``color`` when the terminal supports it."""
    return f"{color}{s}{RESET}" if supports_color(stream) else s


def warn(msg: str) -> None:
    """Print a warning to stderr prefixed with "Warning:"."""
    print(c("Warning: ", YELLOW, sys.stderr) + msg, file=sys.stderr)


def err(msg: str) -> None:
    """Print an error to stderr prefixed with "Error:"."""
    print(c("Error: ", RED, sys.stderr) + msg, file=sys.stderr)


__all__ = [
    "supports_color",
    "c",
    "warn",
    "err",
    "RESET",
    "RED",
    "YELLOW",
]
