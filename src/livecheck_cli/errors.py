"""Exception types raised by the livecheck command.

Only :class:`UsageError` is treated as a user-facing, fatal condition by the
CLI entrypoint. Errors raised by collaborators (for example
:class:`InvalidTapError` from the repository) propagate unchanged.
"""

from __future__ import annotations


class LivecheckError(Exception):
    """Base class for errors raised by this package."""


class UsageError(LivecheckError):
    """The command was invoked in a way that leaves nothing to check."""


class InvalidTapError(LivecheckError, ValueError):
    """A tap name is malformed or does not exist under the prefix."""

    def __init__(self, name: str, reason: str = "") -> None:
        self.name = name
        self.reason = reason
        msg = f"Invalid tap name '{name}'"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


__all__ = ["LivecheckError", "UsageError", "InvalidTapError"]
