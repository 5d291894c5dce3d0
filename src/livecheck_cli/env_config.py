"""Environment-backed configuration.

Every value is read from ``os.environ`` at call time so that tests can use
``monkeypatch.setenv`` without reloading modules.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

WATCHLIST_ENV = "HOMEBREW_LIVECHECK_WATCHLIST"
AUTOBUMP_ENV = "HOMEBREW_LIVECHECK_AUTOBUMP"
PREFIX_ENV = "HOMEBREW_PREFIX"

DEFAULT_WATCHLIST = "~/.homebrew/livecheck_watchlist.txt"
DEFAULT_PREFIX = "/opt/homebrew"

_FALSY = {"", "0", "false", "no", "off", "nil"}


def _env(env: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return os.environ if env is None else env


def env_flag(name: str, env: Optional[Mapping[str, str]] = None) -> bool:
    """Return True when ``name`` is set to something other than a falsy word."""
    value = _env(env).get(name)
    if value is None:
        return False
    return value.strip().lower() not in _FALSY


def livecheck_watchlist(env: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Raw watchlist override from the environment (``None`` when unset)."""
    value = _env(env).get(WATCHLIST_ENV)
    return value if value and value.strip() else None


def watchlist_path(env: Optional[Mapping[str, str]] = None) -> Path:
    """Resolve the watchlist location: env override or the dotfile default.

    ``~`` is expanded and the result is made absolute.
    """
    raw = livecheck_watchlist(env) or DEFAULT_WATCHLIST
    return Path(os.path.abspath(os.path.expanduser(raw)))


def livecheck_autobump(env: Optional[Mapping[str, str]] = None) -> bool:
    return env_flag(AUTOBUMP_ENV, env)


def homebrew_prefix(env: Optional[Mapping[str, str]] = None) -> Path:
    raw = _env(env).get(PREFIX_ENV) or DEFAULT_PREFIX
    return Path(os.path.expanduser(raw))


__all__ = [
    "WATCHLIST_ENV",
    "AUTOBUMP_ENV",
    "PREFIX_ENV",
    "DEFAULT_WATCHLIST",
    "DEFAULT_PREFIX",
    "env_flag",
    "livecheck_watchlist",
    "watchlist_path",
    "livecheck_autobump",
    "homebrew_prefix",
]
