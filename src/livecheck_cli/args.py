"""Argument parsing and validation.

Option groups are attached from ``argsets/``. After parsing, an explicit
validation pass checks mutually exclusive flags and returns a
:class:`ConfigurationError` describing the first conflict, before any
selection logic runs.
"""

from __future__ import annotations
import argparse
import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

DESCRIPTION = (
    "Check for newer versions of formulae and/or casks from upstream. "
    "If no formula or cask argument is passed, the list of formulae and "
    "casks to check is taken from $HOMEBREW_LIVECHECK_WATCHLIST or "
    "~/.homebrew/livecheck_watchlist.txt."
)

# Each entry lists option dests of which at most one may be given.
CONFLICTS: Tuple[Tuple[str, ...], ...] = (
    ("debug", "json"),
    ("tap", "eval_all", "installed"),
    ("cask", "formula"),
    ("formula", "extract_plist"),
)

_OPTION_NAMES = {
    "debug": "--debug",
    "json": "--json",
    "tap": "--tap",
    "eval_all": "--eval-all",
    "installed": "--installed",
    "cask": "--cask",
    "formula": "--formula",
    "extract_plist": "--extract-plist",
}


@dataclass(frozen=True)
class ConfigurationError:
    """A conflict between parsed options."""

    options: Tuple[str, ...]
    message: str


def _is_set(ns: argparse.Namespace, dest: str) -> bool:
    value = getattr(ns, dest, None)
    if dest == "tap":
        return value is not None
    return bool(value)


def validate_args(ns: argparse.Namespace) -> Optional[ConfigurationError]:
    """Return the first flag conflict in ``ns``, or ``None`` when valid."""
    for group in CONFLICTS:
        given = tuple(dest for dest in group if _is_set(ns, dest))
        if len(given) > 1:
            names = [_OPTION_NAMES.get(d, d) for d in given]
            return ConfigurationError(
                options=given,
                message="Options " + " and ".join(names) + " are mutually exclusive.",
            )
    return None


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="brew-livecheck",
        description=DESCRIPTION,
    )
    from .argsets import (
        add_general_args as _add_general_args,
        add_selection_args as _add_selection_args,
        add_output_args as _add_output_args,
    )

    _add_selection_args(p)
    _add_output_args(p)
    _add_general_args(p)
    return p


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse and validate command-line arguments.

    Conflicting options are reported through ``parser.error`` (exit code 2).
    """
    p = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    ns = p.parse_args(list(argv))
    problem = validate_args(ns)
    if problem is not None:
        p.error(problem.message)
    return ns


def named_args(ns: argparse.Namespace) -> List[str]:
    return [n for n in (getattr(ns, "named", None) or []) if n.strip()]


__all__ = [
    "CONFLICTS",
    "ConfigurationError",
    "validate_args",
    "build_parser",
    "parse_args",
    "named_args",
]
