"""Candidate source resolution.

Exactly one selection mode is chosen per run, first match wins:

1. ``--tap``: the tap's formulae and casks
2. ``--installed``: installed formulae and casks
3. positional identifiers
4. ``--eval-all``: every formula and cask in every tap
5. the watchlist file, when it exists

``--formula``/``--cask`` empty the excluded kind for modes 1, 2 and 4 only.
Named and watchlist identifiers resolve to whatever kind they are, and
identifiers that do not resolve are dropped without error.
"""

from __future__ import annotations

import argparse
from enum import Enum
from typing import List

from ..args import named_args
from ..context import RunContext
from ..errors import UsageError
from ..logging_utils import log_event
from ..repository import Repository
from ..units import Candidate
from ..watchlist import read_watchlist

NO_SOURCE_MESSAGE = (
    "`brew livecheck` with no arguments needs a watchlist file to be present "
    "or `--eval-all` passed!"
)


class SelectionMode(str, Enum):
    TAP = "tap"
    INSTALLED = "installed"
    NAMED = "named"
    EVAL_ALL = "eval_all"
    WATCHLIST = "watchlist"


def select_mode(args: argparse.Namespace, ctx: RunContext) -> SelectionMode:
    """Pick the selection mode for this run.

    Raises :class:`UsageError` when there are no arguments, no mode flag and
    no watchlist file.
    """
    if getattr(args, "tap", None) is not None:
        return SelectionMode.TAP
    if getattr(args, "installed", False):
        return SelectionMode.INSTALLED
    if named_args(args):
        return SelectionMode.NAMED
    if getattr(args, "eval_all", False):
        return SelectionMode.EVAL_ALL
    if ctx.watchlist_path.exists():
        return SelectionMode.WATCHLIST
    raise UsageError(NO_SOURCE_MESSAGE)


def resolve_candidates(
    args: argparse.Namespace, ctx: RunContext, repository: Repository
) -> List[Candidate]:
    """Return the raw, unfiltered candidates for the selected mode."""
    mode = select_mode(args, ctx)
    want_formulae = not getattr(args, "cask", False)
    want_casks = not getattr(args, "formula", False)

    candidates: List[Candidate]
    if mode is SelectionMode.TAP:
        tap = repository.fetch_tap(args.tap)
        formulae = repository.tap_formulae(tap) if want_formulae else []
        casks = repository.tap_casks(tap) if want_casks else []
        candidates = [*formulae, *casks]
    elif mode is SelectionMode.INSTALLED:
        formulae = repository.installed_formulae() if want_formulae else []
        casks = repository.installed_casks() if want_casks else []
        candidates = [*formulae, *casks]
    elif mode is SelectionMode.NAMED:
        candidates = repository.resolve(named_args(args))
    elif mode is SelectionMode.EVAL_ALL:
        formulae = repository.all_formulae() if want_formulae else []
        casks = repository.all_casks() if want_casks else []
        candidates = [*formulae, *casks]
    else:
        names = read_watchlist(ctx.watchlist_path)
        candidates = repository.resolve(names)

    candidates = _unique(candidates)
    log_event(
        "candidates_resolved",
        message=f"Resolved {len(candidates)} formulae/casks from {mode.value}.",
        mode=mode.value,
        count=len(candidates),
    )
    return candidates


def _unique(candidates: List[Candidate]) -> List[Candidate]:
    seen = set()
    out: List[Candidate] = []
    for candidate in candidates:
        key = (candidate.kind, candidate.full_name)
        if key in seen:
            continue
        seen.add(key)
        out.append(candidate)
    return out


__all__ = [
    "NO_SOURCE_MESSAGE",
    "SelectionMode",
    "select_mode",
    "resolve_candidates",
]
