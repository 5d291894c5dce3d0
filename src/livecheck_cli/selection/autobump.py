"""Exclusion of autobumped formulae and casks."""

from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

from ..context import RunContext
from ..logging_utils import log_event
from ..units import Candidate


def filter_autobump(
    candidates: Iterable[Candidate], ctx: RunContext
) -> Tuple[List[Candidate], bool]:
    """Drop candidates their tap lists as autobumped.

    Returns the kept candidates (input order preserved) and whether anything
    was skipped. A no-op when ``ctx.skip_autobump`` is false. Candidates
    without a tap are always kept.
    """
    if not ctx.skip_autobump:
        return list(candidates), False

    kept: List[Candidate] = []
    skipped = False
    for candidate in candidates:
        tap = candidate.tap
        if tap is None:
            kept.append(candidate)
            continue
        name = candidate.canonical_identifier()
        if name not in ctx.autobump_set(tap):
            kept.append(candidate)
            continue
        log_event(
            "autobump_skipped",
            level=logging.DEBUG,
            message=f"Skipping {name} as it is autobumped in {tap.name}.",
            identifier=name,
            tap=tap.name,
        )
        skipped = True
    return kept, skipped


__all__ = ["filter_autobump"]
