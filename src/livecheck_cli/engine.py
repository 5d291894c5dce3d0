"""Checking engine contract and the default listing engine.

The selection pipeline only needs ``run_checks(candidates, **options)``.
:class:`ListingEngine` fulfils it without any network access by reporting
which formulae and casks would be checked.
"""

from __future__ import annotations

import json
import sys
from typing import Optional, Protocol, Sequence, TextIO

from .units import Candidate


class CheckingEngine(Protocol):
    def run_checks(self, candidates: Sequence[Candidate], **options: bool) -> None:
        ...


class ListingEngine:
    """Print the units that would be checked.

    Honors ``json`` (machine-readable list) and ``full_name`` (tap-qualified
    identifiers). Other options are accepted and ignored.
    """

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self.out = out

    def run_checks(self, candidates: Sequence[Candidate], **options: bool) -> None:
        out = self.out or sys.stdout
        full_name = options.get("full_name", False)
        if options.get("json", False):
            payload = [
                {candidate.kind.value: _label(candidate, full_name)}
                for candidate in candidates
            ]
            out.write(json.dumps(payload, indent=2) + "\n")
            return
        for candidate in candidates:
            out.write(_label(candidate, full_name) + "\n")


def _label(candidate: Candidate, full_name: bool) -> str:
    return candidate.full_name if full_name else candidate.canonical_identifier()


__all__ = ["CheckingEngine", "ListingEngine"]
