from __future__ import annotations

from typing import Iterable, List

from ..units import Candidate


def sort_candidates(candidates: Iterable[Candidate]) -> List[Candidate]:
    """Stable ascending sort by canonical identifier (name or token)."""
    return sorted(candidates, key=lambda candidate: candidate.canonical_identifier())


__all__ = ["sort_candidates"]
