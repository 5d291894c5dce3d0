"""Hand the final candidates to the checking engine."""

from __future__ import annotations

from typing import Dict, Sequence

from ..engine import CheckingEngine
from ..errors import UsageError
from ..logging_utils import log_event
from ..units import Candidate

NO_CANDIDATES_MESSAGE = "No formulae or casks to check."


def has_candidates(candidates: Sequence[Candidate], *, skipped_autobump: bool) -> bool:
    """Decide whether there is anything to dispatch.

    An empty sequence is a usage error unless autobump filtering emptied it,
    in which case this returns ``False`` and the run ends successfully.
    """
    if candidates:
        return True
    if not skipped_autobump:
        raise UsageError(NO_CANDIDATES_MESSAGE)
    log_event(
        "nothing_to_check",
        message="All formulae and casks were skipped as autobumped.",
        skipped=True,
    )
    return False


def dispatch(
    candidates: Sequence[Candidate],
    options: Dict[str, bool],
    engine: CheckingEngine,
) -> None:
    """Run the engine exactly once over ``candidates``."""
    log_event(
        "dispatch",
        message=f"Checking {len(candidates)} formulae/casks.",
        count=len(candidates),
    )
    engine.run_checks(list(candidates), **options)


__all__ = ["NO_CANDIDATES_MESSAGE", "has_candidates", "dispatch"]
