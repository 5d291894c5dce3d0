"""Selection pipeline stages split into small modules.

Stages run strictly in order: resolve, filter autobumped units, sort, check
that something is left, build options, dispatch.
"""

from __future__ import annotations

from .resolver import NO_SOURCE_MESSAGE, SelectionMode, resolve_candidates, select_mode
from .autobump import filter_autobump
from .sorter import sort_candidates
from .options import build_check_options, handle_name_conflict
from .dispatch import NO_CANDIDATES_MESSAGE, dispatch, has_candidates

__all__ = [
    "NO_SOURCE_MESSAGE",
    "NO_CANDIDATES_MESSAGE",
    "SelectionMode",
    "select_mode",
    "resolve_candidates",
    "filter_autobump",
    "sort_candidates",
    "build_check_options",
    "handle_name_conflict",
    "dispatch",
    "has_candidates",
]
