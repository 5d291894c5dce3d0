"""Per-run values shared by the selection pipeline.

A :class:`RunContext` is built once at the start of a run from the parsed
arguments and the environment, threaded explicitly through each stage, and
dropped when the run ends.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, FrozenSet, Mapping, Optional

from . import env_config
from .units import Tap


@dataclass
class RunContext:
    watchlist_path: Path
    skip_autobump: bool = True
    autobump_sets: Dict[str, FrozenSet[str]] = field(default_factory=dict)

    def autobump_set(self, tap: Tap) -> FrozenSet[str]:
        """Return ``tap``'s autobump identifiers, reading them once per run."""
        cached = self.autobump_sets.get(tap.name)
        if cached is None:
            cached = tap.autobump()
            self.autobump_sets[tap.name] = cached
        return cached


def build_context(
    args: argparse.Namespace, env: Optional[Mapping[str, str]] = None
) -> RunContext:
    """Compute the run's context from CLI flags and environment overrides.

    Autobumped units are skipped unless ``--autobump`` is passed or
    ``HOMEBREW_LIVECHECK_AUTOBUMP`` is enabled.
    """
    skip = not (
        bool(getattr(args, "autobump", False)) or env_config.livecheck_autobump(env)
    )
    return RunContext(
        watchlist_path=env_config.watchlist_path(env),
        skip_autobump=skip,
    )


__all__ = ["RunContext", "build_context"]
