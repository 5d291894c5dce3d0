"""Command flow for ``brew-livecheck``.

``run`` drives the selection pipeline in a fixed order: resolve candidates,
drop autobumped ones, sort, then (after the empty-set check) build options and
dispatch to the checking engine. ``main`` wraps it with argument parsing,
logging setup and exit codes.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Mapping, Optional, Sequence

from importlib.metadata import PackageNotFoundError, version as pkg_version

from . import env_config
from .args import parse_args
from .context import build_context
from .engine import CheckingEngine, ListingEngine
from .errors import LivecheckError
from .logging_utils import configure_logging, log_event
from .repository import Repository
from .selection import (
    build_check_options,
    dispatch,
    filter_autobump,
    has_candidates,
    resolve_candidates,
    sort_candidates,
)
from .ui import err

DIST_NAME = "livecheck-cli"


def get_version() -> str:
    """Installed distribution version, or ``0.0.0+unknown`` from a source tree."""
    try:
        return pkg_version(DIST_NAME)
    except PackageNotFoundError:
        return "0.0.0+unknown"


def run(
    args: argparse.Namespace,
    *,
    repository: Optional[Repository] = None,
    engine: Optional[CheckingEngine] = None,
    env: Optional[Mapping[str, str]] = None,
) -> bool:
    """Select, filter and order candidates, then hand them to ``engine``.

    Returns ``True`` when the engine ran and ``False`` when every candidate
    was skipped as autobumped. Raises :class:`UsageError` when there is
    nothing to select from or nothing selected.
    """
    if args.debug and args.verbose:
        print(args)
        watchlist = env_config.livecheck_watchlist(env)
        if watchlist:
            print(watchlist)

    ctx = build_context(args, env)
    if repository is None:
        repository = Repository(env_config.homebrew_prefix(env))
    if engine is None:
        engine = ListingEngine()

    candidates = resolve_candidates(args, ctx, repository)
    candidates, skipped_autobump = filter_autobump(candidates, ctx)
    candidates = sort_candidates(candidates)
    if not has_candidates(candidates, skipped_autobump=skipped_autobump):
        return False
    options = build_check_options(args)
    dispatch(candidates, options, engine)
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the CLI tool."""
    args = parse_args(argv)
    if args.version:
        print(get_version())
        return 0
    configure_logging(args.verbose, args.debug, args.log_file, args.log_json)
    try:
        run(args)
    except LivecheckError as e:
        err(str(e))
        log_event(
            "usage_error",
            level=logging.DEBUG,
            message=str(e),
            error_type=type(e).__name__,
        )
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
