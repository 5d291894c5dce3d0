"""Argument definitions: which formulae and casks to check.

Covers the selection modes (``--tap``, ``--installed``, ``--eval-all``), the
kind restriction (``--formula``/``--cask``), the autobump override and the
positional identifiers. Conflicts between these flags are checked after
parsing by :func:`livecheck_cli.args.validate_args`.
"""

from __future__ import annotations

import argparse


def add_selection_args(p: argparse.ArgumentParser) -> None:
    sel = p.add_argument_group("Selection")
    sel.add_argument(
        "--tap",
        metavar="USER/REPO",
        help="Check formulae and casks within the given tap, specified as <user>/<repo>",
    )
    sel.add_argument(
        "--eval-all",
        action="store_true",
        help="Evaluate all available formulae and casks, whether installed or not, to check them",
    )
    sel.add_argument(
        "--installed",
        action="store_true",
        help="Check formulae and casks that are currently installed",
    )
    sel.add_argument(
        "--formula",
        "--formulae",
        dest="formula",
        action="store_true",
        help="Only check formulae",
    )
    sel.add_argument(
        "--cask",
        "--casks",
        dest="cask",
        action="store_true",
        help="Only check casks",
    )
    sel.add_argument(
        "--autobump",
        action="store_true",
        help="Include packages that are autobumped. By default these are skipped",
    )
    sel.add_argument(
        "named",
        nargs="*",
        metavar="formula|cask",
        help="Formulae or casks to check (tap-qualified names allowed)",
    )


__all__ = ["add_selection_args"]
