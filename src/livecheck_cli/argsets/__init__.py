"""Aggregated CLI argument groups (argsets).

Small, focused helpers that attach related groups of arguments to an
``argparse.ArgumentParser`` so ``args.py`` stays minimal.

Public helpers:
  - add_general_args(parser)
  - add_selection_args(parser)
  - add_output_args(parser)
"""

from __future__ import annotations

from .general import add_general_args
from .selection import add_selection_args
from .output import add_output_args

__all__ = [
    "add_general_args",
    "add_selection_args",
    "add_output_args",
]
