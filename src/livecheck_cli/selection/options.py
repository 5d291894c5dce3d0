"""Compile CLI flags into the engine's options record.

The record is sparse: only options that are on are present. A missing key
tells the engine to use its own default, which is not the same as ``False``.
"""

from __future__ import annotations

import argparse
from typing import Dict

# option key -> argparse dest
_DIRECT_OPTIONS = (
    ("json", "json"),
    ("full_name", "full_name"),
    ("check_resources", "resources"),
    ("newer_only", "newer_only"),
    ("extract_plist", "extract_plist"),
    ("quiet", "quiet"),
    ("debug", "debug"),
    ("verbose", "verbose"),
)


def handle_name_conflict(args: argparse.Namespace) -> bool:
    """Name conflicts only matter when both formulae and casks are checked."""
    return not getattr(args, "formula", False) and not getattr(args, "cask", False)


def build_check_options(args: argparse.Namespace) -> Dict[str, bool]:
    options: Dict[str, bool] = {}
    for key, dest in _DIRECT_OPTIONS:
        if getattr(args, dest, None):
            options[key] = True
    if handle_name_conflict(args):
        options["handle_name_conflict"] = True
    return options


__all__ = ["handle_name_conflict", "build_check_options"]
