"""Argument definitions: General flags (verbosity, logging, version)."""

from __future__ import annotations

import argparse


def add_general_args(p: argparse.ArgumentParser) -> None:
    """Attach verbosity and logging arguments to the parser."""
    general = p.add_argument_group("General")
    general.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Display any debugging information",
    )
    general.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Make some output more verbose",
    )
    general.add_argument("--log-file", help="Write logs to a file")
    general.add_argument(
        "--log-json", action="store_true", help="Also log JSON to stdout"
    )
    general.add_argument(
        "-V", "--version", action="store_true", help="Print version and exit"
    )


__all__ = ["add_general_args"]
