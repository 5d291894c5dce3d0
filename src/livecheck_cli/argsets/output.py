"""Argument definitions: options forwarded to the checking engine."""

from __future__ import annotations

import argparse


def add_output_args(p: argparse.ArgumentParser) -> None:
    out = p.add_argument_group("Checking")
    out.add_argument(
        "--full-name",
        action="store_true",
        help="Print formulae and casks with fully-qualified names",
    )
    out.add_argument(
        "--newer-only",
        action="store_true",
        help="Show the latest version only if it's newer than the formula/cask",
    )
    out.add_argument(
        "--json", action="store_true", help="Output information in JSON format"
    )
    out.add_argument(
        "-r",
        "--resources",
        action="store_true",
        help="Also check resources for formulae",
    )
    out.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress warnings, don't print a progress bar for JSON output",
    )
    out.add_argument(
        "--extract-plist",
        action="store_true",
        help="Enable checking multiple casks with ExtractPlist strategy",
    )


__all__ = ["add_output_args"]
