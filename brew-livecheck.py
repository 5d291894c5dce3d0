#!/usr/bin/env python3
"""Launcher for running brew-livecheck straight from a source checkout.

Prefers the installed ``livecheck_cli`` package; when it is not importable
(running the repository directly), the local ``./src`` directory is added to
``sys.path`` and the import is retried.
"""

import importlib
import sys
from pathlib import Path


def _load_main_flow():
    try:
        from livecheck_cli import main_flow as _main_flow  # type: ignore

        return _main_flow
    except ImportError:
        pass

    _src = Path(__file__).resolve().parent / "src"
    if _src.exists() and str(_src) not in sys.path:
        sys.path.insert(0, str(_src))
    return importlib.import_module("livecheck_cli.main_flow")


_main_flow = _load_main_flow()

main = _main_flow.main
run = _main_flow.run
get_version = _main_flow.get_version


if __name__ == "__main__":
    sys.exit(main())
