import argparse
import logging
from pathlib import Path

import pytest

from livecheck_cli.args import build_parser


def write_tap(prefix: Path, name: str, formulae=(), casks=(), autobump=()) -> Path:
    """Create a tap under ``prefix`` with empty formula and cask definitions."""
    user, repo = name.split("/")
    root = prefix / "Library" / "Taps" / user / f"homebrew-{repo}"
    (root / "Formula").mkdir(parents=True, exist_ok=True)
    (root / "Casks").mkdir(parents=True, exist_ok=True)
    for formula in formulae:
        (root / "Formula" / f"{formula}.rb").write_text(
            f'class {formula.title().replace("-", "")} < Formula\nend\n',
            encoding="utf-8",
        )
    for cask in casks:
        (root / "Casks" / f"{cask}.rb").write_text(
            f'cask "{cask}" do\nend\n', encoding="utf-8"
        )
    if autobump:
        (root / ".github").mkdir(exist_ok=True)
        (root / ".github" / "autobump.txt").write_text(
            "\n".join(autobump) + "\n", encoding="utf-8"
        )
    return root


def install(prefix: Path, *, formulae=(), casks=()) -> None:
    for formula in formulae:
        (prefix / "Cellar" / formula / "1.0").mkdir(parents=True, exist_ok=True)
    for cask in casks:
        (prefix / "Caskroom" / cask / "1.0").mkdir(parents=True, exist_ok=True)


@pytest.fixture
def prefix(tmp_path):
    root = tmp_path / "prefix"
    root.mkdir()
    return root


@pytest.fixture
def env(tmp_path, prefix):
    return {
        "HOMEBREW_PREFIX": str(prefix),
        "HOMEBREW_LIVECHECK_WATCHLIST": str(tmp_path / "watchlist.txt"),
    }


@pytest.fixture
def make_args():
    """Build a Namespace the way the CLI would, without validation."""

    def _make(*argv: str) -> argparse.Namespace:
        return build_parser().parse_args(list(argv))

    return _make


class RecordingEngine:
    def __init__(self):
        self.calls = []

    def run_checks(self, candidates, **options):
        self.calls.append((list(candidates), options))


@pytest.fixture
def engine():
    return RecordingEngine()


@pytest.fixture(autouse=True)
def _isolate(monkeypatch):
    monkeypatch.delenv("HOMEBREW_LIVECHECK_AUTOBUMP", raising=False)
    monkeypatch.delenv("HOMEBREW_LIVECHECK_WATCHLIST", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    yield
    logger = logging.getLogger()
    for h in list(logger.handlers):
        if getattr(h, "_added_by_configure_logging", False):
            logger.removeHandler(h)
            h.close()
