"""Trackable units (formulae and casks) and the taps that own them.

Both unit kinds expose the same small surface: ``kind``, ``tap``,
``full_name`` and :meth:`canonical_identifier`, so callers never need to inspect
which kind of object they hold. Instances are immutable for the duration of a
run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import FrozenSet, List, Optional, Union

CORE_TAPS = ("homebrew/core", "homebrew/cask")
AUTOBUMP_FILE = Path(".github") / "autobump.txt"


class Kind(str, Enum):
    FORMULA = "formula"
    CASK = "cask"


@dataclass(frozen=True)
class Tap:
    """A named collection of formulae and casks rooted at ``path``."""

    name: str
    path: Path = field(compare=False)

    @property
    def is_core(self) -> bool:
        return self.name in CORE_TAPS

    @property
    def formula_dir(self) -> Path:
        return self.path / "Formula"

    @property
    def cask_dir(self) -> Path:
        return self.path / "Casks"

    def formula_files(self) -> List[Path]:
        return _ruby_files(self.formula_dir)

    def cask_files(self) -> List[Path]:
        return _ruby_files(self.cask_dir)

    def autobump(self) -> FrozenSet[str]:
        """Identifiers this tap updates automatically.

        Read from ``.github/autobump.txt``; a missing file means none.
        """
        path = self.path / AUTOBUMP_FILE
        if not path.is_file():
            return frozenset()
        with path.open(encoding="utf-8") as fh:
            return frozenset(
                line.strip()
                for line in fh
                if line.strip() and not line.lstrip().startswith("#")
            )

    def __str__(self) -> str:
        return self.name


def _ruby_files(directory: Path) -> List[Path]:
    if not directory.is_dir():
        return []
    return sorted(p for p in directory.rglob("*.rb") if p.is_file())


def _qualified(tap: Optional[Tap], identifier: str) -> str:
    if tap is None or tap.is_core:
        return identifier
    return f"{tap.name}/{identifier}"


@dataclass(frozen=True)
class Formula:
    name: str
    tap: Optional[Tap] = None
    path: Optional[Path] = field(default=None, compare=False)

    kind = Kind.FORMULA

    def canonical_identifier(self) -> str:
        return self.name

    @property
    def full_name(self) -> str:
        return _qualified(self.tap, self.name)


@dataclass(frozen=True)
class Cask:
    token: str
    tap: Optional[Tap] = None
    path: Optional[Path] = field(default=None, compare=False)

    kind = Kind.CASK

    def canonical_identifier(self) -> str:
        return self.token

    @property
    def full_name(self) -> str:
        return _qualified(self.tap, self.token)


Candidate = Union[Formula, Cask]

__all__ = [
    "CORE_TAPS",
    "AUTOBUMP_FILE",
    "Kind",
    "Tap",
    "Formula",
    "Cask",
    "Candidate",
]
