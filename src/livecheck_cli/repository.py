"""Filesystem view of a Homebrew-style prefix.

Layout understood here:
 - taps under ``Library/Taps/<user>/homebrew-<repo>`` holding ``Formula/``
   and ``Casks/`` directories of ``*.rb`` definitions
 - installed formulae as directories under ``Cellar/``
 - installed casks as directories under ``Caskroom/``

A unit's identifier is the stem of its definition file. Nothing is evaluated;
the repository only enumerates and looks things up.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from .errors import InvalidTapError
from .logging_utils import log_event
from .units import CORE_TAPS, Candidate, Cask, Formula, Tap

_TAP_PART = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.-]*$")


class Repository:
    """Enumerates and resolves formulae and casks below ``prefix``."""

    def __init__(self, prefix: Path) -> None:
        self.prefix = Path(prefix)

    @property
    def taps_dir(self) -> Path:
        return self.prefix / "Library" / "Taps"

    @property
    def cellar(self) -> Path:
        return self.prefix / "Cellar"

    @property
    def caskroom(self) -> Path:
        return self.prefix / "Caskroom"

    # Taps

    def tap_path(self, name: str) -> Path:
        user, repo = _split_tap_name(name)
        return self.taps_dir / user / f"homebrew-{repo}"

    def fetch_tap(self, name: str) -> Tap:
        """Return the tap called ``user/repo``.

        Raises :class:`InvalidTapError` when the name is malformed or the tap
        is not present under the prefix.
        """
        user, repo = _split_tap_name(name)
        path = self.tap_path(name)
        if not path.is_dir():
            raise InvalidTapError(name, f"{path} does not exist")
        return Tap(f"{user}/{repo}", path)

    def taps(self) -> List[Tap]:
        """All installed taps, core taps first, the rest by name."""
        found: List[Tap] = []
        if not self.taps_dir.is_dir():
            return found
        for user_dir in sorted(p for p in self.taps_dir.iterdir() if p.is_dir()):
            for repo_dir in sorted(p for p in user_dir.iterdir() if p.is_dir()):
                if not repo_dir.name.startswith("homebrew-"):
                    continue
                repo = repo_dir.name[len("homebrew-"):]
                found.append(Tap(f"{user_dir.name.lower()}/{repo.lower()}", repo_dir))
        return sorted(found, key=_tap_order)

    # Loading

    def load_formula(self, path: Path, tap: Optional[Tap] = None) -> Formula:
        return Formula(Path(path).stem, tap or self._tap_for(path), Path(path))

    def load_cask(self, path: Path, tap: Optional[Tap] = None) -> Cask:
        return Cask(Path(path).stem, tap or self._tap_for(path), Path(path))

    def tap_formulae(self, tap: Tap) -> List[Formula]:
        return [self.load_formula(path, tap) for path in tap.formula_files()]

    def tap_casks(self, tap: Tap) -> List[Cask]:
        return [self.load_cask(path, tap) for path in tap.cask_files()]

    def all_formulae(self) -> List[Formula]:
        return [f for tap in self.taps() for f in self.tap_formulae(tap)]

    def all_casks(self) -> List[Cask]:
        return [c for tap in self.taps() for c in self.tap_casks(tap)]

    # Installed units

    def installed_formulae(self) -> List[Formula]:
        """Formulae with a keg in the Cellar that still have a definition."""
        return self._installed(self.cellar, self.find_formula)

    def installed_casks(self) -> List[Cask]:
        return self._installed(self.caskroom, self.find_cask)

    def _installed(self, root: Path, finder) -> list:
        if not root.is_dir():
            return []
        units = []
        for entry in sorted(p for p in root.iterdir() if p.is_dir()):
            unit = finder(entry.name)
            if unit is None:
                log_event(
                    "installed_unit_unavailable",
                    message=f"No definition found for installed {entry.name}.",
                    identifier=entry.name,
                    path=str(entry),
                )
                continue
            units.append(unit)
        return units

    # Lookup

    def find_formula(self, identifier: str) -> Optional[Formula]:
        return self._find(identifier, "Formula", self.load_formula)

    def find_cask(self, identifier: str) -> Optional[Cask]:
        return self._find(identifier, "Casks", self.load_cask)

    def _find(self, identifier: str, subdir: str, loader):
        tap_name, name = _split_identifier(identifier)
        if not name or "/" in name:
            return None
        if tap_name is not None:
            try:
                taps: Sequence[Tap] = [self.fetch_tap(tap_name)]
            except InvalidTapError:
                return None
        else:
            taps = self.taps()
        for tap in taps:
            directory = tap.path / subdir
            if not directory.is_dir():
                continue
            for path in sorted(directory.rglob("*.rb")):
                if path.stem == name and path.is_file():
                    return loader(path, tap)
        return None

    def resolve(self, identifiers: Iterable[str]) -> List[Candidate]:
        """Resolve identifiers to formulae or casks, formula first.

        Unresolvable identifiers are dropped and logged at debug level only.
        """
        resolved: List[Candidate] = []
        for identifier in identifiers:
            unit: Optional[Candidate] = self.find_formula(identifier)
            if unit is None:
                unit = self.find_cask(identifier)
            if unit is None:
                log_event(
                    "identifier_unavailable",
                    level=logging.DEBUG,
                    message=f"No formula or cask named {identifier}; ignoring.",
                    identifier=identifier,
                )
                continue
            resolved.append(unit)
        return resolved

    def _tap_for(self, path: Path) -> Optional[Tap]:
        try:
            rel = Path(path).resolve().relative_to(self.taps_dir.resolve())
        except ValueError:
            return None
        if len(rel.parts) < 2 or not rel.parts[1].startswith("homebrew-"):
            return None
        user, repo_dir = rel.parts[0], rel.parts[1]
        repo = repo_dir[len("homebrew-"):]
        return Tap(f"{user.lower()}/{repo.lower()}", self.taps_dir / user / repo_dir)


def _split_tap_name(name: str):
    parts = (name or "").strip().split("/")
    if len(parts) != 2 or not all(_TAP_PART.match(p) for p in parts):
        raise InvalidTapError(name, "expected <user>/<repo>")
    user, repo = parts
    if repo.startswith("homebrew-"):
        repo = repo[len("homebrew-"):]
    if not repo:
        raise InvalidTapError(name, "expected <user>/<repo>")
    return user.lower(), repo.lower()


def _split_identifier(identifier: str):
    parts = identifier.strip().split("/")
    if len(parts) == 3:
        return f"{parts[0]}/{parts[1]}", parts[2]
    return None, identifier.strip()


def _tap_order(tap: Tap):
    if tap.name in CORE_TAPS:
        return (0, CORE_TAPS.index(tap.name), tap.name)
    return (1, 0, tap.name)


__all__ = ["Repository"]
