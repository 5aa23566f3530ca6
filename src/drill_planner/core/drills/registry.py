"""
Drill catalog.

A DrillCatalog maps a focus key (e.g. "passing") to its ordered drills.
It is built once, normally with load_catalog() at startup, and then
handed to the PlanComposer.  Nothing can mutate it after construction,
so one instance can be shared by any number of callers.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from pathlib import Path
from types import MappingProxyType

from ..errors import UnknownFocusError
from .base import Drill


class DrillCatalog:
    """Read-only registry of drills per focus."""

    def __init__(self, focuses: Mapping[str, Sequence[Drill]]) -> None:
        normalized: dict[str, tuple[Drill, ...]] = {}
        for key, drills in focuses.items():
            norm = key.strip().lower()
            if norm in normalized:
                raise ValueError(f"Duplicate focus key '{norm}'")
            normalized[norm] = tuple(drills)
        self._focuses = MappingProxyType(normalized)

    @property
    def focuses(self) -> tuple[str, ...]:
        """Supported focus keys, in registration order."""
        return tuple(self._focuses)

    def lookup(self, focus: str) -> tuple[Drill, ...]:
        """
        Return the ordered drills for a focus.

        Args:
            focus: Focus name, matched case-insensitively

        Returns:
            Drills in session order

        Raises:
            UnknownFocusError: If the focus is not in the catalog
        """
        drills = self._focuses.get(focus.lower())
        if drills is None:
            raise UnknownFocusError(focus, self.focuses)
        return drills

    def __contains__(self, focus: object) -> bool:
        return isinstance(focus, str) and focus.lower() in self._focuses

    def __iter__(self) -> Iterator[str]:
        return iter(self._focuses)

    def __len__(self) -> int:
        return len(self._focuses)


def load_catalog(
    bundled_dir: Path | None = None,
    user_dir: Path | None = None,
) -> DrillCatalog:
    """
    Build a DrillCatalog from the bundled YAML files plus user overrides.

    Raises:
        RuntimeError: If no focus definitions could be loaded at all
    """
    from .loader import load_focuses_from_yaml

    loaded = load_focuses_from_yaml(bundled_dir=bundled_dir, user_dir=user_dir)
    if not loaded:
        raise RuntimeError(
            "drill-planner: no focus definitions could be loaded from YAML. "
            "Check that src/drill_planner/focuses/*.yaml files are present and valid."
        )
    return DrillCatalog(loaded)
