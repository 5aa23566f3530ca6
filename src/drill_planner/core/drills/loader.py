"""
YAML → Drill loader.

Loads focus definitions from individual YAML files in the bundled
``src/drill_planner/focuses/`` directory.  Each file (e.g. passing.yaml)
holds one focus key and its ordered drill list:

    focus: passing
    drills:
      - name: "Warm-up: Passing in Pairs"
        description: "Players pair up and ..."
        tailoring: pairing

An optional integer ``order`` key sets where the focus is listed;
focuses without one follow, in file-name order.

User overrides: place matching files in ``~/.drill-planner/focuses/``.
A user file is deep-merged over the bundled file with the same name, so
only changed keys need to be listed (a ``drills`` list replaces the
bundled list wholesale).  A user file with no bundled counterpart adds a
new focus.

Usage (internal, called by registry.py):
    from .loader import load_focuses_from_yaml
    focuses = load_focuses_from_yaml()   # {focus: [Drill, ...]}
"""

from __future__ import annotations

import os
import warnings
from pathlib import Path

import yaml

from ..config import FOCUSES_DIRNAME, USER_CONFIG_DIRNAME
from .base import Drill, TailoringRule

_REQUIRED_FOCUS_FIELDS: frozenset[str] = frozenset({"focus", "drills"})

_REQUIRED_DRILL_FIELDS: frozenset[str] = frozenset({"name", "description"})


def drill_from_dict(d: dict) -> Drill:
    """Convert a raw dict (from YAML) to a Drill.

    Raises ValueError if a required field is absent or the tailoring tag is unknown.
    """
    if not isinstance(d, dict):
        raise ValueError(f"drill entry must be a mapping, got {type(d).__name__}")
    missing = _REQUIRED_DRILL_FIELDS - set(d)
    if missing:
        raise ValueError(f"Drill missing fields: {sorted(missing)}")

    raw_rule = d.get("tailoring") or TailoringRule.NONE.value
    try:
        rule = TailoringRule(str(raw_rule).lower())
    except ValueError:
        valid = ", ".join(r.value for r in TailoringRule)
        raise ValueError(
            f"Unknown tailoring rule '{raw_rule}' for drill '{d['name']}'. Valid rules: {valid}"
        ) from None

    return Drill(
        name=str(d["name"]),
        description=str(d["description"]),
        tailoring=rule,
    )


def focus_from_dict(d: dict) -> tuple[str, tuple[Drill, ...]]:
    """Convert a raw focus file dict to (normalized focus key, drills).

    Raises ValueError if a required field is absent or the drill list is empty.
    """
    missing = _REQUIRED_FOCUS_FIELDS - set(d)
    if missing:
        raise ValueError(f"Focus definition missing fields: {sorted(missing)}")

    key = str(d["focus"]).strip().lower()
    if not key:
        raise ValueError("Focus key cannot be empty")

    raw_drills = d["drills"]
    if not isinstance(raw_drills, list) or not raw_drills:
        raise ValueError(f"Focus '{key}' must list at least one drill")

    return key, tuple(drill_from_dict(item) for item in raw_drills)


def _load_yaml_file(path: Path) -> dict:
    """Load a YAML file; return {} and warn if it cannot be parsed."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        warnings.warn(
            f"drill-planner: could not read '{path}' ({exc})",
            stacklevel=2,
        )
        return {}
    return data if isinstance(data, dict) else {}


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base (non-destructive to base)."""
    result = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = _deep_merge(result[k], v)
        else:
            result[k] = v
    return result


def _listing_key(raw: dict, strict: bool = False) -> tuple[int, int]:
    """Sort key for a focus file: explicit ``order`` first, then the rest.

    With strict=True a non-integer ``order`` raises ValueError.
    """
    order = raw.get("order")
    if isinstance(order, int) and not isinstance(order, bool):
        return (0, order)
    if order is not None and strict:
        raise ValueError(f"order must be a whole number, got {order!r}")
    return (1, 0)


def get_bundled_focuses_dir() -> Path | None:
    """Return path to the bundled focuses/ data directory, or None if not found."""
    # loader.py lives at src/drill_planner/core/drills/loader.py
    # three levels up → src/drill_planner/
    candidate = Path(__file__).parent.parent.parent / FOCUSES_DIRNAME
    return candidate if candidate.is_dir() else None


def get_user_focuses_dir() -> Path | None:
    """Return ~/.drill-planner/focuses/ if it exists, else None."""
    home = Path(os.environ.get("HOME", "~")).expanduser()
    p = home / USER_CONFIG_DIRNAME / FOCUSES_DIRNAME
    return p if p.is_dir() else None


def load_focuses_from_yaml(
    bundled_dir: Path | None = None,
    user_dir: Path | None = None,
) -> dict[str, tuple[Drill, ...]]:
    """Return {focus: drills} loaded from per-focus YAML files.

    Args:
        bundled_dir: Directory of bundled focus files (default: package data)
        user_dir: Directory of user overrides (default: ~/.drill-planner/focuses)

    Invalid files are skipped with a warning.  The result may be empty;
    the registry decides whether that is fatal.
    """
    if bundled_dir is None:
        bundled_dir = get_bundled_focuses_dir()
    if user_dir is None:
        user_dir = get_user_focuses_dir()

    # stem → bundled path
    stems: dict[str, Path] = {}
    if bundled_dir is not None:
        for p in sorted(bundled_dir.glob("*.yaml")):
            stems[p.stem] = p

    user_only: list[Path] = []
    if user_dir is not None:
        for p in sorted(user_dir.glob("*.yaml")):
            if p.stem not in stems:
                user_only.append(p)

    raw_focuses: list[tuple[str, dict]] = []
    for stem, bundled_path in stems.items():
        raw = _load_yaml_file(bundled_path)
        if not raw:
            continue
        if user_dir is not None:
            user_path = user_dir / f"{stem}.yaml"
            if user_path.exists():
                user_raw = _load_yaml_file(user_path)
                if user_raw:
                    raw = _deep_merge(raw, user_raw)
        raw_focuses.append((stem, raw))

    for p in user_only:
        raw = _load_yaml_file(p)
        if raw:
            raw_focuses.append((p.stem, raw))

    result: dict[str, tuple[Drill, ...]] = {}
    for stem, raw in sorted(raw_focuses, key=lambda item: _listing_key(item[1])):
        try:
            _listing_key(raw, strict=True)
            key, drills = focus_from_dict(raw)
        except ValueError as exc:
            warnings.warn(
                f"drill-planner: skipping focus '{stem}': {exc}",
                stacklevel=2,
            )
            continue
        result[key] = drills

    return result
