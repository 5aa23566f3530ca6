"""
Base types for drill definitions.

A Drill is a named activity template that belongs to one focus. Its
tailoring rule is a tag, not a callable, so drill data can live in YAML
and every rule is dispatched through one function in core.tailoring.
"""

from dataclasses import dataclass
from enum import Enum


class TailoringRule(str, Enum):
    """How a drill's description adapts to the number of players."""

    NONE = "none"
    PAIRING = "pairing"
    MIN_GROUP_THRESHOLD = "min_group_threshold"
    LARGE_GROUP_MATCH_SPLIT = "large_group_match_split"
    LARGE_GROUP_LINE_PREFIX = "large_group_line_prefix"
    ALWAYS_ROTATION_NOTE = "always_rotation_note"
    TEAM_SPLIT_THRESHOLD = "team_split_threshold"


@dataclass(frozen=True)
class Drill:
    """One drill template within a focus."""

    name: str          # e.g. "Warm-up: Passing in Pairs"
    description: str   # Base description, used as-is when no player count is given
    tailoring: TailoringRule = TailoringRule.NONE
