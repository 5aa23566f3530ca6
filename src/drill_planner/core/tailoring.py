"""
Player-count tailoring of drill descriptions.

Each drill carries a TailoringRule tag; tailor() dispatches on it.
All rules are pure functions of (player count, base description).
"""

from collections.abc import Callable

from .config import (
    LINE_SPLIT_THRESHOLD,
    MATCH_SPLIT_THRESHOLD,
    MIN_GROUP_DEFENDERS,
    MIN_GROUP_THRESHOLD,
    TEAM_SPLIT_THRESHOLD,
)
from .drills.base import Drill, TailoringRule


def _pairing(players: int, base: str) -> str:
    if players % 2 == 0:
        pairs = f"With {players} players, form {players // 2} pairs."
    else:
        pairs = (
            f"With {players} players, form {(players - 1) // 2} pairs. "
            "The extra player can work with the coach."
        )
    return f"{pairs} {base}"


def _min_group_threshold(players: int, base: str) -> str:
    if players >= MIN_GROUP_THRESHOLD:
        attackers = players - MIN_GROUP_DEFENDERS
        return (
            f"With {players} players, create a group of {attackers} attackers "
            f"and {MIN_GROUP_DEFENDERS} defenders. If numbers are lower, use one defender."
        )
    return base


def _large_group_match_split(players: int, base: str) -> str:
    # Base description is replaced in both branches.
    if players >= MATCH_SPLIT_THRESHOLD:
        side = players // 2
        return f"A {side}v{side} match with a focus on quick, accurate passing."
    return "A small-sided match. If numbers are low, use one goal and play 'king of the court'."


def _large_group_line_prefix(players: int, base: str) -> str:
    if players > LINE_SPLIT_THRESHOLD:
        return f"With {players} players, form two lines to keep the drill moving quickly. {base}"
    return base


def _always_rotation_note(players: int, base: str) -> str:
    return f"Set up a rotation system to ensure all {players} players get plenty of shots. {base}"


def _team_split_threshold(players: int, base: str) -> str:
    if players >= TEAM_SPLIT_THRESHOLD:
        return f"Divide the {players} players into two teams of {players // 2}. {base}"
    return base


def _no_op(players: int, base: str) -> str:
    return base


_RULES: dict[TailoringRule, Callable[[int, str], str]] = {
    TailoringRule.NONE: _no_op,
    TailoringRule.PAIRING: _pairing,
    TailoringRule.MIN_GROUP_THRESHOLD: _min_group_threshold,
    TailoringRule.LARGE_GROUP_MATCH_SPLIT: _large_group_match_split,
    TailoringRule.LARGE_GROUP_LINE_PREFIX: _large_group_line_prefix,
    TailoringRule.ALWAYS_ROTATION_NOTE: _always_rotation_note,
    TailoringRule.TEAM_SPLIT_THRESHOLD: _team_split_threshold,
}


def tailor(drill: Drill, player_count: int | None, base_description: str) -> str:
    """
    Return the drill description adapted to the number of players.

    Args:
        drill: Drill whose tailoring rule is applied
        player_count: Number of players, or None when unknown
        base_description: Description to adapt (normally drill.description)

    Returns:
        Tailored description; base_description unchanged when player_count is None
    """
    if player_count is None:
        return base_description
    return _RULES[drill.tailoring](player_count, base_description)
