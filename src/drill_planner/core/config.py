"""
Configuration constants for session-plan composition.

All tailoring thresholds and breakdown rules are centralized here.
"""

from typing import Final

# =============================================================================
# TIME BREAKDOWN
# =============================================================================

BREAKDOWN_SEPARATOR: Final[str] = "/"  # e.g. "25/50/25"
PERCENT_TOTAL: Final[int] = 100  # Percentages must add up to exactly this
TOKEN_MIN: Final[int] = -(2**31)  # Tokens outside the signed 32-bit range are malformed
TOKEN_MAX: Final[int] = 2**31 - 1

# =============================================================================
# TAILORING THRESHOLDS (player counts)
# =============================================================================

MIN_GROUP_THRESHOLD: Final[int] = 5  # At or above: split into attackers + defenders
MIN_GROUP_DEFENDERS: Final[int] = 2  # Defenders in the middle once the threshold is met

MATCH_SPLIT_THRESHOLD: Final[int] = 8  # At or above: full NvN match instead of small-sided

LINE_SPLIT_THRESHOLD: Final[int] = 8  # Strictly above: run the warm-up in two lines

TEAM_SPLIT_THRESHOLD: Final[int] = 4  # At or above: two competing teams

# =============================================================================
# USER OVERRIDES
# =============================================================================

USER_CONFIG_DIRNAME: Final[str] = ".drill-planner"  # Under $HOME
FOCUSES_DIRNAME: Final[str] = "focuses"  # Bundled and user drill files live here
