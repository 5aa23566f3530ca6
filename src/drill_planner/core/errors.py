"""
Planning errors.

Every failure the planner can report is a local validation failure.
All of them derive from PlanningError, which is a ValueError so callers
can map any of them to a "bad request" outcome in one place.
"""

from collections.abc import Sequence


class PlanningError(ValueError):
    """Base class for all session-plan validation failures."""

    pass


class InvalidRequestError(PlanningError):
    """Raised when a request field is semantically invalid (blank focus, non-positive duration)."""

    def __init__(self, field: str, value: object, reason: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{reason} (got {field}={value!r})")


class UnknownFocusError(PlanningError):
    """Raised when a focus has no entry in the drill catalog."""

    def __init__(self, focus: str, supported: Sequence[str]) -> None:
        self.focus = focus
        self.supported = tuple(supported)
        super().__init__(
            f"Unknown focus area: '{focus}'. "
            f"Supported areas are: {', '.join(self.supported)}"
        )


class InvalidTimeBreakdownFormatError(PlanningError):
    """Raised when a breakdown token is not an integer."""

    def __init__(self, breakdown: str, token: str) -> None:
        self.breakdown = breakdown
        self.token = token
        super().__init__(
            f"Invalid time breakdown format: {token!r} in {breakdown!r} is not a whole number. "
            "Please use numbers separated by '/', e.g. 25/50/25."
        )


class NonPositivePercentageError(PlanningError):
    """Raised when a parsed percentage is zero or negative."""

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(
            f"Time breakdown percentages must be positive numbers, got {value}."
        )


class PercentageSumMismatchError(PlanningError):
    """Raised when the percentages do not add up to 100."""

    def __init__(self, actual_sum: int, expected_sum: int = 100) -> None:
        self.actual_sum = actual_sum
        self.expected_sum = expected_sum
        super().__init__(
            f"Time breakdown percentages must sum to {expected_sum}, got {actual_sum}."
        )


class ActivityCountMismatchError(PlanningError):
    """Raised when the number of percentages differs from the number of drills for a focus."""

    def __init__(self, focus: str, percentage_count: int, drill_count: int) -> None:
        self.focus = focus
        self.percentage_count = percentage_count
        self.drill_count = drill_count
        super().__init__(
            f"Time breakdown parts ({percentage_count}) do not match the number of "
            f"activities for the focus '{focus}' ({drill_count}). "
            f"A session for this focus has {drill_count} parts."
        )
