"""
Data models for drill-planner.

Requests validate their own fields on construction; activities and
responses are produced fresh by the composer for each request.
"""

from dataclasses import dataclass

from .errors import InvalidRequestError


def check_request_fields(
    focus: str,
    total_duration_minutes: int,
    number_of_players: int | None,
) -> None:
    """
    Validate the semantic shape of a plan request.

    Raises:
        InvalidRequestError: On a blank focus, a non-positive duration
            or a non-positive player count
    """
    if not isinstance(focus, str) or not focus.strip():
        raise InvalidRequestError("focus", focus, "Focus cannot be empty.")
    if total_duration_minutes <= 0:
        raise InvalidRequestError(
            "total_duration_minutes",
            total_duration_minutes,
            "Duration must be a positive number.",
        )
    if number_of_players is not None and number_of_players <= 0:
        raise InvalidRequestError(
            "number_of_players",
            number_of_players,
            "Number of players must be a positive number.",
        )


@dataclass(frozen=True)
class SessionPlanRequest:
    """A request to compose one coaching session."""

    focus: str
    total_duration_minutes: int
    time_breakdown: str  # e.g. "25/50/25"
    number_of_players: int | None = None

    def __post_init__(self) -> None:
        """Validate request data."""
        check_request_fields(
            self.focus, self.total_duration_minutes, self.number_of_players
        )


@dataclass(frozen=True)
class Activity:
    """A tailored, timed drill within a composed session."""

    name: str
    description: str
    duration_minutes: int

    def __post_init__(self) -> None:
        if self.duration_minutes < 0:
            raise ValueError("duration_minutes must be non-negative")


@dataclass(frozen=True)
class SessionResponse:
    """
    A composed session plan.

    focus and total_duration_minutes are echoed from the request.
    Activities keep the catalog order of the focus.
    """

    focus: str
    total_duration_minutes: int
    activities: tuple[Activity, ...]

    @property
    def allocated_minutes(self) -> int:
        """Sum of activity durations; may differ from the requested total by rounding."""
        return sum(a.duration_minutes for a in self.activities)
