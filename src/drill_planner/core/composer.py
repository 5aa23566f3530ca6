"""
Session plan composition.

PlanComposer turns a SessionPlanRequest into a SessionResponse:

1. Resolve the focus's drills from the catalog
2. Parse the time breakdown
3. Check one percentage per drill
4. Tailor each description and allocate minutes

Composition is all-or-nothing: any validation failure raises a
PlanningError and no partial plan is returned.
"""

import math

from .breakdown import parse_time_breakdown
from .config import PERCENT_TOTAL
from .drills.registry import DrillCatalog
from .errors import ActivityCountMismatchError
from .models import Activity, SessionPlanRequest, SessionResponse, check_request_fields
from .tailoring import tailor


def activity_duration(total_duration_minutes: int, percentage: int) -> int:
    """
    Minutes allocated to one activity, rounded half up.

    Each activity is rounded on its own, so the durations of a plan can
    add up to a minute or two more or less than the requested total:
    90 min at 25/50/25 gives 23 + 45 + 23 = 91.
    """
    return math.floor(total_duration_minutes * percentage / float(PERCENT_TOTAL) + 0.5)


class PlanComposer:
    """Composes session plans against one drill catalog."""

    def __init__(self, catalog: DrillCatalog) -> None:
        self.catalog = catalog

    def compose(self, request: SessionPlanRequest) -> SessionResponse:
        """
        Build the session plan for a request.

        Args:
            request: Validated plan request

        Returns:
            SessionResponse with one Activity per drill, in catalog order

        Raises:
            InvalidRequestError: If the request fields are malformed
            UnknownFocusError: If the focus is not in the catalog
            InvalidTimeBreakdownFormatError: If a breakdown token is not an integer
            NonPositivePercentageError: If a percentage is zero or negative
            PercentageSumMismatchError: If the percentages do not sum to 100
            ActivityCountMismatchError: If there is not one percentage per drill
        """
        check_request_fields(
            request.focus, request.total_duration_minutes, request.number_of_players
        )

        drills = self.catalog.lookup(request.focus)
        percentages = parse_time_breakdown(request.time_breakdown)

        if len(percentages) != len(drills):
            raise ActivityCountMismatchError(request.focus, len(percentages), len(drills))

        activities = tuple(
            Activity(
                name=drill.name,
                description=tailor(drill, request.number_of_players, drill.description),
                duration_minutes=activity_duration(request.total_duration_minutes, pct),
            )
            for drill, pct in zip(drills, percentages)
        )

        return SessionResponse(
            focus=request.focus,
            total_duration_minutes=request.total_duration_minutes,
            activities=activities,
        )
