"""
JSON serialization for plan requests and responses.

Handles conversion between the core dataclasses and the camelCase
JSON-compatible dicts exchanged with callers.
"""

import json
from pathlib import Path
from typing import Any

from ..core.models import Activity, SessionPlanRequest, SessionResponse


class ValidationError(Exception):
    """Raised when request data is missing fields or has the wrong types."""

    pass


def validate_int(value: Any, name: str) -> int:
    """
    Validate that a value is a JSON integer.

    Args:
        value: Value to validate
        name: Name for error message

    Returns:
        The value if valid

    Raises:
        ValidationError: If value is not an int (bools are rejected)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be a whole number, got {value!r}")
    return value


def validate_str(value: Any, name: str) -> str:
    """
    Validate that a value is a string.

    Raises:
        ValidationError: If value is not a string
    """
    if not isinstance(value, str):
        raise ValidationError(f"{name} must be a string, got {value!r}")
    return value


def request_from_dict(data: dict[str, Any]) -> SessionPlanRequest:
    """
    Create a SessionPlanRequest from a JSON dict.

    ``totalDurationMinutes`` may also be given under its older name
    ``durationMinutes``.  ``numberOfPlayers`` is optional and may be null.

    Args:
        data: Dict with request data

    Returns:
        SessionPlanRequest instance

    Raises:
        ValidationError: If a field is missing or has the wrong type
        InvalidRequestError: If a field is present but semantically invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Request must be a JSON object, got {type(data).__name__}")

    if "totalDurationMinutes" in data:
        duration = data["totalDurationMinutes"]
    elif "durationMinutes" in data:
        duration = data["durationMinutes"]
    else:
        raise ValidationError("Missing required field: totalDurationMinutes")

    for key in ("focus", "timeBreakdown"):
        if key not in data:
            raise ValidationError(f"Missing required field: {key}")

    players = data.get("numberOfPlayers")
    if players is not None:
        players = validate_int(players, "numberOfPlayers")

    return SessionPlanRequest(
        focus=validate_str(data["focus"], "focus"),
        total_duration_minutes=validate_int(duration, "totalDurationMinutes"),
        time_breakdown=validate_str(data["timeBreakdown"], "timeBreakdown"),
        number_of_players=players,
    )


def activity_to_dict(activity: Activity) -> dict[str, Any]:
    """Convert Activity to JSON-compatible dict."""
    return {
        "name": activity.name,
        "description": activity.description,
        "durationMinutes": activity.duration_minutes,
    }


def response_to_dict(response: SessionResponse) -> dict[str, Any]:
    """Convert SessionResponse to JSON-compatible dict."""
    return {
        "focus": response.focus,
        "totalDurationMinutes": response.total_duration_minutes,
        "activities": [activity_to_dict(a) for a in response.activities],
    }


def load_request(path: Path) -> SessionPlanRequest:
    """
    Read a plan request from a JSON file.

    Raises:
        OSError: If the file cannot be read (missing, a directory, no permission)
        ValidationError: If the file is not UTF-8 JSON or misses fields
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValidationError(f"Invalid JSON in {path}: {e}") from e
    return request_from_dict(data)
