"""Tests for JSON conversion of plan requests and responses."""

import json

import pytest

from drill_planner.core.errors import InvalidRequestError
from drill_planner.core.models import Activity, SessionResponse
from drill_planner.io.serializers import (
    ValidationError,
    load_request,
    request_from_dict,
    response_to_dict,
)


class TestRequestFromDict:
    def test_full_request(self):
        req = request_from_dict({
            "focus": "passing",
            "totalDurationMinutes": 90,
            "timeBreakdown": "25/50/25",
            "numberOfPlayers": 10,
        })
        assert req.focus == "passing"
        assert req.total_duration_minutes == 90
        assert req.time_breakdown == "25/50/25"
        assert req.number_of_players == 10

    @pytest.mark.parametrize("players", [None, "absent"])
    def test_players_optional(self, players):
        data = {"focus": "passing", "totalDurationMinutes": 60, "timeBreakdown": "25/50/25"}
        if players != "absent":
            data["numberOfPlayers"] = players
        assert request_from_dict(data).number_of_players is None

    def test_legacy_duration_key(self):
        req = request_from_dict({
            "focus": "shooting",
            "durationMinutes": 45,
            "timeBreakdown": "20/60/20",
        })
        assert req.total_duration_minutes == 45

    @pytest.mark.parametrize("missing", ["focus", "totalDurationMinutes", "timeBreakdown"])
    def test_missing_field(self, missing):
        data = {"focus": "passing", "totalDurationMinutes": 60, "timeBreakdown": "25/50/25"}
        del data[missing]
        with pytest.raises(ValidationError, match=missing):
            request_from_dict(data)

    @pytest.mark.parametrize(
        "field, value",
        [
            ("totalDurationMinutes", "90"),
            ("totalDurationMinutes", 90.0),
            ("totalDurationMinutes", True),
            ("numberOfPlayers", "ten"),
            ("focus", 3),
            ("timeBreakdown", [25, 50, 25]),
        ],
    )
    def test_wrong_types(self, field, value):
        data = {"focus": "passing", "totalDurationMinutes": 60, "timeBreakdown": "25/50/25"}
        data[field] = value
        with pytest.raises(ValidationError):
            request_from_dict(data)

    def test_semantic_errors_come_from_request(self):
        with pytest.raises(InvalidRequestError):
            request_from_dict({"focus": "passing", "totalDurationMinutes": -5, "timeBreakdown": "100"})

    def test_not_an_object(self):
        with pytest.raises(ValidationError):
            request_from_dict(["passing", 90])


class TestResponseToDict:
    def test_shape(self):
        response = SessionResponse(
            focus="passing",
            total_duration_minutes=90,
            activities=(
                Activity("Warm-up", "Pairs.", 23),
                Activity("Game", "Match.", 67),
            ),
        )
        assert response_to_dict(response) == {
            "focus": "passing",
            "totalDurationMinutes": 90,
            "activities": [
                {"name": "Warm-up", "description": "Pairs.", "durationMinutes": 23},
                {"name": "Game", "description": "Match.", "durationMinutes": 67},
            ],
        }


class TestLoadRequest:
    def test_reads_file(self, tmp_path):
        path = tmp_path / "request.json"
        path.write_text(json.dumps({
            "focus": "defence",
            "totalDurationMinutes": 60,
            "timeBreakdown": "30/40/30",
        }))
        assert load_request(path).focus == "defence"

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "request.json"
        path.write_text("{not json")
        with pytest.raises(ValidationError, match="Invalid JSON"):
            load_request(path)

    def test_undecodable_bytes(self, tmp_path):
        path = tmp_path / "request.json"
        path.write_bytes(b"\xff\xfe{\x00")
        with pytest.raises(ValidationError, match="Invalid JSON"):
            load_request(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_request(tmp_path / "nope.json")
