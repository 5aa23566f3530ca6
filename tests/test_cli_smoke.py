"""
Minimal smoke tests for drill-planner CLI.

Tests basic functionality:
- App runs and shows help
- Plans are composed (table and JSON output)
- Validation errors exit non-zero with a message
- Catalog and template commands list the drills
"""

import json

from typer.testing import CliRunner

from drill_planner.cli.main import app


runner = CliRunner()


class TestCLISmoke:
    """Basic smoke tests for CLI commands."""

    def test_app_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "plan" in result.output
        assert "focuses" in result.output

    def test_plan_table(self):
        result = runner.invoke(app, [
            "plan",
            "--focus", "passing",
            "--duration", "90",
            "--breakdown", "25/50/25",
            "--players", "10",
        ])
        assert result.exit_code == 0
        assert "passing" in result.output
        assert "91 min" in result.output  # rounding drift warning

    def test_plan_json(self):
        result = runner.invoke(app, [
            "plan", "-f", "passing", "-d", "90", "-b", "25/50/25", "-p", "10", "--json",
        ])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["focus"] == "passing"
        assert data["totalDurationMinutes"] == 90
        assert [a["durationMinutes"] for a in data["activities"]] == [23, 45, 23]
        assert "5 pairs" in data["activities"][0]["description"]

    def test_plan_from_request_file(self, tmp_path):
        path = tmp_path / "request.json"
        path.write_text(json.dumps({
            "focus": "shooting",
            "totalDurationMinutes": 60,
            "timeBreakdown": "20/50/30",
            "numberOfPlayers": 9,
        }))
        result = runner.invoke(app, ["plan", "--request", str(path), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [a["durationMinutes"] for a in data["activities"]] == [12, 30, 18]
        assert "two lines" in data["activities"][0]["description"]

    def test_plan_unknown_focus(self):
        result = runner.invoke(app, ["plan", "-f", "basketball", "-d", "60", "-b", "50/50"])
        assert result.exit_code == 1
        assert "Unknown focus area" in result.output

    def test_plan_count_mismatch(self):
        result = runner.invoke(app, ["plan", "-f", "passing", "-d", "60", "-b", "50/50"])
        assert result.exit_code == 1
        assert "do not match" in result.output

    def test_plan_bad_breakdown(self):
        result = runner.invoke(app, ["plan", "-f", "passing", "-d", "60", "-b", "30/30/30"])
        assert result.exit_code == 1
        assert "sum to 100" in result.output

    def test_plan_missing_options(self):
        result = runner.invoke(app, ["plan", "--focus", "passing"])
        assert result.exit_code == 1
        assert "Missing option" in result.output

    def test_plan_missing_request_file(self, tmp_path):
        result = runner.invoke(app, ["plan", "--request", str(tmp_path / "nope.json")])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_focuses_lists_catalog(self):
        result = runner.invoke(app, ["focuses"])
        assert result.exit_code == 0
        for key in ("passing", "shooting", "defence"):
            assert key in result.output

    def test_focuses_unknown(self):
        result = runner.invoke(app, ["focuses", "--focus", "rugby"])
        assert result.exit_code == 1

    def test_template(self):
        result = runner.invoke(app, ["template", "--focus", "Shooting"])
        assert result.exit_code == 0
        assert "34/33/33" in result.output

    def test_plan_focus_with_markup_characters(self):
        """Bracketed input is shown literally in the error, not parsed as markup."""
        result = runner.invoke(app, ["plan", "-f", "[/x]", "-d", "60", "-b", "50/50"])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Unknown focus area" in result.output
        assert "[/x]" in result.output

    def test_plan_breakdown_token_with_markup_characters(self):
        result = runner.invoke(app, ["plan", "-f", "passing", "-d", "60", "-b", "[bold]/50"])
        assert result.exit_code == 1
        assert "'[bold]'" in result.output

    def test_plan_request_file_not_utf8(self, tmp_path):
        path = tmp_path / "request.json"
        path.write_bytes(b"\xff\xfe{\x00")
        result = runner.invoke(app, ["plan", "--request", str(path)])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Invalid JSON" in result.output

    def test_plan_request_path_is_directory(self, tmp_path):
        result = runner.invoke(app, ["plan", "--request", str(tmp_path)])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Cannot read request file" in result.output
