"""Planning commands: plan, template."""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape

from ...core.breakdown import even_breakdown
from ...core.errors import PlanningError
from ...core.models import SessionPlanRequest
from ...io.serializers import ValidationError, load_request, response_to_dict
from .. import views
from ..app import FocusOption, app, get_catalog, get_composer


@app.command()
def plan(
    focus: Annotated[
        Optional[str],
        typer.Option("--focus", "-f", help="Training focus, e.g. passing, shooting, defence"),
    ] = None,
    duration: Annotated[
        Optional[int],
        typer.Option("--duration", "-d", help="Total session length in minutes"),
    ] = None,
    breakdown: Annotated[
        Optional[str],
        typer.Option("--breakdown", "-b", help="Percent per activity, e.g. 25/50/25"),
    ] = None,
    players: Annotated[
        Optional[int],
        typer.Option("--players", "-p", help="Number of players (tailors drill descriptions)"),
    ] = None,
    request_path: Annotated[
        Optional[Path],
        typer.Option("--request", "-r", help="Read the request from a JSON file instead"),
    ] = None,
    json_out: Annotated[
        bool,
        typer.Option("--json", "-j", help="Output as JSON for machine processing"),
    ] = False,
) -> None:
    """
    Compose a session plan for a focus, duration and time breakdown.
    """
    try:
        if request_path is not None:
            request = load_request(request_path)
        else:
            missing = [
                name
                for name, value in (("--focus", focus), ("--duration", duration), ("--breakdown", breakdown))
                if value is None
            ]
            if missing:
                views.print_error(f"Missing option(s): {', '.join(missing)} (or pass --request FILE)")
                raise typer.Exit(1)
            request = SessionPlanRequest(
                focus=focus,
                total_duration_minutes=duration,
                time_breakdown=breakdown,
                number_of_players=players,
            )
        response = get_composer().compose(request)
    except FileNotFoundError as e:
        views.print_error(f"Request file not found: {e.filename}")
        raise typer.Exit(1)
    except OSError as e:
        views.print_error(f"Cannot read request file {e.filename}: {e.strerror}")
        raise typer.Exit(1)
    except (PlanningError, ValidationError) as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if json_out:
        print(json.dumps(response_to_dict(response), indent=2))
        return

    views.print_plan(response)


@app.command()
def template(focus: FocusOption) -> None:
    """
    Print an even time breakdown for a focus as a starting point.
    """
    catalog = get_catalog()
    try:
        drills = catalog.lookup(focus)
    except PlanningError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    views.print_info(f"{focus.lower()} has {len(drills)} activities:")
    for drill in drills:
        views.console.print(f"  • {escape(drill.name)}")
    views.print_success(even_breakdown(len(drills)))
