"""Catalog commands: focuses."""

from typing import Annotated, Optional

import typer

from ...core.errors import PlanningError
from .. import views
from ..app import app, get_catalog


@app.command()
def focuses(
    focus: Annotated[
        Optional[str],
        typer.Option("--focus", "-f", help="Only show drills for this focus"),
    ] = None,
) -> None:
    """
    List supported focuses with their drills and tailoring rules.
    """
    catalog = get_catalog()
    try:
        views.print_catalog(catalog, focus)
    except PlanningError as e:
        views.print_error(str(e))
        raise typer.Exit(1)
