"""
CLI view formatters using Rich for pretty console output.

Handles table formatting and display of session plans and the drill catalog.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.drills import DrillCatalog
from ..core.models import SessionResponse

console = Console()


def format_plan_table(response: SessionResponse) -> Table:
    """
    Format a composed session as a Rich table.

    Args:
        response: Composed session plan

    Returns:
        Rich Table object
    """
    table = Table(
        title=f"{escape(response.focus)} · {response.total_duration_minutes} min",
        show_lines=True,
    )

    table.add_column("#", justify="right", style="dim")
    table.add_column("Activity", style="cyan")
    table.add_column("Min", justify="right", style="bold")
    table.add_column("Description")

    for i, activity in enumerate(response.activities, start=1):
        table.add_row(
            str(i),
            escape(activity.name),
            str(activity.duration_minutes),
            escape(activity.description),
        )

    return table


def print_plan(response: SessionResponse) -> None:
    """Print a composed session, noting any rounding drift in the allocated minutes."""
    console.print(format_plan_table(response))

    allocated = response.allocated_minutes
    if allocated != response.total_duration_minutes:
        print_warning(
            f"Activities add up to {allocated} min "
            f"({response.total_duration_minutes} min requested; each part is rounded on its own)."
        )


def format_catalog_table(catalog: DrillCatalog, focus: str | None = None) -> Table:
    """
    Format the drill catalog as a Rich table.

    Args:
        catalog: Catalog to render
        focus: Only show this focus (raises UnknownFocusError if absent)

    Returns:
        Rich Table object
    """
    table = Table(title="Drill catalog")

    table.add_column("Focus", style="cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Drill")
    table.add_column("Tailoring", style="magenta")

    keys = [focus.lower()] if focus is not None else list(catalog.focuses)
    for key in keys:
        drills = catalog.lookup(key)
        for i, drill in enumerate(drills, start=1):
            table.add_row(escape(key) if i == 1 else "", str(i), escape(drill.name), drill.tailoring.value)

    return table


def print_catalog(catalog: DrillCatalog, focus: str | None = None) -> None:
    """Print the drill catalog (optionally a single focus)."""
    console.print(format_catalog_table(catalog, focus))


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{escape(message)}[/green]")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]Error: {escape(message)}[/red]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]Warning: {escape(message)}[/yellow]")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]{escape(message)}[/blue]")
