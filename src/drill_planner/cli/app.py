"""Shared Typer app object, shared option types, and composer utility."""

from typing import Annotated

import typer

from ..core.composer import PlanComposer
from ..core.drills import DrillCatalog, load_catalog

# Shared --focus option type used across commands
FocusOption = Annotated[
    str,
    typer.Option("--focus", "-f", help="Training focus, e.g. passing, shooting, defence"),
]

app = typer.Typer(
    name="drill-planner",
    help="Compose coaching session plans from a drill catalog and a time breakdown.",
    no_args_is_help=True,
)


def get_catalog() -> DrillCatalog:
    """Load the bundled drill catalog merged with user overrides."""
    return load_catalog()


def get_composer(catalog: DrillCatalog | None = None) -> PlanComposer:
    """Get a plan composer for the given catalog or the default one."""
    if catalog is None:
        catalog = get_catalog()
    return PlanComposer(catalog)
