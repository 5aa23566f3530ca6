"""
CLI entry point using Typer.

Provides commands for session planning:
- plan: Compose a session plan for a focus
- template: Print an even time breakdown for a focus
- focuses: List the drill catalog
"""

from .app import app
from .commands import catalog, planning  # noqa: F401  (registers commands)

__all__ = ["app"]


if __name__ == "__main__":
    app()
