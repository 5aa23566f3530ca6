"""drill-planner: compose coaching session plans from a drill catalog."""

__version__ = "0.1.0"
