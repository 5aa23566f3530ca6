"""
Drill definitions for drill-planner.

Each focus owns an ordered list of Drill templates; the DrillCatalog
holds them all and is passed into the plan composer.
"""

from .base import Drill, TailoringRule
from .registry import DrillCatalog, load_catalog

__all__ = [
    "Drill",
    "TailoringRule",
    "DrillCatalog",
    "load_catalog",
]
