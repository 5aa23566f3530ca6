"""Shared fixtures for drill-planner tests."""

import pytest

from drill_planner.core.composer import PlanComposer
from drill_planner.core.drills import DrillCatalog, load_catalog


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point $HOME at an empty directory so user overrides never leak into tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def catalog(isolated_home) -> DrillCatalog:
    """The bundled drill catalog."""
    return load_catalog()


@pytest.fixture
def composer(catalog) -> PlanComposer:
    return PlanComposer(catalog)
