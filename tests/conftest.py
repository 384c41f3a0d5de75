"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    """Reset global settings before each test."""
    from galaxy_db import settings

    for name in ("PROMPT", "LOG_LEVEL", "LOG_FORMAT", "COLOR"):
        monkeypatch.delenv(f"GALAXYDB_{name}", raising=False)

    original = settings._settings
    settings._settings = None

    yield

    settings._settings = original


@pytest.fixture
def catalog():
    """Catalog holding the Milky Way, Sol, Earth and the Moon."""
    from galaxy_db.catalog import Catalog
    from galaxy_db.models import (
        AgeUnit,
        Galaxy,
        GalaxyKind,
        Moon,
        Planet,
        PlanetKind,
        SpectralClass,
        Star,
    )

    cat = Catalog()
    milky_way = Galaxy(
        name="Milky Way", type=GalaxyKind.SPIRAL, age=13.6, units=AgeUnit.BILLION
    )
    sol = Star(
        name="Sol",
        mass=1.0,
        diameter=1.39,
        temperature=5778,
        luminosity=1.0,
        spectral_class=SpectralClass.G,
    )
    earth = Planet(name="Earth", type=PlanetKind.TERRESTRIAL, supports_life=True)
    cat.add(milky_way)
    cat.add(sol, milky_way)
    cat.add(earth, sol)
    cat.add(Moon(name="Moon"), earth)
    return cat
