"""Galaxy DB - an interactive catalog of galaxies, stars, planets and moons.

This module provides the catalog store, the command language parser and the
executor that applies parsed commands to the catalog.
"""

from galaxy_db.models import (
    AgeUnit,
    BodyKind,
    Galaxy,
    GalaxyKind,
    Moon,
    Planet,
    PlanetKind,
    SpectralClass,
    Star,
)
from galaxy_db.classifier import classify
from galaxy_db.catalog import Catalog
from galaxy_db.exceptions import (
    CommandSyntaxError,
    DuplicateBodyError,
    GalaxyDBError,
    UnknownBodyError,
)
from galaxy_db.parser import CommandParser
from galaxy_db.executor import CommandExecutor, ExecutionResult

__all__ = [
    # Models
    "AgeUnit",
    "BodyKind",
    "Galaxy",
    "GalaxyKind",
    "Moon",
    "Planet",
    "PlanetKind",
    "SpectralClass",
    "Star",
    # Core components
    "classify",
    "Catalog",
    "CommandParser",
    "CommandExecutor",
    "ExecutionResult",
    # Errors
    "GalaxyDBError",
    "DuplicateBodyError",
    "UnknownBodyError",
    "CommandSyntaxError",
]
