"""Command execution against the catalog.

The executor applies a parsed command and returns a payload describing the
outcome. Turning payloads into text is left to the console.
"""

from __future__ import annotations

import logging
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from galaxy_db.catalog import Catalog
from galaxy_db.commands import (
    AddBody,
    Command,
    Exit,
    ListKind,
    NoOp,
    PrintGalaxy,
    ShowError,
    Stats,
)
from galaxy_db.exceptions import DuplicateBodyError
from galaxy_db.models import BodyKind, CelestialBody, Galaxy, Moon, Planet, Star

logger = logging.getLogger(__name__)


# =============================================================================
# Result payloads
# =============================================================================


class Notice(BaseModel):
    """A message for the user, such as a parse error or a rejected add."""

    payload: Literal["notice"] = "notice"
    message: str
    severity: Literal["error", "warning"] = "error"


class NameListing(BaseModel):
    payload: Literal["listing"] = "listing"
    label: str = Field(..., description="Plural word used for the heading")
    names: List[str] = Field(default_factory=list)


class CatalogStats(BaseModel):
    payload: Literal["stats"] = "stats"
    galaxies: int = 0
    stars: int = 0
    planets: int = 0
    moons: int = 0


class PlanetBranch(BaseModel):
    planet: Planet
    moons: List[Moon] = Field(default_factory=list)


class StarBranch(BaseModel):
    star: Star
    planets: List[PlanetBranch] = Field(default_factory=list)


class GalaxyReport(BaseModel):
    """A galaxy with its stars, their planets and the planets' moons."""

    payload: Literal["galaxy_report"] = "galaxy_report"
    galaxy: Galaxy
    stars: List[StarBranch] = Field(default_factory=list)


Payload = Annotated[
    Union[Notice, NameListing, CatalogStats, GalaxyReport],
    Field(discriminator="payload"),
]


class ExecutionResult(BaseModel):
    keep_running: bool = True
    payload: Optional[Payload] = None


# =============================================================================
# Executor
# =============================================================================


class CommandExecutor:
    """Applies commands to a catalog."""

    def __init__(self, catalog: Catalog):
        self.catalog = catalog
        self._handlers = {
            "noop": self._execute_noop,
            "show_error": self._execute_show_error,
            "add": self._execute_add,
            "list": self._execute_list,
            "stats": self._execute_stats,
            "print": self._execute_print,
            "exit": self._execute_exit,
        }

    def execute(self, command: Command) -> ExecutionResult:
        """Execute a command.

        Args:
            command: A command produced by the parser

        Returns:
            ExecutionResult; ``keep_running`` is False only for Exit
        """
        handler = self._handlers[command.command]
        return handler(command)

    def _execute_noop(self, command: NoOp) -> ExecutionResult:
        return ExecutionResult()

    def _execute_show_error(self, command: ShowError) -> ExecutionResult:
        return ExecutionResult(payload=Notice(message=command.message))

    def _execute_add(self, command: AddBody) -> ExecutionResult:
        try:
            self.catalog.add(command.body, command.parent)
        except DuplicateBodyError as e:
            return ExecutionResult(payload=Notice(message=str(e), severity="warning"))
        return ExecutionResult()

    def _execute_list(self, command: ListKind) -> ExecutionResult:
        names = self.catalog.list_names(command.kind)
        return ExecutionResult(payload=NameListing(label=command.label, names=names))

    def _execute_stats(self, command: Stats) -> ExecutionResult:
        counts = self.catalog.stats()
        return ExecutionResult(
            payload=CatalogStats(
                galaxies=counts[BodyKind.GALAXY],
                stars=counts[BodyKind.STAR],
                planets=counts[BodyKind.PLANET],
                moons=counts[BodyKind.MOON],
            )
        )

    def _execute_print(self, command: PrintGalaxy) -> ExecutionResult:
        report = GalaxyReport(
            galaxy=command.galaxy,
            stars=[
                StarBranch(
                    star=star,
                    planets=[
                        PlanetBranch(
                            planet=planet,
                            moons=self._children(planet, BodyKind.MOON),
                        )
                        for planet in self._children(star, BodyKind.PLANET)
                    ],
                )
                for star in self._children(command.galaxy, BodyKind.STAR)
            ],
        )
        return ExecutionResult(payload=report)

    def _execute_exit(self, command: Exit) -> ExecutionResult:
        logger.debug("Exit requested")
        return ExecutionResult(keep_running=False)

    def _children(self, parent: CelestialBody, kind: BodyKind) -> list:
        """Children of ``parent`` that are of ``kind``; others are skipped."""
        children = self.catalog.children_of(parent) or ()
        return [child for child in children if child.kind is kind]
