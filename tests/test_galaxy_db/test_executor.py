"""Tests for galaxy_db.executor module."""

import typing

from galaxy_db.catalog import Catalog
from galaxy_db.commands import (
    AddBody,
    Exit,
    ListKind,
    NoOp,
    PrintGalaxy,
    ShowError,
    Stats,
)
from galaxy_db.executor import (
    CatalogStats,
    CommandExecutor,
    GalaxyReport,
    NameListing,
    Notice,
)
from galaxy_db.models import (
    AgeUnit,
    BodyKind,
    Galaxy,
    GalaxyKind,
    Moon,
    Planet,
    PlanetKind,
)
from galaxy_db.parser import CommandParser


class TestCommandExecutor:
    """Test suite for the CommandExecutor class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.catalog = Catalog()
        self.executor = CommandExecutor(self.catalog)
        self.parser = CommandParser(self.catalog)

    def run(self, line):
        return self.executor.execute(self.parser.parse(line))

    def test_noop(self):
        result = self.executor.execute(NoOp())
        assert result.keep_running is True
        assert result.payload is None

    def test_show_error(self):
        """Test errors become error notices and the loop continues."""
        result = self.executor.execute(ShowError(message="Unknown command: x"))
        assert result.keep_running is True
        assert result.payload == Notice(message="Unknown command: x", severity="error")

    def test_exit_stops_loop(self):
        """Test Exit is the only command that stops the loop."""
        result = self.executor.execute(Exit())
        assert result.keep_running is False

    def test_add_galaxy(self):
        result = self.run("add galaxy [Milky Way] spiral 13.6B")
        assert result.keep_running is True
        assert result.payload is None
        assert self.catalog.list_names(BodyKind.GALAXY) == ["Milky Way"]

    def test_add_duplicate_reports_warning(self):
        """Test a duplicate add is reported and keeps the original."""
        self.run("add galaxy [Milky Way] spiral 13.6B")
        result = self.run("add galaxy [Milky Way] elliptical 2B")

        assert result.keep_running is True
        assert result.payload == Notice(
            message="Galaxy Milky Way already exists.", severity="warning"
        )
        galaxy = self.catalog.find(BodyKind.GALAXY, "Milky Way")
        assert galaxy.type is GalaxyKind.SPIRAL

    def test_failed_parse_does_not_mutate(self):
        """Test an invalid add leaves the catalog untouched."""
        self.run("add galaxy [Milky Way] spiral 13.6B")
        result = self.run("add star [Milky Way] [Sol] 1.0 1.39 -5 1.0")

        assert isinstance(result.payload, Notice)
        assert self.catalog.list_names(BodyKind.STAR) == []

    def test_list(self):
        for name in ("Zed", "Alpha", "Mu"):
            self.run(f"add galaxy [{name}] spiral 1B")

        result = self.executor.execute(ListKind(kind=BodyKind.GALAXY, label="galaxies"))
        assert result.payload == NameListing(
            label="galaxies", names=["Alpha", "Mu", "Zed"]
        )

    def test_stats(self, catalog):
        executor = CommandExecutor(catalog)
        result = executor.execute(Stats())
        assert result.payload == CatalogStats(galaxies=1, stars=1, planets=1, moons=1)

    def test_print_full_tree(self, catalog):
        """Test print walks stars, planets and moons."""
        executor = CommandExecutor(catalog)
        galaxy = catalog.find(BodyKind.GALAXY, "Milky Way")

        report = executor.execute(PrintGalaxy(galaxy=galaxy)).payload

        assert isinstance(report, GalaxyReport)
        assert [branch.star.name for branch in report.stars] == ["Sol"]
        (planet_branch,) = report.stars[0].planets
        assert planet_branch.planet.name == "Earth"
        assert planet_branch.moons == [Moon(name="Moon")]

    def test_print_galaxy_without_stars(self):
        """Test a galaxy with no stars yields an empty star list."""
        self.run("add galaxy [Empty] elliptical 1B")
        galaxy = self.catalog.find(BodyKind.GALAXY, "Empty")

        result = self.executor.execute(PrintGalaxy(galaxy=galaxy))

        assert result.keep_running is True
        assert result.payload.stars == []

    def test_print_skips_children_of_unexpected_kind(self):
        """Test children of the wrong kind are skipped, not reported."""
        galaxy = Galaxy(
            name="Odd", type=GalaxyKind.IRREGULAR, age=1.0, units=AgeUnit.BILLION
        )
        self.catalog.add(galaxy)
        # The catalog itself does not check parent kinds
        self.catalog.add(Moon(name="Stray"), galaxy)
        self.catalog.add(
            Planet(name="Rogue", type=PlanetKind.PLANETAR, supports_life=False), galaxy
        )

        report = self.executor.execute(PrintGalaxy(galaxy=galaxy)).payload
        assert report.stars == []

    def test_add_body_command_directly(self):
        """Test AddBody built by hand is applied like a parsed one."""
        galaxy = Galaxy(
            name="M31", type=GalaxyKind.SPIRAL, age=10.0, units=AgeUnit.BILLION
        )
        self.executor.execute(AddBody(body=galaxy))
        assert self.catalog.find(BodyKind.GALAXY, "M31") == galaxy

    def test_handlers_take_their_own_command_type(self):
        """Test each handler is declared for the command variant it serves."""
        variants = {
            "noop": NoOp,
            "show_error": ShowError,
            "add": AddBody,
            "list": ListKind,
            "stats": Stats,
            "print": PrintGalaxy,
            "exit": Exit,
        }
        assert set(self.executor._handlers) == set(variants)
        for tag, variant in variants.items():
            hints = typing.get_type_hints(self.executor._handlers[tag])
            assert hints["command"] is variant
