"""Parser for the console command language.

Syntax:
    add galaxy [<name>] <elliptical|lenticular|spiral|irregular> <float age>(M|B)
    add star [<galaxy>] [<name>] <float mass> <float diameter> <int temp> <float luminosity>
    add planet [<star>] [<name>] <planet type> <yes|no>
    add moon [<planet>] [<name>]
    list <galaxies|stars|planets|moons>
    stats
    print [<galaxy>]
    exit

Tokens are consumed left to right without backtracking. The first failing
check decides the error reported for the line.
"""

from __future__ import annotations

import logging

from galaxy_db.catalog import Catalog
from galaxy_db.classifier import classify
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
from galaxy_db.exceptions import CommandSyntaxError
from galaxy_db.models import (
    PARENT_KIND,
    AgeUnit,
    AnyBody,
    BodyKind,
    Galaxy,
    GalaxyKind,
    Moon,
    Planet,
    PlanetKind,
    SpectralClass,
    Star,
)
from galaxy_db.tokens import (
    consume_float,
    consume_int,
    consume_name,
    consume_word,
    is_blank,
    parse_float,
)

logger = logging.getLogger(__name__)

# First words of the two planet types that are spelled with two words
_TWO_WORD_PLANET_PREFIXES = ("giant", "ice")


def _require(token, message: str):
    """Return a consumed token, or fail the line with ``message``."""
    if token is None:
        raise CommandSyntaxError(message)
    return token


class CommandParser:
    """Turns console input lines into commands.

    The catalog is consulted to resolve parent names, so a parsed AddBody or
    PrintGalaxy always refers to bodies that are stored.
    """

    def __init__(self, catalog: Catalog):
        self.catalog = catalog
        self._commands = {
            "add": self._parse_add,
            "list": self._parse_list,
            "stats": self._parse_stats,
            "print": self._parse_print,
            "exit": self._parse_exit,
        }

    def parse(self, line: str | None) -> Command:
        """Parse one input line.

        Args:
            line: The raw line, or None at end of input

        Returns:
            The parsed command. Invalid input yields ShowError; it never raises.
        """
        if line is None:
            return Exit()

        token = consume_word(line)
        if token is None:
            return NoOp()
        word, rest = token

        handler = self._commands.get(word)
        if handler is None:
            return ShowError(message=f"Unknown command: {word}")

        try:
            command, rest = handler(rest)
        except CommandSyntaxError as e:
            logger.debug(f"Rejected input {line!r}: {e.message}")
            return ShowError(message=e.message)

        if not is_blank(rest):
            return ShowError(message=f"Extra input after command: {rest.strip()}")

        logger.debug(f"Parsed {command.command} command")
        return command

    # ==================== Top-level commands ====================

    def _parse_add(self, rest: str) -> tuple[Command, str]:
        body_word, rest = _require(
            consume_word(rest), 'Celestial body type expected after "add".'
        )
        sub_parsers = {
            "galaxy": self._parse_add_galaxy,
            "star": self._parse_add_star,
            "planet": self._parse_add_planet,
            "moon": self._parse_add_moon,
        }
        sub_parser = sub_parsers.get(body_word)
        if sub_parser is None:
            raise CommandSyntaxError(f"Unknown celestial body type: {body_word}")
        return sub_parser(rest)

    def _parse_list(self, rest: str) -> tuple[Command, str]:
        plural, rest = _require(
            consume_word(rest),
            'Celestial body type (in plural) expected after "list".',
        )
        kind = BodyKind.from_plural(plural)
        if kind is None:
            raise CommandSyntaxError(f"Unknown celestial body type: {plural}")
        return ListKind(kind=kind, label=plural), rest

    def _parse_stats(self, rest: str) -> tuple[Command, str]:
        return Stats(), rest

    def _parse_print(self, rest: str) -> tuple[Command, str]:
        name, rest = _require(consume_name(rest), 'Galaxy name expected after "print".')
        galaxy = self._resolve(BodyKind.GALAXY, name)
        return PrintGalaxy(galaxy=galaxy), rest

    def _parse_exit(self, rest: str) -> tuple[Command, str]:
        return Exit(), rest

    # ==================== add <body> ====================

    def _parse_add_galaxy(self, rest: str) -> tuple[Command, str]:
        name, rest = _require(
            consume_name(rest),
            'Galaxy name (enclosed in square brackets) expected after "add galaxy".',
        )
        type_word, rest = _require(
            consume_word(rest), "Galaxy type expected after the galaxy name."
        )
        try:
            galaxy_type = GalaxyKind(type_word)
        except ValueError:
            raise CommandSyntaxError(f"Invalid galaxy type: {type_word}") from None

        age_word, rest = _require(
            consume_word(rest), "Galaxy age expected after galaxy type."
        )
        units = AgeUnit.from_suffix(age_word[-1])
        if units is None:
            raise CommandSyntaxError(
                "Galaxy age must end in 'M' or 'B' to denote units."
            )
        age = parse_float(age_word[:-1])
        if age is None:
            raise CommandSyntaxError(
                "Galaxy age must be a float number followed by 'M' or 'B'."
            )
        # Only an age of exactly zero is rejected; negative ages are accepted.
        if age == 0:
            raise CommandSyntaxError("Galaxy age cannot be negative.")

        galaxy = Galaxy(name=name, type=galaxy_type, age=age, units=units)
        return AddBody(body=galaxy), rest

    def _parse_add_star(self, rest: str) -> tuple[Command, str]:
        galaxy_name, rest = _require(
            consume_name(rest),
            "Galaxy name and star name (each enclosed in square brackets) "
            'expected after "add star".',
        )
        name, rest = _require(
            consume_name(rest),
            "Star name (enclosed in square brackets) expected after galaxy name.",
        )
        mass, rest = _require(
            consume_float(rest), "Star mass (a float) expected after star name."
        )
        diameter, rest = _require(
            consume_float(rest), "Star diameter (a float) expected after star mass."
        )
        if diameter < 0:
            raise CommandSyntaxError("Star diameter cannot be negative.")

        temperature, rest = _require(
            consume_int(rest),
            "Star temperature (an integer) expected after star diameter.",
        )
        if temperature < 0:
            raise CommandSyntaxError("Star temperature in Kelvin cannot be negative.")

        luminosity, rest = _require(
            consume_float(rest),
            "Star luminosity (a float) expected after star temperature.",
        )

        galaxy = self._resolve_parent(BodyKind.STAR, galaxy_name)
        spectral_class = classify(mass, diameter, temperature, luminosity)
        if spectral_class is SpectralClass.INVALID:
            raise CommandSyntaxError("Invalid combination of star characteristics.")

        star = Star(
            name=name,
            mass=mass,
            diameter=diameter,
            temperature=temperature,
            luminosity=luminosity,
            spectral_class=spectral_class,
        )
        return AddBody(body=star, parent=galaxy), rest

    def _parse_add_planet(self, rest: str) -> tuple[Command, str]:
        star_name, rest = _require(
            consume_name(rest),
            "Star name and planet name (each enclosed in square brackets) "
            'expected after "add planet".',
        )
        name, rest = _require(
            consume_name(rest),
            "Planet name (enclosed in square brackets) expected after star name.",
        )
        type_text, rest = _require(
            consume_word(rest), "Planet type expected after planet name."
        )
        if type_text in _TWO_WORD_PLANET_PREFIXES:
            second = consume_word(rest)
            if second is not None:
                second_word, rest = second
                type_text = f"{type_text} {second_word}"

        planet_type = PlanetKind.from_label(type_text)
        if planet_type is None:
            raise CommandSyntaxError(f"Invalid planet type: {type_text}")

        supports_life = consume_word(rest)
        if supports_life is None or supports_life[0] not in ("yes", "no"):
            raise CommandSyntaxError('Expected "yes" or "no" after planet type.')
        answer, rest = supports_life

        star = self._resolve_parent(BodyKind.PLANET, star_name)
        planet = Planet(name=name, type=planet_type, supports_life=answer == "yes")
        return AddBody(body=planet, parent=star), rest

    def _parse_add_moon(self, rest: str) -> tuple[Command, str]:
        planet_name, rest = _require(
            consume_name(rest),
            "Planet name and moon name (each enclosed in square brackets) "
            'expected after "add moon".',
        )
        name, rest = _require(
            consume_name(rest),
            "Moon name (enclosed in square brackets) expected after planet name.",
        )
        planet = self._resolve_parent(BodyKind.MOON, planet_name)
        return AddBody(body=Moon(name=name), parent=planet), rest

    # ==================== Lookups ====================

    def _resolve_parent(self, child_kind: BodyKind, name: str) -> AnyBody:
        return self._resolve(PARENT_KIND[child_kind], name)

    def _resolve(self, kind: BodyKind, name: str) -> AnyBody:
        body = self.catalog.find(kind, name)
        if body is None:
            raise CommandSyntaxError(f"Unknown {kind.value}: {name}")
        return body
