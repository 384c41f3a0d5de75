"""Data model for the celestial bodies recorded in the catalog.

Bodies are immutable once constructed. The four kinds form a closed set and
are modelled as a tagged union discriminated on ``kind``.
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator


class BodyKind(str, Enum):
    """The four kinds of celestial body, ordered root to leaf."""

    GALAXY = "galaxy"
    STAR = "star"
    PLANET = "planet"
    MOON = "moon"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def plural(self) -> str:
        return _PLURALS[self]

    @classmethod
    def from_plural(cls, word: str) -> Optional["BodyKind"]:
        """Resolve a plural word such as ``stars``; ``None`` if unknown."""
        for kind, plural in _PLURALS.items():
            if plural == word:
                return kind
        return None


_PLURALS = {
    BodyKind.GALAXY: "galaxies",
    BodyKind.STAR: "stars",
    BodyKind.PLANET: "planets",
    BodyKind.MOON: "moons",
}


class GalaxyKind(str, Enum):
    ELLIPTICAL = "elliptical"
    LENTICULAR = "lenticular"
    SPIRAL = "spiral"
    IRREGULAR = "irregular"


class AgeUnit(str, Enum):
    MILLION = "million"
    BILLION = "billion"

    @property
    def suffix(self) -> str:
        return "M" if self is AgeUnit.MILLION else "B"

    @classmethod
    def from_suffix(cls, char: str) -> Optional["AgeUnit"]:
        return {"M": cls.MILLION, "B": cls.BILLION}.get(char)


class SpectralClass(str, Enum):
    """One-letter spectral class. ``INVALID`` is only ever a rejection signal."""

    O = "O"
    B = "B"
    A = "A"
    F = "F"
    G = "G"
    K = "K"
    M = "M"
    INVALID = "invalid"


class PlanetKind(str, Enum):
    TERRESTRIAL = "terrestrial"
    GIANT_PLANET = "giant_planet"
    ICE_GIANT = "ice_giant"
    MESOPLANET = "mesoplanet"
    MINI_NEPTUNE = "mini_neptune"
    PLANETAR = "planetar"
    SUPER_EARTH = "super_earth"
    SUPER_JUPITER = "super_jupiter"
    SUB_EARTH = "sub_earth"

    @property
    def label(self) -> str:
        """The spelling used by the command language."""
        return _PLANET_LABELS[self]

    @classmethod
    def from_label(cls, text: str) -> Optional["PlanetKind"]:
        return _PLANET_KINDS_BY_LABEL.get(text)


_PLANET_LABELS = {
    PlanetKind.TERRESTRIAL: "terrestrial",
    PlanetKind.GIANT_PLANET: "giant planet",
    PlanetKind.ICE_GIANT: "ice giant",
    PlanetKind.MESOPLANET: "mesoplanet",
    PlanetKind.MINI_NEPTUNE: "mini-neptune",
    PlanetKind.PLANETAR: "planetar",
    PlanetKind.SUPER_EARTH: "super-earth",
    PlanetKind.SUPER_JUPITER: "super-jupiter",
    PlanetKind.SUB_EARTH: "sub-earth",
}
_PLANET_KINDS_BY_LABEL = {label: kind for kind, label in _PLANET_LABELS.items()}


class CelestialBody(BaseModel):
    """Fields shared by every body. Names are unique within a kind."""

    kind: BodyKind
    name: str = Field(min_length=1, description="Proper name, unique per kind")

    model_config = {"frozen": True}


class Galaxy(CelestialBody):
    kind: Literal[BodyKind.GALAXY] = BodyKind.GALAXY
    type: GalaxyKind = Field(description="Morphological galaxy type")
    # Sign is not constrained here; the parser only rejects an age of exactly zero.
    age: float = Field(description="Age magnitude, in `units`")
    units: AgeUnit


class Star(CelestialBody):
    kind: Literal[BodyKind.STAR] = BodyKind.STAR
    mass: float = Field(description="Mass in solar masses")
    # The parser rejects negative diameters; nan passes through like any float.
    diameter: float = Field(description="Diameter in solar radii")
    temperature: int = Field(ge=0, description="Surface temperature in Kelvin")
    luminosity: float = Field(description="Luminosity in solar luminosities")
    spectral_class: SpectralClass

    @field_validator("spectral_class")
    @classmethod
    def validate_spectral_class(cls, v: SpectralClass) -> SpectralClass:
        """Reject the invalid class, which only signals a failed classification."""
        if v is SpectralClass.INVALID:
            raise ValueError("an invalid spectral class cannot be stored")
        return v

    @property
    def radius(self) -> float:
        return self.diameter / 2


class Planet(CelestialBody):
    kind: Literal[BodyKind.PLANET] = BodyKind.PLANET
    type: PlanetKind
    supports_life: bool


class Moon(CelestialBody):
    kind: Literal[BodyKind.MOON] = BodyKind.MOON


AnyBody = Annotated[Union[Galaxy, Star, Planet, Moon], Field(discriminator="kind")]

# Kind a parent must have for each child kind; galaxies are roots.
PARENT_KIND = {
    BodyKind.GALAXY: None,
    BodyKind.STAR: BodyKind.GALAXY,
    BodyKind.PLANET: BodyKind.STAR,
    BodyKind.MOON: BodyKind.PLANET,
}
