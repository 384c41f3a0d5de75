"""Spectral classification of stars from their physical parameters.

Classification table (temperature in K, other values in solar units):

    Class   Temperature    Luminosity     Mass           Radius
    O       >= 30000       >= 30000       >= 16          >= 6.6
    B       10000-30000    25-30000       2.1-16         1.8-6.6
    A       7500-10000     5-25           1.4-2.1        1.4-1.8
    F       6000-7500      1.5-5          1.04-1.4       1.15-1.4
    G       5200-6000      0.6-1.5        0.8-1.04       0.96-1.15
    K       3700-5200      0.08-0.6       0.45-0.8       0.7-0.96
    M       2400-3700      <= 0.08        0.08-0.45      <= 0.7

Only the upper bounds of each band are enforced. The O band has none.
"""

from typing import NamedTuple, Optional

from galaxy_db.models import SpectralClass

MIN_TEMPERATURE = 2400
MIN_MASS = 0.08


class Band(NamedTuple):
    """A temperature band and the largest values a star in it may have."""

    upper_temperature: Optional[int]
    max_luminosity: Optional[float]
    max_mass: Optional[float]
    max_radius: Optional[float]
    spectral_class: SpectralClass


# Ascending by temperature; the first band whose upper temperature exceeds
# the star's temperature wins.
BANDS = (
    Band(3700, 0.08, 0.45, 0.7, SpectralClass.M),
    Band(5200, 0.6, 0.8, 0.96, SpectralClass.K),
    Band(6000, 1.5, 1.04, 1.15, SpectralClass.G),
    Band(7500, 5, 1.4, 1.4, SpectralClass.F),
    Band(10000, 25, 2.1, 1.8, SpectralClass.A),
    Band(30000, 30000, 16, 6.6, SpectralClass.B),
    Band(None, None, None, None, SpectralClass.O),
)


def _exceeds(value: float, limit: Optional[float]) -> bool:
    return limit is not None and value > limit


def classify(
    mass: float, diameter: float, temperature: int, luminosity: float
) -> SpectralClass:
    """Derive the spectral class of a star.

    Args:
        mass: Mass in solar masses
        diameter: Diameter in solar radii (the radius is half of it)
        temperature: Surface temperature in Kelvin
        luminosity: Luminosity in solar luminosities

    Returns:
        The spectral class, or ``SpectralClass.INVALID`` when the parameters
        match no band.
    """
    if temperature < MIN_TEMPERATURE or mass < MIN_MASS:
        return SpectralClass.INVALID

    radius = diameter / 2
    for band in BANDS:
        if band.upper_temperature is not None and temperature >= band.upper_temperature:
            continue
        if (
            _exceeds(luminosity, band.max_luminosity)
            or _exceeds(mass, band.max_mass)
            or _exceeds(radius, band.max_radius)
        ):
            return SpectralClass.INVALID
        return band.spectral_class

    return SpectralClass.INVALID
