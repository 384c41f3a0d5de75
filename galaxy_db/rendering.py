"""Plain-text reports for execution payloads."""

from __future__ import annotations

from typing import List

from galaxy_db.executor import (
    CatalogStats,
    GalaxyReport,
    NameListing,
    Notice,
    Payload,
    PlanetBranch,
    StarBranch,
)

INDENT = "  "


def format_number(value: float) -> str:
    """Shortest exact form of a number: 1.0 -> '1', 0.695 -> '0.695'."""
    text = repr(value)
    return text[:-2] if text.endswith(".0") else text


def render(payload: Payload | None) -> List[str]:
    """Render a payload as report lines. ``None`` renders as nothing."""
    if payload is None:
        return []
    renderers = {
        "notice": render_notice,
        "listing": render_listing,
        "stats": render_stats,
        "galaxy_report": render_galaxy_report,
    }
    return renderers[payload.payload](payload)


def render_notice(notice: Notice) -> List[str]:
    return [notice.message]


def render_listing(listing: NameListing) -> List[str]:
    lines = [f"--- List of all researched {listing.label} ---"]
    if listing.names:
        lines.append(", ".join(listing.names))
    lines.append(f"--- End of {listing.label} list ---")
    return lines


def render_stats(stats: CatalogStats) -> List[str]:
    return [
        "--- Stats ---",
        f"Galaxies: {stats.galaxies}",
        f"Stars: {stats.stars}",
        f"Planets: {stats.planets}",
        f"Moons: {stats.moons}",
        "--- End of stats ---",
    ]


def render_galaxy_report(report: GalaxyReport) -> List[str]:
    galaxy = report.galaxy
    lines = [
        f"--- Data for {galaxy.name} galaxy ---",
        f"Type: {galaxy.type.value}",
        f"Age: {format_number(galaxy.age)}{galaxy.units.suffix}",
        "Stars:",
    ]
    for branch in report.stars:
        lines.extend(_render_star(branch, ""))
    lines.append(f"--- End of data for {galaxy.name} galaxy ---")
    return lines


def _render_star(branch: StarBranch, indent: str) -> List[str]:
    star = branch.star
    lines = [
        f"{indent}- Name: {star.name}",
        f"{indent}  Class: {star.spectral_class.value} "
        f"({format_number(star.mass)}, {format_number(star.radius)}, "
        f"{star.temperature}, {format_number(star.luminosity)})",
    ]
    child_indent = indent + INDENT
    lines.append(f"{child_indent}Planets:")
    for planet_branch in branch.planets:
        lines.extend(_render_planet(planet_branch, child_indent))
    return lines


def _render_planet(branch: PlanetBranch, indent: str) -> List[str]:
    planet = branch.planet
    child_indent = indent + INDENT
    lines = [
        f"{indent}- Name: {planet.name}",
        f"{indent}  Type: {planet.type.label}",
        f"{indent}  Supports life: {'yes' if planet.supports_life else 'no'}",
        f"{child_indent}Moons:",
    ]
    lines.extend(f"{child_indent}- {moon.name}" for moon in branch.moons)
    return lines
