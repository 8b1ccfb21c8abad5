"""Canonical body list and aspect catalog."""

from __future__ import annotations

from dataclasses import dataclass

# Celestial body IDs for pyswisseph
# These map to swisseph constants
BODIES: tuple[tuple[str, int], ...] = (
    ("Sun", 0),  # SE_SUN
    ("Moon", 1),  # SE_MOON
    ("Mercury", 2),  # SE_MERCURY
    ("Venus", 3),  # SE_VENUS
    ("Mars", 4),  # SE_MARS
    ("Jupiter", 5),  # SE_JUPITER
    ("Saturn", 6),  # SE_SATURN
    ("Uranus", 7),  # SE_URANUS
    ("Neptune", 8),  # SE_NEPTUNE
    ("Pluto", 9),  # SE_PLUTO
)

BODY_NAMES: tuple[str, ...] = tuple(name for name, _ in BODIES)


@dataclass(frozen=True)
class AspectDefinition:
    name: str
    angle: float


# Ordered by exact angle; earlier entries win ties
ASPECTS: tuple[AspectDefinition, ...] = (
    AspectDefinition("Conjunction", 0.0),
    AspectDefinition("Sextile", 60.0),
    AspectDefinition("Square", 90.0),
    AspectDefinition("Trine", 120.0),
    AspectDefinition("Opposition", 180.0),
)
