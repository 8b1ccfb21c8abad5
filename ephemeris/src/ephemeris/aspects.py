"""Aspect detection and orb calculations."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from ephemeris.angles import minimal_separation
from ephemeris.bodies import ASPECTS, AspectDefinition

logger = logging.getLogger(__name__)

TIGHT_FRACTION = 0.33
MEDIUM_FRACTION = 0.66


@dataclass(frozen=True)
class AspectMatch:
    """Best aspect found between two bodies, rounded for presentation."""

    a: str
    b: str
    aspect: str
    separation: float
    orb: float
    intensity: str


def best_aspect(separation: float, orb_limit: float) -> tuple[AspectDefinition, float] | None:
    """Return the closest catalog aspect within ``orb_limit`` and its orb.

    Equal deviations keep the earlier catalog entry.
    """
    best: tuple[AspectDefinition, float] | None = None
    for aspect in ASPECTS:
        orb = abs(separation - aspect.angle)
        if orb > orb_limit:
            continue
        if best is None or orb < best[1]:
            best = (aspect, orb)
    return best


def classify_intensity(orb: float, orb_limit: float) -> str:
    """Classify how tight a match is relative to the allowed orb."""
    if orb <= orb_limit * TIGHT_FRACTION:
        return "tight"
    if orb <= orb_limit * MEDIUM_FRACTION:
        return "medium"
    return "wide"


def compute_aspects(longitudes: Mapping[str, float], orb_limit: float) -> list[AspectMatch]:
    """Find the best aspect for every pair of bodies.

    Args:
        longitudes: Body name -> ecliptic longitude, in the order pairs
                    should be enumerated.
        orb_limit: Maximum deviation from an exact aspect, in degrees.

    Returns:
        Matches sorted tightest first. Pairs with no aspect in orb are
        left out.
    """
    found: list[tuple[float, AspectMatch]] = []
    bodies = list(longitudes)

    for i, body1 in enumerate(bodies):
        for body2 in bodies[i + 1:]:
            separation = minimal_separation(longitudes[body1], longitudes[body2])
            match = best_aspect(separation, orb_limit)
            if match is None:
                continue

            aspect, orb = match
            found.append((
                orb,
                AspectMatch(
                    a=body1,
                    b=body2,
                    aspect=aspect.name,
                    separation=round(separation, 2),
                    orb=round(orb, 2),
                    intensity=classify_intensity(orb, orb_limit),
                ),
            ))

    # Stable sort keeps pair order for equal orbs
    found.sort(key=lambda item: item[0])
    logger.debug("Found %d aspects across %d bodies", len(found), len(bodies))
    return [match for _, match in found]
