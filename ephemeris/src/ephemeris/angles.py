"""Angle normalization and circular separation."""

from __future__ import annotations

import math


def normalize(angle: float) -> float:
    """Reduce an angle in degrees to the range [0, 360)."""
    value = math.fmod(angle, 360.0)
    if value < 0.0:
        value += 360.0
    # -1e-20 + 360.0 rounds to 360.0
    if value >= 360.0:
        value = 0.0
    return value


def minimal_separation(lon1: float, lon2: float) -> float:
    """Calculate the shortest angular distance between two longitudes."""
    diff = abs(normalize(lon1) - normalize(lon2))
    if diff > 180.0:
        diff = 360.0 - diff
    return diff
