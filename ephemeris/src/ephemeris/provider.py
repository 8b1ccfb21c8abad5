"""Ephemeris provider boundary backed by Swiss Ephemeris."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

import swisseph as swe

from ephemeris.angles import normalize
from ephemeris.errors import ChartTimeoutError, ProviderError

logger = logging.getLogger(__name__)

EPHEMERIS_MODES = ("moshier", "swiss")


@dataclass(frozen=True)
class BodyLongitude:
    """Outcome of a single body lookup: a longitude or an error message."""

    body: str
    longitude: float | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.longitude is not None


class EphemerisProvider(Protocol):
    def longitude(self, jd: float, body: str, body_id: int) -> BodyLongitude: ...


class SwissEphemerisProvider:
    """Ecliptic longitudes from pyswisseph.

    ``moshier`` needs no data files and is the fast default; ``swiss``
    reads the ephemeris files under ``ephe_path``.
    """

    def __init__(self, mode: str = "moshier", ephe_path: str = "") -> None:
        mode = str(mode or "").strip().lower()
        if mode not in EPHEMERIS_MODES:
            raise ValueError(f"Unknown ephemeris mode '{mode}'. Expected one of {EPHEMERIS_MODES}.")
        self.mode = mode
        self.flags = swe.FLG_MOSEPH if mode == "moshier" else swe.FLG_SWIEPH
        path = str(ephe_path or "").strip()
        swe.set_ephe_path(path if path else None)

    def longitude(self, jd: float, body: str, body_id: int) -> BodyLongitude:
        try:
            result, _ = swe.calc_ut(jd, body_id, self.flags)
        except swe.Error as exc:
            return BodyLongitude(body=body, error=str(exc))
        return BodyLongitude(body=body, longitude=normalize(result[0]))


def collect_longitudes(
    provider: EphemerisProvider,
    jd: float,
    bodies: Iterable[tuple[str, int]],
    deadline: float | None = None,
) -> dict[str, float]:
    """Look up every body in order, failing on the first provider error.

    ``deadline`` is a ``time.monotonic()`` value checked before each lookup.
    """
    longitudes: dict[str, float] = {}
    for body, body_id in bodies:
        if deadline is not None and time.monotonic() >= deadline:
            raise ChartTimeoutError(f"Chart deadline passed before computing {body}.")
        result = provider.longitude(jd, body, body_id)
        if not result.ok:
            logger.warning("Ephemeris lookup failed for %s at jd=%s: %s", body, jd, result.error)
            raise ProviderError(body, result.error or "no longitude returned")
        longitudes[body] = result.longitude
    return longitudes
