"""Chart calculator - input validation, planetary longitudes, and aspects."""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable
from dataclasses import dataclass

from aspectwire.schemas.chart import ChartAspect, ChartMeta, ChartResponse, ChartSubject

from ephemeris.aspects import compute_aspects
from ephemeris.bodies import BODIES
from ephemeris.errors import InputValidationError
from ephemeris.provider import EphemerisProvider, collect_longitudes
from ephemeris.timeconv import DEFAULT_LOCAL_HOUR, DEFAULT_LOCAL_MINUTE, CalendarDateTime

logger = logging.getLogger(__name__)

DATE_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
# Trailing seconds or other suffixes after HH:MM are ignored
TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})")

DEFAULT_TZ_OFFSET_MINUTES = -300.0
DEFAULT_ORB = 4.0
MAX_ORB = 30.0
MAX_TZ_OFFSET_MINUTES = 1440.0

LOCATION_TEXT = "Timezone offset only"
NO_TIME_NOTE = (
    "No time provided; defaulted to 12:00. The Moon's position and aspects "
    "involving fast-moving bodies can shift with time."
)


@dataclass(frozen=True)
class ChartInput:
    """Validated chart request."""

    moment: CalendarDateTime
    date_text: str
    time_text: str | None
    orb: float

    @property
    def time_known(self) -> bool:
        return self.time_text is not None


def parse_date(value: object) -> tuple[int, int, int]:
    """Parse ``YYYY-MM-DD`` into (year, month, day)."""
    match = DATE_PATTERN.match(str(value or "").strip())
    if not match:
        raise InputValidationError("Invalid date. Use YYYY-MM-DD.")
    return int(match.group(1)), int(match.group(2)), int(match.group(3))


def parse_time(value: object) -> tuple[int, int] | None:
    """Parse ``H:MM`` or ``HH:MM``; blank or missing means unknown."""
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    match = TIME_PATTERN.match(text)
    if not match:
        raise InputValidationError("Invalid time. Use HH:MM.")
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise InputValidationError("Invalid time. Hours must be 0-23 and minutes 0-59.")
    return hour, minute


def _number(value: object, field: str, default: float) -> float:
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InputValidationError(f"{field} must be a number.")
    number = float(value)
    if not math.isfinite(number):
        raise InputValidationError(f"{field} must be a finite number.")
    return number


def build_chart_input(
    date: object,
    time: object = None,
    tz_offset_minutes: object = None,
    orb: object = None,
    *,
    default_tz_offset_minutes: float = DEFAULT_TZ_OFFSET_MINUTES,
    default_orb: float = DEFAULT_ORB,
    max_orb: float = MAX_ORB,
) -> ChartInput:
    """Validate raw request fields, applying the configured defaults."""
    year, month, day = parse_date(date)
    clock = parse_time(time)
    offset = _number(tz_offset_minutes, "tzOffsetMinutes", default_tz_offset_minutes)
    orb_limit = _number(orb, "orb", default_orb)

    if abs(offset) > MAX_TZ_OFFSET_MINUTES:
        raise InputValidationError(
            f"tzOffsetMinutes must be between -{MAX_TZ_OFFSET_MINUTES:g} and {MAX_TZ_OFFSET_MINUTES:g}."
        )
    if orb_limit < 0 or orb_limit > max_orb:
        raise InputValidationError(f"orb must be between 0 and {max_orb:g} degrees.")

    hour, minute = clock if clock is not None else (DEFAULT_LOCAL_HOUR, DEFAULT_LOCAL_MINUTE)
    moment = CalendarDateTime(
        year=year,
        month=month,
        day=day,
        hour=hour,
        minute=minute,
        tz_offset_minutes=offset,
    )
    return ChartInput(
        moment=moment,
        date_text=f"{year:04d}-{month:02d}-{day:02d}",
        time_text=f"{hour:02d}:{minute:02d}" if clock is not None else None,
        orb=orb_limit,
    )


def compute_chart(
    chart_input: ChartInput,
    provider: EphemerisProvider,
    *,
    deadline: float | None = None,
    bodies: Iterable[tuple[str, int]] = BODIES,
) -> ChartResponse:
    """Calculate longitudes and aspects for a validated chart request.

    Raises ProviderError when any body lookup fails and ChartTimeoutError
    when ``deadline`` (a ``time.monotonic()`` value) passes first.
    """
    jd = chart_input.moment.julian_day()
    planets = collect_longitudes(provider, jd, bodies, deadline=deadline)
    matches = compute_aspects(planets, chart_input.orb)

    confidence = "high" if chart_input.time_known else "low"
    logger.info(
        "Computed chart for %s %s (jd=%.5f, %d aspects, confidence=%s)",
        chart_input.date_text,
        chart_input.time_text or "--:--",
        jd,
        len(matches),
        confidence,
    )

    return ChartResponse(
        meta=ChartMeta(
            tz_offset_minutes=chart_input.moment.tz_offset_minutes,
            orb=chart_input.orb,
            confidence=confidence,
            note=None if chart_input.time_known else NO_TIME_NOTE,
        ),
        subject=ChartSubject(
            date=chart_input.date_text,
            time=chart_input.time_text,
            location_text=LOCATION_TEXT,
        ),
        jd=jd,
        planets=planets,
        aspects=[
            ChartAspect(
                a=m.a,
                b=m.b,
                aspect=m.aspect,
                separation=m.separation,
                orb=m.orb,
                intensity=m.intensity,
            )
            for m in matches
        ],
    )
