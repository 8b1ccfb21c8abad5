"""Calendar date and local clock time to Julian Day (UT)."""

from __future__ import annotations

import calendar
import math
from dataclasses import dataclass

from ephemeris.errors import InputValidationError

# Used when the birth time is unknown
DEFAULT_LOCAL_HOUR = 12
DEFAULT_LOCAL_MINUTE = 0


def julian_day(year: int, month: int, day: int, hour_ut: float) -> float:
    """Gregorian calendar date plus UT hour to Julian Day.

    ``hour_ut`` may fall outside 0-24 after a timezone shift; the excess
    rolls into the neighbouring day through the fractional part.
    """
    y = year
    m = month
    if m <= 2:
        y -= 1
        m += 12
    a_term = math.floor(y / 100)
    b_term = 2 - a_term + math.floor(a_term / 4)
    return (
        math.floor(365.25 * (y + 4716))
        + math.floor(30.6001 * (m + 1))
        + day
        + b_term
        - 1524.5
        + hour_ut / 24.0
    )


def local_to_ut(local_hour: float, tz_offset_minutes: float) -> float:
    """Convert a local decimal hour to UT.

    ``tz_offset_minutes`` is how far the local clock runs ahead of UTC
    (-300 for EST). No timezone database or DST rules are consulted.
    """
    return local_hour - tz_offset_minutes / 60.0


def days_in_month(year: int, month: int) -> int:
    return calendar.mdays[month] + (1 if month == 2 and calendar.isleap(year) else 0)


@dataclass(frozen=True)
class CalendarDateTime:
    """A validated local birth moment with its UTC offset."""

    year: int
    month: int
    day: int
    hour: int = DEFAULT_LOCAL_HOUR
    minute: int = DEFAULT_LOCAL_MINUTE
    tz_offset_minutes: float = 0.0

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise InputValidationError(f"Invalid month {self.month}; expected 1-12.")
        if not 1 <= self.day <= days_in_month(self.year, self.month):
            raise InputValidationError(
                f"Invalid day {self.day} for {self.year:04d}-{self.month:02d}."
            )
        if not 0 <= self.hour <= 23:
            raise InputValidationError(f"Invalid hour {self.hour}; expected 0-23.")
        if not 0 <= self.minute <= 59:
            raise InputValidationError(f"Invalid minute {self.minute}; expected 0-59.")
        if not math.isfinite(self.tz_offset_minutes):
            raise InputValidationError("Timezone offset must be a finite number.")

    @property
    def local_hour(self) -> float:
        return self.hour + self.minute / 60.0

    @property
    def hour_ut(self) -> float:
        return local_to_ut(self.local_hour, self.tz_offset_minutes)

    def julian_day(self) -> float:
        return julian_day(self.year, self.month, self.day, self.hour_ut)
