# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""UTC datetime to Julian Date conversion.

Default JulianDayConverter for the solar ephemeris. UTC is used directly;
the UT1/TT distinction is below the precision of the low-precision formula.
"""
import math
from datetime import datetime, timezone

J2000_JD: float = 2451545.0
"""Julian Date of J2000.0 (2000-01-01 12:00:00 UTC)."""

DAYS_PER_JULIAN_CENTURY: float = 36525.0


def as_utc(dt: datetime) -> datetime:
    """Interpret naive datetimes as UTC, convert aware ones to UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def datetime_to_jd(dt: datetime) -> float:
    """Convert a UTC datetime to Julian Date.

    Uses the standard algorithm (Meeus, Astronomical Algorithms, Ch. 7)
    for the Gregorian calendar.
    """
    dt = as_utc(dt)

    y = dt.year
    m = dt.month
    d = (dt.day
         + dt.hour / 24.0
         + dt.minute / 1440.0
         + dt.second / 86400.0
         + dt.microsecond / 86400_000_000.0)

    if m <= 2:
        y -= 1
        m += 12

    A = y // 100
    B = 2 - A + A // 4

    return (math.floor(365.25 * (y + 4716))
            + math.floor(30.6001 * (m + 1))
            + d + B - 1524.5)


def julian_centuries_j2000(jd: float) -> float:
    """Julian centuries elapsed since J2000.0 for a Julian Date."""
    return (jd - J2000_JD) / DAYS_PER_JULIAN_CENTURY
