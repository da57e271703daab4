# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Sub-solar point from a low-precision analytical solar ephemeris.

Sun true longitude from mean anomaly and equation of center, obliquity of
the ecliptic, equatorial RA/Dec, then Greenwich mean sidereal time to place
the Sun's hour angle on a terrestrial longitude. Accuracy is of the order of
an arcminute near J2000 and degrades slowly with polynomial drift over
centuries; the formula never fails for finite input.

Declination and right ascension use single-argument arctangents exactly as
in the reference formulation. Do not replace them with atan2 without
re-validating the reference values.

No external dependencies — only stdlib math/dataclasses/datetime.
"""
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Callable, Optional

from subsolar.domain.geo import GeoPoint, InvalidInputError
from subsolar.domain.time_systems import (
    J2000_JD,
    datetime_to_jd,
    julian_centuries_j2000,
)

if TYPE_CHECKING:
    from subsolar.ports import DiagnosticSink


@dataclass(frozen=True)
class SolarDiagnostics:
    """Intermediate quantities of a single sub-solar point computation."""
    jd: float
    sidereal_time_h: float
    right_ascension_h: float
    declination_deg: float
    sub_solar: GeoPoint


def sub_solar_point_from_jd(
    jd: float,
    sink: Optional["DiagnosticSink"] = None,
) -> GeoPoint:
    """
    Point on the Earth's surface where the Sun is at the zenith.

    Args:
        jd: Julian Date (UTC).
        sink: Optional diagnostic sink; receives one SolarDiagnostics.
            Never affects the returned point.

    Returns:
        GeoPoint with lat = solar declination, lon in (-180, 180].

    Raises:
        InvalidInputError: If jd is NaN or infinite.
    """
    if not math.isfinite(jd):
        raise InvalidInputError(f"Julian Date must be finite, got {jd}")

    T = julian_centuries_j2000(jd)

    # Mean anomaly (degrees)
    M = 357.52910 + 35999.05030 * T - 0.0001559 * T**2 - 0.00000048 * T**3

    # Mean longitude (degrees)
    L0 = 280.46645 + 36000.76983 * T + 0.0003032 * T**2

    # Equation of center (degrees)
    DL = ((1.914600 - 0.004817 * T - 0.000014 * T**2) * math.sin(math.radians(M))
          + (0.019993 - 0.000101 * T) * math.sin(math.radians(2.0 * M))
          + 0.000290 * math.sin(math.radians(3.0 * M)))

    # True longitude (degrees)
    L = L0 + DL

    # Obliquity of the ecliptic (degrees)
    eps = (23.0 + 26.0 / 60.0 + 21.448 / 3600.0
           - (46.8150 * T + 0.00059 * T**2 - 0.001813 * T**3) / 3600.0)

    L_rad = math.radians(L)
    eps_rad = math.radians(eps)
    X = math.cos(L_rad)
    Y = math.cos(eps_rad) * math.sin(L_rad)
    Z = math.sin(eps_rad) * math.sin(L_rad)
    R = math.sqrt(1.0 - Z * Z)

    delta = math.degrees(math.atan(Z / R))
    # Half-angle form: atan(p) is RA/2, so scaling by 24/180 gives hours
    # X + R vanishes only at L = 180°, where RA is ±12 h
    if X + R == 0.0:
        ra = math.copysign(90.0, Y)
    else:
        p = Y / (X + R)
        ra = math.degrees(math.atan(p))
    RA = (24.0 / 180.0) * ra

    # Greenwich mean sidereal time (hours)
    theta0 = (280.46061837 + 360.98564736629 * (jd - J2000_JD)
              + 0.000387933 * T**2 - T**3 / 38710000.0)
    sid_time = (theta0 % 360.0) / 15.0

    sun_ha_deg = ((sid_time - RA) * 15.0) % 360.0
    if sun_ha_deg < 180.0:
        lon = -sun_ha_deg
    else:
        lon = 360.0 - sun_ha_deg

    point = GeoPoint(lat_deg=delta, lon_deg=lon)

    if sink is not None:
        sink.record(SolarDiagnostics(
            jd=jd,
            sidereal_time_h=sid_time,
            right_ascension_h=RA,
            declination_deg=delta,
            sub_solar=point,
        ))

    return point


def sub_solar_point_at(
    epoch: datetime,
    julian_day: Callable[[datetime], float] = datetime_to_jd,
    sink: Optional["DiagnosticSink"] = None,
) -> GeoPoint:
    """Sub-solar point at a given instant.

    Naive datetimes are taken as UTC. ``julian_day`` converts the instant
    to a Julian Date (defaults to the Meeus calendar algorithm).
    """
    return sub_solar_point_from_jd(julian_day(epoch), sink=sink)


def sub_solar_point_now(sink: Optional["DiagnosticSink"] = None) -> GeoPoint:
    """Sub-solar point for the current UTC wall-clock time."""
    return sub_solar_point_at(datetime.now(tz=timezone.utc), sink=sink)
