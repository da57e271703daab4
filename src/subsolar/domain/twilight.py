# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Twilight band classification relative to the sub-solar point.

The solar altitude at a location is 90° minus its angular distance from the
sub-solar point. Bands follow the civil/nautical/astronomical convention,
each closed at its lower bound: an altitude of exactly -6° is CIVIL, not
NAUTICAL.

No external dependencies — only stdlib math/enum.
"""
import math
from enum import Enum
from typing import Callable, Optional

from subsolar.domain.geo import (
    GeoPoint,
    InvalidInputError,
    Region,
    great_circle_distance_km,
)

EARTH_RADIUS_KM: float = 6378.0  # Converts surface km to central angle

DAYLIGHT_MIN_ALT_DEG: float = 0.0
CIVIL_MIN_ALT_DEG: float = -6.0
NAUTICAL_MIN_ALT_DEG: float = -12.0
ASTRONOMICAL_MIN_ALT_DEG: float = -18.0


class Twilight(Enum):
    """Illumination band, declared from darkest to brightest."""
    NIGHT = "night"
    ASTRONOMICAL = "astronomical"
    NAUTICAL = "nautical"
    CIVIL = "civil"
    DAYLIGHT = "daylight"

    @property
    def rank(self) -> int:
        """Position in the darkest-to-brightest order (NIGHT = 0)."""
        return _RANKS[self]


_RANKS = {band: i for i, band in enumerate(Twilight)}

# (lower altitude bound, band), brightest first
TWILIGHT_THRESHOLDS: tuple[tuple[float, Twilight], ...] = (
    (DAYLIGHT_MIN_ALT_DEG, Twilight.DAYLIGHT),
    (CIVIL_MIN_ALT_DEG, Twilight.CIVIL),
    (NAUTICAL_MIN_ALT_DEG, Twilight.NAUTICAL),
    (ASTRONOMICAL_MIN_ALT_DEG, Twilight.ASTRONOMICAL),
)


def solar_altitude_deg(distance_rad: float) -> float:
    """Solar altitude for a given angular distance from the sub-solar point."""
    return 90.0 - math.degrees(distance_rad)


def classify_by_distance(distance_rad: float) -> Twilight:
    """
    Twilight band at a given great-circle angle from the sub-solar point.

    Args:
        distance_rad: Central angle to the sub-solar point (radians).

    Returns:
        The band whose lower altitude bound is the highest one not above
        the solar altitude; NIGHT below -18°.

    Raises:
        InvalidInputError: If distance_rad is NaN or infinite.
    """
    if not math.isfinite(distance_rad):
        raise InvalidInputError(f"Distance must be finite, got {distance_rad}")

    alt_deg = solar_altitude_deg(distance_rad)
    for min_alt_deg, band in TWILIGHT_THRESHOLDS:
        if alt_deg >= min_alt_deg:
            return band
    return Twilight.NIGHT


def classify_by_points(
    sub_solar: GeoPoint,
    query: GeoPoint,
    distance: Callable[[GeoPoint, GeoPoint], float] = great_circle_distance_km,
) -> Twilight:
    """Twilight band at ``query`` for the Sun overhead at ``sub_solar``.

    ``distance`` returns the surface distance in km; it is converted to a
    central angle with EARTH_RADIUS_KM.
    """
    dist_km = distance(query, sub_solar)
    return classify_by_distance(dist_km / EARTH_RADIUS_KM)


def twilight_classifier(
    sub_solar: GeoPoint,
    distance: Callable[[GeoPoint, GeoPoint], float] = great_circle_distance_km,
) -> Callable[[GeoPoint], Twilight]:
    """classify_by_points bound to a fixed sub-solar point."""
    def classify(query: GeoPoint) -> Twilight:
        return classify_by_points(sub_solar, query, distance=distance)
    return classify


def region_corners(region: Region) -> tuple[GeoPoint, GeoPoint, GeoPoint, GeoPoint]:
    """Corners in sampling order: SW, NW, NE, SE."""
    return (
        GeoPoint(region.min.lat_deg, region.min.lon_deg),
        GeoPoint(region.max.lat_deg, region.min.lon_deg),
        GeoPoint(region.max.lat_deg, region.max.lon_deg),
        GeoPoint(region.min.lat_deg, region.max.lon_deg),
    )


def uniform_twilight_over_region(
    region: Region,
    classifier: Callable[[GeoPoint], Twilight],
) -> Optional[Twilight]:
    """
    Band shared by the whole region, judged from its four corners.

    Stops at the first corner whose band differs from the first corner's.

    Known limitation: only the corners are sampled, so a large region whose
    corners agree while its interior crosses a band boundary (the terminator
    bulging between two corners) is reported as uniform.

    Args:
        region: Box with min <= max on both axes (not checked).
        classifier: Band for a point, typically twilight_classifier(sub_solar).

    Returns:
        The common band, or None if the corners disagree.
    """
    first: Optional[Twilight] = None
    for corner in region_corners(region):
        band = classifier(corner)
        if first is None:
            first = band
        elif band is not first:
            return None
    return first
