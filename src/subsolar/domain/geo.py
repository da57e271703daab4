# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Geographic value objects and spherical-Earth geometry.

GeoPoint and Region are plain immutable values. Range and ordering checks
are opt-in through validate_point() / validate_region(); the twilight core
itself never validates them.

No external dependencies — only stdlib math/dataclasses.
"""
import math
from dataclasses import dataclass

EARTH_MEAN_RADIUS_KM: float = 6371.01  # Spherical mean radius for distances


class InvalidInputError(ValueError):
    """Input violates a documented precondition of the core."""


@dataclass(frozen=True)
class GeoPoint:
    """A point on the Earth's surface, signed degrees."""
    lat_deg: float
    lon_deg: float


@dataclass(frozen=True)
class Region:
    """Axis-aligned lat/lon box. Expects min <= max on both axes."""
    min: GeoPoint
    max: GeoPoint


def normalize_longitude_deg(lon_deg: float) -> float:
    """Wrap a longitude into [-180, 180)."""
    return (lon_deg + 180.0) % 360.0 - 180.0


def validate_point(point: GeoPoint) -> GeoPoint:
    """Reject points with non-finite or out-of-range coordinates.

    Returns:
        The same point, for chaining.

    Raises:
        InvalidInputError: If lat is outside [-90, 90] or lon outside
            [-180, 180], or either is NaN/inf.
    """
    lat, lon = point.lat_deg, point.lon_deg
    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise InvalidInputError(f"Coordinates must be finite, got {point}")
    if not -90.0 <= lat <= 90.0:
        raise InvalidInputError(f"Latitude must be in [-90, 90], got {lat}")
    if not -180.0 <= lon <= 180.0:
        raise InvalidInputError(f"Longitude must be in [-180, 180], got {lon}")
    return point


def validate_region(region: Region) -> Region:
    """Reject regions with invalid corners or min > max on either axis."""
    validate_point(region.min)
    validate_point(region.max)
    if region.min.lat_deg > region.max.lat_deg:
        raise InvalidInputError(
            f"Region min latitude {region.min.lat_deg} exceeds max {region.max.lat_deg}"
        )
    if region.min.lon_deg > region.max.lon_deg:
        raise InvalidInputError(
            f"Region min longitude {region.min.lon_deg} exceeds max {region.max.lon_deg}"
        )
    return region


def great_circle_distance_km(
    a: GeoPoint,
    b: GeoPoint,
    radius_km: float = EARTH_MEAN_RADIUS_KM,
) -> float:
    """
    Great-circle distance between two points on a sphere (haversine).

    Args:
        a: First point.
        b: Second point.
        radius_km: Sphere radius in km.

    Returns:
        Surface distance in km, in [0, π·radius_km].
    """
    lat1 = math.radians(a.lat_deg)
    lat2 = math.radians(b.lat_deg)
    dlat = lat2 - lat1
    dlon = math.radians(b.lon_deg - a.lon_deg)

    h = (math.sin(dlat / 2.0) ** 2
         + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2.0) ** 2)
    # Clamp for numerical safety near the antipode
    h = min(1.0, max(0.0, h))
    return 2.0 * radius_km * math.asin(math.sqrt(h))
