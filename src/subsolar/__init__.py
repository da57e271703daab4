# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
subsolar

Sub-solar point and twilight band engine for day/night terminator map
overlays. Computes the point beneath the Sun from a low-precision solar
ephemeris, classifies locations and tiles into daylight, civil, nautical,
astronomical twilight or night, and samples twilight grids for shading.
"""

from subsolar.domain.geo import (
    EARTH_MEAN_RADIUS_KM,
    GeoPoint,
    InvalidInputError,
    Region,
    great_circle_distance_km,
    normalize_longitude_deg,
    validate_point,
    validate_region,
)
from subsolar.domain.time_systems import (
    J2000_JD,
    datetime_to_jd,
    julian_centuries_j2000,
)
from subsolar.domain.solar import (
    SolarDiagnostics,
    sub_solar_point_at,
    sub_solar_point_from_jd,
    sub_solar_point_now,
)
from subsolar.domain.twilight import (
    EARTH_RADIUS_KM,
    Twilight,
    classify_by_distance,
    classify_by_points,
    region_corners,
    solar_altitude_deg,
    twilight_classifier,
    uniform_twilight_over_region,
)
from subsolar.domain.darkness import (
    GridConfig,
    ShadingConfig,
    TwilightGrid,
    classify_angles,
    compute_twilight_grid,
    shade_grid,
    terminator_curve,
)

__version__ = "1.0.0"

__all__ = [
    "EARTH_MEAN_RADIUS_KM",
    "GeoPoint",
    "InvalidInputError",
    "Region",
    "great_circle_distance_km",
    "normalize_longitude_deg",
    "validate_point",
    "validate_region",
    "J2000_JD",
    "datetime_to_jd",
    "julian_centuries_j2000",
    "SolarDiagnostics",
    "sub_solar_point_at",
    "sub_solar_point_from_jd",
    "sub_solar_point_now",
    "EARTH_RADIUS_KM",
    "Twilight",
    "classify_by_distance",
    "classify_by_points",
    "region_corners",
    "solar_altitude_deg",
    "twilight_classifier",
    "uniform_twilight_over_region",
    "GridConfig",
    "ShadingConfig",
    "TwilightGrid",
    "classify_angles",
    "compute_twilight_grid",
    "shade_grid",
    "terminator_curve",
]
