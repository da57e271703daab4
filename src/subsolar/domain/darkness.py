# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Darkness overlay geometry for map tiles.

Samples the twilight band over a tile's lat/lon box. The four-corner
uniformity check runs first; only tiles it cannot settle are classified
per sample, vectorised with numpy using the same distance conversion and
altitude thresholds as the scalar classifier. Also provides per-band overlay
opacities and the day/night terminator line.
"""
import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from subsolar.domain.geo import (
    EARTH_MEAN_RADIUS_KM,
    GeoPoint,
    InvalidInputError,
    Region,
    normalize_longitude_deg,
)
from subsolar.domain.twilight import (
    EARTH_RADIUS_KM,
    TWILIGHT_THRESHOLDS,
    Twilight,
    twilight_classifier,
    uniform_twilight_over_region,
)

_BANDS_BY_RANK: tuple[Twilight, ...] = tuple(Twilight)


@dataclass(frozen=True)
class GridConfig:
    """Sampling resolution of a tile: rows (north to south) by cols (west to east)."""
    rows: int = 16
    cols: int = 16


@dataclass(frozen=True)
class ShadingConfig:
    """Overlay opacity per twilight band, 0.0 (clear) to 1.0 (opaque)."""
    daylight: float = 0.0
    civil: float = 0.1
    nautical: float = 0.2
    astronomical: float = 0.3
    night: float = 0.4

    def opacity(self, band: Twilight) -> float:
        return getattr(self, band.value)


@dataclass(frozen=True)
class TwilightGrid:
    """Twilight band ranks sampled at cell centres of a region.

    ``ranks[row, col]`` holds Twilight.rank; row 0 is the northernmost row.
    ``uniform`` is set when the corner check settled the whole region.
    """
    region: Region
    lats_deg: np.ndarray
    lons_deg: np.ndarray
    ranks: np.ndarray
    uniform: Optional[Twilight]

    def band_at(self, row: int, col: int) -> Twilight:
        return _BANDS_BY_RANK[int(self.ranks[row, col])]

    def histogram(self) -> dict[Twilight, int]:
        """Number of cells in each band."""
        counts = np.bincount(self.ranks.ravel(), minlength=len(_BANDS_BY_RANK))
        return {band: int(counts[band.rank]) for band in _BANDS_BY_RANK}


def classify_angles(distance_rad: np.ndarray) -> np.ndarray:
    """Vectorised classify_by_distance: band rank for each central angle."""
    alt_deg = 90.0 - np.degrees(np.asarray(distance_rad, dtype=np.float64))
    if not np.all(np.isfinite(alt_deg)):
        raise InvalidInputError("Distances must be finite")

    ranks = np.full(alt_deg.shape, Twilight.NIGHT.rank, dtype=np.int8)
    # Darkest threshold first so brighter bands overwrite
    for min_alt_deg, band in reversed(TWILIGHT_THRESHOLDS):
        ranks[alt_deg >= min_alt_deg] = band.rank
    return ranks


def _central_angles_rad(
    sub_solar: GeoPoint,
    lats_deg: np.ndarray,
    lons_deg: np.ndarray,
) -> np.ndarray:
    """Haversine central angle on the distance sphere, re-scaled like classify_by_points."""
    lat_grid, lon_grid = np.meshgrid(np.radians(lats_deg), np.radians(lons_deg), indexing='ij')
    lat_s = math.radians(sub_solar.lat_deg)
    lon_s = math.radians(sub_solar.lon_deg)

    h = (np.sin((lat_s - lat_grid) / 2.0) ** 2
         + np.cos(lat_grid) * math.cos(lat_s) * np.sin((lon_s - lon_grid) / 2.0) ** 2)
    h = np.clip(h, 0.0, 1.0)
    dist_km = 2.0 * EARTH_MEAN_RADIUS_KM * np.arcsin(np.sqrt(h))
    return dist_km / EARTH_RADIUS_KM


def compute_twilight_grid(
    region: Region,
    sub_solar: GeoPoint,
    config: GridConfig = GridConfig(),
) -> TwilightGrid:
    """
    Twilight band of every sample cell in a region.

    Args:
        region: Tile bounds (min <= max assumed).
        sub_solar: Sub-solar point for the rendering instant.
        config: Grid resolution.

    Returns:
        TwilightGrid; when the four corners agree the grid is filled with
        that band without per-cell work.

    Raises:
        InvalidInputError: If rows or cols is not positive.
    """
    if config.rows <= 0 or config.cols <= 0:
        raise InvalidInputError(
            f"Grid dimensions must be positive, got {config.rows}x{config.cols}"
        )

    dlat = (region.max.lat_deg - region.min.lat_deg) / config.rows
    dlon = (region.max.lon_deg - region.min.lon_deg) / config.cols
    lats = region.max.lat_deg - (np.arange(config.rows) + 0.5) * dlat
    lons = region.min.lon_deg + (np.arange(config.cols) + 0.5) * dlon

    uniform = uniform_twilight_over_region(region, twilight_classifier(sub_solar))
    if uniform is not None:
        ranks = np.full((config.rows, config.cols), uniform.rank, dtype=np.int8)
    else:
        ranks = classify_angles(_central_angles_rad(sub_solar, lats, lons))

    return TwilightGrid(
        region=region,
        lats_deg=lats,
        lons_deg=lons,
        ranks=ranks,
        uniform=uniform,
    )


def shade_grid(grid: TwilightGrid, shading: ShadingConfig = ShadingConfig()) -> np.ndarray:
    """Overlay opacity for every cell of a twilight grid."""
    table = np.array([shading.opacity(band) for band in _BANDS_BY_RANK])
    return table[grid.ranks]


def terminator_curve(
    sub_solar: GeoPoint,
    lon_step_deg: float = 1.0,
) -> list[GeoPoint]:
    """
    Day/night line: the latitude of zero solar altitude at each longitude.

    Solves sin(lat)·sin(dec) + cos(lat)·cos(dec)·cos(Δlon) = 0 for lat,
    where dec is the sub-solar latitude. At an equinox (dec = 0) the line
    runs along the meridians 90° either side of the sub-solar point and the
    solution collapses to the poles elsewhere.

    Args:
        sub_solar: Sub-solar point.
        lon_step_deg: Longitude spacing, degrees.

    Returns:
        Points from lon -180 to +180 inclusive.

    Raises:
        InvalidInputError: If lon_step_deg is not positive.
    """
    if not lon_step_deg > 0:
        raise InvalidInputError(f"Longitude step must be positive, got {lon_step_deg}")

    n_steps = int(math.floor(360.0 / lon_step_deg + 1e-9))
    lons = [min(-180.0 + i * lon_step_deg, 180.0) for i in range(n_steps + 1)]
    if lons[-1] < 180.0:
        lons.append(180.0)

    return [
        GeoPoint(lat_deg=_terminator_lat_deg(sub_solar, lon), lon_deg=lon)
        for lon in lons
    ]


def _terminator_lat_deg(sub_solar: GeoPoint, lon_deg: float) -> float:
    dec = math.radians(sub_solar.lat_deg)
    dlon = math.radians(normalize_longitude_deg(lon_deg - sub_solar.lon_deg))
    num = -math.cos(dlon) * math.cos(dec)
    den = math.sin(dec)
    # Keep the denominator non-negative so atan2 stays within [-90°, 90°]
    if den < 0:
        num, den = -num, -den
    return math.degrees(math.atan2(num, den))
