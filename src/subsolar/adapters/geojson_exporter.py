# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
GeoJSON twilight overlay exporter.

Exports each grid cell as a Polygon carrying its twilight band and overlay
opacity, plus an optional LineString for the terminator. Coordinates follow
the GeoJSON spec: [lon, lat], exterior rings counter-clockwise.
External dependencies (json, file I/O) are confined to this adapter.
"""
import json
import logging
from typing import Sequence

from subsolar.ports.export import TwilightExporter
from subsolar.domain.darkness import ShadingConfig, TwilightGrid
from subsolar.domain.geo import GeoPoint

logger = logging.getLogger(__name__)


class GeoJsonTwilightExporter(TwilightExporter):
    """Exports a twilight grid as a GeoJSON FeatureCollection."""

    def export(
        self,
        grid: TwilightGrid,
        path: str,
        terminator: Sequence[GeoPoint] | None = None,
        shading: ShadingConfig | None = None,
    ) -> int:
        shading = shading or ShadingConfig()
        rows, cols = grid.ranks.shape
        region = grid.region
        half_lat = (region.max.lat_deg - region.min.lat_deg) / rows / 2.0
        half_lon = (region.max.lon_deg - region.min.lon_deg) / cols / 2.0

        features = []
        for row in range(rows):
            lat = float(grid.lats_deg[row])
            south = round(lat - half_lat, 6)
            north = round(lat + half_lat, 6)
            for col in range(cols):
                lon = float(grid.lons_deg[col])
                west = round(lon - half_lon, 6)
                east = round(lon + half_lon, 6)
                band = grid.band_at(row, col)
                features.append({
                    'type': 'Feature',
                    'geometry': {
                        'type': 'Polygon',
                        'coordinates': [[
                            [west, south],
                            [east, south],
                            [east, north],
                            [west, north],
                            [west, south],
                        ]],
                    },
                    'properties': {
                        'row': row,
                        'col': col,
                        'twilight': band.value,
                        'opacity': shading.opacity(band),
                    },
                })

        cell_count = len(features)

        if terminator:
            features.append({
                'type': 'Feature',
                'geometry': {
                    'type': 'LineString',
                    'coordinates': [
                        [round(p.lon_deg, 6), round(p.lat_deg, 6)] for p in terminator
                    ],
                },
                'properties': {'kind': 'terminator'},
            })

        collection = {
            'type': 'FeatureCollection',
            'features': features,
        }
        if grid.uniform is not None:
            collection['properties'] = {'uniform_twilight': grid.uniform.value}

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(collection, f, indent=2, ensure_ascii=False)

        logger.info("Wrote %d twilight cells to %s", cell_count, path)
        return cell_count
