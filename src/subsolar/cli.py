# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for sub-solar point and twilight queries.

Usage:
    # Sub-solar point right now
    subsolar

    # At a given UTC instant, with the twilight band at two locations
    subsolar --time 2026-06-21T12:00:00Z --point 52.37 4.90 --point -33.87 151.21

    # Twilight over a tile, sampled 32x32, exported as GeoJSON with the terminator
    subsolar --region 40 -10 60 20 --rows 32 --cols 32 --export-geojson tile.geojson

    # Log ephemeris intermediates
    subsolar --verbose
"""
import argparse
import logging
import sys
from datetime import datetime, timezone

from subsolar.domain.geo import (
    GeoPoint,
    InvalidInputError,
    Region,
    validate_point,
    validate_region,
)
from subsolar.domain.solar import sub_solar_point_at
from subsolar.domain.twilight import (
    classify_by_points,
    twilight_classifier,
    uniform_twilight_over_region,
)
from subsolar.domain.darkness import (
    GridConfig,
    compute_twilight_grid,
    terminator_curve,
)
from subsolar.adapters.logging_sink import LoggingDiagnosticSink
from subsolar.adapters.geojson_exporter import GeoJsonTwilightExporter

logger = logging.getLogger(__name__)


def parse_time(text: str) -> datetime:
    """Parse an ISO 8601 timestamp; a trailing 'Z' and naive values mean UTC."""
    if text.endswith(('Z', 'z')):
        text = text[:-1] + '+00:00'
    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        raise InvalidInputError(f"Invalid ISO 8601 time: {text!r}") from None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def run(
    epoch: datetime,
    points: list[GeoPoint],
    region: Region | None = None,
    grid_config: GridConfig = GridConfig(),
    export_geojson: str | None = None,
    verbose: bool = False,
) -> int:
    """
    Compute and print the sub-solar point and the requested classifications.

    Returns:
        Number of twilight cells exported (0 when nothing was exported).
    """
    for p in points:
        validate_point(p)
    if region is not None:
        validate_region(region)

    sink = LoggingDiagnosticSink() if verbose else None
    sub_solar = sub_solar_point_at(epoch, sink=sink)

    print(f"Time: {epoch.isoformat()}")
    print(f"Sub-solar point: lat {sub_solar.lat_deg:.4f}, lon {sub_solar.lon_deg:.4f}")

    for p in points:
        band = classify_by_points(sub_solar, p)
        print(f"  ({p.lat_deg:.4f}, {p.lon_deg:.4f}): {band.value}")

    if region is None:
        if export_geojson:
            logger.warning("--export-geojson ignored without --region")
        return 0

    uniform = uniform_twilight_over_region(region, twilight_classifier(sub_solar))
    print(f"Region uniform twilight: {uniform.value if uniform is not None else 'mixed'}")

    grid = compute_twilight_grid(region, sub_solar, grid_config)
    for band, count in grid.histogram().items():
        if count:
            print(f"  {band.value}: {count} cells")

    if not export_geojson:
        return 0

    count = GeoJsonTwilightExporter().export(
        grid, export_geojson, terminator=terminator_curve(sub_solar),
    )
    print(f"Exported {count} cells to {export_geojson}")
    return count


def main():
    parser = argparse.ArgumentParser(
        description="Sub-solar point and day/night twilight classification"
    )
    parser.add_argument(
        '--time', '-t',
        help="UTC instant, ISO 8601 (default: now)"
    )
    parser.add_argument(
        '--point', '-p', nargs=2, type=float, action='append', default=[],
        metavar=('LAT', 'LON'),
        help="Classify the twilight band at this location (repeatable)"
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Log ephemeris intermediates (sidereal time, RA/Dec)"
    )

    grid_group = parser.add_argument_group('region')
    grid_group.add_argument(
        '--region', nargs=4, type=float,
        metavar=('MINLAT', 'MINLON', 'MAXLAT', 'MAXLON'),
        help="Evaluate twilight over a lat/lon box"
    )
    grid_group.add_argument(
        '--rows', type=int, default=16,
        help="Grid rows across the region (default: 16)"
    )
    grid_group.add_argument(
        '--cols', type=int, default=16,
        help="Grid columns across the region (default: 16)"
    )
    grid_group.add_argument(
        '--export-geojson',
        help="Export the region's twilight grid and terminator to GeoJSON"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        epoch = parse_time(args.time) if args.time else datetime.now(tz=timezone.utc)
        points = [GeoPoint(lat_deg=lat, lon_deg=lon) for lat, lon in args.point]
        region = None
        if args.region:
            min_lat, min_lon, max_lat, max_lon = args.region
            region = Region(
                min=GeoPoint(lat_deg=min_lat, lon_deg=min_lon),
                max=GeoPoint(lat_deg=max_lat, lon_deg=max_lon),
            )
        run(
            epoch,
            points,
            region=region,
            grid_config=GridConfig(rows=args.rows, cols=args.cols),
            export_geojson=args.export_geojson,
            verbose=args.verbose,
        )
    except InvalidInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: Cannot write {args.export_geojson}: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
