# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Tests for the darkness overlay grid, shading and terminator line.
"""
import ast
import math

import numpy as np
import pytest

from subsolar.domain.geo import (
    GeoPoint,
    InvalidInputError,
    Region,
    great_circle_distance_km,
)
from subsolar.domain.twilight import (
    Twilight,
    classify_by_distance,
    classify_by_points,
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

SUB_SOLAR = GeoPoint(0.0, 0.0)


class TestConfigs:

    def test_grid_defaults(self):
        cfg = GridConfig()
        assert (cfg.rows, cfg.cols) == (16, 16)

    def test_grid_config_frozen(self):
        with pytest.raises(AttributeError):
            GridConfig().rows = 4

    def test_shading_defaults_darken_with_band(self):
        shading = ShadingConfig()
        opacities = [shading.opacity(band) for band in Twilight]
        assert opacities == [0.4, 0.3, 0.2, 0.1, 0.0]

    def test_shading_override(self):
        assert ShadingConfig(night=0.8).opacity(Twilight.NIGHT) == 0.8


class TestClassifyAngles:

    def test_matches_scalar(self):
        angles = np.linspace(0.0, math.pi, 721)
        ranks = classify_angles(angles)
        expected = [classify_by_distance(float(a)).rank for a in angles]
        assert ranks.tolist() == expected

    def test_preserves_shape(self):
        angles = np.full((3, 5), math.radians(100.0))
        ranks = classify_angles(angles)
        assert ranks.shape == (3, 5)
        assert np.all(ranks == Twilight.NAUTICAL.rank)

    def test_non_finite_rejected(self):
        with pytest.raises(InvalidInputError):
            classify_angles(np.array([0.1, np.nan]))


class TestComputeTwilightGrid:

    def test_uniform_daylight_tile(self):
        region = Region(min=GeoPoint(-10.0, -10.0), max=GeoPoint(10.0, 10.0))
        grid = compute_twilight_grid(region, SUB_SOLAR, GridConfig(rows=4, cols=8))
        assert isinstance(grid, TwilightGrid)
        assert grid.uniform is Twilight.DAYLIGHT
        assert grid.ranks.shape == (4, 8)
        assert np.all(grid.ranks == Twilight.DAYLIGHT.rank)

    def test_uniform_night_tile(self):
        region = Region(min=GeoPoint(-10.0, 170.0), max=GeoPoint(10.0, 180.0))
        grid = compute_twilight_grid(region, SUB_SOLAR, GridConfig(rows=2, cols=2))
        assert grid.uniform is Twilight.NIGHT
        assert grid.band_at(1, 1) is Twilight.NIGHT

    def test_straddling_tile_sampled_per_cell(self):
        region = Region(min=GeoPoint(-20.0, 70.0), max=GeoPoint(20.0, 130.0))
        grid = compute_twilight_grid(region, SUB_SOLAR, GridConfig(rows=10, cols=30))
        assert grid.uniform is None
        assert len(set(grid.ranks.ravel().tolist())) > 1
        for row in range(10):
            for col in range(30):
                query = GeoPoint(float(grid.lats_deg[row]), float(grid.lons_deg[col]))
                assert grid.band_at(row, col) is classify_by_points(SUB_SOLAR, query)

    def test_cell_centres_north_to_south(self):
        region = Region(min=GeoPoint(0.0, 0.0), max=GeoPoint(10.0, 20.0))
        grid = compute_twilight_grid(region, SUB_SOLAR, GridConfig(rows=2, cols=4))
        assert grid.lats_deg.tolist() == pytest.approx([7.5, 2.5])
        assert grid.lons_deg.tolist() == pytest.approx([2.5, 7.5, 12.5, 17.5])

    def test_brightness_decreases_away_from_sun(self):
        region = Region(min=GeoPoint(-1.0, 60.0), max=GeoPoint(1.0, 180.0))
        grid = compute_twilight_grid(region, SUB_SOLAR, GridConfig(rows=1, cols=120))
        row = grid.ranks[0].tolist()
        assert row == sorted(row, reverse=True)
        assert row[0] == Twilight.DAYLIGHT.rank
        assert row[-1] == Twilight.NIGHT.rank

    def test_histogram_counts_all_cells(self):
        region = Region(min=GeoPoint(-30.0, 60.0), max=GeoPoint(30.0, 140.0))
        grid = compute_twilight_grid(region, SUB_SOLAR, GridConfig(rows=6, cols=16))
        hist = grid.histogram()
        assert set(hist) == set(Twilight)
        assert sum(hist.values()) == 6 * 16

    @pytest.mark.parametrize("rows, cols", [(0, 4), (4, 0), (-1, 3)])
    def test_non_positive_dimensions_rejected(self, rows, cols):
        region = Region(min=GeoPoint(0.0, 0.0), max=GeoPoint(1.0, 1.0))
        with pytest.raises(InvalidInputError):
            compute_twilight_grid(region, SUB_SOLAR, GridConfig(rows=rows, cols=cols))


class TestShadeGrid:

    def test_uniform_night_opacity(self):
        region = Region(min=GeoPoint(-10.0, 170.0), max=GeoPoint(10.0, 180.0))
        grid = compute_twilight_grid(region, SUB_SOLAR, GridConfig(rows=3, cols=3))
        alpha = shade_grid(grid)
        assert alpha.shape == (3, 3)
        assert np.allclose(alpha, 0.4)

    def test_custom_shading(self):
        region = Region(min=GeoPoint(-10.0, -10.0), max=GeoPoint(10.0, 10.0))
        grid = compute_twilight_grid(region, SUB_SOLAR, GridConfig(rows=2, cols=2))
        alpha = shade_grid(grid, ShadingConfig(daylight=0.05))
        assert np.allclose(alpha, 0.05)


class TestTerminatorCurve:

    def test_point_count_and_span(self):
        curve = terminator_curve(SUB_SOLAR, lon_step_deg=1.0)
        assert len(curve) == 361
        assert curve[0].lon_deg == -180.0
        assert curve[-1].lon_deg == 180.0

    def test_uneven_step_ends_at_180(self):
        curve = terminator_curve(SUB_SOLAR, lon_step_deg=7.0)
        assert curve[-1].lon_deg == 180.0
        assert curve[-2].lon_deg < 180.0

    @pytest.mark.parametrize("sub_solar", [
        GeoPoint(23.44, -45.0),
        GeoPoint(-23.0, 0.84),
        GeoPoint(10.0, 170.0),
        GeoPoint(0.0, 30.0),
    ])
    def test_points_are_90_degrees_from_sun(self, sub_solar):
        for p in terminator_curve(sub_solar, lon_step_deg=5.0):
            angle = great_circle_distance_km(p, sub_solar, radius_km=1.0)
            assert angle == pytest.approx(math.pi / 2.0, abs=1e-9)
            assert -90.0 <= p.lat_deg <= 90.0

    def test_northern_summer_pole_in_daylight(self):
        """With the Sun north of the equator the line passes south of the pole."""
        curve = terminator_curve(GeoPoint(23.44, 0.0))
        assert all(p.lat_deg < 90.0 for p in curve)
        assert max(p.lat_deg for p in curve) == pytest.approx(66.56, abs=0.01)

    @pytest.mark.parametrize("step", [0.0, -1.0])
    def test_non_positive_step_rejected(self, step):
        with pytest.raises(InvalidInputError):
            terminator_curve(SUB_SOLAR, lon_step_deg=step)


class TestDarknessPurity:

    def test_darkness_module_imports(self):
        """darkness.py may use numpy on top of the stdlib."""
        import subsolar.domain.darkness as mod

        allowed = {'math', 'dataclasses', 'typing', 'enum', '__future__', 'numpy'}
        with open(mod.__file__) as f:
            tree = ast.parse(f.read())

        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    root = alias.name.split('.')[0]
                    assert root in allowed or root == 'subsolar', (
                        f"Disallowed import '{alias.name}'"
                    )
            if isinstance(node, ast.ImportFrom):
                if node.module and node.level == 0:
                    root = node.module.split('.')[0]
                    assert root in allowed or root == 'subsolar', (
                        f"Disallowed import from '{node.module}'"
                    )
