# -*- coding: utf-8 -*-
"""Cross-checks against PROJ through pyproj."""
import pytest
from pyproj import CRS, Proj, Transformer

from cartography.ellipsoid import AuthalicSphere, Hughes1980Ellipsoid, WGS84Ellipsoid
from cartography.polar_stereographic import PolarStereographic, PolarVariant

from conftest import NORTH_POINTS, SOUTH_POINTS


# PROJ ignores +k when +lat_ts is not at the pole, so those cases use k = 1
CASES = [
    pytest.param(
        {"latitude_of_origin": 90.0, "scale_factor": 0.994,
         "false_easting": 2e6, "false_northing": 2e6},
        WGS84Ellipsoid, PolarVariant.ITERATIVE, NORTH_POINTS, id="ups-north",
    ),
    pytest.param(
        {"latitude_of_origin": 90.0, "latitude_true_scale": 70.0, "central_meridian": -45.0},
        Hughes1980Ellipsoid, PolarVariant.SERIES, NORTH_POINTS, id="nsidc-north",
    ),
    pytest.param(
        {"latitude_of_origin": -90.0, "latitude_true_scale": -71.0},
        WGS84Ellipsoid, PolarVariant.ITERATIVE, SOUTH_POINTS, id="antarctic",
    ),
    pytest.param(
        {"latitude_of_origin": -90.0, "latitude_true_scale": -70.0, "central_meridian": 0.0},
        Hughes1980Ellipsoid, PolarVariant.SERIES, SOUTH_POINTS, id="nsidc-south",
    ),
    pytest.param(
        {"latitude_of_origin": 90.0, "latitude_true_scale": 60.0, "central_meridian": 10.0,
         "false_easting": 500.0},
        AuthalicSphere, PolarVariant.SPHERICAL, NORTH_POINTS, id="sphere-north",
    ),
    pytest.param(
        {"latitude_of_origin": -90.0, "scale_factor": 0.97},
        AuthalicSphere, PolarVariant.SPHERICAL, SOUTH_POINTS, id="sphere-south",
    ),
]


class TestAgainstProj:
    @pytest.mark.parametrize("params,ellipsoid,variant,points", CASES)
    def test_forward(self, params, ellipsoid, variant, points):
        proj = PolarStereographic(params, ellipsoid, variant)
        reference = Proj(proj.proj4_string)
        for lon, lat in points:
            expected_x, expected_y = reference(lon, lat)
            p = proj.transform_degrees(lon, lat)
            assert p.x == pytest.approx(expected_x, abs=1e-5)
            assert p.y == pytest.approx(expected_y, abs=1e-5)

    @pytest.mark.parametrize("params,ellipsoid,variant,points", CASES)
    def test_inverse(self, params, ellipsoid, variant, points):
        proj = PolarStereographic(params, ellipsoid, variant)
        reference = Proj(proj.proj4_string)
        for lon, lat in points:
            x, y = reference(lon, lat)
            expected_lon, expected_lat = reference(x, y, inverse=True)
            got_lon, got_lat = proj.inverse_transform_degrees(x, y)
            assert got_lat == pytest.approx(expected_lat, abs=1e-8)
            # Longitudes may differ by a full turn at the antimeridian
            assert (got_lon - expected_lon + 180.0) % 360.0 - 180.0 == pytest.approx(0.0, abs=1e-8)

    def test_ups_north_matches_epsg_definition(self, ups_north_params):
        proj = PolarStereographic(ups_north_params, WGS84Ellipsoid)
        transformer = Transformer.from_crs("EPSG:4326", "EPSG:32661", always_xy=True)
        for lon, lat in [(44.0, 73.0), (-120.0, 85.0), (0.0, 90.0)]:
            expected_x, expected_y = transformer.transform(lon, lat)
            p = proj.transform_degrees(lon, lat)
            assert p.x == pytest.approx(expected_x, abs=1e-4)
            assert p.y == pytest.approx(expected_y, abs=1e-4)

    def test_to_crs(self):
        proj = PolarStereographic(
            {"latitude_of_origin": -90.0, "latitude_true_scale": -71.0}, WGS84Ellipsoid)
        crs = proj.to_crs()
        assert isinstance(crs, CRS)
        assert crs.is_projected
