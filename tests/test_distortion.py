# -*- coding: utf-8 -*-
"""Tests for numerical Tissot indicatrix computation."""
import math

import pytest

from cartography.distortion import compute_tissot_indicatrix
from cartography.ellipsoid import AuthalicSphere, WGS84Ellipsoid
from cartography.polar_stereographic import PolarStereographic, PolarVariant


class TestTissotIndicatrix:
    @pytest.mark.parametrize("variant", [PolarVariant.ITERATIVE, PolarVariant.SERIES])
    def test_true_scale_at_standard_parallel(self, variant):
        proj = PolarStereographic({"latitude_true_scale": 70.0}, WGS84Ellipsoid, variant)
        tissot = compute_tissot_indicatrix(proj, 0.4, math.radians(70.0))
        assert tissot.parallel_scale == pytest.approx(1.0, abs=1e-7)
        assert tissot.meridian_scale == pytest.approx(1.0, abs=1e-7)
        assert tissot.is_conformal

    def test_south_standard_parallel(self):
        proj = PolarStereographic(
            {"latitude_of_origin": -90.0, "latitude_true_scale": -71.0}, WGS84Ellipsoid)
        tissot = compute_tissot_indicatrix(proj, -2.0, math.radians(-71.0))
        assert tissot.parallel_scale == pytest.approx(1.0, abs=1e-7)

    def test_ups_scale_near_pole(self, ups_north_params):
        proj = PolarStereographic(
            dict(ups_north_params, false_easting=0.0, false_northing=0.0), WGS84Ellipsoid)
        tissot = compute_tissot_indicatrix(proj, 1.0, math.radians(89.99))
        assert tissot.parallel_scale == pytest.approx(0.994, rel=1e-6)
        assert tissot.meridian_scale == pytest.approx(0.994, rel=1e-6)

    def test_scale_grows_away_from_pole(self, wgs84_north):
        near = compute_tissot_indicatrix(wgs84_north, 0.0, math.radians(80.0))
        far = compute_tissot_indicatrix(wgs84_north, 0.0, math.radians(40.0))
        assert far.parallel_scale > near.parallel_scale > 1.0

    def test_sphere_closed_form(self):
        proj = PolarStereographic(
            {"latitude_true_scale": 70.0}, AuthalicSphere, PolarVariant.SPHERICAL)
        lat = math.radians(30.0)
        expected = (1.0 + math.sin(math.radians(70.0))) / (1.0 + math.sin(lat))
        tissot = compute_tissot_indicatrix(proj, 0.0, lat)
        assert tissot.parallel_scale == pytest.approx(expected, rel=1e-7)
        assert tissot.area_scale == pytest.approx(expected ** 2, rel=1e-6)
        assert tissot.angular_distortion_rad == pytest.approx(0.0, abs=1e-6)
        assert tissot.semi_major == pytest.approx(tissot.semi_minor, rel=1e-6)
