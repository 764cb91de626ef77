# -*- coding: utf-8 -*-
"""Tests for projection parameter sets and parameter validation."""
import math

import pytest

from cartography.base import ensure_in_range, latitude_to_radians, longitude_to_radians
from cartography.ellipsoid import EllipsoidParameters, WGS84Ellipsoid
from cartography.parameters import (
    LATITUDE_TRUE_SCALE,
    ProjectionParameters,
    canonical_name,
)
from cartography.polar_stereographic import PolarStereographic, PolarVariant
from common.exceptions import InvalidParameterError, MissingParameterError
from common.units import Q_


class TestProjectionParameters:
    def test_aliases_resolve_to_canonical_names(self):
        params = ProjectionParameters({"lat_ts": -71, "lon_0": 70, "x_0": 6e6, "K": 0.994})
        assert params["latitude_true_scale"] == -71.0
        assert params["central_meridian"] == 70.0
        assert params["false_easting"] == 6e6
        assert params["scale_factor"] == 0.994
        assert set(params) == {
            "latitude_true_scale", "central_meridian", "false_easting", "scale_factor"}

    def test_lookup_by_alias(self):
        params = ProjectionParameters(latitude_true_scale=-70.0)
        assert params["standard_parallel_1"] == -70.0
        assert "Standard_Parallel_1" in params

    def test_canonical_name_is_case_insensitive(self):
        assert canonical_name("  Latitude_Of_Origin ") == "latitude_of_origin"
        assert canonical_name("k_0") == "scale_factor"

    def test_unknown_name(self):
        with pytest.raises(InvalidParameterError, match="azimuth"):
            ProjectionParameters({"azimuth": 10.0})

    def test_contains_tolerates_unknown_names(self):
        params = ProjectionParameters()
        assert "azimuth" not in params
        assert 42 not in params

    def test_duplicate_through_alias(self):
        with pytest.raises(InvalidParameterError):
            ProjectionParameters({"lat_ts": 70.0, "standard_parallel_1": 70.0})

    def test_pint_quantities_converted(self):
        params = ProjectionParameters({
            "central_meridian": Q_(math.pi / 4, "radian"),
            "false_easting": Q_(2000, "km"),
            "scale_factor": Q_(0.994, "dimensionless"),
        })
        assert params.angle("central_meridian") == pytest.approx(45.0)
        assert params.length("false_easting") == pytest.approx(2_000_000.0)
        assert params.scalar("scale_factor") == pytest.approx(0.994)

    def test_wrong_dimensionality(self):
        with pytest.raises(InvalidParameterError):
            ProjectionParameters({"false_easting": Q_(10.0, "degree")})

    def test_non_numeric_value(self):
        with pytest.raises(InvalidParameterError):
            ProjectionParameters({"false_easting": "far"})

    def test_missing_without_default(self):
        with pytest.raises(MissingParameterError) as excinfo:
            ProjectionParameters().value("semi_major")
        assert excinfo.value.parameter_name == "semi_major"
        assert "semi_major" in str(excinfo.value)

    def test_missing_is_a_key_error(self):
        with pytest.raises(KeyError):
            ProjectionParameters().value("a")

    def test_default_returned_when_absent(self):
        assert ProjectionParameters().angle(LATITUDE_TRUE_SCALE, 90.0) == 90.0

    def test_fallback_chain(self):
        params = ProjectionParameters(latitude_of_origin=-90.0)
        lts = params.angle("latitude_true_scale", params.angle("latitude_of_origin", 90.0))
        assert lts == -90.0

    def test_with_values_copies(self):
        params = ProjectionParameters(central_meridian=10.0)
        other = params.with_values(lat_ts=60.0, central_meridian=20.0)
        assert params.to_dict() == {"central_meridian": 10.0}
        assert other.to_dict() == {"central_meridian": 20.0, "latitude_true_scale": 60.0}

    def test_repr(self):
        assert "central_meridian=10.0" in repr(ProjectionParameters(lon_0=10))


class TestRangeChecks:
    def test_latitude_edge(self):
        assert latitude_to_radians(90.0, True) == pytest.approx(math.pi / 2)
        with pytest.raises(InvalidParameterError):
            latitude_to_radians(90.0, False)

    def test_latitude_out_of_range(self):
        with pytest.raises(InvalidParameterError):
            latitude_to_radians(-90.5, True)

    def test_longitude_out_of_range(self):
        assert longitude_to_radians(-180.0, True) == pytest.approx(-math.pi)
        with pytest.raises(InvalidParameterError):
            longitude_to_radians(181.0, True)

    def test_projection_rejects_bad_true_scale(self):
        with pytest.raises(InvalidParameterError):
            PolarStereographic({"latitude_true_scale": 91.0}, WGS84Ellipsoid)

    def test_projection_rejects_bad_central_meridian(self):
        with pytest.raises(InvalidParameterError):
            PolarStereographic({"central_meridian": 200.0}, WGS84Ellipsoid)

    def test_projection_rejects_non_positive_scale(self):
        with pytest.raises(InvalidParameterError):
            PolarStereographic({"scale_factor": 0.0}, WGS84Ellipsoid)

    def test_axes_required_without_ellipsoid(self):
        with pytest.raises(MissingParameterError):
            PolarStereographic({"semi_major": 6378137.0})

    def test_axes_from_parameters(self):
        proj = PolarStereographic({"a": 6378137.0, "b": WGS84Ellipsoid.b})
        assert proj.semi_major == 6378137.0
        assert proj.es == pytest.approx(WGS84Ellipsoid.e2, rel=1e-9)

    def test_invalid_axes(self):
        with pytest.raises(InvalidParameterError):
            EllipsoidParameters.from_axes(6356752.0, 6378137.0)

    def test_spherical_variant_needs_sphere(self):
        with pytest.raises(InvalidParameterError, match="sphere"):
            PolarStereographic({}, WGS84Ellipsoid, PolarVariant.SPHERICAL)


class TestEnsureInRange:
    @pytest.mark.parametrize("value", [0.0, 1.0, -3.0, math.pi, -math.pi])
    def test_in_range_unchanged(self, value):
        assert ensure_in_range(value) == value

    @pytest.mark.parametrize("value,expected", [
        (3 * math.pi / 2, -math.pi / 2),
        (-3 * math.pi / 2, math.pi / 2),
        (7 * math.pi / 2, -math.pi / 2),
        (2 * math.pi + 0.25, 0.25),
    ])
    def test_wrapped(self, value, expected):
        assert ensure_in_range(value) == pytest.approx(expected, abs=1e-12)
