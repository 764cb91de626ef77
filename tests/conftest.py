"""Shared fixtures for projection tests."""
import numpy as np
import pytest

from cartography.ellipsoid import AuthalicSphere, WGS84Ellipsoid
from cartography.polar_stereographic import PolarStereographic, PolarVariant


# Geographic test points (lon_deg, lat_deg) in the northern hemisphere,
# away from the antipodal pole
NORTH_POINTS = [
    (0.0, 0.0),
    (44.0, 73.0),
    (-45.0, 60.0),
    (90.0, 30.0),
    (179.0, 85.0),
    (-170.0, 45.5),
    (120.0, -30.0),
    (10.0, 89.9),
]

SOUTH_POINTS = [(lon, -lat) for lon, lat in NORTH_POINTS]


def angle_difference(a, b):
    """Smallest signed difference between two angles in radians."""
    return float(np.arctan2(np.sin(a - b), np.cos(a - b)))


@pytest.fixture
def ups_north_params():
    """Universal Polar Stereographic, north zone."""
    return {
        "latitude_of_origin": 90.0,
        "central_meridian": 0.0,
        "scale_factor": 0.994,
        "false_easting": 2_000_000.0,
        "false_northing": 2_000_000.0,
    }


@pytest.fixture
def wgs84_north():
    return PolarStereographic({"latitude_of_origin": 90.0}, WGS84Ellipsoid)


@pytest.fixture(params=list(PolarVariant))
def sphere_projection(request):
    """Same sphere projection in every variant that supports a sphere."""
    return PolarStereographic(
        {"latitude_of_origin": 90.0, "latitude_true_scale": 70.0},
        AuthalicSphere,
        variant=request.param,
    )
