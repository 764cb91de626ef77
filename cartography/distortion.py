"""
Projection Distortion Diagnostics.

Tissot's indicatrix describes how an infinitesimal circle on the
ellipsoid is deformed on the map. For a conformal projection such as the
polar stereographic the indicatrix is a circle whose radius is the point
scale factor; at the latitude of true scale that radius equals the
projection's scale factor.

The indicatrix here is computed numerically from the forward transform,
so it works for any :class:`~cartography.base.MapProjection` and serves
as an independent check of the projection constants.

References
----------
- Snyder, J.P. (1987). Map Projections - A Working Manual. USGS Prof. Paper 1395.
- Tissot, A. (1859). Mémoire sur la représentation des surfaces.
"""

from dataclasses import dataclass

import numpy as np

from cartography.base import MapProjection
from cartography.ellipsoid import (
    radius_of_curvature_meridian,
    radius_of_curvature_prime_vertical,
)


@dataclass
class TissotIndicatrix:
    """Tissot's indicatrix describing local distortion at a point.

    Attributes
    ----------
    meridian_scale : float
        Scale factor h along the meridian.
    parallel_scale : float
        Scale factor k along the parallel.
    area_scale : float
        Area distortion factor.
    angular_distortion_rad : float
        Maximum angular distortion in radians.

    Notes
    -----
    For a conformal projection h = k and the angular distortion is zero.
    """
    meridian_scale: float
    parallel_scale: float
    area_scale: float
    angular_distortion_rad: float

    @property
    def semi_major(self) -> float:
        return max(self.meridian_scale, self.parallel_scale)

    @property
    def semi_minor(self) -> float:
        return min(self.meridian_scale, self.parallel_scale)

    @property
    def is_conformal(self) -> bool:
        """Check if projection is locally conformal (circle, no angular distortion)."""
        return np.abs(self.meridian_scale - self.parallel_scale) < 1e-6


def compute_tissot_indicatrix(
    projection: MapProjection,
    lon_rad: float,
    lat_rad: float,
    delta: float = 1e-6
) -> TissotIndicatrix:
    """Compute Tissot's indicatrix numerically.

    Partial derivatives of the forward transform are taken by central
    differences and scaled by the ellipsoid's radii of curvature.

    Parameters
    ----------
    projection : MapProjection
        The projection to analyze.
    lon_rad, lat_rad : float
        Location in geographic coordinates (radians). The latitude must
        be at least ``delta`` away from the poles.
    delta : float
        Small angular offset for numerical differentiation.

    Returns
    -------
    TissotIndicatrix
        Local distortion characteristics. Scale factors are expressed
        relative to the ellipsoid, so they include the projection's
        scale factor.

    Raises
    ------
    ProjectionException
        If a neighbouring point cannot be projected.
    """
    # ∂x/∂λ, ∂y/∂λ (east-west)
    east = projection.transform(lon_rad + delta, lat_rad)
    west = projection.transform(lon_rad - delta, lat_rad)
    dxdl = (east.x - west.x) / (2 * delta)
    dydl = (east.y - west.y) / (2 * delta)

    # ∂x/∂φ, ∂y/∂φ (north-south)
    north = projection.transform(lon_rad, lat_rad + delta)
    south = projection.transform(lon_rad, lat_rad - delta)
    dxdp = (north.x - south.x) / (2 * delta)
    dydp = (north.y - south.y) / (2 * delta)

    M = radius_of_curvature_meridian(lat_rad, projection.ellipsoid)
    N = radius_of_curvature_prime_vertical(lat_rad, projection.ellipsoid)

    h = float(np.hypot(dxdp, dydp) / M)
    k = float(np.hypot(dxdl, dydl) / (N * np.cos(lat_rad)))

    # sin of the angle between the projected meridian and parallel
    sin_theta = np.abs(dxdp * dydl - dydp * dxdl) / (h * M * k * N * np.cos(lat_rad))
    sin_theta = float(np.clip(sin_theta, -1.0, 1.0))

    return TissotIndicatrix(
        meridian_scale=h,
        parallel_scale=k,
        area_scale=h * k * sin_theta,
        angular_distortion_rad=float(2 * np.arcsin(np.abs(h - k) / (h + k)))
    )
