"""
Reference Ellipsoid Models.

This module defines the ellipsoid (or sphere) on which a map projection
operates. Projections only read from it: the semi-major axis scales the
projected plane, and the first eccentricity enters every ellipsoidal
formula.

Scientific Context
------------------
Domain: Geodesy, Earth geometry
Model: Oblate ellipsoid of revolution; a sphere is the special case f = 0

Spherical vs. Ellipsoidal Formulas
----------------------------------
Projection formulas written for the sphere are closed-form and cheaper,
but only valid when the eccentricity is exactly zero. The
:attr:`EllipsoidParameters.is_sphere` flag is what projection providers
use to pick the spherical variant.

References
----------
- NIMA TR8350.2: WGS84 parameters
- Snyder, J.P. (1987). Map Projections - A Working Manual. USGS Prof. Paper 1395.
"""

from dataclasses import dataclass

import numpy as np

from common.constants import GeodeticConstants
from common.exceptions import InvalidParameterError


@dataclass(frozen=True)
class EllipsoidParameters:
    """Parameters defining a reference ellipsoid.

    Attributes
    ----------
    a : float
        Semi-major axis (equatorial radius) in meters.
    f : float
        Flattening: f = (a - b) / a
    name : str
        Identifier for the ellipsoid.

    Derived Parameters
    ------------------
    b : float
        Semi-minor axis (polar radius) in meters.
    e2 : float
        First eccentricity squared: e² = (a² - b²) / a²
    e : float
        First eccentricity.
    ep2 : float
        Second eccentricity squared: e'² = (a² - b²) / b²
    """
    a: float
    f: float
    name: str = "unnamed"

    def __post_init__(self):
        """Validate axis and flattening."""
        if not self.a > 0:
            raise InvalidParameterError(f"Semi-major axis must be positive, got {self.a}")
        if not 0 <= self.f < 1:
            raise InvalidParameterError(f"Flattening must be in [0, 1), got {self.f}")

    @classmethod
    def from_axes(cls, a: float, b: float, name: str = "unnamed") -> 'EllipsoidParameters':
        """Create an ellipsoid from its semi-major and semi-minor axes.

        Parameters
        ----------
        a : float
            Semi-major axis in meters.
        b : float
            Semi-minor axis in meters.
        name : str
            Identifier for the ellipsoid.

        Raises
        ------
        InvalidParameterError
            If the axes are not positive or ``b > a``.
        """
        if not (a > 0 and b > 0):
            raise InvalidParameterError(f"Axes must be positive, got a={a}, b={b}")
        if b > a:
            raise InvalidParameterError(
                f"Semi-minor axis {b} exceeds semi-major axis {a}"
            )
        return cls(a=float(a), f=(a - b) / a, name=name)

    @classmethod
    def sphere(cls, radius: float, name: str = "sphere") -> 'EllipsoidParameters':
        """Create a sphere of the given radius."""
        return cls(a=float(radius), f=0.0, name=name)

    @property
    def b(self) -> float:
        """Semi-minor axis in meters."""
        return self.a * (1 - self.f)

    @property
    def e2(self) -> float:
        """First eccentricity squared."""
        return self.f * (2 - self.f)

    @property
    def e(self) -> float:
        """First eccentricity."""
        return float(np.sqrt(self.e2))

    @property
    def ep2(self) -> float:
        """Second eccentricity squared."""
        return self.e2 / (1 - self.e2)

    @property
    def is_sphere(self) -> bool:
        """True if the eccentricity is exactly zero."""
        return self.f == 0.0


# WGS84 ellipsoid - the default reference
WGS84Ellipsoid = EllipsoidParameters(
    a=GeodeticConstants.WGS84_SEMI_MAJOR_AXIS.value,
    f=GeodeticConstants.WGS84_FLATTENING.value,
    name="WGS84"
)

GRS80Ellipsoid = EllipsoidParameters(
    a=GeodeticConstants.GRS80_SEMI_MAJOR_AXIS.value,
    f=GeodeticConstants.GRS80_FLATTENING.value,
    name="GRS80"
)

Hughes1980Ellipsoid = EllipsoidParameters(
    a=GeodeticConstants.HUGHES1980_SEMI_MAJOR_AXIS.value,
    f=GeodeticConstants.HUGHES1980_FLATTENING.value,
    name="Hughes 1980"
)

International1924Ellipsoid = EllipsoidParameters(
    a=GeodeticConstants.INTERNATIONAL1924_SEMI_MAJOR_AXIS.value,
    f=GeodeticConstants.INTERNATIONAL1924_FLATTENING.value,
    name="International 1924"
)

AuthalicSphere = EllipsoidParameters.sphere(
    GeodeticConstants.AUTHALIC_SPHERE_RADIUS.value,
    name="GRS 1980 Authalic Sphere"
)

UnitSphere = EllipsoidParameters.sphere(1.0, name="unit sphere")


def radius_of_curvature_meridian(
    latitude_rad: float,
    ellipsoid: EllipsoidParameters = WGS84Ellipsoid
) -> float:
    """Compute the radius of curvature in the meridian plane.

    Parameters
    ----------
    latitude_rad : float
        Geodetic latitude in radians.
    ellipsoid : EllipsoidParameters
        Reference ellipsoid (default: WGS84).

    Returns
    -------
    float
        Radius of curvature M in meters.

    Notes
    -----
    M = a(1 - e²) / (1 - e² sin²φ)^(3/2)
    """
    sin_lat = np.sin(latitude_rad)
    denominator = (1 - ellipsoid.e2 * sin_lat**2) ** 1.5
    return ellipsoid.a * (1 - ellipsoid.e2) / denominator


def radius_of_curvature_prime_vertical(
    latitude_rad: float,
    ellipsoid: EllipsoidParameters = WGS84Ellipsoid
) -> float:
    """Compute the radius of curvature in the prime vertical.

    Parameters
    ----------
    latitude_rad : float
        Geodetic latitude in radians.
    ellipsoid : EllipsoidParameters
        Reference ellipsoid (default: WGS84).

    Returns
    -------
    float
        Radius of curvature N in meters.

    Notes
    -----
    N = a / (1 - e² sin²φ)^(1/2)
    """
    sin_lat = np.sin(latitude_rad)
    denominator = np.sqrt(1 - ellipsoid.e2 * sin_lat**2)
    return ellipsoid.a / denominator
