"""
Polar Stereographic Projection.

The polar aspect of the stereographic projection: a conformal azimuthal
projection centred on the North or South pole, used for polar sea-ice
grids, UPS, and Antarctic and Arctic mapping.

Variants
--------
One :class:`PolarStereographic` class covers three numerically distinct
formulations, selected at construction by :class:`PolarVariant`:

- ``ITERATIVE``: ellipsoidal formulas of Snyder (USGS); the inverse
  iterates for the latitude and fails if it does not converge.
- ``SPHERICAL``: closed-form formulas for a sphere; no iteration.
- ``SERIES``: ellipsoidal forward as ``ITERATIVE``; the inverse replaces
  the iteration by the EPSG series in the conformal latitude, trading a
  small fixed truncation error for bounded cost.

Each variant keeps its own frozen record of derived constants, and the
forward and inverse functions are looked up from a table keyed by the
variant.

Scientific Context
------------------
Domain: Cartography, mathematical geodesy
Model: Conformal azimuthal projection, polar aspect

References
----------
- Snyder, J.P. (1987). Map Projections - A Working Manual. USGS Prof. Paper 1395.
  Chapter 21, equations (21-5) to (21-12) and (21-32) to (21-38);
  p. 19 "Computation of Series".
- IOGP Publication 373-7-2, Geomatics Guidance Note 7 part 2,
  "Polar Stereographic" (EPSG methods 9810, 9829).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple, Union

import numpy as np

from cartography.base import MapProjection, ensure_in_range, latitude_to_radians
from cartography.ellipsoid import EllipsoidParameters
from cartography.parameters import (
    LATITUDE_OF_ORIGIN,
    LATITUDE_TRUE_SCALE,
    ProjectionParameters,
)
from cartography.snyder import msfn, pole_factor, tsfn
from common.config import DEFAULT_CONFIG, TransformConfig
from common.exceptions import (
    InfiniteValueError,
    InvalidParameterError,
    NoConvergenceError,
)
from common.logging_config import get_logger

logger = get_logger(__name__)


class PolarVariant(Enum):
    """Formulation used by a polar stereographic projection."""
    ITERATIVE = "iterative"
    SPHERICAL = "spherical"
    SERIES = "series"


@dataclass(frozen=True)
class PolarSetup:
    """Hemisphere and true-scale latitude shared by all variants.

    Attributes
    ----------
    latitude_true_scale : float
        Absolute latitude of true scale in radians, in [0, π/2].
    south_pole : bool
        True for a projection centred on the South pole.
    latitude_of_origin : float
        Exactly +π/2 or -π/2.
    """
    latitude_true_scale: float
    south_pole: bool
    latitude_of_origin: float


@dataclass(frozen=True)
class EllipsoidalConstants:
    """Constants of the ITERATIVE variant."""
    k0: float
    ak0: float


@dataclass(frozen=True)
class SphericalConstants:
    """Constants of the SPHERICAL variant."""
    k0: float
    ak0: float


@dataclass(frozen=True)
class SeriesConstants:
    """Constants of the SERIES variant.

    ``k0`` and ``ak0`` are the ellipsoidal (USGS) constants used by the
    forward transform; ``series_k0`` is the EPSG scale used by the
    inverse series, and ``a``, ``b``, ``c``, ``d`` the coefficients of
    the conformal-latitude series.
    """
    k0: float
    ak0: float
    series_k0: float
    a: float
    b: float
    c: float
    d: float


VariantConstants = Union[EllipsoidalConstants, SphericalConstants, SeriesConstants]


def derive_polar_setup(
    parameters: ProjectionParameters,
    latitude_of_origin: float,
    force_south_pole: Optional[bool] = None
) -> PolarSetup:
    """Resolve the hemisphere and the latitude of true scale.

    Parameters
    ----------
    parameters : ProjectionParameters
        Projection parameters.
    latitude_of_origin : float
        The latitude of origin as read by the base projection, in radians.
        Its sign selects the hemisphere unless ``force_south_pole`` is set.
    force_south_pole : bool, optional
        Force the South (True) or North (False) pole regardless of the
        latitude of origin.

    Returns
    -------
    PolarSetup
        The resolved setup; its latitude of origin is pinned to ±π/2.

    Raises
    ------
    MissingParameterError
        If a mandatory parameter is missing.
    InvalidParameterError
        If the latitude of true scale is outside [-90°, 90°].
    """
    lts_deg = parameters.angle(
        LATITUDE_TRUE_SCALE,
        parameters.angle(LATITUDE_OF_ORIGIN, 90.0)
    )
    latitude_true_scale = abs(latitude_to_radians(lts_deg, True))

    if force_south_pole is None:
        south_pole = latitude_of_origin < 0
    else:
        south_pole = bool(force_south_pole)

    return PolarSetup(
        latitude_true_scale=latitude_true_scale,
        south_pole=south_pole,
        latitude_of_origin=-(np.pi / 2) if south_pole else +(np.pi / 2),
    )


def _is_pole(latitude_true_scale: float, config: TransformConfig) -> bool:
    return abs(latitude_true_scale - np.pi / 2) < config.eps


def _ellipsoidal_k0(setup: PolarSetup, e: float, es: float, config: TransformConfig) -> float:
    phi = setup.latitude_true_scale
    if not _is_pole(phi, config):
        t = np.sin(phi)
        # Derives from (21-32) and (21-33)
        return float(msfn(t, np.cos(phi), es) / tsfn(phi, t, e))
    # True scale at pole, part of (21-33)
    return float(2.0 / pole_factor(e))


def _ellipsoidal_constants(
    setup: PolarSetup,
    e: float,
    es: float,
    global_scale: float,
    config: TransformConfig
) -> EllipsoidalConstants:
    k0 = _ellipsoidal_k0(setup, e, es, config)
    return EllipsoidalConstants(k0=k0, ak0=global_scale * k0)


def _spherical_constants(
    setup: PolarSetup,
    e: float,
    es: float,
    global_scale: float,
    config: TransformConfig
) -> SphericalConstants:
    if es != 0.0:
        raise InvalidParameterError(
            "The spherical polar stereographic variant requires a sphere "
            f"(eccentricity squared is {es})"
        )
    phi = setup.latitude_true_scale
    if not _is_pole(phi, config):
        k0 = 1.0 + float(np.sin(phi))  # Derived from (21-7) and (21-11)
    else:
        k0 = 2.0
    return SphericalConstants(k0=k0, ak0=global_scale * k0)


def _series_constants(
    setup: PolarSetup,
    e: float,
    es: float,
    global_scale: float,
    config: TransformConfig
) -> SeriesConstants:
    # Snyder p. 19, "Computation of Series"
    e4 = es * es
    e6 = e4 * es
    e8 = e4 * e4
    c = 7.0 * e6 / 120.0 + 81.0 * e8 / 1120.0
    d = 4279.0 * e8 / 161280.0
    a = es / 2.0 + 5.0 * e4 / 24.0 + e6 / 12.0 + 13.0 * e8 / 360.0 - c
    b = 2.0 * (7.0 * e4 / 48.0 + 29.0 * e6 / 240.0 + 811.0 * e8 / 11520.0) - 4.0 * d
    c *= 4.0
    d *= 8.0

    phi = setup.latitude_true_scale
    if not _is_pole(phi, config):
        t = np.sin(phi)
        series_k0 = float(msfn(t, np.cos(phi), es) * pole_factor(e) / (2.0 * tsfn(phi, t, e)))
    else:
        series_k0 = 1.0

    k0 = _ellipsoidal_k0(setup, e, es, config)
    return SeriesConstants(
        k0=k0, ak0=global_scale * k0, series_k0=series_k0,
        a=a, b=b, c=c, d=d,
    )


_CONSTANT_BUILDERS: Dict[PolarVariant, Callable[..., VariantConstants]] = {
    PolarVariant.ITERATIVE: _ellipsoidal_constants,
    PolarVariant.SPHERICAL: _spherical_constants,
    PolarVariant.SERIES: _series_constants,
}


class PolarStereographic(MapProjection):
    """Polar stereographic projection.

    Parameters
    ----------
    parameters : ProjectionParameters or Mapping
        Projection parameters. Recognised: ``central_meridian``,
        ``latitude_of_origin`` (its sign selects the hemisphere),
        ``latitude_true_scale`` (falls back to ``latitude_of_origin``,
        then to 90°), ``scale_factor``, ``false_easting``,
        ``false_northing``, and ``semi_major``/``semi_minor`` when no
        ellipsoid is given.
    ellipsoid : EllipsoidParameters, optional
        Reference ellipsoid.
    variant : PolarVariant
        Formulation to use. ``SPHERICAL`` requires a sphere.
    config : TransformConfig
        Tolerances (``EPS``, ``TOL``) and iteration budget (``MAX_ITER``).
    force_south_pole : bool, optional
        Force the hemisphere instead of deriving it from the latitude
        of origin.

    Raises
    ------
    MissingParameterError
        If a mandatory parameter is missing.
    InvalidParameterError
        If a parameter is out of range, or ``SPHERICAL`` is requested
        for an ellipsoid.

    Examples
    --------
    >>> from cartography.ellipsoid import WGS84Ellipsoid
    >>> proj = PolarStereographic({"latitude_of_origin": 90}, WGS84Ellipsoid)
    >>> p = proj.transform_degrees(0.0, 90.0)
    >>> abs(p.x) < 1e-9 and abs(p.y) < 1e-9
    True
    """

    def __init__(
        self,
        parameters: Any,
        ellipsoid: Optional[EllipsoidParameters] = None,
        variant: PolarVariant = PolarVariant.ITERATIVE,
        config: TransformConfig = DEFAULT_CONFIG,
        force_south_pole: Optional[bool] = None
    ):
        if not isinstance(parameters, ProjectionParameters):
            parameters = ProjectionParameters(parameters)
        super().__init__(parameters, ellipsoid, config)
        self.variant = PolarVariant(variant)

        setup = derive_polar_setup(
            parameters, self.latitude_of_origin, force_south_pole)
        self.latitude_true_scale = setup.latitude_true_scale
        self.south_pole = setup.south_pole
        self.latitude_of_origin = setup.latitude_of_origin

        self.constants = _CONSTANT_BUILDERS[self.variant](
            setup, self.e, self.es, self.global_scale, config)
        self.k0 = self.constants.k0
        self.ak0 = self.constants.ak0

        self._forward_impl, self._inverse_impl = _DISPATCH[self.variant]

        logger.debug(
            f"Created {self.name}: variant={self.variant.value}, "
            f"south_pole={self.south_pole}, "
            f"lat_ts={np.degrees(self.latitude_true_scale):.9f}, "
            f"k0={self.k0:.15g}, ak0={self.ak0:.15g}"
        )

    @property
    def name(self) -> str:
        pole = "South" if self.south_pole else "North"
        return f"Polar Stereographic ({pole}, {self.variant.value})"

    @property
    def proj4_string(self) -> str:
        lat_0 = -90 if self.south_pole else 90
        lat_ts = float(np.degrees(self.latitude_true_scale)) * (-1 if self.south_pole else 1)
        lon_0 = float(np.degrees(self.central_meridian))
        return (
            f"+proj=stere +lat_0={lat_0} +lat_ts={lat_ts!r} "
            f"+lon_0={lon_0!r} +k={self.scale_factor!r} "
            f"+x_0={self.false_easting!r} +y_0={self.false_northing!r} "
            f"+a={self.semi_major!r} +b={self.semi_minor!r} +units=m +no_defs"
        )

    def parameter_values(self) -> Dict[str, float]:
        values = super().parameter_values()
        if self.variant is not PolarVariant.SERIES:
            lts = float(np.degrees(self.latitude_true_scale))
            values[LATITUDE_TRUE_SCALE] = -lts if self.south_pole else lts
        return values

    def _forward(self, x: float, y: float) -> Tuple[float, float]:
        return self._forward_impl(self, x, y)

    def _inverse(self, x: float, y: float) -> Tuple[float, float]:
        return self._inverse_impl(self, x, y)

    def _state(self) -> Tuple:
        return super()._state() + (self.variant,)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, PolarStereographic):
            return NotImplemented
        return (
            super().__eq__(other)
            and self.south_pole == other.south_pole
            and self.k0 == other.k0
            and self.latitude_true_scale == other.latitude_true_scale
        )

    def __hash__(self) -> int:
        return hash(self.k0) + 37 * super().__hash__()


# ----------------------------------------------------------------------
# Forward transforms
# ----------------------------------------------------------------------

def _forward_ellipsoidal(p: PolarStereographic, x: float, y: float) -> Tuple[float, float]:
    x = ensure_in_range(x - p.central_meridian)
    sinlat = np.sin(y)
    coslon = np.cos(x)
    sinlon = np.sin(x)
    if p.south_pole:
        rho = p.ak0 * tsfn(-y, -sinlat, p.e)
        x = rho * sinlon
        y = rho * coslon
    else:
        rho = p.ak0 * tsfn(y, sinlat, p.e)
        x = rho * sinlon
        y = -rho * coslon
    return float(x + p.false_easting), float(y + p.false_northing)


def _forward_spherical(p: PolarStereographic, x: float, y: float) -> Tuple[float, float]:
    x = ensure_in_range(x - p.central_meridian)
    coslat = np.cos(y)
    sinlat = np.sin(y)
    coslon = np.cos(x)
    sinlon = np.sin(x)
    tol = p.config.tol

    if p.south_pole:
        if not abs(1 - sinlat) >= tol:
            logger.debug(f"Point ({x}, {y}) is at the North pole of a South projection")
            raise InfiniteValueError("Value tends toward infinity at the North pole")
        # (21-12), == tan(pi/4 + phi/2)
        f = p.ak0 * coslat / (1 - sinlat)
        x = f * sinlon  # (21-9)
        y = f * coslon  # (21-10)
    else:
        if not abs(1 + sinlat) >= tol:
            logger.debug(f"Point ({x}, {y}) is at the South pole of a North projection")
            raise InfiniteValueError("Value tends toward infinity at the South pole")
        # (21-8), == tan(pi/4 - phi/2)
        f = p.ak0 * coslat / (1 + sinlat)
        x = f * sinlon   # (21-5)
        y = -f * coslon  # (21-6)
    return float(x + p.false_easting), float(y + p.false_northing)


# ----------------------------------------------------------------------
# Inverse transforms
# ----------------------------------------------------------------------

def _normalized_plane(p: PolarStereographic, x: float, y: float) -> Tuple[float, float, float]:
    x = (x - p.false_easting) / p.global_scale
    y = (y - p.false_northing) / p.global_scale
    return x, y, float(np.sqrt(x * x + y * y))


def _longitude(p: PolarStereographic, x: float, y: float, rho: float) -> float:
    # atan2(0, 0) is indeterminate at the pole
    if abs(rho) < p.config.tol:
        return ensure_in_range(p.central_meridian)
    return ensure_in_range(np.arctan2(x, -y) + p.central_meridian)


def _inverse_iterative(p: PolarStereographic, x: float, y: float) -> Tuple[float, float]:
    x, y, rho = _normalized_plane(p, x, y)
    if p.south_pole:
        y = -y

    t = rho / p.k0
    halfe = p.e / 2.0
    tol = p.config.tol
    phi0 = 0.0
    remaining = p.config.max_iter
    while True:
        esinphi = p.e * np.sin(phi0)
        phi = (np.pi / 2) - 2.0 * np.arctan(
            t * np.power((1 - esinphi) / (1 + esinphi), halfe))
        if abs(phi - phi0) < tol:
            break
        phi0 = phi
        remaining -= 1
        if remaining < 0:
            logger.debug(
                f"No convergence after {p.config.max_iter + 1} iterations "
                f"for rho={rho!r}"
            )
            raise NoConvergenceError(
                f"Latitude did not converge within {p.config.max_iter} iterations"
            )

    lon = _longitude(p, x, y, rho)
    return lon, float(-phi if p.south_pole else phi)


def _inverse_spherical(p: PolarStereographic, x: float, y: float) -> Tuple[float, float]:
    x, y, rho = _normalized_plane(p, x, y)
    if not p.south_pole:
        y = -y
    tol = p.config.tol

    # (20-17), atan2(x, y) handles y == 0
    if abs(x) < tol and abs(y) < tol:
        lon = ensure_in_range(p.central_meridian)
    else:
        lon = ensure_in_range(np.arctan2(x, y) + p.central_meridian)

    k0 = p.constants.k0
    if abs(rho) < tol:
        lat = p.latitude_of_origin
    else:
        # (20-14) with phi1 = 90°
        c = 2.0 * np.arctan(rho / k0)
        cosc = np.cos(c)
        lat = np.arcsin(-cosc) if p.south_pole else np.arcsin(cosc)
    return lon, float(lat)


def _inverse_series(p: PolarStereographic, x: float, y: float) -> Tuple[float, float]:
    x, y, rho = _normalized_plane(p, x, y)
    if p.south_pole:
        y = -y
    s = p.constants

    t = (rho / s.series_k0) * pole_factor(p.e) / 2
    chi = np.pi / 2 - 2 * np.arctan(t)

    lon = _longitude(p, x, y, rho)

    # Snyder p. 19, "Computation of Series"
    sin2chi = np.sin(2.0 * chi)
    cos2chi = np.cos(2.0 * chi)
    lat = chi + sin2chi * (s.a + cos2chi * (s.b + cos2chi * (s.c + s.d * cos2chi)))
    return lon, float(-lat if p.south_pole else lat)


_DISPATCH = {
    PolarVariant.ITERATIVE: (_forward_ellipsoidal, _inverse_iterative),
    PolarVariant.SPHERICAL: (_forward_spherical, _inverse_spherical),
    PolarVariant.SERIES: (_forward_ellipsoidal, _inverse_series),
}
