"""
Abstract Map Projection.

This module provides the base class of all map projections. It owns the
parameters every projection shares (ellipsoid, central meridian,
latitude of origin, scale factor, false easting/northing), their unit
conversion and range checks, longitude normalisation, and the transform
contract.

Transform Contract
------------------
Forward transforms take longitude/latitude in RADIANS and return
easting/northing in METRES; inverse transforms go the other way. Each
direction is offered in two ownership modes:

- ``transform(x, y)`` allocates and returns a new :class:`Point2D`.
- ``transform_into(x, y, dst)`` writes into the caller's point and
  returns it.

A point that cannot be transformed raises a
:class:`~common.exceptions.ProjectionException`. Projections hold no
mutable state after construction, so one instance may serve many
threads at once.

Equality
--------
Projections compare equal when their effective parameters are equal,
which lets upstream code cache transforms keyed by projection.

References
----------
- Snyder, J.P. (1987). Map Projections - A Working Manual. USGS Prof. Paper 1395.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple

import numpy as np
from numpy.typing import ArrayLike, NDArray
from pyproj import CRS

from cartography.ellipsoid import EllipsoidParameters
from cartography.parameters import (
    CENTRAL_MERIDIAN,
    FALSE_EASTING,
    FALSE_NORTHING,
    LATITUDE_OF_ORIGIN,
    SCALE_FACTOR,
    SEMI_MAJOR,
    SEMI_MINOR,
    ProjectionParameters,
)
from common.config import DEFAULT_CONFIG, TransformConfig
from common.exceptions import InvalidParameterError
from common.types import Point2D


def ensure_in_range(x: float) -> float:
    """Normalise a longitude to the range [-π, π].

    Values already in range are returned unchanged, so a longitude of
    exactly ±π keeps its sign.
    """
    if abs(x) > np.pi:
        x = x - 2.0 * np.pi * np.floor((x + np.pi) / (2.0 * np.pi))
    return float(x)


def latitude_to_radians(latitude_deg: float, edge: bool) -> float:
    """Convert a latitude parameter to radians, checking its range.

    Parameters
    ----------
    latitude_deg : float
        Latitude in decimal degrees.
    edge : bool
        Whether ±90° itself is acceptable.

    Raises
    ------
    InvalidParameterError
        If the latitude is outside [-90°, 90°] (or on the edge when
        ``edge`` is False).
    """
    limit_ok = abs(latitude_deg) <= 90 if edge else abs(latitude_deg) < 90
    if not limit_ok:
        raise InvalidParameterError(f"Latitude {latitude_deg}° is out of range")
    return float(np.radians(latitude_deg))


def longitude_to_radians(longitude_deg: float, edge: bool) -> float:
    """Convert a longitude parameter to radians, checking its range.

    Raises
    ------
    InvalidParameterError
        If the longitude is outside [-180°, 180°].
    """
    limit_ok = abs(longitude_deg) <= 180 if edge else abs(longitude_deg) < 180
    if not limit_ok:
        raise InvalidParameterError(f"Longitude {longitude_deg}° is out of range")
    return float(np.radians(longitude_deg))


class MapProjection(ABC):
    """Abstract base class for map projections.

    Parameters
    ----------
    parameters : ProjectionParameters or Mapping
        Projection parameters in standard units.
    ellipsoid : EllipsoidParameters, optional
        Reference ellipsoid. When omitted, ``semi_major`` and
        ``semi_minor`` are mandatory parameters.
    config : TransformConfig
        Numerical tolerances and iteration budget.

    Raises
    ------
    MissingParameterError
        If a mandatory parameter is missing.
    InvalidParameterError
        If a parameter is out of range.
    """

    def __init__(
        self,
        parameters: Any,
        ellipsoid: Optional[EllipsoidParameters] = None,
        config: TransformConfig = DEFAULT_CONFIG
    ):
        if not isinstance(parameters, ProjectionParameters):
            parameters = ProjectionParameters(parameters)
        if ellipsoid is None:
            ellipsoid = EllipsoidParameters.from_axes(
                parameters.length(SEMI_MAJOR),
                parameters.length(SEMI_MINOR)
            )
        self.ellipsoid = ellipsoid
        self.config = config

        self.semi_major = float(ellipsoid.a)
        self.semi_minor = float(ellipsoid.b)
        self.es = float(ellipsoid.e2)
        self.e = float(ellipsoid.e)
        self.is_spherical = (self.es == 0.0)

        self.central_meridian = longitude_to_radians(
            parameters.angle(CENTRAL_MERIDIAN, 0.0), True)
        self.latitude_of_origin = latitude_to_radians(
            parameters.angle(LATITUDE_OF_ORIGIN, 0.0), True)
        self.scale_factor = parameters.scalar(SCALE_FACTOR, 1.0)
        if not self.scale_factor > 0:
            raise InvalidParameterError(
                f"Scale factor must be positive, got {self.scale_factor}")
        self.false_easting = parameters.length(FALSE_EASTING, 0.0)
        self.false_northing = parameters.length(FALSE_NORTHING, 0.0)

        self.global_scale = self.scale_factor * self.semi_major

    # ------------------------------------------------------------------
    # Description
    # ------------------------------------------------------------------

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of the projection."""
        pass

    @property
    @abstractmethod
    def proj4_string(self) -> str:
        """PROJ.4 definition string."""
        pass

    def to_crs(self) -> CRS:
        """Return this projection as a pyproj CRS, for PROJ-based callers."""
        return CRS.from_proj4(self.proj4_string)

    def parameter_values(self) -> Dict[str, float]:
        """Return the effective parameters in standard units (degrees, metres)."""
        return {
            SEMI_MAJOR: self.semi_major,
            SEMI_MINOR: self.semi_minor,
            CENTRAL_MERIDIAN: float(np.degrees(self.central_meridian)),
            LATITUDE_OF_ORIGIN: float(np.degrees(self.latitude_of_origin)),
            SCALE_FACTOR: self.scale_factor,
            FALSE_EASTING: self.false_easting,
            FALSE_NORTHING: self.false_northing,
        }

    def __repr__(self) -> str:
        params = ", ".join(
            f"{k}={v:.10g}" for k, v in self.parameter_values().items())
        return f"{type(self).__name__}[\"{self.name}\"]({params})"

    # ------------------------------------------------------------------
    # Transform contract
    # ------------------------------------------------------------------

    @abstractmethod
    def _forward(self, x: float, y: float) -> Tuple[float, float]:
        """Project (longitude, latitude) in radians to (easting, northing) in metres."""
        pass

    @abstractmethod
    def _inverse(self, x: float, y: float) -> Tuple[float, float]:
        """Unproject (easting, northing) in metres to (longitude, latitude) in radians."""
        pass

    def transform(self, x: float, y: float) -> Point2D:
        """Transform a geographic point and return a new projected point.

        Parameters
        ----------
        x : float
            Longitude in radians.
        y : float
            Latitude in radians.

        Returns
        -------
        Point2D
            Easting and northing in metres.

        Raises
        ------
        ProjectionException
            If the point cannot be projected.
        """
        return Point2D(*self._forward(float(x), float(y)))

    def transform_into(self, x: float, y: float, dst: Point2D) -> Point2D:
        """Transform a geographic point, writing the result into ``dst``.

        ``dst`` is left untouched if the transform fails.
        """
        dst.set_location(*self._forward(float(x), float(y)))
        return dst

    def inverse_transform(self, x: float, y: float) -> Point2D:
        """Transform a projected point and return a new geographic point.

        Parameters
        ----------
        x : float
            Easting in metres.
        y : float
            Northing in metres.

        Returns
        -------
        Point2D
            Longitude and latitude in radians.

        Raises
        ------
        ProjectionException
            If the point cannot be unprojected.
        """
        return Point2D(*self._inverse(float(x), float(y)))

    def inverse_transform_into(self, x: float, y: float, dst: Point2D) -> Point2D:
        """Transform a projected point, writing the result into ``dst``."""
        dst.set_location(*self._inverse(float(x), float(y)))
        return dst

    def transform_degrees(self, lon_deg: float, lat_deg: float) -> Point2D:
        """Forward transform taking longitude/latitude in degrees."""
        return self.transform(np.radians(lon_deg), np.radians(lat_deg))

    def inverse_transform_degrees(self, x: float, y: float) -> Tuple[float, float]:
        """Inverse transform returning ``(lon_deg, lat_deg)``."""
        return self.inverse_transform(x, y).to_degrees()

    def transform_array(
        self,
        xs: ArrayLike,
        ys: ArrayLike
    ) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
        """Project arrays of coordinates.

        Parameters
        ----------
        xs, ys : array_like
            Longitudes and latitudes in radians, broadcastable together.

        Returns
        -------
        Tuple[ndarray, ndarray]
            (easting, northing) arrays in metres, with the broadcast shape.

        Raises
        ------
        ProjectionException
            From the first point that cannot be projected.
        """
        return self._apply(self._forward, xs, ys)

    def inverse_transform_array(
        self,
        xs: ArrayLike,
        ys: ArrayLike
    ) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
        """Unproject arrays of coordinates; see :meth:`transform_array`."""
        return self._apply(self._inverse, xs, ys)

    @staticmethod
    def _apply(func, xs: ArrayLike, ys: ArrayLike):
        bx, by = np.broadcast_arrays(
            np.asarray(xs, dtype=np.float64), np.asarray(ys, dtype=np.float64))
        out_x = np.empty(bx.shape)
        out_y = np.empty(by.shape)
        for index in np.ndindex(bx.shape):
            out_x[index], out_y[index] = func(float(bx[index]), float(by[index]))
        return out_x, out_y

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    def _state(self) -> Tuple:
        return (
            type(self),
            self.semi_major,
            self.semi_minor,
            self.central_meridian,
            self.latitude_of_origin,
            self.scale_factor,
            self.false_easting,
            self.false_northing,
        )

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, MapProjection):
            return NotImplemented
        return self._state() == other._state()

    def __hash__(self) -> int:
        return hash(self._state())
