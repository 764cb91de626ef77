"""
Point Types for Coordinate Transforms.

Transforms either allocate a new :class:`Point2D` or write their result
into a caller-supplied one. The point is deliberately mutable so that a
caller transforming many coordinates can reuse one destination object;
a destination point must not be shared between concurrent calls.

Axis Order
----------
For geographic points, ``x`` is the longitude and ``y`` the latitude,
both in RADIANS. For projected points, ``x`` is the easting and ``y``
the northing, in METRES.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple

import numpy as np


@dataclass
class Point2D:
    """A mutable two-dimensional point.

    Attributes
    ----------
    x : float
        Longitude in radians, or easting in metres.
    y : float
        Latitude in radians, or northing in metres.

    Examples
    --------
    >>> p = Point2D(1.0, 2.0)
    >>> p.set_location(3.0, 4.0)
    >>> x, y = p
    >>> (x, y)
    (3.0, 4.0)
    """
    x: float = 0.0
    y: float = 0.0

    def set_location(self, x: float, y: float) -> None:
        """Overwrite both coordinates."""
        self.x = float(x)
        self.y = float(y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def as_tuple(self) -> Tuple[float, float]:
        """Return the coordinates as an ``(x, y)`` tuple."""
        return self.x, self.y

    def distance(self, other: 'Point2D') -> float:
        """Euclidean distance to another point, in the points' units."""
        return float(np.hypot(self.x - other.x, self.y - other.y))

    def to_degrees(self) -> Tuple[float, float]:
        """Convert a geographic point to ``(lon_deg, lat_deg)`` for display."""
        return float(np.degrees(self.x)), float(np.degrees(self.y))
