"""
Projection Parameter Sets.

A :class:`ProjectionParameters` is the named key-value bag a caller
hands to a projection. Names are matched case-insensitively and common
aliases (OGC, EPSG, ESRI and PROJ spellings) resolve to one canonical
name. Values are floats in standard units (degrees, metres, plain scale
factors) or `pint` quantities, converted on read.

Lookups follow the fallback rules of the projection being built; a
parameter that cannot be resolved even through its fallback chain
raises :class:`~common.exceptions.MissingParameterError`.

Examples
--------
>>> params = ProjectionParameters({"central_meridian": -45, "standard_parallel_1": -70})
>>> params.angle("latitude_true_scale")
-70.0
>>> params.angle("latitude_of_origin", params.angle("latitude_true_scale", 90.0))
-70.0
"""

from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional

from common.exceptions import InvalidParameterError, MissingParameterError
from common.units import QuantityLike, to_degrees, to_dimensionless, to_metres


# Sentinel for "no default given"
MISSING: Any = object()

SEMI_MAJOR = "semi_major"
SEMI_MINOR = "semi_minor"
CENTRAL_MERIDIAN = "central_meridian"
LATITUDE_OF_ORIGIN = "latitude_of_origin"
LATITUDE_TRUE_SCALE = "latitude_true_scale"
SCALE_FACTOR = "scale_factor"
FALSE_EASTING = "false_easting"
FALSE_NORTHING = "false_northing"

# Canonical name -> kind of value
PARAMETER_KINDS: Dict[str, str] = {
    SEMI_MAJOR: "length",
    SEMI_MINOR: "length",
    CENTRAL_MERIDIAN: "angle",
    LATITUDE_OF_ORIGIN: "angle",
    LATITUDE_TRUE_SCALE: "angle",
    SCALE_FACTOR: "scale",
    FALSE_EASTING: "length",
    FALSE_NORTHING: "length",
}

# Alternative spellings, lower-case
ALIASES: Dict[str, str] = {
    "a": SEMI_MAJOR,
    "semi_major_axis": SEMI_MAJOR,
    "b": SEMI_MINOR,
    "semi_minor_axis": SEMI_MINOR,
    "lon_0": CENTRAL_MERIDIAN,
    "longitude_of_origin": CENTRAL_MERIDIAN,
    "longitude of origin": CENTRAL_MERIDIAN,
    "longitude of natural origin": CENTRAL_MERIDIAN,
    "longitude_of_center": CENTRAL_MERIDIAN,
    "lat_0": LATITUDE_OF_ORIGIN,
    "latitude of natural origin": LATITUDE_OF_ORIGIN,
    "latitude_of_center": LATITUDE_OF_ORIGIN,
    "lat_ts": LATITUDE_TRUE_SCALE,
    "standard_parallel_1": LATITUDE_TRUE_SCALE,
    "standard_parallel": LATITUDE_TRUE_SCALE,
    "latitude of standard parallel": LATITUDE_TRUE_SCALE,
    "k": SCALE_FACTOR,
    "k_0": SCALE_FACTOR,
    "scale factor at natural origin": SCALE_FACTOR,
    "x_0": FALSE_EASTING,
    "y_0": FALSE_NORTHING,
}

_CONVERTERS = {
    "angle": to_degrees,
    "length": to_metres,
    "scale": to_dimensionless,
}


def canonical_name(name: str) -> str:
    """Resolve a parameter name or alias to its canonical spelling.

    Raises
    ------
    InvalidParameterError
        If the name is not a recognised projection parameter.
    """
    key = name.strip().lower()
    key = ALIASES.get(key, key)
    if key not in PARAMETER_KINDS:
        raise InvalidParameterError(f"Unknown projection parameter '{name}'")
    return key


class ProjectionParameters(Mapping):
    """Immutable set of named projection parameters.

    Parameters
    ----------
    values : Mapping[str, float or pint.Quantity], optional
        Parameter values keyed by name or alias.
    **kwargs
        Further parameter values keyed by canonical name.

    Raises
    ------
    InvalidParameterError
        If a name is unknown, a value has the wrong dimensionality, or
        the same parameter is given twice under different aliases.
    """

    def __init__(self, values: Optional[Mapping[str, QuantityLike]] = None, **kwargs: QuantityLike):
        self._values: Dict[str, float] = {}
        merged = list((values or {}).items()) + list(kwargs.items())
        for name, value in merged:
            key = canonical_name(name)
            if key in self._values:
                raise InvalidParameterError(
                    f"Parameter '{key}' given more than once (as '{name}')"
                )
            self._values[key] = _CONVERTERS[PARAMETER_KINDS[key]](value)

    def __getitem__(self, name: str) -> float:
        return self._values[canonical_name(name)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        try:
            return canonical_name(name) in self._values
        except InvalidParameterError:
            return False

    def __repr__(self) -> str:
        items = ", ".join(f"{k}={v!r}" for k, v in self._values.items())
        return f"ProjectionParameters({items})"

    def value(self, name: str, default: Any = MISSING) -> float:
        """Return a parameter value in standard units.

        Parameters
        ----------
        name : str
            Parameter name or alias.
        default : float, optional
            Returned when the parameter is absent. Without a default an
            absent parameter is an error.

        Raises
        ------
        MissingParameterError
            If the parameter is absent and no default was given.
        """
        key = canonical_name(name)
        if key in self._values:
            return self._values[key]
        if default is MISSING:
            raise MissingParameterError(key)
        return default

    def angle(self, name: str, default: Any = MISSING) -> float:
        """Angle parameter in decimal degrees."""
        return self.value(name, default)

    def length(self, name: str, default: Any = MISSING) -> float:
        """Length parameter in metres."""
        return self.value(name, default)

    def scalar(self, name: str, default: Any = MISSING) -> float:
        """Dimensionless parameter."""
        return self.value(name, default)

    def with_values(self, **overrides: QuantityLike) -> 'ProjectionParameters':
        """Return a copy with some parameters replaced or added."""
        values: Dict[str, QuantityLike] = dict(self._values)
        for name, value in overrides.items():
            values[canonical_name(name)] = value
        return ProjectionParameters(values)

    def to_dict(self) -> Dict[str, float]:
        """Return the parameters as a plain dict keyed by canonical name."""
        return dict(self._values)
