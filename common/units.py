"""
Unit Registry and Parameter Unit Conversion.

This module provides a centralized unit system using the `pint` library.
Projection parameters are given in "standard units" (degrees for angles,
metres for lengths, a plain number for scale factors), but callers may
also supply `pint` quantities in any compatible unit. The helpers below
reduce either form to a bare float in the standard unit, and raise when
a quantity has the wrong dimensionality.

Example Usage
-------------
>>> from common.units import Q_, to_degrees, to_metres
>>> to_metres(Q_(12.5, 'km'))
12500.0
>>> to_degrees(-71.0)
-71.0
"""

from typing import Union

import pint
from pint import UnitRegistry as PintUnitRegistry

from common.exceptions import InvalidParameterError

# Create the global unit registry
ureg = PintUnitRegistry()

# Convenience alias for creating quantities
Q_ = ureg.Quantity

QuantityLike = Union[float, int, pint.Quantity]


# Standard unit of each parameter kind
STANDARD_UNITS = {
    "angle": "degree",
    "length": "meter",
    "scale": "dimensionless",
}


def _convert(value: QuantityLike, unit: str, kind: str) -> float:
    if isinstance(value, pint.Quantity):
        try:
            return float(value.to(unit).magnitude)
        except pint.DimensionalityError as e:
            raise InvalidParameterError(
                f"Expected {kind} value convertible to {unit}, got {value.units}"
            ) from e
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise InvalidParameterError(
            f"Expected a number or a pint quantity for {kind} value, got {value!r}"
        ) from e


def to_degrees(value: QuantityLike) -> float:
    """Convert an angle to decimal degrees.

    Parameters
    ----------
    value : float or pint.Quantity
        Bare numbers are taken to be degrees already.

    Returns
    -------
    float
        The angle in degrees.
    """
    return _convert(value, STANDARD_UNITS["angle"], "angle")


def to_metres(value: QuantityLike) -> float:
    """Convert a length to metres. Bare numbers are taken to be metres."""
    return _convert(value, STANDARD_UNITS["length"], "length")


def to_dimensionless(value: QuantityLike) -> float:
    """Convert a scale factor to a plain float."""
    return _convert(value, STANDARD_UNITS["scale"], "scale")
