"""
Common utilities and infrastructure for the polar stereographic projection engine.

This package provides foundational components used across all modules:
- Geodetic constants with provenance
- Numerical transform configuration (EPS, TOL, MAX_ITER)
- Exception hierarchy for construction-time and per-point failures
- Unit conversion of projection parameters
- Mutable point type for in-place transforms
- Logging infrastructure
"""

from common.constants import Constant, GeodeticConstants
from common.config import TransformConfig, DEFAULT_CONFIG
from common.exceptions import (
    ProjectionError,
    MissingParameterError,
    InvalidParameterError,
    ProjectionException,
    NoConvergenceError,
    InfiniteValueError,
)
from common.units import ureg, Q_, to_degrees, to_metres, to_dimensionless
from common.types import Point2D
from common.logging_config import get_logger

__all__ = [
    "Constant",
    "GeodeticConstants",
    "TransformConfig",
    "DEFAULT_CONFIG",
    "ProjectionError",
    "MissingParameterError",
    "InvalidParameterError",
    "ProjectionException",
    "NoConvergenceError",
    "InfiniteValueError",
    "ureg",
    "Q_",
    "to_degrees",
    "to_metres",
    "to_dimensionless",
    "Point2D",
    "get_logger",
]
