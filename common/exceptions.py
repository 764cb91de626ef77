"""
Projection Exceptions
=====================

Exception classes raised by the projection engine.

Construction-time failures (missing or invalid parameters) abort the
construction of a projection. Per-call failures (``ProjectionException``
and its subclasses) abort one transform only and leave the projection
usable for subsequent calls.
"""


class ProjectionError(Exception):
    """Base exception for projection engine errors."""

    pass


class MissingParameterError(ProjectionError, KeyError):
    """Exception raised when a mandatory parameter cannot be resolved."""

    def __init__(self, name: str):
        super().__init__(name)
        self.parameter_name = name

    def __str__(self) -> str:
        return f"Missing mandatory parameter '{self.parameter_name}'"


class InvalidParameterError(ProjectionError, ValueError):
    """Exception raised for parameter values that are out of range or malformed."""

    pass


class ProjectionException(ProjectionError, ArithmeticError):
    """Exception raised when a single point cannot be transformed."""

    pass


class NoConvergenceError(ProjectionException):
    """Exception raised when an iterative computation exhausts its budget."""

    pass


class InfiniteValueError(ProjectionException):
    """Exception raised when a projected value tends toward infinity."""

    pass
