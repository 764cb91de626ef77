"""
Projection Providers.

A provider turns an operation-method name, as found in EPSG, OGC, ESRI
or GeoTIFF definitions, into a configured projection. Each polar
stereographic provider fixes how the hemisphere is chosen and which
ellipsoidal inverse is used; every provider falls back to the spherical
formulas when the ellipsoid is a sphere.

=================================  =========================  ==========
Method                             Hemisphere from            Inverse
=================================  =========================  ==========
Polar Stereographic (variant A)    latitude of origin sign    series
Polar Stereographic (variant B)    true-scale latitude sign   series
Stereographic_North_Pole           forced North               iterative
Stereographic_South_Pole           forced South               iterative
=================================  =========================  ==========
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from cartography.ellipsoid import EllipsoidParameters
from cartography.parameters import (
    LATITUDE_OF_ORIGIN,
    LATITUDE_TRUE_SCALE,
    SEMI_MAJOR,
    SEMI_MINOR,
    ProjectionParameters,
)
from cartography.polar_stereographic import PolarStereographic, PolarVariant
from common.config import DEFAULT_CONFIG, TransformConfig
from common.exceptions import InvalidParameterError
from common.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Provider:
    """A named way of building a projection.

    Attributes
    ----------
    name : str
        Primary method name.
    aliases : tuple of str
        Other names (authority codes, vendor spellings) for the method.
    factory : callable
        ``factory(parameters, ellipsoid, config)`` returning the projection.
    """
    name: str
    aliases: tuple
    factory: Callable[[ProjectionParameters, EllipsoidParameters, TransformConfig], Any]


def _resolve_ellipsoid(
    parameters: ProjectionParameters,
    ellipsoid: Optional[EllipsoidParameters]
) -> EllipsoidParameters:
    if ellipsoid is not None:
        return ellipsoid
    return EllipsoidParameters.from_axes(
        parameters.length(SEMI_MAJOR), parameters.length(SEMI_MINOR))


def _variant(ellipsoid: EllipsoidParameters, ellipsoidal: PolarVariant) -> PolarVariant:
    return PolarVariant.SPHERICAL if ellipsoid.is_sphere else ellipsoidal


def _polar_a(parameters, ellipsoid, config):
    return PolarStereographic(
        parameters, ellipsoid, _variant(ellipsoid, PolarVariant.SERIES), config)


def _polar_b(parameters, ellipsoid, config):
    # The hemisphere follows the standard parallel, then the latitude of origin
    latitude_true_scale = parameters.angle(
        LATITUDE_TRUE_SCALE, parameters.angle(LATITUDE_OF_ORIGIN, 90.0))
    return PolarStereographic(
        parameters, ellipsoid, _variant(ellipsoid, PolarVariant.SERIES), config,
        force_south_pole=latitude_true_scale < 0)


def _north_pole(parameters, ellipsoid, config):
    return PolarStereographic(
        parameters, ellipsoid, _variant(ellipsoid, PolarVariant.ITERATIVE), config,
        force_south_pole=False)


def _south_pole(parameters, ellipsoid, config):
    if LATITUDE_TRUE_SCALE not in parameters and LATITUDE_OF_ORIGIN not in parameters:
        parameters = parameters.with_values(**{LATITUDE_TRUE_SCALE: -90.0})
    return PolarStereographic(
        parameters, ellipsoid, _variant(ellipsoid, PolarVariant.ITERATIVE), config,
        force_south_pole=True)


PROVIDERS: List[Provider] = [
    Provider(
        name="Polar Stereographic (variant A)",
        aliases=("Polar_Stereographic", "EPSG:9810", "9810", "CT_PolarStereographic"),
        factory=_polar_a,
    ),
    Provider(
        name="Polar Stereographic (variant B)",
        aliases=("EPSG:9829", "9829"),
        factory=_polar_b,
    ),
    Provider(
        name="Stereographic_North_Pole",
        aliases=("Stereographic North Pole",),
        factory=_north_pole,
    ),
    Provider(
        name="Stereographic_South_Pole",
        aliases=("Stereographic South Pole",),
        factory=_south_pole,
    ),
]


def _build_index() -> Dict[str, Provider]:
    index: Dict[str, Provider] = {}
    for provider in PROVIDERS:
        for key in (provider.name,) + provider.aliases:
            index[key.strip().lower()] = provider
    return index


_INDEX = _build_index()


def available_methods() -> List[str]:
    """Return the primary names of all registered methods."""
    return [provider.name for provider in PROVIDERS]


def get_provider(method: str) -> Provider:
    """Look up a provider by method name or alias (case-insensitive).

    Raises
    ------
    InvalidParameterError
        If no provider matches.
    """
    try:
        return _INDEX[method.strip().lower()]
    except KeyError:
        raise InvalidParameterError(
            f"Unknown projection method '{method}'. "
            f"Available: {', '.join(available_methods())}"
        ) from None


def create_projection(
    method: str,
    parameters: Any,
    ellipsoid: Optional[EllipsoidParameters] = None,
    config: TransformConfig = DEFAULT_CONFIG
) -> PolarStereographic:
    """Create a projection from a method name and its parameters.

    Parameters
    ----------
    method : str
        Operation method name or alias, e.g. ``"Polar_Stereographic"``
        or ``"EPSG:9829"``.
    parameters : ProjectionParameters or Mapping
        Projection parameters in standard units.
    ellipsoid : EllipsoidParameters, optional
        Reference ellipsoid; taken from ``semi_major``/``semi_minor``
        when omitted.
    config : TransformConfig
        Numerical tolerances and iteration budget.

    Returns
    -------
    PolarStereographic
        The configured projection.

    Raises
    ------
    InvalidParameterError
        If the method is unknown or a parameter is invalid.
    MissingParameterError
        If a mandatory parameter is missing.
    """
    provider = get_provider(method)
    if not isinstance(parameters, ProjectionParameters):
        parameters = ProjectionParameters(parameters)
    ellipsoid = _resolve_ellipsoid(parameters, ellipsoid)
    projection = provider.factory(parameters, ellipsoid, config)
    logger.debug(f"Provider '{provider.name}' created {projection!r}")
    return projection
