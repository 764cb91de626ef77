"""
Geodetic Constants for Map Projection.

This module provides the reference ellipsoid constants used by the
projection engine, with their uncertainty bounds and sources. All
constants are defined in SI units and traceable to authoritative sources.

References
----------
- WGS84 parameters: NIMA TR8350.2, Third Edition, 2000
- GRS80 parameters: Moritz, H. (2000). Geodetic Reference System 1980.
- Hughes 1980: NSIDC polar stereographic grids, Hughes (1980)
- International 1924: Hayford ellipsoid, IUGG Madrid 1924
"""

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class Constant:
    """A geodetic constant with uncertainty and provenance.

    Attributes
    ----------
    value : float
        The nominal value of the constant.
    uncertainty : float
        The standard uncertainty (1-sigma) of the constant.
    unit : str
        The SI unit of the constant.
    source : str
        Reference for the constant value.
    description : str
        Human-readable description of the constant.
    """
    value: float
    uncertainty: float
    unit: str
    source: str
    description: str


class GeodeticConstants:
    """Registry of reference ellipsoid constants.

    Each ellipsoid is defined by its semi-major axis and flattening, the
    two values the projection engine needs. Derived quantities
    (eccentricity, semi-minor axis) are computed by
    :class:`cartography.ellipsoid.EllipsoidParameters`.
    """

    # =========================================================================
    # WGS84 Ellipsoid Parameters
    # Reference: NIMA TR8350.2, Third Edition, 2000
    # =========================================================================

    WGS84_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_137.0,
        uncertainty=0.0,  # Defined exactly
        unit="m",
        source="WGS84, NIMA TR8350.2",
        description="Semi-major axis (equatorial radius) of WGS84 ellipsoid"
    )

    WGS84_FLATTENING: Final[Constant] = Constant(
        value=1.0 / 298.257223563,
        uncertainty=0.0,  # Defined exactly
        unit="dimensionless",
        source="WGS84, NIMA TR8350.2",
        description="Flattening of WGS84 ellipsoid: f = (a - b) / a"
    )

    WGS84_ECCENTRICITY_SQUARED: Final[Constant] = Constant(
        value=0.00669437999014,
        uncertainty=1e-14,
        unit="dimensionless",
        source="WGS84, NIMA TR8350.2 (derived)",
        description="First eccentricity squared: e² = (a² - b²) / a²"
    )

    # =========================================================================
    # GRS80 Ellipsoid Parameters
    # =========================================================================

    GRS80_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_137.0,
        uncertainty=0.0,
        unit="m",
        source="Moritz (2000), Geodetic Reference System 1980",
        description="Semi-major axis of GRS80 ellipsoid"
    )

    GRS80_FLATTENING: Final[Constant] = Constant(
        value=1.0 / 298.257222101,
        uncertainty=0.0,
        unit="dimensionless",
        source="Moritz (2000), Geodetic Reference System 1980",
        description="Flattening of GRS80 ellipsoid"
    )

    # =========================================================================
    # Hughes 1980 (NSIDC sea ice polar stereographic grids)
    # =========================================================================

    HUGHES1980_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_273.0,
        uncertainty=0.0,
        unit="m",
        source="Hughes (1980), EPSG:7058",
        description="Semi-major axis of Hughes 1980 ellipsoid"
    )

    HUGHES1980_FLATTENING: Final[Constant] = Constant(
        value=1.0 / 298.279411123064,
        uncertainty=1e-15,
        unit="dimensionless",
        source="Hughes (1980), EPSG:7058",
        description="Flattening of Hughes 1980 ellipsoid"
    )

    # =========================================================================
    # International 1924 (Hayford)
    # =========================================================================

    INTERNATIONAL1924_SEMI_MAJOR_AXIS: Final[Constant] = Constant(
        value=6_378_388.0,
        uncertainty=0.0,
        unit="m",
        source="IUGG Madrid 1924, EPSG:7022",
        description="Semi-major axis of International 1924 ellipsoid"
    )

    INTERNATIONAL1924_FLATTENING: Final[Constant] = Constant(
        value=1.0 / 297.0,
        uncertainty=0.0,
        unit="dimensionless",
        source="IUGG Madrid 1924, EPSG:7022",
        description="Flattening of International 1924 ellipsoid"
    )

    # =========================================================================
    # Authalic sphere
    # =========================================================================

    AUTHALIC_SPHERE_RADIUS: Final[Constant] = Constant(
        value=6_371_007.0,
        uncertainty=1.0,
        unit="m",
        source="EPSG:7048 (GRS 1980 Authalic Sphere)",
        description="Radius of the sphere with the same surface as GRS80"
    )
