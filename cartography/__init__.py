"""
Cartography Module: the map projection transform engine.

All conversions between geographic coordinates (radians) and projected
planar coordinates (metres) go through this package.

This module provides:
- Reference ellipsoid models
- Snyder auxiliary functions
- Named projection parameter sets with unit conversion
- The abstract map projection contract
- The polar stereographic family (iterative, spherical and series variants)
- Providers mapping EPSG/OGC/ESRI method names to projections
- Numerical distortion diagnostics
"""

from cartography.ellipsoid import (
    EllipsoidParameters,
    WGS84Ellipsoid,
    GRS80Ellipsoid,
    Hughes1980Ellipsoid,
    International1924Ellipsoid,
    AuthalicSphere,
    UnitSphere,
)

from cartography.parameters import ProjectionParameters

from cartography.base import MapProjection, ensure_in_range

from cartography.polar_stereographic import (
    PolarStereographic,
    PolarVariant,
    PolarSetup,
    derive_polar_setup,
)

from cartography.providers import (
    create_projection,
    available_methods,
    get_provider,
)

from cartography.distortion import TissotIndicatrix, compute_tissot_indicatrix

__all__ = [
    # Ellipsoids
    "EllipsoidParameters",
    "WGS84Ellipsoid",
    "GRS80Ellipsoid",
    "Hughes1980Ellipsoid",
    "International1924Ellipsoid",
    "AuthalicSphere",
    "UnitSphere",
    # Parameters
    "ProjectionParameters",
    # Projections
    "MapProjection",
    "ensure_in_range",
    "PolarStereographic",
    "PolarVariant",
    "PolarSetup",
    "derive_polar_setup",
    # Providers
    "create_projection",
    "available_methods",
    "get_provider",
    # Diagnostics
    "TissotIndicatrix",
    "compute_tissot_indicatrix",
]
