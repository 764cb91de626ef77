"""
Snyder Auxiliary Functions.

Standard ellipsoidal helper functions from Snyder (1987), shared by the
conformal projections. They are written for scalar arguments.

References
----------
- Snyder, J.P. (1987). Map Projections - A Working Manual. USGS Prof. Paper 1395.
  Equations (14-15) and (15-9).
"""

import numpy as np


def msfn(sinphi: float, cosphi: float, es: float) -> float:
    """Meridional scale function ``m`` (Snyder 14-15).

    Parameters
    ----------
    sinphi, cosphi : float
        Sine and cosine of the latitude.
    es : float
        First eccentricity squared.

    Returns
    -------
    float
        cos φ / sqrt(1 - e² sin² φ)
    """
    return cosphi / np.sqrt(1.0 - es * sinphi * sinphi)


def tsfn(phi: float, sinphi: float, e: float) -> float:
    """Isometric colatitude function ``t`` (Snyder 15-9).

    Parameters
    ----------
    phi : float
        Latitude in radians.
    sinphi : float
        Sine of the latitude.
    e : float
        First eccentricity.

    Returns
    -------
    float
        tan(π/4 - φ/2) / ((1 - e sin φ) / (1 + e sin φ))^(e/2)
    """
    esinphi = e * sinphi
    return np.tan(0.5 * ((np.pi / 2) - phi)) / \
        np.power((1.0 - esinphi) / (1.0 + esinphi), 0.5 * e)


def pole_factor(e: float) -> float:
    """Return sqrt((1+e)^(1+e) (1-e)^(1-e)), the pole term of Snyder (21-33)."""
    return np.sqrt(np.power(1.0 + e, 1.0 + e) * np.power(1.0 - e, 1.0 - e))
