"""
Numerical Configuration for Projection Transforms.

The projection engine exposes three numerical options:

- ``EPS``: threshold deciding whether a latitude of true scale is
  effectively at the pole (selects the closed-form pole branch for k0).
- ``TOL``: convergence tolerance of the iterative inverse, and the
  near-zero test for rho and for the spherical pole singularity.
- ``MAX_ITER``: iteration budget of the iterative inverse.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class TransformConfig:
    """Tolerances and iteration budget for projection transforms.

    Attributes
    ----------
    eps : float
        Pole special-case threshold in radians.
    tol : float
        Convergence and degeneracy tolerance.
    max_iter : int
        Maximum number of extra iterations of the iterative inverse
        before it gives up.
    """
    eps: float = 1e-6
    tol: float = 1e-10
    max_iter: int = 15

    def __post_init__(self):
        """Validate configuration values."""
        if not self.eps > 0:
            raise ValueError(f"eps must be positive, got {self.eps}")
        if not self.tol > 0:
            raise ValueError(f"tol must be positive, got {self.tol}")
        if self.max_iter < 0:
            raise ValueError(f"max_iter must be non-negative, got {self.max_iter}")

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> 'TransformConfig':
        """Build a configuration from an option mapping.

        Keys are matched case-insensitively, so both ``{"EPS": 1e-7}``
        and ``{"eps": 1e-7}`` are accepted.

        Parameters
        ----------
        options : Mapping[str, Any]
            Option values keyed by ``EPS``, ``TOL`` or ``MAX_ITER``.

        Returns
        -------
        TransformConfig
            Configuration with the given overrides applied to the defaults.

        Raises
        ------
        ValueError
            If an option name is not recognised.
        """
        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in options.items():
            name = key.lower()
            if name not in known:
                raise ValueError(
                    f"Unknown transform option '{key}'. "
                    f"Expected one of {sorted(n.upper() for n in known)}"
                )
            values[name] = int(value) if name == "max_iter" else float(value)
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Return options keyed by their upper-case names."""
        return {"EPS": self.eps, "TOL": self.tol, "MAX_ITER": self.max_iter}


DEFAULT_CONFIG = TransformConfig()
