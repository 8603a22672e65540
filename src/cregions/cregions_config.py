"""
CRegions configuration - numeric defaults shared by the solvers.

Every public entry point takes ``tol`` explicitly; the values here are only
the defaults those parameters fall back to.

Usage:
    from cregions.cregions_config import CRegionsConfig, DEFAULT_TOL

    # Defaults (tol=1e-12)
    config = CRegionsConfig()

    # Override from the environment (CREGIONS_TOL=1e-10)
    config = CRegionsConfig.from_env()
"""

import os
from dataclasses import dataclass


# =============================================================================
# Configuration
# =============================================================================

@dataclass(frozen=True)
class CRegionsConfig:
    """
    Numeric configuration for intersection, path assembly and truncation.

    Attributes:
        tol: Relative tolerance. Comparisons use ``tol * (1 + |scale|)``.

        truncation_radius_factor: Multiplier applied to the largest
            centroid-to-finite-vertex distance when choosing the default
            truncation circle of an unbounded polygon.

        angle_probe_factor: Multiplier applied to the largest finite vertex
            modulus when building the probe circle that disambiguates the
            interior angle at a vertex at infinity.
    """
    tol: float = 1e-12
    truncation_radius_factor: float = 2.0
    angle_probe_factor: float = 100.0

    def __post_init__(self):
        if self.tol <= 0:
            raise ValueError(f"tol must be positive, got {self.tol}")
        if self.truncation_radius_factor <= 1:
            raise ValueError(
                f"truncation_radius_factor must exceed 1, got {self.truncation_radius_factor}")
        if self.angle_probe_factor <= 1:
            raise ValueError(f"angle_probe_factor must exceed 1, got {self.angle_probe_factor}")

    @classmethod
    def from_env(cls) -> 'CRegionsConfig':
        """Build a config, taking ``CREGIONS_TOL`` from the environment when set."""
        raw = os.environ.get('CREGIONS_TOL', '').strip()
        if not raw:
            return cls()
        try:
            tol = float(raw)
        except ValueError:
            raise ValueError(f"CREGIONS_TOL must be a float, got {raw!r}") from None
        return cls(tol=tol)


DEFAULT_CONFIG = CRegionsConfig.from_env()

# Default for every ``tol`` keyword in the package
DEFAULT_TOL = DEFAULT_CONFIG.tol


def check_tol(tol: float) -> float:
    """Validate a caller-supplied tolerance and return it as a float."""
    tol = float(tol)
    if not tol > 0:
        raise ValueError(f"tol must be positive, got {tol}")
    return tol
