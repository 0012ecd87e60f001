"""Numerical identity checks for the complex function library."""

from typing import Callable, Dict, List, Optional, Tuple, Any, Sequence
from dataclasses import dataclass
import warnings
import numpy as np

from .value import Complex, ONE, TWO
from . import functions as F


@dataclass
class IdentityResidual:
    """Residual statistics for one identity evaluated over sample points."""
    name: str
    max_residual: float
    mean_residual: float
    non_finite: int  # Points where the residual is inf/NaN
    n_points: int

    def passed(self, tolerance: float = 1e-9) -> bool:
        """True when no residual is non-finite and the largest is within tolerance."""
        return self.non_finite == 0 and self.max_residual <= tolerance

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for reporting."""
        return {
            'name': self.name,
            'max_residual': float(self.max_residual),
            'mean_residual': float(self.mean_residual),
            'non_finite': int(self.non_finite),
            'n_points': int(self.n_points)
        }


def sample_grid(
    xlim: Tuple[float, float] = (-2.0, 2.0),
    ylim: Tuple[float, float] = (-2.0, 2.0),
    resolution: int = 20
) -> List[List[Complex]]:
    """Create a rectangular grid of complex sample points.

    Rows run along the imaginary axis from ylim[0] to ylim[1], columns
    along the real axis.

    Args:
        xlim: Real axis limits
        ylim: Imaginary axis limits
        resolution: Number of points per axis

    Returns:
        resolution x resolution nested list of Complex values

    Raises:
        ValueError: If resolution is not positive
    """
    if resolution <= 0:
        raise ValueError(f"resolution must be positive, got {resolution}")
    x = np.linspace(xlim[0], xlim[1], resolution)
    y = np.linspace(ylim[0], ylim[1], resolution)
    return [[Complex(re, im) for re in x] for im in y]


def compute_identity_residual(
    name: str,
    lhs: Callable[[Complex], Complex],
    rhs: Callable[[Complex], Complex],
    points: Sequence[Complex]
) -> IdentityResidual:
    """Measure |lhs(z) - rhs(z)| over a set of points.

    Non-finite residuals are excluded from the statistics, counted and
    reported with a RuntimeWarning.

    Args:
        name: Identity name for reporting
        lhs: Left-hand side
        rhs: Right-hand side
        points: Sample points

    Returns:
        IdentityResidual with the statistics
    """
    residuals = np.array([lhs(z).minus(rhs(z)).magnitude() for z in points], dtype=float)
    finite = np.isfinite(residuals)
    non_finite = int(np.sum(~finite))

    if non_finite:
        warnings.warn(
            f"Identity '{name}' produced {non_finite} non-finite residuals",
            RuntimeWarning
        )

    if np.any(finite):
        max_residual = float(np.max(residuals[finite]))
        mean_residual = float(np.mean(residuals[finite]))
    else:
        max_residual = float('nan')
        mean_residual = float('nan')

    return IdentityResidual(
        name=name,
        max_residual=max_residual,
        mean_residual=mean_residual,
        non_finite=non_finite,
        n_points=len(residuals)
    )


# name -> (lhs, rhs, excludes zero)
IDENTITIES: Dict[str, Tuple[Callable, Callable, bool]] = {
    'exp_ln': (lambda z: F.exp(F.ln(z)), lambda z: z, True),
    'pythagorean': (
        lambda z: F.sin(z).pow(TWO).plus(F.cos(z).pow(TWO)),
        lambda z: ONE,
        False
    ),
    'hyperbolic_pythagorean': (
        lambda z: F.cosh(z).pow(TWO).minus(F.sinh(z).pow(TWO)),
        lambda z: ONE,
        False
    ),
    'reciprocal': (lambda z: z.times(z.reciprocal()), lambda z: ONE, True),
    'double_conjugate': (lambda z: z.conjugate().conjugate(), lambda z: z, False),
}


def check_identities(
    points: Sequence[Complex],
    names: Optional[List[str]] = None
) -> Dict[str, IdentityResidual]:
    """Evaluate registered identities over sample points.

    Args:
        points: Sample points
        names: Identity names to check (default: all of IDENTITIES)

    Returns:
        Dictionary mapping identity names to residuals

    Raises:
        ValueError: If an identity name is unknown
    """
    names = list(IDENTITIES.keys()) if names is None else names
    results = {}
    for name in names:
        if name not in IDENTITIES:
            raise ValueError(f"Unknown identity: {name}. Available: {list(IDENTITIES.keys())}")
        lhs, rhs, excludes_zero = IDENTITIES[name]
        sample = [z for z in points if not (excludes_zero and z.re == 0 and z.im == 0)]
        results[name] = compute_identity_residual(name, lhs, rhs, sample)
    return results
