"""
Complex-plane math helpers shared by the curve, intersection and winding code.

Points are plain Python ``complex`` values. The point at infinity is ``INF``.
Tolerances are relative: two quantities of magnitude ``s`` are considered
equal when they differ by at most ``tol * (1 + s)``.
"""

import cmath
import math
from typing import Iterable, List, Optional, Tuple

import numpy as np

TWO_PI = 2.0 * math.pi

# The point at infinity of the extended complex plane
INF = complex(math.inf, 0.0)


def is_infinite(z: complex) -> bool:
    return cmath.isinf(z)


def relative_tol(tol: float, *scales: float) -> float:
    """Scale ``tol`` by ``1 + max|scale|`` over the finite scales given."""
    scale = 0.0
    for s in scales:
        a = abs(s)
        if math.isfinite(a) and a > scale:
            scale = a
    return tol * (1.0 + scale)


def points_match(z1: complex, z2: complex, tol: float) -> bool:
    """True if two points coincide within relative tolerance. INF matches INF."""
    inf1, inf2 = is_infinite(z1), is_infinite(z2)
    if inf1 or inf2:
        return inf1 and inf2
    return abs(z1 - z2) <= relative_tol(tol, z1, z2)


def values_match(a: float, b: float, tol: float) -> bool:
    """Scalar counterpart of points_match."""
    return abs(a - b) <= relative_tol(tol, a, b)


def turns(z: complex) -> float:
    """Argument of ``z`` as a fraction of a full turn in [0, 1)."""
    return (cmath.phase(z) / TWO_PI) % 1.0


def turn_distance(a: float, b: float) -> float:
    """Shortest separation of two turn fractions on the unit circle."""
    d = (a - b) % 1.0
    return min(d, 1.0 - d)


def cross(a: complex, b: complex) -> float:
    """Planar cross product a x b."""
    return a.real * b.imag - a.imag * b.real


def sign(x: float, tol: float = 0.0) -> int:
    if x > tol:
        return 1
    if x < -tol:
        return -1
    return 0


def twolines_meet(z1: complex, s1: complex, z2: complex, s2: complex,
                  tol: float) -> Optional[Tuple[float, float]]:
    """
    Solve ``z1 + t1*s1 == z2 + t2*s2`` for the real parameters (t1, t2).

    Returns None when the 2x2 system is ill-conditioned (condition number
    above 1/tol), i.e. the directions are parallel and the caller must decide
    between coincidence and disjointness.
    """
    M = np.array([[s1.real, -s2.real],
                  [s1.imag, -s2.imag]])
    with np.errstate(divide='ignore', invalid='ignore'):
        condition = np.linalg.cond(M)
    if not np.isfinite(condition) or condition > 1.0 / tol:
        return None
    d = z2 - z1
    t = np.linalg.solve(M, np.array([d.real, d.imag]))
    return float(t[0]), float(t[1])


def dedupe_points(points: Iterable[complex], tol: float) -> List[complex]:
    """Drop points that coincide (within tolerance) with an earlier one."""
    unique: List[complex] = []
    for z in points:
        if not any(points_match(z, w, tol) for w in unique):
            unique.append(z)
    return unique
