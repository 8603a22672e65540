"""
Winding solver - point membership for closed paths and polygons.

Winding numbers are computed with Sunday's horizontal ray-crossing method:
each side contributes the signed number of times it crosses the rightward
horizontal ray from the query point (see ``horizontal_crossings``).

Unbounded polygons have one or more vertices at infinity, each represented by
a ray to infinity followed by a ray back from infinity. Before counting
crossings these are truncated: every such ray pair is cut where it meets a
large circle and the two cut points are joined by a counter-clockwise arc of
that circle. The result is a bounded CircularPolygon whose winding numbers
agree with the original inside the circle.

Main API:
    winding(z, P)         -> int
    isleft(z, J)          -> bool   (J: polygon, closed path, Circle or Line)
    isright(z, J)         -> bool
    truncate(P[, circle]) -> CircularPolygon (or P itself when bounded)
    angles(P)             -> numpy array of interior angles
"""

import cmath
import logging
import math
from typing import Iterable, List, Optional, Union

import numpy as np

from ..cregions_config import DEFAULT_CONFIG, DEFAULT_TOL, check_tol
from ..cregions_errors import TruncationNotImplementedError, UnsupportedSideError
from ..curves import Arc, Circle, Curve, CurveKind, Line, Ray, Segment
from ..elements.cregions_path import ClosedPath
from ..elements.cregions_polygon import CircularPolygon, Polygon, finite_vertices
from ..mathutils.cregions_math import TWO_PI, cross, sign, turns
from ..profiling import profile
from .cregions_intersection_solver import horizontal_crossings, intersect

logger = logging.getLogger(__name__)


JordanCurve = Union[Circle, Line, ClosedPath]


def _as_circular_polygon(P: ClosedPath) -> CircularPolygon:
    if isinstance(P, CircularPolygon):
        return P
    if all(c.kind in CircularPolygon.allowed_kinds for c in P):
        return CircularPolygon._from_validated(P.curves)
    kinds = sorted({type(c).__name__ for c in P})
    raise UnsupportedSideError(f"Cannot compute the winding number of a closed path of {kinds}")


# ============================================================================
# TRUNCATION
# ============================================================================

def _is_to_infinity(c: Curve) -> bool:
    return c.kind is CurveKind.RAY and not c.from_infinity


def _is_from_infinity(c: Curve) -> bool:
    return c.kind is CurveKind.RAY and c.from_infinity


def truncation_circle(P: CircularPolygon, include: Iterable[complex] = ()) -> Circle:
    """
    Default truncation circle of an unbounded polygon.

    Centered at the centroid of the finite vertices, with radius a fixed
    multiple (``truncation_radius_factor``) of the distance to the farthest
    finite vertex, arc side or extra point in ``include``.
    """
    finite = np.array(finite_vertices(P), dtype=complex)
    if finite.size == 0:
        raise TruncationNotImplementedError(
            f"Cannot truncate {P!r}: it has no finite vertex to anchor a circle")
    zc = complex(finite.mean())
    reach = float(np.abs(finite - zc).max())
    for c in P:
        if c.kind is CurveKind.ARC:
            reach = max(reach, abs(c.center - zc) + c.radius)
    for z in include:
        reach = max(reach, abs(complex(z) - zc))

    radius = DEFAULT_CONFIG.truncation_radius_factor * reach
    return Circle(zc, radius if radius > 0 else 1.0)


def _ray_exit(C: Circle, ray: Ray, tol: float) -> complex:
    """Point where the ray leaves the circle (the crossing farthest from its base)."""
    hits = intersect(C, ray, tol)
    if hits.is_empty:
        raise ValueError(f"Truncation circle {C!r} does not meet {ray!r}")
    return max(hits, key=lambda p: abs(p - ray.base))


def _connecting_arc(C: Circle, z_pre: complex, z_post: complex) -> Arc:
    center = C.center
    delta = turns((z_post - center) / (z_pre - center))
    return Arc(Circle(center, C.radius), turns(z_pre - center), delta)


@profile
def truncate(P: ClosedPath, circle: Optional[Circle] = None, tol: float = DEFAULT_TOL) -> ClosedPath:
    """
    Replace every vertex at infinity of P by a detour along a circle.

    Each (ray to infinity, ray from infinity) pair becomes
    [Segment(base, z_pre), Arc(circle, z_pre -> z_post), Segment(z_post, base)]
    where z_pre and z_post are the rays' exits from the circle. When the first
    side is a ray from infinity and the last side a ray to infinity, the pair
    wraps around the seam of the side list. Finite sides are kept as they are,
    so the circle should enclose them.

    Args:
        P: Polygon or circular polygon
        circle: Truncation circle; defaults to ``truncation_circle(P)``
        tol: Relative tolerance

    Returns:
        P itself if it is bounded, else a bounded CircularPolygon.
    """
    if P.isfinite():
        return P
    tol = check_tol(tol)
    P = _as_circular_polygon(P)
    C = circle if circle is not None else truncation_circle(P)

    sides = P.curves
    wraps = _is_from_infinity(sides[0]) and _is_to_infinity(sides[-1])
    z_pre = _ray_exit(C, sides[-1], tol) if wraps else None

    new_sides: List[Curve] = []
    for k, side in enumerate(sides):
        if side.kind is not CurveKind.RAY:
            new_sides.append(side)
        elif not side.from_infinity:
            z_pre = _ray_exit(C, side, tol)
            new_sides.append(Segment(side.base, z_pre))
        else:
            if z_pre is None:
                raise ValueError(f"Side {k + 1} returns from infinity without a preceding ray to infinity")
            z_post = _ray_exit(C, side, tol)
            new_sides.append(_connecting_arc(C, z_pre, z_post))
            new_sides.append(Segment(z_post, side.base))
            z_pre = None

    if z_pre is not None and not wraps:
        raise ValueError("Last ray to infinity has no matching ray from infinity")

    logger.debug("Truncated %d sides to %d using %r", len(sides), len(new_sides), C)
    return CircularPolygon(new_sides, tol=tol)


# ============================================================================
# WINDING NUMBER
# ============================================================================

@profile
def winding(z: complex, P: ClosedPath, tol: float = DEFAULT_TOL) -> int:
    """
    Winding number of the closed path P about z.

    Unbounded polygons are truncated first, with the default circle enlarged
    when needed so that it encloses z. The result is unreliable for z on P.
    """
    z = complex(z)
    if not P.isfinite():
        P = _as_circular_polygon(P)
        P = truncate(P, truncation_circle(P, include=(z,)), tol)
    total = sum(horizontal_crossings(z, side, tol) for side in P)
    return int(round(total))


def _side_of(z: complex, J: JordanCurve, tol: float) -> int:
    """Positive if z is left of J, negative if right, zero if undecided."""
    z = complex(z)
    if isinstance(J, Circle):
        return 1 if J.isleft(z) else (-1 if J.isright(z) else 0)
    if isinstance(J, Line):
        return sign(cross(J.direction, z - J.base))
    if isinstance(J, ClosedPath):
        if len(J) == 1 and J.curves[0].kind is CurveKind.CIRCLE:
            return _side_of(z, J.curves[0], tol)
        return winding(z, _as_circular_polygon(J), tol)
    raise TypeError(f"Expected a Circle, Line or closed path, got {type(J).__name__}")


def isleft(z: complex, J: JordanCurve, tol: float = DEFAULT_TOL) -> bool:
    """
    True if z lies to the left of the Jordan curve J.

    For a positively oriented closed path or circle this is the bounded
    interior; for a line it is the half-plane left of its direction.
    """
    return _side_of(z, J, tol) > 0


def isright(z: complex, J: JordanCurve, tol: float = DEFAULT_TOL) -> bool:
    return _side_of(z, J, tol) < 0


# ============================================================================
# INTERIOR ANGLES
# ============================================================================

def _turn(s1: complex, s2: complex) -> float:
    """Turn from direction s1 to s2, in (-pi, pi]; negative for a left turn."""
    return math.pi - ((cmath.phase(s2 / s1) + math.pi) % TWO_PI)


def _probe_turn(P: Polygon, k: int, tol: float) -> float:
    """Angular position of side k's crossing of a large circle relative to side k-1's."""
    R = max(abs(v) for v in finite_vertices(P)) or 1.0
    C = Circle(0j, DEFAULT_CONFIG.angle_probe_factor * R)
    z_prev = intersect(P.side(k - 1), C, tol)[0]
    z_next = intersect(P.side(k), C, tol)[0]
    return cmath.phase(z_next / z_prev)


def angles(P: Polygon, tol: float = DEFAULT_TOL) -> np.ndarray:
    """
    Interior angles at the vertices of P, in radians.

    Angles are measured on the left of P. At a finite vertex the angle is in
    (0, 2pi]; at a vertex at infinity it is in [-2pi, 0]. If the angles sum
    to a negative value, all of them are negated.
    """
    if not isinstance(P, Polygon):
        raise TypeError(f"Interior angles are defined for a Polygon, got {type(P).__name__}")
    n = len(P)
    if n == 2:
        return np.zeros(2)

    tangents = [side.unittangent(0.5) for side in P.sides()]
    vertices = P.vertices()
    theta = np.zeros(n)
    for k in range(n):
        theta[k] = math.pi + _turn(tangents[k - 1], tangents[k])
        if cmath.isinf(vertices[k]):
            theta[k] -= TWO_PI
            # Parallel rays: 0 and -2pi differ only in which side of each other they run
            if abs(theta[k]) <= tol:
                theta[k] = -TWO_PI if _probe_turn(P, k, tol) < 0 else 0.0

    return theta if theta.sum() >= 0 else -theta
