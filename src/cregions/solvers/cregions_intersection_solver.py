"""
Curve intersection solver - closed-form pairwise intersection of curves.

Every pair of curve kinds is handled by one canonical routine registered in a
dispatch table keyed by (kind_a, kind_b). The entry for the swapped pair is
generated from the canonical one by exchanging the arguments, so
``intersect(A, B)`` and ``intersect(B, A)`` always run the same arithmetic.

Result Types (IntersectionType enum):
    - EMPTY: The curves do not meet
    - POINT: A single point (including tangency and touching overlaps)
    - POINT_PAIR: Two distinct points
    - POINT_SET: More than two points (only when intersecting paths)
    - OVERLAP: The curves share a sub-curve; ``overlap`` holds the shared
      pieces and ``points`` any isolated points of contact

Pair Routines:
    Line/Ray/Segment pairs:
        All six straight pairs share one meet solver. Each curve is written
        as origin + t*direction with a parameter domain ((-inf, inf) for a
        line, [0, inf) for a ray, [0, 1] for a segment). An ill-conditioned
        2x2 system means the carriers are parallel; collinear carriers
        overlap on the intersection of their projected domains.

    Circle pairs:
        Circle-Line uses the foot of the perpendicular from the center.
        Circle-Ray and Circle-Segment keep the Circle-Line points lying on the
        ray or segment. Circle-Circle uses the radical line.

    Arc pairs:
        Intersect the underlying circle, then keep the points lying on the
        arc(s). Arcs on a common circle overlap on their shared angular range.

All comparisons use the relative tolerance ``tol * (1 + |scale|)``.

Main API:
    result = intersect(A, B, tol=1e-12)
    result.kind -> IntersectionType
    list(result) -> points
    result.overlap -> shared sub-curves

    # Signed crossings of the rightward horizontal ray from z (used by winding)
    horizontal_crossings(z, curve)
"""

import cmath
import functools
import logging
import math
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterable, Iterator, List, Sequence, Tuple, Union

from ..cregions_config import DEFAULT_TOL, check_tol
from ..curves import Arc, Circle, Curve, CurveKind, Line, Ray, Segment
from ..elements.cregions_path import Path
from ..mathutils.cregions_math import (
    cross,
    dedupe_points,
    points_match,
    relative_tol,
    sign,
    twolines_meet,
)
from ..profiling import profile

logger = logging.getLogger(__name__)


# ============================================================================
# RESULT TYPES
# ============================================================================

class IntersectionType(Enum):
    """Shape of an intersection result"""
    EMPTY = 0
    POINT = 1
    POINT_PAIR = 2
    POINT_SET = 3
    OVERLAP = 4


_KIND_BY_COUNT = {
    0: IntersectionType.EMPTY,
    1: IntersectionType.POINT,
    2: IntersectionType.POINT_PAIR,
}


@dataclass(frozen=True)
class IntersectionResult:
    """
    Outcome of intersecting two curves or paths.

    Iterating yields the isolated intersection points; ``len()`` counts them.
    Shared sub-curves of overlapping inputs are in ``overlap``.
    """
    kind: IntersectionType
    points: Tuple[complex, ...] = ()
    overlap: Tuple[Curve, ...] = ()

    @classmethod
    def empty(cls) -> 'IntersectionResult':
        return cls(IntersectionType.EMPTY)

    @classmethod
    def from_points(cls, points: Iterable[complex], tol: float) -> 'IntersectionResult':
        unique = tuple(dedupe_points(points, tol))
        return cls(_KIND_BY_COUNT.get(len(unique), IntersectionType.POINT_SET), unique)

    @classmethod
    def from_overlap(cls, curves: Sequence[Curve], points: Iterable[complex] = (),
                     tol: float = DEFAULT_TOL) -> 'IntersectionResult':
        if not curves:
            return cls.from_points(points, tol)
        return cls(IntersectionType.OVERLAP, tuple(dedupe_points(points, tol)), tuple(curves))

    @property
    def is_empty(self) -> bool:
        return self.kind is IntersectionType.EMPTY

    def __iter__(self) -> Iterator[complex]:
        return iter(self.points)

    def __len__(self) -> int:
        return len(self.points)

    def __bool__(self) -> bool:
        return not self.is_empty

    def __getitem__(self, k: int) -> complex:
        return self.points[k]


# ============================================================================
# DISPATCH
# ============================================================================

PairSolver = Callable[[Curve, Curve, float], IntersectionResult]

_DISPATCH: Dict[Tuple[CurveKind, CurveKind], PairSolver] = {}


def _swapped(func: PairSolver) -> PairSolver:
    @functools.wraps(func)
    def wrapper(b, a, tol):
        return func(a, b, tol)
    return wrapper


def _register(kind_a: CurveKind, kind_b: CurveKind):
    """Register the canonical solver for an unordered kind pair."""
    def decorator(func: PairSolver) -> PairSolver:
        _DISPATCH[(kind_a, kind_b)] = func
        if kind_a is not kind_b:
            _DISPATCH[(kind_b, kind_a)] = _swapped(func)
        return func
    return decorator


def _on_curve(c: Curve, z: complex, tol: float) -> bool:
    return c.dist(z) <= relative_tol(tol, z)


# ============================================================================
# STRAIGHT CURVES
# ============================================================================

def _linear_form(c: Curve) -> Tuple[complex, complex, float, float]:
    """(origin, direction, t_min, t_max) with the curve = origin + t*direction."""
    if c.kind is CurveKind.LINE:
        return c.base, c.direction, -math.inf, math.inf
    if c.kind is CurveKind.RAY:
        return c.base, c.direction, 0.0, math.inf
    return c.za, c.zb - c.za, 0.0, 1.0


def _param_slack(tol: float, direction: complex, *points: complex) -> float:
    """Relative distance tolerance converted to parameter units along ``direction``."""
    return relative_tol(tol, *points) / abs(direction)


def _linear_piece(z: complex, s: complex, lo: float, hi: float) -> Curve:
    """Part of the carrier z + t*s with lo <= t <= hi, traversed with increasing t."""
    if math.isinf(lo) and math.isinf(hi):
        return Line(z, s)
    if math.isinf(hi):
        return Ray(z + lo * s, cmath.phase(s))
    if math.isinf(lo):
        return Ray(z + hi * s, cmath.phase(-s), from_infinity=True)
    return Segment(z + lo * s, z + hi * s)


def _linear_parallel(a: Curve, b: Curve, tol: float) -> IntersectionResult:
    z1, s1, lo1, hi1 = _linear_form(a)
    z2, s2, lo2, hi2 = _linear_form(b)

    if abs(cross(s1 / abs(s1), z2 - z1)) > relative_tol(tol, z1, z2):
        logger.debug("Parallel %s and %s do not meet", type(a).__name__, type(b).__name__)
        return IntersectionResult.empty()

    # Project b's parameter domain onto a's parameter axis
    n1sq = abs(s1) ** 2
    offset = ((z2 - z1) * s1.conjugate()).real / n1sq
    ratio = (s2 * s1.conjugate()).real / n1sq
    u_lo, u_hi = sorted((offset + ratio * lo2, offset + ratio * hi2))

    lo, hi = max(lo1, u_lo), min(hi1, u_hi)
    slack = _param_slack(tol, s1, z1, z2)
    if lo > hi + slack:
        return IntersectionResult.empty()
    if hi - lo <= slack:
        return IntersectionResult.from_points([z1 + 0.5 * (lo + hi) * s1], tol)

    piece = _linear_piece(z1, s1, lo, hi)
    if a.kind is CurveKind.RAY and a.from_infinity:
        piece = piece.reverse()
    logger.debug("Collinear %s and %s overlap in a %s", type(a).__name__, type(b).__name__,
                 type(piece).__name__)
    return IntersectionResult.from_overlap([piece], tol=tol)


def _meet_parameters(z1, s1, z2, s2, tol):
    # Solve with unit directions so the condition number reflects only the angle
    n1, n2 = abs(s1), abs(s2)
    meet = twolines_meet(z1, s1 / n1, z2, s2 / n2, tol)
    if meet is None:
        return None
    return meet[0] / n1, meet[1] / n2


@_register(CurveKind.LINE, CurveKind.LINE)
@_register(CurveKind.LINE, CurveKind.RAY)
@_register(CurveKind.LINE, CurveKind.SEGMENT)
@_register(CurveKind.RAY, CurveKind.RAY)
@_register(CurveKind.RAY, CurveKind.SEGMENT)
@_register(CurveKind.SEGMENT, CurveKind.SEGMENT)
def _intersect_linear(a: Curve, b: Curve, tol: float) -> IntersectionResult:
    z1, s1, lo1, hi1 = _linear_form(a)
    z2, s2, lo2, hi2 = _linear_form(b)

    meet = _meet_parameters(z1, s1, z2, s2, tol)
    if meet is None:
        return _linear_parallel(a, b, tol)

    t1, t2 = meet
    p = z1 + t1 * s1
    slack1 = _param_slack(tol, s1, p, z1)
    slack2 = _param_slack(tol, s2, p, z2)
    if not (lo1 - slack1 <= t1 <= hi1 + slack1 and lo2 - slack2 <= t2 <= hi2 + slack2):
        return IntersectionResult.empty()

    t1 = min(max(t1, lo1), hi1)
    return IntersectionResult.from_points([z1 + t1 * s1], tol)


# ============================================================================
# CIRCLES
# ============================================================================

def _circle_line_points(C: Circle, z0: complex, s: complex, tol: float) -> List[complex]:
    """Points where C meets the full line through z0 with direction s."""
    u = s / abs(s)
    # The radius perpendicular to the line meets it at the foot point
    t_radial, _ = twolines_meet(C.center, 1j * u, z0, u, tol)
    foot = C.center + t_radial * 1j * u
    a = abs(foot - C.center)
    r = C.radius
    slack = relative_tol(tol, r, C.center)
    if a > r + slack:
        return []
    if abs(a - r) <= slack:
        return [foot]
    h = math.sqrt(r * r - a * a)
    return [foot - h * u, foot + h * u]


@_register(CurveKind.CIRCLE, CurveKind.LINE)
@_register(CurveKind.CIRCLE, CurveKind.RAY)
@_register(CurveKind.CIRCLE, CurveKind.SEGMENT)
def _intersect_circle_linear(C: Circle, b: Curve, tol: float) -> IntersectionResult:
    z0, s, _, _ = _linear_form(b)
    points = _circle_line_points(C, z0, s, tol)
    if b.kind is not CurveKind.LINE:
        points = [p for p in points if _on_curve(b, p, tol)]
    return IntersectionResult.from_points(points, tol)


@_register(CurveKind.CIRCLE, CurveKind.CIRCLE)
def _intersect_circle_circle(A: Circle, B: Circle, tol: float) -> IntersectionResult:
    r1, r2 = A.radius, B.radius
    delta = B.center - A.center
    d = abs(delta)
    slack = relative_tol(tol, r1, r2, A.center, B.center)

    if d <= slack:
        if abs(r1 - r2) <= slack:
            logger.debug("Coincident circles about %s", A.center)
            return IntersectionResult.from_overlap([A], tol=tol)
        return IntersectionResult.empty()
    if d > r1 + r2 + slack or d < abs(r1 - r2) - slack:
        return IntersectionResult.empty()

    a = (r1 * r1 - r2 * r2 + d * d) / (2 * d)
    u = delta / d
    p = A.center + a * u
    h_sq = r1 * r1 - a * a
    tangent = abs(d - (r1 + r2)) <= slack or abs(d - abs(r1 - r2)) <= slack
    if tangent or h_sq <= 0:
        return IntersectionResult.from_points([p], tol)
    h = math.sqrt(h_sq)
    return IntersectionResult.from_points([p + 1j * h * u, p - 1j * h * u], tol)


# ============================================================================
# ARCS
# ============================================================================

def _intersect_arc_other(a: Arc, b: Curve, tol: float) -> IntersectionResult:
    carrier = _DISPATCH[(CurveKind.CIRCLE, b.kind)](a.circle, b, tol)
    if carrier.kind is IntersectionType.OVERLAP:
        # b is the arc's own circle
        return IntersectionResult.from_overlap([a], tol=tol)
    return IntersectionResult.from_points([p for p in carrier if _on_curve(a, p, tol)], tol)


for _kind in (CurveKind.LINE, CurveKind.RAY, CurveKind.SEGMENT, CurveKind.CIRCLE):
    _register(CurveKind.ARC, _kind)(_intersect_arc_other)


def _ccw_interval(arc: Arc) -> Tuple[float, float]:
    """(start, width) of the arc's point set swept counter-clockwise, in turns."""
    if arc.delta > 0:
        return arc.start, arc.delta
    return arc.start + arc.delta, -arc.delta


def _coincident_arcs(a: Arc, b: Arc, tol: float) -> IntersectionResult:
    C = a.circle
    s1, w1 = _ccw_interval(a)
    s2, w2 = _ccw_interval(b)
    slack = relative_tol(tol, C.radius, C.center) / C.arclength()

    pieces: List[Curve] = []
    points: List[complex] = []
    for shift in (-1.0, 0.0, 1.0):
        lo = max(s1, s2 + shift)
        hi = min(s1 + w1, s2 + w2 + shift)
        if hi < lo - slack:
            continue
        if hi - lo <= slack:
            points.append(C.point(lo))
        else:
            piece = Arc(C, lo, hi - lo)
            pieces.append(piece if a.delta > 0 else piece.reverse())

    points = [p for p in points if not any(_on_curve(c, p, tol) for c in pieces)]
    logger.debug("Arcs on a common circle share %d arc(s) and %d point(s)", len(pieces), len(points))
    return IntersectionResult.from_overlap(pieces, points, tol)


@_register(CurveKind.ARC, CurveKind.ARC)
def _intersect_arc_arc(a: Arc, b: Arc, tol: float) -> IntersectionResult:
    carrier = _intersect_circle_circle(a.circle, b.circle, tol)
    if carrier.kind is IntersectionType.OVERLAP:
        return _coincident_arcs(a, b, tol)
    kept = [p for p in carrier if _on_curve(a, p, tol) and _on_curve(b, p, tol)]
    return IntersectionResult.from_points(kept, tol)


# ============================================================================
# PUBLIC API
# ============================================================================

Intersectable = Union[Curve, Path]


def _pieces(x: Intersectable) -> Tuple[Curve, ...]:
    if isinstance(x, Path):
        return x.curves
    if isinstance(x, Curve):
        return (x,)
    raise TypeError(f"Cannot intersect a {type(x).__name__}")


def _intersect_paths(a: Intersectable, b: Intersectable, tol: float) -> IntersectionResult:
    points: List[complex] = []
    overlaps: List[Curve] = []
    for ca in _pieces(a):
        for cb in _pieces(b):
            result = _DISPATCH[(ca.kind, cb.kind)](ca, cb, tol)
            points.extend(result.points)
            overlaps.extend(result.overlap)
    points = [p for p in points if not any(_on_curve(c, p, tol) for c in overlaps)]
    return IntersectionResult.from_overlap(overlaps, points, tol)


@profile
def intersect(a: Intersectable, b: Intersectable, tol: float = DEFAULT_TOL) -> IntersectionResult:
    """
    Intersect two curves, or two paths, or a path and a curve.

    Args:
        a, b: Curves (Line, Ray, Segment, Circle, Arc) or paths
        tol: Relative tolerance

    Returns:
        IntersectionResult. Points common to adjacent path pieces are reported once.
    """
    tol = check_tol(tol)
    if isinstance(a, Path) or isinstance(b, Path):
        return _intersect_paths(a, b, tol)
    for x in (a, b):
        if not isinstance(x, Curve):
            raise TypeError(f"Cannot intersect a {type(x).__name__}")
    return _DISPATCH[(a.kind, b.kind)](a, b, tol)


def _segment_crossing(z: complex, a: complex, b: complex) -> int:
    # Upward edges include their start and exclude their end; downward the reverse
    if a.imag <= z.imag:
        if b.imag > z.imag and cross(b - a, z - a) > 0:
            return 1
    elif b.imag <= z.imag and cross(b - a, z - a) < 0:
        return -1
    return 0


def _level_or_below(end: complex, z: complex) -> bool:
    # Arc endpoints are recomputed from angles, so heights within rounding of z count as level
    return end.imag <= z.imag or abs(end.imag - z.imag) <= 4 * sys.float_info.epsilon * (1 + abs(end))


def horizontal_crossings(z: complex, curve: Curve, tol: float = DEFAULT_TOL) -> int:
    """
    Signed number of times ``curve`` crosses the horizontal ray from z to +inf.

    Upward crossings count +1 and downward ones -1. Crossings at the ends of
    an open curve follow the same half-open rule as segments, applied to the
    endpoint heights: an upward crossing at the start counts only if the start
    is not above z, a downward one only if it is; at the end the reverse. The
    sides of a closed path then share each vertex crossing exactly once.
    Crossings with a horizontal tangent (touching) do not count.
    """
    z = complex(z)
    if curve.kind is CurveKind.SEGMENT:
        return _segment_crossing(z, curve.za, curve.zb)

    result = _DISPATCH[(CurveKind.LINE, curve.kind)](Line(z, 1.0), curve, tol)
    if result.kind is IntersectionType.OVERLAP:
        return 0

    has_ends = curve.kind is not CurveKind.CIRCLE
    total = 0
    for p in result:
        if p.real <= z.real:
            continue
        direction = sign(curve.unittangent(curve.arg(p)).imag, tol)
        if direction == 0:
            continue
        if has_ends:
            start, end = curve.point(0.0), curve.point(1.0)
            if points_match(p, start, tol):
                if _level_or_below(start, z) != (direction > 0):
                    continue
            elif points_match(p, end, tol):
                if _level_or_below(end, z) != (direction < 0):
                    continue
        total += direction
    return total
