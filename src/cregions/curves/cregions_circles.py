"""
Circular curves: Circle and Arc.

A Circle carries an orientation flag; a positively oriented (ccw) circle has
its bounded interior on the left. An Arc lives on a circle and is described by
its start position and signed sweep, both measured in fractions of a full
turn counter-clockwise from the positive real axis.
"""

import cmath
import math
from dataclasses import dataclass
from typing import ClassVar

import numpy as np

from ..cregions_config import DEFAULT_TOL
from ..mathutils.cregions_math import (
    TWO_PI,
    cross,
    points_match,
    relative_tol,
    turn_distance,
    turns,
    values_match,
)
from .cregions_curve import (
    Curve,
    CurveKind,
    check_scale_factor,
    check_translation,
    invert_open_curve,
)
from .cregions_lines import Line, Segment


# =============================================================================
# Circle
# =============================================================================

@dataclass(frozen=True)
class Circle(Curve):
    """Circle of ``radius`` about ``center``, traversed counter-clockwise unless ``ccw`` is False."""
    center: complex
    radius: float
    ccw: bool = True

    kind: ClassVar[CurveKind] = CurveKind.CIRCLE

    def __post_init__(self):
        center = complex(self.center)
        if cmath.isinf(center) or cmath.isnan(center):
            raise ValueError(f"Circle center must be finite, got {center}")
        radius = float(self.radius)
        if not (radius > 0 and math.isfinite(radius)):
            raise ValueError(f"Circle radius must be positive and finite, got {radius}")
        object.__setattr__(self, 'center', center)
        object.__setattr__(self, 'radius', radius)
        object.__setattr__(self, 'ccw', bool(self.ccw))

    @classmethod
    def through(cls, a: complex, b: complex, c: complex, tol: float = DEFAULT_TOL) -> Curve:
        """
        Circle through three points, oriented so that it visits a, b, c in order.

        If one point is infinite, or the points are collinear, the result is
        the Line through them with the matching direction.
        """
        a, b, c = complex(a), complex(b), complex(c)
        if cmath.isinf(a):
            return Line.through(b, c)
        if cmath.isinf(b):
            return Line.through(c, a)
        if cmath.isinf(c):
            return Line.through(a, b)

        d1, d2 = b - a, c - a
        M = np.array([[d1.real, d1.imag],
                      [d2.real, d2.imag]])
        with np.errstate(divide='ignore', invalid='ignore'):
            condition = np.linalg.cond(M)
        if not np.isfinite(condition) or condition > 1.0 / tol:
            return _collinear_line(a, b, c)

        rhs = 0.5 * np.array([abs(b) ** 2 - abs(a) ** 2, abs(c) ** 2 - abs(a) ** 2])
        x, y = np.linalg.solve(M, rhs)
        center = complex(x, y)
        return cls(center, abs(a - center), ccw=cross(d1, d2) > 0)

    @property
    def _orientation(self) -> float:
        return 1.0 if self.ccw else -1.0

    def point(self, t: float) -> complex:
        return self.center + self.radius * cmath.exp(1j * TWO_PI * self._orientation * t)

    def tangent(self, t: float) -> complex:
        w = self._orientation
        return 1j * TWO_PI * w * self.radius * cmath.exp(1j * TWO_PI * w * t)

    def arclength(self) -> float:
        return TWO_PI * self.radius

    def isfinite(self) -> bool:
        return True

    def reverse(self) -> 'Circle':
        return Circle(self.center, self.radius, not self.ccw)

    def conj(self) -> 'Circle':
        return Circle(self.center.conjugate(), self.radius, not self.ccw)

    def translate(self, z: complex) -> 'Circle':
        return Circle(self.center + check_translation(z), self.radius, self.ccw)

    def scale(self, z: complex) -> 'Circle':
        z = check_scale_factor(z)
        return Circle(self.center * z, self.radius * abs(z), self.ccw)

    def invert(self, tol: float = DEFAULT_TOL) -> Curve:
        if abs(abs(self.center) - self.radius) <= relative_tol(tol, self.radius):
            # Passes through the origin: the image is a line
            t0 = self.arg(0j)
            p1, p2 = self.point(t0 + 1 / 3), self.point(t0 + 2 / 3)
            return Line.through(1 / p1, 1 / p2)
        w = [1 / self.point(t) for t in (0.0, 1 / 3, 2 / 3)]
        return Circle.through(*w, tol=tol)

    def dist(self, z: complex) -> float:
        return abs(abs(z - self.center) - self.radius)

    def closest(self, z: complex) -> complex:
        v = z - self.center
        if v == 0:
            return self.point(0.0)
        return self.center + self.radius * v / abs(v)

    def arg(self, z: complex) -> float:
        f = turns(z - self.center)
        return f if self.ccw else (-f) % 1.0

    def isleft(self, z: complex) -> bool:
        """True if z is strictly on the left of the circle's direction of travel."""
        r = abs(complex(z) - self.center)
        return r < self.radius if self.ccw else r > self.radius

    def isright(self, z: complex) -> bool:
        r = abs(complex(z) - self.center)
        return r > self.radius if self.ccw else r < self.radius

    def isapprox(self, other: Curve, tol: float = DEFAULT_TOL) -> bool:
        if not isinstance(other, Circle) or self.ccw != other.ccw:
            return False
        return (points_match(self.center, other.center, tol)
                and values_match(self.radius, other.radius, tol))


def _collinear_line(a: complex, b: complex, c: complex) -> Line:
    """Line through collinear a, b, c, directed so the cyclic order a -> b -> c is kept."""
    d = b - a if b != a else c - a
    ua, ub, uc = (((z - a) * d.conjugate()).real for z in (a, b, c))
    descents = (ub < ua) + (uc < ub) + (ua < uc)
    return Line(a, d if descents <= 1 else -d)


# =============================================================================
# Arc
# =============================================================================

@dataclass(frozen=True)
class Arc(Curve):
    """
    Arc of ``circle`` starting at turn fraction ``start`` and sweeping ``delta`` turns.

    A positive ``delta`` sweeps counter-clockwise, a negative one clockwise.
    The orientation flag of ``circle`` is not used; it is normalized to ccw.
    """
    circle: Circle
    start: float
    delta: float

    kind: ClassVar[CurveKind] = CurveKind.ARC

    def __post_init__(self):
        if not isinstance(self.circle, Circle):
            raise TypeError(f"Arc requires a Circle, got {type(self.circle).__name__}")
        if not self.circle.ccw:
            object.__setattr__(self, 'circle', Circle(self.circle.center, self.circle.radius))
        start, delta = float(self.start), float(self.delta)
        if not math.isfinite(start):
            raise ValueError(f"Arc start must be finite, got {start}")
        if delta == 0 or not abs(delta) <= 1:
            raise ValueError(f"Arc sweep must be nonzero and at most one turn, got {delta}")
        object.__setattr__(self, 'start', start % 1.0)
        object.__setattr__(self, 'delta', delta)

    @classmethod
    def through(cls, a: complex, m: complex, b: complex, tol: float = DEFAULT_TOL) -> Curve:
        """Arc from a through m to b. Collinear points give a Segment."""
        a, m, b = complex(a), complex(m), complex(b)
        C = Circle.through(a, m, b, tol=tol)
        if isinstance(C, Line):
            return Segment(a, b)
        sweep = turns((b - C.center) / (a - C.center))
        delta = sweep if C.ccw else sweep - 1.0
        return cls(Circle(C.center, C.radius), turns(a - C.center), delta)

    @classmethod
    def from_center(cls, a: complex, b: complex, center: complex = 0j) -> 'Arc':
        """Counter-clockwise arc from a to b about ``center`` (b fixes only the end angle)."""
        a, b, center = complex(a), complex(b), complex(center)
        C = Circle(center, abs(a - center))
        return cls(C, turns(a - center), turns((b - center) / (a - center)) or 1.0)

    @property
    def center(self) -> complex:
        return self.circle.center

    @property
    def radius(self) -> float:
        return self.circle.radius

    def point(self, t: float) -> complex:
        return self.center + self.radius * cmath.exp(1j * TWO_PI * (self.start + t * self.delta))

    def tangent(self, t: float) -> complex:
        theta = TWO_PI * (self.start + t * self.delta)
        return 1j * TWO_PI * self.delta * self.radius * cmath.exp(1j * theta)

    def arclength(self) -> float:
        return self.circle.arclength() * abs(self.delta)

    def isfinite(self) -> bool:
        return True

    def reverse(self) -> 'Arc':
        return Arc(self.circle, self.start + self.delta, -self.delta)

    def conj(self) -> 'Arc':
        return Arc(self.circle.conj(), -self.start, -self.delta)

    def translate(self, z: complex) -> 'Arc':
        return Arc(self.circle.translate(z), self.start, self.delta)

    def scale(self, z: complex) -> 'Arc':
        z = check_scale_factor(z)
        return Arc(self.circle.scale(z), self.start + turns(z), self.delta)

    def invert(self, tol: float = DEFAULT_TOL) -> Curve:
        return invert_open_curve(self, tol)

    def offset(self, z: complex) -> float:
        """Turns travelled from the arc's start to the direction of z, in [0, 1)."""
        f = turns(z - self.center)
        if self.delta > 0:
            return (f - self.start) % 1.0
        return (self.start - f) % 1.0

    def dist(self, z: complex) -> float:
        if self.offset(z) <= abs(self.delta):
            return abs(abs(z - self.center) - self.radius)
        return min(abs(z - self.point(0.0)), abs(z - self.point(1.0)))

    def closest(self, z: complex) -> complex:
        if self.offset(z) <= abs(self.delta):
            return self.circle.closest(z)
        p0, p1 = self.point(0.0), self.point(1.0)
        return p0 if abs(z - p0) <= abs(z - p1) else p1

    def arg(self, z: complex) -> float:
        s, span = self.offset(z), abs(self.delta)
        # Just before the start reads as a small negative parameter, not a large one
        if s > span and s > 0.5 * (1 + span):
            s -= 1.0
        return s / span

    def isapprox(self, other: Curve, tol: float = DEFAULT_TOL) -> bool:
        if not isinstance(other, Arc):
            return False
        return (self.circle.isapprox(other.circle, tol)
                and turn_distance(self.start, other.start) <= tol
                and abs(self.delta - other.delta) <= tol)
