"""
Straight curves: Line, Ray and Segment.

Unbounded curves reach the point at infinity (``INF``) at the ends of their
parameter interval:

    Line:     t in (0, 1) covers the whole line, t=0 and t=1 are INF
    Ray:      base at t=0, INF at t=1 (or the reverse for a ray that
              comes in from infinity)
    Segment:  za at t=0, zb at t=1
"""

import cmath
import math
from dataclasses import dataclass
from typing import ClassVar

from ..cregions_config import DEFAULT_TOL
from ..mathutils.cregions_math import (
    INF,
    cross,
    points_match,
    relative_tol,
    turn_distance,
    TWO_PI,
)
from .cregions_curve import (
    Curve,
    CurveKind,
    check_scale_factor,
    check_translation,
    invert_open_curve,
)


def _check_finite_point(name: str, z) -> complex:
    z = complex(z)
    if cmath.isinf(z) or cmath.isnan(z):
        raise ValueError(f"{name} must be a finite point, got {z}")
    return z


# =============================================================================
# Line
# =============================================================================

@dataclass(frozen=True)
class Line(Curve):
    """
    Infinite line through ``base`` along ``direction`` (normalized to unit length).

    The half-plane to the left of the direction of travel is the line's
    "left" side, which makes a Line usable as a region boundary.
    """
    base: complex
    direction: complex = 1.0

    kind: ClassVar[CurveKind] = CurveKind.LINE

    def __post_init__(self):
        object.__setattr__(self, 'base', _check_finite_point("Line base", self.base))
        direction = complex(self.direction)
        magnitude = abs(direction)
        if magnitude == 0 or not math.isfinite(magnitude):
            raise ValueError(f"Line direction must be finite and nonzero, got {direction}")
        object.__setattr__(self, 'direction', direction / magnitude)

    @classmethod
    def through(cls, a: complex, b: complex) -> 'Line':
        """Line through two points, directed from a to b."""
        return cls(a, complex(b) - complex(a))

    def point(self, t: float) -> complex:
        if t <= 0 or t >= 1:
            return INF
        s = (t - 0.5) / (t * (1 - t))
        return self.base + s * self.direction

    def tangent(self, t: float) -> complex:
        if t <= 0 or t >= 1:
            return INF
        return self.direction * (t * t - t + 0.5) / (t * (1 - t)) ** 2

    def unittangent(self, t: float) -> complex:
        return self.direction

    def arclength(self) -> float:
        return math.inf

    def isfinite(self) -> bool:
        return False

    def reverse(self) -> 'Line':
        return Line(self.base, -self.direction)

    def conj(self) -> 'Line':
        return Line(self.base.conjugate(), self.direction.conjugate())

    def translate(self, z: complex) -> 'Line':
        return Line(self.base + check_translation(z), self.direction)

    def scale(self, z: complex) -> 'Line':
        z = check_scale_factor(z)
        return Line(self.base * z, self.direction * z)

    def invert(self, tol: float = DEFAULT_TOL) -> Curve:
        from .cregions_circles import Circle

        if self.dist(0j) <= tol:
            return Line(0j, -self.direction.conjugate())
        # Points on either side of the foot of the perpendicular from the origin
        foot = self.closest(0j)
        d = abs(foot)
        p1 = foot - d * self.direction
        p2 = foot + d * self.direction
        return Circle.through(1 / p1, 1 / p2, 0j, tol=tol)

    def _along(self, z: complex) -> float:
        return ((z - self.base) * self.direction.conjugate()).real

    def dist(self, z: complex) -> float:
        return abs(cross(self.direction, z - self.base))

    def closest(self, z: complex) -> complex:
        return self.base + self._along(z) * self.direction

    def arg(self, z: complex) -> float:
        s = self._along(z)
        if s == 0:
            return 0.5
        return (s - 1 + math.sqrt(1 + s * s)) / (2 * s)

    def isleft(self, z: complex) -> bool:
        """True if z lies strictly to the left of the directed line."""
        return cross(self.direction, complex(z) - self.base) > 0

    def isapprox(self, other: Curve, tol: float = DEFAULT_TOL) -> bool:
        if not isinstance(other, Line):
            return False
        return (abs(self.direction - other.direction) <= tol
                and self.dist(other.base) <= relative_tol(tol, other.base))


# =============================================================================
# Ray
# =============================================================================

@dataclass(frozen=True)
class Ray(Curve):
    """
    Half-line starting at ``base`` and heading off at ``angle`` (radians).

    With ``from_infinity=True`` the same point set is traversed inward: the
    ray starts at infinity and ends at ``base``. ``angle`` always gives the
    direction from the base toward infinity.
    """
    base: complex
    angle: float = 0.0
    from_infinity: bool = False

    kind: ClassVar[CurveKind] = CurveKind.RAY

    def __post_init__(self):
        object.__setattr__(self, 'base', _check_finite_point("Ray base", self.base))
        angle = float(self.angle)
        if not math.isfinite(angle):
            raise ValueError(f"Ray angle must be finite, got {angle}")
        object.__setattr__(self, 'angle', angle)
        object.__setattr__(self, 'from_infinity', bool(self.from_infinity))

    @property
    def direction(self) -> complex:
        """Unit vector from the base toward infinity."""
        return cmath.exp(1j * self.angle)

    def point(self, t: float) -> complex:
        if self.from_infinity:
            if t <= 0:
                return INF
            s = (1 - t) / t
        else:
            if t >= 1:
                return INF
            s = t / (1 - t)
        return self.base + s * self.direction

    def tangent(self, t: float) -> complex:
        if self.from_infinity:
            return INF if t <= 0 else -self.direction / (t * t)
        return INF if t >= 1 else self.direction / (1 - t) ** 2

    def unittangent(self, t: float) -> complex:
        return -self.direction if self.from_infinity else self.direction

    def arclength(self) -> float:
        return math.inf

    def isfinite(self) -> bool:
        return False

    def reverse(self) -> 'Ray':
        return Ray(self.base, self.angle, not self.from_infinity)

    def conj(self) -> 'Ray':
        return Ray(self.base.conjugate(), -self.angle, self.from_infinity)

    def translate(self, z: complex) -> 'Ray':
        return Ray(self.base + check_translation(z), self.angle, self.from_infinity)

    def scale(self, z: complex) -> 'Ray':
        z = check_scale_factor(z)
        return Ray(self.base * z, self.angle + cmath.phase(z), self.from_infinity)

    def invert(self, tol: float = DEFAULT_TOL) -> Curve:
        from .cregions_circles import Arc

        if points_match(self.base, 0j, tol):
            # Image stays on the same line through the origin, traversed the other way
            return Ray(0j, -self.angle, not self.from_infinity)
        if self.dist(0j) <= tol:
            raise ValueError(f"Cannot invert {self!r}: it passes through the origin")
        w0 = 1 / self.base
        wm = 1 / (self.base + abs(self.base) * self.direction)
        if self.from_infinity:
            return Arc.through(0j, wm, w0, tol=tol)
        return Arc.through(w0, wm, 0j, tol=tol)

    def _along(self, z: complex) -> float:
        return ((z - self.base) * self.direction.conjugate()).real

    def dist(self, z: complex) -> float:
        if self._along(z) <= 0:
            return abs(z - self.base)
        return abs(cross(self.direction, z - self.base))

    def closest(self, z: complex) -> complex:
        return self.base + max(self._along(z), 0.0) * self.direction

    def arg(self, z: complex) -> float:
        s = max(self._along(z), 0.0)
        return 1 / (1 + s) if self.from_infinity else s / (1 + s)

    def isapprox(self, other: Curve, tol: float = DEFAULT_TOL) -> bool:
        if not isinstance(other, Ray) or self.from_infinity != other.from_infinity:
            return False
        return (points_match(self.base, other.base, tol)
                and turn_distance(self.angle / TWO_PI, other.angle / TWO_PI) <= tol)


# =============================================================================
# Segment
# =============================================================================

@dataclass(frozen=True)
class Segment(Curve):
    """Straight segment from ``za`` to ``zb``."""
    za: complex
    zb: complex

    kind: ClassVar[CurveKind] = CurveKind.SEGMENT

    def __post_init__(self):
        za = _check_finite_point("Segment start", self.za)
        zb = _check_finite_point("Segment end", self.zb)
        if za == zb:
            raise ValueError(f"Segment endpoints must be distinct, got {za} twice")
        object.__setattr__(self, 'za', za)
        object.__setattr__(self, 'zb', zb)

    def point(self, t: float) -> complex:
        return self.za + t * (self.zb - self.za)

    def tangent(self, t: float) -> complex:
        return self.zb - self.za

    def arclength(self) -> float:
        return abs(self.zb - self.za)

    def isfinite(self) -> bool:
        return True

    def reverse(self) -> 'Segment':
        return Segment(self.zb, self.za)

    def conj(self) -> 'Segment':
        return Segment(self.za.conjugate(), self.zb.conjugate())

    def translate(self, z: complex) -> 'Segment':
        z = check_translation(z)
        return Segment(self.za + z, self.zb + z)

    def scale(self, z: complex) -> 'Segment':
        z = check_scale_factor(z)
        return Segment(self.za * z, self.zb * z)

    def invert(self, tol: float = DEFAULT_TOL) -> Curve:
        return invert_open_curve(self, tol)

    def arg(self, z: complex) -> float:
        return ((z - self.za) / (self.zb - self.za)).real

    def closest(self, z: complex) -> complex:
        return self.point(min(max(self.arg(z), 0.0), 1.0))

    def dist(self, z: complex) -> float:
        return abs(z - self.closest(z))

    def isapprox(self, other: Curve, tol: float = DEFAULT_TOL) -> bool:
        if not isinstance(other, Segment):
            return False
        return points_match(self.za, other.za, tol) and points_match(self.zb, other.zb, tol)
