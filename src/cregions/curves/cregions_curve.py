"""
Curve base class and kind tags.

Every concrete curve (Line, Ray, Segment, Circle, Arc) is an immutable
dataclass parameterized over t in [0, 1]. The conformal maps of the plane are
exposed as operators and always return a new curve:

    C + z, z + C, C - z     translation
    -C, z - C               reflection through the origin (then translation)
    C * z, z * C, C / z     rotation and scaling about the origin
    z / C, C.invert()       inversion through the origin (then scaling)
"""

import cmath
from abc import ABC, abstractmethod
from enum import Enum
from numbers import Number
from typing import ClassVar

from ..cregions_config import DEFAULT_TOL
from ..mathutils.cregions_math import points_match


class CurveKind(Enum):
    """Tag of a concrete curve type; used to dispatch pairwise operations."""
    LINE = 1
    RAY = 2
    SEGMENT = 3
    CIRCLE = 4
    ARC = 5


class Curve(ABC):
    """Abstract curve in the complex plane."""

    kind: ClassVar[CurveKind]

    # -------------------------------------------------------------------------
    # Required methods
    # -------------------------------------------------------------------------

    @abstractmethod
    def point(self, t: float) -> complex:
        """Point at parameter t in [0, 1]."""

    @abstractmethod
    def tangent(self, t: float) -> complex:
        """Derivative of ``point`` with respect to t."""

    @abstractmethod
    def arclength(self) -> float:
        ...

    @abstractmethod
    def isfinite(self) -> bool:
        """True if the curve is bounded in the complex plane."""

    @abstractmethod
    def reverse(self) -> 'Curve':
        """Same point set traversed in the opposite direction."""

    @abstractmethod
    def conj(self) -> 'Curve':
        """Reflection across the real axis."""

    @abstractmethod
    def translate(self, z: complex) -> 'Curve':
        ...

    @abstractmethod
    def scale(self, z: complex) -> 'Curve':
        """Multiply every point by the nonzero number z."""

    @abstractmethod
    def invert(self, tol: float = DEFAULT_TOL) -> 'Curve':
        """Image of the curve under z -> 1/z."""

    @abstractmethod
    def dist(self, z: complex) -> float:
        """Distance from the point z to the curve."""

    @abstractmethod
    def closest(self, z: complex) -> complex:
        """Point of the curve nearest to z."""

    @abstractmethod
    def arg(self, z: complex) -> float:
        """Parameter value of a point assumed to lie on the curve."""

    @abstractmethod
    def isapprox(self, other: 'Curve', tol: float = DEFAULT_TOL) -> bool:
        ...

    # -------------------------------------------------------------------------
    # Derived methods
    # -------------------------------------------------------------------------

    def unittangent(self, t: float) -> complex:
        tau = self.tangent(t)
        return tau / abs(tau)

    def normal(self, t: float) -> complex:
        """Unit normal pointing to the left of the direction of travel."""
        return 1j * self.unittangent(t)

    def __call__(self, t: float) -> complex:
        return self.point(t)

    def inv(self, tol: float = DEFAULT_TOL) -> 'Curve':
        return self.invert(tol)

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def __add__(self, z):
        if not isinstance(z, Number):
            return NotImplemented
        return self.translate(complex(z))

    __radd__ = __add__

    def __sub__(self, z):
        if not isinstance(z, Number):
            return NotImplemented
        return self.translate(-complex(z))

    def __rsub__(self, z):
        if not isinstance(z, Number):
            return NotImplemented
        return self.scale(-1.0).translate(complex(z))

    def __neg__(self):
        return self.scale(-1.0)

    def __mul__(self, z):
        if not isinstance(z, Number):
            return NotImplemented
        return self.scale(complex(z))

    __rmul__ = __mul__

    def __truediv__(self, z):
        if not isinstance(z, Number):
            return NotImplemented
        return self.scale(1.0 / complex(z))

    def __rtruediv__(self, z):
        if not isinstance(z, Number):
            return NotImplemented
        return self.invert().scale(complex(z))


def check_scale_factor(z: complex) -> complex:
    z = complex(z)
    if z == 0 or cmath.isinf(z) or cmath.isnan(z):
        raise ValueError(f"Scale factor must be finite and nonzero, got {z}")
    return z


def check_translation(z: complex) -> complex:
    z = complex(z)
    if cmath.isinf(z) or cmath.isnan(z):
        raise ValueError(f"Translation must be finite, got {z}")
    return z


def invert_open_curve(curve: Curve, tol: float) -> Curve:
    """
    Invert a bounded open curve (segment or arc) through the origin.

    A curve starting or ending at the origin maps to a ray from/to infinity;
    one passing through the origin at an interior point has no single-curve
    image and is rejected.
    """
    from .cregions_circles import Arc
    from .cregions_lines import Ray

    p0, pm, p1 = curve.point(0.0), curve.point(0.5), curve.point(1.0)
    if points_match(p0, 0j, tol):
        base = 1 / p1
        return Ray(base, cmath.phase(1 / pm - base), from_infinity=True)
    if points_match(p1, 0j, tol):
        base = 1 / p0
        return Ray(base, cmath.phase(1 / pm - base))
    if curve.dist(0j) <= tol:
        raise ValueError(f"Cannot invert {curve!r}: it passes through the origin")
    return Arc.through(1 / p0, 1 / pm, 1 / p1, tol=tol)
