"""
Regions of the complex plane and their membership tests.

A region is an immutable expression tree whose leaves are bounded by Jordan
curves (a Circle, a Line, or a closed path such as a polygon):

    SimplyConnectedRegion(boundary, left)   points left (or right) of one curve
    ConnectedRegion(n, outer, inner)        inside outer, outside every inner
    Annulus(outer, inner)                   between two circles
    RegionUnion(one, two)                   either child
    RegionIntersection(one, two)            both children

Usage:
    D = disk(0, 1)
    0.5 in D                      # True
    R = D | disk(1, 1)            # union
    S = D & upperhalfplane        # intersection
    (~D).contains(2)              # complement of a simply connected region
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from numbers import Number
from typing import Optional, Sequence, Tuple, Union

from .cregions_config import DEFAULT_TOL
from .cregions_errors import RegionArityError
from .curves import Circle, Line
from .elements.cregions_path import ClosedPath
from .solvers.cregions_winding_solver import JordanCurve, isleft


def _check_jordan(J) -> None:
    if not isinstance(J, (Circle, Line, ClosedPath)):
        raise TypeError(f"A region boundary must be a Circle, Line or closed path, got {type(J).__name__}")


class Region(ABC):
    """Abstract region of the plane."""

    @abstractmethod
    def contains(self, z: complex, tol: float = DEFAULT_TOL) -> bool:
        """True if the point z belongs to the region."""

    def __contains__(self, z) -> bool:
        if not isinstance(z, Number):
            return False
        return self.contains(complex(z))

    def __or__(self, other):
        if not isinstance(other, Region):
            return NotImplemented
        return RegionUnion(self, other)

    def __and__(self, other):
        if not isinstance(other, Region):
            return NotImplemented
        return RegionIntersection(self, other)


@dataclass(frozen=True)
class SimplyConnectedRegion(Region):
    """The points to the left (``left=True``) or right of a Jordan curve."""
    boundary: JordanCurve
    left: bool = True

    def __post_init__(self):
        _check_jordan(self.boundary)
        object.__setattr__(self, 'left', bool(self.left))

    def contains(self, z: complex, tol: float = DEFAULT_TOL) -> bool:
        return self.left == isleft(z, self.boundary, tol)

    def __invert__(self) -> 'SimplyConnectedRegion':
        return SimplyConnectedRegion(self.boundary, not self.left)

    def isapprox(self, other: 'SimplyConnectedRegion', tol: float = DEFAULT_TOL) -> bool:
        """Same point set: equal boundaries and sides, or reversed boundaries and opposite sides."""
        if not isinstance(other, SimplyConnectedRegion):
            return False
        if self.left != other.left:
            return self.boundary.isapprox(other.boundary.reverse(), tol)
        return self.boundary.isapprox(other.boundary, tol)

    def __repr__(self) -> str:
        side = "left" if self.left else "right"
        return f"Region to the {side} of {self.boundary!r}"


@dataclass(frozen=True)
class ConnectedRegion(Region):
    """
    Region inside ``outer`` (when given) and outside every curve in ``inner``.

    Attributes:
        n: Number of boundary components; must equal len(inner), plus one
            when outer is present
        outer: Outer boundary, or None for a region extending to infinity
        inner: Boundaries of the holes
    """
    n: int
    outer: Optional[JordanCurve]
    inner: Tuple[JordanCurve, ...] = field(default_factory=tuple)

    def __post_init__(self):
        inner = tuple(self.inner)
        if self.outer is not None:
            _check_jordan(self.outer)
        for J in inner:
            _check_jordan(J)
        expected = len(inner) + (self.outer is not None)
        if self.n != expected:
            raise RegionArityError(
                f"ConnectedRegion declared with {self.n} boundaries but given {expected}")
        object.__setattr__(self, 'inner', inner)

    def contains(self, z: complex, tol: float = DEFAULT_TOL) -> bool:
        if any(isleft(z, J, tol) for J in self.inner):
            return False
        return self.outer is None or isleft(z, self.outer, tol)


@dataclass(frozen=True)
class Annulus(Region):
    """Points inside ``outer`` and outside ``inner``."""
    outer: Circle
    inner: Circle

    def __post_init__(self):
        if not (isinstance(self.outer, Circle) and isinstance(self.inner, Circle)):
            raise TypeError("Annulus boundaries must be circles")
        if not self.outer.radius > self.inner.radius > 0:
            raise ValueError(
                f"Annulus needs outer radius > inner radius > 0, got {self.outer.radius} and {self.inner.radius}")

    def contains(self, z: complex, tol: float = DEFAULT_TOL) -> bool:
        return isleft(z, self.outer, tol) and not isleft(z, self.inner, tol)

    @property
    def n(self) -> int:
        return 2


@dataclass(frozen=True)
class RegionUnion(Region):
    one: Region
    two: Region

    def contains(self, z: complex, tol: float = DEFAULT_TOL) -> bool:
        return self.one.contains(z, tol) or self.two.contains(z, tol)


@dataclass(frozen=True)
class RegionIntersection(Region):
    one: Region
    two: Region

    def contains(self, z: complex, tol: float = DEFAULT_TOL) -> bool:
        return self.one.contains(z, tol) and self.two.contains(z, tol)


# =============================================================================
# Combinators
# =============================================================================

def union(a: Region, b: Region) -> RegionUnion:
    return RegionUnion(a, b)


def intersect_regions(a: Region, b: Region) -> RegionIntersection:
    return RegionIntersection(a, b)


def complement(R: SimplyConnectedRegion) -> SimplyConnectedRegion:
    return ~R


def boundary(R: Region):
    """
    Boundary curves of a region.

    A simply connected region returns its single curve; an annulus returns
    (outer, inner); a connected region returns (outer, inner) or just the
    inner curves when it has no outer boundary.
    """
    if isinstance(R, SimplyConnectedRegion):
        return R.boundary
    if isinstance(R, Annulus):
        return R.outer, R.inner
    if isinstance(R, ConnectedRegion):
        return R.inner if R.outer is None else (R.outer, R.inner)
    raise TypeError(f"{type(R).__name__} has no boundary representation")


# =============================================================================
# Factories
# =============================================================================

def region(J: JordanCurve, left: bool = True) -> SimplyConnectedRegion:
    return SimplyConnectedRegion(J, left)


def interior(J: JordanCurve) -> SimplyConnectedRegion:
    return SimplyConnectedRegion(J, True)


def exterior(J: JordanCurve) -> SimplyConnectedRegion:
    return SimplyConnectedRegion(J, False)


def between(outer: JordanCurve, inner: Union[JordanCurve, Sequence[JordanCurve]]) -> ConnectedRegion:
    """Region inside ``outer`` and outside ``inner`` (one curve or several)."""
    holes = (inner,) if isinstance(inner, (Circle, Line, ClosedPath)) else tuple(inner)
    return ConnectedRegion(len(holes) + 1, outer, holes)


def disk(center: Union[complex, Circle], radius: Optional[float] = None) -> SimplyConnectedRegion:
    """Open disk, given as a Circle or as center and radius."""
    if isinstance(center, Circle):
        return interior(center)
    return interior(Circle(center, radius))


def annulus(center: complex, outer_radius: float, inner_radius: float) -> Annulus:
    if not outer_radius > inner_radius > 0:
        raise ValueError(
            f"Annulus needs outer radius > inner radius > 0, got {outer_radius} and {inner_radius}")
    return Annulus(Circle(center, outer_radius), Circle(center, inner_radius))


def halfplane(a: Union[complex, Line], b: Optional[complex] = None) -> SimplyConnectedRegion:
    """Half-plane left of a Line, or left of the line through a and b."""
    if isinstance(a, Line):
        return interior(a)
    return interior(Line.through(a, b))


unitdisk = disk(0j, 1.0)
upperhalfplane = halfplane(Line(0j, 1.0))
lowerhalfplane = halfplane(Line(0j, -1.0))
lefthalfplane = halfplane(Line(0j, 1j))
righthalfplane = halfplane(Line(0j, -1j))
