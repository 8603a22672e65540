"""
Paths - ordered, continuous sequences of curves.

A Path of n curves is parameterized over t in [0, n]: values in [k, k+1]
correspond to [0, 1] along curve k (0-based). A ClosedPath additionally
requires the last curve to end where the first begins, and its parameter is
periodic, so any real t is accepted.

Continuity is validated once at construction. The conformal operators
(translate, negate, scale/rotate, invert, conjugate, reverse) map every curve
by the same similarity or inversion, so endpoints that matched before still
match afterwards and the results are built without re-validation.

Usage:
    P = Path([Segment(0, 1), Segment(1, 1j)])
    P(1.5)                  # point halfway along the second curve
    Q = ClosedPath([Segment(0, 1), Segment(1, 1j), Segment(1j, 0)])
    Q.vertices()            # [0, 1, 1j]
    2 * Q + 1j              # scaled and translated copy
"""

import math
from numbers import Number
from typing import Iterator, List, Sequence, Tuple, Union

from ..cregions_config import DEFAULT_TOL, check_tol
from ..cregions_errors import PathContinuityError, PathParameterError
from ..curves import Curve
from ..mathutils.cregions_math import points_match


CurveInput = Union[Curve, 'Path', Sequence[Curve]]


def _as_curve_tuple(curves: CurveInput) -> Tuple[Curve, ...]:
    if isinstance(curves, Path):
        return curves.curves
    if isinstance(curves, Curve):
        return (curves,)
    result = tuple(curves)
    for c in result:
        if not isinstance(c, Curve):
            raise TypeError(f"Path pieces must be curves, got {type(c).__name__}")
    return result


class Path:
    """
    An open path: curves joined end to start.

    Attributes:
        curves: Tuple of the curves making up the path
    """

    def __init__(self, curves: CurveInput, tol: float = DEFAULT_TOL):
        pieces = _as_curve_tuple(curves)
        if not pieces:
            raise ValueError("A path needs at least one curve")
        self._validate(pieces, check_tol(tol))
        self._curves = pieces

    @staticmethod
    def _validate(curves: Tuple[Curve, ...], tol: float) -> None:
        for k in range(len(curves) - 1):
            if not points_match(curves[k].point(1.0), curves[k + 1].point(0.0), tol):
                raise PathContinuityError((k + 1, k + 2))

    @classmethod
    def _from_validated(cls, curves: Sequence[Curve]) -> 'Path':
        """Build without continuity checks; callers guarantee the invariants."""
        path = cls.__new__(cls)
        path._curves = tuple(curves)
        return path

    # -------------------------------------------------------------------------
    # Curve access
    # -------------------------------------------------------------------------

    @property
    def curves(self) -> Tuple[Curve, ...]:
        return self._curves

    def curve(self, k: int) -> Curve:
        """Curve k (0-based)."""
        n = len(self._curves)
        if not -n <= k < n:
            raise PathParameterError(f"Curve index {k} out of range for path with {n} curves")
        return self._curves[k]

    def __len__(self) -> int:
        return len(self._curves)

    def __iter__(self) -> Iterator[Curve]:
        return iter(self._curves)

    def __getitem__(self, k: int) -> Curve:
        return self.curve(k)

    def vertex(self, k: int) -> complex:
        """Vertex k in 0..n; vertex n is the end of the last curve."""
        n = len(self._curves)
        if 0 <= k < n:
            return self._curves[k].point(0.0)
        if k == n:
            return self._curves[-1].point(1.0)
        raise PathParameterError(f"Vertex index {k} out of range for path with {n} curves")

    def vertices(self) -> List[complex]:
        return [self.vertex(k) for k in range(len(self._curves) + 1)]

    def isfinite(self) -> bool:
        """True if the path is bounded, i.e. never passes through infinity."""
        return all(c.isfinite() for c in self._curves)

    def arclength(self) -> float:
        return math.fsum(c.arclength() for c in self._curves)

    # -------------------------------------------------------------------------
    # Parameterization
    # -------------------------------------------------------------------------

    def sideargs(self, t: float) -> Tuple[int, float]:
        """Map a path parameter to (curve index, local parameter)."""
        n = len(self._curves)
        if not 0 <= t <= n:
            raise PathParameterError(f"Parameter {t} outside [0, {n}]")
        if t == n:
            return n - 1, 1.0
        k = int(math.floor(t))
        return k, t - k

    def point(self, t: float) -> complex:
        k, s = self.sideargs(t)
        return self._curves[k].point(s)

    def __call__(self, t: float) -> complex:
        return self.point(t)

    def tangent(self, t: float) -> complex:
        """Tangent at t; not well defined at integer t (vertices)."""
        k, s = self.sideargs(t)
        return self._curves[k].tangent(s)

    def unittangent(self, t: float) -> complex:
        k, s = self.sideargs(t)
        return self._curves[k].unittangent(s)

    def normal(self, t: float) -> complex:
        k, s = self.sideargs(t)
        return self._curves[k].normal(s)

    # -------------------------------------------------------------------------
    # Distance
    # -------------------------------------------------------------------------

    def dist(self, z: complex) -> float:
        z = complex(z)
        return min(c.dist(z) for c in self._curves)

    def closest(self, z: complex) -> complex:
        z = complex(z)
        nearest = min(self._curves, key=lambda c: c.dist(z))
        return nearest.closest(z)

    def isapprox(self, other: 'Path', tol: float = DEFAULT_TOL) -> bool:
        """Same curves in the same order, up to tolerance."""
        if not isinstance(other, Path) or len(self) != len(other):
            return False
        return all(a.isapprox(b, tol) for a, b in zip(self._curves, other.curves))

    # -------------------------------------------------------------------------
    # Conformal maps
    # -------------------------------------------------------------------------

    def _rebuild(self, curves: Sequence[Curve]) -> 'Path':
        return Path._from_validated(curves)

    def _map(self, func) -> 'Path':
        return self._rebuild([func(c) for c in self._curves])

    def reverse(self) -> 'Path':
        return self._rebuild([c.reverse() for c in reversed(self._curves)])

    def conj(self) -> 'Path':
        """Complex conjugate; this reverses the orientation of a closed path."""
        return self._map(lambda c: c.conj())

    def inv(self, tol: float = DEFAULT_TOL) -> 'Path':
        return self._map(lambda c: c.invert(tol))

    def __add__(self, z):
        if not isinstance(z, Number):
            return NotImplemented
        return self._map(lambda c: c + z)

    __radd__ = __add__

    def __sub__(self, z):
        if not isinstance(z, Number):
            return NotImplemented
        return self._map(lambda c: c - z)

    def __rsub__(self, z):
        if not isinstance(z, Number):
            return NotImplemented
        return self._map(lambda c: z - c)

    def __neg__(self):
        return self._map(lambda c: -c)

    def __mul__(self, z):
        if not isinstance(z, Number):
            return NotImplemented
        return self._map(lambda c: c * z)

    __rmul__ = __mul__

    def __truediv__(self, z):
        if not isinstance(z, Number):
            return NotImplemented
        return self._map(lambda c: c / z)

    def __rtruediv__(self, z):
        if not isinstance(z, Number):
            return NotImplemented
        return self._map(lambda c: z / c)

    def __repr__(self) -> str:
        return f"{type(self).__name__} with {len(self)} curves"


class ClosedPath(Path):
    """
    A path whose last curve ends at the start of the first.

    Curve and vertex indices are applied circularly, and the parameter t is
    periodic with period n.
    """

    def __init__(self, curves: CurveInput, tol: float = DEFAULT_TOL):
        super().__init__(curves, tol)
        if not points_match(self._curves[-1].point(1.0), self._curves[0].point(0.0), tol):
            raise PathContinuityError((len(self._curves), 1), "Path endpoints do not match")

    @classmethod
    def from_path(cls, path: Path, tol: float = DEFAULT_TOL) -> 'ClosedPath':
        return cls(path.curves, tol=tol)

    def curve(self, k: int) -> Curve:
        return self._curves[k % len(self._curves)]

    def vertex(self, k: int) -> complex:
        return self.curve(k).point(0.0)

    def vertices(self) -> List[complex]:
        """The n unique vertices (the first is not repeated at the end)."""
        return [c.point(0.0) for c in self._curves]

    def sideargs(self, t: float) -> Tuple[int, float]:
        if not math.isfinite(t):
            raise PathParameterError(f"Parameter {t} is not finite")
        k = math.floor(t)
        return int(k) % len(self._curves), t - k

    def _rebuild(self, curves: Sequence[Curve]) -> Path:
        return closed_path_class_for(curves)._from_validated(curves)


def closed_path_class_for(curves: Sequence[Curve]) -> type:
    """Narrowest closed-path class whose admissible side kinds cover ``curves``."""
    from .cregions_polygon import CircularPolygon, Polygon

    kinds = {c.kind for c in curves}
    if kinds <= Polygon.allowed_kinds:
        return Polygon
    if kinds <= CircularPolygon.allowed_kinds:
        return CircularPolygon
    return ClosedPath
