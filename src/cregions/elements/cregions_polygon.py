"""
Polygons - closed paths with restricted side kinds.

    CircularPolygon:  sides are Segments, Rays and Arcs
    Polygon:          sides are Segments and Rays

A side pair (Ray to infinity, Ray from infinity) represents a vertex at
infinity, so unbounded polygons such as half-strips and wedges are allowed.

Vertex lists:
    Polygon.from_vertices takes finite vertices as complex numbers. A vertex at
    infinity is given as a tuple ``(angle_in, angle_out)``: the direction in
    which the incoming side leaves its finite start for infinity, and the
    direction in which the outgoing side heads back from its finite end out
    to infinity. Both angles are in radians.

    # Half-strip 0 < Im z < 1, Re z > 0, positively oriented
    Polygon.from_vertices([0, (0.0, 0.0), 1j])
"""

import cmath
from typing import FrozenSet, List, Sequence, Tuple, Union

from ..cregions_config import DEFAULT_TOL
from ..cregions_errors import UnsupportedSideError
from ..curves import Curve, CurveKind, Ray, Segment
from ..mathutils.cregions_math import TWO_PI
from .cregions_path import ClosedPath, CurveInput


VertexSpec = Union[complex, float, Tuple[float, float]]


class CircularPolygon(ClosedPath):
    """Closed path whose sides are segments, rays or arcs."""

    allowed_kinds: FrozenSet[CurveKind] = frozenset({CurveKind.SEGMENT, CurveKind.RAY, CurveKind.ARC})

    def __init__(self, curves: CurveInput, tol: float = DEFAULT_TOL):
        super().__init__(curves, tol)
        for k, c in enumerate(self._curves):
            if c.kind not in self.allowed_kinds:
                raise UnsupportedSideError(
                    f"{type(self).__name__} side {k + 1} is a {type(c).__name__}; "
                    f"allowed kinds are {sorted(kind.name for kind in self.allowed_kinds)}")

    def sides(self) -> Tuple[Curve, ...]:
        return self._curves

    def side(self, k: int) -> Curve:
        """Side k (0-based, circular)."""
        return self.curve(k)


class Polygon(CircularPolygon):
    """Closed path whose sides are segments or rays."""

    allowed_kinds: FrozenSet[CurveKind] = frozenset({CurveKind.SEGMENT, CurveKind.RAY})

    @classmethod
    def from_vertices(cls, vertices: Sequence[VertexSpec], tol: float = DEFAULT_TOL) -> 'Polygon':
        """Build a polygon from its vertices, in order (see the module docstring)."""
        n = len(vertices)
        if n < 2:
            raise ValueError(f"A polygon needs at least two vertices, got {n}")

        sides: List[Curve] = []
        for k in range(n):
            here, after = vertices[k], vertices[(k + 1) % n]
            here_inf, after_inf = isinstance(here, tuple), isinstance(after, tuple)
            if here_inf and after_inf:
                raise ValueError(f"Vertices {k + 1} and {(k + 1) % n + 1} are both infinite")
            if here_inf:
                sides.append(Ray(after, _infinite_vertex(here)[1], from_infinity=True))
            elif after_inf:
                sides.append(Ray(here, _infinite_vertex(after)[0]))
            else:
                sides.append(Segment(here, after))
        return cls(sides, tol=tol)


def _infinite_vertex(pair) -> Tuple[float, float]:
    if len(pair) != 2:
        raise ValueError(f"An infinite vertex is a pair of angles, got {pair!r}")
    return float(pair[0]), float(pair[1])


# =============================================================================
# Factories
# =============================================================================

def rectangle(xlim: Tuple[float, float], ylim: Tuple[float, float], tol: float = DEFAULT_TOL) -> Polygon:
    """Axis-aligned rectangle [x0, x1] x [y0, y1]; positively oriented when x0 < x1 and y0 < y1."""
    x0, x1 = xlim
    y0, y1 = ylim
    return Polygon.from_vertices([complex(x0, y0), complex(x1, y0), complex(x1, y1), complex(x0, y1)], tol=tol)


def rectangle_from_corners(z1: complex, z2: complex, tol: float = DEFAULT_TOL) -> Polygon:
    """Axis-aligned rectangle with opposite corners z1 and z2."""
    z1, z2 = complex(z1), complex(z2)
    return rectangle((z1.real, z2.real), (z1.imag, z2.imag), tol=tol)


def n_gon(n: int, tol: float = DEFAULT_TOL) -> Polygon:
    """Regular n-gon inscribed in the unit circle with a vertex at 1."""
    if n < 3:
        raise ValueError(f"An n-gon needs n > 2, got {n}")
    return Polygon.from_vertices([cmath.exp(1j * TWO_PI * k / n) for k in range(n)], tol=tol)


def finite_vertices(P: ClosedPath) -> List[complex]:
    return [v for v in P.vertices() if not cmath.isinf(v)]
