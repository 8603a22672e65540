"""
Elementary curves of the complex plane.

- Line, Ray, Segment: straight curves (cregions_lines)
- Circle, Arc: circular curves (cregions_circles)
"""

from .cregions_curve import (
    Curve,
    CurveKind,
)

from .cregions_lines import (
    Line,
    Ray,
    Segment,
)

from .cregions_circles import (
    Circle,
    Arc,
)

__all__ = [
    'Curve',
    'CurveKind',
    'Line',
    'Ray',
    'Segment',
    'Circle',
    'Arc',
]
