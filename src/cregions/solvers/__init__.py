"""
Intersection and winding solvers.
"""

from .cregions_intersection_solver import (
    IntersectionResult,
    IntersectionType,
    horizontal_crossings,
    intersect,
)

from .cregions_winding_solver import (
    angles,
    isleft,
    isright,
    truncate,
    truncation_circle,
    winding,
)

__all__ = [
    'IntersectionResult',
    'IntersectionType',
    'horizontal_crossings',
    'intersect',
    'angles',
    'isleft',
    'isright',
    'truncate',
    'truncation_circle',
    'winding',
]
