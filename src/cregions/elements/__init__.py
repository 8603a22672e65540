"""
Paths and polygons built from curves.
"""

from .cregions_path import (
    Path,
    ClosedPath,
)

from .cregions_polygon import (
    CircularPolygon,
    Polygon,
    rectangle,
    rectangle_from_corners,
    n_gon,
)

__all__ = [
    'Path',
    'ClosedPath',
    'CircularPolygon',
    'Polygon',
    'rectangle',
    'rectangle_from_corners',
    'n_gon',
]
