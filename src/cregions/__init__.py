"""cregions - planar regions of the complex plane and point membership."""

__version__ = "0.1.0"

from .cregions_config import CRegionsConfig, DEFAULT_CONFIG, DEFAULT_TOL
from .cregions_errors import (
    CRegionsError,
    PathContinuityError,
    PathParameterError,
    RegionArityError,
    TruncationNotImplementedError,
    UnsupportedSideError,
)
from .mathutils.cregions_math import INF
from .curves import Arc, Circle, Curve, CurveKind, Line, Ray, Segment
from .elements import (
    CircularPolygon,
    ClosedPath,
    Path,
    Polygon,
    n_gon,
    rectangle,
    rectangle_from_corners,
)
from .solvers import (
    IntersectionResult,
    IntersectionType,
    angles,
    horizontal_crossings,
    intersect,
    isleft,
    isright,
    truncate,
    truncation_circle,
    winding,
)
from .cregions_regions import (
    Annulus,
    ConnectedRegion,
    Region,
    RegionIntersection,
    RegionUnion,
    SimplyConnectedRegion,
    annulus,
    between,
    boundary,
    complement,
    disk,
    exterior,
    halfplane,
    interior,
    intersect_regions,
    lefthalfplane,
    lowerhalfplane,
    region,
    righthalfplane,
    union,
    unitdisk,
    upperhalfplane,
)
