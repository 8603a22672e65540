"""
Exception types raised by cregions.

Each error also derives from the built-in exception a caller would expect
(ValueError, IndexError, ...), so generic handlers keep working.
"""

from typing import Tuple


class CRegionsError(Exception):
    """Base class for all cregions errors."""


class PathContinuityError(CRegionsError, ValueError):
    """
    Consecutive curves of a path do not meet within tolerance.

    Attributes:
        index: 1-based pair (k, k+1) of the adjacent curves that failed. For
            the closing check of a closed path this is (n, 1).
    """

    def __init__(self, index: Tuple[int, int], message: str = ""):
        self.index = index
        super().__init__(message or f"Curve endpoints do not match for pieces {index[0]} and {index[1]}")


class PathParameterError(CRegionsError, IndexError):
    """A path parameter or vertex index lies outside its valid domain."""


class UnsupportedSideError(CRegionsError, TypeError):
    """A polygon was built from a side kind outside its permitted set."""


class RegionArityError(CRegionsError, ValueError):
    """A ConnectedRegion's boundary count does not match its declared arity."""


class TruncationNotImplementedError(CRegionsError, NotImplementedError):
    """An unbounded polygon cannot be truncated (no finite vertex to anchor a circle)."""
