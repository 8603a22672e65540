"""Test fixtures and utilities for cregions testing.

- assertions: Custom assertion functions (assert_points_close, assert_windings)
"""

from .assertions import assert_points_close, assert_windings

__all__ = [
    'assert_points_close',
    'assert_windings',
]
