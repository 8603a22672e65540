"""
Integration tests for region membership across curves, paths, truncation and
region algebra.

Membership is checked against closed-form descriptions of the same point sets
on grids of sample points kept away from the boundaries.
"""
import cmath
import math
import unittest

import numpy as np

from cregions import (
    CircularPolygon,
    Polygon,
    annulus,
    between,
    exterior,
    interior,
    n_gon,
    rectangle,
    upperhalfplane,
)


def _grid(xlim, ylim, n=9):
    xs = np.linspace(xlim[0], xlim[1], n)
    ys = np.linspace(ylim[0], ylim[1], n)
    return [complex(x, y) for x in xs for y in ys]


class InvertedPolygonTests(unittest.TestCase):
    """The inverse of a polygon bounds the inverse of its interior."""

    def testInvertedSquare(self):
        square = rectangle((1.5, 2.5), (-0.5, 0.5))
        inverted = 1 / square
        self.assertIsInstance(inverted, CircularPolygon)
        self.assertTrue(inverted.isfinite())

        R, S = interior(square), interior(inverted)
        for z in _grid((1.1, 2.9), (-0.9, 0.9)):
            if min(abs(z.real - 1.5), abs(z.real - 2.5), abs(z.imag - 0.5), abs(z.imag + 0.5)) < 0.05:
                continue
            self.assertEqual(S.contains(1 / z), R.contains(z), f"z = {z}")

    def testMovedStar(self):
        star = Polygon.from_vertices([cmath.exp(4j * math.pi * k / 5) for k in range(5)])
        moved = (star * 2j) + (1 - 1j)
        for z in (0, 0.05j, 0.8 + 0.01j, 2, -0.3 - 0.1j):
            self.assertEqual(
                (z * 2j + (1 - 1j)) in interior(moved),
                z in interior(star),
                f"z = {z}")


class UnboundedRegionTests(unittest.TestCase):
    """Regions bounded by polygons with vertices at infinity."""

    def testWedge(self):
        wedge = interior(Polygon.from_vertices([0, (0.0, math.pi / 4)]))
        for r in (0.01, 1.0, 40.0, 1e4):
            for k in range(16):
                theta = 2 * math.pi * (k + 0.5) / 16
                z = r * cmath.exp(1j * theta)
                expected = 0 < theta < math.pi / 4
                self.assertEqual(z in wedge, expected, f"r = {r}, theta = {theta}")

    def testStripComplement(self):
        strip = Polygon.from_vertices([0, (0.0, 0.0), 1j])
        outside = exterior(strip)
        for z in _grid((-3.1, 3.0), (-1.1, 2.0), n=7):
            expected = not (z.real > 0 and 0 < z.imag < 1)
            self.assertEqual(z in outside, expected, f"z = {z}")


class RegionAlgebraTests(unittest.TestCase):
    """Composite regions agree with their set descriptions."""

    def testUpperHalfAnnulus(self):
        R = annulus(0, 2, 1) & upperhalfplane
        for z in _grid((-2.55, 2.55), (-2.55, 2.55), n=11):
            expected = 1 < abs(z) < 2 and z.imag > 0
            self.assertEqual(z in R, expected, f"z = {z}")

    def testPolygonWithHoles(self):
        outer = n_gon(8) * 4
        holes = [rectangle((-2.5, -0.5), (-1, 1)), rectangle((0.5, 2.5), (-1, 1))]
        R = between(outer, holes)
        self.assertIn(0, R)
        self.assertIn(2j, R)
        self.assertNotIn(-1.5, R)
        self.assertNotIn(1.5 + 0.5j, R)
        self.assertNotIn(5, R)

        U = R | interior(holes[0])
        self.assertIn(-1.5, U)
        self.assertNotIn(1.5, U)


if __name__ == '__main__':
    unittest.main()
