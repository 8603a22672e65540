"""
Unit tests for the elementary curves.
"""

import cmath
import math
import unittest

import numpy as np

from cregions import INF, Arc, Circle, Line, Ray, Segment


class LineUnitTests(unittest.TestCase):
    """Unit tests for Line"""

    def testPointAndArg(self):
        L = Line(1j, 2.0)
        self.assertAlmostEqual(L.direction, 1.0)
        self.assertAlmostEqual(L.point(0.5), 1j)
        self.assertEqual(L.point(0.0), INF)
        self.assertEqual(L.point(1.0), INF)
        for t in (0.1, 0.3, 0.5, 0.8):
            self.assertAlmostEqual(L.arg(L.point(t)), t, places=12)

    def testThroughAndSides(self):
        L = Line.through(0, 1j)
        self.assertAlmostEqual(L.direction, 1j)
        self.assertTrue(L.isleft(-1))
        self.assertFalse(L.isleft(1))
        self.assertAlmostEqual(L.dist(3 + 5j), 3.0)
        self.assertAlmostEqual(L.closest(3 + 5j), 5j)

    def testZeroDirectionRejected(self):
        with self.assertRaises(ValueError):
            Line(0, 0)

    def testInversion(self):
        # A line through the origin maps to itself, traversed the other way
        L = Line(0, 1).invert()
        self.assertIsInstance(L, Line)
        self.assertAlmostEqual(L.direction, -1.0)

        # Re z = 1 maps to the circle |w - 1/2| = 1/2
        C = Line(1, 1j).invert()
        self.assertIsInstance(C, Circle)
        self.assertAlmostEqual(C.center, 0.5)
        self.assertAlmostEqual(C.radius, 0.5)


class RayUnitTests(unittest.TestCase):
    """Unit tests for Ray"""

    def testPoints(self):
        r = Ray(1, math.pi / 2)
        self.assertAlmostEqual(r.point(0.0), 1)
        self.assertAlmostEqual(r.point(0.5), 1 + 1j)
        self.assertEqual(r.point(1.0), INF)

    def testFromInfinity(self):
        r = Ray(1, math.pi / 2, from_infinity=True)
        self.assertEqual(r.point(0.0), INF)
        self.assertAlmostEqual(r.point(1.0), 1)
        self.assertAlmostEqual(r.unittangent(0.5), -1j)

        back = r.reverse()
        self.assertFalse(back.from_infinity)
        self.assertAlmostEqual(back.point(0.0), 1)

    def testDistance(self):
        r = Ray(0, 0)
        self.assertAlmostEqual(r.dist(2 + 1j), 1.0)
        self.assertAlmostEqual(r.dist(-3 + 4j), 5.0)
        self.assertAlmostEqual(r.closest(-3 + 4j), 0)

    def testScaleRotatesAngle(self):
        r = Ray(1, 0) * 1j
        self.assertAlmostEqual(r.base, 1j)
        self.assertAlmostEqual(r.direction, 1j)


class SegmentUnitTests(unittest.TestCase):
    """Unit tests for Segment"""

    def testBasics(self):
        s = Segment(0, 2)
        self.assertAlmostEqual(s.point(0.25), 0.5)
        self.assertAlmostEqual(s.arclength(), 2.0)
        self.assertTrue(s.isfinite())
        self.assertAlmostEqual(s.closest(3 + 1j), 2)
        self.assertAlmostEqual(s.dist(3 + 1j), math.sqrt(2))
        self.assertAlmostEqual(s(0.5), 1)

    def testDegenerateRejected(self):
        with self.assertRaises(ValueError):
            Segment(1j, 1j)

    def testOperators(self):
        s = Segment(0, 1)
        self.assertTrue((s + 1j).isapprox(Segment(1j, 1 + 1j)))
        self.assertTrue((1j + s).isapprox(Segment(1j, 1 + 1j)))
        self.assertTrue((s - 1).isapprox(Segment(-1, 0)))
        self.assertTrue((2j * s).isapprox(Segment(0, 2j)))
        self.assertTrue((s / 2).isapprox(Segment(0, 0.5)))
        self.assertTrue((-Segment(1, 2)).isapprox(Segment(-1, -2)))
        self.assertTrue((1 - s).isapprox(Segment(1, 0)))
        self.assertTrue(s.conj().isapprox(s))
        self.assertTrue(s.reverse().isapprox(Segment(1, 0)))

    def testInversionFromOrigin(self):
        # 0 -> 1 maps to the ray coming in from +inf to 1
        r = Segment(0, 1).invert()
        self.assertIsInstance(r, Ray)
        self.assertTrue(r.from_infinity)
        self.assertAlmostEqual(r.base, 1)
        self.assertAlmostEqual(r.direction, 1)

        r = Segment(1, 0).inv()
        self.assertIsInstance(r, Ray)
        self.assertFalse(r.from_infinity)

    def testInversionToArc(self):
        a = 1 / Segment(1, 1j)
        self.assertIsInstance(a, Arc)
        self.assertAlmostEqual(a.point(0.0), 1)
        self.assertAlmostEqual(a.point(1.0), -1j)
        self.assertAlmostEqual(a.point(0.5), 1 / Segment(1, 1j).point(0.5))

    def testInversionThroughOriginRejected(self):
        with self.assertRaises(ValueError):
            Segment(-1, 1).invert()


class CircleUnitTests(unittest.TestCase):
    """Unit tests for Circle"""

    def testThroughOrientation(self):
        C = Circle.through(1, 1j, -1)
        self.assertIsInstance(C, Circle)
        self.assertAlmostEqual(C.center, 0)
        self.assertAlmostEqual(C.radius, 1)
        self.assertTrue(C.ccw)

        C = Circle.through(1, -1j, -1)
        self.assertFalse(C.ccw)

    def testThroughCollinearGivesLine(self):
        L = Circle.through(0, 1, 2)
        self.assertIsInstance(L, Line)
        self.assertAlmostEqual(L.dist(5), 0)

        L = Circle.through(0, 1, INF)
        self.assertIsInstance(L, Line)
        self.assertAlmostEqual(L.direction, 1)

    def testPointTangent(self):
        C = Circle(1, 2)
        self.assertAlmostEqual(C.point(0.25), 1 + 2j)
        self.assertAlmostEqual(C.unittangent(0.0), 1j)
        self.assertAlmostEqual(C.reverse().unittangent(0.0), -1j)
        self.assertAlmostEqual(C.arclength(), 4 * math.pi)

    def testSides(self):
        C = Circle(0, 1)
        self.assertTrue(C.isleft(0.5))
        self.assertTrue(C.isright(2))
        self.assertTrue(C.reverse().isleft(2))

    def testInversion(self):
        C = Circle(2, 1).invert()
        self.assertIsInstance(C, Circle)
        self.assertAlmostEqual(C.center, 2 / 3)
        self.assertAlmostEqual(C.radius, 1 / 3)

        L = Circle(1, 1).invert()
        self.assertIsInstance(L, Line)
        self.assertAlmostEqual(L.dist(0.5 + 3j), 0)

    def testIsApprox(self):
        C = Circle(1j, 2)
        self.assertTrue(C.isapprox(Circle(1j + 1e-14, 2)))
        self.assertFalse(C.isapprox(C.reverse()))
        self.assertTrue(C.isapprox(C.reverse().reverse()))

    def testInvalidRadius(self):
        with self.assertRaises(ValueError):
            Circle(0, -1)


class ArcUnitTests(unittest.TestCase):
    """Unit tests for Arc"""

    def testThrough(self):
        a = Arc.through(1, 1j, -1)
        self.assertAlmostEqual(a.center, 0)
        self.assertAlmostEqual(a.start, 0)
        self.assertAlmostEqual(a.delta, 0.5)
        self.assertAlmostEqual(a.point(1.0), -1)

        a = Arc.through(1, -1j, -1)
        self.assertAlmostEqual(a.delta, -0.5)
        self.assertAlmostEqual(a.point(0.5), -1j)

    def testThroughCollinearGivesSegment(self):
        s = Arc.through(0, 1, 2)
        self.assertIsInstance(s, Segment)

    def testFromCenter(self):
        a = Arc.from_center(2, 2j)
        self.assertAlmostEqual(a.radius, 2)
        self.assertAlmostEqual(a.delta, 0.25)
        self.assertAlmostEqual(a.arclength(), math.pi)

    def testReverse(self):
        a = Arc(Circle(0, 1), 0, 0.5).reverse()
        self.assertAlmostEqual(a.point(0.0), -1)
        self.assertAlmostEqual(a.point(1.0), 1)
        self.assertAlmostEqual(a.point(0.5), 1j)

    def testDistAndArg(self):
        a = Arc(Circle(0, 1), 0, 0.25)
        self.assertAlmostEqual(a.dist(2 * cmath.exp(0.1j)), 1)
        # Off the angular range the nearest point is an endpoint (here 1j)
        self.assertAlmostEqual(a.dist(-2), math.sqrt(5))
        self.assertAlmostEqual(a.arg(cmath.exp(0.25j * math.pi)), 0.5)
        self.assertLess(a.arg(cmath.exp(-0.01j)), 0)

    def testIsApproxUsesCircleStartAndSweep(self):
        C = Circle(0, 1)
        a = Arc(C, 0, 0.25)
        self.assertTrue(a.isapprox(Arc(C, 1.0, 0.25)))
        self.assertFalse(a.isapprox(Arc(C, 0, 0.3)))
        self.assertFalse(a.isapprox(Arc(Circle(0, 2), 0, 0.25)))

    def testScaleAndConj(self):
        a = Arc(Circle(0, 1), 0, 0.25)
        b = a * 2j
        self.assertTrue(np.allclose([b.point(0.0), b.point(1.0)], [2j, -2]))
        c = a.conj()
        self.assertTrue(np.allclose([c.point(0.0), c.point(1.0)], [1, -1j]))

    def testInvalidSweep(self):
        with self.assertRaises(ValueError):
            Arc(Circle(0, 1), 0, 0)
        with self.assertRaises(ValueError):
            Arc(Circle(0, 1), 0, 1.5)


if __name__ == '__main__':
    unittest.main()
