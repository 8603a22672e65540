"""
Unit tests for regions and region algebra.
"""

import cmath
import math
import unittest

from cregions import (
    Annulus,
    Circle,
    ConnectedRegion,
    Line,
    Polygon,
    RegionArityError,
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
    n_gon,
    region,
    righthalfplane,
    union,
    unitdisk,
    upperhalfplane,
)


class SimplyConnectedRegionUnitTests(unittest.TestCase):
    """Membership for regions bounded by one curve"""

    def testUnitDisk(self):
        for r in (0.0, 0.3, 0.9, 1.1, 3.0):
            for k in range(8):
                z = r * cmath.exp(2j * math.pi * (k + 0.5) / 8)
                self.assertEqual(unitdisk.contains(z), abs(z) < 1, f"z = {z}")
        self.assertIn(0.5j, unitdisk)
        self.assertNotIn(2, unitdisk)

    def testNonNumbersAreNotMembers(self):
        self.assertNotIn("0", unitdisk)
        self.assertNotIn(None, unitdisk)

    def testComplement(self):
        outside = ~unitdisk
        self.assertIn(2, outside)
        self.assertNotIn(0, outside)
        self.assertFalse(outside.left)
        self.assertIn(2, complement(unitdisk))
        self.assertIn(0, ~~unitdisk)

    def testExteriorAndRegion(self):
        C = Circle(1, 1)
        self.assertIn(3, exterior(C))
        self.assertIn(1, interior(C))
        self.assertIn(1, region(C))
        self.assertIn(3, region(C, left=False))

    def testIsApprox(self):
        C = Circle(0, 2)
        self.assertTrue(interior(C).isapprox(disk(0, 2)))
        # The inside of C is the right side of reversed C
        self.assertTrue(interior(C).isapprox(region(C.reverse(), left=False)))
        self.assertFalse(interior(C).isapprox(exterior(C)))
        self.assertFalse(interior(C).isapprox(disk(0, 1)))

    def testDisk(self):
        self.assertIn(1 + 1.5j, disk(1 + 1j, 1))
        self.assertIn(1 + 1.5j, disk(Circle(1 + 1j, 1)))
        self.assertNotIn(0, disk(1 + 1j, 1))

    def testHalfPlanes(self):
        self.assertIn(1j, upperhalfplane)
        self.assertNotIn(-1j, upperhalfplane)
        self.assertIn(-1j, lowerhalfplane)
        self.assertIn(-1, lefthalfplane)
        self.assertNotIn(1, lefthalfplane)
        self.assertIn(1, righthalfplane)
        self.assertIn(3 + 2j, halfplane(0, 1))
        self.assertIn(3 + 2j, halfplane(Line(1j, 1)))
        self.assertNotIn(3 + 2j, halfplane(1, 0))

    def testPolygonRegion(self):
        R = interior(n_gon(6))
        self.assertIn(0, R)
        self.assertNotIn(1.1j, R)
        self.assertIn(1.1j, exterior(n_gon(6)))

    def testUnboundedPolygonRegion(self):
        strip = interior(Polygon.from_vertices([0, (0.0, 0.0), 1j]))
        self.assertIn(0.5 + 0.5j, strip)
        self.assertIn(1000 + 0.5j, strip)
        self.assertNotIn(-1 + 0.5j, strip)
        self.assertNotIn(1000 + 2j, strip)

    def testBoundaryMustBeJordan(self):
        with self.assertRaises(TypeError):
            SimplyConnectedRegion(0.5)


class ConnectedRegionUnitTests(unittest.TestCase):
    """Regions with holes"""

    def testOuterWithTwoHoles(self):
        R = ConnectedRegion(3, Circle(0, 4), [Circle(-2, 1), Circle(2, 1)])
        self.assertIsInstance(R.inner, tuple)
        self.assertIn(0, R)
        self.assertIn(3j, R)
        self.assertNotIn(2, R)
        self.assertNotIn(-2.5, R)
        self.assertNotIn(5, R)

    def testWithoutOuter(self):
        R = ConnectedRegion(1, None, [Circle(0, 1)])
        self.assertIn(100, R)
        self.assertNotIn(0, R)

    def testArity(self):
        with self.assertRaises(RegionArityError):
            ConnectedRegion(2, Circle(0, 4), [Circle(-2, 1), Circle(2, 1)])
        with self.assertRaises(ValueError):
            ConnectedRegion(2, None, [Circle(0, 1)])

    def testBetween(self):
        R = between(Circle(0, 4), Circle(0, 1))
        self.assertEqual(R.n, 2)
        self.assertIn(2, R)
        self.assertNotIn(0, R)

        R = between(Circle(0, 4), [Circle(-2, 1), Circle(2, 1)])
        self.assertEqual(R.n, 3)
        self.assertNotIn(-2, R)


class AnnulusUnitTests(unittest.TestCase):
    """Annulus membership and validation"""

    def testMembership(self):
        center = 1 + 1j
        A = annulus(center, 2, 1)
        self.assertIsInstance(A, Annulus)
        self.assertEqual(A.n, 2)
        for angle in (0.0, 1.0, 2.5, 4.0):
            u = cmath.exp(1j * angle)
            self.assertIn(center + 1.5 * u, A)
            self.assertNotIn(center + 0.5 * u, A)
            self.assertNotIn(center + 2.5 * u, A)

    def testInvalidRadii(self):
        for outer, inner in ((1, 2), (1, 1), (2, 0)):
            with self.assertRaises(ValueError):
                annulus(0, outer, inner)
        with self.assertRaises(ValueError):
            Annulus(Circle(0, 1), Circle(0, 2))
        with self.assertRaises(TypeError):
            Annulus(Circle(0, 2), Line(0, 1))


class RegionAlgebraUnitTests(unittest.TestCase):
    """Union and intersection"""

    def setUp(self):
        self.a = disk(0, 1)
        self.b = disk(1.5, 1)

    def testUnion(self):
        U = union(self.a, self.b)
        self.assertIsInstance(U, RegionUnion)
        for z in (0, 1.5, 0.75, 5j, -0.9, 2.4):
            self.assertEqual(z in U, (z in self.a) or (z in self.b), f"z = {z}")
        self.assertIn(0.75, self.a | self.b)

    def testIntersection(self):
        I = intersect_regions(self.a, self.b)
        self.assertIsInstance(I, RegionIntersection)
        for z in (0, 1.5, 0.75, 5j):
            self.assertEqual(z in I, (z in self.a) and (z in self.b), f"z = {z}")
        self.assertIn(0.75, self.a & self.b)
        self.assertNotIn(0, self.a & self.b)

    def testNested(self):
        R = (unitdisk & upperhalfplane) | disk(5, 1)
        self.assertIn(0.5j, R)
        self.assertNotIn(-0.5j, R)
        self.assertIn(5.5, R)

    def testOperatorsRejectNonRegions(self):
        with self.assertRaises(TypeError):
            unitdisk | 1
        with self.assertRaises(TypeError):
            unitdisk & "disk"


class BoundaryUnitTests(unittest.TestCase):

    def testBoundaries(self):
        C = Circle(0, 1)
        self.assertIs(boundary(interior(C)), C)
        A = annulus(0, 2, 1)
        outer, inner = boundary(A)
        self.assertAlmostEqual(outer.radius, 2)
        self.assertAlmostEqual(inner.radius, 1)
        holes = (Circle(0, 1),)
        self.assertEqual(boundary(ConnectedRegion(1, None, holes)), holes)
        with self.assertRaises(TypeError):
            boundary(unitdisk | unitdisk)


if __name__ == '__main__':
    unittest.main()
