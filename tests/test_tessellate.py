"""
Tests for line and arc tessellation.
"""

import unittest

from dispersim.geo import GeoPoint, arc_points, destination_point, line_points, sweep_bearings
from dispersim.unit import Degree


def angular_diff(a, b):
    return abs((a - b + 180.0) % 360.0 - 180.0)


class TestLinePoints(unittest.TestCase):
    """Test linear interpolation between two points."""

    def setUp(self):
        self.a = GeoPoint.from_deg(-23.5505, -46.6333)
        self.b = GeoPoint.from_deg(-23.5013, -46.6102)

    def test_point_count(self):
        """steps + 1 points are produced."""
        for steps in (1, 2, 50):
            self.assertEqual(len(line_points(self.a, self.b, steps)), steps + 1)

    def test_endpoints(self):
        """First and last points are the inputs."""
        points = line_points(self.a, self.b, 50)
        self.assertEqual(points[0], self.a)
        self.assertEqual(points[-1], self.b)

    def test_monotonic(self):
        """Latitude and longitude advance monotonically."""
        points = line_points(self.a, self.b, 20)
        lats = [p.lat_deg for p in points]
        lons = [p.lon_deg for p in points]
        self.assertEqual(lats, sorted(lats))
        self.assertEqual(lons, sorted(lons))

    def test_linear_in_coordinates(self):
        """The midpoint is the coordinate average, not the great-circle midpoint."""
        points = line_points(self.a, self.b, 2)
        self.assertAlmostEqual(points[1].lat_deg, (self.a.lat_deg + self.b.lat_deg) / 2, places=12)
        self.assertAlmostEqual(points[1].lon_deg, (self.a.lon_deg + self.b.lon_deg) / 2, places=12)

    def test_invalid_steps(self):
        with self.assertRaises(ValueError):
            line_points(self.a, self.b, 0)


class TestArcPoints(unittest.TestCase):
    """Test arc sampling around a center."""

    def setUp(self):
        self.center = GeoPoint.from_deg(-23.5505, -46.6333)

    def test_point_count(self):
        """Exactly num_points points are produced."""
        for n in (2, 5, 150):
            self.assertEqual(len(arc_points(self.center, 1000, 10, 80, n)), n)

    def test_constant_radius(self):
        """Every sample lies at the radius."""
        for p in arc_points(self.center, 5474, 300, 60, 37):
            self.assertAlmostEqual(float(self.center.distance_to(p)), 5474.0, delta=1e-3)

    def test_sweeps_through_north(self):
        """350 -> 10 goes through 0, not back through 180."""
        points = arc_points(self.center, 1000, 350, 10, 5)
        bearings = [self.center.bearing_to(p).to(Degree) for p in points]
        for got, expected in zip(bearings, (350, 355, 0, 5, 10)):
            self.assertLess(angular_diff(got, expected), 1e-6)

    def test_sweep_bearings_wraps_end(self):
        """End below start is pushed up by one turn."""
        bearings = sweep_bearings(350, 10, 5)
        self.assertAlmostEqual(bearings[0], 350.0)
        self.assertAlmostEqual(bearings[-1], 370.0)
        bearings = sweep_bearings(-10, 10, 3)
        self.assertAlmostEqual(bearings[1], 360.0)

    def test_samples_match_projection(self):
        """Each sample is the projected point for its bearing."""
        points = arc_points(self.center, 2000, 10, 30, 3)
        expected = destination_point(self.center, 20, 2000)
        self.assertAlmostEqual(points[1].lat_deg, expected.lat_deg, places=12)
        self.assertAlmostEqual(points[1].lon_deg, expected.lon_deg, places=12)

    def test_unit_bearings(self):
        """Angle units are accepted for bearings."""
        points = arc_points(self.center, 1000, Degree(350), Degree(10), 5)
        self.assertEqual(len(points), 5)

    def test_invalid_num_points(self):
        with self.assertRaises(ValueError):
            arc_points(self.center, 1000, 0, 10, 1)


if __name__ == '__main__':
    unittest.main()
