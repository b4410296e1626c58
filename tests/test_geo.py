"""
Tests for geographic points and the spherical geodesic problems.
"""

import math
import unittest

from dispersim.geo import (
    GeoPoint,
    destination_point,
    distance_to_circle_intersection,
    normalize_bearing,
    perpendicular_point,
)
from dispersim.unit import Degree, Meter


def angular_diff(a, b):
    """Smallest difference between two bearings in degrees."""
    return abs((a - b + 180.0) % 360.0 - 180.0)


class TestGeoPoint(unittest.TestCase):
    """Test GeoPoint construction."""

    def test_from_deg(self):
        """Degrees round-trip through the radian storage."""
        p = GeoPoint.from_deg(-23.5505, -46.6333)
        self.assertAlmostEqual(p.lat_deg, -23.5505, places=12)
        self.assertAlmostEqual(p.lon_deg, -46.6333, places=12)
        self.assertAlmostEqual(float(p.latitude), math.radians(-23.5505))

    def test_immutable(self):
        """GeoPoint is a frozen value type."""
        p = GeoPoint.from_deg(0, 0)
        with self.assertRaises(AttributeError):
            p.latitude = p.longitude
        self.assertEqual(p, GeoPoint.from_deg(0, 0))
        self.assertEqual(len({p, GeoPoint.from_deg(0, 0)}), 1)


class TestDestinationPoint(unittest.TestCase):
    """Test the direct geodesic problem."""

    def setUp(self):
        self.origin = GeoPoint.from_deg(-23.5505, -46.6333)

    def test_zero_distance_returns_origin(self):
        """Distance 0 returns the origin unchanged for any bearing."""
        for bearing in (0, 45, 137.5, 359.9, -90, 720):
            self.assertIs(destination_point(self.origin, bearing, 0), self.origin)
        self.assertIs(destination_point(self.origin, Degree(10), Meter(0)), self.origin)

    def test_due_north_latitude_gain(self):
        """Going north moves along the meridian by distance / R."""
        dest = destination_point(self.origin, 0, 5474)
        expected = -23.5505 + math.degrees(5474 / 6_371_000)
        self.assertAlmostEqual(dest.lat_deg, expected, places=10)
        self.assertAlmostEqual(dest.lon_deg, -46.6333, places=10)

    def test_round_trip_on_meridian(self):
        """Out and back along a meridian returns to the origin."""
        out = destination_point(self.origin, 0, 5474)
        back = destination_point(out, 180, 5474)
        self.assertAlmostEqual(back.lat_deg, self.origin.lat_deg, places=9)
        self.assertAlmostEqual(back.lon_deg, self.origin.lon_deg, places=9)

    def test_round_trip_on_equator(self):
        """Out and back along the equator returns to the origin."""
        origin = GeoPoint.from_deg(0, 10)
        out = destination_point(origin, 90, 10_000)
        back = destination_point(out, 270, 10_000)
        self.assertAlmostEqual(back.lat_deg, 0.0, places=9)
        self.assertAlmostEqual(back.lon_deg, 10.0, places=9)

    def test_round_trip_short_distance(self):
        """Reciprocal bearing returns close to the origin for short hops."""
        for bearing in (0, 37, 123, 250, 311):
            out = destination_point(self.origin, bearing, 100)
            back = destination_point(out, (bearing + 180) % 360, 100)
            self.assertAlmostEqual(back.lat_deg, self.origin.lat_deg, delta=1e-6)
            self.assertAlmostEqual(back.lon_deg, self.origin.lon_deg, delta=1e-6)

    def test_distance_matches_inverse(self):
        """Projected points lie at the requested distance and bearing."""
        dest = self.origin.forward(Degree(60), Meter(2500))
        self.assertAlmostEqual(float(self.origin.distance_to(dest)), 2500.0, delta=1e-3)
        self.assertLess(angular_diff(self.origin.bearing_to(dest).to(Degree), 60.0), 1e-6)

    def test_unit_and_plain_bearing_agree(self):
        """Plain numbers are read as degrees."""
        self.assertEqual(
            destination_point(self.origin, 30, 1000),
            destination_point(self.origin, Degree(30), Meter(1000)),
        )

    def test_longitude_not_wrapped(self):
        """Crossing the antimeridian leaves longitude continuous."""
        origin = GeoPoint.from_deg(0, 179.99)
        dest = destination_point(origin, 90, 5000)
        self.assertGreater(dest.lon_deg, 180.0)


class TestHelpers(unittest.TestCase):
    """Test bearing and offset helpers."""

    def test_normalize_bearing(self):
        self.assertAlmostEqual(normalize_bearing(-5).to(Degree), 355.0)
        self.assertAlmostEqual(normalize_bearing(370).to(Degree), 10.0)
        self.assertAlmostEqual(normalize_bearing(Degree(90)).to(Degree), 90.0)

    def test_perpendicular_point(self):
        """Positive offsets go right of the line, negative to the left."""
        origin = GeoPoint.from_deg(0, 0)
        right = perpendicular_point(origin, 0, 1000)
        left = perpendicular_point(origin, 0, -1000)
        self.assertGreater(right.lon_deg, 0.0)
        self.assertLess(left.lon_deg, 0.0)
        self.assertAlmostEqual(float(origin.distance_to(right)), 1000.0, delta=1e-3)
        self.assertLess(angular_diff(origin.bearing_to(right).to(Degree), 90.0), 1e-6)


class TestCircleIntersection(unittest.TestCase):
    """Test ray/circle entry distance."""

    def setUp(self):
        self.origin = GeoPoint.from_deg(0, 0)
        self.center = destination_point(self.origin, 0, 5000)

    def test_ray_towards_circle(self):
        """A ray aimed at the center enters at distance - radius."""
        d = distance_to_circle_intersection(self.origin, 0, self.center, 3000)
        self.assertAlmostEqual(float(d), 2000.0, delta=1e-3)

    def test_ray_away_from_circle(self):
        """A ray that never enters returns the search length."""
        d = distance_to_circle_intersection(self.origin, 180, self.center, 3000)
        self.assertEqual(float(d), 6000.0)

    def test_origin_inside(self):
        """Rays starting inside the circle enter at 0."""
        d = distance_to_circle_intersection(self.origin, 90, self.center, 6000)
        self.assertEqual(float(d), 0.0)

    def test_non_positive_radius(self):
        self.assertEqual(float(distance_to_circle_intersection(self.origin, 0, self.center, 0)), 0.0)


if __name__ == '__main__':
    unittest.main()
