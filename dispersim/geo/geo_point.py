"""Geographic points and the spherical direct/inverse geodesic problems.

The envelope is drawn for visualization, so the Earth is modelled as a sphere
of radius :data:`dispersim.config.EARTH_RADIUS`. The direct problem
(:func:`destination_point`) is solved in closed form; the inverse problem
(distance and initial bearing between two points) runs on a pyproj ``Geod``
configured as the same sphere, so both directions agree to floating-point
precision. The sphere is off by up to ~0.3% against the real ellipsoid.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import asin, atan2, cos, radians, sin

from pyproj import Geod
from scipy.optimize import brentq

from dispersim.config import EARTH_RADIUS
from dispersim.unit import Angle, Degree, Length, Meter, Radian

_SPHERE = Geod(a=float(EARTH_RADIUS), b=float(EARTH_RADIUS))

# Samples used to bracket a ray/circle crossing
_INTERSECTION_SAMPLES = 100


class Latitude(Degree):
    """Latitude in degrees (-90 to +90), stored in radians.

    Example:
        >>> str(Latitude(-23.5505))
        '-23.5505 °N/S'
    """

    IS_FAMILY_ROOT = True
    SYMBOL = "°N/S"


class Longitude(Degree):
    """Longitude in degrees, stored in radians.

    Values produced by :func:`destination_point` are not wrapped to
    [-180, 180]; treat them as continuous.
    """

    IS_FAMILY_ROOT = True
    SYMBOL = "°E/W"


def _bearing_rad(bearing: Angle | float) -> float:
    # plain numbers are degrees, units carry radians
    if isinstance(bearing, Radian):
        return float(bearing)
    return radians(bearing)


def normalize_bearing(bearing: Angle | float) -> Degree:
    """Wrap a bearing into ``[0, 360)`` degrees.

    Args:
        bearing: Angle unit, or a plain number of degrees.

    Returns:
        Degree: Equivalent compass bearing.

    Example:
        >>> round(normalize_bearing(-5).to(Degree), 9)
        355.0
    """
    return Degree.from_si(_bearing_rad(bearing)).normalized()


@dataclass(frozen=True)
class GeoPoint:
    """Immutable geographic point on the spherical Earth.

    Attributes:
        latitude (Latitude): North/South coordinate.
        longitude (Longitude): East/West coordinate.

    Example:
        >>> firing_point = GeoPoint.from_deg(-23.5505, -46.6333)
        >>> impact = firing_point.forward(Degree(0), Meter(5474))
        >>> round(float(firing_point.distance_to(impact)), 3)
        5474.0
    """

    latitude: Latitude
    longitude: Longitude

    @classmethod
    def from_deg(cls, lat: float, lon: float) -> GeoPoint:
        """Create a GeoPoint from decimal degrees."""
        return cls(Latitude(lat), Longitude(lon))

    @classmethod
    def from_rad(cls, lat: float, lon: float) -> GeoPoint:
        """Create a GeoPoint from radians."""
        return cls(Latitude.from_si(lat), Longitude.from_si(lon))

    @property
    def lat_deg(self) -> float:
        return self.latitude.to(Latitude)

    @property
    def lon_deg(self) -> float:
        return self.longitude.to(Longitude)

    def to_deg(self) -> tuple[float, float]:
        """Return ``(latitude, longitude)`` in degrees."""
        return self.lat_deg, self.lon_deg

    def forward(self, azimuth: Angle | float, distance: Length | float) -> GeoPoint:
        """Point reached from here along ``azimuth`` after ``distance``.

        See :func:`destination_point`.
        """
        return destination_point(self, azimuth, distance)

    def distance_to(self, other: GeoPoint) -> Meter:
        """Great-circle distance to ``other`` on the model sphere."""
        _, _, dist = _SPHERE.inv(
            float(self.longitude),
            float(self.latitude),
            float(other.longitude),
            float(other.latitude),
            radians=True,
        )
        return Meter(dist)

    def bearing_to(self, other: GeoPoint) -> Degree:
        """Initial great-circle bearing towards ``other``, in ``[0, 360)``."""
        az12, _, _ = _SPHERE.inv(
            float(self.longitude),
            float(self.latitude),
            float(other.longitude),
            float(other.latitude),
            radians=True,
        )
        return Degree.from_si(az12).normalized()

    def __str__(self) -> str:
        return f"({self.lat_deg:.6f}, {self.lon_deg:.6f})"


def destination_point(
    origin: GeoPoint, bearing: Angle | float, distance: Length | float
) -> GeoPoint:
    """Solve the direct geodesic problem on the sphere.

    Args:
        origin: Start point.
        bearing: Initial bearing, clockwise from north. Plain numbers are
            degrees; any value is accepted, no normalization is needed.
        distance: Distance in metres. Negative values travel backwards.

    Returns:
        GeoPoint: Destination. ``origin`` itself when ``distance`` is 0. The
        longitude is not wrapped.
    """
    d = float(distance)
    if d == 0:
        return origin

    phi1 = float(origin.latitude)
    lam1 = float(origin.longitude)
    theta = _bearing_rad(bearing)
    delta = d / float(EARTH_RADIUS)

    phi2 = asin(sin(phi1) * cos(delta) + cos(phi1) * sin(delta) * cos(theta))
    lam2 = lam1 + atan2(
        sin(theta) * sin(delta) * cos(phi1),
        cos(delta) - sin(phi1) * sin(phi2),
    )
    return GeoPoint.from_rad(phi2, lam2)


def perpendicular_point(
    point: GeoPoint, bearing: Angle | float, distance: Length | float
) -> GeoPoint:
    """Offset ``point`` sideways from a line running along ``bearing``.

    Positive ``distance`` goes to the right of the line, negative to the left.
    """
    side = normalize_bearing(Degree.from_si(_bearing_rad(bearing)) + Degree(90))
    return destination_point(point, side, distance)


def distance_to_circle_intersection(
    origin: GeoPoint,
    bearing: Angle | float,
    center: GeoPoint,
    radius: Length | float,
) -> Meter:
    """Distance along a ray from ``origin`` until it enters a circle.

    The ray is sampled every ``2 * radius / 100`` metres up to ``2 * radius``;
    the first sample inside the circle brackets the crossing, which is then
    refined with Brent's method.

    Returns:
        Meter: Distance to the crossing. ``0`` if ``origin`` is already inside
        the circle (or ``radius <= 0``), ``2 * radius`` if the ray never
        enters it within the sampled length.
    """
    r = float(radius)
    if r <= 0:
        return Meter(0)

    def outside_by(s: float) -> float:
        return float(destination_point(origin, bearing, s).distance_to(center)) - r

    if outside_by(0.0) <= 0:
        return Meter(0)

    max_distance = 2 * r
    step = max_distance / _INTERSECTION_SAMPLES
    previous = 0.0
    for i in range(1, _INTERSECTION_SAMPLES + 1):
        s = step * i
        if outside_by(s) <= 0:
            return Meter(brentq(outside_by, previous, s))
        previous = s
    return Meter(max_distance)
