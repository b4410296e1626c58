"""Geographic points, spherical geodesics and tessellation.

Components:
    GeoPoint: Immutable point with typed Latitude/Longitude coordinates
    destination_point: Direct geodesic problem on the model sphere
    normalize_bearing: Wrap any bearing into [0, 360)
    perpendicular_point: Sideways offset from a line
    distance_to_circle_intersection: Ray/circle entry distance
    line_points / arc_points: Polyline tessellation for rendering

Typical Usage:
    >>> from dispersim.geo import GeoPoint, arc_points, destination_point, line_points
    >>> from dispersim.unit import Degree, Meter
    >>>
    >>> firing_point = GeoPoint.from_deg(-23.5505, -46.6333)
    >>> impact = destination_point(firing_point, Degree(0), Meter(5474))
    >>> centerline = line_points(firing_point, impact, 50)
    >>> len(centerline)
    51
    >>> ring = arc_points(firing_point, Meter(5474), Degree(355), Degree(5), 11)
"""

from .geo_point import (
    GeoPoint,
    Latitude,
    Longitude,
    destination_point,
    distance_to_circle_intersection,
    normalize_bearing,
    perpendicular_point,
)
from .tessellate import arc_points, line_points, sweep_bearings

__all__ = [
    "GeoPoint",
    "Latitude",
    "Longitude",
    "destination_point",
    "distance_to_circle_intersection",
    "normalize_bearing",
    "perpendicular_point",
    "line_points",
    "arc_points",
    "sweep_bearings",
]
