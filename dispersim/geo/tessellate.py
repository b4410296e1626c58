"""Tessellation of lines and arcs into point sequences for rendering.

The two operations use different models:

* :func:`line_points` interpolates latitude and longitude linearly and
  independently. The result is a straight line in coordinate space, not a
  great circle. Envelope lines are a few kilometres long, where the
  difference is far below map resolution, but the intermediate points are not
  geodesically exact.
* :func:`arc_points` projects every sample with
  :func:`~dispersim.geo.geo_point.destination_point`, so each sample lies
  exactly on the circle; only the chords between samples are approximate.
"""

from __future__ import annotations

import numpy as np

from dispersim.config import ARC_POINTS, LINE_STEPS
from dispersim.unit import Angle, Degree, Length

from .geo_point import GeoPoint, destination_point, normalize_bearing


def line_points(a: GeoPoint, b: GeoPoint, steps: int = LINE_STEPS) -> list[GeoPoint]:
    """Interpolate ``steps + 1`` points from ``a`` to ``b`` in lat/lon space.

    Args:
        a: First point, returned unchanged as element 0.
        b: Last point, returned unchanged as the final element.
        steps: Number of intervals, at least 1.

    Raises:
        ValueError: If ``steps < 1``.
    """
    if steps < 1:
        raise ValueError(f"steps must be >= 1, got {steps}")

    lats = np.linspace(float(a.latitude), float(b.latitude), steps + 1)
    lons = np.linspace(float(a.longitude), float(b.longitude), steps + 1)
    inner = [GeoPoint.from_rad(float(lat), float(lon)) for lat, lon in zip(lats[1:-1], lons[1:-1])]
    return [a, *inner, b]


def sweep_bearings(
    start_bearing: Angle | float, end_bearing: Angle | float, num_points: int
) -> np.ndarray:
    """Bearings in degrees sampled from start to end, increasing.

    Both ends are normalized to ``[0, 360)``; if the end falls below the start
    the sweep continues through north (``end + 360``). Values above 360 are
    returned as is.
    """
    start = normalize_bearing(start_bearing).to(Degree)
    end = normalize_bearing(end_bearing).to(Degree)
    if end < start:
        end += 360.0
    return np.linspace(start, end, num_points)


def arc_points(
    center: GeoPoint,
    radius: Length | float,
    start_bearing: Angle | float,
    end_bearing: Angle | float,
    num_points: int = ARC_POINTS,
) -> list[GeoPoint]:
    """Sample a circular arc around ``center``.

    Args:
        center: Arc center.
        radius: Distance from ``center`` in metres.
        start_bearing: First bearing; plain numbers are degrees.
        end_bearing: Last bearing, reached by sweeping clockwise from
            ``start_bearing`` (through north when needed).
        num_points: Number of samples, at least 2.

    Returns:
        list[GeoPoint]: Exactly ``num_points`` points, each ``radius`` from
        ``center``.

    Raises:
        ValueError: If ``num_points < 2``.

    Example:
        >>> c = GeoPoint.from_deg(0, 0)
        >>> len(arc_points(c, 1000, 350, 10, 5))
        5
    """
    if num_points < 2:
        raise ValueError(f"num_points must be >= 2, got {num_points}")

    return [
        destination_point(center, float(bearing), radius)
        for bearing in sweep_bearings(start_bearing, end_bearing, num_points)
    ]
