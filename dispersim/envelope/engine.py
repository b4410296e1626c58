"""Derivation of the ballistic dispersion envelope.

Notation used below (all angles in degrees, lengths in metres):

    fb  firing bearing            X  range distance
    δ   dispersion angle          W  lateral safety distance
    P   angle P                   A  explosive splash distance
    25  explosive splash angle    B  outer arc extra radius

Constructions, in dependency order:

    A        fb,               length X, from the firing point
    B / C    fb ± δ,           length X
    D / E    fb ± (δ + P),     length W / sin P
    F / G    parallel to B/C,  from the ends of D/E,
             length X·cos B' - W / tan P, with B' = asin(W / X)
    arc      radius X, from fb - δ - asin(W/X) to fb + δ + asin(W/X),
             swept through north
    H / I    fb ± (25 + δ + P), length A / sin 25
    J / K    parallel to D/E,  from the ends of H/I,
             length lenD + A/sin P - A/tan P - A/tan 25
    L / M    parallel to B/C,  from the ends of J/K,
             length (X+B)·cos L - lenJ·cos P - lenH·cos(P+25),
             with L = asin((A+W) / X)
    circle   radius X+B, fb ± (δ + asin((A+W)/(X+B)))

H..M and circle only exist for explosive munition with A > 0. Nothing is
drawn when X <= 0.

Every domain-restricted step goes through a guard that yields a
:class:`~dispersim.envelope.derived.Computed` or
:class:`~dispersim.envelope.derived.Fallback`. A fallback either substitutes
a documented default or omits the dependent constructions; no exception is
raised and NaN never reaches a segment.
"""

from __future__ import annotations

import logging
from math import cos, radians, sin, tan

from dispersim.config import (
    ARC_POINTS,
    CENTERLINE_STYLE,
    DISPERSION_STYLE,
    EXPLOSIVE_SPLASH_ANGLE,
    EXPLOSIVE_STYLE,
    LINE_STEPS,
    OUTER_ARC_STYLE,
    RANGE_ARC_STYLE,
    SAFETY_STYLE,
)
from dispersim.geo import GeoPoint, arc_points, destination_point, line_points, normalize_bearing
from dispersim.unit import Degree, Meter

from .derived import Computed, Derived, Fallback, GuardKind, asin_deg, is_zero
from .labels import Construction
from .params import FiringParameters
from .segment import ArcSpec, Envelope, Segment, Style

logger = logging.getLogger(__name__)

_CENTERLINE = Style.from_tuple(CENTERLINE_STYLE)
_DISPERSION = Style.from_tuple(DISPERSION_STYLE)
_SAFETY = Style.from_tuple(SAFETY_STYLE)
_EXPLOSIVE = Style.from_tuple(EXPLOSIVE_STYLE)
_RANGE_ARC = Style.from_tuple(RANGE_ARC_STYLE)
_OUTER_ARC = Style.from_tuple(OUTER_ARC_STYLE)


# ------------------------------------------------------------------ guarded terms
def length_d(x: float, w: float, p: float) -> Derived:
    """Length of D/E: ``W / sin P``, falling back to X; clamped at zero."""
    if p == 0 or w <= 0:
        return Fallback(x, GuardKind.DEGENERATE_INPUT, "angle P = 0 or W <= 0, using X")
    sin_p = sin(radians(p))
    if is_zero(sin_p):
        return Fallback(x, GuardKind.NUMERIC_OVERFLOW, "sin P = 0, using X")
    value = w / sin_p
    if value <= 0:
        return Fallback(0.0, GuardKind.DEGENERATE_INPUT, f"length {value:.1f} <= 0 clamped, D/E omitted")
    return Computed(value)


def angle_b_prime(x: float, w: float, a: float, p: float) -> Derived:
    """Auxiliary angle B' = ``asin(W / X)``, falling back to P.

    The formula is only used when A > 0; otherwise P is substituted.
    """
    if x <= 0 or a <= 0:
        return Fallback(p, GuardKind.DEGENERATE_INPUT, "X <= 0 or A <= 0, using P")
    value = asin_deg(w / x)
    if value is None:
        return Fallback(p, GuardKind.DOMAIN_GUARD_SKIP, f"W/X = {w / x:.4f} outside [-1, 1], using P")
    return Computed(value)


def length_f(x: float, w: float, p: float, b_prime: float) -> Derived:
    """Length of F/G: ``X·cos B' - W / tan P``; omitted when tan P = 0."""
    tan_p = tan(radians(p))
    if is_zero(tan_p):
        return Fallback(None, GuardKind.NUMERIC_OVERFLOW, "tan P = 0, F/G omitted")
    return Computed(x * cos(radians(b_prime)) - w / tan_p)


def range_arc_offset(x: float, w: float) -> Derived:
    """Widening of the range arc beyond B/C: ``asin(W / X)``, or 0."""
    if x <= 0 or w <= 0:
        return Fallback(0.0, GuardKind.DEGENERATE_INPUT, "X <= 0 or W <= 0, arc on B/C bearings")
    value = asin_deg(w / x)
    if value is None:
        return Fallback(0.0, GuardKind.DOMAIN_GUARD_SKIP, f"W/X = {w / x:.4f} > 1, arc on B/C bearings")
    return Computed(value)


def length_j(len_d: float, a: float, p: float, splash: float) -> Derived:
    """Length of J/K, falling back to the length of D; clamped at zero."""
    sin_p = sin(radians(p))
    tan_p = tan(radians(p))
    tan_s = tan(radians(splash))
    if is_zero(sin_p) or is_zero(tan_p) or is_zero(tan_s):
        return Fallback(len_d, GuardKind.NUMERIC_OVERFLOW, "sin P, tan P or tan 25 = 0, using length of D")
    value = len_d + a / sin_p - a / tan_p - a / tan_s
    if value <= 0:
        return Fallback(0.0, GuardKind.DEGENERATE_INPUT, f"length {value:.1f} <= 0 clamped, J/K omitted")
    return Computed(value)


def angle_l(x: float, a: float, w: float) -> Derived:
    """Angle L = ``asin((A + W) / X)``.

    The divisor is the range X, not the outer radius X + B.
    """
    value = asin_deg((a + w) / x)
    if value is None:
        return Fallback(None, GuardKind.DOMAIN_GUARD_SKIP, f"(A+W)/X = {(a + w) / x:.4f} > 1, L/M omitted")
    return Computed(value)


def length_l(x: float, b: float, p: float, splash: float, len_h: float, len_j: float, l_deg: float) -> Derived:
    """Length of L/M, clamped at zero."""
    value = (
        (x + b) * cos(radians(l_deg))
        - len_j * cos(radians(p))
        - len_h * cos(radians(p + splash))
    )
    if value <= 0:
        return Fallback(0.0, GuardKind.DEGENERATE_INPUT, f"length {value:.1f} <= 0 clamped, L/M omitted")
    return Computed(value)


def outer_arc_offset(radius: float, a: float, w: float) -> Derived:
    """Widening of the outer arc: ``asin((A + W) / (X + B))``, or 0."""
    value = asin_deg((a + w) / radius)
    if value is None:
        return Fallback(0.0, GuardKind.DOMAIN_GUARD_SKIP, "(A+W)/(X+B) > 1, no widening")
    return Computed(value)


# ------------------------------------------------------------------ engine
class DispersionGeometryEngine:
    """Stateless envelope builder.

    Args:
        line_steps: Intervals per line (``line_steps + 1`` points).
        arc_points: Samples per arc.

    Example:
        >>> engine = DispersionGeometryEngine()
        >>> envelope = engine.compute(FiringParameters.from_values())
        >>> len(envelope["A"].points)
        51
    """

    def __init__(self, line_steps: int = LINE_STEPS, arc_points: int = ARC_POINTS):
        if line_steps < 1:
            raise ValueError(f"line_steps must be >= 1, got {line_steps}")
        if arc_points < 2:
            raise ValueError(f"arc_points must be >= 2, got {arc_points}")
        self.line_steps = line_steps
        self.arc_points = arc_points

    def compute(self, params: FiringParameters) -> Envelope:
        """Build every enabled construction for ``params``."""
        envelope = Envelope(params)
        x = float(params.range_distance)
        if x <= 0:
            logger.debug("range distance %.1f m <= 0, nothing to draw", x)
            return envelope

        origin = params.origin
        fb = params.firing_bearing.to(Degree)
        disp = params.dispersion_angle.to(Degree)
        p = params.angle_p.to(Degree)
        w = float(params.distance_w)
        a = float(params.distance_a)

        bearing_b = fb + disp
        bearing_c = fb - disp
        bearing_d = fb + disp + p
        bearing_e = fb - disp - p

        self._line(envelope, Construction.A, origin, fb, x, _CENTERLINE)
        self._line(envelope, Construction.B, origin, bearing_b, x, _DISPERSION)
        self._line(envelope, Construction.C, origin, bearing_c, x, _DISPERSION)

        len_d = self._record(envelope, "length_d", length_d(x, w, p))
        end_d = self._line(envelope, Construction.D, origin, bearing_d, len_d.value, _SAFETY)
        end_e = self._line(envelope, Construction.E, origin, bearing_e, len_d.value, _SAFETY)

        b_prime = self._record(envelope, "angle_b_prime", angle_b_prime(x, w, a, p))
        len_f = self._record(envelope, "length_f", length_f(x, w, p, b_prime.value))
        if end_d is not None:
            self._line(envelope, Construction.F, end_d, bearing_b, len_f.value, _SAFETY)
        if end_e is not None:
            self._line(envelope, Construction.G, end_e, bearing_c, len_f.value, _SAFETY)

        offset = self._record(envelope, "arc_offset", range_arc_offset(x, w)).value
        self._arc(envelope, Construction.ARC, origin, x, bearing_c - offset, bearing_b + offset, _RANGE_ARC)

        if params.is_explosive and a > 0:
            self._explosive_chain(envelope, len_d.value)
        else:
            logger.debug(
                "munition %s, distance A %.1f m: explosive constructions omitted",
                params.munition.value,
                a,
            )
        return envelope

    def _explosive_chain(self, envelope: Envelope, len_d: float):
        params = envelope.params
        origin = params.origin
        fb = params.firing_bearing.to(Degree)
        disp = params.dispersion_angle.to(Degree)
        p = params.angle_p.to(Degree)
        x = float(params.range_distance)
        w = float(params.distance_w)
        a = float(params.distance_a)
        b = float(params.distance_b)
        splash = EXPLOSIVE_SPLASH_ANGLE.to(Degree)

        len_h = self._record(envelope, "length_h", Computed(a / sin(radians(splash)))).value
        end_h = self._line(envelope, Construction.H, origin, fb + splash + disp + p, len_h, _EXPLOSIVE)
        end_i = self._line(envelope, Construction.I, origin, fb - splash - disp - p, len_h, _EXPLOSIVE)

        len_j = self._record(envelope, "length_j", length_j(len_d, a, p, splash)).value
        end_j = end_k = None
        if end_h is not None:
            end_j = self._line(envelope, Construction.J, end_h, fb + disp + p, len_j, _EXPLOSIVE)
        if end_i is not None:
            end_k = self._line(envelope, Construction.K, end_i, fb - disp - p, len_j, _EXPLOSIVE)

        l_angle = self._record(envelope, "angle_l", angle_l(x, a, w))
        if l_angle.value is not None:
            len_l = self._record(
                envelope, "length_l", length_l(x, b, p, splash, len_h, len_j, l_angle.value)
            ).value
            if end_j is not None:
                self._line(envelope, Construction.L, end_j, fb + disp, len_l, _EXPLOSIVE)
            if end_k is not None:
                self._line(envelope, Construction.M, end_k, fb - disp, len_l, _EXPLOSIVE)

        radius = x + b
        if radius <= 0:
            self._record(
                envelope,
                "circle_offset",
                Fallback(None, GuardKind.DEGENERATE_INPUT, "X + B <= 0, outer arc omitted"),
            )
            return
        half_span = disp + self._record(envelope, "circle_offset", outer_arc_offset(radius, a, w)).value
        self._arc(envelope, Construction.CIRCLE, origin, radius, fb - half_span, fb + half_span, _OUTER_ARC)

    @staticmethod
    def _record(envelope: Envelope, name: str, value: Derived) -> Derived:
        if value.is_fallback:
            logger.debug("%s: %s (%s)", name, value.reason, value.guard.name)
        envelope.derived[name] = value
        return value

    def _line(
        self,
        envelope: Envelope,
        label: Construction,
        start: GeoPoint,
        bearing: float,
        length: float | None,
        style: Style,
    ) -> GeoPoint | None:
        """Add a line and return its end point, or ``None`` if it is omitted."""
        if length is None or length <= 0:
            logger.debug("line %s omitted (length %s)", label, length)
            return None
        end = destination_point(start, bearing, length)
        envelope.segments[label] = Segment(
            label=label,
            points=tuple(line_points(start, end, self.line_steps)),
            style=style,
            start=start,
            bearing=normalize_bearing(bearing),
            length=Meter(length),
        )
        return end

    def _arc(
        self,
        envelope: Envelope,
        label: Construction,
        center: GeoPoint,
        radius: float,
        start_bearing: float,
        end_bearing: float,
        style: Style,
    ):
        spec = ArcSpec(
            center=center,
            radius=Meter(radius),
            start_bearing=normalize_bearing(start_bearing),
            end_bearing=normalize_bearing(end_bearing),
        )
        envelope.segments[label] = Segment(
            label=label,
            points=tuple(arc_points(center, radius, start_bearing, end_bearing, self.arc_points)),
            style=style,
            arc=spec,
        )


def compute_envelope(params: FiringParameters) -> Envelope:
    """Compute the envelope with the default tessellation density."""
    return DispersionGeometryEngine().compute(params)
