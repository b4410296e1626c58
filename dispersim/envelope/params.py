"""Firing parameters consumed by the envelope engine."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum
from math import isfinite

from dispersim.config import (
    DEFAULT_ANGLE_P,
    DEFAULT_DISPERSION_ANGLE,
    DEFAULT_DISTANCE_A,
    DEFAULT_DISTANCE_B,
    DEFAULT_DISTANCE_W,
    DEFAULT_FIRING_BEARING,
    DEFAULT_LATITUDE,
    DEFAULT_LONGITUDE,
    DEFAULT_MAX_HEIGHT,
    DEFAULT_RANGE_DISTANCE,
)
from dispersim.geo import GeoPoint
from dispersim.unit import Angle, Degree, Length, Meter


class MunitionType(str, Enum):
    EXPLOSIVE = "explosive"
    NON_EXPLOSIVE = "non-explosive"


class ImpactType(str, Enum):
    """Impact surface. Reported only, it does not change the geometry."""

    EARTH = "earth"
    METAL = "metal"


@dataclass(frozen=True)
class FiringParameters:
    """Complete, validated input snapshot for one envelope computation.

    Angles are unit values (use :class:`~dispersim.unit.Degree`), distances
    are metres. A distance <= 0 disables the constructions that depend on it;
    it is not an error.

    Attributes:
        origin: Firing point.
        firing_bearing: Bearing of the centerline A.
        dispersion_angle: Half-angle between A and the bounds B/C.
        range_distance: Distance X, length of A/B/C and radius of the range arc.
        angle_p: Angle P between the bounds and the safety lines D/E.
        distance_w: Distance W, lateral safety offset.
        distance_a: Distance A, explosive splash offset.
        distance_b: Distance B, extra radius of the outer arc.
        munition: Explosive or non-explosive.
        impact: Impact surface.
        max_height: Maximum trajectory height.

    Raises:
        ValueError: If any angle or distance is not finite.
    """

    origin: GeoPoint
    firing_bearing: Angle = DEFAULT_FIRING_BEARING
    dispersion_angle: Angle = DEFAULT_DISPERSION_ANGLE
    range_distance: Length = DEFAULT_RANGE_DISTANCE
    angle_p: Angle = DEFAULT_ANGLE_P
    distance_w: Length = DEFAULT_DISTANCE_W
    distance_a: Length = DEFAULT_DISTANCE_A
    distance_b: Length = DEFAULT_DISTANCE_B
    munition: MunitionType = MunitionType.EXPLOSIVE
    impact: ImpactType = ImpactType.EARTH
    max_height: Length = DEFAULT_MAX_HEIGHT

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, (int, float)) and not isfinite(value):
                raise ValueError(f"{f.name} must be finite, got {value!r}")
        for coord in (self.origin.latitude, self.origin.longitude):
            if not isfinite(coord):
                raise ValueError(f"origin must be finite, got {self.origin}")
        # accept the plain string values of the enums
        object.__setattr__(self, "munition", MunitionType(self.munition))
        object.__setattr__(self, "impact", ImpactType(self.impact))

    @classmethod
    def from_values(
        cls,
        latitude: float = DEFAULT_LATITUDE,
        longitude: float = DEFAULT_LONGITUDE,
        *,
        firing_bearing: float = DEFAULT_FIRING_BEARING.to(Degree),
        dispersion_angle: float = DEFAULT_DISPERSION_ANGLE.to(Degree),
        range_distance: float = float(DEFAULT_RANGE_DISTANCE),
        angle_p: float = DEFAULT_ANGLE_P.to(Degree),
        distance_w: float = float(DEFAULT_DISTANCE_W),
        distance_a: float = float(DEFAULT_DISTANCE_A),
        distance_b: float = float(DEFAULT_DISTANCE_B),
        munition: MunitionType | str = MunitionType.EXPLOSIVE,
        impact: ImpactType | str = ImpactType.EARTH,
        max_height: float = float(DEFAULT_MAX_HEIGHT),
    ) -> FiringParameters:
        """Build parameters from plain numbers: degrees and metres.

        Defaults reproduce the parameter form's initial values.

        Example:
            >>> params = FiringParameters.from_values(firing_bearing=45, munition="non-explosive")
            >>> params.munition
            <MunitionType.NON_EXPLOSIVE: 'non-explosive'>
        """
        return cls(
            origin=GeoPoint.from_deg(latitude, longitude),
            firing_bearing=Degree(firing_bearing),
            dispersion_angle=Degree(dispersion_angle),
            range_distance=Meter(range_distance),
            angle_p=Degree(angle_p),
            distance_w=Meter(distance_w),
            distance_a=Meter(distance_a),
            distance_b=Meter(distance_b),
            munition=MunitionType(munition),
            impact=ImpactType(impact),
            max_height=Meter(max_height),
        )

    def moved_to(self, origin: GeoPoint) -> FiringParameters:
        """Same parameters with a new firing point."""
        return replace(self, origin=origin)

    @property
    def is_explosive(self) -> bool:
        return self.munition is MunitionType.EXPLOSIVE
