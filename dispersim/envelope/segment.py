"""Output types: tessellated segments and the envelope mapping."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

import pandas as pd

from dispersim.geo import GeoPoint
from dispersim.unit import Degree, Length

from .derived import Derived
from .labels import Construction
from .params import FiringParameters


@dataclass(frozen=True)
class Style:
    """Rendering hints, in Leaflet terms."""

    color: str
    weight: int
    opacity: float
    dash_array: str

    @classmethod
    def from_tuple(cls, values: tuple[str, int, float, str]) -> Style:
        return cls(*values)


@dataclass(frozen=True)
class ArcSpec:
    """Circular arc swept clockwise from ``start_bearing`` to ``end_bearing``.

    When the end bearing is below the start after normalization the sweep
    passes through north; the short way is never inferred.
    """

    center: GeoPoint
    radius: Length
    start_bearing: Degree
    end_bearing: Degree


@dataclass(frozen=True)
class Segment:
    """One tessellated construction.

    Lines carry ``start``, ``bearing`` and ``length``; arcs carry ``arc``.
    """

    label: Construction
    points: tuple[GeoPoint, ...]
    style: Style
    start: GeoPoint | None = None
    bearing: Degree | None = None
    length: Length | None = None
    arc: ArcSpec | None = None

    @property
    def is_arc(self) -> bool:
        return self.arc is not None

    @property
    def end(self) -> GeoPoint:
        return self.points[-1]

    def coordinates(self) -> list[list[float]]:
        """``[[lat, lon], ...]`` in degrees."""
        return [[p.lat_deg, p.lon_deg] for p in self.points]


@dataclass(frozen=True)
class Envelope(Mapping):
    """Constructions produced by one computation, keyed by label.

    Omitted constructions are simply absent. ``derived`` holds the guarded
    intermediate values by name.
    """

    params: FiringParameters
    segments: dict[Construction, Segment] = field(default_factory=dict)
    derived: dict[str, Derived] = field(default_factory=dict)

    def __getitem__(self, label: Construction | str) -> Segment:
        try:
            key = Construction(label)
        except ValueError:
            raise KeyError(label) from None
        return self.segments[key]

    def __iter__(self) -> Iterator[Construction]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    def __contains__(self, label: object) -> bool:
        try:
            return Construction(label) in self.segments
        except ValueError:
            return False

    def summary(self) -> list[dict[str, Any]]:
        """One row per drawn construction."""
        rows = []
        for label, seg in self.segments.items():
            row = {"label": label.value, "kind": "arc" if seg.is_arc else "line", "points": len(seg.points)}
            if seg.is_arc:
                row["radius_m"] = float(seg.arc.radius)
                row["start_bearing_deg"] = seg.arc.start_bearing.to(Degree)
                row["end_bearing_deg"] = seg.arc.end_bearing.to(Degree)
            else:
                row["bearing_deg"] = seg.bearing.to(Degree)
                row["length_m"] = float(seg.length)
            row["end_lat"], row["end_lon"] = seg.end.to_deg()
            rows.append(row)
        return rows

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation of the parameters, segments and derived values."""
        p = self.params
        return {
            "params": {
                "latitude": p.origin.lat_deg,
                "longitude": p.origin.lon_deg,
                "firing_bearing": p.firing_bearing.to(Degree),
                "dispersion_angle": p.dispersion_angle.to(Degree),
                "range_distance": float(p.range_distance),
                "angle_p": p.angle_p.to(Degree),
                "distance_w": float(p.distance_w),
                "distance_a": float(p.distance_a),
                "distance_b": float(p.distance_b),
                "munition": p.munition.value,
                "impact": p.impact.value,
                "max_height": float(p.max_height),
            },
            "constructions": {
                label.value: {**row, "coordinates": self.segments[label].coordinates()}
                for label, row in zip(self.segments, self.summary())
            },
            "derived": {
                name: {
                    "value": d.value,
                    "fallback": d.is_fallback,
                    "guard": d.guard.name if d.is_fallback else None,
                    "reason": d.reason if d.is_fallback else None,
                }
                for name, d in self.derived.items()
            },
        }

    def to_frame(self) -> pd.DataFrame:
        """Point table: one row per tessellated point, in drawing order."""
        records = [
            {"label": label.value, "seq": i, "latitude": pt.lat_deg, "longitude": pt.lon_deg}
            for label, seg in self.segments.items()
            for i, pt in enumerate(seg.points)
        ]
        return pd.DataFrame.from_records(records, columns=["label", "seq", "latitude", "longitude"])
