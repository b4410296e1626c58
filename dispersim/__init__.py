"""Ballistic dispersion envelope geometry for map overlays.

dispersim computes the safety envelope of a firing: from a firing point, a
firing bearing and a handful of angles and distances it derives fourteen
line constructions (A..M) and two arcs on a spherical Earth, tessellated into
polylines that any map renderer can draw.

Package Layout:
    Measurement Framework (dispersim.unit):
        • Radian/Degree and Meter/Kilometer, stored in SI, family-checked

    Geographic Systems (dispersim.geo):
        • GeoPoint: immutable point with typed Latitude/Longitude
        • destination_point: direct geodesic problem on the model sphere
        • line_points / arc_points: polyline tessellation

    Envelope Derivation (dispersim.envelope):
        • FiringParameters: validated input snapshot
        • DispersionGeometryEngine / compute_envelope: stateless derivation
        • Envelope: label -> Segment mapping, with Computed/Fallback diagnostics

    Rendering (dispersim.render):
        • FoliumOverlayRenderer: interactive HTML map
        • MatplotlibOverlayRenderer: static figure

    Reporting (dispersim.report, dispersim.cli):
        • rich tables and the ``dispersim`` command

Usage:
    >>> from dispersim import FiringParameters, compute_envelope
    >>> params = FiringParameters.from_values(-23.5505, -46.6333, firing_bearing=0)
    >>> envelope = compute_envelope(params)
    >>> sorted(label.value for label in envelope)[:3]
    ['A', 'B', 'C']

Every computation is a pure function of its FiringParameters; a new envelope
replaces the previous one wholesale (see OverlayRenderer.replace_all).
"""

from dispersim.envelope import (
    Construction,
    DispersionGeometryEngine,
    Envelope,
    FiringParameters,
    MunitionType,
    compute_envelope,
)
from dispersim.geo import GeoPoint, destination_point

__version__ = "0.1.0"

__all__ = [
    "Construction",
    "DispersionGeometryEngine",
    "Envelope",
    "FiringParameters",
    "GeoPoint",
    "MunitionType",
    "compute_envelope",
    "destination_point",
]
