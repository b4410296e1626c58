"""Ballistic dispersion envelope: inputs, derivation and output types.

Components:
    FiringParameters: Input snapshot (firing point, bearing, angles, distances)
    DispersionGeometryEngine / compute_envelope: Stateless derivation
    Envelope: Mapping from Construction label to Segment
    Construction: Closed set of labels (A..M, arc, circle)
    Computed / Fallback: Guarded intermediate values

Example:
    >>> from dispersim.envelope import Construction, FiringParameters, compute_envelope
    >>> envelope = compute_envelope(FiringParameters.from_values(range_distance=0))
    >>> len(envelope)
    0
    >>> envelope = compute_envelope(FiringParameters.from_values(munition="non-explosive"))
    >>> Construction.H in envelope
    False
"""

from .derived import Computed, Derived, Fallback, GuardKind
from .engine import DispersionGeometryEngine, compute_envelope
from .labels import BASE_CONSTRUCTIONS, EXPLOSIVE_CONSTRUCTIONS, Construction
from .params import FiringParameters, ImpactType, MunitionType
from .segment import ArcSpec, Envelope, Segment, Style

__all__ = [
    "ArcSpec",
    "BASE_CONSTRUCTIONS",
    "Computed",
    "Construction",
    "Derived",
    "DispersionGeometryEngine",
    "EXPLOSIVE_CONSTRUCTIONS",
    "Envelope",
    "Fallback",
    "FiringParameters",
    "GuardKind",
    "ImpactType",
    "MunitionType",
    "Segment",
    "Style",
    "compute_envelope",
]
