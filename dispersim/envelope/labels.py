"""Construction labels of the dispersion envelope."""

from enum import Enum


class Construction(str, Enum):
    """Closed set of constructions.

    Values are the stable identifiers renderers key their handles on.
    """

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    ARC = "arc"
    H = "H"
    I = "I"  # noqa: E741
    J = "J"
    K = "K"
    L = "L"
    M = "M"
    CIRCLE = "circle"

    @property
    def is_arc(self) -> bool:
        return self in (Construction.ARC, Construction.CIRCLE)

    def __str__(self) -> str:
        return self.value


BASE_CONSTRUCTIONS = (
    Construction.A,
    Construction.B,
    Construction.C,
    Construction.D,
    Construction.E,
    Construction.F,
    Construction.G,
    Construction.ARC,
)
"""Constructions drawn whenever the range distance is positive."""

EXPLOSIVE_CONSTRUCTIONS = (
    Construction.H,
    Construction.I,
    Construction.J,
    Construction.K,
    Construction.L,
    Construction.M,
    Construction.CIRCLE,
)
"""Constructions that only exist for explosive munition with distance A > 0."""
