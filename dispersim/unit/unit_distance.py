"""Length units for ranges, offsets and arc radii.

Classes:
    Meter: Root length unit.
    Kilometer: 1000 metres.

Type Aliases:
    Length: Union of the length units.

Example:
    >>> firing_range = Meter(5474)
    >>> firing_range.to(Kilometer)
    5.474
"""

from __future__ import annotations

from .unit_float import UnitFloat


class Meter(UnitFloat):
    """Length unit: metre (SI base unit for length).

    All envelope distances (X, W, A, B) and arc radii are metres.
    """

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m"


class Kilometer(Meter):
    """Length unit: kilometre."""

    SCALE_TO_SI = 1000.0
    SYMBOL = "km"


Length = Meter | Kilometer
