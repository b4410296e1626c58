"""Type-safe units for the envelope geometry.

Modules:
    - unit_base: family bookkeeping shared by all units
    - unit_float: float-backed units stored in SI
    - unit_angle: Radian, Degree (bearings, dispersion angle, angle P)
    - unit_distance: Meter, Kilometer (range X, distances W, A, B)

Unit Families:
    - Angle Family: Radian (root), Degree
    - Distance Family: Meter (root), Kilometer

Example:
    >>> from dispersim.unit import Degree, Meter
    >>> firing_bearing = Degree(0)
    >>> dispersion = Degree(5)
    >>> round((firing_bearing - dispersion).normalized().to(Degree), 6)
    355.0
    >>> Meter(5474) + Meter(615)
    6089 m
"""

from .unit_angle import Angle, Degree, Radian
from .unit_base import Unit
from .unit_distance import Kilometer, Length, Meter
from .unit_float import UnitFloat

__all__ = [
    "Unit",
    "UnitFloat",
    "Radian",
    "Degree",
    "Angle",
    "Meter",
    "Kilometer",
    "Length",
]
