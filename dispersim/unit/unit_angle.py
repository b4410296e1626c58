"""Angular units for bearings and dispersion angles.

Angles are stored in radians (the SI unit) and can be built from and read
back in degrees, which is how every firing parameter is entered.

Classes:
    Radian: Root angular unit.
    Degree: Degrees, converted to radians on construction.

Type Aliases:
    Angle: Union of the angular units.

Example:
    >>> bearing = Degree(350) + Degree(20)
    >>> round(bearing.to(Degree), 6)
    370.0
    >>> round(bearing.normalized().to(Degree), 6)
    10.0
"""

from __future__ import annotations

from math import pi, tau

from .unit_float import UnitFloat


class Radian(UnitFloat):
    """Angular unit: radian (SI base unit for angles)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "rad"

    def normalized(self) -> Radian:
        """Return the same direction wrapped into one turn, ``[0, 2π)``.

        Bearing sums such as ``firing bearing - dispersion`` can leave the
        compass range; this keeps the unit type and wraps the value.
        """
        wrapped = float(self) % tau
        # -1e-17 % tau rounds to tau
        if wrapped >= tau:
            wrapped = 0.0
        return type(self).from_si(wrapped)


class Degree(Radian):
    """Angular unit: degree, 1/360 of a full turn.

    Example:
        >>> Degree(90).to(Radian)
        1.5707963267948966
    """

    SCALE_TO_SI = pi / 180
    SYMBOL = "°"


Angle = Radian | Degree
