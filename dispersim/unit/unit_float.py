"""Float-backed units with automatic SI conversion.

:class:`UnitFloat` is a ``float`` whose value is always stored in SI (radians
for angles, metres for lengths). Constructors take the value in the unit's own
scale, so ``Degree(90)`` is stored as ``pi / 2`` and ``Kilometer(5.474)`` as
``5474.0``.

Example:
    >>> from dispersim.unit import Degree, Kilometer, Meter
    >>> dispersion = Degree(5)
    >>> round(dispersion.to(Degree), 9)
    5.0
    >>> float(Kilometer(5.474))
    5474.0
    >>> Kilometer(1) + Meter(225)
    1.225 km
"""

from __future__ import annotations

from typing import ClassVar

from .unit_base import Unit

Number = int | float


class UnitFloat(float, Unit):
    """Type-safe unit value stored in SI.

    Operations are restricted to the same unit family; plain numbers are
    treated as SI values for comparisons.

    Attributes:
        SCALE_TO_SI (ClassVar[float]): Conversion factor to SI units.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root unit.
    """

    SCALE_TO_SI: ClassVar[float] = 1.0
    IS_FAMILY_ROOT: ClassVar[bool] = True

    def __new__(cls, value: Number):
        si_val = float(value) * cls.SCALE_TO_SI
        return float.__new__(cls, si_val)

    @classmethod
    def from_si(cls, si_value: float) -> UnitFloat:
        """Create an instance from a value that is already in SI units."""
        return float.__new__(cls, si_value)

    def to(self, unit_type: type[UnitFloat]) -> float:
        """Return the value expressed in ``unit_type``'s scale as a plain float.

        Raises:
            TypeError: If ``unit_type`` is from another family.
        """
        self._check_same_root(unit_type)
        return float(self) / unit_type.SCALE_TO_SI

    def as_unit(self, unit_type: type[UnitFloat]) -> UnitFloat:
        """Convert to another unit of the same family, keeping the type."""
        self._check_same_root(unit_type)
        return unit_type.from_si(float(self))

    # -------------------------------- Arithmetic Operations --------------------------------
    def __add__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(self) + float(other))

    def __radd__(self, other: UnitFloat) -> UnitFloat:
        return self.__add__(other)

    def __sub__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(self) - float(other))

    def __rsub__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(other) - float(self))

    def __neg__(self) -> UnitFloat:
        return type(self).from_si(-float(self))

    def __mul__(self, k: Number) -> UnitFloat:
        if isinstance(k, Unit):
            raise TypeError
        if isinstance(k, Number):
            return type(self).from_si(float(self) * float(k))
        raise TypeError

    def __rmul__(self, k: Number) -> UnitFloat:
        return self.__mul__(k)

    def __truediv__(self, k: Number) -> UnitFloat:
        if isinstance(k, Unit):
            raise TypeError
        if isinstance(k, Number):
            return type(self).from_si(float(self) / float(k))
        raise TypeError

    # -------------------------------- Comparisons --------------------------------
    def __lt__(self, other: UnitFloat | Number) -> bool:
        self._check_same_root(type(other))
        return float(self) < float(other)

    def __le__(self, other: UnitFloat | Number) -> bool:
        self._check_same_root(type(other))
        return float(self) <= float(other)

    def __gt__(self, other: UnitFloat | Number) -> bool:
        self._check_same_root(type(other))
        return float(self) > float(other)

    def __ge__(self, other: UnitFloat | Number) -> bool:
        self._check_same_root(type(other))
        return float(self) >= float(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (int, float)):
            return NotImplemented
        self._check_same_root(type(other))
        return float(self) == float(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, (int, float)):
            return NotImplemented
        self._check_same_root(type(other))
        return float(self) != float(other)

    __hash__ = float.__hash__

    def __str__(self) -> str:
        """Value and symbol in the unit's own scale, e.g. ``"24.0 °"``."""
        return f"{self.to(type(self))} {type(self).SYMBOL}".strip()

    def __repr__(self) -> str:
        return f"{self.to(type(self)):g} {type(self).SYMBOL}"
