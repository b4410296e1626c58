"""Unit family foundation for the envelope geometry.

Every physical quantity that flows through the dispersion engine (bearings,
angular offsets, ranges and offsets in metres) is a subclass of :class:`Unit`.
Classes are grouped in families: a family is identified by its ROOT class, the
first ancestor flagged with ``IS_FAMILY_ROOT``. Arithmetic and comparison are
only allowed inside one family, so a bearing can never be added to a range by
accident.

Example:
    >>> class Length(Unit):
    ...     IS_FAMILY_ROOT = True
    >>> class Meter(Length):
    ...     pass
    >>> Meter.ROOT is Length
    True
"""

from __future__ import annotations

from typing import ClassVar

Number = int | float


class Unit:
    """Base class for all unit types.

    Concrete units inherit from :class:`~dispersim.unit.unit_float.UnitFloat`;
    this class only carries the family bookkeeping.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class defining the unit family.
        SYMBOL (ClassVar[str]): Unit symbol for display purposes.
        IS_FAMILY_ROOT (ClassVar[bool]): Marks the root unit of a family.
    """

    __slots__ = ()
    __array_priority__ = 1000

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        """Resolve the ROOT class of a new subclass from its MRO."""
        super().__init_subclass__(**kwargs)
        if "ROOT" in cls.__dict__ and cls.ROOT is not None:
            return

        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            cls.ROOT = cls
            return

        for base in cls.mro()[1:]:
            if base.__dict__.get("IS_FAMILY_ROOT", False):
                cls.ROOT = base
                return

        cls.ROOT = cls

    @classmethod
    def _check_same_root(cls, unit_type: type):
        """Ensure ``unit_type`` belongs to the same family as ``cls``.

        Plain numbers (``int``/``float`` that are not units) are accepted and
        interpreted as SI values.

        Raises:
            TypeError: If ``unit_type`` is a unit of another family.
        """
        root = getattr(unit_type, "ROOT", None)
        if root is None:
            if issubclass(unit_type, (int, float)):
                return
            raise TypeError(f"{unit_type.__name__} is not a unit of the {cls.ROOT.__name__} family")
        if cls.ROOT is not root:
            raise TypeError(f"cannot mix {cls.ROOT.__name__} and {root.__name__} units")
