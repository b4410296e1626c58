"""Guarded intermediate values of the envelope derivation.

Several quantities (the length of lines D/E, the auxiliary angle B', ...) are
only defined for part of the input space. Each is reported as either
:class:`Computed` or :class:`Fallback`, so a caller can tell a value obtained
from its formula apart from a default substituted by a guard.

Example:
    >>> value = Fallback(24.0, GuardKind.DEGENERATE_INPUT, "distance A <= 0")
    >>> value.value, value.is_fallback
    (24.0, True)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from math import asin, degrees, isfinite

from dispersim.config import TRIG_EPSILON


class GuardKind(Enum):
    """Why a guard replaced a formula result."""

    DOMAIN_GUARD_SKIP = auto()
    """An inverse trigonometric argument fell outside [-1, 1]."""
    DEGENERATE_INPUT = auto()
    """A distance the formula depends on is zero or negative."""
    NUMERIC_OVERFLOW = auto()
    """A divisor (sin or tan) is numerically zero."""


@dataclass(frozen=True)
class Computed:
    """Value obtained from its formula."""

    value: float

    @property
    def is_fallback(self) -> bool:
        return False


@dataclass(frozen=True)
class Fallback:
    """Value substituted by a guard.

    Attributes:
        value: Substitute value, or ``None`` when the dependent constructions
            are omitted instead.
        guard: Which guard fired.
        reason: Human-readable detail.
    """

    value: float | None
    guard: GuardKind
    reason: str

    @property
    def is_fallback(self) -> bool:
        return True


Derived = Computed | Fallback


def is_zero(x: float) -> bool:
    """True when ``x`` is too close to zero to divide by."""
    return abs(x) < TRIG_EPSILON


def asin_deg(ratio: float) -> float | None:
    """``asin(ratio)`` in degrees, or ``None`` outside the domain."""
    if not isfinite(ratio) or ratio < -1.0 or ratio > 1.0:
        return None
    return degrees(asin(ratio))
