"""Real scalars.

``Real`` is a ``float`` that keeps its type through arithmetic and carries
the scalar capability set (``conj``, ``abs_square``, ``sqrt``, ``sin``,
``cos``) so real and complex values are interchangeable in generic code.
"""

from __future__ import annotations

import math


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide following IEEE-754 instead of raising ``ZeroDivisionError``."""
    if denominator != 0.0:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


class Real(float):
    """Double-precision real number with the scalar capability set."""

    __slots__ = ()

    @classmethod
    def zero(cls) -> Real:
        return cls(0.0)

    @classmethod
    def one(cls) -> Real:
        return cls(1.0)

    def __repr__(self) -> str:
        return f"Real({float(self)!r})"

    def __neg__(self) -> Real:
        return Real(-float(self))

    def __abs__(self) -> Real:
        return Real(math.fabs(self))

    def abs(self) -> Real:
        return abs(self)

    def __add__(self, other):
        if isinstance(other, (int, float)):
            return Real(float(self) + float(other))
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, (int, float)):
            return Real(float(self) - float(other))
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, (int, float)):
            return Real(float(other) - float(self))
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Real(float(self) * float(other))
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, (int, float)):
            return Real(ieee_divide(float(self), float(other)))
        return NotImplemented

    def __rtruediv__(self, other):
        if isinstance(other, (int, float)):
            return Real(ieee_divide(float(other), float(self)))
        return NotImplemented

    def abs_square(self) -> float:
        return float(self) * float(self)

    def conj(self) -> Real:
        return self

    def sqrt(self) -> Real:
        # IEEE semantics: negative input yields NaN rather than raising
        if self < 0:
            return Real(math.nan)
        return Real(math.sqrt(self))

    def sin(self) -> Real:
        return Real(math.sin(self))

    def cos(self) -> Real:
        return Real(math.cos(self))
