"""Complex numbers as immutable value objects.

``Complex`` mirrors Python's built-in ``complex`` closely enough to convert
freely (``complex(z)``, ``Complex.from_complex(c)``) while exposing the polar
helpers the transform kernels rely on: ``cis`` and ``from_polar`` are the
only places where twiddle factors touch ``cos``/``sin``.
"""

from __future__ import annotations

import cmath
import math
from dataclasses import dataclass

from fourierkit.core.algebra.scalar import ieee_divide
from fourierkit.core.pytree_utils import register_complex_pytree


def _promote(other):
    if isinstance(other, complex):
        return Complex.from_complex(other)
    return other


@dataclass(frozen=True)
class Complex:
    """Ordered pair ``(re, im)`` of double-precision reals.

    Attributes:
        re: Real part
        im: Imaginary part
    """

    re: float = 0.0
    im: float = 0.0

    # Constructors

    @classmethod
    def zero(cls) -> Complex:
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> Complex:
        return cls(1.0, 0.0)

    @classmethod
    def i(cls) -> Complex:
        return cls(0.0, 1.0)

    @classmethod
    def from_real(cls, re: float) -> Complex:
        return cls(float(re), 0.0)

    @classmethod
    def from_complex(cls, value: complex) -> Complex:
        value = complex(value)
        return cls(value.real, value.imag)

    @classmethod
    def from_polar(cls, r: float, phase: float) -> Complex:
        """Build ``r * e^(i*phase)``."""
        return cls(r * math.cos(phase), r * math.sin(phase))

    @classmethod
    def cis(cls, phase: float) -> Complex:
        """Unit phasor ``cos(phase) + i*sin(phase)``."""
        return cls(math.cos(phase), math.sin(phase))

    # Conversions

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    def __repr__(self) -> str:
        return f"Complex(re={self.re!r}, im={self.im!r})"

    # Arithmetic

    def __neg__(self) -> Complex:
        return Complex(-self.re, -self.im)

    def __add__(self, other):
        other = _promote(other)
        if isinstance(other, Complex):
            return Complex(self.re + other.re, self.im + other.im)
        if isinstance(other, (int, float)):
            return Complex(self.re + other, self.im)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        other = _promote(other)
        if isinstance(other, Complex):
            return Complex(self.re - other.re, self.im - other.im)
        if isinstance(other, (int, float)):
            return Complex(self.re - other, self.im)
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, complex):
            return Complex.from_complex(other) - self
        if isinstance(other, (int, float)):
            return Complex(other - self.re, -self.im)
        return NotImplemented

    def __mul__(self, other):
        other = _promote(other)
        if isinstance(other, Complex):
            return Complex(
                self.re * other.re - self.im * other.im,
                self.re * other.im + self.im * other.re,
            )
        if isinstance(other, (int, float)):
            return Complex(self.re * other, self.im * other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = _promote(other)
        if isinstance(other, Complex):
            denom = other.abs_square()
            return Complex(
                ieee_divide(self.re * other.re + self.im * other.im, denom),
                ieee_divide(self.im * other.re - self.re * other.im, denom),
            )
        if isinstance(other, (int, float)):
            return Complex(
                ieee_divide(self.re, float(other)), ieee_divide(self.im, float(other))
            )
        return NotImplemented

    def __rtruediv__(self, other):
        if isinstance(other, complex):
            return Complex.from_complex(other) / self
        if isinstance(other, (int, float)):
            denom = self.abs_square()
            return Complex(
                ieee_divide(self.re * other, denom),
                ieee_divide(-self.im * other, denom),
            )
        return NotImplemented

    # Scalar capabilities

    def __abs__(self) -> float:
        return self.abs()

    def abs(self) -> float:
        """Euclidean norm ``hypot(re, im)``."""
        return math.hypot(self.re, self.im)

    def abs_square(self) -> float:
        return self.re * self.re + self.im * self.im

    def conj(self) -> Complex:
        return Complex(self.re, -self.im)

    def phase(self) -> float:
        """Argument in ``(-pi, pi]``."""
        return math.atan2(self.im, self.re)

    def arg(self) -> float:
        return self.phase()

    def powi(self, n: int) -> Complex:
        return Complex.from_polar(self.abs() ** n, self.phase() * n)

    def powf(self, n: float) -> Complex:
        return Complex.from_polar(self.abs() ** n, self.phase() * n)

    def sqrt(self) -> Complex:
        return Complex.from_complex(cmath.sqrt(complex(self)))

    def sin(self) -> Complex:
        return Complex.from_complex(cmath.sin(complex(self)))

    def cos(self) -> Complex:
        return Complex.from_complex(cmath.cos(complex(self)))

    def is_close(self, other: Complex, tol: float = 1e-12) -> bool:
        """Component-wise comparison within an absolute tolerance."""
        return abs(self.re - other.re) <= tol and abs(self.im - other.im) <= tol


register_complex_pytree(Complex)
