"""
fourierkit core

Algebra values, the fixed-length vector container, and the spectral
transform engine built on them.
"""

from fourierkit.core.algebra import Complex, Real
from fourierkit.core.exceptions import (
    FourierKitError,
    InvalidLengthError,
    SingularModeError,
)
from fourierkit.core.vector import Vector


__all__ = [
    "Complex",
    "FourierKitError",
    "InvalidLengthError",
    "Real",
    "SingularModeError",
    "Vector",
]
