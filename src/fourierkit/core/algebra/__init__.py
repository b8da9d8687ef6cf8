"""Scalar and complex algebra.

Key Components:
- protocols: Capability protocols (LinearSpace, ScalarSpace, ComplexSpace,
  InnerProduct)
- scalar: Real scalars
- complex: Complex value type with polar helpers
"""

from fourierkit.core.algebra.complex import Complex
from fourierkit.core.algebra.protocols import (
    ComplexSpace,
    InnerProduct,
    LinearSpace,
    ScalarSpace,
)
from fourierkit.core.algebra.scalar import ieee_divide, Real


__all__ = [
    "Complex",
    "ComplexSpace",
    "InnerProduct",
    "LinearSpace",
    "Real",
    "ScalarSpace",
    "ieee_divide",
]
