"""Type definitions for fourierkit.

Provides type annotations shared across the algebra, container and spectral
modules so that array contracts are stated once.
"""  # noqa: A005

from __future__ import annotations

import operator
from collections.abc import Sequence
from typing import Any, TypeAlias

import jax
from jaxtyping import Array, Complex, Float


# Anything accepted as container data before conversion
ArrayLike: TypeAlias = jax.Array | Sequence[Any]

# Spectral field types, transform axes trail any batch axes
ComplexField1D: TypeAlias = Complex[Array, "*batch n"]
ComplexField2D: TypeAlias = Complex[Array, "*batch n n"]
ComplexField3D: TypeAlias = Complex[Array, "*batch n n n"]

# Real-space grids
DensityGrid: TypeAlias = Float[Array, "n n n"]
PotentialGrid: TypeAlias = Float[Array, "n n n"]
WavenumberGrid: TypeAlias = Float[Array, "*wavenumber_dims"]

# Points and vectors in 3D space
Point3D: TypeAlias = Float[Array, "3"]  # noqa: F821
Index: TypeAlias = int | tuple[int, ...]


def is_integer_index(index: Any) -> bool:
    """Type guard for a non-bool integer index.

    Accepts Python ints and anything implementing ``__index__``, such as
    numpy integer scalars and 0-d integer arrays.
    """
    if isinstance(index, bool):
        return False
    if getattr(getattr(index, "dtype", None), "kind", "") == "b":
        return False
    try:
        operator.index(index)
    except TypeError:
        return False
    return True


def is_index_tuple(index: Any) -> bool:
    """Type guard for a tuple of plain integer indices."""
    return isinstance(index, tuple) and all(is_integer_index(i) for i in index)
