"""Complex fields on 1D, 2D and 3D grids and their separable transforms.

A multi-dimensional DFT is a sequence of 1D DFTs, one per axis. Rather than
teaching the 1D kernel about strides, each axis is brought into the row
(last-axis) position by a transpose, transformed, and transposed back:

2D: rows -> transpose -> rows -> transpose back
3D: 2D on every plane -> swap x/z -> rows -> swap x/z back

Both transposes of a pass are the same self-inverse permutation, so the
inverse transforms restore the original axis orientation exactly.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ClassVar

import jax
import jax.numpy as jnp

from fourierkit.core.pytree_utils import register_container_pytree
from fourierkit.core.spectral.fft_operations import as_complex, fft1d, ifft1d
from fourierkit.core.spectral.validation import (
    validate_field_input,
    validate_transform_axes,
)
from fourierkit.core.vector import Vector
from fourierkit.typing import ArrayLike, ComplexField2D, ComplexField3D


def transpose_2d(x: jax.Array) -> jax.Array:
    """Swap ``[x][y]`` with ``[y][x]`` on the last two axes."""
    return jnp.swapaxes(x, -2, -1)


def transpose_xz(x: jax.Array) -> jax.Array:
    """Swap ``[x][y][z]`` with ``[z][y][x]`` on the last three axes."""
    return jnp.swapaxes(x, -3, -1)


def _separable_2d(x: jax.Array, kernel: Callable[[jax.Array], jax.Array]):
    x = kernel(x)  # along y
    x = transpose_2d(x)
    x = kernel(x)  # along the original x axis
    return transpose_2d(x)


def _separable_3d(
    x: jax.Array,
    kernel: Callable[[jax.Array], jax.Array],
    kernel_2d: Callable[[jax.Array], jax.Array],
):
    x = kernel_2d(x)  # y/z on every x-plane
    x = transpose_xz(x)
    x = kernel(x)  # along the original x axis
    return transpose_xz(x)


def fft2d(x: Any) -> ComplexField2D:
    """
    Forward 2D FFT over the last two axes.

    Raises:
        InvalidLengthError: If either axis is not a power of two
    """
    x = as_complex(x)
    validate_transform_axes(x.shape, 2, "FFT")
    return _separable_2d(x, fft1d)


def ifft2d(x: Any) -> ComplexField2D:
    """
    Inverse 2D FFT over the last two axes.

    Raises:
        InvalidLengthError: If either axis is not a power of two
    """
    x = as_complex(x)
    validate_transform_axes(x.shape, 2, "IFFT")
    return _separable_2d(x, ifft1d)


def fft3d(x: Any) -> ComplexField3D:
    """
    Forward 3D FFT over the last three axes.

    Raises:
        InvalidLengthError: If any axis is not a power of two
    """
    x = as_complex(x)
    validate_transform_axes(x.shape, 3, "FFT")
    return _separable_3d(x, fft1d, fft2d)


def ifft3d(x: Any) -> ComplexField3D:
    """
    Inverse 3D FFT over the last three axes.

    Raises:
        InvalidLengthError: If any axis is not a power of two
    """
    x = as_complex(x)
    validate_transform_axes(x.shape, 3, "IFFT")
    return _separable_3d(x, ifft1d, ifft2d)


class Field(Vector):
    """Square complex field transformed in place.

    Subclasses fix the number of axes and the forward/inverse kernels.
    ``fft()`` and ``ifft()`` rebind the backing array and return ``self``,
    so calls chain: ``field.fft().ifft()``.

    Args:
        data: Array or nested sequence of shape ``(N,) * spatial_dims``
        dtype: Optional complex dtype

    Raises:
        ValueError: If the data is not square/cubic of the right rank
    """

    __slots__ = ()

    spatial_dims: ClassVar[int]
    _forward: ClassVar[Callable[[jax.Array], jax.Array]]
    _inverse: ClassVar[Callable[[jax.Array], jax.Array]]

    def __init__(self, data: ArrayLike, dtype: Any = None):
        super().__init__(data, dtype=dtype)
        self._data = as_complex(self._data)
        validate_field_input(self._data, self.spatial_dims)

    @classmethod
    def zeros(cls, n: int, dtype: Any = None) -> Field:
        """Zero-initialized field with side ``n``."""
        if n < 0:
            raise ValueError(f"Field side must be non-negative, got {n}")
        if dtype is None:
            dtype = as_complex(jnp.zeros(())).dtype
        return cls(jnp.zeros((n,) * cls.spatial_dims, dtype=dtype))

    @property
    def side(self) -> int:
        return len(self)

    def fft(self) -> Field:
        """Forward transform in place; returns self."""
        self._data = type(self)._forward(self._data)
        return self

    def ifft(self) -> Field:
        """Inverse transform in place; returns self."""
        self._data = type(self)._inverse(self._data)
        return self

    @property
    def real(self) -> jax.Array:
        return jnp.real(self._data)

    @property
    def imag(self) -> jax.Array:
        return jnp.imag(self._data)


class Field1D(Field):
    """N complex samples."""

    __slots__ = ()

    spatial_dims = 1
    _forward = staticmethod(jax.jit(fft1d))
    _inverse = staticmethod(jax.jit(ifft1d))


class Field2D(Field):
    """N rows of N complex samples (an N x N grid)."""

    __slots__ = ()

    spatial_dims = 2
    _forward = staticmethod(jax.jit(fft2d))
    _inverse = staticmethod(jax.jit(ifft2d))


class Field3D(Field):
    """N planes of N x N complex samples (an N x N x N volume)."""

    __slots__ = ()

    spatial_dims = 3
    _forward = staticmethod(jax.jit(fft3d))
    _inverse = staticmethod(jax.jit(ifft3d))


for field_type in (Field1D, Field2D, Field3D):
    register_container_pytree(field_type)
