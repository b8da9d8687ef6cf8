"""Fixed-length vector container.

A ``Vector`` owns a ``jax.Array`` whose leading axis is the container
length N, fixed at construction. Elements are scalars for a 1-D backing
array; for higher-rank arrays each element is a row (N rows of a grid, N
planes of a volume), which is how nested containers such as the 2D and 3D
fields are represented.

JAX arrays are immutable, so copies are always independent. Item assignment
rebinds the backing array of the container it is called on and nothing else.
"""

from __future__ import annotations

import operator
from collections.abc import Iterator
from typing import Any

import jax
import jax.numpy as jnp

from fourierkit.core.algebra.complex import Complex
from fourierkit.core.algebra.scalar import Real
from fourierkit.core.pytree_utils import register_container_pytree
from fourierkit.typing import ArrayLike, Index, is_index_tuple, is_integer_index


def _to_array_data(data: Any) -> Any:
    """Replace algebra values and containers with array-compatible leaves."""
    if isinstance(data, Vector):
        return data.data
    if isinstance(data, Complex):
        return complex(data)
    if isinstance(data, (list, tuple)):
        return [_to_array_data(item) for item in data]
    return data


def _to_array_scalar(value: Any) -> Any:
    if isinstance(value, Complex):
        return complex(value)
    return value


def _is_scalar(value: Any) -> bool:
    if isinstance(value, (int, float, complex, Complex)):
        return True
    return isinstance(value, jax.Array) and value.ndim == 0


class Vector:
    """Ordered, fixed-capacity sequence of N elements.

    Args:
        data: Array or (nested) sequence of numbers, ``Complex`` values or
            containers. The leading axis sets the length.
        dtype: Optional dtype for the backing array

    Raises:
        ValueError: If ``data`` is zero-dimensional
    """

    __slots__ = ("_data",)

    def __init__(self, data: ArrayLike, dtype: Any = None):
        array = jnp.asarray(_to_array_data(data), dtype=dtype)
        if array.ndim == 0:
            raise ValueError("Vector data must have at least one dimension")
        self._data = array

    @classmethod
    def zeros(cls, n: int, dtype: Any = None) -> Vector:
        """Create a zero vector of length ``n``."""
        if n < 0:
            raise ValueError(f"Vector length must be non-negative, got {n}")
        return cls(jnp.zeros((n,), dtype=dtype))

    def _new(self, data: jax.Array) -> Vector:
        # Element-wise results keep the shape, so construction checks hold
        container = type(self).__new__(type(self))
        container._data = data
        return container

    # Storage

    @property
    def data(self) -> jax.Array:
        """The backing array (immutable)."""
        return self._data

    @property
    def shape(self) -> tuple[int, ...]:
        return tuple(self._data.shape)

    @property
    def dtype(self):
        return self._data.dtype

    def __len__(self) -> int:
        return self._data.shape[0]

    def size(self) -> int:
        return len(self)

    def copy(self) -> Vector:
        return self._new(jnp.array(self._data, copy=True))

    def assign(self, data: jax.Array) -> None:
        """Rebind the backing array to ``data`` of identical shape.

        Raises:
            ValueError: If the shape differs, since the length is fixed
        """
        if tuple(data.shape) != self.shape:
            raise ValueError(
                f"Cannot assign data of shape {tuple(data.shape)} "
                f"to {type(self).__name__} of shape {self.shape}"
            )
        self._data = data

    # Index access

    def _check_index(self, index: Any) -> tuple[int, ...]:
        if is_integer_index(index):
            index = (index,)
        if not is_index_tuple(index) or not index:
            raise TypeError(
                f"Indices must be integers or tuples of integers, got {index!r}"
            )
        index = tuple(operator.index(i) for i in index)
        if len(index) > self._data.ndim:
            raise IndexError(
                f"Too many indices: {len(index)} for {self._data.ndim}-dimensional data"
            )
        for axis, (i, n) in enumerate(zip(index, self._data.shape, strict=False)):
            if not 0 <= i < n:
                raise IndexError(f"Index {i} out of range [0, {n}) on axis {axis}")
        return index

    def __getitem__(self, index: Index) -> Any:
        """Read an element or a row.

        A full index returns a scalar (``Complex`` for complex data, ``Real``
        otherwise); a partial index returns the row as a read-only array.
        """
        index = self._check_index(index)
        value = self._data[index]
        if value.ndim > 0:
            return value
        if jnp.iscomplexobj(value):
            return Complex.from_complex(value)
        return Real(value)

    def __setitem__(self, index: Index, value: Any) -> None:
        index = self._check_index(index)
        value = _to_array_data(value)
        self._data = self._data.at[index].set(value)

    def __iter__(self) -> Iterator[Any]:
        for i in range(len(self)):
            yield self[i]

    def get(self, index: Index) -> Any:
        return self[index]

    def get_data(self) -> jax.Array:
        return self._data

    # Element-wise arithmetic

    def _check_compatible(self, other: Vector) -> None:
        if other.shape != self.shape:
            raise ValueError(
                f"Shape mismatch: {self.shape} and {other.shape} "
                "must match for element-wise operations"
            )

    def __neg__(self) -> Vector:
        return self._new(-self._data)

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_compatible(other)
        return self._new(self._data + other.data)

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_compatible(other)
        return self._new(self._data - other.data)

    def __mul__(self, scalar):
        if not _is_scalar(scalar):
            return NotImplemented
        return self._new(self._data * _to_array_scalar(scalar))

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if not _is_scalar(scalar):
            return NotImplemented
        return self._new(self._data / _to_array_scalar(scalar))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.shape == other.shape and bool(jnp.array_equal(self._data, other.data))

    __hash__ = None  # type: ignore[assignment]

    def allclose(self, other: Vector, rtol: float = 1e-12, atol: float = 1e-12) -> bool:
        self._check_compatible(other)
        return bool(jnp.allclose(self._data, other.data, rtol=rtol, atol=atol))

    # Inner-product space

    def dot(self, other: Vector) -> Any:
        """Bilinear product ``sum(a_i * b_i)`` (no conjugation)."""
        self._check_compatible(other)
        result = jnp.sum(self._data * other.data)
        if jnp.iscomplexobj(result):
            return Complex.from_complex(result)
        return Real(result)

    def magnitude_square(self) -> float:
        return float(jnp.sum(jnp.abs(self._data) ** 2))

    def magnitude(self) -> float:
        return float(jnp.sqrt(self.magnitude_square()))

    def normalize(self) -> Vector:
        """Unit vector in the same direction; the zero vector maps to itself."""
        magnitude_sq = self.magnitude_square()
        if magnitude_sq == 0.0:
            return self._new(jnp.zeros_like(self._data))
        return self / self.magnitude()

    def cross(self, other: Vector) -> Vector:
        """Cross product, defined for 3-element vectors only."""
        if self.shape != (3,):
            raise ValueError(f"Cross product requires shape (3,), got {self.shape}")
        self._check_compatible(other)
        return self._new(jnp.cross(self._data, other.data))

    def __repr__(self) -> str:
        return f"{type(self).__name__}<{len(self)}>({self._data!r})"


register_container_pytree(Vector)
