"""Input validation for spectral operations.

Every transform validates its length before computing anything, so an
invalid request never leaves a field partially transformed.
"""

from collections.abc import Sequence

import jax
import jax.numpy as jnp

from fourierkit.core.exceptions import InvalidLengthError


def is_power_of_two(n: int) -> bool:
    """Return True for n = 1, 2, 4, 8, ..."""
    return n > 0 and (n & (n - 1)) == 0


def validate_transform_length(n: int, operation: str = "transform") -> None:
    """
    Validate a transform length.

    Args:
        n: Number of samples along the transform axis
        operation: Operation name used in the error message

    Raises:
        InvalidLengthError: If n is zero or not a power of two
    """
    if not is_power_of_two(n):
        raise InvalidLengthError(n, operation)


def validate_transform_axes(
    shape: Sequence[int], spatial_dims: int, operation: str = "transform"
) -> None:
    """
    Validate every transform axis of an array shape.

    The transform axes are the trailing ``spatial_dims`` axes.

    Raises:
        ValueError: If the shape has fewer than ``spatial_dims`` axes
        InvalidLengthError: If any transform axis has an invalid length
    """
    if len(shape) < spatial_dims:
        raise ValueError(
            f"Input has {len(shape)} dimensions, but {operation} requires at "
            f"least {spatial_dims}"
        )
    for n in shape[len(shape) - spatial_dims :]:
        validate_transform_length(n, operation)


def validate_field_input(x: jax.Array, spatial_dims: int) -> None:
    """
    Validate the backing array of a square (or cubic) field.

    Args:
        x: Backing array
        spatial_dims: Expected number of axes (1, 2 or 3)

    Raises:
        TypeError: If x is not a JAX array
        ValueError: If spatial_dims is unsupported, or the rank, shape or
            dtype of x is wrong
    """
    if not isinstance(x, jax.Array):
        raise TypeError(f"Field data must be a JAX array, got {type(x)}")

    if spatial_dims < 1 or spatial_dims > 3:
        raise ValueError(f"spatial_dims must be 1, 2, or 3, got {spatial_dims}")

    if x.ndim != spatial_dims:
        raise ValueError(
            f"Field{spatial_dims}D data must have {spatial_dims} dimensions, "
            f"got shape {tuple(x.shape)}"
        )

    if len(set(x.shape)) != 1:
        raise ValueError(
            f"Field{spatial_dims}D data must have equal sides, got shape "
            f"{tuple(x.shape)}"
        )

    if not jnp.issubdtype(x.dtype, jnp.complexfloating):
        raise ValueError(f"Field data must have complex dtype, got {x.dtype}")
