"""Radix-2 Cooley-Tukey FFT kernels.

Iterative decimation-in-time transform along the last axis of an array:
a bit-reversal permutation followed by log2(N) butterfly passes. Each pass
is vectorized across all blocks and all leading (batch) axes, so a single
call transforms every row of a 2D or 3D field at once.

The forward and inverse transforms share one code path; only the sign of
the twiddle angle and the final 1/N scale differ, which is what makes
``ifft1d(fft1d(x)) == x`` hold to rounding error.

All kernels are ``jax.jit``-compatible: the transform length is read from
the static shape, and the permutation and twiddle tables are built once per
size in plain Python and embedded as constants.
"""

import functools
import logging
import math
from typing import Any

import jax
import jax.numpy as jnp
import numpy as np

from fourierkit.core.algebra.complex import Complex
from fourierkit.core.spectral.validation import validate_transform_length
from fourierkit.core.vector import Vector
from fourierkit.typing import ComplexField1D


logger = logging.getLogger(__name__)


def as_complex(x: Any) -> jax.Array:
    """Convert to a complex array, keeping the precision of float inputs."""
    x = jnp.asarray(x)
    if jnp.iscomplexobj(x):
        return x
    return x.astype(jnp.result_type(x.dtype, 1j))


@functools.lru_cache(maxsize=None)
def bit_reversal_permutation(n: int) -> tuple[int, ...]:
    """
    Bit-reversal permutation for a power-of-two length.

    Mirrors the in-place swap loop: ``j`` is advanced as a binary counter
    incremented from the most significant bit, and the pair ``(i, j)`` is
    swapped once when ``i < j``. Entry ``i`` of the result is the index whose
    value ends up at position ``i``, i.e. ``bitreverse(i, log2 n)``.

    Args:
        n: Transform length

    Returns:
        Tuple of source indices

    Raises:
        InvalidLengthError: If n is zero or not a power of two
    """
    validate_transform_length(n, "bit reversal")

    permutation = list(range(n))
    j = 0
    for i in range(1, n):
        bit = n >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j ^= bit

        if i < j:
            permutation[i], permutation[j] = permutation[j], permutation[i]

    logger.debug("Built bit-reversal permutation for n=%d", n)
    return tuple(permutation)


@functools.lru_cache(maxsize=None)
def twiddle_factors(length: int, inverse: bool = False) -> tuple[complex, ...]:
    """
    Twiddle factors of one butterfly pass.

    Produced by the running recurrence ``w_0 = 1``, ``w_{j+1} = w_j * step``
    with ``step = cis(-+2 pi / length)``, so the rounding behaviour matches a
    scalar butterfly loop exactly.

    Args:
        length: Block length of the pass (a power of two, at least 2)
        inverse: Use the positive angle of the inverse transform

    Returns:
        ``length // 2`` factors
    """
    validate_transform_length(length, "twiddle")
    sign = 1.0 if inverse else -1.0
    step = Complex.cis(sign * 2.0 * math.pi / length)

    factors = []
    w = Complex.one()
    for _ in range(length // 2):
        factors.append(complex(w))
        w = w * step

    logger.debug("Built %d twiddle factors for length=%d", len(factors), length)
    return tuple(factors)


def _radix2_transform(x: Any, inverse: bool) -> ComplexField1D:
    """Shared forward/inverse kernel along the last axis."""
    x = as_complex(x)
    if x.ndim == 0:
        raise ValueError("FFT input must have at least one dimension")

    n = x.shape[-1]
    validate_transform_length(n, "IFFT" if inverse else "FFT")
    batch_shape = x.shape[:-1]

    # Bit-reversal: every element lands at bitreverse(index)
    x = x[..., np.asarray(bit_reversal_permutation(n))]

    # Butterfly passes: len = 2, 4, ..., n
    length = 2
    while length <= n:
        half = length // 2
        w = jnp.asarray(twiddle_factors(length, inverse), dtype=x.dtype)

        blocks = x.reshape(*batch_shape, n // length, 2, half)
        u = blocks[..., 0, :]  # even half
        v = blocks[..., 1, :] * w  # odd half

        x = jnp.stack([u + v, u - v], axis=-2).reshape(*batch_shape, n)
        length <<= 1

    if inverse:
        x = x / n
    return x


def fft1d(x: Any) -> Any:
    """
    Forward FFT along the last axis.

    Args:
        x: Array (or sequence) whose last axis has power-of-two length, or
            a ``Vector``/``Field1D`` container

    Returns:
        Transformed array. Containers are transformed in place and the same
        container is returned.

    Raises:
        InvalidLengthError: If the last axis is zero or not a power of two
    """
    if isinstance(x, Vector):
        x.assign(_radix2_transform(x.data, inverse=False))
        return x
    return _radix2_transform(x, inverse=False)


def ifft1d(x: Any) -> Any:
    """
    Inverse FFT along the last axis, scaled by 1/N.

    Args:
        x: Array (or sequence) whose last axis has power-of-two length, or
            a ``Vector``/``Field1D`` container

    Returns:
        Transformed array. Containers are transformed in place and the same
        container is returned.

    Raises:
        InvalidLengthError: If the last axis is zero or not a power of two
    """
    if isinstance(x, Vector):
        x.assign(_radix2_transform(x.data, inverse=True))
        return x
    return _radix2_transform(x, inverse=True)
