"""Direct discrete Fourier transform.

O(N^2) summation used as a correctness oracle for the FFT kernels. The
power-of-two precondition is shared with the FFT so both can be compared on
identical inputs, even though the direct sum works for any length.
"""

import functools
import math
from typing import Any

import jax.numpy as jnp
import numpy as np

from fourierkit.core.algebra.complex import Complex
from fourierkit.core.spectral.fft_operations import as_complex
from fourierkit.core.spectral.validation import validate_transform_length
from fourierkit.core.vector import Vector


@functools.lru_cache(maxsize=32)
def _dft_matrix(n: int, inverse: bool) -> np.ndarray:
    """Matrix ``W[k, m] = cis(-+2 pi k m / n)``."""
    sign = 1.0 if inverse else -1.0
    return np.array(
        [
            [complex(Complex.cis(sign * 2.0 * math.pi * k * m / n)) for m in range(n)]
            for k in range(n)
        ]
    )


def _direct_transform(x: Any, inverse: bool):
    x = as_complex(x)
    if x.ndim == 0:
        raise ValueError("DFT input must have at least one dimension")

    n = x.shape[-1]
    validate_transform_length(n, "IDFT" if inverse else "DFT")

    w = jnp.asarray(_dft_matrix(n, inverse), dtype=x.dtype)
    # X[..., k] = sum_m x[..., m] * W[k, m]
    result = jnp.sum(x[..., None, :] * w, axis=-1)
    if inverse:
        result = result / n
    return result


def dft1d(x: Any) -> Any:
    """
    Forward DFT by direct summation along the last axis.

    ``X[k] = sum_n x[n] * cis(-2 pi k n / N)``

    Args:
        x: Array (or sequence) with power-of-two last axis, or a container

    Returns:
        New array, or a new container of the same type for container input

    Raises:
        InvalidLengthError: If the last axis is zero or not a power of two
    """
    if isinstance(x, Vector):
        return type(x)(_direct_transform(x.data, inverse=False))
    return _direct_transform(x, inverse=False)


def idft1d(x: Any) -> Any:
    """
    Inverse DFT by direct summation along the last axis, scaled by 1/N.

    Raises:
        InvalidLengthError: If the last axis is zero or not a power of two
    """
    if isinstance(x, Vector):
        return type(x)(_direct_transform(x.data, inverse=True))
    return _direct_transform(x, inverse=True)
