"""
Spectral Poisson solver for gravitational potential.

Solves ``laplacian(phi) = 4 pi G rho`` on a periodic cube of side L:

1. forward 3D FFT of the density
2. multiply every mode by the Green's function ``-4 pi G / |k|^2`` with
   ``k = 2 pi m / L`` and ``m`` the folded (signed) mode index
3. inverse 3D FFT

The k = 0 mode has no finite Green's function. It is handled according to
``PoissonConfig.zero_mode``: ``ZERO`` sets the mean potential to zero,
``RAISE`` rejects densities with a non-zero mean before anything is
transformed.
"""

import logging
import math

import jax
import jax.numpy as jnp

from fourierkit.core.exceptions import SingularModeError
from fourierkit.core.spectral.field import Field3D, fft3d, ifft3d
from fourierkit.core.spectral.validation import validate_transform_length
from fourierkit.physics.gravity.config import PoissonConfig, ZeroModePolicy
from fourierkit.typing import PotentialGrid, WavenumberGrid


logger = logging.getLogger(__name__)


def folded_wavenumbers(n: int) -> jax.Array:
    """
    Signed mode index of each FFT output position.

    ``m = i`` for ``i <= n/2`` and ``m = i - n`` above it, mapping the upper
    half of the spectrum onto negative frequencies.

    Args:
        n: Transform length

    Returns:
        Integer array of length n
    """
    i = jnp.arange(n)
    return jnp.where(i <= n // 2, i, i - n)


def wavenumber_grid(
    n: int, box_size: float
) -> tuple[WavenumberGrid, WavenumberGrid, WavenumberGrid]:
    """
    Physical wavenumbers ``k = 2 pi m / L`` on an n^3 grid.

    Returns:
        Tuple ``(kx, ky, kz)`` of arrays with shape (n, n, n), indexed ``ij``
    """
    k = 2.0 * math.pi * folded_wavenumbers(n) / box_size
    kx, ky, kz = jnp.meshgrid(k, k, k, indexing="ij")
    return kx, ky, kz


def green_function(n: int, box_size: float, gravitational_constant: float):
    """
    Spectral multiplier ``-4 pi G / |k|^2`` with the k = 0 entry set to 0.

    Returns:
        Real array of shape (n, n, n)
    """
    kx, ky, kz = wavenumber_grid(n, box_size)
    k_squared = kx**2 + ky**2 + kz**2
    is_zero_mode = k_squared == 0
    safe_k_squared = jnp.where(is_zero_mode, 1.0, k_squared)
    return jnp.where(
        is_zero_mode, 0.0, -4.0 * math.pi * gravitational_constant / safe_k_squared
    )


def poisson_potential(
    density: jax.Array, box_size: float, gravitational_constant: float
) -> PotentialGrid:
    """
    Functional, ``jax.jit``-compatible solve with a zero-mean potential.

    Args:
        density: Real or complex density of shape (n, n, n)
        box_size: Side length of the periodic cube
        gravitational_constant: G

    Returns:
        Real potential of shape (n, n, n)

    Raises:
        ValueError: If the trailing three axes are not equal
        InvalidLengthError: If the grid side is not a power of two
    """
    density = jnp.asarray(density)
    if density.ndim < 3 or len(set(density.shape[-3:])) != 1:
        raise ValueError(
            f"Density must have a cubic (n, n, n) trailing shape, got {density.shape}"
        )
    n = density.shape[-1]
    density_k = fft3d(density)
    potential_k = density_k * green_function(n, box_size, gravitational_constant)
    return jnp.real(ifft3d(potential_k))


def _check_zero_mode(density: Field3D, config: PoissonConfig) -> None:
    total = complex(jnp.sum(density.data))
    scale = float(jnp.sum(jnp.abs(density.data)))
    if abs(total) <= config.zero_mode_tolerance * scale:
        return

    if config.zero_mode is ZeroModePolicy.RAISE:
        raise SingularModeError(
            "Density has a non-zero mean; the k = 0 mode of the Poisson "
            "equation is undefined on a periodic domain",
            mode=(0, 0, 0),
            value=total,
        )
    logger.debug("Dropping k = 0 mode with coefficient %s", total)


def solve_poisson(density: Field3D, config: PoissonConfig | None = None) -> Field3D:
    """
    Turn a density field into its gravitational potential, in place.

    Args:
        density: Mass density on an n^3 periodic grid; overwritten with the
            potential
        config: Solver configuration (defaults to ``PoissonConfig()``)

    Returns:
        The same field, now holding the potential (imaginary part at
        rounding level for real densities)

    Raises:
        TypeError: If density is not a Field3D
        InvalidLengthError: If the grid side is not a power of two
        SingularModeError: Under ``ZeroModePolicy.RAISE`` when the density
            mean is non-zero
    """
    if not isinstance(density, Field3D):
        raise TypeError(f"Density must be a Field3D, got {type(density).__name__}")
    config = config or PoissonConfig()
    n = density.side

    # All checks run before the field is touched
    validate_transform_length(n, "Poisson solve")
    _check_zero_mode(density, config)

    density.fft()
    density.assign(
        density.data
        * green_function(n, config.box_size, config.gravitational_constant).astype(
            density.dtype
        )
    )
    return density.ifft()
