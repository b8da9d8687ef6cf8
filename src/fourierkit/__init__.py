"""
fourierkit: Fourier transform engine for spectral field computations

A JAX-native toolkit providing complex algebra, fixed-length containers,
radix-2 Cooley-Tukey transforms on 1D/2D/3D fields, and a spectral Poisson
solver for gravitational potential.
"""

import logging
import os

import jax


__version__ = "0.1.0"
__author__ = "fourierkit developers"


def setup_jax_precision():
    """Configure JAX for double-precision field computations.

    Complex fields are stored as complex128, so X64 mode is enabled unless
    ``FOURIERKIT_DISABLE_X64`` is set in the environment.
    """
    disable_x64 = os.environ.get("FOURIERKIT_DISABLE_X64", "").lower() in (
        "1",
        "true",
        "yes",
    )
    jax.config.update("jax_enable_x64", not disable_x64)

    logger = logging.getLogger(__name__)
    logger.info("fourierkit JAX configuration:")
    logger.info("   backend: %s", jax.default_backend())
    logger.info("   x64 enabled: %s", not disable_x64)


# Automatically configure precision on import
setup_jax_precision()
