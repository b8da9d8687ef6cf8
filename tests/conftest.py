"""
fourierkit testing configuration.

Enables JAX X64 precision before any test module builds arrays, and provides
shared random inputs for the transform tests.
"""

import os
import warnings


# Respect an explicit platform choice, default to CPU for reproducibility
os.environ.setdefault("JAX_PLATFORMS", "cpu")

import jax
import jax.numpy as jnp
import pytest


# Configure JAX for testing - X64 precision for numerical accuracy
jax.config.update("jax_enable_x64", True)

# Suppress specific warnings during testing
warnings.filterwarnings("ignore", category=FutureWarning)
warnings.filterwarnings("ignore", category=UserWarning, module="jax")


def random_complex(key: jax.Array, shape: tuple[int, ...]) -> jax.Array:
    """Complex128 array with standard normal real and imaginary parts."""
    key_re, key_im = jax.random.split(key)
    return jax.random.normal(key_re, shape) + 1j * jax.random.normal(key_im, shape)


@pytest.fixture
def rng_key():
    """Provide a deterministic PRNG key for tests."""
    return jax.random.PRNGKey(0)


@pytest.fixture
def complex_factory():
    """Provide the random complex array builder."""
    return random_complex


@pytest.fixture
def complex_signal(rng_key):
    """Random complex signal of length 64."""
    return random_complex(rng_key, (64,))


@pytest.fixture
def impulse_4():
    """Unit impulse of length 4."""
    return jnp.array([1.0, 0.0, 0.0, 0.0], dtype=jnp.complex128)
