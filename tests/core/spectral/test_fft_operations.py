"""Tests for the radix-2 FFT kernels.

The direct DFT serves as the oracle; numpy's FFT is used as a second,
independent reference.
"""

import cmath
import math

import jax
import jax.numpy as jnp
import numpy as np
import pytest

from fourierkit.core.algebra import Complex
from fourierkit.core.exceptions import InvalidLengthError
from fourierkit.core.spectral import (
    bit_reversal_permutation,
    dft1d,
    fft1d,
    Field1D,
    ifft1d,
    twiddle_factors,
)


EPS = 1e-14


def _bit_reverse(i: int, bits: int) -> int:
    return int(format(i, f"0{bits}b")[::-1], 2) if bits else 0


class TestBitReversal:
    """Test the bit-reversal permutation table."""

    @pytest.mark.parametrize("n", [1, 2, 4, 8, 16, 64, 256])
    def test_matches_reversed_binary_digits(self, n):
        """Entry i is i with its log2(n) binary digits reversed."""
        bits = n.bit_length() - 1
        expected = tuple(_bit_reverse(i, bits) for i in range(n))
        assert bit_reversal_permutation(n) == expected

    def test_known_table(self):
        """Reference table for n = 8."""
        assert bit_reversal_permutation(8) == (0, 4, 2, 6, 1, 5, 3, 7)

    @pytest.mark.parametrize("n", [2, 16, 128])
    def test_is_an_involution(self, n):
        """Applying the permutation twice restores the order."""
        perm = bit_reversal_permutation(n)
        assert tuple(perm[p] for p in perm) == tuple(range(n))

    def test_rejects_invalid_length(self):
        """Only powers of two have a bit-reversal permutation."""
        with pytest.raises(InvalidLengthError):
            bit_reversal_permutation(6)


class TestTwiddleFactors:
    """Test the twiddle recurrence."""

    def test_count_and_first_factor(self):
        """A pass of length L uses L/2 factors starting at 1."""
        factors = twiddle_factors(8)
        assert len(factors) == 4
        assert factors[0] == 1.0 + 0.0j

    @pytest.mark.parametrize("inverse, sign", [(False, -1.0), (True, 1.0)])
    def test_values(self, inverse, sign):
        """Factor j equals cis(+-2 pi j / L)."""
        length = 16
        for j, w in enumerate(twiddle_factors(length, inverse)):
            expected = cmath.exp(sign * 2j * math.pi * j / length)
            assert abs(w - expected) < 1e-14

    def test_recurrence_ordering(self):
        """Factors come from repeated multiplication by the base step."""
        step = Complex.cis(-2.0 * math.pi / 32)
        w = Complex.one()
        for factor in twiddle_factors(32):
            assert factor == complex(w)
            w = w * step


class TestFFT1D:
    """Test the forward and inverse 1D FFT."""

    def test_known_pair(self):
        """[0, 1, 0, -1] transforms to [0, -2i, 0, 2i]."""
        x = jnp.array([0.0, 1.0, 0.0, -1.0], dtype=jnp.complex128)
        expected = jnp.array([0.0, -2.0j, 0.0, 2.0j])
        np.testing.assert_allclose(fft1d(x), expected, atol=EPS)
        np.testing.assert_allclose(ifft1d(expected), x, atol=EPS)

    def test_impulse_response(self, impulse_4):
        """A unit impulse has an all-ones spectrum."""
        np.testing.assert_allclose(fft1d(impulse_4), jnp.ones(4), atol=EPS)

    @pytest.mark.parametrize("n", [1, 2, 4, 8, 16, 32, 64])
    def test_matches_dft_oracle(self, n, complex_factory, rng_key):
        """FFT and direct DFT agree on arbitrary complex input."""
        x = complex_factory(rng_key, (n,))
        np.testing.assert_allclose(fft1d(x), dft1d(x), atol=1e-12)
        np.testing.assert_allclose(ifft1d(x), np.fft.ifft(np.asarray(x)), atol=1e-12)

    @pytest.mark.parametrize("n", [256, 1024])
    def test_matches_numpy_large(self, n, complex_factory, rng_key):
        """Larger transforms agree with numpy within double precision."""
        x = complex_factory(rng_key, (n,))
        np.testing.assert_allclose(
            fft1d(x), np.fft.fft(np.asarray(x)), rtol=1e-10, atol=1e-10
        )

    def test_round_trip(self, complex_signal):
        """ifft(fft(x)) == x."""
        np.testing.assert_allclose(ifft1d(fft1d(complex_signal)), complex_signal, atol=1e-13)

    def test_linearity(self, complex_factory, rng_key):
        """fft(a x + b y) == a fft(x) + b fft(y)."""
        key_x, key_y = jax.random.split(rng_key)
        x = complex_factory(key_x, (32,))
        y = complex_factory(key_y, (32,))
        a, b = 2.0 - 1.5j, -0.5 + 3.0j

        np.testing.assert_allclose(
            fft1d(a * x + b * y), a * fft1d(x) + b * fft1d(y), atol=1e-12
        )

    def test_real_input_is_promoted(self):
        """Real input is transformed as complex."""
        result = fft1d(jnp.array([1.0, 2.0, 3.0, 4.0]))
        assert jnp.iscomplexobj(result)
        np.testing.assert_allclose(result, np.fft.fft([1.0, 2.0, 3.0, 4.0]), atol=EPS)

    def test_batched_leading_axes(self, complex_factory, rng_key):
        """Every row of a batch is transformed along the last axis."""
        x = complex_factory(rng_key, (2, 3, 16))
        np.testing.assert_allclose(
            fft1d(x), np.fft.fft(np.asarray(x), axis=-1), atol=1e-12
        )

    def test_jit_compatible(self, complex_signal):
        """The kernel traces under jax.jit."""
        np.testing.assert_allclose(
            jax.jit(fft1d)(complex_signal), fft1d(complex_signal), atol=1e-13
        )

    @pytest.mark.parametrize("n", [0, 3, 6, 12, 100])
    def test_rejects_invalid_length(self, n):
        """Zero and non-power-of-two lengths raise InvalidLengthError."""
        with pytest.raises(InvalidLengthError) as exc_info:
            fft1d(jnp.zeros(n, dtype=jnp.complex128))
        assert exc_info.value.length == n

        with pytest.raises(InvalidLengthError, match="power of two"):
            ifft1d(jnp.zeros(n, dtype=jnp.complex128))


class TestFFT1DContainers:
    """Test the in-place behaviour on containers."""

    def test_transforms_in_place(self):
        """A Field1D is mutated and the same object is returned."""
        field = Field1D([0.0, 1.0, 0.0, -1.0])
        result = fft1d(field)

        assert result is field
        np.testing.assert_allclose(field.data, [0.0, -2.0j, 0.0, 2.0j], atol=EPS)

    def test_failure_leaves_container_untouched(self):
        """No partial mutation on an invalid length."""
        field = Field1D([1.0, 2.0, 3.0])
        before = field.copy()

        with pytest.raises(InvalidLengthError):
            fft1d(field)
        assert field == before
