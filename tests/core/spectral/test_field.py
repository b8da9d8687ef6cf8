"""Tests for Field1D/2D/3D and the separable multi-dimensional transforms."""

import jax
import jax.numpy as jnp
import numpy as np
import pytest

from fourierkit.core.algebra import Complex
from fourierkit.core.exceptions import InvalidLengthError
from fourierkit.core.spectral import (
    fft2d,
    fft3d,
    Field1D,
    Field2D,
    Field3D,
    ifft2d,
    ifft3d,
    transpose_2d,
    transpose_xz,
)


EPS = 1e-12


class TestFieldConstruction:
    """Test field shape invariants."""

    @pytest.mark.parametrize(
        "field_type, shape", [(Field1D, (8,)), (Field2D, (8, 8)), (Field3D, (8, 8, 8))]
    )
    def test_zeros(self, field_type, shape):
        """Zero fields are complex with equal sides."""
        field = field_type.zeros(8)
        assert field.shape == shape
        assert field.side == 8
        assert jnp.iscomplexobj(field.data)
        assert not jnp.any(field.data)

    def test_real_data_promoted(self):
        """Literal real data is stored as complex."""
        field = Field2D([[1.0, 2.0], [3.0, 4.0]])
        assert field.dtype == jnp.complex128
        assert field[1, 0] == Complex(3.0, 0.0)

    def test_rejects_wrong_rank(self):
        """A Field2D needs two axes."""
        with pytest.raises(ValueError, match="2 dimensions"):
            Field2D(jnp.zeros(4))

    def test_rejects_non_square(self):
        """Sides must be equal."""
        with pytest.raises(ValueError, match="equal sides"):
            Field2D(jnp.zeros((4, 8)))

    def test_tuple_and_chained_reads(self):
        """field[x, y, z] and field[x][y][z] address the same element."""
        field = Field3D.zeros(4)
        field[1, 2, 3] = Complex(2.0, -1.0)

        assert field[1, 2, 3] == Complex(2.0, -1.0)
        assert complex(field[1][2][3]) == 2.0 - 1.0j
        assert field[3, 2, 1] == Complex.zero()


class TestTranspose:
    """Test the axis permutations."""

    def test_transpose_2d_swaps_indices(self):
        """[x][y] moves to [y][x]."""
        x = jnp.arange(16).reshape(4, 4)
        t = transpose_2d(x)
        assert t[1, 3] == x[3, 1]
        np.testing.assert_array_equal(transpose_2d(t), x)

    def test_transpose_xz_keeps_y(self):
        """[x][y][z] moves to [z][y][x]."""
        x = jnp.arange(64).reshape(4, 4, 4)
        t = transpose_xz(x)
        assert t[3, 2, 1] == x[1, 2, 3]
        np.testing.assert_array_equal(transpose_xz(t), x)


class TestField1D:
    """Test Field1D transforms."""

    def test_reversibility(self):
        """fft().ifft() restores the field."""
        field = Field1D([complex(i, 0.5 * i) for i in range(8)])
        original = field.copy()

        field.fft().ifft()

        assert field.allclose(original, atol=EPS)

    def test_impulse_response(self):
        """Delta function -> constant spectrum."""
        field = Field1D.zeros(4)
        field[0] = Complex.one()

        field.fft()

        assert field.allclose(Field1D([1.0, 1.0, 1.0, 1.0]), atol=EPS)

    def test_returns_self(self):
        """Transforms chain on the same object."""
        field = Field1D.zeros(4)
        assert field.fft() is field
        assert field.ifft() is field


class TestField2D:
    """Test Field2D transforms."""

    def test_matches_numpy(self, complex_factory, rng_key):
        """The row/transpose/row scheme equals a full 2D DFT."""
        x = complex_factory(rng_key, (16, 16))
        field = Field2D(x).fft()
        np.testing.assert_allclose(field.data, np.fft.fft2(np.asarray(x)), atol=1e-11)

    def test_reversibility(self):
        """fft().ifft() restores the field."""
        field = Field2D([[complex(x + y, x * y) for y in range(4)] for x in range(4)])
        original = field.copy()

        field.fft().ifft()

        assert field.allclose(original, atol=EPS)

    def test_axis_orientation(self):
        """A pure x-mode lands on the x axis of the spectrum."""
        n = 8
        x = jnp.arange(n)
        signal = jnp.exp(2j * jnp.pi * x / n)[:, None] * jnp.ones((1, n))
        spectrum = Field2D(signal).fft()

        assert abs(complex(spectrum[1, 0]) - n * n) < 1e-9
        assert abs(complex(spectrum[0, 1])) < 1e-9

    def test_rectangular_functional_form(self, complex_factory, rng_key):
        """The functional form accepts power-of-two rectangles."""
        x = complex_factory(rng_key, (4, 8))
        np.testing.assert_allclose(fft2d(x), np.fft.fft2(np.asarray(x)), atol=1e-12)
        np.testing.assert_allclose(ifft2d(fft2d(x)), x, atol=EPS)

    def test_invalid_length_leaves_field_unchanged(self):
        """A 6 x 6 field cannot be transformed and is not modified."""
        field = Field2D(jnp.ones((6, 6)))
        before = field.copy()

        with pytest.raises(InvalidLengthError):
            field.fft()
        assert field == before


class TestField3D:
    """Test Field3D transforms."""

    def test_matches_numpy(self, complex_factory, rng_key):
        """The plane/transpose/row scheme equals a full 3D DFT."""
        x = complex_factory(rng_key, (8, 8, 8))
        field = Field3D(x).fft()
        np.testing.assert_allclose(field.data, np.fft.fftn(np.asarray(x)), atol=1e-10)

    def test_reversibility(self):
        """fft().ifft() restores the field."""
        n = 4
        data = [
            [[complex(x * 10 + y * 5 + z, 1.0) for z in range(n)] for y in range(n)]
            for x in range(n)
        ]
        field = Field3D(data)
        original = field.copy()

        field.fft().ifft()

        assert field.allclose(original, atol=EPS)

    def test_axis_identity(self):
        """Round trip keeps an impulse at [1][2][3] and nowhere else."""
        field = Field3D.zeros(4)
        field[1, 2, 3] = Complex.one()

        field.fft()
        field.ifft()

        assert field[1, 2, 3].is_close(Complex.one(), tol=EPS)
        assert field[0, 0, 0].is_close(Complex.zero(), tol=EPS)
        assert field[3, 2, 1].is_close(Complex.zero(), tol=EPS)

    def test_impulse_spectrum_phase(self):
        """An impulse at (1, 2, 3) has spectrum exp(-2 pi i (k.r) / n)."""
        n = 4
        field = Field3D.zeros(n)
        field[1, 2, 3] = Complex.one()
        field.fft()

        k = jnp.arange(n)
        kx, ky, kz = jnp.meshgrid(k, k, k, indexing="ij")
        expected = jnp.exp(-2j * jnp.pi * (kx * 1 + ky * 2 + kz * 3) / n)
        np.testing.assert_allclose(field.data, expected, atol=EPS)

    def test_linearity(self, complex_factory, rng_key):
        """fft(a x + b y) == a fft(x) + b fft(y)."""
        key_x, key_y = jax.random.split(rng_key)
        x = Field3D(complex_factory(key_x, (4, 4, 4)))
        y = Field3D(complex_factory(key_y, (4, 4, 4)))
        a, b = Complex(0.5, 2.0), Complex(-1.0, 0.25)

        combined = (x * a + y * b).fft()
        separate = x.copy().fft() * a + y.copy().fft() * b

        assert combined.allclose(separate, atol=1e-11)

    def test_batched_functional_form(self, complex_factory, rng_key):
        """Leading batch axes are carried through the 3D transform."""
        x = complex_factory(rng_key, (2, 4, 4, 4))
        np.testing.assert_allclose(
            fft3d(x), np.fft.fftn(np.asarray(x), axes=(-3, -2, -1)), atol=1e-11
        )
        np.testing.assert_allclose(ifft3d(fft3d(x)), x, atol=EPS)

    def test_zero_side_rejected_at_transform(self):
        """An empty field is constructible but cannot be transformed."""
        field = Field3D.zeros(0)
        with pytest.raises(InvalidLengthError):
            field.fft()

    def test_through_jit(self):
        """Fields are pytrees; a jitted function can transform one."""

        @jax.jit
        def spectrum(field):
            return field.copy().fft()

        field = Field3D.zeros(4)
        field[0, 0, 0] = 1.0
        result = spectrum(field)

        assert isinstance(result, Field3D)
        np.testing.assert_allclose(result.data, jnp.ones((4, 4, 4)), atol=EPS)
