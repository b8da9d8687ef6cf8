"""Core spectral operations for fourierkit.

Key Components:
- dft: Direct O(N^2) transform used as a correctness oracle
- fft_operations: Radix-2 Cooley-Tukey FFT/IFFT kernels along the last axis
- field: Field1D/Field2D/Field3D containers and separable 2D/3D transforms
- validation: Transform length and field shape validation
"""

from fourierkit.core.spectral.dft import dft1d, idft1d
from fourierkit.core.spectral.fft_operations import (
    as_complex,
    bit_reversal_permutation,
    fft1d,
    ifft1d,
    twiddle_factors,
)
from fourierkit.core.spectral.field import (
    fft2d,
    fft3d,
    Field,
    Field1D,
    Field2D,
    Field3D,
    ifft2d,
    ifft3d,
    transpose_2d,
    transpose_xz,
)
from fourierkit.core.spectral.validation import (
    is_power_of_two,
    validate_field_input,
    validate_transform_axes,
    validate_transform_length,
)


__all__ = [
    # Sorted alphabetically
    "Field",
    "Field1D",
    "Field2D",
    "Field3D",
    "as_complex",
    "bit_reversal_permutation",
    "dft1d",
    "fft1d",
    "fft2d",
    "fft3d",
    "idft1d",
    "ifft1d",
    "ifft2d",
    "ifft3d",
    "is_power_of_two",
    "transpose_2d",
    "transpose_xz",
    "twiddle_factors",
    "validate_field_input",
    "validate_transform_axes",
    "validate_transform_length",
]
