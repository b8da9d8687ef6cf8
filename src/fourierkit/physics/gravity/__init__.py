"""
Spectral gravity module.

Key Components:
- config: Frozen configuration dataclasses and policy enums
- poisson: Spectral Poisson solver and wavenumber helpers
- potential: Mass assignment, potential and field interpolation for particles
"""

from fourierkit.physics.gravity.config import (
    GRAVITATIONAL_CONSTANT,
    GravityConfig,
    MassAssignment,
    PoissonConfig,
    ZeroModePolicy,
)
from fourierkit.physics.gravity.poisson import (
    folded_wavenumbers,
    green_function,
    poisson_potential,
    solve_poisson,
    wavenumber_grid,
)
from fourierkit.physics.gravity.potential import (
    assign_mass,
    central_difference_gradient,
    GravitationalPotential,
    interpolate,
    spectral_gradient,
)


__all__ = [
    "GRAVITATIONAL_CONSTANT",
    "GravitationalPotential",
    "GravityConfig",
    "MassAssignment",
    "PoissonConfig",
    "ZeroModePolicy",
    "assign_mass",
    "central_difference_gradient",
    "folded_wavenumbers",
    "green_function",
    "interpolate",
    "poisson_potential",
    "solve_poisson",
    "spectral_gradient",
    "wavenumber_grid",
]
