"""Configuration classes for the spectral gravity solver.

Design Principles:
    - All configs are frozen dataclasses (immutable)
    - Validation happens at construction time via __post_init__
    - The zero-wavenumber (mean) mode of the Poisson equation is an explicit
      choice, never an implicit division by zero
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from fourierkit.core.spectral.validation import is_power_of_two


# Newtonian constant of gravitation in SI units (CODATA 2018)
GRAVITATIONAL_CONSTANT = 6.67430e-11


class ZeroModePolicy(Enum):
    """Handling of the k = 0 mode, where the Green's function 1/k^2 is singular."""

    # Drop the mean: the potential is defined up to a constant, fixed to
    # zero mean. Equivalent to solving against the density contrast.
    ZERO = "zero"
    # Raise SingularModeError unless the mean density is already zero.
    RAISE = "raise"


class MassAssignment(Enum):
    """Particle-to-grid mass assignment schemes."""

    NGP = "ngp"  # nearest grid point
    CIC = "cic"  # cloud in cell (trilinear)


@dataclass(frozen=True)
class PoissonConfig:
    """Configuration for the spectral Poisson solver.

    Solves ``laplacian(phi) = 4 pi G rho`` on a periodic cube.

    Attributes:
        box_size: Side length L of the periodic cube
        gravitational_constant: G in the units of the problem
        zero_mode: Handling of the singular k = 0 mode
        zero_mode_tolerance: Under ``ZeroModePolicy.RAISE``, the DC
            coefficient counts as zero when ``|sum(rho)|`` is at most this
            fraction of ``sum(|rho|)``
    """

    box_size: float = 1.0
    gravitational_constant: float = GRAVITATIONAL_CONSTANT
    zero_mode: ZeroModePolicy = ZeroModePolicy.ZERO
    zero_mode_tolerance: float = 1e-12

    def __post_init__(self):
        """Validate configuration parameters."""
        if self.box_size <= 0:
            raise ValueError("box_size must be positive")
        if self.gravitational_constant <= 0:
            raise ValueError("gravitational_constant must be positive")
        if self.zero_mode_tolerance < 0:
            raise ValueError("zero_mode_tolerance must be non-negative")


@dataclass(frozen=True)
class GravityConfig:
    """Configuration for a gravitational potential on a periodic grid.

    Attributes:
        resolution: Grid points per axis (power of two)
        box_min: Lower corner of the cubic domain
        box_max: Upper corner of the cubic domain
        mass_assignment: Particle-to-grid scheme
        poisson: Poisson solver settings; its box_size must match the domain
    """

    resolution: int = 32
    box_min: tuple[float, float, float] = (0.0, 0.0, 0.0)
    box_max: tuple[float, float, float] = (1.0, 1.0, 1.0)
    mass_assignment: MassAssignment = MassAssignment.CIC
    poisson: PoissonConfig = field(default_factory=PoissonConfig)

    def __post_init__(self):
        """Validate configuration parameters."""
        if not is_power_of_two(self.resolution):
            raise ValueError(
                f"resolution must be a positive power of two, got {self.resolution}"
            )
        if len(self.box_min) != 3 or len(self.box_max) != 3:
            raise ValueError("box_min and box_max must have three components")

        sides = [hi - lo for lo, hi in zip(self.box_min, self.box_max, strict=True)]
        if any(side <= 0 for side in sides):
            raise ValueError("box_max must exceed box_min on every axis")
        if max(sides) - min(sides) > 1e-12 * max(sides):
            raise ValueError(f"Domain must be cubic, got side lengths {sides}")
        if abs(self.poisson.box_size - sides[0]) > 1e-12 * sides[0]:
            raise ValueError(
                f"poisson.box_size {self.poisson.box_size} does not match the "
                f"domain side {sides[0]}"
            )

    @property
    def box_size(self) -> float:
        return self.box_max[0] - self.box_min[0]

    @property
    def cell_size(self) -> float:
        return self.box_size / self.resolution
