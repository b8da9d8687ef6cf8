"""
Gravitational potential of a particle system on a periodic grid.

Particles are assigned to a ``Field3D`` density grid (nearest grid point or
cloud in cell), the spectral Poisson solver turns the density into a
potential, and the field ``g = -grad(phi)`` is obtained by a periodic
central difference and interpolated back to arbitrary points with the same
kernel used for assignment.

Grid point ``(i, j, l)`` sits at ``box_min + (i, j, l) * cell_size``; all
positions wrap periodically.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterable, Sequence
from typing import Any

import jax
import jax.numpy as jnp

from fourierkit.core.spectral.field import Field3D, fft3d, ifft3d
from fourierkit.core.vector import Vector
from fourierkit.physics.gravity.config import GravityConfig, MassAssignment
from fourierkit.physics.gravity.poisson import solve_poisson, wavenumber_grid
from fourierkit.physics.particle import Particle
from fourierkit.typing import DensityGrid, Point3D, PotentialGrid


logger = logging.getLogger(__name__)

_CORNERS = tuple(itertools.product((0, 1), repeat=3))


def _stencil(
    cell_coords: jax.Array, n: int, scheme: MassAssignment
) -> list[tuple[jax.Array, jax.Array]]:
    """Grid indices and weights touched by each point.

    Args:
        cell_coords: Fractional grid coordinates, shape (p, 3)
        n: Grid points per axis
        scheme: Assignment kernel

    Returns:
        List of ``(indices, weights)`` pairs with shapes (p, 3) and (p,)
    """
    if scheme is MassAssignment.NGP:
        nearest = jnp.round(cell_coords).astype(jnp.int32) % n
        return [(nearest, jnp.ones(cell_coords.shape[0], dtype=cell_coords.dtype))]

    base = jnp.floor(cell_coords)
    frac = cell_coords - base
    base = base.astype(jnp.int32)
    stencil = []
    for corner in _CORNERS:
        offset = jnp.asarray(corner)
        weights = jnp.prod(jnp.where(offset == 1, frac, 1.0 - frac), axis=-1)
        stencil.append(((base + offset) % n, weights))
    return stencil


def assign_mass(
    positions: jax.Array,
    masses: jax.Array,
    n: int,
    box_min: Sequence[float],
    cell_size: float,
    scheme: MassAssignment = MassAssignment.CIC,
) -> DensityGrid:
    """
    Mass density of point masses on an n^3 periodic grid.

    Args:
        positions: Particle positions, shape (p, 3)
        masses: Particle masses, shape (p,)
        n: Grid points per axis
        box_min: Lower corner of the domain
        cell_size: Grid spacing
        scheme: Assignment kernel

    Returns:
        Density grid of shape (n, n, n); its sum times ``cell_size**3``
        equals the total mass
    """
    positions = jnp.atleast_2d(jnp.asarray(positions, dtype=float))
    masses = jnp.atleast_1d(jnp.asarray(masses, dtype=float))
    cell_coords = (positions - jnp.asarray(box_min, dtype=float)) / cell_size

    density = jnp.zeros((n, n, n), dtype=positions.dtype)
    for indices, weights in _stencil(cell_coords, n, scheme):
        density = density.at[indices[:, 0], indices[:, 1], indices[:, 2]].add(
            masses * weights / cell_size**3
        )
    return density


def interpolate(
    grid: jax.Array,
    points: jax.Array,
    box_min: Sequence[float],
    cell_size: float,
    scheme: MassAssignment = MassAssignment.CIC,
) -> jax.Array:
    """
    Sample a periodic grid at arbitrary points with an assignment kernel.

    Args:
        grid: Values on the grid, shape (n, n, n)
        points: Sample points, shape (p, 3)

    Returns:
        Interpolated values, shape (p,)
    """
    n = grid.shape[0]
    points = jnp.atleast_2d(jnp.asarray(points, dtype=float))
    cell_coords = (points - jnp.asarray(box_min, dtype=float)) / cell_size

    values = jnp.zeros(points.shape[0], dtype=grid.dtype)
    for indices, weights in _stencil(cell_coords, n, scheme):
        values = values + weights * grid[indices[:, 0], indices[:, 1], indices[:, 2]]
    return values


def central_difference_gradient(grid: jax.Array, cell_size: float) -> jax.Array:
    """
    Gradient of a periodic grid by second-order central differences.

    Returns:
        Array of shape (3, n, n, n) holding d/dx, d/dy, d/dz
    """
    return jnp.stack(
        [
            (jnp.roll(grid, -1, axis=axis) - jnp.roll(grid, 1, axis=axis))
            / (2 * cell_size)
            for axis in range(3)
        ]
    )


def spectral_gradient(grid: jax.Array, box_size: float) -> jax.Array:
    """
    Gradient of a real periodic grid by multiplication with ``i k``.

    Returns:
        Array of shape (3, n, n, n) holding d/dx, d/dy, d/dz
    """
    n = grid.shape[0]
    grid_k = fft3d(grid)
    components = [
        jnp.real(ifft3d(1j * k * grid_k)) for k in wavenumber_grid(n, box_size)
    ]
    return jnp.stack(components)


class GravitationalPotential:
    """Potential and field of a set of particles in a periodic cube.

    Args:
        config: Grid, domain and solver configuration
    """

    def __init__(self, config: GravityConfig | None = None):
        self.config = config or GravityConfig()
        self.field = Field3D.zeros(self.config.resolution)
        self._acceleration: jax.Array | None = None

    @property
    def resolution(self) -> int:
        return self.config.resolution

    @property
    def is_solved(self) -> bool:
        return self._acceleration is not None

    def reset(self) -> None:
        """Clear the grid for a new mass assignment."""
        self.field = Field3D.zeros(self.resolution)
        self._acceleration = None

    def deposit(self, particle: Particle) -> None:
        """Add the density of one particle to the grid."""
        self.deposit_many([particle])

    def deposit_many(self, particles: Iterable[Particle]) -> None:
        """Add the density of several particles in one scatter."""
        particles = list(particles)
        if not particles:
            return
        if self.is_solved:
            raise RuntimeError("Grid holds a solved potential; call reset() first")

        positions = jnp.stack([p.position.data for p in particles])
        masses = jnp.asarray([p.mass for p in particles], dtype=float)
        density = assign_mass(
            positions,
            masses,
            self.resolution,
            self.config.box_min,
            self.config.cell_size,
            self.config.mass_assignment,
        )
        self.field.assign(self.field.data + density.astype(self.field.dtype))

    def density(self) -> DensityGrid:
        """Current mass density (before solving)."""
        if self.is_solved:
            raise RuntimeError("Grid holds a solved potential, not a density")
        return self.field.real

    def solve(self) -> PotentialGrid:
        """Solve the Poisson equation for the deposited density in place."""
        if self.is_solved:
            raise RuntimeError("Potential already solved; call reset() first")
        solve_poisson(self.field, self.config.poisson)
        potential = self.field.real
        self._acceleration = -central_difference_gradient(
            potential, self.config.cell_size
        )
        logger.debug(
            "Solved potential on %d^3 grid, min=%g max=%g",
            self.resolution,
            float(jnp.min(potential)),
            float(jnp.max(potential)),
        )
        return potential

    def step(self, particles: Iterable[Particle]) -> PotentialGrid:
        """Reset, deposit every particle, and solve."""
        self.reset()
        self.deposit_many(particles)
        return self.solve()

    @property
    def potential(self) -> PotentialGrid:
        if not self.is_solved:
            raise RuntimeError("Potential not solved; call solve() or step() first")
        return self.field.real

    def potential_at(self, point: Any) -> float:
        """Interpolated potential at a point."""
        return float(
            interpolate(
                self.potential,
                self._as_point(point),
                self.config.box_min,
                self.config.cell_size,
                self.config.mass_assignment,
            )[0]
        )

    def gravitational_field(self, point: Any) -> Vector:
        """Gravitational acceleration ``-grad(phi)`` at a point."""
        if not self.is_solved:
            raise RuntimeError("Potential not solved; call solve() or step() first")
        point = self._as_point(point)
        components = [
            interpolate(
                component,
                point,
                self.config.box_min,
                self.config.cell_size,
                self.config.mass_assignment,
            )[0]
            for component in self._acceleration
        ]
        return Vector(jnp.stack(components))

    @staticmethod
    def _as_point(point: Any) -> Point3D:
        if isinstance(point, Vector):
            point = point.data
        point = jnp.asarray(point, dtype=float)
        if point.shape != (3,):
            raise ValueError(f"Point must have three components, got {point.shape}")
        return point
