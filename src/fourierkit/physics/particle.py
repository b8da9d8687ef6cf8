"""Point particles carrying mass for grid-based gravity."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from fourierkit.core.vector import Vector


def _as_vector3(value: Any, name: str) -> Vector:
    vector = value if isinstance(value, Vector) else Vector(value, dtype=float)
    if vector.shape != (3,):
        raise ValueError(f"{name} must have three components, got shape {vector.shape}")
    return vector


@dataclass(frozen=True, eq=False)
class Particle:
    """Point mass in three dimensions.

    Attributes:
        position: Position vector (3 components)
        velocity: Velocity vector (3 components)
        mass: Positive mass
    """

    position: Vector
    velocity: Vector = field(default_factory=lambda: Vector.zeros(3))
    mass: float = 1.0

    def __post_init__(self):
        """Normalize vectors and validate the mass."""
        object.__setattr__(self, "position", _as_vector3(self.position, "position"))
        object.__setattr__(self, "velocity", _as_vector3(self.velocity, "velocity"))
        if self.mass <= 0:
            raise ValueError(f"mass must be positive, got {self.mass}")

    def momentum(self) -> Vector:
        return self.velocity * self.mass

    def kinetic_energy(self) -> float:
        return 0.5 * self.mass * self.velocity.magnitude_square()

    def with_position(self, position: Any) -> Particle:
        return replace(self, position=_as_vector3(position, "position"))

    def with_velocity(self, velocity: Any) -> Particle:
        return replace(self, velocity=_as_vector3(velocity, "velocity"))
