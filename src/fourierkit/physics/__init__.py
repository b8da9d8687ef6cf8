"""
fourierkit physics

Consumers of the spectral engine: point particles and the spectral
gravitational potential solver.
"""

from . import gravity
from .particle import Particle


__all__ = ["Particle", "gravity"]
