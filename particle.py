# particle.py
"""
Manages the state of all particles in the simulation.

This module defines the ParticleSystem class, which is responsible for
creating and storing particle data (position, velocity, type) in NumPy
arrays, and for regenerating the whole population when the drawing
surface changes size.
"""
import logging
from enum import IntEnum
import numpy as np
from typing import Dict, Any

# --- Data Contracts ---
#
# class ParticleSystem:
#   - __init__(self, params: Dict[str, Any], width: float, height: float):
#     - Inputs:
#       - params: Dictionary of simulation parameters.
#         - "seed": Optional[int]
#         - "particle_count": int
#         - "particle_types": int
#       - width, height: dimensions of the simulation surface.
#     - Side Effects: Creates the particle state arrays via reset().
#
#   - reset(self, width: float, height: float) -> None:
#     - Side Effects: Replaces positions, velocities and types with a
#       freshly generated population.
#     - Invariants:
#       - self.positions is a NumPy array of shape (N, 2) of dtype float64,
#         uniformly distributed in [0, width) x [0, height).
#       - self.velocities is a NumPy array of shape (N, 2) of zeros.
#       - self.types is a NumPy array of shape (N,) of dtype int32.


class ParticleType(IntEnum):
    """The particle categories. The value indexes the force matrix and the palette."""
    RED = 0
    GREEN = 1
    BLUE = 2
    YELLOW = 3


class ParticleSystem:
    """
    A container for all particles, managing their state via NumPy arrays.
    """
    def __init__(self, params: Dict[str, Any], width: float, height: float):
        """
        Initializes the particle system.

        Args:
            params (Dict[str, Any]): Simulation parameters.
            width (float): The width of the simulation area.
            height (float): The height of the simulation area.
        """
        self.particle_count = params['particle_count']
        self.particle_types = params.get('particle_types', len(ParticleType))
        self.seed = params.get('seed')

        # A single generator drives all randomness of one simulation, so a
        # fixed seed reproduces a run exactly.
        self.rng = np.random.default_rng(self.seed)

        self.reset(width, height)

        logging.info(
            f"ParticleSystem initialized with {self.particle_count} "
            f"particles of {self.particle_types} types."
        )

    def reset(self, width: float, height: float) -> None:
        """
        Discards the current population and creates a new one.

        Positions are uniform over the surface, types are uniform over the
        available categories and every particle starts at rest.
        """
        if width < 0 or height < 0:
            raise ValueError(f"Surface dimensions must be non-negative, got {width}x{height}.")

        self.positions = self.rng.uniform(
            low=[0, 0],
            high=[width, height],
            size=(self.particle_count, 2)
        )
        self.velocities = np.zeros((self.particle_count, 2), dtype=np.float64)
        self.types = self.rng.integers(
            low=0,
            high=self.particle_types,
            size=self.particle_count,
            dtype=np.int32
        )

        logging.debug(
            f"Particle population generated for a {width}x{height} surface. "
            f"Positions shape: {self.positions.shape}, "
            f"Velocities shape: {self.velocities.shape}, "
            f"Types shape: {self.types.shape}"
        )

    def __len__(self) -> int:
        return self.particle_count
