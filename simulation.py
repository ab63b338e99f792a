# simulation.py
"""
Handles the core simulation logic and physics calculations.

This module defines the Simulation class, the explicit context object that
holds everything one simulation needs: the particle population, the force
matrix, the pointer state and the surface dimensions. Its step() method
advances the state by one frame: forces are accumulated into velocities,
fast particles are slowed down, and positions move and wrap around the
edges of the surface.
"""
import logging
import numpy as np
from numba import jit
from typing import Dict, Any, Optional, Tuple

from particle import ParticleSystem
from forces import create_force_matrix, pairwise_force_vector, pointer_force
from constants import FORCE_SCALE, MAX_SPEED, DECELERATION_FACTOR

# --- Data Contracts ---
#
# class Simulation:
#   - __init__(self, particles: ParticleSystem, width: float, height: float,
#              force_matrix: Optional[np.ndarray] = None):
#     - Inputs:
#       - particles: An initialized ParticleSystem object.
#       - width, height: dimensions of the simulation surface.
#       - force_matrix: optional (types, types) matrix. When omitted, one is
#         drawn from the particle system's random generator.
#     - Side Effects: Stores the matrix for the lifetime of the object.
#     - Raises: ValueError if the matrix shape does not match the number
#       of particle types.
#
#   - step(self) -> None:
#     - Side Effects: Modifies particle velocities and positions in place.
#     - Invariants: Particle count remains constant. Every position lies in
#       [0, width) x [0, height) afterwards.
#
#   - resize(self, width: float, height: float) -> None:
#     - Side Effects: Regenerates the whole particle population. The force
#       matrix is kept.


@jit(nopython=True)
def wrap_coordinate(value, extent):
    """
    Wraps one coordinate into [0, extent).

    A single add or subtract covers the overshoot seen at simulation
    speeds; the modulo only runs for larger jumps or when rounding lands
    exactly on the far edge.
    """
    if extent <= 0:
        return 0.0
    if value < 0:
        value += extent
    elif value >= extent:
        value -= extent
    if value < 0 or value >= extent:
        value = value % extent
        if value >= extent:
            value = 0.0
    return value


@jit(nopython=True)
def accumulate_forces(positions, velocities, types, force_matrix, has_pointer, pointer_x, pointer_y):
    """
    Adds this frame's forces to the particle velocities.

    Every unordered pair is visited once; the force found for the lower
    index is applied to it and its exact negation to the other particle.
    Positions are only read here, so the order of the pairs does not
    change the result.
    """
    particle_count = positions.shape[0]
    for i in range(particle_count):
        x_i = positions[i, 0]
        y_i = positions[i, 1]
        type_i = types[i]

        for j in range(i + 1, particle_count):
            fx, fy = pairwise_force_vector(
                x_i, y_i, type_i,
                positions[j, 0], positions[j, 1], types[j],
                force_matrix
            )
            velocities[i, 0] += fx * FORCE_SCALE
            velocities[i, 1] += fy * FORCE_SCALE
            velocities[j, 0] -= fx * FORCE_SCALE
            velocities[j, 1] -= fy * FORCE_SCALE

        if has_pointer:
            fx, fy = pointer_force(x_i, y_i, pointer_x, pointer_y)
            velocities[i, 0] += fx * FORCE_SCALE
            velocities[i, 1] += fy * FORCE_SCALE


@jit(nopython=True)
def integrate(positions, velocities, width, height):
    """
    Applies the speed cap and moves every particle by its velocity.

    The cap is a decay, not a clamp: a particle above MAX_SPEED keeps
    DECELERATION_FACTOR of its velocity and may stay above the cap for a
    few frames under sustained forcing.
    """
    for i in range(positions.shape[0]):
        vx = velocities[i, 0]
        vy = velocities[i, 1]
        speed = np.sqrt(vx * vx + vy * vy)
        if speed > MAX_SPEED:
            velocities[i, 0] = vx * DECELERATION_FACTOR
            velocities[i, 1] = vy * DECELERATION_FACTOR

        positions[i, 0] = wrap_coordinate(positions[i, 0] + velocities[i, 0], width)
        positions[i, 1] = wrap_coordinate(positions[i, 1] + velocities[i, 1], height)


class Simulation:
    """
    Owns the state of one particle-life simulation and advances it frame by frame.
    """
    def __init__(
        self,
        particles: ParticleSystem,
        width: float,
        height: float,
        force_matrix: Optional[np.ndarray] = None
    ):
        """
        Initializes the simulation environment.

        Args:
            particles (ParticleSystem): The particle system to simulate.
            width (float): Width of the simulation surface.
            height (float): Height of the simulation surface.
            force_matrix (Optional[np.ndarray]): Fixed force matrix. Drawn at
                random when not given.
        """
        self.particles = particles
        self.width = float(width)
        self.height = float(height)
        self.pointer: Optional[Tuple[float, float]] = None

        num_types = self.particles.particle_types
        if force_matrix is None:
            self.force_matrix, self.scaling_factor = create_force_matrix(particles.rng, num_types)
        else:
            self.force_matrix = np.array(force_matrix, dtype=np.float64)
            self.scaling_factor = 1.0

        matrix_shape = self.force_matrix.shape
        if matrix_shape != (num_types, num_types):
            msg = (
                f"Configuration error: Force matrix shape {matrix_shape} "
                f"does not match particle_types ({num_types}). The matrix must be square "
                f"and its dimensions must equal the number of particle types."
            )
            logging.critical(msg)
            raise ValueError(msg)

        logging.info(f"Simulation initialized on a {self.width:.0f}x{self.height:.0f} surface.")

    def set_pointer(self, x: float, y: float) -> None:
        """Records the latest pointer position, in surface coordinates."""
        self.pointer = (float(x), float(y))

    def clear_pointer(self) -> None:
        """Marks the pointer as absent."""
        self.pointer = None

    def resize(self, width: float, height: float) -> None:
        """
        Adopts new surface dimensions and regenerates every particle.
        """
        self.width = float(width)
        self.height = float(height)
        self.particles.reset(self.width, self.height)
        logging.info(
            f"Surface resized to {self.width:.0f}x{self.height:.0f}. "
            f"Regenerated {self.particles.particle_count} particles."
        )

    def step(self):
        """
        Executes one frame of the simulation.
        """
        # Pointer and dimensions are read once so the whole frame sees the
        # same values.
        pointer = self.pointer
        width, height = self.width, self.height
        has_pointer = pointer is not None
        pointer_x, pointer_y = pointer if has_pointer else (0.0, 0.0)

        # 1. Accumulate pairwise and pointer forces into velocities
        accumulate_forces(
            self.particles.positions, self.particles.velocities, self.particles.types,
            self.force_matrix, has_pointer, pointer_x, pointer_y
        )

        # 2. Apply the speed cap, move and wrap around the surface edges
        integrate(self.particles.positions, self.particles.velocities, width, height)

    def average_speed(self) -> float:
        """Mean particle speed, for diagnostics."""
        if self.particles.particle_count == 0:
            return 0.0
        return float(np.mean(np.linalg.norm(self.particles.velocities, axis=1)))
