import os

# Rendering tests draw on off-screen surfaces; no real display is needed.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pytest

from particle import ParticleSystem
from simulation import Simulation


def make_simulation(positions, types, width=800.0, height=600.0, force_matrix=None, velocities=None):
    """Builds a simulation whose particles sit at the given positions."""
    positions = np.asarray(positions, dtype=np.float64).reshape(-1, 2)
    particles = ParticleSystem(
        {'particle_count': len(positions), 'particle_types': 4, 'seed': 1},
        width,
        height
    )
    particles.positions = positions.copy()
    particles.types = np.asarray(types, dtype=np.int32)
    if velocities is not None:
        particles.velocities = np.asarray(velocities, dtype=np.float64).reshape(-1, 2).copy()
    if force_matrix is None:
        force_matrix = np.zeros((4, 4))
    return Simulation(particles, width, height, force_matrix=force_matrix)


@pytest.fixture
def simulation_factory():
    return make_simulation
