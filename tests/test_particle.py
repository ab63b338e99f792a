import numpy as np
import pytest

from constants import NUM_PARTICLES
from particle import ParticleSystem, ParticleType


def make_particles(count=NUM_PARTICLES, width=800, height=600, seed=42):
    return ParticleSystem(
        {'particle_count': count, 'particle_types': len(ParticleType), 'seed': seed},
        width,
        height
    )


def test_four_particle_types():
    assert [int(t) for t in ParticleType] == [0, 1, 2, 3]


def test_initial_population():
    particles = make_particles()

    assert len(particles) == NUM_PARTICLES
    assert particles.positions.shape == (NUM_PARTICLES, 2)
    assert particles.velocities.shape == (NUM_PARTICLES, 2)
    assert particles.types.shape == (NUM_PARTICLES,)
    assert particles.types.dtype == np.int32
    assert np.all(particles.velocities == 0.0)
    assert np.all((particles.types >= 0) & (particles.types < 4))
    assert np.all((particles.positions[:, 0] >= 0) & (particles.positions[:, 0] < 800))
    assert np.all((particles.positions[:, 1] >= 0) & (particles.positions[:, 1] < 600))


def test_seed_reproduces_population():
    first = make_particles(seed=5)
    second = make_particles(seed=5)
    np.testing.assert_array_equal(first.positions, second.positions)
    np.testing.assert_array_equal(first.types, second.types)


def test_reset_replaces_population():
    particles = make_particles()
    old_positions = particles.positions.copy()
    particles.velocities[:] = 1.5

    particles.reset(1024, 768)

    assert particles.positions.shape == (NUM_PARTICLES, 2)
    assert not np.array_equal(particles.positions, old_positions)
    assert np.all(particles.velocities == 0.0)
    assert np.all(particles.positions[:, 0] < 1024)
    assert np.all(particles.positions[:, 1] < 768)


def test_zero_size_surface_is_accepted():
    particles = make_particles(width=0, height=0)
    assert np.all(particles.positions == 0.0)


def test_negative_dimensions_are_rejected():
    particles = make_particles(count=3)
    with pytest.raises(ValueError):
        particles.reset(-1, 600)
