import numpy as np
import pytest

from constants import NUM_PARTICLES, FORCE_SCALE, MAX_SPEED, DECELERATION_FACTOR
from particle import ParticleSystem
from simulation import Simulation, wrap_coordinate


class TestWrapCoordinate:
    def test_negative_wraps_to_far_edge(self):
        assert wrap_coordinate(-3.0, 800.0) == pytest.approx(797.0)

    def test_past_far_edge_wraps_to_start(self):
        assert wrap_coordinate(803.0, 800.0) == pytest.approx(3.0)

    def test_far_edge_itself_wraps_to_zero(self):
        assert wrap_coordinate(800.0, 800.0) == 0.0

    def test_inside_is_unchanged(self):
        assert wrap_coordinate(123.5, 800.0) == 123.5

    @pytest.mark.parametrize("value", [-1700.0, 2450.0, -1e-17])
    def test_large_overshoot_stays_in_range(self, value):
        wrapped = wrap_coordinate(value, 800.0)
        assert 0.0 <= wrapped < 800.0

    def test_zero_extent(self):
        assert wrap_coordinate(5.0, 0.0) == 0.0


class TestConstruction:
    def test_random_matrix_drawn_once(self):
        particles = ParticleSystem({'particle_count': 10, 'particle_types': 4, 'seed': 9}, 800, 600)
        sim = Simulation(particles, 800, 600)
        assert sim.force_matrix.shape == (4, 4)
        assert 0.1 <= sim.scaling_factor < 1.0
        assert sim.pointer is None

    def test_wrong_matrix_shape_is_rejected(self):
        particles = ParticleSystem({'particle_count': 10, 'particle_types': 4, 'seed': 9}, 800, 600)
        with pytest.raises(ValueError):
            Simulation(particles, 800, 600, force_matrix=np.zeros((3, 3)))


class TestStep:
    def test_pair_forces_are_equal_and_opposite(self, simulation_factory):
        matrix = np.array([
            [0.0, 0.7, 0.0, 0.0],
            [-0.3, 0.0, 0.0, 0.0],
            [0.0, 0.0, 0.0, 0.0],
            [0.0, 0.0, 0.0, 0.0],
        ])
        sim = simulation_factory([[100.0, 100.0], [130.0, 140.0]], [0, 1], force_matrix=matrix)

        sim.step()

        v = sim.particles.velocities
        np.testing.assert_array_equal(v[0], -v[1])
        # Force on the first particle uses M[0][1]: (30, 40) * 0.7 / 50
        assert v[0, 0] == pytest.approx(0.42 * FORCE_SCALE)
        assert v[0, 1] == pytest.approx(0.56 * FORCE_SCALE)

    def test_positions_move_by_new_velocity(self, simulation_factory):
        matrix = np.full((4, 4), 0.5)
        sim = simulation_factory([[100.0, 100.0], [150.0, 100.0]], [0, 0], force_matrix=matrix)

        sim.step()

        dv = 0.5 * FORCE_SCALE
        assert sim.particles.positions[0, 0] == pytest.approx(100.0 + dv)
        assert sim.particles.positions[1, 0] == pytest.approx(150.0 - dv)

    def test_overlapping_particles_feel_no_force(self, simulation_factory):
        sim = simulation_factory([[50.0, 50.0], [50.0, 50.0]], [1, 2], force_matrix=np.ones((4, 4)))
        sim.step()
        assert np.all(sim.particles.velocities == 0.0)

    def test_fast_particle_is_decelerated(self, simulation_factory):
        sim = simulation_factory([[100.0, 100.0]], [0], velocities=[[3.0, 0.0]])

        sim.step()

        assert sim.particles.velocities[0, 0] == pytest.approx(3.0 * DECELERATION_FACTOR)
        assert sim.particles.positions[0, 0] == pytest.approx(100.0 + 3.0 * DECELERATION_FACTOR)

    def test_speed_cap_is_a_decay_not_a_clamp(self, simulation_factory):
        sim = simulation_factory([[100.0, 100.0]], [0], velocities=[[2.05, 0.0]])
        sim.step()
        speed = np.linalg.norm(sim.particles.velocities[0])
        assert speed == pytest.approx(2.05 * DECELERATION_FACTOR)
        assert speed < MAX_SPEED

    def test_slow_particle_keeps_velocity(self, simulation_factory):
        sim = simulation_factory([[100.0, 100.0]], [0], velocities=[[1.0, -1.0]])
        sim.step()
        np.testing.assert_allclose(sim.particles.velocities[0], [1.0, -1.0])
        np.testing.assert_allclose(sim.particles.positions[0], [101.0, 99.0])

    def test_wraps_across_left_edge(self, simulation_factory):
        sim = simulation_factory([[1.0, 300.0]], [0], velocities=[[-1.5, 0.0]])
        sim.step()
        assert sim.particles.positions[0, 0] == pytest.approx(799.5)

    def test_pointer_repels(self, simulation_factory):
        sim = simulation_factory([[130.0, 140.0]], [0])
        sim.set_pointer(100, 100)

        sim.step()

        v = sim.particles.velocities[0]
        assert v[0] == pytest.approx(84.0 * FORCE_SCALE)
        assert v[1] == pytest.approx(112.0 * FORCE_SCALE)

    def test_pointer_on_particle_gives_no_force(self, simulation_factory):
        sim = simulation_factory([[100.0, 100.0]], [0])
        sim.set_pointer(100.0, 100.0)
        sim.step()
        assert np.all(sim.particles.velocities == 0.0)

    def test_cleared_pointer_has_no_effect(self, simulation_factory):
        sim = simulation_factory([[130.0, 140.0]], [0])
        sim.set_pointer(100.0, 100.0)
        sim.clear_pointer()
        sim.step()
        assert sim.pointer is None
        assert np.all(sim.particles.velocities == 0.0)

    def test_positions_stay_on_surface(self):
        particles = ParticleSystem({'particle_count': 120, 'particle_types': 4, 'seed': 21}, 300, 200)
        sim = Simulation(particles, 300, 200)
        sim.set_pointer(150.0, 100.0)
        for _ in range(50):
            sim.step()
            x = sim.particles.positions[:, 0]
            y = sim.particles.positions[:, 1]
            assert np.all((x >= 0) & (x < 300))
            assert np.all((y >= 0) & (y < 200))

    def test_empty_population(self):
        particles = ParticleSystem({'particle_count': 0, 'particle_types': 4, 'seed': 1}, 800, 600)
        sim = Simulation(particles, 800, 600)
        sim.step()
        assert sim.average_speed() == 0.0


class TestResize:
    def test_resize_repopulates(self):
        particles = ParticleSystem({'particle_count': NUM_PARTICLES, 'particle_types': 4, 'seed': 4}, 800, 600)
        sim = Simulation(particles, 800, 600)
        matrix = sim.force_matrix.copy()
        sim.particles.velocities[:] = 1.0

        sim.resize(1024, 768)

        positions = sim.particles.positions
        assert (sim.width, sim.height) == (1024.0, 768.0)
        assert positions.shape == (NUM_PARTICLES, 2)
        assert np.all((positions[:, 0] >= 0) & (positions[:, 0] < 1024))
        assert np.all((positions[:, 1] >= 0) & (positions[:, 1] < 768))
        assert np.all(sim.particles.velocities == 0.0)
        np.testing.assert_array_equal(sim.force_matrix, matrix)

    def test_step_after_resize_uses_new_bounds(self):
        particles = ParticleSystem({'particle_count': 50, 'particle_types': 4, 'seed': 4}, 800, 600)
        sim = Simulation(particles, 800, 600)
        sim.resize(100, 80)
        sim.step()
        assert np.all(sim.particles.positions[:, 0] < 100)
        assert np.all(sim.particles.positions[:, 1] < 80)
