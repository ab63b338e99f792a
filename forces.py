# forces.py
"""
The pairwise force model.

Two separate laws act between particles:

* the scalar force, a display-only value combining a type-dependent term
  and a short-range repulsion, used to color the links between particles;
* the vector force, the one that actually moves particles, driven by the
  type matrix alone and gated between a lower exclusion radius and an
  upper interaction threshold.

The laws are kept apart because their gates and their consumers differ.
All functions here are Numba-compiled so the O(n^2) kernels in
`simulation.py` and `renderer.py` can call them; they remain plain
callables from Python.
"""
import logging
import math
import numpy as np
from numba import jit
from typing import Tuple

from constants import (
    INTER_TYPE_FORCE_STRENGTH, INTER_TYPE_MAX_DISTANCE,
    BASIC_REPULSIVE_FORCE_STRENGTH, BASIC_REPULSIVE_MAX_DISTANCE,
    FORCE_THRESHOLD, PARTICLE_SIZE, MOUSE_REPULSION_FORCE,
    MOUSE_EFFECT_RADIUS, MATRIX_SCALE_MIN, MATRIX_SCALE_MAX
)

# --- Data Contracts ---
#
# create_force_matrix(rng: np.random.Generator, num_types: int) -> Tuple[np.ndarray, float]:
#   - Outputs: a (num_types, num_types) float64 matrix with entries in
#     [-scale, scale) and the scale itself, drawn from [0.1, 1.0).
#   - Invariants: the matrix is NOT symmetric in general; M[a, b] is the
#     force type a feels towards type b.
#
# pairwise_force(ax, ay, a_type, bx, by, b_type, force_matrix) -> float
# pairwise_force_vector(ax, ay, a_type, bx, by, b_type, force_matrix) -> (fx, fy)
#   - The vector is the force on particle a; particle b receives (-fx, -fy).
# pointer_force(x, y, pointer_x, pointer_y) -> (fx, fy)
#   - Repulsion of a particle away from the pointer.


def create_force_matrix(rng: np.random.Generator, num_types: int) -> Tuple[np.ndarray, float]:
    """
    Draws a random type-by-type force matrix.

    A single scaling factor is drawn first and applied to every entry, so
    some runs are calm and others are violent.
    """
    scaling_factor = float(rng.uniform(MATRIX_SCALE_MIN, MATRIX_SCALE_MAX))
    matrix = rng.uniform(-1.0, 1.0, size=(num_types, num_types)) * scaling_factor
    logging.info(f"Force matrix created for {num_types} types (scaling factor {scaling_factor:.3f}).")
    logging.debug(f"Force matrix:\n{np.array2string(matrix, precision=3)}")
    return matrix, scaling_factor


@jit(nopython=True)
def pairwise_force(ax, ay, a_type, bx, by, b_type, force_matrix):
    """Scalar force between two particles, used only to color their link."""
    dx = bx - ax
    dy = by - ay
    distance = math.sqrt(dx * dx + dy * dy)

    force_value = 0.0

    # Both terms are gated independently and can apply at the same time.
    if distance < INTER_TYPE_MAX_DISTANCE:
        force_value += (
            (INTER_TYPE_MAX_DISTANCE - distance) / INTER_TYPE_MAX_DISTANCE
            * force_matrix[a_type, b_type] * INTER_TYPE_FORCE_STRENGTH
        )

    if distance < BASIC_REPULSIVE_MAX_DISTANCE:
        force_value -= (
            (BASIC_REPULSIVE_MAX_DISTANCE - distance) / BASIC_REPULSIVE_MAX_DISTANCE
            * BASIC_REPULSIVE_FORCE_STRENGTH
        )

    return force_value


@jit(nopython=True)
def normalize_force(force_value):
    """Clamps a scalar force to [-1, 1]."""
    return min(max(force_value, -1.0), 1.0)


@jit(nopython=True)
def pairwise_force_vector(ax, ay, a_type, bx, by, b_type, force_matrix):
    """
    Force exerted on particle a by particle b.

    Only active for PARTICLE_SIZE * 2 < distance < FORCE_THRESHOLD. The
    lower gate keeps overlapping particles away from the division by the
    distance. The caller applies the exact negation to particle b.
    """
    dx = bx - ax
    dy = by - ay
    distance = math.sqrt(dx * dx + dy * dy)

    if distance < FORCE_THRESHOLD and distance > PARTICLE_SIZE * 2:
        force_magnitude = force_matrix[a_type, b_type] / distance
        return dx * force_magnitude, dy * force_magnitude
    return 0.0, 0.0


@jit(nopython=True)
def pointer_force(x, y, pointer_x, pointer_y):
    """
    Repulsion of the particle at (x, y) away from the pointer.

    Zero when the particle sits exactly on the pointer or lies outside the
    pointer's radius of effect.
    """
    dx = x - pointer_x
    dy = y - pointer_y
    distance = math.sqrt(dx * dx + dy * dy)

    if distance < MOUSE_EFFECT_RADIUS and distance > 0:
        force_magnitude = MOUSE_REPULSION_FORCE / distance
        return dx * force_magnitude, dy * force_magnitude
    return 0.0, 0.0
