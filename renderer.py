# renderer.py
"""
Draws one frame of the simulation onto a pygame surface.

Drawing order matters: particle links first, pointer links second and the
particle glyphs last, so the glyphs cover the ends of the lines.
"""
import logging
import math
import numpy as np
import pygame
from numba import jit
from typing import Optional, Sequence, TYPE_CHECKING

from forces import pairwise_force, normalize_force
from colors import link_color, pointer_link_color, to_surface_color
from constants import (
    MAX_LINE_DISTANCE, MOUSE_EFFECT_RADIUS, MOUSE_REPULSION_FORCE,
    PARTICLE_SIZE, TYPE_COLORS
)

if TYPE_CHECKING:
    from simulation import Simulation

# --- Data Contracts ---
#
# collect_links(positions, types, force_matrix) -> (pairs, forces):
#   - Outputs:
#     - pairs: int64 array of shape (K, 2), index pairs (i, j) with i < j
#       whose distance is below MAX_LINE_DISTANCE.
#     - forces: float64 array of shape (K,), the normalized scalar force of
#       each pair.
#
# class Renderer:
#   - render(self, surface: pygame.Surface, simulation: "Simulation") -> None:
#     - Side Effects: Draws links, pointer links and particles onto surface.
#       The surface is not cleared here.


@jit(nopython=True)
def collect_links(positions, types, force_matrix):
    """
    Finds every particle pair close enough to be joined by a link.
    """
    particle_count = positions.shape[0]
    max_pairs = particle_count * (particle_count - 1) // 2
    pairs = np.empty((max_pairs, 2), dtype=np.int64)
    forces = np.empty(max_pairs, dtype=np.float64)
    count = 0

    for i in range(particle_count):
        x_i = positions[i, 0]
        y_i = positions[i, 1]
        for j in range(i + 1, particle_count):
            dx = positions[j, 0] - x_i
            dy = positions[j, 1] - y_i
            if math.sqrt(dx * dx + dy * dy) < MAX_LINE_DISTANCE:
                pairs[count, 0] = i
                pairs[count, 1] = j
                forces[count] = normalize_force(pairwise_force(
                    x_i, y_i, types[i],
                    positions[j, 0], positions[j, 1], types[j],
                    force_matrix
                ))
                count += 1

    return pairs[:count], forces[:count]


class Renderer:
    """
    Renders particles, their force-colored links and the pointer links.
    """
    def __init__(self, type_colors: Optional[Sequence] = None):
        self.type_colors = [
            pygame.Color(color) for color in (type_colors or TYPE_COLORS)
        ]
        logging.debug(f"Renderer initialized with {len(self.type_colors)} particle colors.")

    def render(self, surface: pygame.Surface, simulation: "Simulation") -> None:
        """
        Draws the current state of the simulation.
        """
        positions = simulation.particles.positions
        types = simulation.particles.types

        self._draw_links(surface, positions, types, simulation.force_matrix)
        if simulation.pointer is not None:
            self._draw_pointer_links(surface, positions, simulation.pointer)
        self._draw_particles(surface, positions, types)

    def _draw_links(self, surface, positions, types, force_matrix):
        pairs, forces = collect_links(positions, types, force_matrix)
        for (i, j), force in zip(pairs, forces):
            pygame.draw.line(
                surface,
                to_surface_color(link_color(force)),
                (positions[i, 0], positions[i, 1]),
                (positions[j, 0], positions[j, 1])
            )

    def _draw_pointer_links(self, surface, positions, pointer):
        pointer_x, pointer_y = pointer
        offsets = positions - np.array([pointer_x, pointer_y])
        distances = np.sqrt(np.sum(offsets ** 2, axis=1))

        # A particle exactly under the pointer has no defined force value.
        in_range = np.nonzero((distances < MOUSE_EFFECT_RADIUS) & (distances > 0))[0]
        for i in in_range:
            force_value = MOUSE_REPULSION_FORCE / distances[i]
            pygame.draw.line(
                surface,
                to_surface_color(pointer_link_color(force_value)),
                (pointer_x, pointer_y),
                (positions[i, 0], positions[i, 1])
            )

    def _draw_particles(self, surface, positions, types):
        for i in range(positions.shape[0]):
            pygame.draw.circle(
                surface,
                self.type_colors[types[i] % len(self.type_colors)],
                (positions[i, 0], positions[i, 1]),
                PARTICLE_SIZE
            )
