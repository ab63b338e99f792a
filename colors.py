# colors.py
"""
Maps force values to link colors.

Both mappings start from white for a zero force. Particle links turn green
for attraction and red for repulsion; pointer links turn blue as the
pointer gets closer.

The channel arithmetic is not clamped: strong forces push channels below
0 (or above 255 for negative pointer values). Callers that hand colors to
a drawing backend clamp at that boundary with to_surface_color().
"""
import math
from typing import Tuple

from constants import LINK_COLOR_SCALE, MOUSE_REPULSION_FORCE

# --- Data Contracts ---
#
# link_color(normalized_force: float) -> Tuple[int, int, int]
#   - Inputs: a force in [-1, 1].
#   - Outputs: an (r, g, b) tuple, channels not clamped.
#
# pointer_link_color(force_value: float) -> Tuple[int, int, int]
#   - Inputs: MOUSE_REPULSION_FORCE / pointer distance.
#   - Outputs: an (r, g, b) tuple, channels not clamped.
#
# to_surface_color(color) -> Tuple[int, int, int]
#   - Outputs: the color with every channel clamped to [0, 255].

Color = Tuple[int, int, int]

WHITE: Color = (255, 255, 255)


def _round_half_up(value: float) -> int:
    # Halves round towards +infinity, unlike Python's round().
    return int(math.floor(value + 0.5))


def link_color(normalized_force: float) -> Color:
    """Color of the link between two particles."""
    r, g, b = WHITE
    force_value = normalized_force * LINK_COLOR_SCALE

    if force_value > 0:
        # White to green
        shift = _round_half_up(255 * force_value)
        r -= shift
        b -= shift
    else:
        # White to red
        shift = _round_half_up(255 * -force_value)
        g -= shift
        b -= shift

    return r, g, b


def pointer_link_color(force_value: float) -> Color:
    """Color of the link between the pointer and a particle."""
    r, g, b = WHITE
    shift = _round_half_up(255 * (force_value * 10) / MOUSE_REPULSION_FORCE)
    g -= shift
    b -= shift
    return r, g, b


def to_surface_color(color: Color) -> Color:
    """Clamps a color into the range a drawing surface accepts."""
    return tuple(min(max(int(channel), 0), 255) for channel in color)
