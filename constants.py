# constants.py
"""
Application-level constants.

These values are static and do not change between simulation runs.
They define the force model, the motion rules and the rendering
properties of the simulation. Ambient settings such as logging or the
window size live in `config.json` instead.
"""

# Visualization settings
# Set to True to run in fullscreen mode.
# Set to False to run in a resizable window.
FULLSCREEN = False
DEFAULT_WINDOW_WIDTH = 1280
DEFAULT_WINDOW_HEIGHT = 720
FPS = 60
BACKGROUND_COLOR = (24, 24, 24) # Dark Gray
WINDOW_TITLE = "Particle Life"

# --- Population ---
NUM_PARTICLES = 360
PARTICLE_SIZE = 4 # Radius of a particle glyph, in pixels

# --- Links ---
# Particle pairs closer than this are joined by a force-colored line.
MAX_LINE_DISTANCE = 40
# Multiplier applied to the normalized force before it is turned into a color.
LINK_COLOR_SCALE = 144

# --- Pointer interaction ---
MOUSE_REPULSION_FORCE = 140
MOUSE_EFFECT_RADIUS = 120 # Pixels

# --- Pairwise force laws ---
# Pixel distance below which the type-matrix force moves particles.
FORCE_THRESHOLD = 200
# Scalar (display-only) force laws.
INTER_TYPE_FORCE_STRENGTH = 0.010
INTER_TYPE_MAX_DISTANCE = 120
BASIC_REPULSIVE_FORCE_STRENGTH = 0.1
BASIC_REPULSIVE_MAX_DISTANCE = 10

# Range of the random factor that scales the whole force matrix.
MATRIX_SCALE_MIN = 0.1
MATRIX_SCALE_MAX = 1.0

# --- Motion ---
# Multiplier turning an accumulated force into a velocity change.
FORCE_SCALE = 0.0005
MAX_SPEED = 2
# Applied to the velocity of a particle moving faster than MAX_SPEED.
DECELERATION_FACTOR = 0.95

# One color per particle type, indexed by type.
TYPE_COLORS = [
    (255, 160, 122), # Light Salmon
    (152, 251, 152), # Pale Green
    (173, 216, 230), # Light Blue
    (255, 215, 0)    # Gold
]
