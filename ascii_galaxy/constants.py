"""Fixed constants for the ASCII galaxy."""

import math

TWO_PI = math.tau

# --- Display ---
MAX_WIDTH = 120
MAX_HEIGHT = 35
FOOTER_ROWS = 3  # blank line + status line + cursor line
FALLBACK_TERMINAL_SIZE = (120, 40)
ASPECT_RATIO = 2.0  # terminal cells are roughly twice as tall as wide

# --- Timing ---
SIM_DT = 0.1  # simulated time per tick, independent of wall clock
FRAME_DELAY_MS = 50
FPS_LOG_INTERVAL = 200  # frames between frame-rate log lines

# --- Randomness ---
RANDOM_SEED = 42

# --- Spiral arms ---
NUM_ARMS = 2
PARTICLES_PER_ARM = 150
ARM_INNER_RADIUS = 2.0
ARM_OUTER_RADIUS = 16.0
ARM_WINDING = 2.5 * math.pi
ARM_ANGLE_JITTER = 0.2
ARM_ORBIT_SPEED = 0.15

# --- Core bulge ---
CORE_PARTICLES = 60
CORE_MIN_RADIUS = 0.5
CORE_MAX_RADIUS = 3.0
CORE_ORBIT_SPEED = 0.3
CORE_MIN_BRIGHTNESS = 0.8

# --- Star field ---
NUM_BACKGROUND_STARS = 80
STAR_MIN_SPEED = 0.5
STAR_MAX_SPEED = 2.0
STAR_MIN_BRIGHTNESS = 0.3
TWINKLE_FLOOR = 0.3  # dimmest twinkle as a fraction of base brightness

# --- Glyphs ---
BLANK = " "
GRADIENT = " .:-=+*#%@"
INTENSITY_SCALE = 3.0
INTENSITY_THRESHOLD = 0.1
# (threshold, glyph) pairs, brightest first
STAR_GLYPHS: tuple[tuple[float, str], ...] = (
    (0.7, "*"),
    (0.4, "+"),
    (0.2, "."),
)
CORE_GLYPHS = "(@)"

# --- Metadata ---
APP_NAME = "ascii_galaxy"
