# constants.py

# =============================================================================
# --- ANIMATION LOOP & PERFORMANCE SETTINGS ---
# =============================================================================
CLOCK_TICK_RATE = 60
MILLISECONDS_PER_SECOND = 1000.0
PROFILER_PRINT_LINE_COUNT = 20

# =============================================================================
# --- NOISE FIELD ---
# =============================================================================
NOISE_SEED = 42
NOISE_SCALE = 0.003 # Spatial scale. Smaller = larger features.
ANIMATION_SPEED = 0.0003 # Time added to the accumulator on every rendered frame.

# Linear-congruential stream that drives the permutation shuffle.
LCG_MULTIPLIER = 9301
LCG_INCREMENT = 49297
LCG_MODULUS = 233280

PERMUTATION_SIZE = 256
GRADIENT_COUNT = 12
NOISE_OUTPUT_SCALE = 70.0 # Brings the summed corner contributions into roughly [-1, 1].
SIMPLEX_CORNER_RADIUS_SQ = 0.5

# Each octave is (frequency multiplier, time multiplier, amplitude).
# The sampled value is divided by the sum of the amplitudes (1.75).
NOISE_OCTAVES = (
    (1.0, 1.0, 1.0),
    (2.0, 0.5, 0.5),
    (4.0, 0.25, 0.25),
)

# =============================================================================
# --- CONTOURS ---
# =============================================================================
CONTOUR_LEVELS = 12 # Thresholds are spread evenly over [-1, 1).
CONTOUR_CELL_SIZE = 8 # Marching squares resolution, in pixels.
CONTOUR_LINE_WIDTH = 1
CONTOUR_LINE_CAP = "round"
FLAT_EDGE_PARAMETER = 0.5 # Used when both corners of an edge hold the same value.

# =============================================================================
# --- WINDOW, UI & COLORS ---
# =============================================================================
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
WINDOW_CAPTION = "Topographic Lines"
COLOR_BACKGROUND = (26, 26, 26) # #1a1a1a
COLOR_CONTOUR_LINE = (255, 255, 255, 0.08) # Subtle white lines, alpha in [0, 1]
COLOR_WHITE = (255, 255, 255)
COLOR_STATUS_TEXT = (160, 160, 160)

UI_FONT_SIZE = 24
UI_STATUS_POS_X = 10
UI_STATUS_POS_Y = 10
UI_SHOW_STATUS_DEFAULT = False

# =============================================================================
# --- FRAME STATISTICS ---
# =============================================================================
STATS_LOG_INTERVAL_FRAMES = 600 # Log a summary line every N rendered frames.
STATS_HISTORY_FRAMES = 3600 # Frames kept for the exit plot (one minute at the tick rate).
STATS_FIGURE_SIZE = (12, 7)
