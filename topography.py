#topography.py

import time
import numpy as np
import constants as C
from simplex_noise import SimplexNoise
from marching_squares import threshold_levels, grid_dimensions, sample_noise_grid, extract_segments
from time_manager import TimeManager
import logger as log

class TopographicView:
    """
    Render context for one animated contour view.

    Owns the noise generator, the time accumulator, the surface dimensions and the
    single grid buffer. The driver calls resize() on window events and
    render_frame() once per tick.
    """
    def __init__(self, width=C.SCREEN_WIDTH, height=C.SCREEN_HEIGHT, seed=C.NOISE_SEED,
                 scale=C.NOISE_SCALE, speed=C.ANIMATION_SPEED, levels=C.CONTOUR_LEVELS,
                 cell_size=C.CONTOUR_CELL_SIZE, line_width=C.CONTOUR_LINE_WIDTH,
                 line_color=C.COLOR_CONTOUR_LINE, background_color=C.COLOR_BACKGROUND):
        if scale <= 0:
            raise ValueError(f"scale must be positive, got {scale}")
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")

        self.noise = SimplexNoise(seed)
        self.time_manager = TimeManager(speed)
        self.scale = scale
        self.cell_size = cell_size
        self.thresholds = threshold_levels(levels)
        self.line_width = line_width
        self.line_color = line_color
        self.background_color = background_color
        self.stats = None # Optional FrameStatsManager, set by the driver.

        self.width = 0
        self.height = 0
        self.grid = None
        self.resize(width, height)
        log.log(f"TopographicView created: seed={self.noise.seed}, levels={levels}, cell size={cell_size}px.")

    @property
    def time(self):
        return self.time_manager.time

    def resize(self, width, height):
        """Stores new surface dimensions. The grid buffer is reallocated on the next tick."""
        cols, rows = grid_dimensions(width, height, self.cell_size)
        self.width = width
        self.height = height
        self.grid = None
        log.log(f"Event: View resized to {width}x{height} ({cols}x{rows} grid vertices).")

    def grid_dimensions(self):
        return grid_dimensions(self.width, self.height, self.cell_size)

    def _ensure_grid(self):
        cols, rows = self.grid_dimensions()
        if self.grid is None or self.grid.shape != (rows, cols):
            self.grid = np.zeros((rows, cols), dtype=np.float64)
        return self.grid

    def sample_grid(self):
        """Fills the grid buffer with the noise field at the current time value."""
        grid = self._ensure_grid()
        rows, cols = grid.shape
        return sample_noise_grid(self.noise, cols, rows, self.cell_size, self.time, self.scale, out=grid)

    def frame_segments(self):
        """All segments of the current frame, threshold by threshold. The grid is built once and shared."""
        values = self.sample_grid()
        for threshold in self.thresholds:
            for segment in extract_segments(values, threshold, self.cell_size):
                yield segment

    def render_frame(self, surface):
        """
        Draws one frame onto `surface` and advances time by one step.
        Returns the number of segments drawn.
        """
        start = time.perf_counter()
        frame_time = self.time

        surface.clear(self.background_color)
        surface.set_stroke(self.line_color, self.line_width, C.CONTOUR_LINE_CAP)

        segment_count = 0
        for start_point, end_point in self.frame_segments():
            surface.draw_line(start_point, end_point)
            segment_count += 1

        self.time_manager.advance()

        if self.stats is not None:
            elapsed_ms = (time.perf_counter() - start) * C.MILLISECONDS_PER_SECOND
            self.stats.add_frame(frame_time, segment_count, elapsed_ms)
        return segment_count
