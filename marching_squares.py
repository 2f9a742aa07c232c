#marching_squares.py

import math
import numpy as np
import constants as C

# Segments drawn for each of the 16 cell configurations, as pairs of edge names.
# Bit 0 = top-left corner, 1 = top-right, 2 = bottom-right, 3 = bottom-left.
# Saddles (5 and 10) always use the pairing below; the cell center is never sampled.
CASE_SEGMENTS = (
    (),                                         # 0: all below
    (("left", "top"),),                         # 1
    (("top", "right"),),                        # 2
    (("left", "right"),),                       # 3
    (("right", "bottom"),),                     # 4
    (("left", "top"), ("right", "bottom")),     # 5: saddle
    (("top", "bottom"),),                       # 6
    (("left", "bottom"),),                      # 7
    (("left", "bottom"),),                      # 8
    (("top", "bottom"),),                       # 9
    (("left", "bottom"), ("top", "right")),     # 10: saddle
    (("right", "bottom"),),                     # 11
    (("left", "right"),),                       # 12
    (("top", "right"),),                        # 13
    (("left", "top"),),                         # 14
    (),                                         # 15: all above
)


def threshold_levels(levels=C.CONTOUR_LEVELS):
    """Evenly spaced thresholds over [-1, 1): -1 + (2 / levels) * i."""
    if isinstance(levels, bool) or not isinstance(levels, int) or levels < 1:
        raise ValueError(f"levels must be a positive integer, got {levels!r}")
    return [-1 + (2 / levels) * i for i in range(levels)]


def grid_dimensions(width, height, cell_size=C.CONTOUR_CELL_SIZE):
    """Returns (cols, rows) of grid vertices needed to cover a width x height surface."""
    if cell_size <= 0:
        raise ValueError(f"cell_size must be positive, got {cell_size}")
    if width < 0 or height < 0:
        raise ValueError(f"Surface dimensions must be non-negative, got {width}x{height}")
    cols = math.ceil(width / cell_size) + 1
    rows = math.ceil(height / cell_size) + 1
    return cols, rows


def sample_field_value(noise, x, y, t, scale=C.NOISE_SCALE):
    """
    Layered noise at one pixel position: three octaves, normalized by the summed amplitudes.
    Scalar reference for sample_noise_grid, which computes the same values for a whole frame.
    """
    value = 0.0
    total_amplitude = 0.0
    for frequency, time_factor, amplitude in C.NOISE_OCTAVES:
        value += noise.noise2d(x * scale * frequency + t * time_factor, y * scale * frequency) * amplitude
        total_amplitude += amplitude
    return value / total_amplitude


def sample_noise_grid(noise, cols, rows, cell_size, t, scale=C.NOISE_SCALE, out=None):
    """
    Builds the (rows, cols) grid of layered noise values for time `t`.
    grid[j][i] holds the value at pixel (i * cell_size, j * cell_size).
    If `out` is given the values are written into it and it is returned.
    """
    xs = np.arange(cols) * cell_size
    ys = np.arange(rows) * cell_size
    x_grid, y_grid = np.meshgrid(xs, ys)

    value = np.zeros((rows, cols), dtype=np.float64)
    total_amplitude = 0.0
    for frequency, time_factor, amplitude in C.NOISE_OCTAVES:
        value += noise.noise2d_array(x_grid * scale * frequency + t * time_factor, y_grid * scale * frequency) * amplitude
        total_amplitude += amplitude
    value /= total_amplitude

    if out is None:
        return value
    if out.shape != value.shape:
        raise ValueError(f"Grid buffer has shape {out.shape}, expected {value.shape}")
    out[...] = value
    return out


def case_index(a, b, c, d, threshold):
    "4-bit configuration of a cell: one bit per corner above the threshold."
    index = 0
    if a > threshold: index |= 1
    if b > threshold: index |= 2
    if c > threshold: index |= 4
    if d > threshold: index |= 8
    return index


def edge_parameter(threshold, v0, v1):
    """Where the threshold crosses the edge v0 -> v1, as a fraction of its length. Flat edges give the midpoint."""
    if v1 == v0:
        return C.FLAT_EDGE_PARAMETER
    return (threshold - v0) / (v1 - v0)


def lerp(a, b, t):
    "Linear interpolation."
    return a + (b - a) * t


def edge_points(x, y, cell_size, a, b, c, d, threshold):
    """Interpolated crossing point on each of the four edges of the cell whose top-left corner is (x, y)."""
    return {
        "top": (lerp(x, x + cell_size, edge_parameter(threshold, a, b)), y),
        "right": (x + cell_size, lerp(y, y + cell_size, edge_parameter(threshold, b, c))),
        "bottom": (lerp(x, x + cell_size, edge_parameter(threshold, d, c)), y + cell_size),
        "left": (x, lerp(y, y + cell_size, edge_parameter(threshold, a, d))),
    }


def _segments_for_case(index, x, y, cell_size, a, b, c, d, threshold):
    pairs = CASE_SEGMENTS[index]
    if not pairs:
        return []
    points = edge_points(x, y, cell_size, a, b, c, d, threshold)
    return [(points[start], points[end]) for start, end in pairs]


def cell_segments(x, y, cell_size, a, b, c, d, threshold):
    """Contour segments for a single cell with corners a (top-left), b (top-right), c (bottom-right), d (bottom-left)."""
    index = case_index(a, b, c, d, threshold)
    return _segments_for_case(index, x, y, cell_size, a, b, c, d, threshold)


def classify_cells(values, threshold):
    """Case index of every cell in the grid, as a (rows - 1, cols - 1) array."""
    a = values[:-1, :-1]
    b = values[:-1, 1:]
    c = values[1:, 1:]
    d = values[1:, :-1]
    return ((a > threshold) * 1 + (b > threshold) * 2 + (c > threshold) * 4 + (d > threshold) * 8).astype(np.int8)


def extract_segments(values, threshold, cell_size=C.CONTOUR_CELL_SIZE):
    """
    All contour segments of `values` at `threshold`, in row-major cell order.

    Classification runs over the whole grid with NumPy; only cells the contour
    actually crosses are interpolated.
    """
    values = np.asarray(values, dtype=np.float64)
    if values.ndim != 2 or values.shape[0] < 2 or values.shape[1] < 2:
        return []

    cases = classify_cells(values, threshold)
    crossing_rows, crossing_cols = np.nonzero((cases != 0) & (cases != 15))

    segments = []
    for j, i in zip(crossing_rows.tolist(), crossing_cols.tolist()):
        segments.extend(_segments_for_case(
            int(cases[j, i]),
            i * cell_size, j * cell_size, cell_size,
            float(values[j, i]), float(values[j, i + 1]),
            float(values[j + 1, i + 1]), float(values[j + 1, i]),
            threshold,
        ))
    return segments
