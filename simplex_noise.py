#simplex_noise.py

import math
import numbers
import random
import numpy as np
import constants as C

F2 = 0.5 * (math.sqrt(3) - 1)
G2 = (3 - math.sqrt(3)) / 6

# 12 gradient directions. Only the x and y components are used in 2D.
GRADIENTS = np.array([
    [1, 1, 0], [-1, 1, 0], [1, -1, 0], [-1, -1, 0],
    [1, 0, 1], [-1, 0, 1], [1, 0, -1], [-1, 0, -1],
    [0, 1, 1], [0, -1, 1], [0, 1, -1], [0, -1, -1],
], dtype=np.float64)
GRADIENTS.flags.writeable = False
_GRADIENTS_2D = tuple((float(g[0]), float(g[1])) for g in GRADIENTS)


def seeded_random(seed):
    """Returns a function producing the linear-congruential sequence for `seed`, normalized to [0, 1)."""
    state = seed

    def next_random():
        nonlocal state
        state = (state * C.LCG_MULTIPLIER + C.LCG_INCREMENT) % C.LCG_MODULUS
        return state / C.LCG_MODULUS

    return next_random


def build_permutation(seed):
    """Fisher-Yates shuffle of 0..255 driven by the seeded LCG, from the top index down to 1."""
    p = list(range(C.PERMUTATION_SIZE))
    next_random = seeded_random(seed)
    n = C.PERMUTATION_SIZE
    while n > 1:
        k = math.floor(next_random() * n)
        n -= 1
        p[n], p[k] = p[k], p[n]
    return p


def _validate_seed(seed):
    if seed is None:
        return random.random()
    if isinstance(seed, bool) or not isinstance(seed, numbers.Real):
        raise TypeError(f"Noise seed must be an int or float, got {type(seed).__name__}")
    if isinstance(seed, numbers.Integral):
        return int(seed)
    if not math.isfinite(seed):
        raise ValueError(f"Noise seed must be finite, got {seed}")
    return float(seed)


class SimplexNoise:
    """
    Seeded 2D simplex noise.

    The permutation table is fixed at construction; evaluation never mutates
    the instance, so two generators built from the same seed agree exactly.
    """
    def __init__(self, seed=None):
        self.seed = _validate_seed(seed)
        p = build_permutation(self.seed)

        self.p = np.array(p, dtype=np.int64)
        self.perm = np.array([p[i & 255] for i in range(C.PERMUTATION_SIZE * 2)], dtype=np.int64)
        self.perm_mod12 = self.perm % C.GRADIENT_COUNT
        for table in (self.p, self.perm, self.perm_mod12):
            table.flags.writeable = False

        # Plain lists for the scalar path; indexing numpy arrays one element at a time is slow.
        self._perm = self.perm.tolist()
        self._perm_mod12 = self.perm_mod12.tolist()

    def noise2d(self, x, y):
        """Noise value at a single point, roughly in [-1, 1]."""
        perm = self._perm
        perm_mod12 = self._perm_mod12

        # Skew the input space to find the simplex cell.
        s = (x + y) * F2
        i = math.floor(x + s)
        j = math.floor(y + s)

        t = (i + j) * G2
        x0 = x - (i - t)
        y0 = y - (j - t)

        # Lower or upper triangle of the skewed unit square.
        if x0 > y0:
            i1, j1 = 1, 0
        else:
            i1, j1 = 0, 1

        x1 = x0 - i1 + G2
        y1 = y0 - j1 + G2
        x2 = x0 - 1 + 2 * G2
        y2 = y0 - 1 + 2 * G2

        ii = i & 255
        jj = j & 255

        gi0 = perm_mod12[ii + perm[jj]]
        gi1 = perm_mod12[ii + i1 + perm[jj + j1]]
        gi2 = perm_mod12[ii + 1 + perm[jj + 1]]

        n0 = _corner(gi0, x0, y0)
        n1 = _corner(gi1, x1, y1)
        n2 = _corner(gi2, x2, y2)

        return C.NOISE_OUTPUT_SCALE * (n0 + n1 + n2)

    def noise2d_array(self, x, y):
        """
        Vectorized noise2d over numpy arrays of the same (or broadcastable) shape.
        Performs the same arithmetic in the same order, so results match noise2d element-wise.
        """
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        x, y = np.broadcast_arrays(x, y)

        s = (x + y) * F2
        i = np.floor(x + s).astype(np.int64)
        j = np.floor(y + s).astype(np.int64)

        t = (i + j) * G2
        x0 = x - (i - t)
        y0 = y - (j - t)

        i1 = (x0 > y0).astype(np.int64)
        j1 = 1 - i1

        x1 = x0 - i1 + G2
        y1 = y0 - j1 + G2
        x2 = x0 - 1 + 2 * G2
        y2 = y0 - 1 + 2 * G2

        ii = i & 255
        jj = j & 255

        perm = self.perm
        gi0 = self.perm_mod12[ii + perm[jj]]
        gi1 = self.perm_mod12[ii + i1 + perm[jj + j1]]
        gi2 = self.perm_mod12[ii + 1 + perm[jj + 1]]

        n0 = _corner_array(gi0, x0, y0)
        n1 = _corner_array(gi1, x1, y1)
        n2 = _corner_array(gi2, x2, y2)

        return C.NOISE_OUTPUT_SCALE * (n0 + n1 + n2)


def _corner(gi, dx, dy):
    "Contribution of one simplex corner."
    t = C.SIMPLEX_CORNER_RADIUS_SQ - dx * dx - dy * dy
    if t < 0:
        return 0.0
    t *= t
    gx, gy = _GRADIENTS_2D[gi]
    return t * t * (gx * dx + gy * dy)


def _corner_array(gi, dx, dy):
    t = C.SIMPLEX_CORNER_RADIUS_SQ - dx * dx - dy * dy
    t2 = t * t
    contribution = t2 * t2 * (GRADIENTS[gi, 0] * dx + GRADIENTS[gi, 1] * dy)
    return np.where(t < 0, 0.0, contribution)
