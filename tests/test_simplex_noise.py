import math

import numpy as np
import pytest

import constants as C
from simplex_noise import GRADIENTS, SimplexNoise, build_permutation, seeded_random


def test_seeded_random_follows_lcg():
    next_random = seeded_random(42)
    first = (42 * 9301 + 49297) % 233280
    second = (first * 9301 + 49297) % 233280
    assert next_random() == first / 233280
    assert next_random() == second / 233280


def test_seeded_random_stays_in_unit_interval_for_negative_seed():
    next_random = seeded_random(-12345)
    for _ in range(1000):
        value = next_random()
        assert 0.0 <= value < 1.0


@pytest.mark.parametrize("seed", [0, 1, 42, -7, 3.5, 233279, 10**12, 0.123456])
def test_permutation_is_a_bijection(seed):
    noise = SimplexNoise(seed)
    assert sorted(noise.p.tolist()) == list(range(256))


def test_permutation_lookup_tables_are_duplicated():
    noise = SimplexNoise(42)
    assert len(noise.perm) == 512
    assert noise.perm[:256].tolist() == noise.p.tolist()
    assert noise.perm[256:].tolist() == noise.p.tolist()
    assert (noise.perm_mod12 == noise.perm % 12).all()
    assert noise.perm_mod12.max() < 12


def test_permutation_for_seed_42_is_pinned():
    assert SimplexNoise(42).p[:8].tolist() == [94, 47, 147, 182, 164, 63, 42, 216]
    assert build_permutation(42)[:8] == [94, 47, 147, 182, 164, 63, 42, 216]


@pytest.mark.parametrize("x, y, expected", [
    (0.3, 0.7, -0.2552206334201348),
    (12.5, -3.25, -0.4004850200784197),
    (-100.75, 44.125, 0.2073279069745656),
])
def test_noise_values_for_seed_42_are_pinned(x, y, expected):
    noise = SimplexNoise(42)
    assert noise.noise2d(x, y) == pytest.approx(expected, abs=1e-15)
    assert float(noise.noise2d_array(x, y)) == pytest.approx(expected, abs=1e-15)


def test_tables_are_read_only():
    noise = SimplexNoise(42)
    with pytest.raises(ValueError):
        noise.perm[0] = 1
    with pytest.raises(ValueError):
        GRADIENTS[0, 0] = 5


def test_different_seeds_give_different_tables():
    assert SimplexNoise(1).p.tolist() != SimplexNoise(2).p.tolist()


def test_gradient_table_shape():
    assert GRADIENTS.shape == (12, 3)
    # Every gradient has exactly two non-zero components of magnitude 1.
    assert (np.count_nonzero(GRADIENTS, axis=1) == 2).all()


def test_origin_golden_value_for_seed_42():
    assert SimplexNoise(42).noise2d(0, 0) == 0.0


def test_noise_is_deterministic_across_calls_and_instances():
    first = SimplexNoise(42)
    second = SimplexNoise(42)
    points = [(0.1, 0.2), (12.5, -3.25), (-100.75, 44.125), (0.5, 0.5), (1e4, 1e4 + 0.3)]
    for x, y in points:
        value = first.noise2d(x, y)
        assert first.noise2d(x, y) == value
        assert second.noise2d(x, y) == value


def test_noise_stays_in_range_and_finite():
    noise = SimplexNoise(42)
    rng = np.random.default_rng(7)
    points = rng.uniform(-500, 500, size=(10000, 2))
    values = [noise.noise2d(float(x), float(y)) for x, y in points]
    assert all(math.isfinite(v) for v in values)
    assert min(values) >= -1.1
    assert max(values) <= 1.1
    # The field is not flat.
    assert max(values) - min(values) > 0.5


def test_noise_is_continuous():
    noise = SimplexNoise(42)
    rng = np.random.default_rng(11)
    for x, y in rng.uniform(-50, 50, size=(500, 2)):
        x, y = float(x), float(y)
        assert abs(noise.noise2d(x, y) - noise.noise2d(x + 1e-4, y)) < 1e-2
        assert abs(noise.noise2d(x, y) - noise.noise2d(x, y + 1e-4)) < 1e-2


def test_noise_is_continuous_across_lattice_boundaries():
    noise = SimplexNoise(42)
    for k in range(-3, 4):
        assert abs(noise.noise2d(k - 1e-9, 0.3) - noise.noise2d(k + 1e-9, 0.3)) < 1e-6
        assert abs(noise.noise2d(0.3, k - 1e-9) - noise.noise2d(0.3, k + 1e-9)) < 1e-6


def test_array_evaluation_matches_scalar():
    noise = SimplexNoise(42)
    rng = np.random.default_rng(3)
    xs = rng.uniform(-300, 300, size=400)
    ys = rng.uniform(-300, 300, size=400)
    values = noise.noise2d_array(xs, ys)
    assert values.shape == (400,)
    for x, y, value in zip(xs, ys, values):
        assert value == pytest.approx(noise.noise2d(float(x), float(y)), abs=1e-12)


def test_array_evaluation_broadcasts():
    noise = SimplexNoise(5)
    xs = np.linspace(0, 3, 7)
    ys = np.linspace(0, 2, 4)[:, np.newaxis]
    values = noise.noise2d_array(xs, ys)
    assert values.shape == (4, 7)
    assert values[2, 3] == pytest.approx(noise.noise2d(float(xs[3]), float(ys[2, 0])), abs=1e-12)


def test_instances_do_not_share_state():
    a = SimplexNoise(1)
    b = SimplexNoise(2)
    before = a.noise2d(3.3, 4.4)
    b.noise2d(3.3, 4.4)
    assert a.noise2d(3.3, 4.4) == before


def test_default_seed_is_random_but_valid():
    noise = SimplexNoise()
    assert 0.0 <= noise.seed < 1.0
    assert sorted(noise.p.tolist()) == list(range(256))


@pytest.mark.parametrize("seed", ["42", [1], True, object()])
def test_invalid_seed_type_fails_fast(seed):
    with pytest.raises(TypeError):
        SimplexNoise(seed)


@pytest.mark.parametrize("seed", [float("nan"), float("inf"), -float("inf")])
def test_non_finite_seed_fails_fast(seed):
    with pytest.raises(ValueError):
        SimplexNoise(seed)


def test_numpy_integer_seed_is_accepted():
    assert SimplexNoise(np.int64(42)).p.tolist() == SimplexNoise(42).p.tolist()


def test_output_scale_constant():
    assert C.NOISE_OUTPUT_SCALE == 70.0
