"""Tests for single-layer sampling and rasterization."""

import numpy as np
import pytest


def test_fade_endpoints():
    from perlinmap.noise import fade
    assert fade(0.0) == 0.0
    assert fade(1.0) == 1.0
    assert fade(0.5) == 0.5


@pytest.mark.parametrize("seed", [1, 7, 42])
def test_lattice_points_sample_to_zero(seed):
    from perlinmap.gradients import GradientField
    from perlinmap.noise import sample
    field = GradientField(5, seed=seed)
    for i in range(4):
        for j in range(4):
            assert sample(field, i, j) == 0.0


@pytest.mark.parametrize("x, y", [
    (-0.01, 1.0), (1.0, -0.01), (4.0, 1.0), (1.0, 4.0),
    (4.0, 4.0), (7.5, 0.2), (-3.0, -3.0), (float("nan"), 1.0),
])
def test_out_of_range_is_neutral(x, y):
    from perlinmap.gradients import GradientField
    from perlinmap.noise import sample
    field = GradientField(5, seed=1)
    assert sample(field, x, y) == 0.5


def test_smallest_lattice_edge_is_neutral():
    from perlinmap.gradients import GradientField
    from perlinmap.noise import sample
    field = GradientField(2, seed=1)
    assert sample(field, 1.0, 0.5) == 0.5
    assert sample(field, 0.5, 1.0) == 0.5
    assert sample(field, 0.999, 0.5) != 0.5


def test_sample_matches_hand_computation():
    from perlinmap.gradients import GradientField
    from perlinmap.noise import fade, sample
    field = GradientField.uniform(3, direction=(1, 0))
    # With every gradient (1, 0) the noise reduces to u - fade(u)
    for x in (0.1, 0.25, 0.8, 1.3):
        u = x - np.floor(x)
        assert sample(field, x, 0.6) == pytest.approx(u - fade(u))


def test_array_sampling_matches_scalar():
    from perlinmap.gradients import GradientField
    from perlinmap.noise import sample
    field = GradientField(6, seed=11)
    xs = np.array([0.0, 0.3, 2.7, 4.99, 5.0, -1.0])
    ys = np.array([0.5, 1.1, 3.3, 0.01, 2.0, 2.0])
    out = sample(field, xs, ys)
    assert out.shape == xs.shape
    for x, y, value in zip(xs, ys, out):
        assert value == sample(field, x, y)


def test_sample_returns_float_for_scalars():
    from perlinmap.gradients import GradientField
    from perlinmap.noise import sample
    assert isinstance(sample(GradientField(3), 0.4, 0.7), float)


def test_sample_grid_layout():
    from perlinmap.gradients import GradientField
    from perlinmap.noise import sample, sample_grid
    field = GradientField(3, seed=1)
    raw = sample_grid(field, 4)
    assert raw.shape == (4, 4)
    # step = (3 - 1) / 4 = 0.5, never reaching the boundary
    assert raw[3, 1] == sample(field, 1.5, 0.5)
    assert raw[0, 0] == 0.0
    assert raw[2, 2] == 0.0
    assert not np.any(raw == 0.5)


@pytest.mark.parametrize("resolution, output", [(2, 16), (3, 4), (5, 64), (9, 33)])
def test_rasterize_is_normalized(resolution, output):
    from perlinmap.gradients import GradientField
    from perlinmap.noise import rasterize
    grid = rasterize(GradientField(resolution, seed=5), output)
    assert grid.shape == (output, output)
    assert grid.min() == pytest.approx(0.0)
    assert grid.max() == pytest.approx(1.0)


def test_rasterize_deterministic():
    from perlinmap.gradients import GradientField
    from perlinmap.noise import rasterize
    a = rasterize(GradientField(4, seed=9), 32)
    b = rasterize(GradientField(4, seed=9), 32)
    np.testing.assert_array_equal(a, b)


def test_renormalizing_is_idempotent():
    from perlinmap.gradients import GradientField
    from perlinmap.noise import normalize, rasterize
    grid = rasterize(GradientField(4, seed=2), 24)
    np.testing.assert_array_equal(normalize(grid), grid)


def test_normalize_does_not_mutate_input():
    from perlinmap.noise import normalize
    grid = np.array([[2.0, 4.0], [6.0, 10.0]])
    out = normalize(grid)
    np.testing.assert_allclose(out, [[0.0, 0.25], [0.5, 1.0]])
    np.testing.assert_array_equal(grid, [[2.0, 4.0], [6.0, 10.0]])


def test_degenerate_grid_is_filled_with_neutral():
    from perlinmap.gradients import GradientField
    from perlinmap.noise import rasterize, sample_grid
    # Gradients along (1, 1) cancel at every half step of a 2-lattice
    field = GradientField.uniform(2)
    np.testing.assert_allclose(sample_grid(field, 2), 0.0, atol=1e-15)
    grid = rasterize(field, 2)
    np.testing.assert_array_equal(grid, np.full((2, 2), 0.5))


def test_single_cell_output_is_degenerate():
    from perlinmap.gradients import GradientField
    from perlinmap.noise import rasterize
    grid = rasterize(GradientField(4, seed=1), 1)
    assert grid.shape == (1, 1)
    assert grid[0, 0] == 0.5
    assert np.isfinite(grid).all()


def test_degenerate_grid_strict_raises():
    from perlinmap.errors import DegenerateRange
    from perlinmap.noise import normalize
    with pytest.raises(DegenerateRange):
        normalize(np.full((3, 3), 0.25), strict=True)


@pytest.mark.parametrize("output", [0, -1, 2.0, None])
def test_invalid_output_resolution(output):
    from perlinmap.errors import InvalidResolution
    from perlinmap.gradients import GradientField
    from perlinmap.noise import rasterize
    with pytest.raises(InvalidResolution):
        rasterize(GradientField(3), output)


def test_normalize_range_wider_than_float_max():
    from perlinmap.noise import normalize
    out = normalize(np.array([[-1e308, 0.0, 1e308]]))
    assert np.isfinite(out).all()
    np.testing.assert_allclose(out, [[0.0, 0.5, 1.0]])


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), -float("inf")])
def test_normalize_rejects_non_finite(bad):
    from perlinmap.noise import normalize
    with pytest.raises(ValueError):
        normalize(np.array([[0.0, bad], [1.0, 2.0]]))
