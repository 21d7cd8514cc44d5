"""Single-layer Perlin noise: sampling, rasterization and normalization."""

import logging

import numpy as np

from .errors import DegenerateRange, InvalidResolution

logger = logging.getLogger(__name__)

# Value returned for coordinates outside the sampled lattice, and used to
# fill a grid that has nothing to normalize.
NEUTRAL = 0.5


def fade(t):
    """Perlin fade function: 6t^5 - 15t^4 + 10t^3."""
    return t * t * t * (t * (t * 6 - 15) + 10)


def lerp(a, b, t):
    return a + t * (b - a)


def _corner_dot(gradient, dx, dy):
    return gradient[..., 0] * dx + gradient[..., 1] * dy


def sample(field, x, y):
    """Evaluate Perlin noise at continuous lattice coordinates.

    Valid coordinates lie in ``[0, R - 1)`` on both axes, where R is the
    field's resolution. Anything outside (including NaN) yields 0.5.
    Exactly on a lattice point the result is 0.

    Args:
        field: GradientField to sample.
        x: X coordinate(s); scalars or numpy arrays.
        y: Y coordinate(s), broadcast against ``x``.

    Returns:
        A float for scalar input, otherwise an array of the broadcast
        shape. Raw values stay within about [-0.71, 0.71].
    """
    x, y = np.broadcast_arrays(np.asarray(x, dtype=np.float64),
                               np.asarray(y, dtype=np.float64))
    limit = field.resolution - 1
    inside = (x >= 0) & (x < limit) & (y >= 0) & (y < limit)

    # Park outside points on cell (0, 0); their results are discarded below
    xs = np.where(inside, x, 0.0)
    ys = np.where(inside, y, 0.0)
    x0 = np.floor(xs).astype(np.intp)
    y0 = np.floor(ys).astype(np.intp)
    u = xs - x0
    v = ys - y0

    # Offsets from each cell corner to the point, dotted with its gradient
    g = field.gradients
    tl = _corner_dot(g[x0, y0], u, v)
    tr = _corner_dot(g[x0 + 1, y0], u - 1, v)
    bl = _corner_dot(g[x0, y0 + 1], u, v - 1)
    br = _corner_dot(g[x0 + 1, y0 + 1], u - 1, v - 1)

    su = fade(u)
    sv = fade(v)
    top = lerp(tl, tr, su)
    bottom = lerp(bl, br, su)

    value = np.where(inside, lerp(top, bottom, sv), NEUTRAL)
    if value.ndim == 0:
        return float(value)
    return value


def normalize(grid, strict=False):
    """Linearly rescale ``grid`` so its minimum is 0 and its maximum is 1.

    A constant grid cannot be stretched. By default it comes back filled
    with 0.5 (and a warning is logged); with ``strict=True`` a
    DegenerateRange is raised instead.

    Returns:
        A new float64 array; the input is left untouched.

    Raises:
        ValueError: If ``grid`` holds NaN or infinite values.
    """
    grid = np.asarray(grid, dtype=np.float64)
    if not np.isfinite(grid).all():
        raise ValueError("cannot normalize a grid with NaN or infinite values")
    lo = grid.min()
    hi = grid.max()

    if not hi > lo:
        if strict:
            raise DegenerateRange(float(lo))
        logger.warning("constant %s grid (value %g), filling with %g",
                       "x".join(map(str, grid.shape)), lo, NEUTRAL)
        return np.full_like(grid, NEUTRAL)

    span = hi - lo
    if not np.isfinite(span):
        # Range wider than the largest float; halving is exact here
        half = grid * 0.5
        return (half - lo * 0.5) / (hi * 0.5 - lo * 0.5)
    return (grid - lo) / span


def check_output_resolution(resolution):
    if isinstance(resolution, bool) or not isinstance(resolution, (int, np.integer)):
        raise InvalidResolution(resolution, minimum=1, what="output")
    if resolution < 1:
        raise InvalidResolution(resolution, minimum=1, what="output")
    return int(resolution)


def sample_grid(field, output_resolution):
    """Sample ``field`` on an N x N grid spanning its whole valid domain.

    The step between samples is ``(R - 1) / N``, so cell ``[x, y]`` holds
    the noise at ``(x * step, y * step)``. Values are raw, not normalized.

    Returns:
        float64 array of shape (N, N), indexed [x, y].
    """
    n = check_output_resolution(output_resolution)
    step = (field.resolution - 1) / n
    coords = np.arange(n) * step

    xx, yy = np.meshgrid(coords, coords, indexing='ij')
    return sample(field, xx, yy)


def rasterize(field, output_resolution, strict=False):
    """Sample ``field`` on an N x N grid and normalize it to [0, 1].

    See sample_grid for the sampling layout and normalize for the
    treatment of constant grids.
    """
    raw = sample_grid(field, output_resolution)
    logger.debug("rasterized %r at %d: raw range [%g, %g]",
                 field, raw.shape[0], raw.min(), raw.max())
    return normalize(raw, strict=strict)
