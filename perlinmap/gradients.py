"""Lattice of random unit gradients used by the Perlin sampler."""

import logging
from typing import NamedTuple

import numpy as np

from .errors import InvalidResolution

logger = logging.getLogger(__name__)


class Vector2(NamedTuple):
    """An immutable 2D vector."""
    x: float
    y: float

    def dot(self, other):
        return self.x * other[0] + self.y * other[1]

    def magnitude(self):
        return float(np.hypot(self.x, self.y))

    def normalized(self):
        mag = self.magnitude()
        if mag == 0:
            raise ValueError("cannot normalize a zero-length vector")
        return Vector2(self.x / mag, self.y / mag)


def _check_resolution(resolution):
    if isinstance(resolution, bool) or not isinstance(resolution, (int, np.integer)):
        raise InvalidResolution(resolution)
    if resolution < 2:
        raise InvalidResolution(resolution)
    return int(resolution)


class GradientField:
    """An R x R grid of unit-length gradient vectors.

    Gradients are stored as a read-only float64 array of shape (R, R, 2),
    indexed ``[x, y]``. Each direction comes from a pair of standard-normal
    draws normalized to unit length, so angles are uniform on the circle.

    Args:
        resolution: Lattice size R (at least 2).
        seed: Seed for ``numpy.random.RandomState``. The same
            (resolution, seed) always yields the same field.

    Raises:
        InvalidResolution: If ``resolution`` is not an integer >= 2.
    """

    def __init__(self, resolution=3, seed=1):
        self.resolution = _check_resolution(resolution)
        self.seed = seed

        rng = np.random.RandomState(seed)
        raw = rng.standard_normal((self.resolution, self.resolution, 2))
        mag = np.hypot(raw[..., 0], raw[..., 1])

        # An exact zero draw has probability zero, but would poison the field
        while not np.all(mag > 0):
            bad = mag == 0
            raw[bad] = rng.standard_normal((int(bad.sum()), 2))
            mag = np.hypot(raw[..., 0], raw[..., 1])

        self._gradients = raw / mag[..., np.newaxis]
        self._gradients.setflags(write=False)
        logger.debug("built %dx%d gradient field (seed=%r)",
                     self.resolution, self.resolution, seed)

    @classmethod
    def uniform(cls, resolution, direction=(1.0, 1.0)):
        """Build a field whose every gradient points along ``direction``.

        Handy for checking small lattices by hand.
        """
        resolution = _check_resolution(resolution)
        unit = Vector2(*direction).normalized()

        field = cls.__new__(cls)
        field.resolution = resolution
        field.seed = None
        field._gradients = np.empty((resolution, resolution, 2))
        field._gradients[...] = unit
        field._gradients.setflags(write=False)
        return field

    @property
    def gradients(self):
        """Read-only (R, R, 2) array of gradients, indexed [x, y]."""
        return self._gradients

    def gradient(self, i, j):
        """Return the gradient at lattice point (i, j) as a Vector2."""
        gx, gy = self._gradients[i, j]
        return Vector2(float(gx), float(gy))

    def __eq__(self, other):
        if not isinstance(other, GradientField):
            return NotImplemented
        return (self.resolution == other.resolution
                and np.array_equal(self._gradients, other._gradients))

    __hash__ = None

    def __repr__(self):
        return (f"GradientField(resolution={self.resolution}, "
                f"seed={self.seed!r})")
