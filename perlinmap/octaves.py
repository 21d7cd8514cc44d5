"""Multi-octave (fractal) composition of Perlin noise layers."""

import logging
import math
from dataclasses import dataclass

import numpy as np

from .gradients import GradientField
from .noise import check_output_resolution, normalize, rasterize

logger = logging.getLogger(__name__)


def _finite_power(base, exponent, scale=1):
    """Whether ``scale * base ** exponent`` stays a finite float."""
    try:
        return math.isfinite(scale * float(base) ** exponent)
    except OverflowError:
        return False


@dataclass
class NoiseConfig:
    """Configuration for composite noise generation."""

    octave_count: int = 6
    starting_resolution: int = 3

    # Amplitude decay and lattice growth per octave
    persistence: float = 0.6
    lacunarity: float = 2.0

    # Shared by every octave; only the lattice size changes between them
    seed: int = 1

    def validate(self):
        """Raise ValueError for settings no octave stack can be built from.

        Lattice sizes are checked later, by GradientField.
        """
        if (isinstance(self.octave_count, bool)
                or not isinstance(self.octave_count, (int, np.integer))):
            raise ValueError(f"octave_count must be an int, got {self.octave_count!r}")
        if self.octave_count < 1:
            raise ValueError(f"octave_count must be >= 1, got {self.octave_count}")
        if not math.isfinite(self.persistence) or self.persistence <= 0:
            raise ValueError(f"persistence must be positive, got {self.persistence}")
        if not math.isfinite(self.lacunarity) or self.lacunarity <= 0:
            raise ValueError(f"lacunarity must be positive, got {self.lacunarity}")

        # The summed amplitudes and the last lattice size must stay finite
        last = int(self.octave_count) - 1
        if not _finite_power(self.persistence, last, scale=self.octave_count):
            raise ValueError(
                f"persistence {self.persistence} overflows over "
                f"{self.octave_count} octaves"
            )
        if not _finite_power(self.lacunarity, last, scale=self.starting_resolution):
            raise ValueError(
                f"lacunarity {self.lacunarity} overflows the lattice size over "
                f"{self.octave_count} octaves"
            )

    def octave_resolutions(self):
        """Lattice size of each octave: start * lacunarity**k, truncated."""
        return [int(self.starting_resolution * self.lacunarity ** k)
                for k in range(self.octave_count)]

    def amplitudes(self):
        return [self.persistence ** k for k in range(self.octave_count)]


def composite_noise(output_resolution, config=None, strict=False):
    """Sum several Perlin octaves into one map normalized to [0, 1].

    Each octave gets a fresh GradientField (same seed, growing lattice),
    is rasterized and normalized on its own, remapped to [-1, 1], scaled
    by its amplitude and added to the running total. The total is then
    normalized by its own minimum and maximum. This differs from tracking
    the range over every intermediate sum, which can leave the result
    short of 0 or 1; here the output always spans exactly [0, 1].

    Args:
        output_resolution: Size N of the square output grid.
        config: NoiseConfig instance (defaults used if None).
        strict: Raise DegenerateRange instead of filling constant
            grids with 0.5.

    Returns:
        float64 array of shape (N, N), indexed [x, y], in [0, 1].

    Raises:
        InvalidResolution: If N < 1 or an octave's lattice is below 2.
        ValueError: If the config fails NoiseConfig.validate.
    """
    if config is None:
        config = NoiseConfig()
    config.validate()
    n = check_output_resolution(output_resolution)

    total = np.zeros((n, n), dtype=np.float64)

    for k, (res, amp) in enumerate(zip(config.octave_resolutions(),
                                       config.amplitudes())):
        field = GradientField(res, config.seed)
        layer = rasterize(field, n, strict=strict)
        total += (layer * 2 - 1) * amp
        logger.debug("octave %d: lattice %d, amplitude %g", k, res, amp)

    return normalize(total, strict=strict)
