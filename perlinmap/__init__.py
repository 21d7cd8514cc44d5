"""PerlinMap - Seedable 2D Perlin noise and octave height maps."""

from .errors import DegenerateRange, InvalidResolution, PerlinMapError
from .gradients import GradientField, Vector2
from .noise import normalize, rasterize, sample
from .octaves import NoiseConfig, composite_noise

__version__ = "0.1.0"
__all__ = [
    "sample_single_layer", "sample_octaves",
    "GradientField", "Vector2", "NoiseConfig",
    "sample", "rasterize", "normalize", "composite_noise",
    "PerlinMapError", "InvalidResolution", "DegenerateRange",
]


def sample_single_layer(resolution, seed, output_resolution, strict=False):
    """Generate one layer of Perlin noise normalized to [0, 1].

    Args:
        resolution: Lattice size of the gradient field (>= 2).
        seed: Random seed for reproducible gradients.
        output_resolution: Side length N of the returned grid.
        strict: Raise DegenerateRange for a constant field instead of
            returning a grid of 0.5.

    Returns:
        float64 array of shape (N, N), indexed [x, y].
    """
    field = GradientField(resolution, seed)
    return rasterize(field, output_resolution, strict=strict)


def sample_octaves(octave_count, output_resolution, starting_lattice_resolution,
                   persistence=0.6, lacunarity=2.0, seed=1, strict=False):
    """Generate multi-octave Perlin noise normalized to [0, 1].

    Args:
        octave_count: Number of layers to sum.
        output_resolution: Side length N of the returned grid.
        starting_lattice_resolution: Lattice size of the first octave.
        persistence: Amplitude decay per octave.
        lacunarity: Lattice growth per octave.
        seed: Random seed shared by every octave.
        strict: Raise DegenerateRange for constant grids.

    Returns:
        float64 array of shape (N, N), indexed [x, y].
    """
    config = NoiseConfig(
        octave_count=octave_count,
        starting_resolution=starting_lattice_resolution,
        persistence=persistence,
        lacunarity=lacunarity,
        seed=seed,
    )
    return composite_noise(output_resolution, config=config, strict=strict)
