"""Greyscale image output for normalized noise maps."""

import logging
from pathlib import Path

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)


def to_pixels(grid):
    """Convert a [0, 1] grid indexed [x, y] into an 8-bit image array.

    Each cell becomes ``round(value * 255)``. The result is transposed to
    (row, column) order, so grid cell [x, y] lands on pixel (x, y).
    """
    grid = np.asarray(grid, dtype=np.float64)
    if grid.ndim != 2:
        raise ValueError(f"expected a 2D grid, got shape {grid.shape}")
    pixels = np.clip(np.rint(grid * 255), 0, 255).astype(np.uint8)
    return np.ascontiguousarray(pixels.T)


def save_map(grid, resolution, name, fmt="jpg"):
    """Write a normalized noise map to ``<name>.<fmt>``.

    Args:
        grid: (resolution, resolution) array of values in [0, 1].
        resolution: Expected side length of ``grid``.
        name: Output path without extension. Parent directories are
            created as needed.
        fmt: File extension; Pillow picks the encoder from it.

    Returns:
        Path of the written file.
    """
    pixels = to_pixels(grid)
    if pixels.shape != (resolution, resolution):
        raise ValueError(
            f"grid shape {pixels.shape} does not match resolution {resolution}"
        )

    output = Path(f"{name}.{fmt.lstrip('.')}")
    output.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(pixels).save(str(output))
    logger.info("saved %dx%d map to %s", resolution, resolution, output)
    return output
