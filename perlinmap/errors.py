"""Exceptions raised while building and sampling noise fields."""


class PerlinMapError(Exception):
    """Base class for all perlinmap errors."""


class InvalidResolution(PerlinMapError, ValueError):
    """A lattice or output resolution is too small to sample from."""

    def __init__(self, resolution, minimum=2, what="lattice"):
        self.resolution = resolution
        self.minimum = minimum
        super().__init__(
            f"{what} resolution must be an integer >= {minimum}, "
            f"got {resolution!r}"
        )


class DegenerateRange(PerlinMapError, ValueError):
    """Normalization was asked to stretch a constant field."""

    def __init__(self, value):
        self.value = value
        super().__init__(
            f"cannot normalize a constant field (min == max == {value!r})"
        )
