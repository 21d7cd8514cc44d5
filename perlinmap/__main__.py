"""CLI entry point for PerlinMap."""

import argparse
import logging
from pathlib import Path

from . import sample_octaves, sample_single_layer
from .image import save_map


def build_parser():
    parser = argparse.ArgumentParser(
        prog="perlinmap",
        description="Render a Perlin noise map and an octave noise map as images"
    )
    parser.add_argument(
        "--resolution", "-r", type=int, default=512,
        help="Output image size in pixels (default: 512)"
    )
    parser.add_argument(
        "--lattice", "-l", type=int, default=3,
        help="Lattice resolution of the single-layer map (default: 3)"
    )
    parser.add_argument(
        "--octaves", "-n", type=int, default=6,
        help="Number of octaves in the octave map (default: 6)"
    )
    parser.add_argument(
        "--start-resolution", type=int, default=3,
        help="Lattice resolution of the first octave (default: 3)"
    )
    parser.add_argument(
        "--persistence", "-p", type=float, default=0.5,
        help="Amplitude decay per octave (default: 0.5)"
    )
    parser.add_argument(
        "--lacunarity", "-L", type=float, default=2.0,
        help="Lattice growth per octave (default: 2.0)"
    )
    parser.add_argument(
        "--seed", "-s", type=int, default=1,
        help="Random seed for reproducible generation (default: 1)"
    )
    parser.add_argument(
        "--output-dir", "-o", default=".",
        help="Directory to write the images to (default: current directory)"
    )
    parser.add_argument(
        "--format", "-f", default="jpg",
        help="Image file extension (default: jpg)"
    )
    parser.add_argument(
        "--strict", action="store_true",
        help="Fail on constant fields instead of writing a flat grey map"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Log progress while generating"
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    output_dir = Path(args.output_dir)
    try:
        single = sample_single_layer(
            resolution=args.lattice,
            seed=args.seed,
            output_resolution=args.resolution,
            strict=args.strict,
        )
        octave = sample_octaves(
            octave_count=args.octaves,
            output_resolution=args.resolution,
            starting_lattice_resolution=args.start_resolution,
            persistence=args.persistence,
            lacunarity=args.lacunarity,
            seed=args.seed,
            strict=args.strict,
        )
    except ValueError as exc:
        parser.error(str(exc))

    for grid, name in ((single, "PerlinMap"), (octave, "OctavePerlinMap")):
        path = save_map(grid, args.resolution, output_dir / name, fmt=args.format)
        print(f"Saved {name} ({args.resolution}x{args.resolution}) to {path}")


if __name__ == "__main__":
    main()
