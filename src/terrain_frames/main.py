"""Command line entry point."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .errors import InvalidArgument, TerrainFramesError
from .logging import configure_logging
from .math.geometry import compute_image_size, map_to_pixel
from .math.transitions import generate_transition
from .models.region import BoundingBox, GeoPoint
from .models.transition import Easing


def _bbox_from_args(values: list[float]) -> BoundingBox:
    west, south, east, north = values
    return BoundingBox.from_bounds(west, south, east, north)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="terrain-frames", description=__doc__)
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    bbox_help = "bounding box as west south east north"

    size = commands.add_parser("size", help="compute the image size for a bounding box")
    size.add_argument("--bbox", nargs=4, type=float, required=True, metavar=("W", "S", "E", "N"), help=bbox_help)
    size.add_argument("--major-dim", type=int, default=600)

    pixel = commands.add_parser("pixel", help="map a lon/lat point to image pixels")
    pixel.add_argument("--bbox", nargs=4, type=float, required=True, metavar=("W", "S", "E", "N"), help=bbox_help)
    pixel.add_argument("--size", nargs=2, type=int, required=True, metavar=("WIDTH", "HEIGHT"))
    pixel.add_argument("--point", nargs=2, type=float, required=True, metavar=("LON", "LAT"))

    transition = commands.add_parser("transition", help="print per-frame transition values")
    transition.add_argument("start", type=float)
    transition.add_argument("end", type=float)
    transition.add_argument("--steps", type=int, default=10)
    transition.add_argument("--one-way", action="store_true")
    transition.add_argument("--easing", choices=[e.value for e in Easing], default=Easing.COSINE.value)

    fetch = commands.add_parser("fetch", help="download elevation and overlay rasters")
    fetch.add_argument("--bbox", nargs=4, type=float, required=True, metavar=("W", "S", "E", "N"), help=bbox_help)
    fetch.add_argument("--major-dim", type=int, default=600)
    fetch.add_argument("--map-type", default="World_Imagery")
    fetch.add_argument("--out", type=Path, default=Path("."))
    return parser


def _run(args: argparse.Namespace) -> None:
    if args.command == "size":
        size = compute_image_size(_bbox_from_args(args.bbox), args.major_dim)
        print(size.width, size.height, size.major_axis)
    elif args.command == "pixel":
        lon, lat = args.point
        width, height = args.size
        position = map_to_pixel(GeoPoint(lon, lat), _bbox_from_args(args.bbox), width, height)
        print(position.x, position.y)
    elif args.command == "transition":
        for value in generate_transition(
            args.start,
            args.end,
            args.steps,
            one_way=args.one_way,
            easing=args.easing,
        ):
            print(f"{value:.6g}")
    elif args.command == "fetch":
        from .io import MAP_TYPES, ElevationClient, MapImageClient, ServiceConfig

        if args.map_type not in MAP_TYPES:
            raise InvalidArgument(f"Unknown map type {args.map_type!r}; expected one of {', '.join(MAP_TYPES)}")
        bbox = _bbox_from_args(args.bbox)
        size = compute_image_size(bbox, args.major_dim)
        config = ServiceConfig.from_env()
        ElevationClient(config).fetch(bbox, size, save_to=args.out / "elevation.tif")
        MapImageClient(config).fetch(bbox, size, args.map_type, save_to=args.out / "overlay.png")


def main(argv: Optional[list[str]] = None) -> int:
    """Run the terrain-frames command line tool."""
    args = _build_parser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else "INFO")
    try:
        _run(args)
    except TerrainFramesError as exc:
        logger.error("{}", exc)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
