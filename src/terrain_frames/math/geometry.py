"""Image sizing and lon/lat to pixel mapping for bounding boxes."""
from __future__ import annotations

import math
import numbers

from loguru import logger

from ..errors import InvalidArgument, InvalidBoundingBox
from ..models.raster import Axis, ImageSize, PixelPosition
from ..models.region import BoundingBox, GeoPoint
from .geodesy import projected_extent


def _require_positive_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidArgument(f"{name} must be positive, got {value}")
    return int(value)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def image_size_for_extent(width_units: float, height_units: float, major_dim: int) -> ImageSize:
    """Scale a projected extent so its larger side spans ``major_dim`` pixels.

    The minor side is rounded to the nearest pixel and never drops below one.
    A square extent reports the width as its major axis.
    """
    major_dim = _require_positive_int("major_dim", major_dim)
    if not (math.isfinite(width_units) and math.isfinite(height_units)):
        raise InvalidBoundingBox(f"Extent must be finite, got {width_units} x {height_units}")
    if width_units <= 0.0 or height_units <= 0.0:
        raise InvalidBoundingBox(f"Extent must be positive on both axes, got {width_units} x {height_units}")

    if width_units >= height_units:
        minor = max(1, _round_half_up(major_dim * height_units / width_units))
        return ImageSize(width=major_dim, height=minor, major_axis=Axis.WIDTH)
    minor = max(1, _round_half_up(major_dim * width_units / height_units))
    return ImageSize(width=minor, height=major_dim, major_axis=Axis.HEIGHT)


def aspect_ratio(bbox: BoundingBox) -> float:
    """Projected width over height of ``bbox``."""
    east_west, north_south = projected_extent(bbox)
    return east_west / north_south


def compute_image_size(bbox: BoundingBox, major_dim: int) -> ImageSize:
    """Return the pixel size matching ``bbox``'s projected aspect ratio.

    Parameters
    ----------
    bbox:
        Region to be rendered.
    major_dim:
        Pixel length of the larger image side.

    Raises
    ------
    InvalidArgument
        If ``major_dim`` is not a positive integer.
    InvalidBoundingBox
        If the projected box has no extent on one of its axes.
    """
    east_west, north_south = projected_extent(bbox)
    size = image_size_for_extent(east_west, north_south, major_dim)
    logger.debug(
        "Sized bbox {} to {}x{} (major axis {})",
        bbox.as_extent(),
        size.width,
        size.height,
        size.major_axis,
    )
    return size


def _fractions(point: GeoPoint, bbox: BoundingBox) -> tuple[float, float]:
    if bbox.width_deg <= 0.0 or bbox.height_deg <= 0.0:
        raise InvalidBoundingBox(f"Bounding box {bbox.as_extent()} has zero extent")
    frac_x = (point.longitude - bbox.west) / bbox.width_deg
    # Image rows grow southwards from the north edge.
    frac_y = (bbox.north - point.latitude) / bbox.height_deg
    return frac_x, frac_y


def map_to_pixel(point: GeoPoint, bbox: BoundingBox, image_width: int, image_height: int) -> PixelPosition:
    """Map a lon/lat point to pixel coordinates of an image covering ``bbox``.

    The origin is the top-left (north-west) corner. Points outside the box are
    extrapolated and may fall outside the image; that is left to the caller.
    """
    image_width = _require_positive_int("image_width", image_width)
    image_height = _require_positive_int("image_height", image_height)
    if not (math.isfinite(point.longitude) and math.isfinite(point.latitude)):
        raise InvalidArgument(f"Point coordinates must be finite, got ({point.longitude}, {point.latitude})")
    frac_x, frac_y = _fractions(point, bbox)
    x = frac_x * image_width
    y = frac_y * image_height
    if not (math.isfinite(x) and math.isfinite(y)):
        raise InvalidArgument(
            f"Point ({point.longitude}, {point.latitude}) is too far from the bounding box to map to pixels"
        )
    position = PixelPosition(x=_round_half_up(x), y=_round_half_up(y))
    if not position.inside(image_width, image_height):
        logger.debug(
            "Point ({}, {}) maps outside the {}x{} image at ({}, {})",
            point.longitude,
            point.latitude,
            image_width,
            image_height,
            position.x,
            position.y,
        )
    return position


def map_to_pixel_size(point: GeoPoint, bbox: BoundingBox, size: ImageSize) -> PixelPosition:
    """Convenience wrapper taking an :class:`ImageSize`."""
    return map_to_pixel(point, bbox, size.width, size.height)


def pixel_to_geo(position: PixelPosition, bbox: BoundingBox, image_width: int, image_height: int) -> GeoPoint:
    """Inverse of :func:`map_to_pixel` (without the rounding)."""
    image_width = _require_positive_int("image_width", image_width)
    image_height = _require_positive_int("image_height", image_height)
    longitude = bbox.west + (position.x / float(image_width)) * bbox.width_deg
    latitude = bbox.north - (position.y / float(image_height)) * bbox.height_deg
    return GeoPoint(longitude, latitude)
