"""Value objects describing map regions, raster sizes and transitions."""

from .raster import Axis, ImageSize, PixelPosition
from .region import BoundingBox, GeoPoint
from .transition import Easing, TransitionSpec

__all__ = [
    "Axis",
    "BoundingBox",
    "Easing",
    "GeoPoint",
    "ImageSize",
    "PixelPosition",
    "TransitionSpec",
]
