"""Raster size and pixel position models."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Axis(Enum):
    """Image dimension treated as the driving (major) one."""

    WIDTH = "width"
    HEIGHT = "height"

    def __str__(self) -> str:
        return self.value


@dataclass(slots=True, frozen=True)
class ImageSize:
    """Pixel dimensions derived from a bounding box."""

    width: int
    height: int
    major_axis: Axis

    @property
    def size_str(self) -> str:
        """``width,height`` as used by the ArcGIS ``size`` query parameter."""
        return f"{self.width},{self.height}"

    def as_tuple(self) -> Tuple[int, int]:
        return self.width, self.height


@dataclass(slots=True, frozen=True)
class PixelPosition:
    """A position in image space, origin at the top-left corner."""

    x: int
    y: int

    def inside(self, width: int, height: int) -> bool:
        """Return True when the position lies on or within the image bounds."""
        return 0 <= self.x <= width and 0 <= self.y <= height
