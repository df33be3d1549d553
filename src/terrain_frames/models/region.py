"""Geographic region domain models."""
from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Dict

from ..errors import InvalidBoundingBox


@dataclass(slots=True, frozen=True)
class GeoPoint:
    """A longitude/latitude pair in decimal degrees (WGS84)."""

    longitude: float  # degrees
    latitude: float  # degrees

    def to_dict(self) -> Dict[str, float]:
        return {"longitude": self.longitude, "latitude": self.latitude}


@dataclass(slots=True, frozen=True)
class BoundingBox:
    """Rectangular region spanned by a south-west and a north-east corner.

    ``p1`` must be strictly south-west of ``p2``. Use :meth:`from_corners`
    when the corner order is not known in advance.
    """

    p1: GeoPoint
    p2: GeoPoint

    def __post_init__(self) -> None:
        coords = (self.p1.longitude, self.p1.latitude, self.p2.longitude, self.p2.latitude)
        if not all(math.isfinite(value) for value in coords):
            raise InvalidBoundingBox(f"Bounding box corners must be finite, got {coords}")
        for latitude in (self.p1.latitude, self.p2.latitude):
            if not -90.0 <= latitude <= 90.0:
                raise InvalidBoundingBox(f"Latitude {latitude} is outside [-90, 90]")
        if self.p1.longitude >= self.p2.longitude:
            raise InvalidBoundingBox(
                f"West longitude {self.p1.longitude} must be less than east longitude {self.p2.longitude}"
            )
        if self.p1.latitude >= self.p2.latitude:
            raise InvalidBoundingBox(
                f"South latitude {self.p1.latitude} must be less than north latitude {self.p2.latitude}"
            )

    @classmethod
    def from_corners(cls, a: GeoPoint, b: GeoPoint) -> "BoundingBox":
        """Build a box from any two opposite corners."""
        return cls(
            GeoPoint(min(a.longitude, b.longitude), min(a.latitude, b.latitude)),
            GeoPoint(max(a.longitude, b.longitude), max(a.latitude, b.latitude)),
        )

    @classmethod
    def from_bounds(cls, west: float, south: float, east: float, north: float) -> "BoundingBox":
        return cls(GeoPoint(west, south), GeoPoint(east, north))

    @property
    def west(self) -> float:
        return self.p1.longitude

    @property
    def east(self) -> float:
        return self.p2.longitude

    @property
    def south(self) -> float:
        return self.p1.latitude

    @property
    def north(self) -> float:
        return self.p2.latitude

    @property
    def width_deg(self) -> float:
        """East-west extent in degrees of longitude."""
        return self.east - self.west

    @property
    def height_deg(self) -> float:
        """North-south extent in degrees of latitude."""
        return self.north - self.south

    @property
    def center(self) -> GeoPoint:
        return GeoPoint((self.west + self.east) / 2.0, (self.south + self.north) / 2.0)

    def as_extent(self) -> str:
        """Return ``west,south,east,north`` as expected by ArcGIS ``bbox`` parameters."""
        return ",".join(repr(float(v)) for v in (self.west, self.south, self.east, self.north))

    def to_dict(self) -> Dict[str, float]:
        return {
            "west": self.west,
            "south": self.south,
            "east": self.east,
            "north": self.north,
        }
