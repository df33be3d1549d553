"""Geodesy utilities for sizing bounding boxes in projected frames."""
from __future__ import annotations

import functools
import math
from typing import Tuple

from pyproj import CRS, Geod, Transformer

from ..models.region import BoundingBox

WGS84_GEOGRAPHIC = CRS.from_epsg(4326)  # lon, lat
WEB_MERCATOR = CRS.from_epsg(3857)
WGS84_GEOD = Geod(ellps="WGS84")


@functools.lru_cache(maxsize=2)
def _geographic_to_mercator_transformer() -> Transformer:
    return Transformer.from_crs(WGS84_GEOGRAPHIC, WEB_MERCATOR, always_xy=True)


def longitude_scale(latitude_deg: float) -> float:
    """Ground length of one degree of longitude relative to one degree of latitude."""
    return math.cos(math.radians(latitude_deg))


def projected_extent(bbox: BoundingBox) -> Tuple[float, float]:
    """Return ``(east_west, north_south)`` extents in degrees-of-latitude units.

    Longitude degrees are scaled by the cosine of the box's mean latitude. This is
    a local flat-earth approximation, accurate for boxes spanning a few degrees.
    """
    scale = longitude_scale(bbox.center.latitude)
    return bbox.width_deg * scale, bbox.height_deg


def ground_extent_m(bbox: BoundingBox) -> Tuple[float, float]:
    """Return WGS84 geodesic ``(width_m, height_m)`` through the box centre.

    Width is measured along the mean latitude, height along the mean longitude.
    """
    center = bbox.center
    _, _, width_m = WGS84_GEOD.inv(bbox.west, center.latitude, bbox.east, center.latitude)
    _, _, height_m = WGS84_GEOD.inv(center.longitude, bbox.south, center.longitude, bbox.north)
    return float(width_m), float(height_m)


def bbox_to_web_mercator(bbox: BoundingBox) -> Tuple[float, float, float, float]:
    """Convert a bounding box to EPSG:3857 ``(xmin, ymin, xmax, ymax)`` in metres."""
    transformer = _geographic_to_mercator_transformer()
    xmin, ymin = transformer.transform(bbox.west, bbox.south)
    xmax, ymax = transformer.transform(bbox.east, bbox.north)
    return float(xmin), float(ymin), float(xmax), float(ymax)
