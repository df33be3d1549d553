"""Clients for the elevation and basemap services feeding terrain renders."""

from .config import ServiceConfig
from .elevation import ElevationClient
from .map_image import MAP_TYPES, MapImageClient

__all__ = [
    "ElevationClient",
    "MAP_TYPES",
    "MapImageClient",
    "ServiceConfig",
]
