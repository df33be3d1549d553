"""Exception types raised by terrain_frames."""
from __future__ import annotations


class TerrainFramesError(Exception):
    """Base class for all library errors."""


class InvalidArgument(TerrainFramesError, ValueError):
    """A numeric argument is outside its documented domain."""


class InvalidBoundingBox(InvalidArgument):
    """Bounding box corners are degenerate, misordered or not finite."""


class ServiceError(TerrainFramesError, RuntimeError):
    """A remote elevation or map-image service failed to deliver a result."""
