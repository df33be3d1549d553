"""Service endpoint configuration."""
from __future__ import annotations

from dataclasses import dataclass, replace
import os
from typing import Mapping, Optional

from ..errors import InvalidArgument

USGS_3DEP_EXPORT_URL = (
    "https://elevation.nationalmap.gov/arcgis/rest/services/3DEPElevation/ImageServer/exportImage"
)
ARCGIS_PRINT_URL = (
    "https://utility.arcgisonline.com/arcgis/rest/services/Utilities/PrintingTools/GPServer/"
    "Export%20Web%20Map%20Task/execute"
)
ARCGIS_BASEMAP_ROOT = "https://services.arcgisonline.com/ArcGIS/rest/services"


@dataclass(slots=True, frozen=True)
class ServiceConfig:
    """Endpoints and request settings for the elevation and map-image services."""

    elevation_url: str = USGS_3DEP_EXPORT_URL
    print_url: str = ARCGIS_PRINT_URL
    basemap_root: str = ARCGIS_BASEMAP_ROOT
    timeout_s: float = 30.0
    user_agent: str = "terrain-frames"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServiceConfig":
        """Build a config, overriding defaults from ``TERRAIN_FRAMES_*`` variables."""
        env = os.environ if environ is None else environ
        config = cls()
        overrides = {}
        if env.get("TERRAIN_FRAMES_ELEVATION_URL"):
            overrides["elevation_url"] = env["TERRAIN_FRAMES_ELEVATION_URL"]
        if env.get("TERRAIN_FRAMES_PRINT_URL"):
            overrides["print_url"] = env["TERRAIN_FRAMES_PRINT_URL"]
        raw_timeout = (env.get("TERRAIN_FRAMES_TIMEOUT") or "").strip()
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as exc:
                raise InvalidArgument(f"TERRAIN_FRAMES_TIMEOUT is not a number: {raw_timeout}") from exc
            if timeout <= 0.0:
                raise InvalidArgument(f"TERRAIN_FRAMES_TIMEOUT must be positive, got {timeout}")
            overrides["timeout_s"] = timeout
        return replace(config, **overrides)
