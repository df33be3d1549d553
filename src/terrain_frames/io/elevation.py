"""USGS 3DEP elevation raster client."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np
from loguru import logger

from ..errors import ServiceError
from ..models.raster import ImageSize
from ..models.region import BoundingBox
from .config import ServiceConfig
from .http import decode_image, get_bytes, get_json, make_session, save_bytes

WGS84_WKID = 4326
# 3DEP fills F32 cells without data with the most negative float32 (~ -3.4e38).
NODATA_THRESHOLD = -1.0e30


def mask_nodata(grid: np.ndarray, threshold: float = NODATA_THRESHOLD) -> np.ndarray:
    """Return a float32 copy of ``grid`` with nodata sentinel cells set to NaN."""
    masked = np.array(grid, dtype=np.float32, copy=True)
    masked[masked <= threshold] = np.nan
    return masked


class ElevationClient:
    """Fetch elevation rasters from the 3DEP ``exportImage`` endpoint.

    The service answers with JSON pointing at a float32 GeoTIFF, which is then
    downloaded and decoded into a ``(height, width)`` array, row 0 north.
    """

    def __init__(self, config: Optional[ServiceConfig] = None, session: Any = None) -> None:
        self.config = config or ServiceConfig()
        self.session = session if session is not None else make_session(self.config)

    @staticmethod
    def build_query(bbox: BoundingBox, size: ImageSize, wkid: int = WGS84_WKID) -> Dict[str, Any]:
        return {
            "bbox": bbox.as_extent(),
            "bboxSR": wkid,
            "imageSR": wkid,
            "size": size.size_str,
            "format": "tiff",
            "pixelType": "F32",
            "noDataInterpretation": "esriNoDataMatchAny",
            "interpolation": "+RSP_BilinearInterpolation",
            "f": "json",
        }

    def fetch(self, bbox: BoundingBox, size: ImageSize, save_to: Optional[Path] = None) -> np.ndarray:
        """Download the elevation grid for ``bbox`` at ``size``.

        Raises
        ------
        ServiceError
            If the service errors, omits the raster link, or returns bytes that
            do not decode to a single-band grid.
        """
        logger.info("Requesting elevation for {} at {}", bbox.as_extent(), size.size_str)
        payload = get_json(
            self.session,
            self.config.elevation_url,
            self.build_query(bbox, size),
            self.config.timeout_s,
        )
        href = payload.get("href")
        if not href:
            raise ServiceError("Elevation service response did not include an image href")

        content = get_bytes(self.session, href, self.config.timeout_s)
        save_bytes(content, save_to)
        grid = decode_image(content, href)
        if grid.ndim != 2:
            raise ServiceError(f"Expected a single-band elevation raster, got shape {grid.shape}")
        grid = mask_nodata(grid)
        logger.info(
            "Elevation grid {}x{}, range {:.1f} to {:.1f} m",
            grid.shape[1],
            grid.shape[0],
            float(np.nanmin(grid)),
            float(np.nanmax(grid)),
        )
        return grid
