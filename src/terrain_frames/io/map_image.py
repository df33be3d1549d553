"""ArcGIS basemap overlay image client."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np
from loguru import logger

from ..errors import InvalidArgument, ServiceError
from ..models.raster import ImageSize
from ..models.region import BoundingBox
from .config import ServiceConfig
from .http import decode_image, get_bytes, get_json, make_session, save_bytes

MAP_TYPES = ("World_Street_Map", "World_Imagery", "World_Topo_Map")
DEFAULT_MAP_TYPE = "World_Imagery"


class MapImageClient:
    """Render a basemap extent through the ArcGIS "Export Web Map" print task."""

    def __init__(self, config: Optional[ServiceConfig] = None, session: Any = None) -> None:
        self.config = config or ServiceConfig()
        self.session = session if session is not None else make_session(self.config)

    def web_map_document(
        self,
        bbox: BoundingBox,
        size: ImageSize,
        map_type: str = DEFAULT_MAP_TYPE,
        wkid: int = 4326,
    ) -> Dict[str, Any]:
        if map_type not in MAP_TYPES:
            raise InvalidArgument(f"Unknown map type {map_type!r}; expected one of {', '.join(MAP_TYPES)}")
        layer_url = f"{self.config.basemap_root}/{map_type}/MapServer"
        return {
            "baseMap": {"baseMapLayers": [{"url": layer_url}]},
            "exportOptions": {"outputSize": [size.width, size.height]},
            "mapOptions": {
                "extent": {
                    "spatialReference": {"wkid": wkid},
                    "xmin": bbox.west,
                    "ymin": bbox.south,
                    "xmax": bbox.east,
                    "ymax": bbox.north,
                }
            },
        }

    def build_query(self, bbox: BoundingBox, size: ImageSize, map_type: str = DEFAULT_MAP_TYPE) -> Dict[str, Any]:
        return {
            "f": "json",
            "Format": "PNG32",
            "Layout_Template": "MAP_ONLY",
            "Web_Map_as_JSON": json.dumps(self.web_map_document(bbox, size, map_type)),
        }

    def fetch(
        self,
        bbox: BoundingBox,
        size: ImageSize,
        map_type: str = DEFAULT_MAP_TYPE,
        save_to: Optional[Path] = None,
    ) -> np.ndarray:
        """Download an RGB(A) overlay image covering ``bbox`` at ``size``."""
        query = self.build_query(bbox, size, map_type)
        logger.info("Requesting {} overlay for {} at {}", map_type, bbox.as_extent(), size.size_str)
        payload = get_json(self.session, self.config.print_url, query, self.config.timeout_s)

        try:
            image_url = payload["results"][0]["value"]["url"]
        except (KeyError, IndexError, TypeError) as exc:
            raise ServiceError("Print service response did not include an output image url") from exc

        content = get_bytes(self.session, image_url, self.config.timeout_s)
        save_bytes(content, save_to)
        image = decode_image(content, image_url)
        logger.info("Overlay image {}x{}", image.shape[1], image.shape[0])
        return image
