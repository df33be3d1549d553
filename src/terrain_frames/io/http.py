"""Shared request and decoding helpers for the ArcGIS REST clients."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import cv2
import numpy as np
import requests
from loguru import logger

from ..errors import ServiceError
from .config import ServiceConfig


def make_session(config: ServiceConfig) -> requests.Session:
    session = requests.Session()
    session.headers.update({"User-Agent": config.user_agent})
    return session


def get_json(session: Any, url: str, params: Dict[str, Any], timeout: float) -> Dict[str, Any]:
    """GET ``url`` and return its JSON body, raising on HTTP or ArcGIS errors."""
    try:
        response = session.get(url, params=params, timeout=timeout)
        response.raise_for_status()
        payload = response.json()
    except requests.RequestException as exc:
        raise ServiceError(f"Request to {url} failed: {exc}") from exc
    except ValueError as exc:
        raise ServiceError(f"Response from {url} is not valid JSON") from exc

    if not isinstance(payload, dict):
        raise ServiceError(f"Unexpected response from {url}: {payload!r}")
    if "error" in payload:
        error = payload["error"] or {}
        message = error.get("message") if isinstance(error, dict) else error
        raise ServiceError(f"Service at {url} reported an error: {message}")
    return payload


def get_bytes(session: Any, url: str, timeout: float) -> bytes:
    try:
        response = session.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise ServiceError(f"Download of {url} failed: {exc}") from exc
    logger.debug("Downloaded {} bytes from {}", len(response.content), url)
    return response.content


def decode_image(content: bytes, source: str) -> np.ndarray:
    """Decode PNG/JPEG/TIFF bytes, converting colour images to RGB(A) channel order."""
    buffer = np.frombuffer(content, dtype=np.uint8)
    image = cv2.imdecode(buffer, cv2.IMREAD_UNCHANGED) if buffer.size else None
    if image is None:
        raise ServiceError(f"Unable to decode image returned by {source}")
    if image.ndim == 3 and image.shape[2] == 4:
        image = cv2.cvtColor(image, cv2.COLOR_BGRA2RGBA)
    elif image.ndim == 3 and image.shape[2] == 3:
        image = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
    return image


def save_bytes(content: bytes, path: Optional[Path]) -> None:
    if path is None:
        return
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
    logger.info("Saved {}", path)
