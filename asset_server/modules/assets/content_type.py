"""Content type classification for served assets."""

from __future__ import annotations

import mimetypes
from pathlib import PurePosixPath

SVG_CONTENT_TYPE = "image/svg+xml"
DEFAULT_CONTENT_TYPE = "application/octet-stream"

# Placeholder artwork is often SVG saved under a raster extension such as ``.jpg``.
_SVG_MARKERS = (b"<svg", b"<?xml")
_SNIFF_MIN_LENGTH = 5


def looks_like_svg(data: bytes) -> bool:
    return len(data) >= _SNIFF_MIN_LENGTH and data.startswith(_SVG_MARKERS)


def content_type_for_extension(path: str) -> str | None:
    suffix = PurePosixPath(path).suffix.lower()
    if not suffix:
        return None
    if not mimetypes.inited:
        mimetypes.init()
    return mimetypes.types_map.get(suffix)


def detect_content_type(path: str, data: bytes) -> str:
    if looks_like_svg(data):
        return SVG_CONTENT_TYPE
    return content_type_for_extension(path) or DEFAULT_CONTENT_TYPE


__all__ = [
    "DEFAULT_CONTENT_TYPE",
    "SVG_CONTENT_TYPE",
    "content_type_for_extension",
    "detect_content_type",
    "looks_like_svg",
]
