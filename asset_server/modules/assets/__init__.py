"""Static asset domain exports."""

from .content_type import DEFAULT_CONTENT_TYPE, SVG_CONTENT_TYPE, detect_content_type
from .exceptions import AssetError, AssetNotFoundError, AssetReadError, InvalidAssetPathError
from .models import ResolvedAsset
from .service import AssetService
from .storage import AssetStorage, LocalAssetStorage, resolve_asset_path, select_storage

__all__ = [
    "AssetError",
    "AssetNotFoundError",
    "AssetReadError",
    "AssetService",
    "AssetStorage",
    "DEFAULT_CONTENT_TYPE",
    "InvalidAssetPathError",
    "LocalAssetStorage",
    "ResolvedAsset",
    "SVG_CONTENT_TYPE",
    "detect_content_type",
    "resolve_asset_path",
    "select_storage",
]
