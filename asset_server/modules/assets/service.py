"""Asset service resolving client paths to bytes plus a content type."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .content_type import detect_content_type
from .exceptions import AssetNotFoundError, AssetReadError, InvalidAssetPathError
from .models import ResolvedAsset
from .storage import AssetStorage, select_storage

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AssetService:
    storage: AssetStorage

    @classmethod
    def for_location(cls, location: str, root: Path) -> "AssetService":
        return cls(select_storage(location, root))

    def resolve(self, path: str) -> ResolvedAsset:
        try:
            data = self.storage.get(path)
        except InvalidAssetPathError as exc:
            logger.debug("rejected asset path %r: %s", path, exc)
            raise
        except AssetNotFoundError:
            logger.debug("asset not found: %s", path)
            raise
        except AssetReadError as exc:
            logger.debug("asset read failed: %s (%r)", path, exc.__cause__ or exc)
            raise
        return ResolvedAsset(path=path, data=data, content_type=detect_content_type(path, data))

    def exists(self, path: str) -> bool:
        return self.storage.exists(path)
