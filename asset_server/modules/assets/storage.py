"""Storage backends for static assets and the traversal-safe path resolver."""

from __future__ import annotations

import errno
import logging
import posixpath
from pathlib import Path
from typing import Protocol

from .exceptions import AssetNotFoundError, AssetReadError, InvalidAssetPathError

logger = logging.getLogger(__name__)

LOCAL = "local"
BUCKET = "bucket"


class AssetStorage(Protocol):
    def get(self, path: str) -> bytes:
        ...

    def exists(self, path: str) -> bool:
        ...


def resolve_asset_path(root: Path, request_path: str) -> Path:
    """Map a client supplied relative path onto ``root``.

    Raises :class:`InvalidAssetPathError` unless the canonical result is ``root`` itself
    or lies beneath it. Containment is compared segment by segment, so a sibling such as
    ``/data/assets-evil`` never passes for a root of ``/data/assets``.
    """
    if "\x00" in request_path:
        raise InvalidAssetPathError("path contains a NUL byte")

    normalized = posixpath.normpath(request_path).lstrip("/")
    if ".." in normalized.split("/"):
        raise InvalidAssetPathError("path contains a parent directory segment")

    try:
        canonical_root = root.resolve()
        candidate = (canonical_root / normalized).resolve()
    except (OSError, RuntimeError) as exc:
        # symlink loops surface here
        raise InvalidAssetPathError("path cannot be canonicalized") from exc
    try:
        candidate.relative_to(canonical_root)
    except ValueError:
        raise InvalidAssetPathError("path resolves outside the storage root") from None
    return candidate


class LocalAssetStorage:
    """Serves files from a directory on the local filesystem."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def get(self, path: str) -> bytes:
        target = resolve_asset_path(self.root, path)
        try:
            return target.read_bytes()
        except (FileNotFoundError, NotADirectoryError, IsADirectoryError) as exc:
            raise AssetNotFoundError(path) from exc
        except OSError as exc:
            if exc.errno == errno.ENAMETOOLONG:
                raise AssetNotFoundError(path) from exc
            raise AssetReadError(f"failed to read {path}: {exc}") from exc

    def exists(self, path: str) -> bool:
        try:
            return resolve_asset_path(self.root, path).is_file()
        except (InvalidAssetPathError, OSError):
            return False


def select_storage(location: str, root: Path) -> AssetStorage:
    """Pick the backend named by the ``image_storage_location`` flag."""
    if location == BUCKET:
        # TODO: object store backend; keep serving the bundled files until it exists.
        logger.warning("bucket storage not yet implemented, falling back to local")
    return LocalAssetStorage(root)


__all__ = [
    "AssetStorage",
    "BUCKET",
    "LOCAL",
    "LocalAssetStorage",
    "resolve_asset_path",
    "select_storage",
]
