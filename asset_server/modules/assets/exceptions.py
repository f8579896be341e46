"""Asset domain specific exceptions."""


class AssetError(Exception):
    """Base class for asset resolution errors."""


class InvalidAssetPathError(AssetError):
    """Raised when a requested path escapes the storage root or contains a traversal segment."""


class AssetNotFoundError(AssetError):
    """Raised when nothing readable exists at a validated path."""


class AssetReadError(AssetError):
    """Raised when the backing store fails to read an existing asset."""
