"""Static asset endpoint."""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, Response

from asset_server.core.config import Settings
from asset_server.interfaces.http.deps import get_asset_service, get_settings
from asset_server.modules.assets import (
    AssetNotFoundError,
    AssetReadError,
    AssetService,
    InvalidAssetPathError,
)


def create_assets_router(prefix: str = "/assets") -> APIRouter:
    router = APIRouter(prefix=prefix.rstrip("/"), tags=["assets"])

    @router.get("/{asset_path:path}", summary="Serve a static asset")
    def get_asset(
        asset_path: str,
        service: AssetService = Depends(get_asset_service),
        settings: Settings = Depends(get_settings),
    ):
        try:
            asset = service.resolve(asset_path)
        except (InvalidAssetPathError, AssetNotFoundError):
            # Same answer for both so probing clients learn nothing about the layout.
            return PlainTextResponse("not found", status_code=404)
        except AssetReadError:
            return PlainTextResponse("internal server error", status_code=500)

        return Response(
            content=asset.data,
            media_type=asset.content_type,
            headers={"Cache-Control": settings.assets.cache_control},
        )

    return router


__all__ = ["create_assets_router"]
