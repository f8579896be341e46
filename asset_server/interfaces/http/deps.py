"""Reusable FastAPI dependencies."""

from fastapi import Depends, Request

from asset_server.core.config import Settings
from asset_server.core.container import ApplicationContainer
from asset_server.modules.assets import AssetService
from asset_server.modules.flags import FlagSnapshot


def get_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


def get_settings(container: ApplicationContainer = Depends(get_container)) -> Settings:
    return container.settings


def get_flags(container: ApplicationContainer = Depends(get_container)) -> FlagSnapshot:
    return container.flags.current


def get_asset_service(
    container: ApplicationContainer = Depends(get_container),
    flags: FlagSnapshot = Depends(get_flags),
) -> AssetService:
    return AssetService.for_location(flags.image_storage_location, container.asset_root)


__all__ = [
    "get_asset_service",
    "get_container",
    "get_flags",
    "get_settings",
]
