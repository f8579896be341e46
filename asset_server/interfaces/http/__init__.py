from fastapi import APIRouter

from asset_server.interfaces.http.routers import assets, flags, health


def create_http_router(assets_prefix: str = "/assets") -> APIRouter:
    router = APIRouter()
    router.include_router(health.router)
    router.include_router(flags.router)
    router.include_router(assets.create_assets_router(assets_prefix))
    return router


__all__ = ["create_http_router"]
