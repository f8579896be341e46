"""Liveness and readiness checks."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from asset_server.core.container import ApplicationContainer
from asset_server.infrastructure.database import ping_database
from asset_server.interfaces.http.deps import get_container

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", response_class=PlainTextResponse, summary="Liveness check")
async def health() -> str:
    return "ok"


@router.get("/ready", response_class=PlainTextResponse, summary="Readiness check")
async def ready(container: ApplicationContainer = Depends(get_container)):
    try:
        await ping_database(container.engine)
    except Exception as exc:  # pylint: disable=broad-except
        logger.warning("readiness check failed: %s", exc)
        return PlainTextResponse("db not ready", status_code=503)
    return PlainTextResponse("ready")
