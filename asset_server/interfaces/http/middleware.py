"""HTTP middleware: offline gate and request logging."""

from __future__ import annotations

import logging
import time
from typing import Iterable

from fastapi import Request
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from asset_server.modules.flags import FlagStore

access_logger = logging.getLogger("asset_server.access")

HEALTH_PATHS = ("/health", "/ready")


class OfflineGateMiddleware(BaseHTTPMiddleware):
    """Rejects every request but the health checks while the ``offline`` flag is on."""

    def __init__(self, app: ASGIApp, store: FlagStore, allow: Iterable[str] = HEALTH_PATHS) -> None:
        super().__init__(app)
        self.store = store
        self.allow = frozenset(allow)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.url.path not in self.allow and self.store.current.offline:
            return PlainTextResponse("service temporarily offline", status_code=503)
        return await call_next(request)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, skip: Iterable[str] = ()) -> None:
        super().__init__(app)
        self.skip = frozenset(skip)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.url.path in self.skip:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - started

        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"
        access_logger.info(
            '%s %s status=%d dur=%.6fs ua="%s"',
            request.method,
            target,
            response.status_code,
            elapsed,
            request.headers.get("user-agent", ""),
        )
        return response


__all__ = ["OfflineGateMiddleware", "HEALTH_PATHS", "RequestLoggingMiddleware"]
