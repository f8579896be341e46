import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from asset_server import __version__
from asset_server.core.container import ApplicationContainer, get_container
from asset_server.core.logging import configure_logging, get_level, set_level
from asset_server.infrastructure.database import wait_for_database
from asset_server.interfaces.http import create_http_router
from asset_server.interfaces.http.middleware import (
    HEALTH_PATHS,
    OfflineGateMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container: ApplicationContainer = app.state.container
    settings = container.settings
    configure_logging(settings.flags.log_level)

    try:
        await wait_for_database(
            container.engine,
            settings.database.startup_timeout,
            settings.database.connect_timeout,
        )
    except Exception:
        await container.dispose_engine()
        raise

    watcher = container.build_flag_watcher()
    flags = await watcher.refresh()
    logger.info(
        "feature flags ready: offline=%s, logLevel=%s",
        flags.offline,
        flags.log_level,
    )
    set_level(flags.log_level)
    logger.info("log level set to %s", get_level())
    logger.info("serving assets from %s under %s", container.asset_root, settings.assets.url_prefix)

    watcher.start()
    app.state.flag_watcher = watcher
    try:
        yield
    finally:
        try:
            await watcher.stop()
        finally:
            await container.dispose_engine()


def create_app(container: Optional[ApplicationContainer] = None) -> FastAPI:
    container = container or get_container()
    settings = container.settings

    app = FastAPI(
        title=settings.project_name,
        description="Static asset service",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = container

    # Last added runs first: the offline gate sees requests before the logger does.
    app.add_middleware(RequestLoggingMiddleware, skip=HEALTH_PATHS)
    app.add_middleware(OfflineGateMiddleware, store=container.flags)

    app.include_router(create_http_router(settings.assets.url_prefix))
    return app
