"""Async SQLAlchemy engine construction and liveness checks."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from asset_server.core.config import Settings

from .dsn import redact_dsn

logger = logging.getLogger(__name__)

DEFAULT_POOL_SIZE = 5
DEFAULT_MAX_OVERFLOW = 5
DEFAULT_POOL_RECYCLE = 30 * 60


class DatabaseUnavailableError(RuntimeError):
    """Raised when the database does not accept connections before the deadline."""


def build_engine(settings: Settings) -> AsyncEngine:
    url = settings.database_url
    engine_kwargs: dict[str, Any] = {
        "echo": settings.database.echo or settings.debug,
    }
    if not url.startswith("sqlite"):
        engine_kwargs["pool_size"] = settings.database.pool_size or DEFAULT_POOL_SIZE
        engine_kwargs["max_overflow"] = (
            settings.database.max_overflow
            if settings.database.max_overflow is not None
            else DEFAULT_MAX_OVERFLOW
        )
        engine_kwargs["pool_recycle"] = settings.database.pool_recycle or DEFAULT_POOL_RECYCLE

    return create_async_engine(url, **engine_kwargs)


async def ping_database(engine: AsyncEngine) -> None:
    """Run ``SELECT 1``; any failure propagates to the caller."""
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))


async def wait_for_database(
    engine: AsyncEngine,
    timeout: float,
    attempt_timeout: float,
    *,
    delay: float = 1.0,
) -> None:
    """Ping until the database answers or ``timeout`` seconds have passed."""
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    attempt = 0
    while True:
        attempt += 1
        try:
            await asyncio.wait_for(ping_database(engine), attempt_timeout)
        except Exception as exc:  # pylint: disable=broad-except
            if attempt <= 2:
                logger.debug("database ping attempt=%d failed: %s", attempt, exc)
            elif attempt % 5 == 0:
                logger.warning("still waiting for database (attempt=%d): %s", attempt, exc)
            if loop.time() + delay >= deadline:
                raise DatabaseUnavailableError(
                    f"database not reachable after {attempt} attempts"
                ) from exc
            await asyncio.sleep(delay)
            continue
        logger.info("connected to %s", redact_dsn(engine.url))
        return


__all__ = [
    "DatabaseUnavailableError",
    "build_engine",
    "ping_database",
    "wait_for_database",
]
