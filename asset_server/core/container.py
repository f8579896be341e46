"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine

from asset_server.core.config import Settings, get_settings
from asset_server.infrastructure.database import build_engine
from asset_server.modules.flags import FileFlagSource, FlagSnapshot, FlagStore, FlagWatcher


def default_flags(settings: Settings) -> FlagSnapshot:
    return FlagSnapshot(
        offline=settings.flags.offline,
        log_level=settings.flags.log_level,
        image_storage_location=settings.flags.image_storage_location,
    )


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    flags: FlagStore = field(default=None)  # type: ignore[assignment]
    flag_source: FileFlagSource = field(default=None)  # type: ignore[assignment]
    asset_root: Path = field(init=False)
    _engine: Optional[AsyncEngine] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        defaults = default_flags(self.settings)
        if self.flags is None:
            self.flags = FlagStore(defaults)
        if self.flag_source is None:
            self.flag_source = FileFlagSource(self.settings.flags.path, defaults)
        # Resolved once; the root does not move for the life of the process.
        self.asset_root = self.settings.asset_root

    @property
    def engine(self) -> AsyncEngine:
        self.init_infrastructure()
        assert self._engine is not None  # for mypy
        return self._engine

    def init_infrastructure(self) -> None:
        """Ensure infrastructure singletons (database engine, etc.) are initialised."""
        if self._engine is None:
            self._engine = build_engine(self.settings)

    async def dispose_engine(self) -> None:
        engine, self._engine = self._engine, None
        if engine is not None:
            await engine.dispose()

    def build_flag_watcher(self) -> FlagWatcher:
        return FlagWatcher(self.flag_source, self.flags, self.settings.flags.refresh_interval)


@lru_cache()
def get_container() -> ApplicationContainer:
    container = ApplicationContainer(settings=get_settings())
    container.init_infrastructure()
    return container


__all__ = ["ApplicationContainer", "default_flags", "get_container"]
