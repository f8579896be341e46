"""Background refresh of flag snapshots."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from asset_server.core.logging import get_level, set_level

from .exceptions import FlagSourceError
from .models import FlagSnapshot
from .source import FileFlagSource
from .store import FlagStore

logger = logging.getLogger(__name__)


class FlagWatcher:
    def __init__(self, source: FileFlagSource, store: FlagStore, interval: float = 5.0) -> None:
        self.source = source
        self.store = store
        self.interval = interval
        self._stopped = asyncio.Event()
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def refresh(self) -> FlagSnapshot:
        """Load once and publish; on source errors keep the snapshot in force."""
        try:
            snapshot = await asyncio.to_thread(self.source.load)
        except FlagSourceError as exc:
            logger.warning("flag refresh failed, keeping previous values: %s", exc)
            return self.store.current

        previous = self.store.publish(snapshot)
        if snapshot.log_level != previous.log_level:
            set_level(snapshot.log_level)
            logger.info("log level changed to %s", get_level())
        if snapshot.offline != previous.offline:
            logger.warning("offline mode %s", "enabled" if snapshot.offline else "disabled")
        return snapshot

    def start(self) -> None:
        if self.running:
            return
        self._stopped.clear()
        self._task = asyncio.create_task(self._run())

    async def stop(self) -> None:
        self._stopped.set()
        task, self._task = self._task, None
        if task is not None:
            await task

    async def _run(self) -> None:
        while not self._stopped.is_set():
            try:
                await asyncio.wait_for(self._stopped.wait(), timeout=self.interval)
            except asyncio.TimeoutError:
                try:
                    await self.refresh()
                except Exception:  # pylint: disable=broad-except
                    logger.exception("flag refresh crashed, retrying in %.1fs", self.interval)
        logger.debug("flag watcher stopped")
