"""In-memory remote store for tests and offline demos."""

import asyncio
from collections import deque
from datetime import UTC, datetime
from typing import Any

from reel_scheduler.adapters.remote.base import (
    RemoteCollection,
    RemoteSaveResult,
    RemoteStore,
    RemoteStoreError,
)
from reel_scheduler.domain.models import CollectionSnapshot
from reel_scheduler.logging import get_logger

logger = get_logger(__name__)


class InMemoryRemoteStore(RemoteStore):
    """Stub remote that keeps the collection in memory.

    Health answers can be scripted with ``health_script``; once the script
    runs out, ``online`` decides. ``fail_fetch`` / ``fail_save`` inject
    transport errors and ``save_delay`` slows writes down.
    """

    def __init__(
        self,
        videos: list[dict[str, Any]] | None = None,
        online: bool = True,
        version: str = "1.0.0",
    ) -> None:
        self.videos: list[dict[str, Any]] = [dict(v) for v in videos or []]
        self.version = version
        self.last_updated: str | None = None
        self.online = online
        self.health_script: deque[bool] = deque()
        self.fail_fetch = False
        self.fail_save = False
        self.save_delay = 0.0
        self.fetch_calls = 0
        self.save_calls = 0
        self.health_calls = 0

    def script_health(self, *results: bool) -> None:
        self.health_script.extend(results)

    async def fetch_all(self) -> RemoteCollection:
        self.fetch_calls += 1
        if self.fail_fetch or not self.online:
            raise RemoteStoreError("Stub remote fetch failed")
        return RemoteCollection(
            videos=[dict(v) for v in self.videos],
            version=self.version,
            last_updated=self.last_updated,
        )

    async def replace_all(self, snapshot: CollectionSnapshot) -> RemoteSaveResult:
        self.save_calls += 1
        if self.save_delay:
            await asyncio.sleep(self.save_delay)
        if self.fail_save or not self.online:
            raise RemoteStoreError("Stub remote save failed")

        payload = snapshot.to_remote_payload()
        self.videos = payload["videos"]
        self.version = payload["version"]
        self.last_updated = datetime.now(UTC).isoformat()
        logger.debug("stub_remote_saved", count=len(self.videos))
        return RemoteSaveResult(
            success=True,
            message="Data saved successfully",
            last_updated=self.last_updated,
        )

    async def health(self) -> bool:
        self.health_calls += 1
        if self.health_script:
            return self.health_script.popleft()
        return self.online
