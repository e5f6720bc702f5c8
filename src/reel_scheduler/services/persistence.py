"""Load and save orchestration between the item store, local cache and remote.

Consistency model: every save replaces the entire collection, locally and
remotely (last writer wins at collection granularity, no per-item merge).
The local write is synchronous and always attempted first. The remote write
runs in the background, only while the link is online, and reports through
the notification channel instead of a return value.

Each save carries a sequence number. A newer remote save cancels one still
in flight; that cancellation is what keeps stale snapshots off the remote.
The sequence check is a backstop for writes that outlive their cancellation:
a save older than the latest completed one is not sent, and its result is
discarded if it arrives anyway.
"""

import asyncio
from enum import StrEnum
from typing import Any

from reel_scheduler.adapters.cache.base import CacheCorruptError, LocalCache
from reel_scheduler.adapters.remote.base import RemoteStore, RemoteStoreError
from reel_scheduler.config import settings
from reel_scheduler.domain.models import CollectionSnapshot, TrackedItem
from reel_scheduler.domain.seed import SEED_VIDEOS
from reel_scheduler.logging import get_logger
from reel_scheduler.services.connection import ConnectionMonitor
from reel_scheduler.services.notifications import NotificationCenter, NotificationLevel
from reel_scheduler.services.store import ItemStore, ItemValidationError

logger = get_logger(__name__)


class LoadSource(StrEnum):
    """Where the current collection came from."""

    REMOTE = "remote"
    CACHE = "cache"
    SEED = "seed"


def parse_videos(videos: Any) -> list[TrackedItem]:
    """Turn a wire ``videos`` list into items, skipping non-object entries."""
    if not isinstance(videos, list):
        raise ValueError("'videos' must be a list")
    return [TrackedItem.from_dict(v) for v in videos if isinstance(v, dict)]


class PersistenceCoordinator:
    """Moves whole-collection snapshots between the store and its backends."""

    def __init__(
        self,
        store: ItemStore,
        cache: LocalCache,
        remote: RemoteStore,
        monitor: ConnectionMonitor,
        notifications: NotificationCenter | None = None,
        version: str | None = None,
        remote_timeout: float | None = None,
    ) -> None:
        self.store = store
        self.cache = cache
        self.remote = remote
        self.monitor = monitor
        self.notifications = notifications or NotificationCenter()
        self.version = version or settings.data_version
        self.remote_timeout = (
            remote_timeout if remote_timeout is not None else settings.remote_timeout_seconds
        )
        self.last_load_source: LoadSource | None = None
        self.last_remote_update: str | None = None
        self._save_seq = 0
        self._last_completed_seq = 0
        self._remote_task: asyncio.Task[bool] | None = None

    @property
    def remote_save_pending(self) -> bool:
        return self._remote_task is not None and not self._remote_task.done()

    # Load

    async def load(self) -> list[TrackedItem]:
        """Populate the store: remote first, then local cache, then seed data."""
        if self.monitor.is_online:
            if await self._load_remote():
                return self.store.items()
        else:
            logger.info("load_offline_using_local_cache")

        if self._load_local():
            return self.store.items()

        self._load_seed()
        return self.store.items()

    async def _load_remote(self) -> bool:
        try:
            collection = await asyncio.wait_for(
                self.remote.fetch_all(), timeout=self.remote_timeout
            )
            items = parse_videos(collection.videos)
            self.store.replace_all(items)
        except (RemoteStoreError, TimeoutError) as e:
            logger.warning("remote_fetch_failed", error=str(e) or type(e).__name__)
            return False
        except (ValueError, ItemValidationError) as e:
            logger.warning("remote_data_invalid", error=str(e))
            return False

        self.last_load_source = LoadSource.REMOTE
        self.last_remote_update = collection.last_updated
        logger.info("loaded_from_remote", count=len(self.store))

        # Write through so the cache can take over when the link drops
        self._write_local(self.store.snapshot(self.version))
        return True

    def _load_local(self) -> bool:
        try:
            record = self.cache.read()
        except CacheCorruptError as e:
            logger.warning("local_cache_corrupt", error=str(e))
            return False

        if record is None:
            logger.info("local_cache_empty")
            return False

        try:
            items = parse_videos(record.get("videos"))
            self.store.replace_all(items)
        except (ValueError, ItemValidationError) as e:
            logger.warning("local_cache_corrupt", error=str(e))
            return False

        self.last_load_source = LoadSource.CACHE
        logger.info("loaded_from_local_cache", count=len(self.store))
        return True

    def _load_seed(self) -> None:
        self.store.replace_all(parse_videos(SEED_VIDEOS))
        self.last_load_source = LoadSource.SEED
        logger.info("loaded_seed_data", count=len(self.store))

    # Save

    def save(self) -> bool:
        """Write the current snapshot locally, then remotely in the background.

        Returns whether the local write succeeded. A failed local write is
        logged and reported but the in-memory state stays current.
        """
        snapshot = self.store.snapshot(self.version)
        seq = self._next_seq()
        local_ok = self._write_local(snapshot)

        if self.monitor.is_online:
            self._start_remote_save(snapshot, seq, notify=True)
        else:
            logger.debug("remote_save_skipped_offline", seq=seq)
        return local_ok

    async def sync(self) -> bool:
        """One-shot remote save of the current collection.

        Used to push edits made while offline once the link is back.
        """
        if not self.monitor.is_online:
            self.notifications.publish("Cannot sync - offline", NotificationLevel.WARNING)
            return False

        self.notifications.publish("Syncing data with server...", NotificationLevel.INFO)
        snapshot = self.store.snapshot(self.version)
        seq = self._next_seq()
        self._start_remote_save(snapshot, seq, notify=False)
        ok = bool(await self.wait_for_remote())

        if ok:
            self.notifications.publish(
                "Data synced with server", NotificationLevel.SUCCESS, count=len(snapshot.items)
            )
        else:
            self.notifications.publish("Sync failed", NotificationLevel.ERROR)
        return ok

    async def wait_for_remote(self) -> bool | None:
        """Wait for the newest remote save to settle and return its outcome.

        Returns None when no remote save was ever started.
        """
        while self._remote_task is not None:
            task = self._remote_task
            try:
                result = await task
            except asyncio.CancelledError:
                if task.cancelled() and self._remote_task is not task:
                    continue
                raise
            if self._remote_task is task:
                return result
        return None

    def _next_seq(self) -> int:
        self._save_seq += 1
        return self._save_seq

    def _write_local(self, snapshot: CollectionSnapshot) -> bool:
        try:
            self.cache.write(snapshot.to_cache_record())
        except (OSError, TypeError, ValueError) as e:
            logger.error("local_cache_write_failed", error=str(e))
            self.notifications.publish(
                f"Local save failed: {e}", NotificationLevel.ERROR, error=str(e)
            )
            return False
        logger.debug("local_cache_written", count=len(snapshot.items))
        return True

    def _start_remote_save(self, snapshot: CollectionSnapshot, seq: int, notify: bool) -> None:
        previous = self._remote_task
        if previous is not None and not previous.done():
            previous.cancel()
            logger.debug("remote_save_superseded", seq=seq)
        self._remote_task = asyncio.create_task(self._remote_save(snapshot, seq, notify))

    async def _remote_save(self, snapshot: CollectionSnapshot, seq: int, notify: bool) -> bool:
        if seq < self._last_completed_seq:
            logger.warning(
                "remote_save_stale_skipped", seq=seq, latest=self._last_completed_seq
            )
            return False

        try:
            result = await asyncio.wait_for(
                self.remote.replace_all(snapshot), timeout=self.remote_timeout
            )
        except (RemoteStoreError, TimeoutError) as e:
            logger.warning("remote_save_failed", seq=seq, error=str(e) or type(e).__name__)
            if notify:
                self.notifications.publish(
                    "Could not save to server, changes kept locally",
                    NotificationLevel.WARNING,
                    seq=seq,
                )
            return False

        if seq < self._last_completed_seq:
            logger.warning(
                "remote_save_stale_discarded", seq=seq, latest=self._last_completed_seq
            )
            return False
        self._last_completed_seq = seq

        if not result.success:
            logger.warning("remote_save_rejected", seq=seq, message=result.message)
            if notify:
                self.notifications.publish(
                    "Server rejected the save", NotificationLevel.WARNING, seq=seq
                )
            return False

        self.last_remote_update = result.last_updated
        logger.info("remote_save_completed", seq=seq, count=len(snapshot.items))
        if notify:
            self.notifications.publish("Saved to server", NotificationLevel.SUCCESS, seq=seq)
        return True
