"""Application service tying the store, link monitor, persistence and autosave together."""

import json
from datetime import UTC, date, datetime
from types import TracebackType
from typing import Any

from reel_scheduler.adapters.cache.base import LocalCache
from reel_scheduler.adapters.cache.file import JsonFileCache
from reel_scheduler.adapters.remote.base import RemoteStore
from reel_scheduler.adapters.remote.rest import HttpRemoteStore
from reel_scheduler.config import settings
from reel_scheduler.domain.enums import FilterName, LinkState
from reel_scheduler.domain.models import CalendarEvent, Reminders, Stats, TrackedItem
from reel_scheduler.logging import get_logger
from reel_scheduler.services import queries
from reel_scheduler.services.autosave import AutosaveScheduler
from reel_scheduler.services.connection import ConnectionMonitor
from reel_scheduler.services.notifications import NotificationCenter, NotificationLevel
from reel_scheduler.services.persistence import PersistenceCoordinator, parse_videos
from reel_scheduler.services.store import ItemStore, ItemValidationError

logger = get_logger(__name__)


class ImportValidationError(Exception):
    """Raised when an import payload is unusable. The collection is left unchanged."""

    pass


def export_filename(today: date | None = None) -> str:
    return f"reel-scheduler-backup-{(today or date.today()).isoformat()}.json"


class ReelScheduler:
    """Explicitly constructed service owning one session's state.

    All mutations go through the item store and then the save path. Reads
    are answered from the store by the pure query functions.

    Example:
        async with ReelScheduler(remote=..., cache=...) as scheduler:
            scheduler.add_item({"name": "Test"})
            print(scheduler.stats())
    """

    def __init__(
        self,
        remote: RemoteStore | None = None,
        cache: LocalCache | None = None,
        notifications: NotificationCenter | None = None,
        probe_timeout: float | None = None,
        monitor_interval: float | None = None,
        autosave_delay: float | None = None,
        version: str | None = None,
    ) -> None:
        self.remote = remote or HttpRemoteStore()
        self.cache = cache or JsonFileCache()
        self.notifications = notifications or NotificationCenter()
        self.version = version or settings.data_version

        self.store = ItemStore()
        self.monitor = ConnectionMonitor(
            self.remote, probe_timeout=probe_timeout, interval=monitor_interval
        )
        self.persistence = PersistenceCoordinator(
            store=self.store,
            cache=self.cache,
            remote=self.remote,
            monitor=self.monitor,
            notifications=self.notifications,
            version=self.version,
        )
        self.autosave = AutosaveScheduler(self.save, delay=autosave_delay)
        self.monitor.add_listener(self._on_link_change)

    async def __aenter__(self) -> "ReelScheduler":
        await self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.stop()

    # Lifecycle

    @property
    def link_state(self) -> LinkState:
        return self.monitor.state

    @property
    def is_online(self) -> bool:
        return self.monitor.is_online

    async def start(self, monitor: bool = True) -> list[TrackedItem]:
        """Probe the link, load the collection and optionally start monitoring."""
        await self.monitor.check()
        items = await self.persistence.load()
        if monitor:
            self.monitor.start_monitoring()
        logger.info(
            "scheduler_started",
            count=len(items),
            source=str(self.persistence.last_load_source),
            link=str(self.link_state),
        )
        return items

    async def stop(self) -> None:
        """Stop monitoring, flush a pending autosave and settle remote writes."""
        await self.monitor.stop_monitoring()
        self.autosave.flush()
        await self.persistence.wait_for_remote()
        await self.remote.aclose()
        logger.info("scheduler_stopped")

    def save(self) -> bool:
        # An explicit save covers whatever the autosave was waiting for
        self.autosave.cancel()
        return self.persistence.save()

    async def sync(self) -> bool:
        """Re-check the link and push the whole collection to the remote."""
        await self.monitor.check()
        return await self.persistence.sync()

    def mark_dirty(self) -> None:
        """Record an ambient mutation; saved once edits go quiet."""
        self.autosave.notify_mutation()

    # Mutations

    def add_item(self, data: TrackedItem | dict[str, Any]) -> TrackedItem:
        """Create an item from a TrackedItem or its camelCase wire form.

        Raises:
            ItemValidationError: If the name is empty or a date is malformed
        """
        item = data if isinstance(data, TrackedItem) else TrackedItem.from_dict(data)
        added = self.store.add(item)
        self.save()
        self.notifications.publish(
            "Video added successfully!", NotificationLevel.SUCCESS, item_id=added.id
        )
        return added

    def update_item(self, item_id: int, debounce: bool = False, **changes: Any) -> TrackedItem:
        """Apply field changes to an item.

        With ``debounce`` the save is left to the autosave scheduler, for
        rapid inline edits.

        Raises:
            ItemNotFoundError: If no item has the id
            ItemValidationError: If the result is invalid
        """
        updated = self.store.update(item_id, changes)
        if debounce:
            self.mark_dirty()
        else:
            self.save()
            self.notifications.publish(
                "Video updated successfully!", NotificationLevel.SUCCESS, item_id=item_id
            )
        return updated

    def delete_item(self, item_id: int) -> bool:
        removed = self.store.delete(item_id)
        if removed:
            self.save()
            self.notifications.publish(
                "Video deleted successfully!", NotificationLevel.SUCCESS, item_id=item_id
            )
        return removed

    def duplicate_item(self, item_id: int) -> TrackedItem:
        copy = self.store.duplicate(item_id)
        self.save()
        self.notifications.publish(
            "Video duplicated successfully!", NotificationLevel.SUCCESS, item_id=copy.id
        )
        return copy

    def clear_all(self) -> None:
        self.store.clear()
        self.save()
        self.notifications.publish("All data cleared!", NotificationLevel.SUCCESS)

    # Export / import

    def export_data(self) -> dict[str, Any]:
        return {
            "videos": [item.to_dict() for item in self.store],
            "exportDate": datetime.now(UTC).isoformat(),
            "version": self.version,
            "source": "server" if self.is_online else "local",
        }

    def import_data(self, payload: dict[str, Any] | str | bytes) -> int:
        """Replace the whole collection with an exported payload.

        Returns:
            Number of imported items

        Raises:
            ImportValidationError: If the payload is not JSON or lacks a
                ``videos`` list; the collection is left unchanged
        """
        if isinstance(payload, (str, bytes)):
            try:
                payload = json.loads(payload)
            except json.JSONDecodeError as e:
                raise ImportValidationError(f"Invalid JSON: {e}") from e

        if not isinstance(payload, dict) or not isinstance(payload.get("videos"), list):
            raise ImportValidationError("Invalid file format - missing videos array")

        try:
            self.store.replace_all(parse_videos(payload["videos"]))
        except ItemValidationError as e:
            raise ImportValidationError(f"Invalid file format - {e}") from e

        self.save()
        count = len(self.store)
        logger.info("data_imported", count=count)
        self.notifications.publish(
            "Data imported successfully!", NotificationLevel.SUCCESS, count=count
        )
        return count

    # Queries

    def view(
        self,
        search: str = "",
        filter_name: FilterName | str = FilterName.ALL,
        today: date | None = None,
    ) -> list[TrackedItem]:
        return queries.apply_view(self.store.items(), search, filter_name, today)

    def stats(self) -> Stats:
        return queries.stats(self.store.items())

    def reminders(self, today: date | None = None) -> Reminders:
        return queries.reminders(self.store.items(), today)

    def calendar(self, year: int, month: int) -> dict[int, list[CalendarEvent]]:
        return queries.calendar_events(self.store.items(), year, month)

    def _on_link_change(self, old: LinkState, new: LinkState) -> None:
        if new is LinkState.ONLINE:
            self.notifications.publish(
                "Back online - use sync to push local changes", NotificationLevel.INFO
            )
        else:
            self.notifications.publish(
                "Offline - changes are saved locally", NotificationLevel.WARNING
            )
