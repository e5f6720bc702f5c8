"""Application services."""

from reel_scheduler.services.autosave import AutosaveScheduler, CancellableTimer
from reel_scheduler.services.connection import ConnectionMonitor
from reel_scheduler.services.notifications import (
    Notification,
    NotificationCenter,
    NotificationLevel,
)
from reel_scheduler.services.persistence import LoadSource, PersistenceCoordinator
from reel_scheduler.services.scheduler import ImportValidationError, ReelScheduler
from reel_scheduler.services.store import ItemNotFoundError, ItemStore, ItemValidationError

__all__ = [
    "AutosaveScheduler",
    "CancellableTimer",
    "ConnectionMonitor",
    "ImportValidationError",
    "ItemNotFoundError",
    "ItemStore",
    "ItemValidationError",
    "LoadSource",
    "Notification",
    "NotificationCenter",
    "NotificationLevel",
    "PersistenceCoordinator",
    "ReelScheduler",
]
