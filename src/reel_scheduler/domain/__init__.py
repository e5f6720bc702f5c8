"""Domain models and business logic."""

from reel_scheduler.domain.enums import (
    ContentType,
    FilterName,
    LinkState,
    Platform,
    ProductionStatus,
    UploadStatus,
)
from reel_scheduler.domain.models import (
    CalendarEvent,
    CollectionSnapshot,
    Reminder,
    Reminders,
    Stats,
    TrackedItem,
)

__all__ = [
    "CalendarEvent",
    "CollectionSnapshot",
    "ContentType",
    "FilterName",
    "LinkState",
    "Platform",
    "ProductionStatus",
    "Reminder",
    "Reminders",
    "Stats",
    "TrackedItem",
    "UploadStatus",
]
