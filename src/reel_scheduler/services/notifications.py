"""Out-of-band notification channel for sync and save outcomes."""

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from reel_scheduler.logging import get_logger

logger = get_logger(__name__)


class NotificationLevel(StrEnum):
    """Notification severity levels."""

    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class Notification:
    """A user-facing message about something that happened in the background."""

    message: str
    level: NotificationLevel = NotificationLevel.INFO
    context: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))


Subscriber = Callable[[Notification], None]


class NotificationCenter:
    """Fan-out of notifications to subscribers, with a bounded history.

    Subscribers are called synchronously in subscription order. A failing
    subscriber is logged and skipped; it never stops delivery to the rest.
    """

    def __init__(self, history_size: int = 50) -> None:
        self._subscribers: list[Subscriber] = []
        self.history: deque[Notification] = deque(maxlen=history_size)

    def subscribe(self, callback: Subscriber) -> None:
        self._subscribers.append(callback)

    def unsubscribe(self, callback: Subscriber) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def publish(
        self,
        message: str,
        level: NotificationLevel = NotificationLevel.INFO,
        **context: Any,
    ) -> Notification:
        notification = Notification(message=message, level=level, context=context)
        self.history.append(notification)

        for callback in list(self._subscribers):
            try:
                callback(notification)
            except Exception as e:
                logger.error(
                    "notification_subscriber_failed",
                    subscriber=getattr(callback, "__name__", repr(callback)),
                    error=str(e),
                )
        return notification

    def latest(self, level: NotificationLevel | None = None) -> Notification | None:
        """Most recent notification, optionally of a given level."""
        for notification in reversed(self.history):
            if level is None or notification.level is level:
                return notification
        return None
