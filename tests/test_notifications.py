"""Tests for the notification channel."""

from reel_scheduler.services.notifications import (
    Notification,
    NotificationCenter,
    NotificationLevel,
)


def test_publish_reaches_subscribers_in_order() -> None:
    center = NotificationCenter()
    received: list[str] = []
    center.subscribe(lambda n: received.append(f"a:{n.message}"))
    center.subscribe(lambda n: received.append(f"b:{n.message}"))

    notification = center.publish("Saved", NotificationLevel.SUCCESS, seq=3)

    assert received == ["a:Saved", "b:Saved"]
    assert notification.context == {"seq": 3}
    assert notification.level is NotificationLevel.SUCCESS


def test_failing_subscriber_is_skipped() -> None:
    center = NotificationCenter()
    received: list[Notification] = []

    def broken(notification: Notification) -> None:
        raise RuntimeError("boom")

    center.subscribe(broken)
    center.subscribe(received.append)

    center.publish("Still delivered")

    assert len(received) == 1


def test_unsubscribe() -> None:
    center = NotificationCenter()
    received: list[Notification] = []
    center.subscribe(received.append)
    center.unsubscribe(received.append)
    center.unsubscribe(received.append)

    center.publish("Nobody listening")

    assert received == []


def test_history_is_bounded_and_searchable() -> None:
    center = NotificationCenter(history_size=3)
    for i in range(5):
        center.publish(f"m{i}", NotificationLevel.WARNING if i == 2 else NotificationLevel.INFO)

    assert [n.message for n in center.history] == ["m2", "m3", "m4"]
    latest_warning = center.latest(NotificationLevel.WARNING)
    assert latest_warning is not None
    assert latest_warning.message == "m2"
    assert center.latest(NotificationLevel.ERROR) is None
    latest = center.latest()
    assert latest is not None
    assert latest.message == "m4"
