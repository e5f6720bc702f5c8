"""Pure query functions over a snapshot of tracked items.

Nothing here mutates its input. Dates are ISO ``YYYY-MM-DD`` strings and are
compared lexicographically, which matches chronological order for that
format. "today" is supplied by the caller, computed once per query.
"""

import calendar
from collections.abc import Callable, Iterable
from datetime import date, timedelta

from reel_scheduler.domain.enums import FilterName, Platform, ProductionStatus, UploadStatus
from reel_scheduler.domain.models import CalendarEvent, Reminder, Reminders, Stats, TrackedItem

CALENDAR_LABEL_LENGTH = 10

Predicate = Callable[[TrackedItem, str], bool]


def _scheduled_dates(item: TrackedItem) -> list[str]:
    """Set dates of the platforms whose upload is Scheduled."""
    return [
        item.date_for(platform)
        for platform in Platform
        if item.status_for(platform) == UploadStatus.SCHEDULED and item.date_for(platform)
    ]


def _is_upload_today(item: TrackedItem, today: str) -> bool:
    return any(d == today for d in _scheduled_dates(item))


def _is_overdue(item: TrackedItem, today: str) -> bool:
    return any(d < today for d in _scheduled_dates(item))


def _is_scheduled_upcoming(item: TrackedItem, today: str) -> bool:
    return any(d >= today for d in _scheduled_dates(item))


PREDICATES: dict[FilterName, Predicate] = {
    FilterName.ALL: lambda item, today: True,
    FilterName.SHOOT_PENDING: lambda item, today: item.shoot == ProductionStatus.PENDING,
    FilterName.EDIT_PENDING: lambda item, today: (
        item.shoot == ProductionStatus.DONE and item.edit == ProductionStatus.PENDING
    ),
    FilterName.UPLOAD_TODAY: _is_upload_today,
    FilterName.OVERDUE: _is_overdue,
    FilterName.SCHEDULED: _is_scheduled_upcoming,
    FilterName.IG_UPLOADED: lambda item, today: item.ig_upload == UploadStatus.UPLOADED,
    FilterName.YT_UPLOADED: lambda item, today: item.yt_upload == UploadStatus.UPLOADED,
    FilterName.NOT_UPLOADED: lambda item, today: (
        item.ig_upload == UploadStatus.NOT or item.yt_upload == UploadStatus.NOT
    ),
}


def _today_str(today: date | None) -> str:
    return (today or date.today()).isoformat()


def filter_items(
    filter_name: FilterName | str,
    items: Iterable[TrackedItem],
    today: date | None = None,
) -> list[TrackedItem]:
    """Keep the items matching a named predicate.

    Raises:
        ValueError: If the filter name is not recognized
    """
    predicate = PREDICATES[FilterName(filter_name)]
    today_str = _today_str(today)
    return [item for item in items if predicate(item, today_str)]


def search_items(term: str, items: Iterable[TrackedItem]) -> list[TrackedItem]:
    """Case-insensitive substring match on name, content type and notes."""
    needle = term.strip().lower()
    if not needle:
        return list(items)
    return [
        item
        for item in items
        if needle in item.name.lower()
        or needle in str(item.content_type).lower()
        or needle in item.notes.lower()
    ]


def apply_view(
    items: Iterable[TrackedItem],
    search: str = "",
    filter_name: FilterName | str = FilterName.ALL,
    today: date | None = None,
) -> list[TrackedItem]:
    """Search narrows first, then the active filter narrows further."""
    return filter_items(filter_name, search_items(search, items), today)


def stats(items: Iterable[TrackedItem]) -> Stats:
    result = Stats()
    for item in items:
        result.total += 1
        if item.edit == ProductionStatus.DONE:
            result.edited += 1
        if item.ig_upload == UploadStatus.UPLOADED:
            result.ig_uploaded += 1
        if item.yt_upload == UploadStatus.UPLOADED:
            result.yt_uploaded += 1
    return result


def reminders(items: Iterable[TrackedItem], today: date | None = None) -> Reminders:
    """Bucket each platform's scheduled upload into today, tomorrow or overdue.

    Platforms are classified independently, so one item can land in more
    than one bucket. Uploaded and Not statuses never produce reminders.
    """
    today = today or date.today()
    today_str = today.isoformat()
    tomorrow_str = (today + timedelta(days=1)).isoformat()

    result = Reminders()
    for item in items:
        for platform in Platform:
            upload_date = item.date_for(platform)
            if item.status_for(platform) != UploadStatus.SCHEDULED or not upload_date:
                continue

            reminder = Reminder(video=item.name, platform=platform, date=upload_date)
            if upload_date == today_str:
                result.today.append(reminder)
            elif upload_date == tomorrow_str:
                result.tomorrow.append(reminder)
            elif upload_date < today_str:
                result.overdue.append(reminder)
    return result


def _calendar_label(name: str) -> str:
    if len(name) > CALENDAR_LABEL_LENGTH:
        return f"{name[:CALENDAR_LABEL_LENGTH]}..."
    return name


def calendar_events(
    items: Iterable[TrackedItem],
    year: int,
    month: int,
) -> dict[int, list[CalendarEvent]]:
    """Map each day of the month to its Scheduled or Uploaded platform events.

    Every day of the month is present, with an empty list when nothing is
    due. A stray date on a Not-status upload is ignored.
    """
    days_in_month = calendar.monthrange(year, month)[1]
    events: dict[int, list[CalendarEvent]] = {day: [] for day in range(1, days_in_month + 1)}
    prefix = f"{year:04d}-{month:02d}-"

    for item in items:
        for platform in Platform:
            status = UploadStatus(item.status_for(platform))
            upload_date = item.date_for(platform)
            if not status.has_date or not upload_date.startswith(prefix):
                continue
            try:
                day = int(upload_date[len(prefix):])
            except ValueError:
                continue
            if day in events:
                events[day].append(
                    CalendarEvent(
                        item_id=item.id,
                        name=item.name,
                        label=_calendar_label(item.name),
                        platform=platform,
                        status=status,
                    )
                )
    return events


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move a (year, month) pair by ``delta`` months."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def next_id(items: Iterable[TrackedItem]) -> int:
    """1 for an empty collection, else one past the largest id."""
    return max((item.id for item in items), default=0) + 1
