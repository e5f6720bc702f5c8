"""Tests for the pure query functions."""

from datetime import date, timedelta

import pytest

from reel_scheduler.domain.enums import (
    ContentType,
    FilterName,
    Platform,
    ProductionStatus,
    UploadStatus,
)
from reel_scheduler.services import queries

DONE = ProductionStatus.DONE
PENDING = ProductionStatus.PENDING
NOT = UploadStatus.NOT
SCHEDULED = UploadStatus.SCHEDULED
UPLOADED = UploadStatus.UPLOADED


def _iso(day: date) -> str:
    return day.isoformat()


class TestFilters:
    """Tests for named filter predicates."""

    def test_shoot_pending_partition(self, make_item, today) -> None:
        pending = make_item(id=1, shoot=PENDING)
        done = make_item(id=2, shoot=DONE)

        assert queries.filter_items("shoot-pending", [pending, done], today) == [pending]

    def test_edit_pending_requires_shoot_done(self, make_item, today) -> None:
        ready = make_item(id=1, shoot=DONE, edit=PENDING)
        not_shot = make_item(id=2, shoot=PENDING, edit=PENDING)
        edited = make_item(id=3, shoot=DONE, edit=DONE)

        result = queries.filter_items(FilterName.EDIT_PENDING, [ready, not_shot, edited], today)

        assert result == [ready]

    def test_upload_today(self, make_item, today) -> None:
        ig_today = make_item(id=1, ig_upload=SCHEDULED, ig_date=_iso(today))
        yt_today = make_item(id=2, yt_upload=SCHEDULED, yt_date=_iso(today))
        uploaded_today = make_item(id=3, ig_upload=UPLOADED, ig_date=_iso(today))
        tomorrow = make_item(id=4, ig_upload=SCHEDULED, ig_date=_iso(today + timedelta(1)))

        result = queries.filter_items(
            "upload-today", [ig_today, yt_today, uploaded_today, tomorrow], today
        )

        assert result == [ig_today, yt_today]

    def test_overdue(self, make_item, today) -> None:
        late = make_item(id=1, yt_upload=SCHEDULED, yt_date=_iso(today - timedelta(1)))
        on_time = make_item(id=2, yt_upload=SCHEDULED, yt_date=_iso(today))
        undated = make_item(id=3, yt_upload=SCHEDULED, yt_date="")

        result = queries.filter_items("overdue", [late, on_time, undated], today)

        assert result == [late]

    def test_scheduled_upcoming(self, make_item, today) -> None:
        past = make_item(id=1, ig_upload=SCHEDULED, ig_date=_iso(today - timedelta(3)))
        now = make_item(id=2, ig_upload=SCHEDULED, ig_date=_iso(today))
        later = make_item(id=3, yt_upload=SCHEDULED, yt_date=_iso(today + timedelta(30)))
        undated = make_item(id=4, ig_upload=SCHEDULED)

        result = queries.filter_items("scheduled", [past, now, later, undated], today)

        assert result == [now, later]

    def test_scheduled_upcoming_long_name(self, make_item, today) -> None:
        past = make_item(id=1, ig_upload=SCHEDULED, ig_date=_iso(today - timedelta(3)))
        later = make_item(id=2, yt_upload=SCHEDULED, yt_date=_iso(today + timedelta(1)))

        result = queries.filter_items("scheduled-upcoming", [past, later], today)

        assert result == [later]
        assert FilterName("scheduled-upcoming") is FilterName.SCHEDULED

    def test_platform_uploaded(self, make_item, today) -> None:
        ig = make_item(id=1, ig_upload=UPLOADED)
        yt = make_item(id=2, yt_upload=UPLOADED)
        both = make_item(id=3, ig_upload=UPLOADED, yt_upload=UPLOADED)
        items = [ig, yt, both]

        assert queries.filter_items("ig-uploaded", items, today) == [ig, both]
        assert queries.filter_items("yt-uploaded", items, today) == [yt, both]

    def test_not_uploaded(self, make_item, today) -> None:
        fresh = make_item(id=1)
        half = make_item(id=2, ig_upload=UPLOADED, yt_upload=NOT)
        complete = make_item(id=3, ig_upload=UPLOADED, yt_upload=SCHEDULED)

        result = queries.filter_items("not-uploaded", [fresh, half, complete], today)

        assert result == [fresh, half]

    def test_all_is_identity(self, make_item, today) -> None:
        items = [make_item(id=i) for i in range(1, 4)]

        assert queries.filter_items("all", items, today) == items

    def test_unknown_status_matches_no_predicate(self, make_item, today) -> None:
        odd = make_item(id=1, shoot=ProductionStatus.UNKNOWN, ig_upload=UploadStatus.UNKNOWN,
                        yt_upload=UploadStatus.UNKNOWN)

        for name in FilterName:
            if name is FilterName.ALL:
                continue
            assert queries.filter_items(name, [odd], today) == []

    def test_unknown_filter_name(self, make_item, today) -> None:
        with pytest.raises(ValueError):
            queries.filter_items("everything", [make_item()], today)


class TestSearch:
    """Tests for search and view composition."""

    def test_search_fields_case_insensitive(self, make_item) -> None:
        by_name = make_item(id=1, name="Sunset DANCE")
        by_type = make_item(id=2, name="Clip", content_type=ContentType.MOTIVATION)
        by_notes = make_item(id=3, name="Other", notes="Shot at the beach")
        miss = make_item(id=4, name="Nope")
        items = [by_name, by_type, by_notes, miss]

        assert queries.search_items("dance", items) == [by_name]
        assert queries.search_items("MOTIV", items) == [by_type]
        assert queries.search_items("beach", items) == [by_notes]

    def test_blank_search_returns_everything(self, make_item) -> None:
        items = [make_item(id=1), make_item(id=2)]

        assert queries.search_items("  ", items) == items

    def test_search_then_filter(self, make_item, today) -> None:
        match_pending = make_item(id=1, name="Tutorial one", shoot=PENDING)
        match_done = make_item(id=2, name="Tutorial two", shoot=DONE)
        other_pending = make_item(id=3, name="Vlog", shoot=PENDING)

        result = queries.apply_view(
            [match_pending, match_done, other_pending], "tutorial", "shoot-pending", today
        )

        assert result == [match_pending]


class TestStats:
    """Tests for aggregate counts."""

    def test_counts(self, make_item) -> None:
        items = [
            make_item(id=1, edit=DONE, ig_upload=UPLOADED),
            make_item(id=2, edit=DONE, yt_upload=UPLOADED),
            make_item(id=3, ig_upload=UPLOADED, yt_upload=UPLOADED),
        ]

        result = queries.stats(items)

        assert (result.total, result.edited, result.ig_uploaded, result.yt_uploaded) == (3, 2, 2, 2)

    def test_counts_match_filters(self, make_item, today) -> None:
        items = [
            make_item(id=1, edit=DONE, ig_upload=UPLOADED),
            make_item(id=2, edit=PENDING, yt_upload=UPLOADED),
            make_item(id=3, edit=DONE),
            make_item(id=4, ig_upload=UPLOADED, yt_upload=UPLOADED),
        ]

        result = queries.stats(items)

        assert result.edited == len([i for i in items if i.edit == DONE])
        assert result.ig_uploaded == len(queries.filter_items("ig-uploaded", items, today))
        assert result.yt_uploaded == len(queries.filter_items("yt-uploaded", items, today))

    def test_empty(self) -> None:
        assert queries.stats([]).total == 0


class TestReminders:
    """Tests for date-bucketed reminders."""

    def test_boundaries(self, make_item, today) -> None:
        due_today = make_item(id=1, name="A", ig_upload=SCHEDULED, ig_date=_iso(today))
        due_tomorrow = make_item(
            id=2, name="B", ig_upload=SCHEDULED, ig_date=_iso(today + timedelta(1))
        )
        late = make_item(id=3, name="C", ig_upload=SCHEDULED, ig_date=_iso(today - timedelta(1)))
        uploaded = make_item(id=4, name="D", ig_upload=UPLOADED, ig_date=_iso(today))
        far = make_item(id=5, name="E", ig_upload=SCHEDULED, ig_date=_iso(today + timedelta(5)))

        result = queries.reminders([due_today, due_tomorrow, late, uploaded, far], today)

        assert [r.video for r in result.today] == ["A"]
        assert [r.video for r in result.tomorrow] == ["B"]
        assert [r.video for r in result.overdue] == ["C"]
        assert result.count == 3

    def test_platforms_classified_independently(self, make_item, today) -> None:
        item = make_item(
            id=1,
            name="Split",
            ig_upload=SCHEDULED,
            ig_date=_iso(today),
            yt_upload=SCHEDULED,
            yt_date=_iso(today - timedelta(2)),
        )

        result = queries.reminders([item], today)

        assert result.today[0].platform is Platform.INSTAGRAM
        assert result.today[0].platform_label == "Instagram"
        assert result.overdue[0].platform is Platform.YOUTUBE
        assert result.overdue[0].date == _iso(today - timedelta(2))
        assert result.tomorrow == []

    def test_scheduled_without_date_is_ignored(self, make_item, today) -> None:
        assert queries.reminders([make_item(ig_upload=SCHEDULED)], today).count == 0

    def test_month_rollover(self, make_item) -> None:
        last_day = date(2026, 1, 31)
        item = make_item(ig_upload=SCHEDULED, ig_date="2026-02-01")

        assert len(queries.reminders([item], last_day).tomorrow) == 1


class TestCalendar:
    """Tests for calendar month event maps."""

    def test_events_by_day(self, make_item) -> None:
        items = [
            make_item(id=1, name="Short name", ig_upload=UPLOADED, ig_date="2026-03-05"),
            make_item(
                id=2,
                name="A much longer video name",
                yt_upload=SCHEDULED,
                yt_date="2026-03-05",
                ig_upload=SCHEDULED,
                ig_date="2026-03-20",
            ),
            make_item(id=3, name="Other month", ig_upload=SCHEDULED, ig_date="2026-04-05"),
        ]

        events = queries.calendar_events(items, 2026, 3)

        assert len(events) == 31
        day5 = events[5]
        assert [(e.item_id, e.platform) for e in day5] == [
            (1, Platform.INSTAGRAM),
            (2, Platform.YOUTUBE),
        ]
        assert day5[0].css_class == "uploaded"
        assert day5[1].css_class == "scheduled"
        assert day5[0].label == "Short name"
        assert day5[1].label == "A much lon..."
        assert [e.item_id for e in events[20]] == [2]
        assert sum(len(v) for v in events.values()) == 3

    def test_not_status_excluded_even_with_date(self, make_item) -> None:
        stray = make_item(ig_upload=NOT, ig_date="2026-03-05")

        events = queries.calendar_events([stray], 2026, 3)

        assert events[5] == []

    def test_february_length(self) -> None:
        assert len(queries.calendar_events([], 2028, 2)) == 29
        assert len(queries.calendar_events([], 2026, 2)) == 28

    @pytest.mark.parametrize(
        ("year", "month", "delta", "expected"),
        [
            (2026, 1, -1, (2025, 12)),
            (2026, 12, 1, (2027, 1)),
            (2026, 5, 0, (2026, 5)),
            (2026, 3, 14, (2027, 5)),
        ],
    )
    def test_shift_month(self, year, month, delta, expected) -> None:
        assert queries.shift_month(year, month, delta) == expected


def test_next_id(make_item) -> None:
    assert queries.next_id([]) == 1
    items = [make_item(id=4), make_item(id=2), make_item(id=9)]
    assert queries.next_id(items) == 10
    assert all(queries.next_id(items) > item.id for item in items)
