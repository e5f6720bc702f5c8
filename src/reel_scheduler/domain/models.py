"""Domain models - pure Python classes independent of storage."""

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Any

from reel_scheduler.domain.enums import ContentType, Platform, ProductionStatus, UploadStatus

COPY_SUFFIX = " (Copy)"


def _to_count(value: Any) -> int:
    """Coerce a loosely typed counter to a non-negative int."""
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(number, 0)


def _to_id(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return 0


def is_iso_date(value: str) -> bool:
    """Return True for a strict ``YYYY-MM-DD`` string."""
    if len(value) != 10:
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


@dataclass
class TrackedItem:
    """One tracked video and its production/publishing metadata.

    Dates are ISO ``YYYY-MM-DD`` strings; an empty string means unset.
    """

    id: int
    name: str
    content_type: ContentType = ContentType.OTHER
    shoot: ProductionStatus = ProductionStatus.PENDING
    edit: ProductionStatus = ProductionStatus.PENDING
    ig_upload: UploadStatus = UploadStatus.NOT
    yt_upload: UploadStatus = UploadStatus.NOT
    ig_date: str = ""
    yt_date: str = ""
    views: int = 0
    likes: int = 0
    notes: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TrackedItem":
        """Build an item from its camelCase wire form, filling defaults."""
        return cls(
            id=_to_id(data.get("id")),
            name=str(data.get("name") or ""),
            content_type=ContentType(data.get("contentType") or ContentType.OTHER),
            shoot=ProductionStatus(data.get("shoot") or ProductionStatus.PENDING),
            edit=ProductionStatus(data.get("edit") or ProductionStatus.PENDING),
            ig_upload=UploadStatus(data.get("igUpload") or UploadStatus.NOT),
            yt_upload=UploadStatus(data.get("ytUpload") or UploadStatus.NOT),
            ig_date=str(data.get("igDate") or ""),
            yt_date=str(data.get("ytDate") or ""),
            views=_to_count(data.get("views")),
            likes=_to_count(data.get("likes")),
            notes=str(data.get("notes") or ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "contentType": str(self.content_type),
            "shoot": str(self.shoot),
            "edit": str(self.edit),
            "igUpload": str(self.ig_upload),
            "ytUpload": str(self.yt_upload),
            "igDate": self.ig_date,
            "ytDate": self.yt_date,
            "views": self.views,
            "likes": self.likes,
            "notes": self.notes,
        }

    def validate(self) -> list[str]:
        """Return a list of validation problems (empty when valid)."""
        errors = []
        if not self.name.strip():
            errors.append("Video name is required")
        for platform in Platform:
            value = self.date_for(platform)
            if value and not is_iso_date(value):
                errors.append(f"{platform.label} date must be YYYY-MM-DD, got {value!r}")
        return errors

    def status_for(self, platform: Platform) -> UploadStatus:
        return self.ig_upload if platform is Platform.INSTAGRAM else self.yt_upload

    def date_for(self, platform: Platform) -> str:
        return self.ig_date if platform is Platform.INSTAGRAM else self.yt_date

    def duplicate(self, new_id: int) -> "TrackedItem":
        """Copy production fields; publishing state and metrics start fresh."""
        return replace(
            self,
            id=new_id,
            name=f"{self.name}{COPY_SUFFIX}",
            ig_upload=UploadStatus.NOT,
            yt_upload=UploadStatus.NOT,
            ig_date="",
            yt_date="",
            views=0,
            likes=0,
            notes="",
        )

    @property
    def engagement_rate(self) -> float | None:
        """Likes as a fraction of views."""
        if self.views == 0:
            return None
        return self.likes / self.views


@dataclass
class CollectionSnapshot:
    """The full ordered item set plus version and timestamp.

    This is the atomic unit written to the local cache and the remote store.
    """

    items: list[TrackedItem]
    version: str
    timestamp: datetime

    def to_cache_record(self) -> dict[str, Any]:
        return {
            "videos": [item.to_dict() for item in self.items],
            "version": self.version,
            "lastSaved": self.timestamp.isoformat(),
        }

    def to_remote_payload(self) -> dict[str, Any]:
        return {
            "videos": [item.to_dict() for item in self.items],
            "version": self.version,
        }


@dataclass
class Stats:
    """Aggregate progress counters."""

    total: int = 0
    edited: int = 0
    ig_uploaded: int = 0
    yt_uploaded: int = 0


@dataclass(frozen=True)
class Reminder:
    """A scheduled upload that needs attention."""

    video: str
    platform: Platform
    date: str

    @property
    def platform_label(self) -> str:
        return self.platform.label


@dataclass
class Reminders:
    """Scheduled uploads bucketed relative to today."""

    today: list[Reminder] = field(default_factory=list)
    tomorrow: list[Reminder] = field(default_factory=list)
    overdue: list[Reminder] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.today) + len(self.tomorrow) + len(self.overdue)


@dataclass(frozen=True)
class CalendarEvent:
    """A platform upload shown on a calendar day."""

    item_id: int
    name: str
    label: str
    platform: Platform
    status: UploadStatus

    @property
    def css_class(self) -> str:
        return "uploaded" if self.status is UploadStatus.UPLOADED else "scheduled"

    @property
    def title(self) -> str:
        return f"{self.name} - {self.platform.label} ({self.status})"
