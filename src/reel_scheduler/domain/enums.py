"""Domain enumerations."""

from enum import StrEnum


class ContentType(StrEnum):
    """Category of a tracked video."""

    DANCE = "Dance"
    VLOG = "Vlog"
    BTS = "BTS"
    MOTIVATION = "Motivation"
    BRAND_COLLAB = "Brand Collab"
    TUTORIAL = "Tutorial"
    MUSIC = "Music"
    OTHER = "Other"

    @classmethod
    def _missing_(cls, value: object) -> "ContentType":
        return cls.OTHER


class ProductionStatus(StrEnum):
    """Status of the shoot and edit stages."""

    DONE = "Done"
    PENDING = "Pending"
    UNKNOWN = "Unknown"  # Unrecognized value, matches no filter

    @classmethod
    def _missing_(cls, value: object) -> "ProductionStatus":
        return cls.UNKNOWN


class UploadStatus(StrEnum):
    """Status of an upload to a single platform."""

    NOT = "Not"
    SCHEDULED = "Scheduled"
    UPLOADED = "Uploaded"
    UNKNOWN = "Unknown"  # Unrecognized value, matches no filter

    @classmethod
    def _missing_(cls, value: object) -> "UploadStatus":
        return cls.UNKNOWN

    @property
    def has_date(self) -> bool:
        """Whether a paired upload date is meaningful for this status."""
        return self in (UploadStatus.SCHEDULED, UploadStatus.UPLOADED)


class Platform(StrEnum):
    """Publishing platforms tracked per video."""

    INSTAGRAM = "instagram"
    YOUTUBE = "youtube"

    @property
    def label(self) -> str:
        return "Instagram" if self is Platform.INSTAGRAM else "YouTube"

    @property
    def short(self) -> str:
        """Short code used as the wire-field prefix (ig / yt)."""
        return "ig" if self is Platform.INSTAGRAM else "yt"


class LinkState(StrEnum):
    """Reachability of the remote store."""

    ONLINE = "online"
    OFFLINE = "offline"


class FilterName(StrEnum):
    """Named list filters. Exactly one is active at a time."""

    ALL = "all"
    SHOOT_PENDING = "shoot-pending"
    EDIT_PENDING = "edit-pending"
    UPLOAD_TODAY = "upload-today"
    OVERDUE = "overdue"
    SCHEDULED = "scheduled"
    IG_UPLOADED = "ig-uploaded"
    YT_UPLOADED = "yt-uploaded"
    NOT_UPLOADED = "not-uploaded"

    @classmethod
    def _missing_(cls, value: object) -> "FilterName | None":
        # Long name for the upcoming-scheduled filter
        if value == "scheduled-upcoming":
            return cls.SCHEDULED
        return None
