"""JSON data file backing the reference server."""

import json
import os
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from reel_scheduler.config import settings
from reel_scheduler.domain.seed import SERVER_SEED_VIDEOS
from reel_scheduler.logging import get_logger

logger = get_logger(__name__)


def _now_iso() -> str:
    return datetime.now(UTC).isoformat()


class DataFileRepository:
    """Keeps the whole collection in one JSON document.

    Schema:
    {
      "videos": [ ...TrackedItem wire objects... ],
      "version": "1.0.0",
      "lastUpdated": "<ISO datetime>"
    }
    """

    def __init__(self, path: Path | None = None, version: str | None = None) -> None:
        self.path = Path(path or settings.data_file)
        self.version = version or settings.data_version

    def initialize(self) -> None:
        """Create the data file with sample data if it does not exist."""
        if self.path.exists():
            logger.info("data_file_exists", path=str(self.path))
            return
        self._write(
            {
                "videos": SERVER_SEED_VIDEOS,
                "version": self.version,
                "lastUpdated": _now_iso(),
            }
        )
        logger.info("data_file_created", path=str(self.path), count=len(SERVER_SEED_VIDEOS))

    def read(self) -> dict[str, Any]:
        if not self.path.exists():
            self.initialize()
        with open(self.path, "r", encoding="utf-8") as f:
            return json.load(f)

    def replace(self, videos: list[dict[str, Any]], version: str | None = None) -> dict[str, Any]:
        """Overwrite the collection and stamp ``lastUpdated``."""
        data = {
            "videos": videos,
            "version": version or self.version,
            "lastUpdated": _now_iso(),
        }
        self._write(data)
        return data

    def _write(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        os.replace(tmp_path, self.path)
