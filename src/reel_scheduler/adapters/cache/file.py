"""JSON-file backed local cache."""

import json
import os
from pathlib import Path
from typing import Any

from reel_scheduler.adapters.cache.base import CacheCorruptError, LocalCache
from reel_scheduler.config import settings


class JsonFileCache(LocalCache):
    """Stores the slot at ``<cache_dir>/<slot>.json``.

    Writes go to a .tmp file first and are renamed into place so a crash
    mid-write never leaves a truncated slot behind.
    """

    def __init__(self, cache_dir: Path | None = None, slot: str | None = None) -> None:
        self.cache_dir = Path(cache_dir or settings.cache_dir)
        self.slot = slot or settings.cache_slot

    @property
    def path(self) -> Path:
        return self.cache_dir / f"{self.slot}.json"

    def read(self) -> dict[str, Any] | None:
        if not self.path.exists():
            return None
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            raise CacheCorruptError(f"Cannot read cache slot {self.slot!r}: {e}") from e
        if not isinstance(data, dict):
            raise CacheCorruptError(f"Cache slot {self.slot!r} does not hold an object")
        return data

    def write(self, record: dict[str, Any]) -> None:
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(record, f, indent=2, ensure_ascii=False)
        os.replace(tmp_path, self.path)

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
