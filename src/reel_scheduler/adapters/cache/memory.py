"""In-memory local cache for tests."""

import json
from typing import Any

from reel_scheduler.adapters.cache.base import CacheCorruptError, LocalCache


class MemoryCache(LocalCache):
    """Holds the slot as serialized JSON text, like a browser key/value store."""

    def __init__(self, raw: str | None = None) -> None:
        self.raw = raw
        self.fail_writes = False
        self.write_calls = 0

    def read(self) -> dict[str, Any] | None:
        if self.raw is None:
            return None
        try:
            data = json.loads(self.raw)
        except json.JSONDecodeError as e:
            raise CacheCorruptError(f"Unparsable cache slot: {e}") from e
        if not isinstance(data, dict):
            raise CacheCorruptError("Cache slot does not hold an object")
        return data

    def write(self, record: dict[str, Any]) -> None:
        self.write_calls += 1
        if self.fail_writes:
            raise OSError("Quota exceeded")
        self.raw = json.dumps(record)

    def clear(self) -> None:
        self.raw = None
