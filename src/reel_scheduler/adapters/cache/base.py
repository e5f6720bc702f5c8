"""Base interface for the local durable cache."""

from abc import ABC, abstractmethod
from typing import Any


class CacheCorruptError(Exception):
    """Raised when a cache slot exists but cannot be parsed."""

    pass


class LocalCache(ABC):
    """A single well-known slot in a persistent key/value store.

    Implementations:
    - JsonFileCache: One JSON file per slot on disk
    - MemoryCache: Serialized JSON held in memory, for tests
    """

    @abstractmethod
    def read(self) -> dict[str, Any] | None:
        """Return the stored record, or None when the slot is empty.

        Raises:
            CacheCorruptError: If the slot holds unparsable data
        """
        ...

    @abstractmethod
    def write(self, record: dict[str, Any]) -> None:
        """Synchronously replace the stored record.

        Raises:
            OSError: If the underlying storage cannot be written
        """
        ...

    @abstractmethod
    def clear(self) -> None:
        """Remove the stored record."""
        ...
