"""Base interface for the remote video store."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from reel_scheduler.domain.models import CollectionSnapshot


class RemoteStoreError(Exception):
    """Raised when the remote store cannot be reached or answers badly."""

    pass


@dataclass
class RemoteCollection:
    """Collection as returned by a remote fetch."""

    videos: list[dict[str, Any]] = field(default_factory=list)
    version: str | None = None
    last_updated: str | None = None


@dataclass
class RemoteSaveResult:
    """Response from a full-replace save."""

    success: bool
    message: str | None = None
    last_updated: str | None = None


class RemoteStore(ABC):
    """Abstract base class for the remote authority.

    Implementations:
    - HttpRemoteStore: REST client for the /api/videos endpoints
    - InMemoryRemoteStore: In-process stub for testing and offline demos
    """

    @abstractmethod
    async def fetch_all(self) -> RemoteCollection:
        """Fetch the whole collection.

        Raises:
            RemoteStoreError: On transport failure or a bad response
        """
        ...

    @abstractmethod
    async def replace_all(self, snapshot: CollectionSnapshot) -> RemoteSaveResult:
        """Replace the entire remote collection with the snapshot.

        Raises:
            RemoteStoreError: On transport failure or a bad response
        """
        ...

    @abstractmethod
    async def health(self) -> bool:
        """Check whether the remote store is reachable.

        May raise on transport failure; callers treat any error as offline.
        """
        ...

    async def aclose(self) -> None:
        """Release any held connections."""
        return None
