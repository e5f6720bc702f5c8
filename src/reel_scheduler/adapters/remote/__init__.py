"""Remote store adapters."""

from reel_scheduler.adapters.remote.base import (
    RemoteCollection,
    RemoteSaveResult,
    RemoteStore,
    RemoteStoreError,
)
from reel_scheduler.adapters.remote.rest import HttpRemoteStore
from reel_scheduler.adapters.remote.stub import InMemoryRemoteStore

__all__ = [
    "HttpRemoteStore",
    "InMemoryRemoteStore",
    "RemoteCollection",
    "RemoteSaveResult",
    "RemoteStore",
    "RemoteStoreError",
]
