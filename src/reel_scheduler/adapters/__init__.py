"""Adapters for external services."""

from reel_scheduler.adapters.cache.base import LocalCache
from reel_scheduler.adapters.remote.base import RemoteStore

__all__ = [
    "LocalCache",
    "RemoteStore",
]
