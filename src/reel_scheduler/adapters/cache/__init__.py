"""Local cache adapters."""

from reel_scheduler.adapters.cache.base import CacheCorruptError, LocalCache
from reel_scheduler.adapters.cache.file import JsonFileCache
from reel_scheduler.adapters.cache.memory import MemoryCache

__all__ = [
    "CacheCorruptError",
    "JsonFileCache",
    "LocalCache",
    "MemoryCache",
]
