"""Pytest configuration and fixtures."""

import os
from collections.abc import Callable, Generator
from datetime import date
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

# Set test environment before importing app modules
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["API_BASE_URL"] = "http://testserver/api"

from reel_scheduler.adapters.cache.memory import MemoryCache  # noqa: E402
from reel_scheduler.adapters.remote.stub import InMemoryRemoteStore  # noqa: E402
from reel_scheduler.domain.models import TrackedItem  # noqa: E402
from reel_scheduler.services.scheduler import ReelScheduler  # noqa: E402

TODAY = date(2026, 3, 10)


@pytest.fixture
def today() -> date:
    """Fixed 'today' for date-based queries."""
    return TODAY


@pytest.fixture
def make_item() -> Callable[..., TrackedItem]:
    """Factory for tracked items with sensible defaults."""

    def _make(id: int = 1, name: str = "Clip", **overrides: Any) -> TrackedItem:
        return TrackedItem(id=id, name=name, **overrides)

    return _make


@pytest.fixture
def remote() -> InMemoryRemoteStore:
    """An online in-memory remote store with no data."""
    return InMemoryRemoteStore()


@pytest.fixture
def cache() -> MemoryCache:
    """An empty in-memory local cache."""
    return MemoryCache()


@pytest.fixture
def scheduler(remote: InMemoryRemoteStore, cache: MemoryCache) -> ReelScheduler:
    """A scheduler wired to stubs with short timers. Not started."""
    return ReelScheduler(
        remote=remote,
        cache=cache,
        probe_timeout=0.2,
        monitor_interval=60,
        autosave_delay=0.05,
    )


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "data.json"


@pytest.fixture
def test_client(data_file: Path) -> Generator[TestClient, None, None]:
    """Create a test client for the reference server backed by a temp file."""
    from reel_scheduler.main import create_app

    with TestClient(create_app(data_file)) as client:
        yield client
