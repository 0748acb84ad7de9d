"""Pytest configuration and shared fixtures."""

import pytest

from movie_ticket.config import DEBUG_LOG_ENV
from movie_ticket.registry import BookingRegistry, install_registry, reset_registry


class RecordingListener:
    def __init__(self, name: str = "listener", calls: list | None = None) -> None:
        self.name = name
        self.calls = calls if calls is not None else []

    def receive(self, snapshot_details: str) -> None:
        self.calls.append((self.name, snapshot_details))


@pytest.fixture(autouse=True)
def debug_log_file(tmp_path, monkeypatch):
    path = tmp_path / "debug.log"
    monkeypatch.setenv(DEBUG_LOG_ENV, str(path))
    return path


@pytest.fixture(autouse=True)
def fresh_registry():
    reset_registry()
    yield
    reset_registry()


@pytest.fixture
def make_listener():
    """Build recording listeners that can share one call log."""
    return RecordingListener


@pytest.fixture
def presented() -> list[str]:
    return []


@pytest.fixture
def registry(presented) -> BookingRegistry:
    registry = BookingRegistry(presenter=presented.append)
    install_registry(registry)
    return registry
