"""
Shared pytest fixtures for sessionkeeper tests.

This module provides common fixtures including:
- Redis mocks (call-recording and in-memory with expiry)
- A controllable clock in epoch milliseconds
- Error callbacks that record what they were given
"""

import os
import sys
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sessionkeeper.config.provider import SessionOptions


# =============================================================================
# Clock
# =============================================================================

# 2024-01-01T00:00:00Z
EPOCH_MS = 1_704_067_200_000


class FakeClock:
    """Callable clock returning epoch milliseconds, advanced by tests."""

    def __init__(self, start_ms: int = EPOCH_MS):
        self.now_ms = start_ms

    def __call__(self) -> int:
        return self.now_ms

    def advance(self, seconds: float) -> None:
        self.now_ms += int(seconds * 1000)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def options():
    """One hour ceiling, five minute idle window."""
    return SessionOptions(session_max_ttl=3600, session_inactive_ttl=300, session_refresh_ttl=True)


# =============================================================================
# Error callbacks
# =============================================================================

class RecordingCallback:
    """Async error callback returning a fixed answer and recording errors."""

    def __init__(self, handled: bool):
        self.handled = handled
        self.errors: List[BaseException] = []

    async def __call__(self, error: BaseException) -> bool:
        self.errors.append(error)
        return self.handled


@pytest.fixture
def suppressing_callback():
    return RecordingCallback(handled=True)


@pytest.fixture
def propagating_callback():
    return RecordingCallback(handled=False)


# =============================================================================
# Redis Mocking Infrastructure
# =============================================================================

@pytest.fixture
def mock_redis():
    """Create a mock Redis client for async operations."""
    redis = AsyncMock()

    redis.ping = AsyncMock(return_value=True)
    redis.setex = AsyncMock(return_value=True)
    redis.get = AsyncMock(return_value=None)
    redis.delete = AsyncMock(return_value=1)
    redis.exists = AsyncMock(return_value=0)
    redis.expire = AsyncMock(return_value=True)
    redis.ttl = AsyncMock(return_value=-2)

    return redis


class InMemoryRedis:
    """
    Redis double with in-memory data storage and key expiry.

    Expiry follows the shared FakeClock, so advancing the clock makes keys
    disappear the way Redis would.
    """

    def __init__(self, clock: FakeClock):
        self._clock = clock
        self._storage: Dict[str, Any] = {}
        self._expires_at: Dict[str, int] = {}
        self.calls: List[tuple] = []

    def _purge(self, key: str) -> None:
        deadline = self._expires_at.get(key)
        if deadline is not None and self._clock() >= deadline:
            self._storage.pop(key, None)
            self._expires_at.pop(key, None)

    async def ping(self):
        self.calls.append(("ping",))
        return True

    async def setex(self, key: str, ttl: int, value: str):
        self.calls.append(("setex", key, ttl))
        if ttl <= 0:
            raise ValueError("invalid expire time in 'setex' command")
        self._storage[key] = value
        self._expires_at[key] = self._clock() + ttl * 1000
        return True

    async def get(self, key: str) -> Optional[str]:
        self.calls.append(("get", key))
        self._purge(key)
        return self._storage.get(key)

    async def expire(self, key: str, ttl: int) -> bool:
        self.calls.append(("expire", key, ttl))
        self._purge(key)
        if key not in self._storage:
            return False
        self._expires_at[key] = self._clock() + ttl * 1000
        return True

    async def ttl(self, key: str) -> int:
        self.calls.append(("ttl", key))
        self._purge(key)
        if key not in self._storage:
            return -2
        deadline = self._expires_at.get(key)
        if deadline is None:
            return -1
        return (deadline - self._clock()) // 1000

    async def exists(self, *keys: str) -> int:
        self.calls.append(("exists",) + keys)
        for key in keys:
            self._purge(key)
        return sum(1 for key in keys if key in self._storage)

    async def delete(self, *keys: str) -> int:
        self.calls.append(("delete",) + keys)
        count = 0
        for key in keys:
            if key in self._storage:
                del self._storage[key]
                self._expires_at.pop(key, None)
                count += 1
        return count

    def called(self, command: str) -> bool:
        return any(call[0] == command for call in self.calls)


@pytest.fixture
def mock_redis_with_data(clock):
    """
    Redis mock with in-memory data storage for more realistic tests.

    This allows testing code that reads back what it writes.
    """
    return InMemoryRedis(clock)


# =============================================================================
# Test Markers Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: Integration tests requiring a real Redis"
    )
