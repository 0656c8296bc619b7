"""
Storage Module - Black Box Interface

Purpose: Own the Redis connection used by session managers
Interface: connect(), disconnect()
Hidden: Client construction, connection options

Connection options are passed through to redis untouched; timeouts and
retries are the client's concern.
"""

import logging
from typing import Any, Optional

import redis.asyncio as redis

from ...config.provider import StorageConfig

logger = logging.getLogger(__name__)

DEFAULT_REDIS_URL = "redis://localhost:6379/0"


class StorageModule:
    """Black box storage abstraction."""

    def __init__(self, connection_url: Optional[str] = None, **connection_options: Any):
        """Initialize storage with connection URL and pass-through options."""
        self.url = connection_url or DEFAULT_REDIS_URL
        self.connection_options = connection_options
        self._client: Optional[redis.Redis] = None

    @classmethod
    def from_config(cls, config: StorageConfig) -> "StorageModule":
        options = dict(config.options)
        if config.password:
            options["password"] = config.password
        return cls(config.url, **options)

    async def connect(self) -> redis.Redis:
        """Get storage connection, creating it on first use."""
        if not self._client:
            self._client = redis.from_url(
                self.url, decode_responses=True, **self.connection_options
            )
            logger.info("Redis client created for session storage")
        return self._client

    async def disconnect(self):
        """Close storage connection."""
        if self._client:
            await self._client.aclose()
            self._client = None


__all__ = ["StorageModule", "DEFAULT_REDIS_URL"]
