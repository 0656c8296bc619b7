"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol


@dataclass(frozen=True)
class SessionOptions:
    """Session TTL behaviour.

    Bounds are enforced by SessionManager at construction, not here.
    """
    session_max_ttl: int
    session_inactive_ttl: int
    session_refresh_ttl: bool = True


@dataclass
class StorageConfig:
    """Redis connection configuration."""
    url: str
    password: Optional[str] = None
    options: Dict[str, Any] = field(default_factory=dict)


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_session_options(self) -> SessionOptions:
        """Get session TTL options."""
        ...

    def get_storage_config(self) -> StorageConfig:
        """Get storage connection configuration."""
        ...


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def get_session_options(self) -> SessionOptions:
        """Get session options from environment variables."""
        return SessionOptions(
            session_max_ttl=int(os.getenv("SESSION_MAX_TTL", "3600")),
            session_inactive_ttl=int(os.getenv("SESSION_INACTIVE_TTL", "900")),
            session_refresh_ttl=_env_bool("SESSION_REFRESH_TTL", "true"),
        )

    def get_storage_config(self) -> StorageConfig:
        """Get storage configuration from environment variables."""
        options: Dict[str, Any] = {}

        # Socket timeout is the store's own timeout policy, passed through untouched
        socket_timeout = os.getenv("REDIS_SOCKET_TIMEOUT")
        if socket_timeout:
            options["socket_timeout"] = float(socket_timeout)

        return StorageConfig(
            url=os.getenv("REDIS_URL", "redis://localhost:6379/0"),
            password=os.getenv("REDIS_PASSWORD") or None,
            options=options,
        )
