"""
Session Manager Factory following Black Box Design principles.

This factory:
- Reads session and storage configuration from a provider
- Wires the Redis client and error callback together
- Returns only the SessionManager facade
"""

import logging
from typing import Any, Optional

from ...config.provider import ConfigProvider, SessionOptions
from ..storage import StorageModule
from .reporting import ErrorCallback
from .session import SessionManager

logger = logging.getLogger(__name__)


async def _propagate_all(error: BaseException) -> bool:
    return False


class SessionManagerFactory:
    """Composition root for session managers."""

    @staticmethod
    async def build(
        config_provider: ConfigProvider,
        on_error: ErrorCallback,
        redis_client: Optional[Any] = None,
    ) -> SessionManager:
        """
        Build a session manager.

        Args:
            config_provider: Configuration provider
            on_error: Host error callback
            redis_client: Existing client to share; created from the
                provider's storage config when omitted

        Returns:
            SessionManager

        Raises:
            SessionConfigError: If the configured TTLs are out of bounds
        """
        options = config_provider.get_session_options()

        if redis_client is None:
            storage = StorageModule.from_config(config_provider.get_storage_config())
            redis_client = await storage.connect()

        logger.info(
            f"Building session manager (max_ttl={options.session_max_ttl}s, "
            f"inactive_ttl={options.session_inactive_ttl}s, "
            f"refresh={options.session_refresh_ttl})"
        )
        return SessionManager(redis_client, options, on_error)

    @staticmethod
    def build_for_testing(
        redis_client: Any,
        options: Optional[SessionOptions] = None,
        on_error: Optional[ErrorCallback] = None,
    ) -> SessionManager:
        """
        Build a session manager around a mock client.

        Defaults to a one hour ceiling, fifteen minute idle window and a
        callback that never suppresses errors.
        """
        options = options or SessionOptions(
            session_max_ttl=3600, session_inactive_ttl=900, session_refresh_ttl=True
        )
        return SessionManager(redis_client, options, on_error or _propagate_all)
