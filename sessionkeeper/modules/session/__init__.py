"""
Session Module - Black Box Interface

Purpose: Manage user session lifecycle in Redis
Interface: create_session(), retrieve_session(), update_session(),
           refresh_session_ttl(), get_ttl(), destroy_session(), test_connection()
Hidden: Key layout, TTL arbitration, error reporting envelope

Replaceable with any session backend exposing the same interface.
"""

from .errors import (
    SessionConfigError,
    SessionConnectionError,
    SessionError,
    SessionExpiredError,
    SessionInactiveTTLExceedLimitError,
    SessionInactiveTTLTooShortError,
    SessionInvalidUpdateError,
    SessionMaxTTLExceedLimitError,
    SessionMaxTTLTooShortError,
    SessionNotSetError,
    SessionRefreshFailedError,
)
from .factory import SessionManagerFactory
from .reporting import ErrorReporter, Propagate, Recovered
from .session import SESSION_KEY_PREFIX, TTL_UNAVAILABLE, SessionManager

__all__ = [
    "SessionManager",
    "SessionManagerFactory",
    "SESSION_KEY_PREFIX",
    "TTL_UNAVAILABLE",
    "ErrorReporter",
    "Recovered",
    "Propagate",
    "SessionConfigError",
    "SessionMaxTTLTooShortError",
    "SessionMaxTTLExceedLimitError",
    "SessionInactiveTTLTooShortError",
    "SessionInactiveTTLExceedLimitError",
    "SessionError",
    "SessionConnectionError",
    "SessionNotSetError",
    "SessionInvalidUpdateError",
    "SessionRefreshFailedError",
    "SessionExpiredError",
]
