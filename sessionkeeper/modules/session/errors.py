"""Session error taxonomy.

Configuration errors are raised at construction and never reach the error
callback. SessionError subclasses are semantic failures and always do.
Transport errors from the Redis client are reported unwrapped.
"""


class SessionConfigError(ValueError):
    """Invalid session options."""

    code = "REDIS_SESSION_INVALID_CONFIG"

    def __init__(self, message: str = ""):
        super().__init__(message or self.code)


class SessionMaxTTLTooShortError(SessionConfigError):
    code = "REDIS_SESSION_MAX_TTL_TOO_SHORT"


class SessionMaxTTLExceedLimitError(SessionConfigError):
    code = "REDIS_SESSION_MAX_TTL_EXCEED_LIMIT"


class SessionInactiveTTLTooShortError(SessionConfigError):
    code = "REDIS_SESSION_INACTIVE_TTL_TOO_SHORT"


class SessionInactiveTTLExceedLimitError(SessionConfigError):
    code = "REDIS_SESSION_INACTIVE_TTL_EXCEED_LIMIT"


class SessionError(Exception):
    """Semantic session failure."""

    code = "REDIS_SESSION_ERROR"

    def __init__(self, message: str = "", session_id: str = None):
        super().__init__(message or self.code)
        self.session_id = session_id


class SessionConnectionError(SessionError):
    """Ping answered with something other than the expected reply."""

    code = "REDIS_SESSION_CONNECTION_FAILED"


class SessionNotSetError(SessionError):
    """No value stored for the session (expired, destroyed or never created)."""

    code = "REDIS_SESSION_NOT_SET"


class SessionInvalidUpdateError(SessionError):
    """Update delta touched a protected field."""

    code = "REDIS_SESSION_INVALID_UPDATE_ON_SECURED_FIELDS"


class SessionRefreshFailedError(SessionError):
    """Store reported the key missing while extending its expiry."""

    code = "REDIS_SESSION_REFRESH_TOKEN_FAILED"


class SessionExpiredError(SessionError):
    """Session reached its absolute ceiling; the update was not persisted."""

    code = "REDIS_SESSION_EXPIRED"
