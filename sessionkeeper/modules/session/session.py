import logging
import uuid
from typing import Any, Callable, Mapping

from ...config.provider import SessionOptions
from ..api.models import SessionRecord
from ..ttl import next_ttl, now_ms
from .errors import (
    SessionConnectionError,
    SessionExpiredError,
    SessionInactiveTTLExceedLimitError,
    SessionInactiveTTLTooShortError,
    SessionInvalidUpdateError,
    SessionMaxTTLExceedLimitError,
    SessionMaxTTLTooShortError,
    SessionNotSetError,
    SessionRefreshFailedError,
)
from .reporting import ErrorCallback, ErrorReporter

logger = logging.getLogger(__name__)

SESSION_KEY_PREFIX = "usersession:"

MIN_MAX_TTL = 60
MAX_MAX_TTL = 43200
MIN_INACTIVE_TTL = 60
MAX_INACTIVE_TTL = 1800

# Returned by get_ttl when a store failure is suppressed (same as "no such key")
TTL_UNAVAILABLE = -2


def validate_options(options: SessionOptions) -> None:
    """
    Check session options against their hard bounds.

    Raises:
        SessionConfigError: Subclass naming the violated bound
    """
    if options.session_max_ttl < MIN_MAX_TTL:
        raise SessionMaxTTLTooShortError(
            f"session_max_ttl must be at least {MIN_MAX_TTL}s, got {options.session_max_ttl}"
        )
    if options.session_max_ttl > MAX_MAX_TTL:
        raise SessionMaxTTLExceedLimitError(
            f"session_max_ttl must be at most {MAX_MAX_TTL}s, got {options.session_max_ttl}"
        )
    if options.session_inactive_ttl < MIN_INACTIVE_TTL:
        raise SessionInactiveTTLTooShortError(
            f"session_inactive_ttl must be at least {MIN_INACTIVE_TTL}s, "
            f"got {options.session_inactive_ttl}"
        )
    if options.session_inactive_ttl > MAX_INACTIVE_TTL:
        raise SessionInactiveTTLExceedLimitError(
            f"session_inactive_ttl must be at most {MAX_INACTIVE_TTL}s, "
            f"got {options.session_inactive_ttl}"
        )


class SessionManager:
    """
    Manage user sessions stored in Redis.

    Concurrency: update_session is a read-modify-write with no isolation.
    Two concurrent updates of the same session race and the last writer
    wins, discarding the other writer's delta.
    """

    def __init__(
        self,
        redis_client,
        options: SessionOptions,
        on_error: ErrorCallback,
        clock: Callable[[], int] = now_ms,
    ):
        """
        Initialize session manager.

        Args:
            redis_client: Async Redis client (shared, owned by the caller)
            options: Session TTL options, validated here
            on_error: Callback receiving every recoverable failure; returns
                True to suppress it, False to re-raise it
            clock: Returns current time in epoch milliseconds

        Raises:
            SessionConfigError: If options are out of bounds
        """
        validate_options(options)
        self.redis = redis_client
        self.options = options
        self.clock = clock
        self._reporter = ErrorReporter(on_error)

    @staticmethod
    def session_key(session_id: str) -> str:
        """Redis key holding the session."""
        return f"{SESSION_KEY_PREFIX}{session_id}"

    def next_ttl(self, session_date: int) -> int:
        """TTL for a session created at session_date, as of now."""
        return next_ttl(session_date, self.clock(), self.options)

    async def test_connection(self) -> bool:
        """
        Ping Redis.

        Returns:
            True if the expected reply came back. Failures are reported to
            the callback and yield False whatever the callback answers.
        """
        try:
            reply = await self.redis.ping()
            if not _is_pong(reply):
                raise SessionConnectionError(f"Unexpected ping reply: {reply!r}")
            return True
        except Exception as err:
            await self._reporter.report("test_connection", err, False)
        return False

    async def create_session(self) -> SessionRecord:
        """
        Create and persist a new session.

        Returns:
            The new record. If persisting failed and the callback suppressed
            the error, the record is returned anyway but is not stored.
        """
        record = SessionRecord(session_id=str(uuid.uuid4()), session_date=self.clock())
        try:
            ttl = self.next_ttl(record.session_date)
            await self.redis.setex(self.session_key(record.session_id), ttl, record.to_json())
            logger.debug(f"Created session {record.session_id} with TTL {ttl}s")
        except Exception as err:
            decision = await self._reporter.report("create_session", err, record)
            return decision.unwrap()
        return record

    async def retrieve_session(self, session_id: str) -> SessionRecord:
        """
        Get a session.

        Args:
            session_id: Session identifier

        Returns:
            The stored record, or SessionRecord.empty() if a failure
            (including SessionNotSetError) was suppressed
        """
        try:
            return await self._load(session_id)
        except Exception as err:
            decision = await self._reporter.report("retrieve_session", err, SessionRecord.empty())
            return decision.unwrap()

    async def update_session(self, session_id: str, delta: Mapping[str, Any]) -> bool:
        """
        Merge delta into the session payload and rewrite it.

        The TTL is recomputed from the original sessionDate, which is never
        reset.

        Args:
            session_id: Session identifier
            delta: Fields to set; may not contain sessionId, sessionDate or ttl

        Returns:
            True on success, False if a failure was suppressed
        """
        try:
            touched = SessionRecord.PROTECTED_FIELDS.intersection(delta)
            if touched:
                raise SessionInvalidUpdateError(
                    f"Cannot update protected fields: {', '.join(sorted(touched))}",
                    session_id=session_id,
                )

            current = await self._load(session_id)
            updated = current.merged(delta)
            ttl = self.next_ttl(updated.session_date)
            if ttl <= 0:
                raise SessionExpiredError(
                    f"Session {session_id} reached its maximum lifetime",
                    session_id=session_id,
                )

            await self.redis.setex(self.session_key(session_id), ttl, updated.to_json())
            return True
        except Exception as err:
            decision = await self._reporter.report("update_session", err, False)
            return decision.unwrap()

    async def refresh_session_ttl(self, session_id: str) -> bool:
        """
        Extend the session's expiry without rewriting its value.

        A session past its absolute ceiling is left alone and still counts
        as success.

        Returns:
            True on success, False if a failure was suppressed
        """
        try:
            record = await self._load(session_id)
            ttl = self.next_ttl(record.session_date)
            if ttl > 0:
                extended = await self.redis.expire(self.session_key(session_id), ttl)
                if not extended:
                    raise SessionRefreshFailedError(
                        f"Session {session_id} vanished before refresh",
                        session_id=session_id,
                    )
            return True
        except Exception as err:
            decision = await self._reporter.report("refresh_session_ttl", err, False)
            return decision.unwrap()

    async def get_ttl(self, session_id: str) -> int:
        """
        Seconds left before the session expires.

        Returns:
            Redis TTL semantics: -2 no such key, -1 no expiry. -2 as well if
            a failure was suppressed.
        """
        try:
            return await self.redis.ttl(self.session_key(session_id))
        except Exception as err:
            decision = await self._reporter.report("get_ttl", err, TTL_UNAVAILABLE)
            return decision.unwrap()

    async def destroy_session(self, session_id: str) -> bool:
        """
        Delete a session. Destroying an absent session is not an error.

        Returns:
            True, or False if a store failure was suppressed
        """
        key = self.session_key(session_id)
        try:
            if await self.redis.exists(key):
                await self.redis.delete(key)
                logger.debug(f"Destroyed session {session_id}")
            return True
        except Exception as err:
            decision = await self._reporter.report("destroy_session", err, False)
            return decision.unwrap()

    async def _load(self, session_id: str) -> SessionRecord:
        """Read and decode a session, raising SessionNotSetError when absent."""
        raw = await self.redis.get(self.session_key(session_id))
        if not raw:
            raise SessionNotSetError(f"Session {session_id} is not set", session_id=session_id)
        return SessionRecord.from_json(raw)


def _is_pong(reply: Any) -> bool:
    """redis-py answers True; raw protocol clients answer "PONG"."""
    if reply is True:
        return True
    if isinstance(reply, bytes):
        reply = reply.decode("utf-8", "replace")
    return isinstance(reply, str) and reply.upper() == "PONG"
