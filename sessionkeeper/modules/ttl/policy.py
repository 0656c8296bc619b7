import time

from ...config.provider import SessionOptions


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


def next_ttl(session_date: int, now: int, options: SessionOptions) -> int:
    """
    Compute how many seconds a session key should keep living.

    Args:
        session_date: Session creation time (epoch milliseconds)
        now: Current time (epoch milliseconds)
        options: Session TTL options

    Returns:
        TTL in whole seconds; 0 once the absolute ceiling is reached

    The idle window only applies while it expires sooner than the absolute
    ceiling, so a session never outlives session_max_ttl from its creation
    no matter how often it is refreshed.
    """
    elapsed = now // 1000 - session_date // 1000
    remaining = options.session_max_ttl - elapsed

    if remaining <= 0:
        return 0

    if options.session_refresh_ttl and options.session_inactive_ttl < remaining:
        return options.session_inactive_ttl

    return remaining
