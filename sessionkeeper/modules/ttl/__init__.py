"""
TTL Module - Black Box Interface

Purpose: Decide how long a session key keeps living
Interface: next_ttl(), now_ms()
Hidden: Absolute ceiling vs idle window arbitration

Pure functions, no I/O.
"""

from .policy import next_ttl, now_ms

__all__ = ["next_ttl", "now_ms"]
