"""
Sessionkeeper - TTL-governed user sessions in Redis

Architecture:
- Each module is self-contained with clear interfaces
- The Redis client is injected, never module state
- Modules communicate only through their public interfaces

Modules:
- ttl: Session expiry policy (pure)
- api: Session record model
- session: Session lifecycle and error reporting
- storage: Redis connection ownership
"""

from .config import EnvConfigProvider, SessionOptions
from .modules.api import SessionRecord
from .modules.session import SessionManager, SessionManagerFactory
from .modules.ttl import next_ttl

__version__ = "1.0.0"

__all__ = [
    "EnvConfigProvider",
    "SessionOptions",
    "SessionRecord",
    "SessionManager",
    "SessionManagerFactory",
    "next_ttl",
]
