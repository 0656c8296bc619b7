"""
API Module - Black Box Interface

Purpose: Shared data models exposed to callers
Interface: SessionRecord
Hidden: Stored JSON layout
"""

from .models import SessionRecord

__all__ = ["SessionRecord"]
