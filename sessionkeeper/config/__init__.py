"""
Config Module - Black Box Interface

Purpose: Session and storage configuration
Interface: SessionOptions, StorageConfig, EnvConfigProvider
Hidden: Environment parsing

Can be replaced with any provider satisfying the ConfigProvider protocol.
"""

from .provider import ConfigProvider, EnvConfigProvider, SessionOptions, StorageConfig

__all__ = ["ConfigProvider", "EnvConfigProvider", "SessionOptions", "StorageConfig"]
