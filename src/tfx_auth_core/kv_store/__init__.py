"""Key-value store implementations and interfaces.

This module provides the string key-value stores that back the credential
cache: in-memory, JSON file and Redis.
"""

from .base import BaseKeyValueStore, KeyValueStore
from .factory import KV_STORE_TYPES, create_kv_store
from .file import DEFAULT_STORE_PATH, FileKeyValueStore
from .memory import InMemoryKeyValueStore
from .redis_store import RedisConnectionError, RedisKeyValueStore

__all__ = [
    "DEFAULT_STORE_PATH",
    "KV_STORE_TYPES",
    "BaseKeyValueStore",
    "FileKeyValueStore",
    "InMemoryKeyValueStore",
    "KeyValueStore",
    "RedisConnectionError",
    "RedisKeyValueStore",
    "create_kv_store",
]
