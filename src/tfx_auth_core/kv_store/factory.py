"""Key-value store factory functions.

This module provides the factory for creating key-value store instances
backed by memory, a JSON file, or Redis.
"""

from pathlib import Path

from tfx_auth_core.exceptions import UnknownStoreTypeError

from .base import KeyValueStore
from .file import FileKeyValueStore
from .memory import InMemoryKeyValueStore
from .redis_store import RedisKeyValueStore

KV_STORE_TYPES = ("memory", "file", "redis")


def create_kv_store(
    store_type: str = "file",
    key_prefix: str | None = None,
    default_ttl: int | None = None,
    file_path: str | Path | None = None,
    redis_host: str | None = None,
    redis_port: int | None = None,
    redis_db: int | None = None,
    redis_password: str | None = None,
) -> KeyValueStore:
    """Create a key-value store instance.

    Args:
        store_type: Store type to use ("memory", "file" or "redis").
        key_prefix: Prefix applied to every key.
        default_ttl: Default TTL in seconds. None keeps entries forever.
        file_path: JSON document location (when using file).
        redis_host: Redis host (when using redis). Defaults to "localhost".
        redis_port: Redis port (when using redis). Defaults to 6379.
        redis_db: Redis database number (when using redis). Defaults to 0.
        redis_password: Redis password (when using redis).

    Returns:
        Configured key-value store instance.

    Raises:
        UnknownStoreTypeError: If store_type is not supported.
    """
    store_type = store_type.lower()
    base_config: dict[str, object] = {"default_ttl": default_ttl}
    if key_prefix:
        base_config["key_prefix"] = key_prefix

    if store_type == "memory":
        return InMemoryKeyValueStore(**base_config)

    if store_type == "file":
        return FileKeyValueStore(path=file_path, **base_config)

    if store_type == "redis":
        redis_config: dict[str, object] = {
            **base_config,
            "host": redis_host or "localhost",
            "port": redis_port or 6379,
            "db": redis_db or 0,
        }
        # Only add password if it's set
        if redis_password:
            redis_config["password"] = redis_password
        return RedisKeyValueStore(**redis_config)

    raise UnknownStoreTypeError(store_type)
