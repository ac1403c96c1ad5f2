"""Base key-value store interface.

This module defines the KeyValueStore protocol used to persist serialized
credentials, and a base class with the prefix and TTL handling that concrete
stores share.
"""

from datetime import timedelta
from typing import Protocol, Self, cast

from .helper import get_prefixed_key, normalize_ttl


class KeyValueStore(Protocol):
    """Protocol for string key-value store implementations."""

    async def put(
        self,
        key: str,
        value: str,
        ttl: int | timedelta | None = None,
        prefix: str | None = None,
    ) -> None:
        """Store a value with the given key.

        Args:
            key: The key to store the value under
            value: The value to store
            ttl: Time-to-live in seconds or as timedelta. If None, uses default_ttl
            prefix: Optional key prefix. If None, uses the store's default prefix
        """
        ...

    async def get(
        self, key: str, default: str | None = None, prefix: str | None = None
    ) -> str | None:
        """Retrieve a value by key, or default if missing or expired."""
        ...

    async def delete(self, key: str, prefix: str | None = None) -> bool:
        """Delete a key. Returns True if it existed."""
        ...

    async def exists(self, key: str, prefix: str | None = None) -> bool:
        """Check if a key exists and has not expired."""
        ...

    async def close(self) -> None:
        """Close the store and release any resources."""
        ...

    async def __aenter__(self) -> Self:
        """Async context manager entry."""
        ...

    async def __aexit__(
        self, exc_type: object, exc_val: object, exc_tb: object
    ) -> None:
        """Async context manager exit."""
        ...


class BaseKeyValueStore:
    """Common configuration and helpers for key-value store implementations."""

    def __init__(self, **kwargs: object) -> None:
        """Initialize the store with common configuration.

        Args:
            **kwargs: ``default_ttl`` (seconds) and ``key_prefix``.
        """
        self._default_ttl: int | None = cast("int | None", kwargs.get("default_ttl"))
        self._key_prefix: str = cast("str", kwargs.get("key_prefix", "")) or ""

    def _get_prefixed_key(self, key: str, prefix: str | None = None) -> str:
        """Get the key with prefix applied."""
        effective_prefix = prefix if prefix is not None else self._key_prefix
        return get_prefixed_key(key, effective_prefix)

    def _normalize_ttl(self, ttl: int | timedelta | None) -> int | None:
        """Normalize TTL to seconds."""
        return normalize_ttl(ttl, self._default_ttl)

    async def close(self) -> None:
        """Close the store and release any resources."""

    async def __aenter__(self) -> Self:
        """Async context manager entry."""
        return self

    async def __aexit__(
        self, exc_type: object, exc_val: object, exc_tb: object
    ) -> None:
        """Async context manager exit."""
        await self.close()
