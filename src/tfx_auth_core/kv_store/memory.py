"""In-memory key-value store implementation.

This module provides the InMemoryKeyValueStore class, which keeps entries in
a dictionary for the lifetime of the process. Useful for tests and for
one-shot sessions that should not leave credentials on disk.
"""

import asyncio
from datetime import timedelta

from .base import BaseKeyValueStore
from .helper import expiry_time, is_expired


class InMemoryKeyValueStore(BaseKeyValueStore):
    """In-memory key-value store with lazy TTL expiry."""

    def __init__(self, **kwargs: object) -> None:
        """Initialize the in-memory store."""
        super().__init__(**kwargs)
        self._store: dict[str, str] = {}
        self._expiry_times: dict[str, float] = {}
        self._lock = asyncio.Lock()

    async def put(
        self,
        key: str,
        value: str,
        ttl: int | timedelta | None = None,
        prefix: str | None = None,
    ) -> None:
        """Store a value with the given key."""
        prefixed_key = self._get_prefixed_key(key, prefix)

        async with self._lock:
            self._store[prefixed_key] = value

            expires_at = expiry_time(self._normalize_ttl(ttl))
            if expires_at is not None:
                self._expiry_times[prefixed_key] = expires_at
            else:
                self._expiry_times.pop(prefixed_key, None)

    async def get(
        self, key: str, default: str | None = None, prefix: str | None = None
    ) -> str | None:
        """Retrieve a value by key."""
        prefixed_key = self._get_prefixed_key(key, prefix)

        async with self._lock:
            if not self._is_valid_key(prefixed_key):
                return default
            return self._store[prefixed_key]

    async def delete(self, key: str, prefix: str | None = None) -> bool:
        """Delete a key-value pair."""
        prefixed_key = self._get_prefixed_key(key, prefix)

        async with self._lock:
            self._expiry_times.pop(prefixed_key, None)
            return self._store.pop(prefixed_key, None) is not None

    async def exists(self, key: str, prefix: str | None = None) -> bool:
        """Check if a key exists."""
        prefixed_key = self._get_prefixed_key(key, prefix)

        async with self._lock:
            return self._is_valid_key(prefixed_key)

    async def close(self) -> None:
        """Drop all entries."""
        async with self._lock:
            self._store.clear()
            self._expiry_times.clear()

    def _is_valid_key(self, key: str) -> bool:
        """Check if a key exists and is not expired, evicting it if expired."""
        if key not in self._store:
            return False

        if is_expired(self._expiry_times.get(key)):
            del self._store[key]
            del self._expiry_times[key]
            return False

        return True
