"""Key-value store utility functions.

This module provides key prefixing and TTL normalization shared by the
key-value store implementations.
"""

import time
from datetime import timedelta


def get_prefixed_key(key: str, prefix: str | None = None) -> str:
    """Get the key with prefix applied.

    Args:
        key: The base key
        prefix: Optional prefix to prepend to the key

    Returns:
        The key with prefix applied
    """
    if prefix:
        if not prefix.endswith(":"):
            prefix = f"{prefix}:"
        return f"{prefix}{key}"
    return key


def normalize_ttl(
    ttl: int | timedelta | None, default_ttl: int | None = None
) -> int | None:
    """Normalize TTL to seconds.

    Args:
        ttl: The TTL value to normalize
        default_ttl: Default TTL to use if ttl is None

    Returns:
        TTL in seconds, or None if the entry never expires
    """
    if ttl is None:
        return default_ttl
    if isinstance(ttl, timedelta):
        return int(ttl.total_seconds())
    return ttl


def expiry_time(ttl_seconds: int | None) -> float | None:
    """Absolute expiry timestamp for a TTL, or None for no expiry."""
    if ttl_seconds is None:
        return None
    return time.time() + ttl_seconds


def is_expired(expires_at: float | None) -> bool:
    """Whether an absolute expiry timestamp has passed."""
    return expires_at is not None and time.time() > expires_at
