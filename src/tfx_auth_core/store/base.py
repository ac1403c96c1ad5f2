"""Base credential store interface.

This module defines the CredentialStore protocol. A store keeps serialized
credentials as opaque strings keyed by target URL and account scope; only the
credential model interprets them.
"""

from typing import Protocol


class CredentialStore(Protocol):
    """Interface for credential stores."""

    async def get_credential(self, key: str, scope: str) -> str | None:
        """Get the serialized credential stored for a key.

        Args:
            key: The lookup key, normally the target URL.
            scope: The account namespace (e.g., "allusers").

        Returns:
            The stored string, or None when nothing is stored.

        Raises:
            CredentialStoreError: When the backend cannot be read.
        """
        ...

    async def store_credential(self, key: str, scope: str, credential: str) -> None:
        """Store a serialized credential, replacing any previous value."""
        ...

    async def clear_credential(self, key: str, scope: str) -> bool:
        """Remove a stored credential. Returns True if one was removed."""
        ...

    async def close(self) -> None:
        """Release any resources held by the store."""
        ...
