"""Credential store on top of a key-value store.

This module provides the KeyValueCredentialStore class, which namespaces
entries by service name and account scope inside any KeyValueStore.
"""

import structlog

from tfx_auth_core.config import DEFAULT_SERVICE_NAME
from tfx_auth_core.exceptions import CredentialStoreError
from tfx_auth_core.kv_store import KeyValueStore

# Get logger for this module
logger = structlog.get_logger(__name__)


class KeyValueCredentialStore:
    """Credential store keeping entries in a KeyValueStore."""

    def __init__(
        self, kv_store: KeyValueStore, service_name: str = DEFAULT_SERVICE_NAME
    ) -> None:
        """Initialize the store.

        Args:
            kv_store: Backing key-value store.
            service_name: Key prefix separating this client's entries.
        """
        self._kv_store = kv_store
        self.service_name = service_name

    async def get_credential(self, key: str, scope: str) -> str | None:
        """Get the serialized credential for key in scope."""
        try:
            return await self._kv_store.get(
                self._entry_key(key, scope), prefix=self.service_name
            )
        except Exception as e:
            raise CredentialStoreError(
                f"Failed to read credential for '{key}': {e}",
                type(self._kv_store).__name__,
            ) from e

    async def store_credential(self, key: str, scope: str, credential: str) -> None:
        """Store the serialized credential for key in scope."""
        try:
            await self._kv_store.put(
                self._entry_key(key, scope), credential, prefix=self.service_name
            )
        except Exception as e:
            raise CredentialStoreError(
                f"Failed to store credential for '{key}': {e}",
                type(self._kv_store).__name__,
            ) from e
        logger.info("CREDENTIAL_STORED", key=key, scope=scope)

    async def clear_credential(self, key: str, scope: str) -> bool:
        """Remove the credential for key in scope."""
        try:
            removed = await self._kv_store.delete(
                self._entry_key(key, scope), prefix=self.service_name
            )
        except Exception as e:
            raise CredentialStoreError(
                f"Failed to clear credential for '{key}': {e}",
                type(self._kv_store).__name__,
            ) from e
        logger.info("CREDENTIAL_CLEARED", key=key, scope=scope, removed=removed)
        return removed

    async def close(self) -> None:
        """Close the backing key-value store."""
        await self._kv_store.close()

    @staticmethod
    def _entry_key(key: str, scope: str) -> str:
        return f"{scope}:{key}"
