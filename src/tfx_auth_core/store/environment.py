"""Environment variable credential store.

This module provides the EnvironmentCredentialStore class for reading
serialized credentials from environment variables, useful for CI jobs where
nothing can be prompted for or written.
"""

import os
import re

import structlog

from tfx_auth_core.exceptions import CredentialStoreError

# Get logger for this module
logger = structlog.get_logger(__name__)

DEFAULT_ENV_PREFIX = "TFX_CREDENTIAL_"

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")


class EnvironmentCredentialStore:
    """Read-only credential store backed by environment variables."""

    def __init__(self, prefix: str = DEFAULT_ENV_PREFIX) -> None:
        """Initialize the environment credential store.

        Args:
            prefix: Prefix of the environment variable names.
        """
        self.prefix = prefix

    def variable_name(self, key: str, scope: str) -> str:
        """Environment variable name for a key in a scope.

        The name is {prefix}{SCOPE}_{KEY} with every non-alphanumeric
        character replaced by an underscore, e.g. for scope "allusers" and
        key "https://dev.azure.com/org": TFX_CREDENTIAL_ALLUSERS_HTTPS___DEV_AZURE_COM_ORG
        """
        scope_part = _NON_ALNUM.sub("_", scope).upper()
        key_part = _NON_ALNUM.sub("_", key).upper()
        return f"{self.prefix}{scope_part}_{key_part}"

    async def get_credential(self, key: str, scope: str) -> str | None:
        """Get the serialized credential from the environment."""
        env_var_name = self.variable_name(key, scope)
        value = os.getenv(env_var_name)
        if not value:
            logger.debug("CREDENTIAL_VARIABLE_NOT_SET", key=key, variable=env_var_name)
            return None
        return value

    async def store_credential(self, key: str, scope: str, credential: str) -> None:  # noqa: ARG002
        """Environment variables cannot be written by this process."""
        raise CredentialStoreError(
            f"Environment credential store is read-only; set "
            f"{self.variable_name(key, scope)} instead",
            "environment",
        )

    async def clear_credential(self, key: str, scope: str) -> bool:
        """Environment variables cannot be removed by this process."""
        raise CredentialStoreError(
            f"Environment credential store is read-only; unset "
            f"{self.variable_name(key, scope)} instead",
            "environment",
        )

    async def close(self) -> None:
        """Nothing to release."""
