"""Credential store factory functions.

This module provides the factory for creating credential store instances
from a store type name, as selected on the command line or in the
environment.
"""

from pathlib import Path

from tfx_auth_core.config import DEFAULT_SERVICE_NAME
from tfx_auth_core.exceptions import UnknownStoreTypeError
from tfx_auth_core.kv_store import KV_STORE_TYPES, create_kv_store

from .aws import AWSSecretsCredentialStore
from .base import CredentialStore
from .environment import DEFAULT_ENV_PREFIX, EnvironmentCredentialStore
from .kv import KeyValueCredentialStore

CREDENTIAL_STORE_TYPES = (*KV_STORE_TYPES, "environment", "aws")


def create_credential_store(
    store_type: str = "file",
    service_name: str = DEFAULT_SERVICE_NAME,
    file_path: str | Path | None = None,
    default_ttl: int | None = None,
    redis_host: str | None = None,
    redis_port: int | None = None,
    redis_db: int | None = None,
    redis_password: str | None = None,
    env_prefix: str | None = None,
    aws_region: str | None = None,
    aws_endpoint_url: str | None = None,
    aws_profile: str | None = None,
) -> CredentialStore:
    """Create a credential store instance.

    Args:
        store_type: One of "memory", "file", "redis", "environment" or "aws".
        service_name: Namespace of this client's entries in the store.
        file_path: JSON document location (when using file).
        default_ttl: Expiry in seconds for stored entries (key-value stores only).
        redis_host: Redis host (when using redis).
        redis_port: Redis port (when using redis).
        redis_db: Redis database number (when using redis).
        redis_password: Redis password (when using redis).
        env_prefix: Variable name prefix (when using environment).
            Defaults to "TFX_CREDENTIAL_".
        aws_region: AWS region for Secrets Manager (when using aws).
        aws_endpoint_url: AWS endpoint URL, e.g. for LocalStack (when using aws).
        aws_profile: AWS profile name (when using aws).

    Returns:
        Configured credential store instance.

    Raises:
        UnknownStoreTypeError: If store_type is not supported.
    """
    store_type = store_type.lower()

    if store_type in KV_STORE_TYPES:
        kv_store = create_kv_store(
            store_type,
            default_ttl=default_ttl,
            file_path=file_path,
            redis_host=redis_host,
            redis_port=redis_port,
            redis_db=redis_db,
            redis_password=redis_password,
        )
        return KeyValueCredentialStore(kv_store, service_name=service_name)

    if store_type == "environment":
        return EnvironmentCredentialStore(prefix=env_prefix or DEFAULT_ENV_PREFIX)

    if store_type == "aws":
        return AWSSecretsCredentialStore(
            region=aws_region,
            endpoint_url=aws_endpoint_url,
            service_name=service_name,
            profile_name=aws_profile,
        )

    raise UnknownStoreTypeError(store_type)
