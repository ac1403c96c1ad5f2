"""Credential stores holding serialized credentials by URL and scope."""

from .aws import AWSSecretsCredentialStore
from .base import CredentialStore
from .environment import EnvironmentCredentialStore
from .factory import CREDENTIAL_STORE_TYPES, create_credential_store
from .kv import KeyValueCredentialStore

__all__ = [
    "CREDENTIAL_STORE_TYPES",
    "AWSSecretsCredentialStore",
    "CredentialStore",
    "EnvironmentCredentialStore",
    "KeyValueCredentialStore",
    "create_credential_store",
]
