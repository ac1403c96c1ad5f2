"""Credential resolution for the tfx command-line client.

Example usage::

    from tfx_auth_core import ConsolePrompter, create_credential_store, resolve_credentials

    store = create_credential_store("file")
    credentials = await resolve_credentials(
        "https://dev.azure.com/org", "pat", store=store, prompter=ConsolePrompter()
    )
"""

from tfx_auth_core.config import ResolverConfig, load_resolver_config
from tfx_auth_core.credentials import (
    AuthKind,
    BasicCredentials,
    Credentials,
    TokenCredentials,
    create_credentials,
)
from tfx_auth_core.exceptions import (
    CredentialStateError,
    CredentialStoreError,
    MalformedCredentialStringError,
    PromptFailureError,
    TfxAuthError,
    UnknownStoreTypeError,
    UnsupportedAuthTypeError,
)
from tfx_auth_core.prompting import ConsolePrompter, InputPrompter, PromptField
from tfx_auth_core.resolver import get_cached_credentials, resolve_credentials
from tfx_auth_core.store import CredentialStore, create_credential_store

__version__ = "0.1.0"

__all__ = [
    "AuthKind",
    "BasicCredentials",
    "ConsolePrompter",
    "CredentialStateError",
    "CredentialStore",
    "CredentialStoreError",
    "Credentials",
    "InputPrompter",
    "MalformedCredentialStringError",
    "PromptFailureError",
    "PromptField",
    "ResolverConfig",
    "TfxAuthError",
    "TokenCredentials",
    "UnknownStoreTypeError",
    "UnsupportedAuthTypeError",
    "__version__",
    "create_credential_store",
    "create_credentials",
    "get_cached_credentials",
    "load_resolver_config",
    "resolve_credentials",
]
