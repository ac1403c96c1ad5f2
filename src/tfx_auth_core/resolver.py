"""Credential resolution for a target URL.

This module looks up cached credentials in a credential store and falls back
to prompting the user when nothing usable is cached. It never writes to the
store; persisting a freshly prompted credential is up to the caller.
"""

import structlog

from tfx_auth_core.config import load_resolver_config
from tfx_auth_core.credentials import (
    DELIMITER,
    AuthKind,
    Credentials,
    create_credentials,
    parse_auth_kind,
)
from tfx_auth_core.exceptions import MalformedCredentialStringError
from tfx_auth_core.prompting import InputPrompter
from tfx_auth_core.store import CredentialStore

# Get logger for this module
logger = structlog.get_logger(__name__)


async def get_cached_credentials(
    url: str,
    store: CredentialStore,
    scope: str | None = None,
    bypass_cache: bool | None = None,  # noqa: FBT001
) -> str:
    """Get the serialized credential cached for a URL.

    Store failures are logged and reported as an empty result, so a broken
    store degrades to prompting instead of failing the resolution.

    Args:
        url: Target URL the credential is for.
        store: Credential store to query.
        scope: Account scope. If None, uses the configured account scope.
        bypass_cache: Skip the store entirely. If None, uses TFS_BYPASS_CACHE.

    Returns:
        The cached serialized credential, or "" when there is none.
    """
    if scope is None or bypass_cache is None:
        config = load_resolver_config()
        scope = config.account_scope if scope is None else scope
        bypass_cache = config.bypass_cache if bypass_cache is None else bypass_cache

    if bypass_cache:
        logger.info("CREDENTIAL_CACHE_BYPASSED", url=url)
        return ""

    try:
        cached = await store.get_credential(url, scope)
    except Exception as e:
        logger.warning(
            "CREDENTIAL_CACHE_LOOKUP_FAILED",
            url=url,
            scope=scope,
            error=str(e),
            error_type=type(e).__name__,
        )
        return ""

    return cached or ""


async def resolve_credentials(
    url: str,
    auth_type: AuthKind | str,
    *,
    store: CredentialStore,
    prompter: InputPrompter,
    scope: str | None = None,
    bypass_cache: bool | None = None,
) -> Credentials:
    """Resolve populated credentials for a URL.

    The kind recorded in a cached credential takes precedence over the
    requested auth_type. A cached credential is returned without prompting;
    otherwise the user is prompted exactly once.

    Args:
        url: Target URL the credential is for.
        auth_type: Requested kind ("pat", "token", "basic" or an AuthKind),
            used when nothing is cached.
        store: Credential store to look the URL up in.
        prompter: Input prompter used when nothing usable is cached.
        scope: Account scope. If None, uses the configured account scope.
        bypass_cache: Skip the store entirely. If None, uses TFS_BYPASS_CACHE.

    Returns:
        Populated credentials.

    Raises:
        UnsupportedAuthTypeError: If the effective kind matches no variant.
        PromptFailureError: If the user could not be prompted.
    """
    cached = await get_cached_credentials(
        url, store, scope=scope, bypass_cache=bypass_cache
    )

    # An empty discriminator in the cache falls back to the requested type
    discriminator = cached.split(DELIMITER, 1)[0] if cached else ""
    if discriminator:
        kind = parse_auth_kind(discriminator)
    elif isinstance(auth_type, AuthKind):
        kind = auth_type
    else:
        kind = parse_auth_kind(auth_type)

    credentials = create_credentials(kind)

    if cached:
        try:
            credentials.from_string(cached)
        except MalformedCredentialStringError as e:
            logger.warning(
                "CACHED_CREDENTIALS_MALFORMED", url=url, kind=kind.value, error=str(e)
            )
            credentials = create_credentials(kind)
        else:
            logger.info("CACHED_CREDENTIALS_FOUND", url=url, kind=kind.value)
            return credentials

    logger.info("PROMPTING_FOR_CREDENTIALS", url=url, kind=kind.value)
    return await credentials.prompt_credentials(prompter)
