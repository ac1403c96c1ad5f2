"""Resolver configuration read from environment variables.

The bypass toggle keeps its historical ``TFS_BYPASS_CACHE`` name so existing
scripts that set it keep working.
"""

import os
from collections.abc import Mapping

import environ

# Name under which credentials of this client are namespaced in a store
DEFAULT_SERVICE_NAME = "tfx"

# Every user of the machine shares one entry per URL
SHARED_ACCOUNT_SCOPE = "allusers"

BYPASS_CACHE_ENV_VAR = "TFS_BYPASS_CACHE"

_DISABLED_VALUES = frozenset({"", "0", "false", "no", "off"})


def _toggle_enabled(value: str | bool) -> bool:  # noqa: FBT001
    """Any non-empty value enables a toggle, except an explicit false."""
    if isinstance(value, bool):
        return value
    return value.strip().lower() not in _DISABLED_VALUES


@environ.config(prefix="TFX")
class ResolverConfig:
    """Configuration for credential resolution."""

    bypass_cache: bool = environ.var(
        default=False,
        name=BYPASS_CACHE_ENV_VAR,
        converter=_toggle_enabled,
        help="Skip cached credentials and always prompt",
    )
    service_name: str = environ.var(
        default=DEFAULT_SERVICE_NAME, help="Service namespace in the credential store"
    )
    account_scope: str = environ.var(
        default=SHARED_ACCOUNT_SCOPE, help="Account scope for stored credentials"
    )


def load_resolver_config(env: Mapping[str, str] | None = None) -> ResolverConfig:
    """Build a ResolverConfig from the given mapping or the process environment.

    Args:
        env: Environment mapping. If None, uses os.environ.

    Returns:
        ResolverConfig populated from the environment.
    """
    return environ.to_config(ResolverConfig, environ=os.environ if env is None else env)
