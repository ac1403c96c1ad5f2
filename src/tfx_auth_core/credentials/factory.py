"""Credential variant dispatch.

This module maps an authentication kind, or a raw discriminator string, to a
fresh unpopulated credential of the matching variant.
"""

from typing import assert_never

from .base import AuthKind, Credentials, parse_auth_kind
from .basic import BasicCredentials
from .token import TokenCredentials


def create_credentials(kind: AuthKind | str) -> Credentials:
    """Create an empty credential for the given kind.

    Args:
        kind: An AuthKind, or a discriminator string such as "basic" or "pat".

    Returns:
        A new, unpopulated credential instance.

    Raises:
        UnsupportedAuthTypeError: If a string discriminator matches no variant.
    """
    if isinstance(kind, str):
        kind = parse_auth_kind(kind)

    match kind:
        case AuthKind.TOKEN:
            return TokenCredentials()
        case AuthKind.BASIC:
            return BasicCredentials()
        case _:
            assert_never(kind)
