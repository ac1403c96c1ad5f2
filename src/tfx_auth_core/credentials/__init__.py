"""Credential variants and their serialized form."""

from .base import DELIMITER, AuthKind, Credentials, parse_auth_kind
from .basic import BasicCredentials
from .factory import create_credentials
from .token import TokenCredentials

__all__ = [
    "DELIMITER",
    "AuthKind",
    "BasicCredentials",
    "Credentials",
    "TokenCredentials",
    "create_credentials",
    "parse_auth_kind",
]
